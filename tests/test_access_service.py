from unittest.mock import AsyncMock

import pytest

from brokerage.core.exceptions import EmployeeNotFoundError
from brokerage.services.access_service import AccessService

_ROW = {
    "manager_id": 1,
    "employee_id": 2,
    "manager_first_name": "Alice",
    "manager_last_name": "Manager",
    "employee_first_name": "Bob",
    "employee_last_name": "Agent",
    "office_address": "100 Main St",
    "office_city": "Springfield",
}


class TestAccessService:
    @pytest.mark.asyncio
    async def test_list_wraps_page(self):
        repo = AsyncMock()
        repo.list_manager_employees.return_value = ([_ROW], 1)

        result = await AccessService(repo).list_manager_employees(
            manager_id=1, skip=0, limit=10
        )

        repo.list_manager_employees.assert_awaited_once_with(
            manager_id=1, skip=0, limit=10
        )
        assert result == {"data": [_ROW], "total": 1, "skip": 0, "limit": 10}

    @pytest.mark.asyncio
    async def test_employee_lookup(self):
        repo = AsyncMock()
        repo.get_for_employee.return_value = [_ROW]

        assert await AccessService(repo).get_employee_managers(2) == [_ROW]

    @pytest.mark.asyncio
    async def test_employee_without_manager_raises(self):
        repo = AsyncMock()
        repo.get_for_employee.return_value = []

        with pytest.raises(EmployeeNotFoundError):
            await AccessService(repo).get_employee_managers(2)
