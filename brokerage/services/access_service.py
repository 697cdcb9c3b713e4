from typing import Any, Dict, List, Optional

from brokerage.core.exceptions import EmployeeNotFoundError
from brokerage.repositories.access_repository import AccessRepository


class AccessService:
    """Manager → employee → office lookups over ``manager_employee_view``."""

    def __init__(self, repo: AccessRepository) -> None:
        self._repo = repo

    async def list_manager_employees(
        self,
        *,
        manager_id: Optional[int] = None,
        skip: int = 0,
        limit: int = 50,
    ) -> Dict[str, Any]:
        rows, total = await self._repo.list_manager_employees(
            manager_id=manager_id, skip=skip, limit=limit
        )
        return {"data": rows, "total": total, "skip": skip, "limit": limit}

    async def get_employee_managers(self, employee_id: int) -> List[Dict[str, Any]]:
        """Rows for *employee_id*; raises if the view has none.

        The view inner-joins ``manages`` and ``offices``, so an employee
        without a manager or an office is absent here by construction.
        """
        rows = await self._repo.get_for_employee(employee_id)
        if not rows:
            raise EmployeeNotFoundError(
                f"No manager relationship found for employee {employee_id}"
            )
        return rows
