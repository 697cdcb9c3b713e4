from typing import Any, Dict, List, Optional

from sqlalchemy import text

from brokerage.core.constants import MANAGER_EMPLOYEE_VIEW
from brokerage.repositories.base import BaseRepository, Rows


class AccessRepository(BaseRepository):
    """Read-only access to ``manager_employee_view``."""

    _SQL_MANAGER_EMPLOYEES = f"""
        SELECT *
        FROM {MANAGER_EMPLOYEE_VIEW}
        WHERE (CAST(:manager_id AS INTEGER) IS NULL
               OR manager_id = CAST(:manager_id AS INTEGER))
        ORDER BY manager_id, employee_id
    """

    async def list_manager_employees(
        self,
        *,
        manager_id: Optional[int] = None,
        skip: int = 0,
        limit: int = 50,
    ) -> Rows:
        """Full scan (optionally narrowed to one manager) with offset paging."""
        return await self._execute_offset(
            self._SQL_MANAGER_EMPLOYEES,
            skip=skip,
            limit=limit,
            extra_params={"manager_id": manager_id},
        )

    async def get_for_employee(self, employee_id: int) -> List[Dict[str, Any]]:
        """Point lookup: every manager row for *employee_id* (may be empty)."""
        result = await self._db.execute(
            text(
                f"SELECT * FROM {MANAGER_EMPLOYEE_VIEW} "
                "WHERE employee_id = :eid ORDER BY manager_id"
            ),
            {"eid": employee_id},
        )
        return [dict(r) for r in result.mappings()]
