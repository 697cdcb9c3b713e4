from typing import Any, Dict, List, Optional, Tuple

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

Rows = Tuple[List[Dict[str, Any]], int]


class BaseRepository:
    """Thin base class that holds the database session.

    Every concrete repository receives an ``AsyncSession`` at
    construction time so that multiple repositories can share the same
    unit-of-work within a single request.
    """

    def __init__(self, db: AsyncSession) -> None:
        self._db = db

    async def flush(self) -> None:
        """Flush pending changes without committing."""
        await self._db.flush()

    async def commit(self) -> None:
        """Commit the current transaction."""
        await self._db.commit()

    async def rollback(self) -> None:
        """Roll back the current transaction."""
        await self._db.rollback()

    # --- Raw SQL paging ---

    @staticmethod
    def _paginate(sql: str) -> str:
        """Wrap a raw SQL string for offset pagination with an embedded total.

        Uses the ``COUNT(*) OVER()`` window function so that the total
        row count is computed alongside the paginated data in a **single
        query**.  The window function is evaluated *before*
        ``OFFSET``/``LIMIT``, so every returned row carries the full
        (un-paged) count in the ``_total_count`` column.
        """
        inner = sql.rstrip().rstrip(";")
        return (
            f"SELECT *, COUNT(*) OVER() AS _total_count\n"
            f"FROM ({inner}) _page_sub\n"
            f"OFFSET :skip LIMIT :limit"
        )

    @staticmethod
    def _extract_total(rows: List[Dict[str, Any]]) -> int:
        """Extract and strip the ``_total_count`` column from paginated rows.

        Returns ``0`` when the result set is empty (no data or the
        requested page is past the end).
        """
        if not rows:
            return 0
        total: int = rows[0].get("_total_count", 0)
        for row in rows:
            row.pop("_total_count", None)
        return total

    async def _execute_offset(
        self,
        sql: str,
        *,
        skip: int = 0,
        limit: int = 50,
        extra_params: Optional[Dict[str, Any]] = None,
    ) -> Rows:
        """Execute with offset pagination and return ``(rows, total_count)``."""
        params: Dict[str, Any] = {"skip": skip, "limit": limit}
        if extra_params:
            params.update(extra_params)

        result = await self._db.execute(text(self._paginate(sql)), params)
        rows = [dict(r) for r in result.mappings()]
        total_count = self._extract_total(rows)

        return rows, total_count
