from unittest.mock import AsyncMock, MagicMock

import pytest

from brokerage.repositories.access_repository import AccessRepository
from brokerage.repositories.base import BaseRepository
from brokerage.repositories.report_repository import ReportRepository


def _session_returning(rows):
    result = MagicMock()
    result.mappings.return_value = rows
    session = AsyncMock()
    session.execute.return_value = result
    return session


class TestOffsetPaging:
    def test_paginate_wraps_query(self):
        sql = BaseRepository._paginate("SELECT 1 AS x;\n")
        assert sql.startswith("SELECT *, COUNT(*) OVER() AS _total_count")
        assert "FROM (SELECT 1 AS x) _page_sub" in sql
        assert sql.endswith("OFFSET :skip LIMIT :limit")

    def test_extract_total_strips_column(self):
        rows = [{"a": 1, "_total_count": 7}, {"a": 2, "_total_count": 7}]
        assert BaseRepository._extract_total(rows) == 7
        assert rows == [{"a": 1}, {"a": 2}]

    def test_extract_total_empty_page(self):
        assert BaseRepository._extract_total([]) == 0

    def test_repositories_share_the_helpers(self):
        assert ReportRepository._execute_offset is BaseRepository._execute_offset
        assert AccessRepository._execute_offset is BaseRepository._execute_offset


class TestAccessRepositoryPaging:
    @pytest.mark.asyncio
    async def test_list_uses_shared_offset_paging(self):
        session = _session_returning(
            [{"manager_id": 1, "employee_id": 2, "_total_count": 3}]
        )

        rows, total = await AccessRepository(session).list_manager_employees(
            manager_id=1, skip=2, limit=1
        )

        assert total == 3
        assert rows == [{"manager_id": 1, "employee_id": 2}]
        statement, params = session.execute.call_args.args
        assert "_page_sub" in str(statement)
        assert params == {"skip": 2, "limit": 1, "manager_id": 1}
