from datetime import date
from typing import Optional

from brokerage.core.config import settings
from brokerage.core.constants import MAX_RATING, MIN_RATING
from brokerage.core.exceptions import InvalidReportParameterError
from brokerage.repositories.report_repository import ReportRepository
from brokerage.schemas.reports import PaginatedResponse


class BrokerageReports:
    """Service layer for the reporting query set.

    Fills in configured defaults (cutoff, windows, thresholds, reporting
    day), rejects unusable parameters, and wraps repository results in a
    :class:`PaginatedResponse`.  All SQL lives in
    :class:`ReportRepository`.
    """

    def __init__(self, repo: ReportRepository) -> None:
        self._repo = repo

    @staticmethod
    def _wrap(rows, total: int, skip: int, limit: int) -> PaginatedResponse:
        return PaginatedResponse(data=rows, total=total, skip=skip, limit=limit)

    @staticmethod
    def _positive(name: str, value: int) -> int:
        if value < 1:
            raise InvalidReportParameterError(f"{name} must be a positive integer")
        return value

    # --- Employee performance ---

    async def get_top_performers(
        self,
        *,
        as_of: Optional[date] = None,
        cutoff: Optional[int] = None,
        window_months: Optional[int] = None,
        skip: int = 0,
        limit: int = 50,
    ) -> PaginatedResponse:
        """Employees ranked by performance over the trailing window.

        Competition ranking: ties share a rank and the next distinct sum
        skips ahead, so more than *cutoff* rows can come back.
        """
        cutoff = self._positive(
            "cutoff", settings.TOP_PERFORMER_CUTOFF if cutoff is None else cutoff
        )
        window_months = self._positive(
            "window_months",
            settings.PERFORMANCE_WINDOW_MONTHS
            if window_months is None
            else window_months,
        )
        rows, total = await self._repo.top_performers(
            as_of=as_of or date.today(),
            cutoff=cutoff,
            window_months=window_months,
            skip=skip,
            limit=limit,
        )
        return self._wrap(rows, total, skip, limit)

    async def get_sales_ranking(
        self,
        department: str,
        *,
        skip: int = 0,
        limit: int = 50,
    ) -> PaginatedResponse:
        """Sales totals ranked within one department.

        *department* is required; there is no implicit "all departments".
        """
        if department is None or not department.strip():
            raise InvalidReportParameterError("department filter is required")
        rows, total = await self._repo.sales_ranking(
            department=department.strip(), skip=skip, limit=limit
        )
        return self._wrap(rows, total, skip, limit)

    async def get_underperformers(
        self,
        *,
        as_of: Optional[date] = None,
        window_months: Optional[int] = None,
        min_rating: Optional[int] = None,
        skip: int = 0,
        limit: int = 50,
    ) -> PaginatedResponse:
        window_months = self._positive(
            "window_months",
            settings.UNDERPERFORMER_WINDOW_MONTHS
            if window_months is None
            else window_months,
        )
        if min_rating is None:
            min_rating = settings.MIN_ACCEPTABLE_RATING
        if not MIN_RATING <= min_rating <= MAX_RATING:
            raise InvalidReportParameterError(
                f"min_rating must be between {MIN_RATING} and {MAX_RATING}"
            )
        rows, total = await self._repo.underperformers(
            as_of=as_of or date.today(),
            window_months=window_months,
            min_rating=min_rating,
            skip=skip,
            limit=limit,
        )
        return self._wrap(rows, total, skip, limit)

    # --- Listings & sales ---

    async def get_days_on_market(
        self,
        *,
        include_unsold: bool = False,
        skip: int = 0,
        limit: int = 50,
    ) -> PaginatedResponse:
        rows, total = await self._repo.days_on_market(
            include_unsold=include_unsold, skip=skip, limit=limit
        )
        return self._wrap(rows, total, skip, limit)

    async def get_rented_vs_sold_by_agent(
        self, *, skip: int = 0, limit: int = 50
    ) -> PaginatedResponse:
        rows, total = await self._repo.rented_vs_sold_by_agent(skip=skip, limit=limit)
        return self._wrap(rows, total, skip, limit)

    async def get_quarterly_sales(
        self,
        *,
        as_of: Optional[date] = None,
        skip: int = 0,
        limit: int = 50,
    ) -> PaginatedResponse:
        rows, total = await self._repo.quarterly_sales(
            as_of=as_of or date.today(), skip=skip, limit=limit
        )
        return self._wrap(rows, total, skip, limit)

    # --- Office financials ---

    async def get_office_payroll(
        self, *, skip: int = 0, limit: int = 50
    ) -> PaginatedResponse:
        rows, total = await self._repo.office_payroll(skip=skip, limit=limit)
        return self._wrap(rows, total, skip, limit)

    async def get_office_financial_summary(
        self, *, skip: int = 0, limit: int = 50
    ) -> PaginatedResponse:
        rows, total = await self._repo.office_financial_summary(skip=skip, limit=limit)
        return self._wrap(rows, total, skip, limit)

    async def get_office_sales_ytd(
        self,
        *,
        as_of: Optional[date] = None,
        skip: int = 0,
        limit: int = 50,
    ) -> PaginatedResponse:
        rows, total = await self._repo.office_sales_ytd(
            as_of=as_of or date.today(), skip=skip, limit=limit
        )
        return self._wrap(rows, total, skip, limit)

    # --- Marketing ---

    async def get_campaign_effectiveness(
        self, *, skip: int = 0, limit: int = 50
    ) -> PaginatedResponse:
        rows, total = await self._repo.campaign_effectiveness(skip=skip, limit=limit)
        return self._wrap(rows, total, skip, limit)

    async def get_marketing_spend(
        self,
        *,
        since: Optional[date] = None,
        as_of: Optional[date] = None,
        skip: int = 0,
        limit: int = 50,
    ) -> PaginatedResponse:
        since = since or settings.MARKETING_REPORT_START
        as_of = as_of or date.today()
        if since > as_of:
            raise InvalidReportParameterError("since must not be after as_of")
        rows, total = await self._repo.marketing_spend(
            since=since, as_of=as_of, skip=skip, limit=limit
        )
        return self._wrap(rows, total, skip, limit)

    # --- Agents & clients ---

    async def get_specialization_effectiveness(
        self, *, skip: int = 0, limit: int = 50
    ) -> PaginatedResponse:
        rows, total = await self._repo.specialization_effectiveness(
            skip=skip, limit=limit
        )
        return self._wrap(rows, total, skip, limit)

    async def get_client_ratings(
        self, *, skip: int = 0, limit: int = 50
    ) -> PaginatedResponse:
        rows, total = await self._repo.client_ratings(skip=skip, limit=limit)
        return self._wrap(rows, total, skip, limit)

    # --- Events ---

    async def get_upcoming_events(
        self,
        *,
        as_of: Optional[date] = None,
        skip: int = 0,
        limit: int = 50,
    ) -> PaginatedResponse:
        rows, total = await self._repo.upcoming_events(
            as_of=as_of or date.today(), skip=skip, limit=limit
        )
        return self._wrap(rows, total, skip, limit)
