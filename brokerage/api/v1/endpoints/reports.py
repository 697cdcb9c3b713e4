from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query

from brokerage.schemas.reports import PaginatedResponse
from brokerage.services.reports import BrokerageReports
from brokerage.api.deps import get_report_service

router = APIRouter(prefix="/reports", tags=["Reports"])

_AS_OF = Query(None, description="Reporting day (defaults to today)")


# --- Employee performance ---


@router.get("/top-performers", response_model=PaginatedResponse)
async def top_performers(
    as_of: Optional[date] = _AS_OF,
    cutoff: Optional[int] = Query(
        None, ge=1, description="Keep ranks <= cutoff (default from settings)"
    ),
    window_months: Optional[int] = Query(None, ge=1, le=120),
    skip: int = Query(0, ge=0, description="Number of rows to skip"),
    limit: int = Query(50, ge=1, le=500, description="Max rows to return"),
    service: BrokerageReports = Depends(get_report_service),
) -> PaginatedResponse:
    """Top performers by summed performance amount over the trailing window."""
    return await service.get_top_performers(
        as_of=as_of,
        cutoff=cutoff,
        window_months=window_months,
        skip=skip,
        limit=limit,
    )


@router.get("/sales-ranking", response_model=PaginatedResponse)
async def sales_ranking(
    department: str = Query(..., min_length=1, description="Department to rank"),
    skip: int = Query(0, ge=0, description="Number of rows to skip"),
    limit: int = Query(50, ge=1, le=500, description="Max rows to return"),
    service: BrokerageReports = Depends(get_report_service),
) -> PaginatedResponse:
    """Employee sales totals ranked within a department."""
    return await service.get_sales_ranking(department, skip=skip, limit=limit)


@router.get("/underperformers", response_model=PaginatedResponse)
async def underperformers(
    as_of: Optional[date] = _AS_OF,
    window_months: Optional[int] = Query(None, ge=1, le=120),
    min_rating: Optional[int] = Query(None, ge=1, le=5),
    skip: int = Query(0, ge=0, description="Number of rows to skip"),
    limit: int = Query(50, ge=1, le=500, description="Max rows to return"),
    service: BrokerageReports = Depends(get_report_service),
) -> PaginatedResponse:
    """Employees who never reached the minimum rating in the window."""
    return await service.get_underperformers(
        as_of=as_of,
        window_months=window_months,
        min_rating=min_rating,
        skip=skip,
        limit=limit,
    )


# --- Listings & sales ---


@router.get("/days-on-market", response_model=PaginatedResponse)
async def days_on_market(
    include_unsold: bool = Query(
        False, description="Include listings without a transaction (null duration)"
    ),
    skip: int = Query(0, ge=0, description="Number of rows to skip"),
    limit: int = Query(50, ge=1, le=500, description="Max rows to return"),
    service: BrokerageReports = Depends(get_report_service),
) -> PaginatedResponse:
    """Days each property spent on the market before its first transaction."""
    return await service.get_days_on_market(
        include_unsold=include_unsold, skip=skip, limit=limit
    )


@router.get("/rented-vs-sold", response_model=PaginatedResponse)
async def rented_vs_sold(
    skip: int = Query(0, ge=0, description="Number of rows to skip"),
    limit: int = Query(50, ge=1, le=500, description="Max rows to return"),
    service: BrokerageReports = Depends(get_report_service),
) -> PaginatedResponse:
    """Properties rented vs. sold by each agent."""
    return await service.get_rented_vs_sold_by_agent(skip=skip, limit=limit)


@router.get("/quarterly-sales", response_model=PaginatedResponse)
async def quarterly_sales(
    as_of: Optional[date] = _AS_OF,
    skip: int = Query(0, ge=0, description="Number of rows to skip"),
    limit: int = Query(50, ge=1, le=500, description="Max rows to return"),
    service: BrokerageReports = Depends(get_report_service),
) -> PaginatedResponse:
    """Quarterly sales and brokerage fees for the current year."""
    return await service.get_quarterly_sales(as_of=as_of, skip=skip, limit=limit)


# --- Office financials ---


@router.get("/office-payroll", response_model=PaginatedResponse)
async def office_payroll(
    skip: int = Query(0, ge=0, description="Number of rows to skip"),
    limit: int = Query(50, ge=1, le=500, description="Max rows to return"),
    service: BrokerageReports = Depends(get_report_service),
) -> PaginatedResponse:
    """Payroll cost (salary + bonus) per office."""
    return await service.get_office_payroll(skip=skip, limit=limit)


@router.get("/office-financials", response_model=PaginatedResponse)
async def office_financials(
    skip: int = Query(0, ge=0, description="Number of rows to skip"),
    limit: int = Query(50, ge=1, le=500, description="Max rows to return"),
    service: BrokerageReports = Depends(get_report_service),
) -> PaginatedResponse:
    """Revenue, payroll, operating expenses and net profit per office."""
    return await service.get_office_financial_summary(skip=skip, limit=limit)


@router.get("/office-sales-ytd", response_model=PaginatedResponse)
async def office_sales_ytd(
    as_of: Optional[date] = _AS_OF,
    skip: int = Query(0, ge=0, description="Number of rows to skip"),
    limit: int = Query(50, ge=1, le=500, description="Max rows to return"),
    service: BrokerageReports = Depends(get_report_service),
) -> PaginatedResponse:
    """Year-to-date sold transactions per office."""
    return await service.get_office_sales_ytd(as_of=as_of, skip=skip, limit=limit)


# --- Marketing ---


@router.get("/campaign-effectiveness", response_model=PaginatedResponse)
async def campaign_effectiveness(
    skip: int = Query(0, ge=0, description="Number of rows to skip"),
    limit: int = Query(50, ge=1, le=500, description="Max rows to return"),
    service: BrokerageReports = Depends(get_report_service),
) -> PaginatedResponse:
    """Campaign reach and revenue of the promoted properties."""
    return await service.get_campaign_effectiveness(skip=skip, limit=limit)


@router.get("/marketing-spend", response_model=PaginatedResponse)
async def marketing_spend(
    since: Optional[date] = Query(None, description="Start of the reporting range"),
    as_of: Optional[date] = _AS_OF,
    skip: int = Query(0, ge=0, description="Number of rows to skip"),
    limit: int = Query(50, ge=1, le=500, description="Max rows to return"),
    service: BrokerageReports = Depends(get_report_service),
) -> PaginatedResponse:
    """Sales income vs. marketing expenditure."""
    return await service.get_marketing_spend(
        since=since, as_of=as_of, skip=skip, limit=limit
    )


# --- Agents & clients ---


@router.get("/specialization-effectiveness", response_model=PaginatedResponse)
async def specialization_effectiveness(
    skip: int = Query(0, ge=0, description="Number of rows to skip"),
    limit: int = Query(50, ge=1, le=500, description="Max rows to return"),
    service: BrokerageReports = Depends(get_report_service),
) -> PaginatedResponse:
    """Sold transactions and volume per agent specialization."""
    return await service.get_specialization_effectiveness(skip=skip, limit=limit)


@router.get("/client-ratings", response_model=PaginatedResponse)
async def client_ratings(
    skip: int = Query(0, ge=0, description="Number of rows to skip"),
    limit: int = Query(50, ge=1, le=500, description="Max rows to return"),
    service: BrokerageReports = Depends(get_report_service),
) -> PaginatedResponse:
    """Average client rating per employee ('Not Rated' excluded)."""
    return await service.get_client_ratings(skip=skip, limit=limit)


# --- Events ---


@router.get("/upcoming-events", response_model=PaginatedResponse)
async def upcoming_events(
    as_of: Optional[date] = _AS_OF,
    skip: int = Query(0, ge=0, description="Number of rows to skip"),
    limit: int = Query(50, ge=1, le=500, description="Max rows to return"),
    service: BrokerageReports = Depends(get_report_service),
) -> PaginatedResponse:
    """Open houses and viewings from the reporting day onward."""
    return await service.get_upcoming_events(as_of=as_of, skip=skip, limit=limit)
