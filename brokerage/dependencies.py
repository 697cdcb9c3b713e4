from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from brokerage.core.database import get_db


# ---------------------------------------------------------------------------
# Repository factory functions (one per repository, each gets the shared db)
# ---------------------------------------------------------------------------


async def get_report_repo(
    db: AsyncSession = Depends(get_db),
):
    from brokerage.repositories.report_repository import ReportRepository

    return ReportRepository(db)


async def get_transaction_repo(
    db: AsyncSession = Depends(get_db),
):
    from brokerage.repositories.transaction_repository import TransactionRepository

    return TransactionRepository(db)


async def get_listing_repo(
    db: AsyncSession = Depends(get_db),
):
    from brokerage.repositories.listing_repository import ListingRepository

    return ListingRepository(db)


async def get_access_repo(
    db: AsyncSession = Depends(get_db),
):
    from brokerage.repositories.access_repository import AccessRepository

    return AccessRepository(db)


# ---------------------------------------------------------------------------
# Service factory functions
# ---------------------------------------------------------------------------


async def get_report_service(
    report_repo=Depends(get_report_repo),
):
    """Build a :class:`BrokerageReports` service with injected repository."""
    from brokerage.services.reports import BrokerageReports

    return BrokerageReports(repo=report_repo)


async def get_transaction_service(
    transaction_repo=Depends(get_transaction_repo),
    listing_repo=Depends(get_listing_repo),
):
    """Build a :class:`TransactionService`.

    Both repositories share one session (FastAPI caches ``get_db`` per
    request), so the listing read sees the uncommitted status update.
    """
    from brokerage.services.transaction_service import TransactionService

    return TransactionService(
        transaction_repo=transaction_repo, listing_repo=listing_repo
    )


async def get_access_service(
    access_repo=Depends(get_access_repo),
):
    """Build an :class:`AccessService` with injected repository."""
    from brokerage.services.access_service import AccessService

    return AccessService(repo=access_repo)
