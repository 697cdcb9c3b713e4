"""Repository layer – all database access goes through here.

Repositories encapsulate SQLAlchemy queries and raw SQL so that the
service layer only contains business logic.
"""

from brokerage.repositories.report_repository import ReportRepository
from brokerage.repositories.transaction_repository import TransactionRepository
from brokerage.repositories.listing_repository import ListingRepository
from brokerage.repositories.access_repository import AccessRepository

__all__ = [
    "ReportRepository",
    "TransactionRepository",
    "ListingRepository",
    "AccessRepository",
]
