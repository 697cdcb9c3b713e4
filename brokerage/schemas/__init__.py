"""Pydantic schemas package – re-exports for convenience."""

# Common enums
from brokerage.schemas.common import (
    TransactionTerms as TransactionTerms,
    ListingStatus as ListingStatus,
    Rating as Rating,
    EventType as EventType,
)

# Report schemas
from brokerage.schemas.reports import PaginatedResponse as PaginatedResponse

# Transaction schemas
from brokerage.schemas.transaction import (
    TransactionCreate as TransactionCreate,
    TermsUpdate as TermsUpdate,
    TransactionOut as TransactionOut,
)

# Access schemas
from brokerage.schemas.access import (
    ManagerEmployee as ManagerEmployee,
    ManagerEmployeePage as ManagerEmployeePage,
)
