from typing import FrozenSet

from brokerage.schemas.common import (
    EventType,
    ListingStatus,
    Rating,
    TransactionTerms,
)


def _check_clause(column: str, values) -> str:
    return f"{column} IN ({', '.join(repr(v.value) for v in values)})"


TRANSACTION_TERMS: FrozenSet[str] = frozenset(t.value for t in TransactionTerms)
RATING_VALUES: FrozenSet[str] = frozenset(r.value for r in Rating)
EVENT_TYPES: FrozenSet[str] = frozenset(e.value for e in EventType)

TERMS_CHECK_CLAUSE: str = _check_clause("terms", TransactionTerms)
LISTING_STATUS_CHECK_CLAUSE: str = _check_clause("status", ListingStatus)
CLIENT_RATING_CHECK_CLAUSE: str = _check_clause("client_rating", Rating)
EMPLOYEE_RATING_CHECK_CLAUSE: str = _check_clause("employee_rating", Rating)
EVENT_TYPE_CHECK_CLAUSE: str = _check_clause("event_type", EventType)

# The only terms value that drives listing status
SOLD_TERMS: str = TransactionTerms.SOLD.value
NOT_RATED: str = Rating.NOT_RATED.value

MIN_RATING: int = 1
MAX_RATING: int = 5

MANAGER_EMPLOYEE_VIEW: str = "manager_employee_view"
