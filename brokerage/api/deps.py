"""API-layer dependency functions.

Re-exports all dependency factories from ``brokerage.dependencies`` so
that endpoint modules only need to import from ``brokerage.api.deps``.
"""

from brokerage.dependencies import (
    # Repository factories
    get_report_repo,
    get_transaction_repo,
    get_listing_repo,
    get_access_repo,
    # Service factories
    get_report_service,
    get_transaction_service,
    get_access_service,
)

__all__ = [
    "get_report_repo",
    "get_transaction_repo",
    "get_listing_repo",
    "get_access_repo",
    "get_report_service",
    "get_transaction_service",
    "get_access_service",
]
