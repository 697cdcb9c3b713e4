"""Listing-status synchronisation.

``property_listings.status`` mirrors ``transactions.terms``:

* terms become ``sold``              → listing ``sold``
* terms leave ``sold`` (any other)   → listing ``available``, unless another
  transaction on the same property is still ``sold``
* anything else                      → untouched

So a listing is ``sold`` exactly when some transaction on its property is
``sold``.  :func:`sync_listing_status` must run on the connection that
wrote the transaction row so that both changes commit (or roll back)
together, and after that row is written so the revert check sees the new
terms.  It is wired to the ORM flush in :mod:`brokerage.models.listeners`.
"""

import logging
from typing import Optional, Union

from sqlalchemy import text
from sqlalchemy.engine import Connection

from brokerage.core.constants import SOLD_TERMS
from brokerage.schemas.common import ListingStatus, TransactionTerms

logger = logging.getLogger(__name__)

TermsValue = Union[str, TransactionTerms, None]

_MARK_SOLD = text(
    "UPDATE property_listings SET status = :status WHERE property_id = :pid"
)

_MARK_AVAILABLE = text(
    """
    UPDATE property_listings SET status = :status
    WHERE property_id = :pid
      AND NOT EXISTS (
          SELECT 1 FROM transactions
          WHERE property_id = :pid AND terms = :sold
      )
    """
)


def _terms_str(value: TermsValue) -> Optional[str]:
    if isinstance(value, TransactionTerms):
        return value.value
    return value


def resolve_listing_status(
    old_terms: TermsValue, new_terms: TermsValue
) -> Optional[ListingStatus]:
    """Return the status the listing should take, or ``None`` for no change.

    ``AVAILABLE`` is only a candidate: :func:`sync_listing_status` skips it
    while another transaction on the property is still sold.
    """
    old, new = _terms_str(old_terms), _terms_str(new_terms)
    if new == SOLD_TERMS:
        return ListingStatus.SOLD
    if old == SOLD_TERMS:
        return ListingStatus.AVAILABLE
    return None


def sync_listing_status(
    connection: Connection,
    property_id: int,
    old_terms: TermsValue,
    new_terms: TermsValue,
) -> int:
    """Apply the transition rule for *property_id* on *connection*.

    Returns the number of listing rows updated.  A property without a
    listing, or one that another sold transaction keeps sold, updates
    nothing; that is not an error.
    """
    status = resolve_listing_status(old_terms, new_terms)
    if status is None:
        return 0

    if status is ListingStatus.SOLD:
        result = connection.execute(
            _MARK_SOLD, {"status": status.value, "pid": property_id}
        )
    else:
        result = connection.execute(
            _MARK_AVAILABLE,
            {"status": status.value, "pid": property_id, "sold": SOLD_TERMS},
        )

    if result.rowcount:
        logger.info(
            "Listing for property %s set to %s (terms %s → %s)",
            property_id,
            status.value,
            _terms_str(old_terms),
            _terms_str(new_terms),
        )
    else:
        logger.debug(
            "Listing for property %s left unchanged (no listing or still sold)",
            property_id,
        )
    return result.rowcount
