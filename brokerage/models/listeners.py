from sqlalchemy import event, inspect

from brokerage.models.transaction import Transaction
from brokerage.services.status_sync import sync_listing_status


def _previous_terms(target):
    history = inspect(target).attrs.terms.history
    if history.deleted:
        return history.deleted[0]
    # terms untouched by this flush: old value equals the current one
    return target.terms


# Listing status mirror. Runs inside the flush, on the flush connection,
# so the listing update commits or rolls back with the transaction row.
@event.listens_for(Transaction, "after_update")
def sync_status_on_update(mapper, connection, target):
    sync_listing_status(
        connection, target.property_id, _previous_terms(target), target.terms
    )


@event.listens_for(Transaction, "after_insert")
def sync_status_on_insert(mapper, connection, target):
    sync_listing_status(connection, target.property_id, None, target.terms)
