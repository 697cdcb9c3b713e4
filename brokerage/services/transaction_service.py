import logging
from typing import Any, Dict

from brokerage.core.exceptions import (
    EmployeeNotFoundError,
    PropertyNotFoundError,
    TransactionNotFoundError,
)
from brokerage.repositories.listing_repository import ListingRepository
from brokerage.repositories.transaction_repository import TransactionRepository
from brokerage.schemas.common import TransactionTerms
from brokerage.schemas.transaction import TransactionCreate

logger = logging.getLogger(__name__)


class TransactionService:
    """Orchestrates transaction writes.

    The listing-status mirror is not called from here: it runs inside the
    flush (see :mod:`brokerage.models.listeners`), so the transaction row
    and the listing status are committed together or not at all.
    """

    def __init__(
        self,
        transaction_repo: TransactionRepository,
        listing_repo: ListingRepository,
    ) -> None:
        self._transactions = transaction_repo
        self._listings = listing_repo

    async def _as_payload(self, transaction) -> Dict[str, Any]:
        return {
            "transaction_id": transaction.transaction_id,
            "property_id": transaction.property_id,
            "employee_id": transaction.employee_id,
            "transaction_date": transaction.transaction_date,
            "transaction_amount": transaction.transaction_amount,
            "brokerage_fee": transaction.brokerage_fee,
            "terms": transaction.terms,
            "listing_status": await self._listings.get_status(
                transaction.property_id
            ),
        }

    async def get_transaction(self, transaction_id: int) -> Dict[str, Any]:
        transaction = await self._transactions.get_by_id(transaction_id)
        if not transaction:
            raise TransactionNotFoundError(f"Transaction {transaction_id} not found")
        return await self._as_payload(transaction)

    async def record_transaction(self, data: TransactionCreate) -> Dict[str, Any]:
        if not await self._transactions.property_exists(data.property_id):
            raise PropertyNotFoundError(f"Property {data.property_id} not found")
        employee_id = data.employee_id
        if employee_id is not None and not await self._transactions.employee_exists(
            employee_id
        ):
            raise EmployeeNotFoundError(f"Employee {employee_id} not found")

        try:
            transaction = await self._transactions.create(
                property_id=data.property_id,
                employee_id=data.employee_id,
                transaction_date=data.transaction_date,
                transaction_amount=data.transaction_amount,
                brokerage_fee=data.brokerage_fee,
                terms=data.terms.value,
            )
            payload = await self._as_payload(transaction)
            await self._transactions.commit()
        except Exception:
            await self._transactions.rollback()
            raise

        logger.info(
            "Recorded transaction %s for property %s (%s)",
            payload["transaction_id"],
            payload["property_id"],
            payload["terms"],
        )
        return payload

    async def update_terms(
        self, transaction_id: int, terms: TransactionTerms
    ) -> Dict[str, Any]:
        """Change a transaction's terms and return the synced listing status."""
        transaction = await self._transactions.get_by_id(transaction_id)
        if not transaction:
            raise TransactionNotFoundError(f"Transaction {transaction_id} not found")

        previous = transaction.terms
        try:
            await self._transactions.update_terms(transaction, terms.value)
            payload = await self._as_payload(transaction)
            await self._transactions.commit()
        except Exception:
            await self._transactions.rollback()
            raise

        logger.info(
            "Transaction %s terms %s → %s", transaction_id, previous, terms.value
        )
        return payload
