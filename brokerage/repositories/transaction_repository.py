from typing import Any, Optional

from sqlalchemy import select

from brokerage.models.employee import Employee
from brokerage.models.property import Property
from brokerage.models.transaction import Transaction
from brokerage.repositories.base import BaseRepository


class TransactionRepository(BaseRepository):
    """Encapsulates writes and lookups against ``transactions``.

    Writes go through the ORM unit of work (never bulk ``UPDATE``) so
    the listing-status hook sees every change.
    """

    async def get_by_id(self, transaction_id: int) -> Optional[Transaction]:
        result = await self._db.execute(
            select(Transaction).where(Transaction.transaction_id == transaction_id)
        )
        return result.scalar_one_or_none()

    async def property_exists(self, property_id: int) -> bool:
        result = await self._db.execute(
            select(Property.property_id).where(Property.property_id == property_id)
        )
        return result.scalar_one_or_none() is not None

    async def employee_exists(self, employee_id: int) -> bool:
        result = await self._db.execute(
            select(Employee.employee_id).where(Employee.employee_id == employee_id)
        )
        return result.scalar_one_or_none() is not None

    async def create(self, **kwargs: Any) -> Transaction:
        """Insert a new transaction and flush so the hook runs immediately."""
        transaction = Transaction(**kwargs)
        self._db.add(transaction)
        await self.flush()
        return transaction

    async def update_terms(self, transaction: Transaction, terms: str) -> Transaction:
        """Change *transaction*'s terms; the flush fires the status sync."""
        transaction.terms = terms
        await self.flush()
        return transaction
