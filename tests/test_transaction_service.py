from datetime import date
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

import pytest

from brokerage.core.exceptions import (
    EmployeeNotFoundError,
    PropertyNotFoundError,
    TransactionNotFoundError,
)
from brokerage.schemas.common import TransactionTerms
from brokerage.schemas.transaction import TransactionCreate
from brokerage.services.transaction_service import TransactionService


def _make_mock_transaction(terms="pending"):
    transaction = MagicMock()
    transaction.transaction_id = 1
    transaction.property_id = 10
    transaction.employee_id = 3
    transaction.transaction_date = date(2024, 2, 1)
    transaction.transaction_amount = Decimal("250000.00")
    transaction.brokerage_fee = Decimal("7500.00")
    transaction.terms = terms
    return transaction


@pytest.fixture
def transaction_repo() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def listing_repo() -> AsyncMock:
    repo = AsyncMock()
    repo.get_status.return_value = "available"
    return repo


@pytest.fixture
def service(transaction_repo, listing_repo) -> TransactionService:
    return TransactionService(
        transaction_repo=transaction_repo, listing_repo=listing_repo
    )


class TestGetTransaction:
    @pytest.mark.asyncio
    async def test_returns_payload_with_listing_status(
        self, service, transaction_repo, listing_repo
    ):
        transaction_repo.get_by_id.return_value = _make_mock_transaction()

        result = await service.get_transaction(1)

        assert result["transaction_id"] == 1
        assert result["listing_status"] == "available"
        listing_repo.get_status.assert_awaited_once_with(10)

    @pytest.mark.asyncio
    async def test_missing_transaction_raises(self, service, transaction_repo):
        transaction_repo.get_by_id.return_value = None

        with pytest.raises(TransactionNotFoundError):
            await service.get_transaction(404)


class TestUpdateTerms:
    @pytest.mark.asyncio
    async def test_commits_and_reports_synced_status(
        self, service, transaction_repo, listing_repo
    ):
        transaction = _make_mock_transaction()
        transaction_repo.get_by_id.return_value = transaction

        async def _apply(target, terms):
            target.terms = terms
            return target

        transaction_repo.update_terms.side_effect = _apply
        listing_repo.get_status.return_value = "sold"

        result = await service.update_terms(1, TransactionTerms.SOLD)

        transaction_repo.update_terms.assert_awaited_once_with(transaction, "sold")
        transaction_repo.commit.assert_awaited_once()
        assert result["terms"] == "sold"
        assert result["listing_status"] == "sold"

    @pytest.mark.asyncio
    async def test_missing_transaction_raises(self, service, transaction_repo):
        transaction_repo.get_by_id.return_value = None

        with pytest.raises(TransactionNotFoundError):
            await service.update_terms(404, TransactionTerms.SOLD)
        transaction_repo.update_terms.assert_not_called()

    @pytest.mark.asyncio
    async def test_failure_rolls_back(self, service, transaction_repo):
        """A failed flush must not leave the terms change half-applied."""
        transaction_repo.get_by_id.return_value = _make_mock_transaction()
        transaction_repo.update_terms.side_effect = RuntimeError("flush failed")

        with pytest.raises(RuntimeError):
            await service.update_terms(1, TransactionTerms.SOLD)

        transaction_repo.rollback.assert_awaited_once()
        transaction_repo.commit.assert_not_called()


class TestRecordTransaction:
    @pytest.mark.asyncio
    async def test_creates_and_commits(self, service, transaction_repo):
        transaction_repo.property_exists.return_value = True
        transaction_repo.employee_exists.return_value = True
        transaction_repo.create.return_value = _make_mock_transaction(terms="sold")

        data = TransactionCreate(
            property_id=10,
            employee_id=3,
            transaction_date=date(2024, 2, 1),
            transaction_amount=Decimal("250000"),
            terms=TransactionTerms.SOLD,
        )
        result = await service.record_transaction(data)

        assert transaction_repo.create.call_args.kwargs["terms"] == "sold"
        transaction_repo.commit.assert_awaited_once()
        assert result["terms"] == "sold"

    @pytest.mark.asyncio
    async def test_unknown_property_raises(self, service, transaction_repo):
        transaction_repo.property_exists.return_value = False

        data = TransactionCreate(property_id=999, transaction_date=date(2024, 2, 1))
        with pytest.raises(PropertyNotFoundError):
            await service.record_transaction(data)
        transaction_repo.create.assert_not_called()

    @pytest.mark.asyncio
    async def test_unknown_employee_raises(self, service, transaction_repo):
        transaction_repo.property_exists.return_value = True
        transaction_repo.employee_exists.return_value = False

        data = TransactionCreate(
            property_id=10, employee_id=987654, transaction_date=date(2024, 2, 1)
        )
        with pytest.raises(EmployeeNotFoundError):
            await service.record_transaction(data)
        transaction_repo.create.assert_not_called()

    @pytest.mark.asyncio
    async def test_employee_check_skipped_when_unassigned(
        self, service, transaction_repo
    ):
        transaction_repo.property_exists.return_value = True
        transaction_repo.create.return_value = _make_mock_transaction()

        data = TransactionCreate(property_id=10, transaction_date=date(2024, 2, 1))
        await service.record_transaction(data)

        transaction_repo.employee_exists.assert_not_called()
