import os
from datetime import date
from decimal import Decimal
from typing import AsyncGenerator

import asyncpg
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import select, text
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import NullPool

from brokerage.models import (
    Base,
    Employee,
    Manages,
    Office,
    Property,
    PropertyListing,
    Transaction,
)

_PG_HOST = os.getenv("TEST_PG_HOST", "localhost")
_PG_PORT = int(os.getenv("TEST_PG_PORT", "5433"))
_PG_USER = os.getenv("TEST_PG_USER", "postgres")
_PG_PASS = os.getenv("TEST_PG_PASSWORD", "postgres")
_TEST_DB = "brokerage_test_db"

_TEST_DB_URL = (
    f"postgresql+asyncpg://{_PG_USER}:{_PG_PASS}@{_PG_HOST}:{_PG_PORT}/{_TEST_DB}"
)

_TEST_ENGINE = create_async_engine(_TEST_DB_URL, echo=False, poolclass=NullPool)

_TestSessionLocal = async_sessionmaker(
    _TEST_ENGINE,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def _override_get_db():
    """Yield a test-scoped async session."""
    async with _TestSessionLocal() as session:
        yield session


@pytest_asyncio.fixture(autouse=True)
async def _setup_database():
    """Create the test database if needed, then fresh tables per test.

    Skips every test in this module when PostgreSQL cannot be reached.
    """
    try:
        conn = await asyncpg.connect(
            user=_PG_USER,
            password=_PG_PASS,
            host=_PG_HOST,
            port=_PG_PORT,
            database="postgres",
        )
        exists = await conn.fetchval(
            "SELECT 1 FROM pg_database WHERE datname = $1", _TEST_DB
        )
        if not exists:
            await conn.execute(f'CREATE DATABASE "{_TEST_DB}"')
        await conn.close()
    except (OSError, asyncpg.PostgresError, ConnectionRefusedError) as exc:
        pytest.skip(f"PostgreSQL not available ({_PG_HOST}:{_PG_PORT}): {exc}")

    async with _TEST_ENGINE.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
    yield
    async with _TEST_ENGINE.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest_asyncio.fixture
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """Provide a raw async DB session for direct repository tests."""
    async with _TestSessionLocal() as session:
        yield session


@pytest_asyncio.fixture
async def integration_client() -> AsyncGenerator[AsyncClient, None]:
    """HTTP client wired to the FastAPI app with overridden DB dependency."""
    from brokerage.core.database import get_db
    from brokerage.main import app

    app.dependency_overrides[get_db] = _override_get_db
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


async def _seed_listing(session: AsyncSession, with_listing: bool = True) -> int:
    """Insert a property (and listing) and return the property id."""
    prop = Property(property_type="condo", bedrooms=2)
    session.add(prop)
    await session.flush()
    if with_listing:
        session.add(
            PropertyListing(
                property_id=prop.property_id,
                address="12 Oak Ave",
                listing_date=date(2024, 1, 1),
            )
        )
    await session.commit()
    return prop.property_id


async def _seed_transaction(
    session: AsyncSession, property_id: int, terms: str = "pending"
) -> int:
    transaction = Transaction(
        property_id=property_id,
        transaction_date=date(2024, 2, 1),
        transaction_amount=Decimal("300000"),
        terms=terms,
    )
    session.add(transaction)
    await session.commit()
    return transaction.transaction_id


async def _listing_status(property_id: int) -> str:
    """Read the status through a fresh session (committed data only)."""
    async with _TestSessionLocal() as session:
        result = await session.execute(
            select(PropertyListing.status).where(
                PropertyListing.property_id == property_id
            )
        )
        return result.scalar_one_or_none()


class TestStatusSyncHook:
    """The listing-status mirror against real PostgreSQL."""

    @pytest.mark.asyncio
    async def test_sold_then_revert(self, db_session: AsyncSession):
        from brokerage.repositories.transaction_repository import (
            TransactionRepository,
        )

        property_id = await _seed_listing(db_session)
        transaction_id = await _seed_transaction(db_session, property_id)
        repo = TransactionRepository(db_session)
        transaction = await repo.get_by_id(transaction_id)

        await repo.update_terms(transaction, "sold")
        await repo.commit()
        assert await _listing_status(property_id) == "sold"

        await repo.update_terms(transaction, "cancelled")
        await repo.commit()
        assert await _listing_status(property_id) == "available"

    @pytest.mark.asyncio
    async def test_non_sold_change_leaves_status(self, db_session: AsyncSession):
        property_id = await _seed_listing(db_session)
        transaction_id = await _seed_transaction(db_session, property_id)
        await db_session.execute(
            text("UPDATE property_listings SET status = 'withdrawn'")
        )
        await db_session.commit()

        transaction = await db_session.get(Transaction, transaction_id)
        transaction.terms = "rented"
        await db_session.commit()

        assert await _listing_status(property_id) == "withdrawn"

    @pytest.mark.asyncio
    async def test_inserting_sold_transaction_marks_listing(
        self, db_session: AsyncSession
    ):
        property_id = await _seed_listing(db_session)
        await _seed_transaction(db_session, property_id, terms="sold")

        assert await _listing_status(property_id) == "sold"

    @pytest.mark.asyncio
    async def test_rollback_undoes_listing_change(self, db_session: AsyncSession):
        """The hook shares the transaction: rolling back reverts both rows."""
        property_id = await _seed_listing(db_session)
        transaction_id = await _seed_transaction(db_session, property_id)

        transaction = await db_session.get(Transaction, transaction_id)
        transaction.terms = "sold"
        await db_session.flush()
        await db_session.rollback()

        assert await _listing_status(property_id) == "available"

    @pytest.mark.asyncio
    async def test_cancelling_one_of_two_sales_keeps_listing_sold(
        self, db_session: AsyncSession
    ):
        """The listing stays sold while any transaction on it is sold."""
        property_id = await _seed_listing(db_session)
        first_id = await _seed_transaction(db_session, property_id, terms="sold")
        second_id = await _seed_transaction(db_session, property_id, terms="sold")

        second = await db_session.get(Transaction, second_id)
        second.terms = "cancelled"
        await db_session.commit()
        assert await _listing_status(property_id) == "sold"

        first = await db_session.get(Transaction, first_id)
        first.terms = "cancelled"
        await db_session.commit()
        assert await _listing_status(property_id) == "available"

    @pytest.mark.asyncio
    async def test_unrelated_change_on_sold_property_keeps_listing_sold(
        self, db_session: AsyncSession
    ):
        property_id = await _seed_listing(db_session)
        await _seed_transaction(db_session, property_id, terms="sold")
        other_id = await _seed_transaction(db_session, property_id)

        other = await db_session.get(Transaction, other_id)
        other.terms = "rented"
        await db_session.commit()

        assert await _listing_status(property_id) == "sold"

    @pytest.mark.asyncio
    async def test_status_read_is_fresh_after_loading_listing(
        self, db_session: AsyncSession
    ):
        """A listing object already in the session does not mask the sync."""
        from brokerage.repositories.listing_repository import ListingRepository

        property_id = await _seed_listing(db_session)
        transaction_id = await _seed_transaction(db_session, property_id)
        loaded = (
            await db_session.execute(
                select(PropertyListing).where(
                    PropertyListing.property_id == property_id
                )
            )
        ).scalar_one()
        assert loaded.status == "available"

        transaction = await db_session.get(Transaction, transaction_id)
        transaction.terms = "sold"
        await db_session.flush()

        assert await ListingRepository(db_session).get_status(property_id) == "sold"
        await db_session.commit()

    @pytest.mark.asyncio
    async def test_property_without_listing(self, db_session: AsyncSession):
        property_id = await _seed_listing(db_session, with_listing=False)
        transaction_id = await _seed_transaction(db_session, property_id)

        transaction = await db_session.get(Transaction, transaction_id)
        transaction.terms = "sold"
        await db_session.commit()

        assert await _listing_status(property_id) is None


class TestTransactionEndpointsIntegration:
    @pytest.mark.asyncio
    async def test_patch_terms_returns_synced_status(
        self, db_session: AsyncSession, integration_client: AsyncClient
    ):
        property_id = await _seed_listing(db_session)
        transaction_id = await _seed_transaction(db_session, property_id)

        response = await integration_client.patch(
            f"/api/v1/transactions/{transaction_id}/terms", json={"terms": "sold"}
        )

        assert response.status_code == 200
        assert response.json()["listing_status"] == "sold"
        assert await _listing_status(property_id) == "sold"

    @pytest.mark.asyncio
    async def test_record_sold_transaction(
        self, db_session: AsyncSession, integration_client: AsyncClient
    ):
        property_id = await _seed_listing(db_session)

        response = await integration_client.post(
            "/api/v1/transactions",
            json={
                "property_id": property_id,
                "transaction_date": "2024-03-01",
                "transaction_amount": "410000",
                "terms": "sold",
            },
        )

        assert response.status_code == 201
        assert response.json()["listing_status"] == "sold"

    @pytest.mark.asyncio
    async def test_record_with_unknown_employee_404(
        self, db_session: AsyncSession, integration_client: AsyncClient
    ):
        property_id = await _seed_listing(db_session)

        response = await integration_client.post(
            "/api/v1/transactions",
            json={
                "property_id": property_id,
                "employee_id": 987654,
                "transaction_date": "2024-03-01",
                "terms": "sold",
            },
        )

        assert response.status_code == 404
        assert response.json()["type"] == "employee_not_found"
        assert await _listing_status(property_id) == "available"

    @pytest.mark.asyncio
    async def test_unknown_transaction_404(self, integration_client: AsyncClient):
        response = await integration_client.get("/api/v1/transactions/999999")
        assert response.status_code == 404


class TestManagerEmployeeView:
    async def _seed_org(self, session: AsyncSession):
        office = Office(address="100 Main St", city="Springfield")
        session.add(office)
        await session.flush()
        manager = Employee(
            first_name="Alice", last_name="Boss", office_id=office.office_id
        )
        staff = Employee(
            first_name="Bob", last_name="Agent", office_id=office.office_id
        )
        loner = Employee(first_name="Cara", last_name="Solo")
        session.add_all([manager, staff, loner])
        await session.flush()
        session.add(Manages(manager_id=manager.employee_id, employee_id=staff.employee_id))
        await session.commit()
        return manager, staff, loner

    @pytest.mark.asyncio
    async def test_lookup_by_employee(
        self, db_session: AsyncSession, integration_client: AsyncClient
    ):
        manager, staff, _ = await self._seed_org(db_session)

        response = await integration_client.get(
            f"/api/v1/access/manager-employees/{staff.employee_id}"
        )

        assert response.status_code == 200
        assert response.json() == [
            {
                "manager_id": manager.employee_id,
                "employee_id": staff.employee_id,
                "manager_first_name": "Alice",
                "manager_last_name": "Boss",
                "employee_first_name": "Bob",
                "employee_last_name": "Agent",
                "office_address": "100 Main St",
                "office_city": "Springfield",
            }
        ]

    @pytest.mark.asyncio
    async def test_unmanaged_employee_absent(
        self, db_session: AsyncSession, integration_client: AsyncClient
    ):
        _, _, loner = await self._seed_org(db_session)

        response = await integration_client.get(
            f"/api/v1/access/manager-employees/{loner.employee_id}"
        )
        listing = await integration_client.get("/api/v1/access/manager-employees")

        assert response.status_code == 404
        assert listing.json()["total"] == 1
