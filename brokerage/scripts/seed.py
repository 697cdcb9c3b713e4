"""Sample data seeder for the brokerage reports.

Run with ``python -m brokerage.scripts.seed``.  Tables must already exist
(``alembic upgrade head``).
"""

import asyncio
from datetime import date, time, timedelta
from decimal import Decimal

from sqlalchemy import func, select, text
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from brokerage.core.config import settings
from brokerage.models import (
    AgentSpecialization,
    ClientFeedback,
    Employee,
    EmployeePerformance,
    Event,
    FinancialRecord,
    Manages,
    MarketingCampaign,
    Office,
    Payroll,
    Property,
    PropertyListing,
    Transaction,
)
from brokerage.core.constants import EVENT_TYPES, RATING_VALUES, TRANSACTION_TERMS

# Sorted so the generated rows are the same on every run
TERMS_VALUES = sorted(TRANSACTION_TERMS)
RATINGS = sorted(RATING_VALUES)
EVENT_VALUES = sorted(EVENT_TYPES)

DEPARTMENTS = ["Sales", "Rentals", "Commercial"]
SPECIALIZATIONS = ["Residential", "Luxury", "Commercial", "Rentals", "Land"]
PROPERTY_TYPES = ["apartment", "house", "condo", "townhouse", "commercial"]
EXPENSE_CATEGORIES = ["rent", "utilities", "supplies", "marketing"]


async def seed():
    engine = create_async_engine(settings.DATABASE_URL, echo=False)
    session_maker = async_sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False
    )
    today = date.today()

    async with session_maker() as session:
        print("Seeding brokerage sample data")

        await session.execute(
            text(
                "TRUNCATE TABLE "
                "events, "
                "client_feedback, "
                "agent_specializations, "
                "marketing_campaigns, "
                "financial_records, "
                "payroll, "
                "employee_performance, "
                "transactions, "
                "property_listings, "
                "properties, "
                "manages, "
                "employees, "
                "offices "
                "RESTART IDENTITY CASCADE"
            )
        )
        await session.commit()
        print("Cleared existing data")

        # 1. Offices
        offices = [
            Office(address="100 Main St", city="Springfield", state="IL", zip_code="62701"),
            Office(address="200 Lake Ave", city="Chicago", state="IL", zip_code="60601"),
            Office(address="300 River Rd", city="Peoria", state="IL", zip_code="61602"),
        ]
        session.add_all(offices)
        await session.flush()
        print(f"Created {len(offices)} offices")

        # 2. Employees: one manager per office, agents spread across offices
        managers = []
        for i, office in enumerate(offices):
            manager = Employee(
                first_name=["Alice", "Brian", "Carmen"][i],
                last_name="Manager",
                email=f"manager{i}@brokerage.example",
                role="manager",
                department=DEPARTMENTS[i],
                office_id=office.office_id,
                hire_date=today - timedelta(days=3650 - i * 100),
            )
            session.add(manager)
            managers.append(manager)

        agents = []
        for i in range(15):
            agent = Employee(
                first_name=f"Agent{i + 1}",
                last_name=["Smith", "Jones", "Lee", "Garcia", "Brown"][i % 5],
                email=f"agent{i + 1}@brokerage.example",
                role="agent",
                department=DEPARTMENTS[i % len(DEPARTMENTS)],
                office_id=offices[i % len(offices)].office_id,
                hire_date=today - timedelta(days=200 + i * 60),
            )
            session.add(agent)
            agents.append(agent)
        await session.flush()
        print(f"Created {len(managers)} managers and {len(agents)} agents")

        # 3. Reporting lines
        for i, agent in enumerate(agents):
            session.add(
                Manages(
                    manager_id=managers[i % len(managers)].employee_id,
                    employee_id=agent.employee_id,
                )
            )
        await session.flush()
        print("Created reporting lines")

        # 4. Properties and listings
        properties = []
        for i in range(30):
            prop = Property(
                property_type=PROPERTY_TYPES[i % len(PROPERTY_TYPES)],
                bedrooms=1 + i % 5,
                bathrooms=Decimal("1.5") + (i % 3),
                square_feet=700 + i * 85,
            )
            session.add(prop)
            properties.append(prop)
        await session.flush()

        listings = []
        for i, prop in enumerate(properties):
            listing = PropertyListing(
                property_id=prop.property_id,
                employee_id=agents[i % len(agents)].employee_id,
                address=f"{10 + i} Elm St",
                zip_code=f"627{i:02d}",
                listing_price=Decimal(150000 + i * 25000),
                listing_date=today - timedelta(days=300 - i * 7),
                status="rented" if i % 7 == 0 else "available",
            )
            session.add(listing)
            listings.append(listing)
        await session.flush()
        print(f"Created {len(properties)} properties with listings")

        # 5. Transactions; sold ones flip their listing via the flush hook
        transactions = []
        for i, listing in enumerate(listings[:20]):
            amount = listing.listing_price - Decimal(5000 * (i % 4))
            transaction = Transaction(
                property_id=listing.property_id,
                employee_id=listing.employee_id,
                transaction_date=listing.listing_date + timedelta(days=10 + i * 3),
                transaction_amount=amount,
                brokerage_fee=(amount * Decimal("0.03")).quantize(Decimal("0.01")),
                terms=TERMS_VALUES[i % len(TERMS_VALUES)],
            )
            session.add(transaction)
            transactions.append(transaction)
        await session.flush()
        print(f"Created {len(transactions)} transactions")

        # 6. Performance history
        for i, agent in enumerate(agents):
            for month in range(8):
                session.add(
                    EmployeePerformance(
                        employee_id=agent.employee_id,
                        performance_date=today - timedelta(days=30 * month + i),
                        performance_amount=Decimal(20000 + (i * 1700 + month * 900) % 40000),
                        employee_rating=RATINGS[(i + month) % len(RATINGS)],
                    )
                )
        await session.flush()
        print("Created performance history")

        # 7. Payroll (some months without bonus)
        for i, employee in enumerate(managers + agents):
            for month in range(3):
                session.add(
                    Payroll(
                        employee_id=employee.employee_id,
                        pay_date=today - timedelta(days=30 * month),
                        salary_amount=Decimal(4000 + i * 150),
                        bonus_amount=Decimal(500 + i * 20) if month % 2 == 0 else None,
                    )
                )
        await session.flush()
        print("Created payroll")

        # 8. Office operating expenses
        for i, office in enumerate(offices):
            for j, category in enumerate(EXPENSE_CATEGORIES):
                session.add(
                    FinancialRecord(
                        office_id=office.office_id,
                        record_date=today - timedelta(days=15 * j),
                        amount=Decimal(1200 + i * 300 + j * 75),
                        category=category,
                        description=f"{category.title()} for {office.city}",
                    )
                )
        await session.flush()
        print("Created financial records")

        # 9. Marketing campaigns (one per promoted property)
        for i, listing in enumerate(listings[::3]):
            session.add(
                MarketingCampaign(
                    property_id=listing.property_id,
                    campaign_name=f"Spotlight {i + 1}",
                    start_date=listing.listing_date,
                    end_date=listing.listing_date + timedelta(days=45),
                    budget=Decimal(1500 + i * 250),
                )
            )
        await session.flush()
        print("Created marketing campaigns")

        # 10. Agent specializations
        for i, agent in enumerate(agents):
            areas = {SPECIALIZATIONS[i % len(SPECIALIZATIONS)]}
            if i % 3 == 0:
                areas.add(SPECIALIZATIONS[(i + 2) % len(SPECIALIZATIONS)])
            for area in sorted(areas):
                session.add(
                    AgentSpecialization(
                        employee_id=agent.employee_id, specialization_area=area
                    )
                )
        await session.flush()
        print("Created agent specializations")

        # 11. Client feedback, including 'Not Rated' entries
        for i in range(40):
            session.add(
                ClientFeedback(
                    employee_id=agents[i % len(agents)].employee_id,
                    client_name=f"Client {i + 1}",
                    client_rating=RATINGS[i % len(RATINGS)],
                    comments="Great service" if i % 2 else None,
                    feedback_date=today - timedelta(days=i * 4),
                )
            )
        await session.flush()
        print("Created client feedback")

        # 12. Events, past and upcoming
        for i, listing in enumerate(listings[:12]):
            session.add(
                Event(
                    property_id=listing.property_id,
                    event_type=EVENT_VALUES[i % len(EVENT_VALUES)],
                    event_date=today + timedelta(days=i * 5 - 20),
                    start_time=time(10 + i % 6, 0),
                    end_time=time(12 + i % 6, 0),
                    attendees=[f"Guest {n}" for n in range(i % 4)] or None,
                )
            )
        await session.flush()
        print("Created events")

        await session.commit()

        # Validation
        sold_listings = (
            await session.execute(
                select(func.count())
                .select_from(PropertyListing)
                .where(PropertyListing.status == "sold")
            )
        ).scalar_one()
        sold_transactions = (
            await session.execute(
                select(func.count(func.distinct(Transaction.property_id))).where(
                    Transaction.terms == "sold"
                )
            )
        ).scalar_one()

        print("\nValidation:")
        print(f"  Properties with sold transactions: {sold_transactions}")
        print(f"  Listings marked sold: {sold_listings}")
        print("Seeding complete")

    await engine.dispose()


if __name__ == "__main__":
    asyncio.run(seed())
