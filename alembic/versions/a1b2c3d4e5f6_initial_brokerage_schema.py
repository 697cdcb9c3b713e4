"""initial brokerage schema

Revision ID: a1b2c3d4e5f6
Revises:
Create Date: 2026-10-05 09:00:00.000000

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

from brokerage.core.constants import (
    CLIENT_RATING_CHECK_CLAUSE,
    EMPLOYEE_RATING_CHECK_CLAUSE,
    EVENT_TYPE_CHECK_CLAUSE,
    LISTING_STATUS_CHECK_CLAUSE,
    TERMS_CHECK_CLAUSE,
)

# revision identifiers, used by Alembic.
revision: str = "a1b2c3d4e5f6"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "offices",
        sa.Column("office_id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("address", sa.String(255), nullable=False),
        sa.Column("city", sa.String(100), nullable=False),
        sa.Column("state", sa.String(50)),
        sa.Column("zip_code", sa.String(10)),
        sa.Column("phone", sa.String(20)),
    )

    op.create_table(
        "employees",
        sa.Column("employee_id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("first_name", sa.String(100), nullable=False),
        sa.Column("last_name", sa.String(100), nullable=False),
        sa.Column("email", sa.String(255), unique=True),
        sa.Column("phone", sa.String(20)),
        sa.Column("role", sa.String(50)),
        sa.Column("department", sa.String(50)),
        sa.Column(
            "office_id",
            sa.Integer(),
            sa.ForeignKey("offices.office_id", ondelete="SET NULL"),
        ),
        sa.Column("hire_date", sa.Date()),
    )
    op.create_index("ix_employees_office_id", "employees", ["office_id"])
    op.create_index("ix_employees_department", "employees", ["department"])

    op.create_table(
        "manages",
        sa.Column(
            "manager_id",
            sa.Integer(),
            sa.ForeignKey("employees.employee_id", ondelete="CASCADE"),
            primary_key=True,
        ),
        sa.Column(
            "employee_id",
            sa.Integer(),
            sa.ForeignKey("employees.employee_id", ondelete="CASCADE"),
            primary_key=True,
        ),
        sa.CheckConstraint("manager_id <> employee_id", name="ck_manages_not_self"),
    )
    op.create_index("ix_manages_employee_id", "manages", ["employee_id"])

    op.create_table(
        "properties",
        sa.Column("property_id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("property_type", sa.String(50)),
        sa.Column("bedrooms", sa.Integer()),
        sa.Column("bathrooms", sa.Numeric(3, 1)),
        sa.Column("square_feet", sa.Integer()),
    )

    op.create_table(
        "property_listings",
        sa.Column("listing_id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "property_id",
            sa.Integer(),
            sa.ForeignKey("properties.property_id", ondelete="CASCADE"),
            nullable=False,
            unique=True,
        ),
        sa.Column(
            "employee_id",
            sa.Integer(),
            sa.ForeignKey("employees.employee_id", ondelete="SET NULL"),
        ),
        sa.Column("address", sa.String(255), nullable=False),
        sa.Column("zip_code", sa.String(10)),
        sa.Column("listing_price", sa.Numeric(15, 2)),
        sa.Column(
            "listing_date",
            sa.Date(),
            nullable=False,
            server_default=sa.func.current_date(),
        ),
        sa.Column("status", sa.String(20), nullable=False, server_default="available"),
        sa.CheckConstraint(LISTING_STATUS_CHECK_CLAUSE, name="ck_listing_status_valid"),
    )

    op.create_table(
        "transactions",
        sa.Column(
            "transaction_id", sa.Integer(), primary_key=True, autoincrement=True
        ),
        sa.Column(
            "property_id",
            sa.Integer(),
            sa.ForeignKey("properties.property_id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "employee_id",
            sa.Integer(),
            sa.ForeignKey("employees.employee_id", ondelete="SET NULL"),
        ),
        sa.Column("transaction_date", sa.Date(), nullable=False),
        sa.Column("transaction_amount", sa.Numeric(15, 2)),
        sa.Column("brokerage_fee", sa.Numeric(15, 2)),
        sa.Column("terms", sa.String(20), nullable=False, server_default="pending"),
        sa.CheckConstraint(TERMS_CHECK_CLAUSE, name="ck_transaction_terms_valid"),
    )
    op.create_index("ix_transactions_property_id", "transactions", ["property_id"])
    op.create_index("ix_transactions_employee_id", "transactions", ["employee_id"])
    op.create_index("ix_transactions_date", "transactions", ["transaction_date"])

    op.create_table(
        "employee_performance",
        sa.Column(
            "performance_id", sa.Integer(), primary_key=True, autoincrement=True
        ),
        sa.Column(
            "employee_id",
            sa.Integer(),
            sa.ForeignKey("employees.employee_id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("performance_date", sa.Date(), nullable=False),
        sa.Column("performance_amount", sa.Numeric(15, 2)),
        sa.Column("employee_rating", sa.String(20)),
        sa.CheckConstraint(
            EMPLOYEE_RATING_CHECK_CLAUSE, name="ck_employee_rating_valid"
        ),
    )
    op.create_index(
        "ix_employee_performance_emp_date",
        "employee_performance",
        ["employee_id", "performance_date"],
    )

    op.create_table(
        "payroll",
        sa.Column("payroll_id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "employee_id",
            sa.Integer(),
            sa.ForeignKey("employees.employee_id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("pay_date", sa.Date(), nullable=False),
        sa.Column("salary_amount", sa.Numeric(15, 2), nullable=False),
        sa.Column("bonus_amount", sa.Numeric(15, 2)),
    )
    op.create_index("ix_payroll_employee_id", "payroll", ["employee_id"])

    op.create_table(
        "financial_records",
        sa.Column("record_id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "office_id",
            sa.Integer(),
            sa.ForeignKey("offices.office_id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("record_date", sa.Date(), nullable=False),
        sa.Column("amount", sa.Numeric(15, 2), nullable=False),
        sa.Column("category", sa.String(50)),
        sa.Column("description", sa.Text()),
    )

    op.create_table(
        "marketing_campaigns",
        sa.Column("campaign_id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "property_id",
            sa.Integer(),
            sa.ForeignKey("properties.property_id", ondelete="CASCADE"),
            nullable=False,
            unique=True,
        ),
        sa.Column("campaign_name", sa.String(200), nullable=False),
        sa.Column("start_date", sa.Date(), nullable=False),
        sa.Column("end_date", sa.Date()),
        sa.Column("budget", sa.Numeric(15, 2), nullable=False, server_default="0"),
        sa.CheckConstraint("budget >= 0", name="ck_campaign_budget_nonneg"),
        sa.CheckConstraint(
            "end_date IS NULL OR end_date >= start_date",
            name="ck_campaign_dates_ordered",
        ),
    )

    op.create_table(
        "agent_specializations",
        sa.Column(
            "specialization_id", sa.Integer(), primary_key=True, autoincrement=True
        ),
        sa.Column(
            "employee_id",
            sa.Integer(),
            sa.ForeignKey("employees.employee_id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("specialization_area", sa.String(100), nullable=False),
        sa.UniqueConstraint(
            "employee_id", "specialization_area", name="uq_agent_specialization"
        ),
    )

    op.create_table(
        "client_feedback",
        sa.Column("feedback_id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "employee_id",
            sa.Integer(),
            sa.ForeignKey("employees.employee_id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("client_name", sa.String(200)),
        sa.Column(
            "client_rating", sa.String(20), nullable=False, server_default="Not Rated"
        ),
        sa.Column("comments", sa.Text()),
        sa.Column("feedback_date", sa.Date(), server_default=sa.func.current_date()),
        sa.CheckConstraint(CLIENT_RATING_CHECK_CLAUSE, name="ck_client_rating_valid"),
    )

    op.create_table(
        "events",
        sa.Column("event_id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "property_id",
            sa.Integer(),
            sa.ForeignKey("properties.property_id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("event_type", sa.String(20), nullable=False),
        sa.Column("event_date", sa.Date(), nullable=False),
        sa.Column("start_time", sa.Time()),
        sa.Column("end_time", sa.Time()),
        sa.Column("attendees", sa.ARRAY(sa.String())),
        sa.CheckConstraint(EVENT_TYPE_CHECK_CLAUSE, name="ck_event_type_valid"),
        sa.CheckConstraint(
            "end_time IS NULL OR start_time IS NULL OR end_time > start_time",
            name="ck_event_time_window",
        ),
    )
    op.create_index("ix_events_event_date", "events", ["event_date"])


def downgrade() -> None:
    op.drop_index("ix_events_event_date", table_name="events")
    op.drop_table("events")
    op.drop_table("client_feedback")
    op.drop_table("agent_specializations")
    op.drop_table("marketing_campaigns")
    op.drop_table("financial_records")
    op.drop_index("ix_payroll_employee_id", table_name="payroll")
    op.drop_table("payroll")
    op.drop_index(
        "ix_employee_performance_emp_date", table_name="employee_performance"
    )
    op.drop_table("employee_performance")
    op.drop_index("ix_transactions_date", table_name="transactions")
    op.drop_index("ix_transactions_employee_id", table_name="transactions")
    op.drop_index("ix_transactions_property_id", table_name="transactions")
    op.drop_table("transactions")
    op.drop_table("property_listings")
    op.drop_table("properties")
    op.drop_index("ix_manages_employee_id", table_name="manages")
    op.drop_table("manages")
    op.drop_index("ix_employees_department", table_name="employees")
    op.drop_index("ix_employees_office_id", table_name="employees")
    op.drop_table("employees")
    op.drop_table("offices")
