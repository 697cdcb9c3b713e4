from sqlalchemy import (
    Column,
    Date,
    ForeignKey,
    Integer,
    Numeric,
    String,
    CheckConstraint,
    Index,
)
from sqlalchemy.orm import relationship
from brokerage.models.base import Base

from brokerage.core.constants import TERMS_CHECK_CLAUSE


class Transaction(Base):
    """Sale or rental of a property handled by an employee.

    ``terms`` is the source of truth for sale completion.  Every insert
    and update flows through the ``after_insert`` / ``after_update``
    mapper events in :mod:`brokerage.models.listeners`, which mirror it
    into ``property_listings.status`` on the same connection.
    """

    __tablename__ = "transactions"
    transaction_id = Column(Integer, primary_key=True, autoincrement=True)
    property_id = Column(
        Integer,
        ForeignKey("properties.property_id", ondelete="CASCADE"),
        nullable=False,
    )
    employee_id = Column(
        Integer, ForeignKey("employees.employee_id", ondelete="SET NULL")
    )
    transaction_date = Column(Date, nullable=False)
    transaction_amount = Column(Numeric(15, 2))
    brokerage_fee = Column(Numeric(15, 2))
    terms = Column(String(20), nullable=False, server_default="pending")

    property = relationship("Property", back_populates="transactions")
    employee = relationship("Employee", back_populates="transactions")

    __table_args__ = (
        CheckConstraint(TERMS_CHECK_CLAUSE, name="ck_transaction_terms_valid"),
        Index("ix_transactions_property_id", "property_id"),
        Index("ix_transactions_employee_id", "employee_id"),
        Index("ix_transactions_date", "transaction_date"),
    )
