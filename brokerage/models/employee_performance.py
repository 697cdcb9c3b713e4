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

from brokerage.core.constants import EMPLOYEE_RATING_CHECK_CLAUSE


class EmployeePerformance(Base):
    """Dated performance entry: an amount and a 1–5 (or ``Not Rated``) rating."""

    __tablename__ = "employee_performance"
    performance_id = Column(Integer, primary_key=True, autoincrement=True)
    employee_id = Column(
        Integer,
        ForeignKey("employees.employee_id", ondelete="CASCADE"),
        nullable=False,
    )
    performance_date = Column(Date, nullable=False)
    performance_amount = Column(Numeric(15, 2))
    employee_rating = Column(String(20))

    employee = relationship("Employee", back_populates="performance_records")

    __table_args__ = (
        CheckConstraint(
            EMPLOYEE_RATING_CHECK_CLAUSE, name="ck_employee_rating_valid"
        ),
        Index("ix_employee_performance_emp_date", "employee_id", "performance_date"),
    )
