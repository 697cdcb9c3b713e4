from sqlalchemy import Column, Date, ForeignKey, Integer, Numeric, Index
from sqlalchemy.orm import relationship
from brokerage.models.base import Base


class Payroll(Base):
    """Pay line for an employee.  ``bonus_amount`` may be NULL (no bonus)."""

    __tablename__ = "payroll"
    payroll_id = Column(Integer, primary_key=True, autoincrement=True)
    employee_id = Column(
        Integer,
        ForeignKey("employees.employee_id", ondelete="CASCADE"),
        nullable=False,
    )
    pay_date = Column(Date, nullable=False)
    salary_amount = Column(Numeric(15, 2), nullable=False)
    bonus_amount = Column(Numeric(15, 2))

    employee = relationship("Employee", back_populates="payroll_entries")

    __table_args__ = (Index("ix_payroll_employee_id", "employee_id"),)
