from sqlalchemy import (
    Column,
    Date,
    ForeignKey,
    Integer,
    String,
    CheckConstraint,
    Index,
)
from sqlalchemy.orm import relationship
from brokerage.models.base import Base


class Employee(Base):
    """Brokerage employee (agent, manager, or back-office staff).

    ``department`` scopes the sales-ranking report; ``role`` is
    informational.  Management relations live in :class:`Manages`.
    """

    __tablename__ = "employees"
    employee_id = Column(Integer, primary_key=True, autoincrement=True)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    email = Column(String(255), unique=True)
    phone = Column(String(20))
    role = Column(String(50))
    department = Column(String(50))
    office_id = Column(
        Integer, ForeignKey("offices.office_id", ondelete="SET NULL")
    )
    hire_date = Column(Date)

    office = relationship("Office", back_populates="employees")
    transactions = relationship("Transaction", back_populates="employee")
    listings = relationship("PropertyListing", back_populates="employee")
    performance_records = relationship(
        "EmployeePerformance", back_populates="employee", cascade="all, delete-orphan"
    )
    payroll_entries = relationship(
        "Payroll", back_populates="employee", cascade="all, delete-orphan"
    )
    specializations = relationship(
        "AgentSpecialization", back_populates="employee", cascade="all, delete-orphan"
    )
    feedback = relationship(
        "ClientFeedback", back_populates="employee", cascade="all, delete-orphan"
    )

    __table_args__ = (
        Index("ix_employees_office_id", "office_id"),
        Index("ix_employees_department", "department"),
    )


class Manages(Base):
    """Manager → subordinate edge.

    Acyclic in practice; only self-management is rejected.
    """

    __tablename__ = "manages"
    manager_id = Column(
        Integer,
        ForeignKey("employees.employee_id", ondelete="CASCADE"),
        primary_key=True,
    )
    employee_id = Column(
        Integer,
        ForeignKey("employees.employee_id", ondelete="CASCADE"),
        primary_key=True,
    )

    manager = relationship("Employee", foreign_keys=[manager_id])
    employee = relationship("Employee", foreign_keys=[employee_id])

    __table_args__ = (
        CheckConstraint("manager_id <> employee_id", name="ck_manages_not_self"),
        Index("ix_manages_employee_id", "employee_id"),
    )
