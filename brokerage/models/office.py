from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from brokerage.models.base import Base


class Office(Base):
    """Branch office.  Employees, payroll and operating expenses roll up here."""

    __tablename__ = "offices"
    office_id = Column(Integer, primary_key=True, autoincrement=True)
    address = Column(String(255), nullable=False)
    city = Column(String(100), nullable=False)
    state = Column(String(50))
    zip_code = Column(String(10))
    phone = Column(String(20))

    employees = relationship("Employee", back_populates="office")
    financial_records = relationship(
        "FinancialRecord", back_populates="office", cascade="all, delete-orphan"
    )
