from sqlalchemy import Column, Date, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import relationship
from brokerage.models.base import Base


class FinancialRecord(Base):
    """Operational expense booked against an office."""

    __tablename__ = "financial_records"
    record_id = Column(Integer, primary_key=True, autoincrement=True)
    office_id = Column(
        Integer,
        ForeignKey("offices.office_id", ondelete="CASCADE"),
        nullable=False,
    )
    record_date = Column(Date, nullable=False)
    amount = Column(Numeric(15, 2), nullable=False)
    category = Column(String(50))
    description = Column(Text)

    office = relationship("Office", back_populates="financial_records")
