from sqlalchemy import (
    Column,
    Date,
    ForeignKey,
    Integer,
    Numeric,
    String,
    CheckConstraint,
)
from sqlalchemy.orm import relationship
from brokerage.models.base import Base
from sqlalchemy.sql import func

from brokerage.core.constants import LISTING_STATUS_CHECK_CLAUSE


class PropertyListing(Base):
    """Market listing for a property.

    ``status`` is derived state: ``available``/``sold`` are kept in sync
    with ``transactions.terms`` by the status-sync hook registered in
    :mod:`brokerage.models.listeners`.  Other statuses (``rented``,
    ``withdrawn`` ...) are set directly and left alone by the hook.
    One listing per property.
    """

    __tablename__ = "property_listings"
    listing_id = Column(Integer, primary_key=True, autoincrement=True)
    property_id = Column(
        Integer,
        ForeignKey("properties.property_id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
    )
    employee_id = Column(
        Integer, ForeignKey("employees.employee_id", ondelete="SET NULL")
    )
    address = Column(String(255), nullable=False)
    zip_code = Column(String(10))
    listing_price = Column(Numeric(15, 2))
    listing_date = Column(Date, nullable=False, server_default=func.current_date())
    status = Column(String(20), nullable=False, server_default="available")

    property = relationship("Property", back_populates="listing")
    employee = relationship("Employee", back_populates="listings")

    __table_args__ = (
        CheckConstraint(LISTING_STATUS_CHECK_CLAUSE, name="ck_listing_status_valid"),
    )
