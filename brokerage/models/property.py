from sqlalchemy import Column, Integer, Numeric, String
from sqlalchemy.orm import relationship
from brokerage.models.base import Base


class Property(Base):
    """Physical property.  Listings, transactions and campaigns reference it."""

    __tablename__ = "properties"
    property_id = Column(Integer, primary_key=True, autoincrement=True)
    property_type = Column(String(50))
    bedrooms = Column(Integer)
    bathrooms = Column(Numeric(3, 1))
    square_feet = Column(Integer)

    listing = relationship("PropertyListing", back_populates="property", uselist=False)
    transactions = relationship("Transaction", back_populates="property")
