from datetime import date
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from brokerage.schemas.common import ListingStatus, TransactionTerms


class TransactionCreate(BaseModel):
    property_id: int = Field(..., gt=0)
    employee_id: Optional[int] = Field(None, gt=0)
    transaction_date: date
    transaction_amount: Optional[Decimal] = Field(None, ge=0)
    brokerage_fee: Optional[Decimal] = Field(None, ge=0)
    terms: TransactionTerms = TransactionTerms.PENDING


class TermsUpdate(BaseModel):
    terms: TransactionTerms


class TransactionOut(BaseModel):
    """Transaction as stored, plus the listing status it left behind.

    ``listing_status`` is ``None`` when the property has no listing.
    """

    model_config = ConfigDict(from_attributes=True)

    transaction_id: int
    property_id: int
    employee_id: Optional[int] = None
    transaction_date: date
    transaction_amount: Optional[Decimal] = None
    brokerage_fee: Optional[Decimal] = None
    terms: TransactionTerms
    listing_status: Optional[ListingStatus] = None
