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


class MarketingCampaign(Base):
    """Marketing campaign for a single property."""

    __tablename__ = "marketing_campaigns"
    campaign_id = Column(Integer, primary_key=True, autoincrement=True)
    property_id = Column(
        Integer,
        ForeignKey("properties.property_id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
    )
    campaign_name = Column(String(200), nullable=False)
    start_date = Column(Date, nullable=False)
    end_date = Column(Date)
    budget = Column(Numeric(15, 2), nullable=False, server_default="0")

    property = relationship("Property")

    __table_args__ = (
        CheckConstraint("budget >= 0", name="ck_campaign_budget_nonneg"),
        CheckConstraint(
            "end_date IS NULL OR end_date >= start_date",
            name="ck_campaign_dates_ordered",
        ),
    )
