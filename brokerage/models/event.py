from sqlalchemy import (
    ARRAY,
    Column,
    Date,
    ForeignKey,
    Integer,
    String,
    Time,
    CheckConstraint,
    Index,
)
from sqlalchemy.orm import relationship
from brokerage.models.base import Base

from brokerage.core.constants import EVENT_TYPE_CHECK_CLAUSE


class Event(Base):
    """Open house or viewing appointment at a listed property."""

    __tablename__ = "events"
    event_id = Column(Integer, primary_key=True, autoincrement=True)
    property_id = Column(
        Integer,
        ForeignKey("properties.property_id", ondelete="CASCADE"),
        nullable=False,
    )
    event_type = Column(String(20), nullable=False)
    event_date = Column(Date, nullable=False)
    start_time = Column(Time)
    end_time = Column(Time)
    attendees = Column(ARRAY(String))

    property = relationship("Property")

    __table_args__ = (
        CheckConstraint(EVENT_TYPE_CHECK_CLAUSE, name="ck_event_type_valid"),
        CheckConstraint(
            "end_time IS NULL OR start_time IS NULL OR end_time > start_time",
            name="ck_event_time_window",
        ),
        Index("ix_events_event_date", "event_date"),
    )
