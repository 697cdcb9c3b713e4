from sqlalchemy import (
    Column,
    Date,
    ForeignKey,
    Integer,
    String,
    Text,
    CheckConstraint,
)
from sqlalchemy.orm import relationship
from brokerage.models.base import Base
from sqlalchemy.sql import func

from brokerage.core.constants import CLIENT_RATING_CHECK_CLAUSE, NOT_RATED


class ClientFeedback(Base):
    """Client rating of an employee.

    ``client_rating`` holds ``'1'``–``'5'`` or ``'Not Rated'``; the latter
    is excluded from averages rather than counted as zero.
    """

    __tablename__ = "client_feedback"
    feedback_id = Column(Integer, primary_key=True, autoincrement=True)
    employee_id = Column(
        Integer,
        ForeignKey("employees.employee_id", ondelete="CASCADE"),
        nullable=False,
    )
    client_name = Column(String(200))
    client_rating = Column(String(20), nullable=False, server_default=NOT_RATED)
    comments = Column(Text)
    feedback_date = Column(Date, server_default=func.current_date())

    employee = relationship("Employee", back_populates="feedback")

    __table_args__ = (
        CheckConstraint(CLIENT_RATING_CHECK_CLAUSE, name="ck_client_rating_valid"),
    )
