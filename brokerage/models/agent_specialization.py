from sqlalchemy import Column, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship
from brokerage.models.base import Base


class AgentSpecialization(Base):
    __tablename__ = "agent_specializations"
    specialization_id = Column(Integer, primary_key=True, autoincrement=True)
    employee_id = Column(
        Integer,
        ForeignKey("employees.employee_id", ondelete="CASCADE"),
        nullable=False,
    )
    specialization_area = Column(String(100), nullable=False)

    employee = relationship("Employee", back_populates="specializations")

    __table_args__ = (
        UniqueConstraint(
            "employee_id", "specialization_area", name="uq_agent_specialization"
        ),
    )
