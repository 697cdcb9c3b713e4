from brokerage.models.base import Base
from brokerage.models.office import Office
from brokerage.models.employee import Employee, Manages
from brokerage.models.property import Property
from brokerage.models.property_listing import PropertyListing
from brokerage.models.transaction import Transaction
from brokerage.models.employee_performance import EmployeePerformance
from brokerage.models.payroll import Payroll
from brokerage.models.financial_record import FinancialRecord
from brokerage.models.marketing_campaign import MarketingCampaign
from brokerage.models.agent_specialization import AgentSpecialization
from brokerage.models.client_feedback import ClientFeedback
from brokerage.models.event import Event

# Import view DDL and event listeners to register them
from brokerage.models import views  # noqa: F401
from brokerage.models import listeners  # noqa: F401

__all__ = [
    "Base",
    "Office",
    "Employee",
    "Manages",
    "Property",
    "PropertyListing",
    "Transaction",
    "EmployeePerformance",
    "Payroll",
    "FinancialRecord",
    "MarketingCampaign",
    "AgentSpecialization",
    "ClientFeedback",
    "Event",
]
