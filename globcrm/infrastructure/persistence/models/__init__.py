"""SQLAlchemy ORM models for the CRM records read by this service."""

from globcrm.infrastructure.persistence.models.activity import Activity
from globcrm.infrastructure.persistence.models.company import Company
from globcrm.infrastructure.persistence.models.contact import Contact
from globcrm.infrastructure.persistence.models.custom_field import CustomFieldDefinition
from globcrm.infrastructure.persistence.models.deal import Deal, Pipeline
from globcrm.infrastructure.persistence.models.product import Product
from globcrm.infrastructure.persistence.models.quote import Quote
from globcrm.infrastructure.persistence.models.request import ServiceRequest
from globcrm.infrastructure.persistence.models.team import Team, TeamMember

__all__ = [
    "Activity",
    "Company",
    "Contact",
    "CustomFieldDefinition",
    "Deal",
    "Pipeline",
    "Product",
    "Quote",
    "ServiceRequest",
    "Team",
    "TeamMember",
]
