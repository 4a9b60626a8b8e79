"""DTOs for the email-template merge-field catalog (no dependency on ORM)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class MergeField:
    """One insertable placeholder, e.g. ``contact.first_name``."""

    key: str
    label: str
    group: str  # Display group, e.g. "Contact"
    is_custom_field: bool


@dataclass(frozen=True)
class CustomFieldSummary:
    """Custom field definition projected for the merge-field catalog."""

    entity_type: str  # e.g. "Contact"
    name: str
    label: str
