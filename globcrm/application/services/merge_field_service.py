"""Merge-field catalog for the email-template editor.

Core fields are fixed per entity type; custom field definitions stored in the
database are appended to the matching group at request time.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from globcrm.application.dtos.merge_field import MergeField
from globcrm.domain.enums import EntityType

if TYPE_CHECKING:
    from globcrm.application.interfaces.repositories import (
        ICustomFieldDefinitionRepository,
    )

logger = logging.getLogger(__name__)

# group key -> ((path, label), ...). Keys render as "<group>.<path>".
CORE_MERGE_FIELDS: dict[str, tuple[tuple[str, str], ...]] = {
    "contact": (
        ("first_name", "First Name"),
        ("last_name", "Last Name"),
        ("email", "Email"),
        ("phone", "Phone"),
        ("job_title", "Job Title"),
        ("company.name", "Company Name"),
    ),
    "company": (
        ("name", "Name"),
        ("industry", "Industry"),
        ("website", "Website"),
        ("phone", "Phone"),
        ("address", "Address"),
    ),
    "deal": (
        ("title", "Title"),
        ("value", "Value"),
        ("stage", "Stage"),
        ("probability", "Probability"),
        ("close_date", "Close Date"),
        ("description", "Description"),
        ("company.name", "Company Name"),
    ),
    "lead": (
        ("first_name", "First Name"),
        ("last_name", "Last Name"),
        ("email", "Email"),
        ("phone", "Phone"),
        ("company_name", "Company Name"),
        ("title", "Job Title"),
        ("source.name", "Source Name"),
    ),
    "quote": (
        ("number", "Quote Number"),
        ("title", "Title"),
        ("description", "Description"),
        ("status", "Status"),
        ("issue_date", "Issue Date"),
        ("expiry_date", "Expiry Date"),
        ("subtotal", "Subtotal"),
        ("discount_total", "Discount Total"),
        ("tax_total", "Tax Total"),
        ("grand_total", "Grand Total"),
        ("notes", "Notes"),
        ("version", "Version"),
    ),
    "organization": (
        ("name", "Name"),
        ("logo_url", "Logo URL"),
        ("address", "Address"),
        ("phone", "Phone"),
        ("email", "Email"),
        ("website", "Website"),
    ),
}

# Entity types whose custom fields are exposed as merge fields.
CUSTOM_FIELD_ENTITY_TYPES: tuple[str, ...] = (
    EntityType.CONTACT.value,
    EntityType.COMPANY.value,
    EntityType.DEAL.value,
    EntityType.LEAD.value,
)


def _core_fields() -> dict[str, list[MergeField]]:
    """Fresh copy of the core catalog (callers may append to the lists)."""
    return {
        group: [
            MergeField(
                key=f"{group}.{path}",
                label=label,
                group=group.capitalize(),
                is_custom_field=False,
            )
            for path, label in fields
        ]
        for group, fields in CORE_MERGE_FIELDS.items()
    }


class MergeFieldService:
    """Builds the merge-field catalog (implements IMergeFieldProvider)."""

    def __init__(self, custom_field_repo: ICustomFieldDefinitionRepository) -> None:
        self.custom_field_repo = custom_field_repo

    async def get_available_fields(self) -> dict[str, list[MergeField]]:
        """Return all merge fields grouped by entity type.

        Includes the core fields and any custom field definitions for
        contact, company, deal, and lead.
        """
        fields = _core_fields()
        custom_fields = await self.custom_field_repo.list_for_entity_types(
            CUSTOM_FIELD_ENTITY_TYPES
        )
        for cf in custom_fields:
            group_key = cf.entity_type.lower()
            group = fields.get(group_key)
            if group is None:
                logger.debug(
                    "Skipping custom field %s: no merge-field group for %s",
                    cf.name,
                    cf.entity_type,
                )
                continue
            group.append(
                MergeField(
                    key=f"{group_key}.custom.{cf.name}",
                    label=cf.label,
                    group=cf.entity_type,
                    is_custom_field=True,
                )
            )
        return fields
