"""MergeFieldService: core catalog plus custom field definitions."""

import pytest

from globcrm.application.dtos.merge_field import CustomFieldSummary
from globcrm.application.services.merge_field_service import (
    CORE_MERGE_FIELDS,
    CUSTOM_FIELD_ENTITY_TYPES,
    MergeFieldService,
)


class StubCustomFieldRepo:
    def __init__(self, fields: list[CustomFieldSummary]) -> None:
        self.fields = fields
        self.calls: list[tuple[str, ...]] = []

    async def list_for_entity_types(self, entity_types):
        self.calls.append(tuple(entity_types))
        return list(self.fields)


@pytest.fixture
def empty_service() -> MergeFieldService:
    return MergeFieldService(StubCustomFieldRepo([]))


async def test_core_catalog_groups_and_keys(empty_service: MergeFieldService) -> None:
    fields = await empty_service.get_available_fields()
    assert list(fields) == list(CORE_MERGE_FIELDS)
    assert [f.key for f in fields["contact"]] == [
        "contact.first_name",
        "contact.last_name",
        "contact.email",
        "contact.phone",
        "contact.job_title",
        "contact.company.name",
    ]
    assert {f.group for f in fields["organization"]} == {"Organization"}
    assert not any(f.is_custom_field for group in fields.values() for f in group)


async def test_quote_catalog_has_totals(empty_service: MergeFieldService) -> None:
    fields = await empty_service.get_available_fields()
    keys = [f.key for f in fields["quote"]]
    assert "quote.grand_total" in keys
    assert keys[0] == "quote.number"


async def test_custom_fields_requested_for_supported_types() -> None:
    repo = StubCustomFieldRepo([])
    await MergeFieldService(repo).get_available_fields()
    assert repo.calls == [CUSTOM_FIELD_ENTITY_TYPES]
    assert CUSTOM_FIELD_ENTITY_TYPES == ("Contact", "Company", "Deal", "Lead")


async def test_custom_fields_appended_in_repository_order() -> None:
    repo = StubCustomFieldRepo(
        [
            CustomFieldSummary(entity_type="Contact", name="birthday", label="Birthday"),
            CustomFieldSummary(entity_type="Lead", name="budget", label="Budget"),
            CustomFieldSummary(entity_type="Contact", name="linkedin", label="LinkedIn"),
        ]
    )
    fields = await MergeFieldService(repo).get_available_fields()

    custom_contact = [f for f in fields["contact"] if f.is_custom_field]
    assert [f.key for f in custom_contact] == ["contact.custom.birthday", "contact.custom.linkedin"]
    assert custom_contact[0].group == "Contact"
    assert fields["lead"][-1].key == "lead.custom.budget"
    assert fields["contact"][: len(CORE_MERGE_FIELDS["contact"])] == [
        f for f in fields["contact"] if not f.is_custom_field
    ]


async def test_custom_field_without_group_is_skipped() -> None:
    repo = StubCustomFieldRepo(
        [CustomFieldSummary(entity_type="Product", name="color", label="Color")]
    )
    fields = await MergeFieldService(repo).get_available_fields()
    assert "product" not in fields


async def test_catalog_is_rebuilt_per_call() -> None:
    """Custom fields from one call do not leak into the next."""
    repo = StubCustomFieldRepo(
        [CustomFieldSummary(entity_type="Deal", name="region", label="Region")]
    )
    service = MergeFieldService(repo)
    await service.get_available_fields()
    repo.fields = []
    fields = await service.get_available_fields()
    assert len(fields["deal"]) == len(CORE_MERGE_FIELDS["deal"])
