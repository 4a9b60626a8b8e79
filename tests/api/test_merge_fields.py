"""GET /api/merge-fields: catalog shape, custom fields, and auth."""

from httpx import AsyncClient

from globcrm.api.dependencies import get_custom_field_repo
from globcrm.application.dtos.merge_field import CustomFieldSummary
from globcrm.main import app


class FakeCustomFieldRepository:
    def __init__(self, fields: list[CustomFieldSummary] | None = None) -> None:
        self.fields = fields or []
        self.requested: list[tuple[str, ...]] = []

    async def list_for_entity_types(self, entity_types):
        self.requested.append(tuple(entity_types))
        return [f for f in self.fields if f.entity_type in entity_types]


def _use_repo(repo: FakeCustomFieldRepository) -> None:
    app.dependency_overrides[get_custom_field_repo] = lambda: repo


async def test_merge_fields_returns_core_groups(
    client: AsyncClient, auth_headers: dict[str, str]
) -> None:
    """Every core group is present, keyed by lowercase entity type."""
    _use_repo(FakeCustomFieldRepository())
    response = await client.get("/api/merge-fields", headers=auth_headers)
    assert response.status_code == 200
    data = response.json()
    assert list(data) == ["contact", "company", "deal", "lead", "quote", "organization"]
    assert data["contact"][0] == {
        "key": "contact.first_name",
        "label": "First Name",
        "group": "Contact",
        "isCustomField": False,
    }


async def test_merge_fields_appends_custom_fields_after_core(
    client: AsyncClient, auth_headers: dict[str, str]
) -> None:
    _use_repo(
        FakeCustomFieldRepository(
            [CustomFieldSummary(entity_type="Deal", name="region", label="Region")]
        )
    )
    response = await client.get("/api/merge-fields", headers=auth_headers)
    deal_fields = response.json()["deal"]
    assert deal_fields[-1] == {
        "key": "deal.custom.region",
        "label": "Region",
        "group": "Deal",
        "isCustomField": True,
    }
    assert all(not f["isCustomField"] for f in deal_fields[:-1])


async def test_merge_fields_without_token_returns_401(client: AsyncClient) -> None:
    repo = FakeCustomFieldRepository()
    _use_repo(repo)
    response = await client.get("/api/merge-fields")
    assert response.status_code == 401
    assert repo.requested == []


async def test_merge_fields_token_without_sub_returns_500(
    server_error_client: AsyncClient,
) -> None:
    from globcrm.infrastructure.security.jwt import create_access_token

    _use_repo(FakeCustomFieldRepository())
    token = create_access_token({"email": "a@example.com"})
    response = await server_error_client.get(
        "/api/merge-fields", headers={"Authorization": f"Bearer {token}"}
    )
    assert response.status_code == 500
