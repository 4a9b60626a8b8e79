"""Search, custom field, and team repository integration tests.

Require Postgres (TEST_DATABASE_URL); the session is rolled back after each
test. Terms use the made-up word "zorblax" so rows already in a shared test
database do not interfere.
"""

import uuid

import pytest

from globcrm.domain.enums import PermissionScope
from globcrm.infrastructure.persistence.models import (
    Activity,
    Company,
    Contact,
    CustomFieldDefinition,
    Deal,
    Pipeline,
    Product,
    Team,
    TeamMember,
)
from globcrm.infrastructure.persistence.repositories import (
    CustomFieldDefinitionRepository,
    GlobalSearchRepository,
    TeamMembershipRepository,
)
from globcrm.infrastructure.services import StaticPermissionResolver


def _only(entity_type: str, scope: PermissionScope = PermissionScope.ALL):
    return StaticPermissionResolver(PermissionScope.NONE, overrides={entity_type: scope})


def _search_repo(db_session, resolver) -> GlobalSearchRepository:
    return GlobalSearchRepository(db_session, resolver, TeamMembershipRepository(db_session))


def _titles(result) -> list[str]:
    return [hit.title for group in result.groups for hit in group.items]


async def _add_team(db_session, *user_ids: uuid.UUID) -> uuid.UUID:
    team = Team(id=uuid.uuid4(), name=f"team-{uuid.uuid4().hex[:8]}")
    db_session.add(team)
    await db_session.flush()
    db_session.add_all([TeamMember(team_id=team.id, user_id=u) for u in user_ids])
    await db_session.flush()
    return team.id


@pytest.mark.requires_db
async def test_full_text_hits_ordered_by_rank(db_session) -> None:
    """More occurrences of the term rank first, regardless of insert order."""
    db_session.add_all(
        [
            Company(name="Zorblax Beta"),
            Company(name="Zorblax Zorblax Zorblax Holdings"),
        ]
    )
    await db_session.flush()

    result = await _search_repo(db_session, _only("Company")).search("zorblax", uuid.uuid4())

    assert _titles(result)[:2] == ["Zorblax Zorblax Zorblax Holdings", "Zorblax Beta"]
    assert result.groups[0].items[0].url.startswith("/companies/")


@pytest.mark.requires_db
async def test_substring_fallback_fills_without_duplicates(db_session) -> None:
    """'Ultrazorb' only matches by substring; 'Zorblax' matches both ways but appears once."""
    db_session.add_all([Company(name="Zorblax Labs"), Company(name="Ultrazorb Inc")])
    await db_session.flush()

    result = await _search_repo(db_session, _only("Company")).search("zorb", uuid.uuid4())

    titles = _titles(result)
    assert titles.index("Zorblax Labs") < titles.index("Ultrazorb Inc")
    assert titles.count("Zorblax Labs") == 1


@pytest.mark.requires_db
async def test_like_metacharacters_match_literally(db_session) -> None:
    db_session.add_all(
        [
            Product(name="Zorblax 50% Kit"),
            Product(name="Zorblax 500 Kit"),
            Product(name="Zorblax_A"),
            Product(name="ZorblaxXA"),
        ]
    )
    await db_session.flush()
    repo = _search_repo(db_session, _only("Product"))

    assert _titles(await repo.search("zorblax 50%", uuid.uuid4())) == ["Zorblax 50% Kit"]
    assert _titles(await repo.search("zorblax_a", uuid.uuid4())) == ["Zorblax_A"]


@pytest.mark.requires_db
async def test_contact_title_and_deal_pipeline_subtitle(db_session) -> None:
    pipeline = Pipeline(id=uuid.uuid4(), name="Enterprise")
    db_session.add(pipeline)
    await db_session.flush()
    db_session.add_all(
        [
            Contact(first_name="Zorblax", last_name="Quinn", job_title="CTO"),
            Deal(title="Zorblax renewal", pipeline_id=pipeline.id),
        ]
    )
    await db_session.flush()
    resolver = StaticPermissionResolver(
        PermissionScope.NONE,
        overrides={"Contact": PermissionScope.ALL, "Deal": PermissionScope.ALL},
    )

    result = await _search_repo(db_session, resolver).search("zorblax", uuid.uuid4())

    by_type = {g.entity_type: g.items for g in result.groups}
    assert [g.entity_type for g in result.groups] == ["Contact", "Deal"]
    assert (by_type["Contact"][0].title, by_type["Contact"][0].subtitle) == ("Zorblax Quinn", "CTO")
    assert (by_type["Deal"][0].title, by_type["Deal"][0].subtitle) == ("Zorblax renewal", "Enterprise")


@pytest.mark.requires_db
async def test_team_scope_without_teams_matches_nothing(db_session) -> None:
    db_session.add(Activity(subject="Zorblax call", type="Call", owner_id=uuid.uuid4()))
    await db_session.flush()
    caller = uuid.uuid4()

    hidden = await _search_repo(db_session, _only("Activity", PermissionScope.TEAM)).search(
        "zorblax", caller
    )
    visible = await _search_repo(db_session, _only("Activity")).search("zorblax", caller)

    assert hidden.groups == ()
    assert "Zorblax call" in _titles(visible)


@pytest.mark.requires_db
async def test_team_scope_limits_to_teammates_and_skips_unowned(db_session) -> None:
    caller, teammate = uuid.uuid4(), uuid.uuid4()
    await _add_team(db_session, caller, teammate)
    db_session.add_all(
        [
            Activity(subject="Zorblax sync", type="Meeting", owner_id=teammate),
            Activity(subject="Zorblax orphan", type="Task", owner_id=None),
            Activity(subject="Zorblax other", type="Call", owner_id=uuid.uuid4()),
        ]
    )
    await db_session.flush()

    result = await _search_repo(db_session, _only("Activity", PermissionScope.TEAM)).search(
        "zorblax", caller
    )

    assert _titles(result) == ["Zorblax sync"]


@pytest.mark.requires_db
async def test_own_scope_limits_to_caller(db_session) -> None:
    caller = uuid.uuid4()
    db_session.add_all(
        [
            Activity(subject="Zorblax mine", type="Call", owner_id=caller),
            Activity(subject="Zorblax theirs", type="Call", owner_id=uuid.uuid4()),
        ]
    )
    await db_session.flush()

    result = await _search_repo(db_session, _only("Activity", PermissionScope.OWN)).search(
        "zorblax", caller
    )

    assert _titles(result) == ["Zorblax mine"]


@pytest.mark.requires_db
async def test_custom_fields_exclude_deleted_and_keep_sort_order(db_session) -> None:
    suffix = uuid.uuid4().hex[:8]
    db_session.add_all(
        [
            CustomFieldDefinition(
                entity_type="Contact", name=f"b_{suffix}", label="B", field_type="Text", sort_order=2
            ),
            CustomFieldDefinition(
                entity_type="Contact", name=f"a_{suffix}", label="A", field_type="Text", sort_order=1
            ),
            CustomFieldDefinition(
                entity_type="Contact",
                name=f"gone_{suffix}",
                label="Gone",
                field_type="Text",
                sort_order=0,
                is_deleted=True,
            ),
            CustomFieldDefinition(
                entity_type="Product", name=f"p_{suffix}", label="P", field_type="Text"
            ),
        ]
    )
    await db_session.flush()

    rows = await CustomFieldDefinitionRepository(db_session).list_for_entity_types(("Contact",))

    ours = [r.name for r in rows if r.name.endswith(suffix)]
    assert ours == [f"a_{suffix}", f"b_{suffix}"]


@pytest.mark.requires_db
async def test_team_member_ids_span_all_caller_teams(db_session) -> None:
    caller, a, b, outsider = (uuid.uuid4() for _ in range(4))
    await _add_team(db_session, caller, a)
    await _add_team(db_session, caller, b)
    await _add_team(db_session, outsider)
    repo = TeamMembershipRepository(db_session)

    member_ids = await repo.get_team_member_ids(caller)

    assert sorted(member_ids) == sorted([caller, a, b])
    assert await repo.get_team_member_ids(uuid.uuid4()) == []
