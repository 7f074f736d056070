import json

import pytest
from sqlalchemy import inspect

from core.errors import Forbidden, NotFound, Unauthenticated, ValidationError
from crud.resource_crud import (
    ResourceKind,
    create_resource,
    delete_resource,
    get_resource,
    list_resources,
    update_resource,
)
from models.idea import ProjectIdea
from models.project import Project
from schemas.project_schema import ResourceCreate, ResourceUpdate


def _payload(**overrides):
    data = {"title": "X", "summary": "A summary", "authors": ["A"]}
    data.update(overrides)
    return ResourceCreate(**data)


def _snapshot(row):
    return {attr.key: getattr(row, attr.key) for attr in inspect(row).mapper.column_attrs}


@pytest.mark.parametrize("kind", list(ResourceKind))
def test_create_sets_author_and_timestamps(db, kind):
    row = create_resource(db, kind, _payload(location="  "), author_id="alice")
    assert row.id is not None
    assert row.author_id == "alice"
    assert row.created_at == row.updated_at
    assert json.loads(row.authors) == ["A"]
    assert row.location is None


@pytest.mark.parametrize("field", ["title", "summary"])
def test_create_rejects_blank_required_text(db, field):
    with pytest.raises(ValidationError):
        create_resource(db, ResourceKind.PROJECT, _payload(**{field: "   "}), author_id="alice")
    assert db.query(Project).count() == 0


def test_create_rejects_empty_authors(db):
    with pytest.raises(ValidationError):
        create_resource(db, ResourceKind.PROJECT, _payload(authors=""), author_id="alice")
    assert db.query(Project).count() == 0


def test_create_requires_author(db):
    with pytest.raises(Unauthenticated):
        create_resource(db, ResourceKind.IDEA, _payload(), author_id=None)


def test_ideas_and_projects_have_independent_tables(db):
    create_resource(db, ResourceKind.PROJECT, _payload(), author_id="alice")
    create_resource(db, ResourceKind.IDEA, _payload(title="Idea"), author_id="alice")
    assert db.query(Project).count() == 1
    assert db.query(ProjectIdea).count() == 1
    with pytest.raises(NotFound):
        get_resource(db, ResourceKind.IDEA, 2)


def test_list_is_newest_first(db):
    first = create_resource(db, ResourceKind.PROJECT, _payload(title="first"), author_id="alice")
    second = create_resource(db, ResourceKind.PROJECT, _payload(title="second"), author_id="bob")
    rows = list_resources(db, ResourceKind.PROJECT, caller_id="carol")
    assert [r.id for r in rows] == [second.id, first.id]


@pytest.mark.parametrize("kind", list(ResourceKind))
def test_list_requires_caller(db, kind):
    with pytest.raises(Unauthenticated):
        list_resources(db, kind, caller_id=None)


def test_get_missing_raises_not_found(db):
    with pytest.raises(NotFound):
        get_resource(db, ResourceKind.PROJECT, 999)


def test_partial_update_keeps_omitted_fields(db):
    row = create_resource(db, ResourceKind.PROJECT, _payload(location="Berlin"), author_id="alice")
    before = row.updated_at
    updated = update_resource(db, ResourceKind.PROJECT, row.id, ResourceUpdate(summary="New summary"), caller_id="alice")
    assert updated.title == "X"
    assert updated.summary == "New summary"
    assert updated.location == "Berlin"
    assert updated.updated_at >= before


def test_update_can_clear_optional_field(db):
    row = create_resource(db, ResourceKind.IDEA, _payload(location="Berlin"), author_id="alice")
    updated = update_resource(db, ResourceKind.IDEA, row.id, ResourceUpdate(location=""), caller_id="alice")
    assert updated.location is None


def test_update_by_non_author_is_forbidden_and_changes_nothing(db):
    row = create_resource(db, ResourceKind.PROJECT, _payload(), author_id="alice")
    before = _snapshot(row)
    with pytest.raises(Forbidden):
        update_resource(db, ResourceKind.PROJECT, row.id, ResourceUpdate(title="Hijacked"), caller_id="mallory")
    db.expire_all()
    assert _snapshot(get_resource(db, ResourceKind.PROJECT, row.id)) == before


def test_update_with_blank_title_fails_and_keeps_row(db):
    row = create_resource(db, ResourceKind.PROJECT, _payload(), author_id="alice")
    before = _snapshot(row)
    with pytest.raises(ValidationError):
        update_resource(
            db, ResourceKind.PROJECT, row.id,
            ResourceUpdate(title="", summary="would be applied"),
            caller_id="alice",
        )
    db.expire_all()
    after = get_resource(db, ResourceKind.PROJECT, row.id)
    assert after.title == "X"
    assert _snapshot(after) == before


def test_update_with_empty_authors_fails(db):
    row = create_resource(db, ResourceKind.IDEA, _payload(), author_id="alice")
    with pytest.raises(ValidationError):
        update_resource(db, ResourceKind.IDEA, row.id, ResourceUpdate(authors=" , "), caller_id="alice")


def test_update_missing_raises_not_found(db):
    with pytest.raises(NotFound):
        update_resource(db, ResourceKind.PROJECT, 42, ResourceUpdate(title="t"), caller_id="alice")


def test_author_id_is_not_updatable(db):
    row = create_resource(db, ResourceKind.PROJECT, _payload(), author_id="alice")
    update_resource(db, ResourceKind.PROJECT, row.id, ResourceUpdate.model_validate({"author_id": "bob"}), caller_id="alice")
    assert get_resource(db, ResourceKind.PROJECT, row.id).author_id == "alice"


def test_delete_by_owner(db):
    row = create_resource(db, ResourceKind.IDEA, _payload(), author_id="alice")
    delete_resource(db, ResourceKind.IDEA, row.id, caller_id="alice")
    assert db.query(ProjectIdea).count() == 0


def test_delete_by_non_owner_is_forbidden(db):
    row = create_resource(db, ResourceKind.PROJECT, _payload(), author_id="alice")
    with pytest.raises(Forbidden):
        delete_resource(db, ResourceKind.PROJECT, row.id, caller_id="bob")
    assert db.query(Project).count() == 1


def test_delete_missing_raises_not_found(db):
    with pytest.raises(NotFound):
        delete_resource(db, ResourceKind.PROJECT, 5, caller_id="alice")


def test_mutations_emit_change_events(db, captured_events):
    row = create_resource(db, ResourceKind.IDEA, _payload(), author_id="alice")
    update_resource(db, ResourceKind.IDEA, row.id, ResourceUpdate(title="Y"), caller_id="alice")
    delete_resource(db, ResourceKind.IDEA, row.id, caller_id="alice")
    assert [(e.kind, e.resource_id, e.action) for e in captured_events] == [
        ("idea", row.id, "created"),
        ("idea", row.id, "updated"),
        ("idea", row.id, "deleted"),
    ]


def test_failed_mutation_emits_nothing(db, captured_events):
    with pytest.raises(ValidationError):
        create_resource(db, ResourceKind.PROJECT, _payload(title=""), author_id="alice")
    assert captured_events == []


def test_create_with_absent_fields_is_invalid(db):
    with pytest.raises(ValidationError):
        create_resource(db, ResourceKind.PROJECT, ResourceCreate(summary="s", authors=["A"]), author_id="alice")
    with pytest.raises(ValidationError):
        create_resource(db, ResourceKind.IDEA, ResourceCreate(title="t", summary="s"), author_id="alice")
    assert db.query(Project).count() == 0
    assert db.query(ProjectIdea).count() == 0
