import pytest

from uxdebt.config import PROJECTS_KEY, UNKNOWN_PROJECT_LABEL
from uxdebt.domain.errors import NotFoundError, ValidationError
from uxdebt.domain.models import Status
from uxdebt.services.project_service import ProjectService


def test_create_and_reload(store, projects):
    project = projects.create("  Main Website ", "Marketing site")
    assert project.name == "Main Website"
    assert project.created_at
    assert ProjectService(store).list_all() == [project]


def test_create_requires_name(projects):
    with pytest.raises(ValidationError) as exc_info:
        projects.create("   ")
    assert exc_info.value.fields == ["name"]
    assert projects.list_all() == []


def test_get_and_placeholder_name(projects):
    project = projects.create("Mobile App")
    assert projects.get(project.id) == project
    assert projects.name_for(project.id) == "Mobile App"
    assert projects.name_for("dangling") == UNKNOWN_PROJECT_LABEL
    with pytest.raises(NotFoundError):
        projects.get("dangling")


def test_remove_does_not_touch_debt_items(store, projects, debts, make_draft):
    project = projects.create("Admin")
    item = debts.create(make_draft(project_id=project.id))
    projects.remove(project.id)
    projects.remove(project.id)  # second removal is a no-op
    assert projects.list_all() == []
    assert debts.list_all() == [item]
    assert projects.name_for(item.project_id) == UNKNOWN_PROJECT_LABEL


def test_status_counts(projects, make_item):
    items = [
        make_item(project_id="p1", status=Status.OPEN),
        make_item(project_id="p1", status=Status.OPEN),
        make_item(project_id="p1", status=Status.RESOLVED),
        make_item(project_id="p2", status=Status.FIXED),
    ]
    counts = projects.status_counts("p1", items)
    assert counts == {
        Status.OPEN: 2,
        Status.IN_PROGRESS: 0,
        Status.FIXED: 0,
        Status.RESOLVED: 1,
    }


def test_name_map(projects):
    a = projects.create("A")
    b = projects.create("B")
    assert projects.name_map() == {a.id: "A", b.id: "B"}


def test_records_with_non_text_names_are_skipped(store):
    store.save(
        PROJECTS_KEY,
        [
            {"id": "ok", "name": "Main Website"},
            {"id": "bad", "name": 42},
            {"id": "worse", "name": "X", "description": ["list"]},
        ],
    )
    assert [p.id for p in ProjectService(store).list_all()] == ["ok"]
