from dataclasses import asdict

import pytest

from uxdebt.config import DEBT_ITEMS_KEY
from uxdebt.domain.errors import NotFoundError, PersistenceError, ValidationError
from uxdebt.database.repositories import debt_items as debt_repo
from uxdebt.domain.filters import FilterSpec
from uxdebt.domain.models import DebtDraft, DebtType, Severity, Status
from uxdebt.services import filter_service
from uxdebt.services.debt_service import DebtService, next_status, validate_draft


def test_create_starts_open_with_timestamps(debts, make_draft):
    item = debts.create(make_draft())
    assert item.status == Status.OPEN
    assert item.type == DebtType.ACCESSIBILITY
    assert item.severity == Severity.HIGH
    assert item.created_at and item.created_at == item.updated_at
    assert debts.list_all() == [item]


def test_create_assigns_unique_ids(debts, make_draft):
    created = [debts.create(make_draft(title=f"Issue {n}")) for n in range(25)]
    ids = [i.id for i in created]
    assert len(set(ids)) == len(ids)


def test_create_persists(store, debts, make_draft):
    item = debts.create(make_draft(figma_link=" https://figma.com/file/x "))
    reloaded = DebtService(store).list_all()
    assert reloaded == [item]
    assert reloaded[0].figma_link == "https://figma.com/file/x"


def test_create_strips_text(debts, make_draft):
    item = debts.create(make_draft(title="  Padded  "))
    assert item.title == "Padded"


def test_missing_title_and_logged_by_are_both_reported(debts, make_draft):
    with pytest.raises(ValidationError) as exc_info:
        debts.create(make_draft(title="", logged_by="   "))
    assert set(exc_info.value.fields) == {"title", "logged_by"}
    assert debts.list_all() == []


def test_validation_reports_every_field():
    errors = validate_draft(DebtDraft())
    assert set(errors) == {
        "project_id",
        "title",
        "screen",
        "type",
        "severity",
        "description",
        "recommendation",
        "logged_by",
    }


def test_invalid_enum_values_rejected(debts, make_draft):
    with pytest.raises(ValidationError) as exc_info:
        debts.create(make_draft(type="Performance", severity="Critical"))
    assert set(exc_info.value.fields) == {"type", "severity"}


def test_advance_walks_the_lifecycle(debts, make_draft):
    item = debts.create(make_draft())
    seen = [item.status]
    for _ in range(3):
        item = debts.advance(item)
        seen.append(item.status)
    assert seen == [Status.OPEN, Status.IN_PROGRESS, Status.FIXED, Status.RESOLVED]

    again = debts.advance(item)
    assert again.status == Status.RESOLVED
    assert again == item


def test_advance_resolved_is_a_noop(debts, make_draft):
    item = debts.set_status(debts.create(make_draft()), Status.RESOLVED)
    result = item
    for _ in range(5):
        result = debts.advance(result)
    assert result == item


def test_next_status_chain():
    assert next_status(Status.OPEN) == Status.IN_PROGRESS
    assert next_status(Status.IN_PROGRESS) == Status.FIXED
    assert next_status(Status.FIXED) == Status.RESOLVED
    assert next_status(Status.RESOLVED) is None


def test_set_status_moves_backward_and_skips(debts, make_draft):
    item = debts.create(make_draft())
    item = debts.set_status(item, Status.RESOLVED)
    assert item.status == Status.RESOLVED
    item = debts.set_status(item, "In Progress")
    assert item.status == Status.IN_PROGRESS


def test_set_status_twice_is_idempotent(debts, make_draft):
    item = debts.create(make_draft())
    first = debts.set_status(item, Status.FIXED)
    second = debts.set_status(first, Status.FIXED)
    a, b = asdict(first), asdict(second)
    a.pop("updated_at")
    b.pop("updated_at")
    assert a == b


def test_set_status_rejects_unknown(debts, make_draft):
    item = debts.create(make_draft())
    with pytest.raises(ValidationError) as exc_info:
        debts.set_status(item, "Closed")
    assert exc_info.value.fields == ["status"]
    assert debts.get(item.id).status == Status.OPEN


def test_status_change_persists(store, debts, make_draft):
    item = debts.advance(debts.create(make_draft()))
    assert DebtService(store).get(item.id).status == Status.IN_PROGRESS


def test_remove(store, debts, make_draft):
    keep = debts.create(make_draft(title="Keep"))
    drop = debts.create(make_draft(title="Drop"))
    debts.remove(drop.id)
    assert debts.list_all() == [keep]
    assert DebtService(store).list_all() == [keep]


def test_remove_unknown_id_is_noop(store, debts, make_draft):
    item = debts.create(make_draft())
    saves = []
    original_save = store.save
    store.save = lambda key, items: saves.append(key) or original_save(key, items)
    debts.remove("does-not-exist")
    assert debts.list_all() == [item]
    assert saves == []


def test_get_unknown_raises_not_found(debts):
    with pytest.raises(NotFoundError):
        debts.get("nope")


def test_list_for_project_keeps_order(debts, make_draft):
    a = debts.create(make_draft(project_id="p1", title="A"))
    debts.create(make_draft(project_id="p2", title="B"))
    c = debts.create(make_draft(project_id="p1", title="C"))
    assert debts.list_for_project("p1") == [a, c]


def test_failed_save_keeps_optimistic_update(store, debts, make_draft):
    item = debts.create(make_draft())

    def failing_save(key, items):
        raise PersistenceError("disk full")

    store.save = failing_save
    with pytest.raises(PersistenceError) as exc_info:
        debts.advance(item)
    assert exc_info.value.item.status == Status.IN_PROGRESS
    assert debts.get(item.id).status == Status.IN_PROGRESS


def test_failed_save_on_create_keeps_item_in_memory(store, debts, make_draft):
    def failing_save(key, items):
        raise PersistenceError("disk full")

    store.save = failing_save
    with pytest.raises(PersistenceError) as exc_info:
        debts.create(make_draft())
    assert debts.list_all() == [exc_info.value.item]


def test_malformed_records_are_skipped(store, make_item):
    good = make_item()
    store.save(
        DEBT_ITEMS_KEY,
        [
            debt_repo.to_record(good),
            {"id": "x", "type": "Visual", "severity": "High", "status": "Closed"},
            {"title": "no id"},
        ],
    )
    assert DebtService(store).list_all() == [good]


@pytest.mark.parametrize("field", ["title", "screen", "description", "recommendation", "loggedBy"])
def test_records_with_non_text_fields_are_skipped(store, make_item, field):
    good = make_item()
    bad = debt_repo.to_record(make_item())
    bad[field] = 42
    store.save(DEBT_ITEMS_KEY, [debt_repo.to_record(good), bad])

    items = DebtService(store).list_all()
    assert items == [good]
    # search over the loaded collection must not trip on the bad record
    assert filter_service.apply(items, FilterSpec(search_text="zz")) == []
