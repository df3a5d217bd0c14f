from pathlib import Path

import pytest

from uxdebt.database.connection import transaction
from uxdebt.database.store import CollectionStore
from uxdebt.domain.errors import PersistenceError


def _write_raw(store: CollectionStore, key: str, payload: str):
    with transaction(store.db_path) as conn:
        conn.execute(
            "INSERT OR REPLACE INTO collections (key, payload, updated_at) VALUES (?, ?, ?)",
            (key, payload, "2024-01-01T00:00:00+00:00"),
        )


def test_load_never_written_is_empty(store):
    assert store.load("projects") == []
    assert store.has("projects") is False


def test_save_then_load(store):
    store.save("projects", [{"id": "1", "name": "Web"}, {"id": "2", "name": "App"}])
    assert store.load("projects") == [{"id": "1", "name": "Web"}, {"id": "2", "name": "App"}]
    assert store.has("projects") is True


def test_save_overwrites_whole_collection(store):
    store.save("debt_items", [{"id": "a"}, {"id": "b"}])
    store.save("debt_items", [{"id": "c"}])
    assert store.load("debt_items") == [{"id": "c"}]


def test_empty_list_counts_as_written(store):
    store.save("projects", [])
    assert store.has("projects") is True
    assert store.load("projects") == []


def test_unparsable_payload_fails_closed(store):
    _write_raw(store, "debt_items", "{not json")
    assert store.load("debt_items") == []


def test_non_list_payload_fails_closed(store):
    _write_raw(store, "debt_items", '{"id": "1"}')
    assert store.load("debt_items") == []


def test_unavailable_medium_fails_closed(tmp_path: Path):
    broken = CollectionStore(str(tmp_path / "missing-dir" / "data.db"))
    assert broken.load("projects") == []
    assert broken.load_record("user") is None


def test_save_failure_raises_persistence_error(tmp_path: Path):
    broken = CollectionStore(str(tmp_path / "missing-dir" / "data.db"))
    with pytest.raises(PersistenceError):
        broken.save("projects", [{"id": "1"}])


def test_uninitialized_schema_fails_closed_on_load(tmp_path: Path):
    fresh = CollectionStore(str(tmp_path / "fresh.db"))
    assert fresh.load("projects") == []


def test_records(store):
    assert store.load_record("user") is None
    store.save_record("user", {"email": "a@b.co"})
    assert store.load_record("user") == {"email": "a@b.co"}
    store.delete("user")
    assert store.load_record("user") is None


def test_unserializable_value_raises_persistence_error(store):
    with pytest.raises(PersistenceError):
        store.save("projects", [{"id": object()}])
    assert store.load("projects") == []
