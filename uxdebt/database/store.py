"""
store.py - Persisted collection store
Single responsibility: load/save whole JSON collections by key.

Every save replaces the complete collection inside one SQLite transaction, so
readers never observe a partial write. Loads fail closed: an unavailable
database or an unparsable payload yields an empty collection.
"""

import json
import logging
import sqlite3

from uxdebt.config import DB_PATH
from uxdebt.database.connection import transaction
from uxdebt.database.schema import initialize_schema
from uxdebt.domain.errors import PersistenceError
from uxdebt.utils.time import now_iso

logger = logging.getLogger(__name__)


class CollectionStore:
    def __init__(self, db_path: str = DB_PATH):
        self.db_path = db_path

    def initialize(self) -> None:
        initialize_schema(self.db_path)

    def _read_payload(self, key: str):
        try:
            with transaction(self.db_path) as conn:
                row = conn.execute(
                    "SELECT payload FROM collections WHERE key = ?", (key,)
                ).fetchone()
        except sqlite3.Error as e:
            logger.warning("Store unavailable while loading %r: %s", key, e)
            return None
        if row is None:
            return None
        try:
            return json.loads(row["payload"])
        except (json.JSONDecodeError, TypeError) as e:
            logger.warning("Discarding unparsable payload for %r: %s", key, e)
            return None

    def _write_payload(self, key: str, value) -> None:
        try:
            payload = json.dumps(value, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            raise PersistenceError(f"Cannot serialize {key!r}: {e}") from e
        try:
            with transaction(self.db_path) as conn:
                conn.execute(
                    "INSERT INTO collections (key, payload, updated_at) VALUES (?, ?, ?)"
                    " ON CONFLICT(key) DO UPDATE SET payload = excluded.payload,"
                    " updated_at = excluded.updated_at",
                    (key, payload, now_iso()),
                )
        except sqlite3.Error as e:
            logger.error("Failed to save %r: %s", key, e)
            raise PersistenceError(f"Failed to save {key!r}: {e}") from e

    def has(self, key: str) -> bool:
        """True once ``key`` has been written (even as an empty list)."""
        try:
            with transaction(self.db_path) as conn:
                row = conn.execute(
                    "SELECT 1 FROM collections WHERE key = ?", (key,)
                ).fetchone()
        except sqlite3.Error as e:
            logger.warning("Store unavailable while checking %r: %s", key, e)
            return False
        return row is not None

    def load(self, key: str) -> list[dict]:
        data = self._read_payload(key)
        if data is None:
            return []
        if not isinstance(data, list):
            logger.warning("Payload for %r is not a list; ignoring", key)
            return []
        return data

    def save(self, key: str, items: list[dict]) -> None:
        self._write_payload(key, list(items))

    def load_record(self, key: str) -> dict | None:
        data = self._read_payload(key)
        if data is not None and not isinstance(data, dict):
            logger.warning("Payload for %r is not an object; ignoring", key)
            return None
        return data

    def save_record(self, key: str, record: dict) -> None:
        self._write_payload(key, dict(record))

    def delete(self, key: str) -> None:
        try:
            with transaction(self.db_path) as conn:
                conn.execute("DELETE FROM collections WHERE key = ?", (key,))
        except sqlite3.Error as e:
            logger.error("Failed to delete %r: %s", key, e)
            raise PersistenceError(f"Failed to delete {key!r}: {e}") from e
