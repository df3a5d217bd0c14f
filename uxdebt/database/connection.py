"""
connection.py - DB connection helpers
Single responsibility: manage SQLite connections and pragmas.
"""

import logging
import sqlite3
from contextlib import contextmanager

from uxdebt.config import DB_PATH

logger = logging.getLogger(__name__)


def get_connection(db_path: str = DB_PATH) -> sqlite3.Connection:
    """Open SQLite connection with shared defaults."""
    try:
        conn = sqlite3.connect(db_path, timeout=10)
        conn.row_factory = sqlite3.Row
        conn.execute("PRAGMA journal_mode = WAL")
        return conn
    except sqlite3.Error as e:
        logger.error("Failed to connect to database at %s: %s", db_path, e)
        raise


@contextmanager
def transaction(db_path: str = DB_PATH):
    """Yield a connection that commits on success, rolls back on error and always closes."""
    conn = get_connection(db_path)
    try:
        with conn:
            yield conn
    finally:
        conn.close()
