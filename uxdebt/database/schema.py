"""
schema.py - Schema creation
Single responsibility: define and apply database schema.
"""
import logging

from uxdebt.config import DB_PATH
from uxdebt.database.connection import transaction

logger = logging.getLogger(__name__)


SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS collections (
    key        TEXT PRIMARY KEY,
    payload    TEXT NOT NULL,
    updated_at TEXT NOT NULL
);
"""


def initialize_schema(db_path: str = DB_PATH) -> None:
    """Create tables if missing."""
    try:
        with transaction(db_path) as conn:
            conn.executescript(SCHEMA_SQL)
    except Exception as e:
        logger.error("Failed to initialize database schema: %s", e)
        raise
