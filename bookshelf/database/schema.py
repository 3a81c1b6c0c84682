"""
schema.py - Schema creation helpers
Single responsibility: define and apply database schema.
"""
import logging
from bookshelf.database.connection import get_connection

logger = logging.getLogger(__name__)


SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS books (
    id            INTEGER PRIMARY KEY AUTOINCREMENT,
    title         TEXT    NOT NULL,
    author        TEXT    NOT NULL,
    genre         TEXT    NOT NULL,
    rating        INTEGER NOT NULL CHECK (rating BETWEEN 1 AND 5),
    review        TEXT    DEFAULT '',
    date_finished TEXT    DEFAULT '',
    cover_url     TEXT,
    timestamp     TEXT    NOT NULL
);
"""


def initialize_schema() -> None:
    """Create tables if missing."""
    try:
        with get_connection() as conn:
            conn.executescript(SCHEMA_SQL)
    except Exception as e:
        logger.error("Failed to initialize database schema: %s", e)
        raise
