"""
connection.py - SQLite connection helpers
Single responsibility: open the bookshelf database and read its change counter.
"""

import logging
import os
import sqlite3

from bookshelf.config import DB_PATH

logger = logging.getLogger(__name__)


def get_connection(db_path: str | None = None) -> sqlite3.Connection:
    """Open a connection to the book database (DB_PATH unless given)."""
    path = db_path or DB_PATH
    folder = os.path.dirname(path)
    if folder:
        os.makedirs(folder, exist_ok=True)
    try:
        conn = sqlite3.connect(path, timeout=10)
        conn.row_factory = sqlite3.Row
        # WAL lets the watcher read while another client writes
        conn.execute("PRAGMA journal_mode = WAL")
        return conn
    except sqlite3.Error as e:
        logger.error("Failed to open book database at %s: %s", path, e)
        raise


def data_version(conn: sqlite3.Connection) -> int:
    """Counter that moves whenever another connection commits to the file."""
    return conn.execute("PRAGMA data_version").fetchone()[0]
