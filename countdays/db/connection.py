"""Database connection management."""
import sqlite3
import os
from contextlib import contextmanager
from typing import Iterator, Optional
from .. import config


def get_connection(db_path: Optional[str] = None) -> sqlite3.Connection:
    """Create and return a database connection."""
    conn = sqlite3.connect(db_path or config.DB_PATH)
    conn.row_factory = sqlite3.Row
    return conn


@contextmanager
def get_cursor(db_path: Optional[str] = None) -> Iterator[sqlite3.Cursor]:
    """Context manager for database operations."""
    conn = get_connection(db_path)
    try:
        cursor = conn.cursor()
        yield cursor
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def ensure_db_exists(db_path: Optional[str] = None) -> None:
    """Ensure database directory and key-value table exist."""
    path = db_path or config.DB_PATH
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with get_cursor(path) as cur:
        cur.execute("""
            CREATE TABLE IF NOT EXISTS kv_store (
                key TEXT PRIMARY KEY,
                value BLOB,
                updated_at TEXT NOT NULL
            )
        """)
