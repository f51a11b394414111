"""Repository for named blobs in the key-value table."""
import datetime
from typing import List, Optional
from .connection import get_cursor, ensure_db_exists


class KeyValueRepository:
    """Get/set/delete single blobs by key. Writes overwrite; last writer wins."""

    def __init__(self, db_path: Optional[str] = None) -> None:
        self.db_path = db_path
        ensure_db_exists(db_path)

    def get(self, key: str) -> Optional[bytes]:
        """Return the stored blob, or None when the key is absent."""
        with get_cursor(self.db_path) as cur:
            cur.execute("SELECT value FROM kv_store WHERE key = ?", (key,))
            row = cur.fetchone()
            if row is None or row[0] is None:
                return None
            value = row[0]
            return value.encode("utf-8") if isinstance(value, str) else bytes(value)

    def set(self, key: str, value: bytes) -> None:
        """Store a blob, replacing any previous value."""
        ts_str = datetime.datetime.now().isoformat(timespec="seconds")
        with get_cursor(self.db_path) as cur:
            cur.execute("""
                INSERT INTO kv_store (key, value, updated_at) VALUES (?, ?, ?)
                ON CONFLICT(key) DO UPDATE SET
                    value = excluded.value,
                    updated_at = excluded.updated_at
            """, (key, value, ts_str))

    def delete(self, key: str) -> None:
        with get_cursor(self.db_path) as cur:
            cur.execute("DELETE FROM kv_store WHERE key = ?", (key,))

    def keys(self) -> List[str]:
        with get_cursor(self.db_path) as cur:
            cur.execute("SELECT key FROM kv_store ORDER BY key ASC")
            return [r[0] for r in cur.fetchall()]
