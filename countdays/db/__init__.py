"""Database layer."""
from .connection import get_connection, get_cursor, ensure_db_exists
from .kv_repository import KeyValueRepository

__all__ = ['get_connection', 'get_cursor', 'ensure_db_exists', 'KeyValueRepository']
