"""
Infrastructure package for attempt-probe.

Centralizes database connectivity and the statements that write and read back
payment attempts. Keep this layer focused on I/O, decoupled from generation
and encoding logic.
"""

from attempt_probe.infrastructure.db_factory import build_dsn, get_sync_connection
from attempt_probe.infrastructure.repository import (
    create_table,
    create_table_sql,
    fetch_attempt,
    insert_attempt,
    insert_sql,
    select_sql,
)

__all__ = [
    "build_dsn",
    "get_sync_connection",
    "create_table",
    "create_table_sql",
    "fetch_attempt",
    "insert_attempt",
    "insert_sql",
    "select_sql",
]
