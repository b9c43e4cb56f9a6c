"""
Write-then-read helpers for the payment attempt table.

All statements are composed from `PAYMENT_ATTEMPT_SCHEMA`, so the DDL, the
INSERT column list and the encoder's parameter order cannot drift apart.
Rows are read back by the `(payment_id, attempt_id)` key pair.
"""

from __future__ import annotations

from typing import Any, Dict, Sequence

from psycopg import Connection, sql
from psycopg.rows import dict_row

from attempt_probe.domain.fields import PAYMENT_ATTEMPT_SCHEMA
from attempt_probe.errors import RecordNotFound, SchemaMismatch
from attempt_probe.utils.logging import get_logger

log = get_logger(__name__)

DEFAULT_TABLE = "payment_attempt"
KEY_COLUMNS = ("payment_id", "attempt_id")


def create_table_sql(table: str = DEFAULT_TABLE) -> sql.Composed:
    """`CREATE TABLE IF NOT EXISTS` statement with one column per schema entry."""
    columns = [
        sql.SQL("{} {}{}").format(
            sql.Identifier(column.name),
            sql.SQL(column.sql_type),
            sql.SQL("" if column.nullable else " NOT NULL"),
        )
        for column in PAYMENT_ATTEMPT_SCHEMA
    ]
    columns.append(
        sql.SQL("PRIMARY KEY ({})").format(sql.SQL(", ").join(map(sql.Identifier, KEY_COLUMNS)))
    )
    return sql.SQL("CREATE TABLE IF NOT EXISTS {} ({})").format(
        sql.Identifier(table), sql.SQL(", ").join(columns)
    )


def insert_sql(table: str = DEFAULT_TABLE) -> sql.Composed:
    """Positional INSERT with one `%s` placeholder per column."""
    names = [sql.Identifier(column.name) for column in PAYMENT_ATTEMPT_SCHEMA]
    return sql.SQL("INSERT INTO {} ({}) VALUES ({})").format(
        sql.Identifier(table),
        sql.SQL(", ").join(names),
        sql.SQL(", ").join([sql.Placeholder()] * len(names)),
    )


def select_sql(table: str = DEFAULT_TABLE) -> sql.Composed:
    """SELECT of every schema column for one key pair."""
    return sql.SQL("SELECT {} FROM {} WHERE {} = %s AND {} = %s").format(
        sql.SQL(", ").join(sql.Identifier(column.name) for column in PAYMENT_ATTEMPT_SCHEMA),
        sql.Identifier(table),
        *map(sql.Identifier, KEY_COLUMNS),
    )


def create_table(conn: Connection, table: str = DEFAULT_TABLE) -> None:
    with conn.cursor() as cur:
        cur.execute(create_table_sql(table))
    conn.commit()
    log.info("Table ready", extra={"table": table})


def insert_attempt(conn: Connection, params: Sequence[Any], table: str = DEFAULT_TABLE) -> None:
    """
    Execute the positional INSERT for one encoded record and commit.

    Raises
    ------
    SchemaMismatch
        If `params` does not carry exactly one value per column.
    """
    if len(params) != len(PAYMENT_ATTEMPT_SCHEMA):
        raise SchemaMismatch(
            f"Expected {len(PAYMENT_ATTEMPT_SCHEMA)} parameters, got {len(params)}"
        )
    with conn.cursor() as cur:
        cur.execute(insert_sql(table), list(params))
    conn.commit()
    log.info("Inserted payment attempt", extra={"table": table, "payment_id": params[0]})


def fetch_attempt(
    conn: Connection, payment_id: str, attempt_id: str, table: str = DEFAULT_TABLE
) -> Dict[str, Any]:
    """
    Read one row back by its key pair.

    Raises
    ------
    RecordNotFound
        If no row matches.
    """
    with conn.cursor(row_factory=dict_row) as cur:
        cur.execute(select_sql(table), (payment_id, attempt_id))
        row = cur.fetchone()
    if row is None:
        raise RecordNotFound(f"No row for payment_id={payment_id!r} attempt_id={attempt_id!r}")
    return row


__all__ = [
    "DEFAULT_TABLE",
    "KEY_COLUMNS",
    "create_table_sql",
    "insert_sql",
    "select_sql",
    "create_table",
    "insert_attempt",
    "fetch_attempt",
]
