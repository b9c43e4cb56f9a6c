from __future__ import annotations

import json
import sys
from typing import Any, Dict, NoReturn, Optional

import psycopg
import typer
from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from attempt_probe.config import Settings, get_settings
from attempt_probe.encoding import PositionalEncoder
from attempt_probe.errors import ProbeError
from attempt_probe.factory import RecordFactory
from attempt_probe.infrastructure.db_factory import get_sync_connection
from attempt_probe.infrastructure.repository import create_table, fetch_attempt, insert_attempt
from attempt_probe.randr import (
    EntropySource,
    FairCoin,
    FixedPresence,
    UniformVariant,
    ValueGenerator,
)
from attempt_probe.utils.logging import configure_logging, get_logger

app = typer.Typer(help="Generate random payment attempts and write them through Postgres.")
log = get_logger(__name__)


def _build_factory(
    settings: Settings,
    seed: Optional[int],
    absent: bool = False,
    uniform_enums: bool = False,
) -> RecordFactory:
    effective_seed = seed if seed is not None else settings.randr_seed
    generator = ValueGenerator(
        entropy=EntropySource(seed=effective_seed),
        presence=FixedPresence(False) if absent else FairCoin(),
        enum_policy=UniformVariant() if uniform_enums else None,
        string_length=settings.randr_string_length,
    )
    return RecordFactory(generator)


def _render_row(row: Dict[str, Any]) -> Table:
    table = Table(title="payment_attempt", box=box.SIMPLE_HEAVY)
    table.add_column("column", style="cyan", no_wrap=True)
    table.add_column("value", overflow="fold")
    for name, value in row.items():
        table.add_row(name, "[dim]NULL[/dim]" if value is None else escape(repr(value)))
    return table


def _fail(message: str) -> NoReturn:
    typer.echo(f"Error: {message}", err=True)
    raise typer.Exit(code=1)


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    typer.echo(
        f"DB={settings.db_user}@{settings.db_host}:{settings.db_port}/{settings.db_name} | "
        f"table={settings.db_table} seed={settings.randr_seed} "
        f"string_length={settings.randr_string_length}"
    )


@app.command()
def generate(
    count: int = typer.Option(1, "--count", "-n", min=1, help="Number of records to generate."),
    seed: Optional[int] = typer.Option(None, "--seed", help="Deterministic RNG seed."),
    absent: bool = typer.Option(
        False, "--absent", help="Force every optional field to be absent."
    ),
    uniform_enums: bool = typer.Option(
        False, "--uniform-enums", help="Sample enum variants uniformly instead of the canonical default."
    ),
) -> None:
    """
    Print encoded parameter lists as JSON without touching the database.
    """
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)
    factory = _build_factory(settings, seed, absent=absent, uniform_enums=uniform_enums)
    encoder = PositionalEncoder()
    try:
        rows = [dict(encoder.named(record)) for record in factory.build_many(count)]
    except ProbeError as exc:
        log.exception("Generation failed")
        _fail(str(exc))
    typer.echo(json.dumps(rows, indent=2, default=str))


@app.command("init-db")
def init_db() -> None:
    """
    Create the payment attempt table if it does not exist.
    """
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)
    try:
        with get_sync_connection() as conn:
            create_table(conn, settings.db_table)
    except psycopg.Error as exc:
        log.exception("Table creation failed")
        _fail(str(exc))
    typer.echo(f"Table '{settings.db_table}' ready.")


@app.command()
def run(
    seed: Optional[int] = typer.Option(None, "--seed", help="Deterministic RNG seed."),
) -> None:
    """
    Create the table, write one random attempt, read it back and print it.
    """
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)
    factory = _build_factory(settings, seed)
    encoder = PositionalEncoder()

    try:
        attempt = factory.build()
        params = encoder.encode(attempt)
        with get_sync_connection() as conn:
            create_table(conn, settings.db_table)
            insert_attempt(conn, params, settings.db_table)
            row = fetch_attempt(conn, attempt.payment_id, attempt.attempt_id, settings.db_table)
    except (ProbeError, psycopg.Error) as exc:
        log.exception("Write-then-read failed")
        _fail(str(exc))

    Console().print(_render_row(row))


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
