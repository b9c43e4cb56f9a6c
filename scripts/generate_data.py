"""
Bulk seeding script for attempt-probe.

Generates seeded payment attempts, writes their encoded parameter lists to CSV
(one column per schema entry, empty cell for NULL) and loads the file into
Postgres with COPY.
"""

from __future__ import annotations

import csv
import sys
import tempfile
import time
from datetime import datetime
from pathlib import Path
from typing import Any, List

import psycopg
import typer
from psycopg import sql

from attempt_probe.config import get_settings
from attempt_probe.domain.fields import PAYMENT_ATTEMPT_SCHEMA
from attempt_probe.encoding import PositionalEncoder
from attempt_probe.factory import RecordFactory
from attempt_probe.infrastructure.db_factory import build_dsn
from attempt_probe.infrastructure.repository import create_table
from attempt_probe.randr import EntropySource, ValueGenerator

app = typer.Typer(help="Generate seeded payment attempts and load into Postgres (CSV + COPY).")


def _build_dsn(dsn_override: str | None) -> str:
    if dsn_override:
        return dsn_override
    return build_dsn()


def _csv_cell(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "t" if value else "f"
    if isinstance(value, datetime):
        return value.isoformat(sep=" ")
    return str(value)


def _generate_rows_csv(csv_path: Path, rows: int, batch_size: int, seed: int) -> None:
    factory = RecordFactory(
        ValueGenerator(
            entropy=EntropySource(seed=seed),
            string_length=get_settings().randr_string_length,
        )
    )
    encoder = PositionalEncoder()

    with csv_path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow([column.name for column in PAYMENT_ATTEMPT_SCHEMA])

        buffer: List[List[str]] = []
        for record in factory.build_many(rows):
            buffer.append([_csv_cell(value) for value in encoder.encode(record)])
            if len(buffer) >= batch_size:
                writer.writerows(buffer)
                buffer.clear()
        if buffer:
            writer.writerows(buffer)


def _copy_into_db(dsn: str, csv_path: Path, table: str) -> int:
    statement = sql.SQL("COPY {} ({}) FROM STDIN WITH (FORMAT csv, HEADER TRUE)").format(
        sql.Identifier(table),
        sql.SQL(", ").join(sql.Identifier(column.name) for column in PAYMENT_ATTEMPT_SCHEMA),
    )
    with psycopg.connect(dsn) as conn:
        create_table(conn, table)
        with conn.cursor() as cur:
            with cur.copy(statement) as copy:
                with csv_path.open("r", encoding="utf-8") as f:
                    for line in f:
                        copy.write(line)
            loaded = cur.rowcount
        conn.commit()
    return loaded


@app.command()
def main(
    rows: int = typer.Option(
        1_000,
        "--rows",
        "-r",
        help="Number of payment attempts to generate.",
    ),
    batch_size: int = typer.Option(
        500,
        "--batch-size",
        "-b",
        help="Batch size for CSV buffering during generation.",
    ),
    seed: int = typer.Option(
        42,
        "--seed",
        help="Deterministic RNG seed.",
    ),
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Optional CSV output path (if omitted, a temp file will be used).",
    ),
    dsn: str | None = typer.Option(
        None,
        "--dsn",
        help="Optional DSN override for Postgres.",
    ),
    no_load: bool = typer.Option(
        False,
        "--no-load",
        help="Only generate CSV; skip loading into Postgres.",
    ),
) -> None:
    """
    Generate payment attempts and optionally load them into Postgres using COPY.
    """
    start = time.perf_counter()
    if output:
        csv_path = output
        csv_path.parent.mkdir(parents=True, exist_ok=True)
    else:
        tmpdir = Path(tempfile.mkdtemp(prefix="attempt_probe_csv_"))
        csv_path = tmpdir / "payment_attempts.csv"

    typer.echo(f"Generating {rows:,} attempts -> {csv_path} (batch={batch_size}, seed={seed})")
    _generate_rows_csv(csv_path, rows=rows, batch_size=batch_size, seed=seed)
    gen_duration = time.perf_counter() - start
    typer.echo(
        f"CSV generation completed in {gen_duration:.2f}s ({rows / gen_duration:,.0f} rows/s)"
    )

    if no_load:
        typer.echo("Skipping load (no-load flag set).")
        return

    load_start = time.perf_counter()
    table = get_settings().db_table
    typer.echo(f"Loading CSV into Postgres table '{table}' via COPY...")
    loaded = _copy_into_db(_build_dsn(dsn), csv_path, table)
    load_duration = time.perf_counter() - load_start

    typer.echo(f"Loaded {loaded:,} rows in {load_duration:.2f}s.")


if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)
