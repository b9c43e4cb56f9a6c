"""
Integration tests for the write-then-read round trip.

These tests run against a real PostgreSQL instance and verify that:
1. The table DDL derived from the field table is accepted
2. An encoded record inserts positionally and reads back by its key pair
3. NULL, native and canonical-text columns survive the round trip

Run with: RUN_INTEGRATION_TESTS=1 pytest tests/integration/
"""

from __future__ import annotations

import json
import os
from pathlib import Path

import psycopg
import pytest
from pydantic import TypeAdapter

from attempt_probe.domain.enums import Currency
from attempt_probe.domain.fields import PAYMENT_ATTEMPT_FIELDS
from attempt_probe.domain.models import (
    MandateAmountData,
    MandateDataType,
    MandateDetails,
    MultiUse,
    SingleUse,
)
from attempt_probe.encoding import PositionalEncoder
from attempt_probe.errors import RecordNotFound
from attempt_probe.factory import RecordFactory
from attempt_probe.infrastructure.repository import fetch_attempt, insert_attempt
from attempt_probe.randr import EntropySource, FixedPresence, ValueGenerator
from scripts import generate_data

DEFAULT_SEED = 123
SEED_ROWS = 25

pytestmark = pytest.mark.skipif(
    os.getenv("RUN_INTEGRATION_TESTS", "0") != "1",
    reason="Integration tests require RUN_INTEGRATION_TESTS=1 and reachable Postgres",
)


def _assert_row_matches(row: dict, params: list) -> None:
    for spec, param in zip(PAYMENT_ATTEMPT_FIELDS, params):
        stored = row[spec.name]
        if param is None:
            assert stored is None, spec.name
        elif spec.kind.sql_type == "JSONB":
            assert stored == json.loads(param), spec.name
        else:
            assert stored == param, spec.name


@pytest.mark.parametrize("presence", [None, FixedPresence(True), FixedPresence(False)])
def test_insert_then_fetch_round_trips(
    db_connection: psycopg.Connection, clean_attempt_table: str, fixed_clock, presence
) -> None:
    factory = RecordFactory(
        ValueGenerator(entropy=EntropySource(seed=DEFAULT_SEED), presence=presence, clock=fixed_clock)
    )
    attempt = factory.build()
    params = PositionalEncoder().encode(attempt)

    insert_attempt(db_connection, params, clean_attempt_table)
    row = fetch_attempt(db_connection, attempt.payment_id, attempt.attempt_id, clean_attempt_table)

    _assert_row_matches(row, params)


def test_fetch_unknown_key_raises(db_connection: psycopg.Connection, clean_attempt_table: str) -> None:
    with pytest.raises(RecordNotFound):
        fetch_attempt(db_connection, "missing", "missing", clean_attempt_table)


def test_copy_loader_seeds_rows(
    db_connection: psycopg.Connection, clean_attempt_table: str, test_dsn: str, tmp_path: Path
) -> None:
    csv_path = tmp_path / "attempts.csv"
    generate_data._generate_rows_csv(csv_path, rows=SEED_ROWS, batch_size=10, seed=DEFAULT_SEED)
    loaded = generate_data._copy_into_db(test_dsn, csv_path, clean_attempt_table)

    with db_connection.cursor() as cur:
        cur.execute(f"SELECT COUNT(*) FROM {clean_attempt_table};")
        count = cur.fetchone()[0]

    assert loaded == SEED_ROWS
    assert count == SEED_ROWS


@pytest.mark.parametrize(
    "mandate",
    [
        SingleUse(amount_data=MandateAmountData(amount=700, currency=Currency.EUR)),
        MultiUse(amount_data=MandateAmountData(amount=1_200, currency=Currency.GBP)),
        MultiUse(amount_data=None),
    ],
)
def test_mandate_column_revalidates_to_same_arm(
    db_connection: psycopg.Connection, clean_attempt_table: str, fixed_clock, mandate
) -> None:
    factory = RecordFactory(
        ValueGenerator(entropy=EntropySource(seed=DEFAULT_SEED), presence=FixedPresence(False), clock=fixed_clock)
    )
    attempt = factory.build(
        constructors={
            "mandate_details": lambda: mandate,
            "mandate_data": lambda: MandateDetails(update_mandate_id="mnd_1"),
        }
    )

    insert_attempt(db_connection, PositionalEncoder().encode(attempt), clean_attempt_table)
    row = fetch_attempt(db_connection, attempt.payment_id, attempt.attempt_id, clean_attempt_table)

    stored = TypeAdapter(MandateDataType).validate_python(row["mandate_details"])
    assert type(stored) is type(mandate)
    assert stored == mandate
    assert MandateDetails.model_validate(row["mandate_data"]) == attempt.mandate_data
