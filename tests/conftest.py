"""
Pytest configuration for attempt-probe.

Provides fixtures for:
- Deterministic generators (seeded entropy, frozen clock)
- Database connection management for integration tests
- Settings override for integration tests
"""

from __future__ import annotations

import os
from datetime import datetime
from typing import Generator

import psycopg
import pytest

from attempt_probe.config import Settings
from attempt_probe.encoding import PositionalEncoder
from attempt_probe.factory import RecordFactory
from attempt_probe.infrastructure.repository import create_table
from attempt_probe.randr import EntropySource, ValueGenerator

FIXED_NOW = datetime(2024, 5, 17, 9, 30, 15, 123456)
TEST_TABLE = "payment_attempt_test"


@pytest.fixture
def fixed_clock():
    """Clock returning the same naive timestamp on every call."""
    return lambda: FIXED_NOW


@pytest.fixture
def seeded_generator(fixed_clock) -> ValueGenerator:
    return ValueGenerator(entropy=EntropySource(seed=1234), clock=fixed_clock)


@pytest.fixture
def factory(seeded_generator: ValueGenerator) -> RecordFactory:
    return RecordFactory(seeded_generator)


@pytest.fixture
def encoder() -> PositionalEncoder:
    return PositionalEncoder()


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    """
    Settings fixture with test-specific overrides.

    Can be overridden via environment variables in CI or local testing.
    """
    return Settings(
        db_host=os.getenv("DB_HOST", "localhost"),
        db_port=int(os.getenv("DB_PORT", "5432")),
        db_user=os.getenv("DB_USER", "postgres"),
        db_password=os.getenv("DB_PASSWORD", "postgres"),
        db_name=os.getenv("DB_NAME", "attempt_probe"),
        log_level="DEBUG",
    )


@pytest.fixture(scope="session")
def test_dsn(test_settings: Settings) -> str:
    """
    Database connection string for tests.
    """
    return (
        f"postgresql://{test_settings.db_user}:{test_settings.db_password}"
        f"@{test_settings.db_host}:{test_settings.db_port}/{test_settings.db_name}"
    )


@pytest.fixture(scope="session")
def db_connection_available(test_dsn: str) -> bool:
    """
    Check if database is reachable.

    Used to conditionally skip integration tests when DB is not available.
    """
    try:
        with psycopg.connect(test_dsn, connect_timeout=5) as conn:
            with conn.cursor() as cur:
                cur.execute("SELECT 1;")
                cur.fetchone()
        return True
    except psycopg.Error:
        return False


@pytest.fixture(scope="session")
def db_connection(
    test_dsn: str, db_connection_available: bool
) -> Generator[psycopg.Connection, None, None]:
    """
    Provide a session-scoped database connection for integration tests.

    Skips tests if database is not available.
    """
    if not db_connection_available:
        pytest.skip("Database not available for integration tests")

    conn = psycopg.connect(test_dsn)
    try:
        yield conn
    finally:
        conn.close()


@pytest.fixture(scope="function")
def clean_attempt_table(db_connection: psycopg.Connection) -> Generator[str, None, None]:
    """
    Create the test table and empty it before and after each test function.

    Yields the table name.
    """
    create_table(db_connection, TEST_TABLE)
    with db_connection.cursor() as cur:
        cur.execute(f"TRUNCATE TABLE {TEST_TABLE};")
    db_connection.commit()
    yield TEST_TABLE
    with db_connection.cursor() as cur:
        cur.execute(f"TRUNCATE TABLE {TEST_TABLE};")
    db_connection.commit()
