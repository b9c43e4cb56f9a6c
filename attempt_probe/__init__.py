"""
attempt-probe - random payment attempt records for store integration checks.

This package generates structurally valid payment attempt records and encodes
them into positional parameter lists for a Postgres table, so a driver/schema
path can be exercised end to end (write, then read back):

- A composable value generator with injectable entropy, presence and enum policies
- A single declarative field table shared by generation, DDL and encoding
- A positional encoder with canonical text for enum, nested and payload columns
- Thin store helpers and a CLI for the write-then-read round trip
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from attempt_probe.config import Settings, get_settings
from attempt_probe.domain.fields import PAYMENT_ATTEMPT_FIELDS, PAYMENT_ATTEMPT_SCHEMA, Column
from attempt_probe.domain.models import PaymentAttempt
from attempt_probe.encoding import PositionalEncoder, canonical_text, encode
from attempt_probe.errors import (
    EncodeError,
    EntropyExhausted,
    ProbeError,
    RecordNotFound,
    SchemaMismatch,
    UnknownFieldError,
)
from attempt_probe.factory import RecordFactory
from attempt_probe.randr import EntropySource, ValueGenerator
from attempt_probe.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Record and schema
    "PaymentAttempt",
    "PAYMENT_ATTEMPT_FIELDS",
    "PAYMENT_ATTEMPT_SCHEMA",
    "Column",
    # Generation
    "EntropySource",
    "ValueGenerator",
    "RecordFactory",
    # Encoding
    "PositionalEncoder",
    "canonical_text",
    "encode",
    # Errors
    "ProbeError",
    "EntropyExhausted",
    "EncodeError",
    "SchemaMismatch",
    "UnknownFieldError",
    "RecordNotFound",
    # Logging
    "configure_logging",
    "get_logger",
]
