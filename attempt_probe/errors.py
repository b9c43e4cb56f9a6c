"""
Exception hierarchy for attempt-probe.

Every failure raised by the generation and encoding core derives from
`ProbeError`, so the CLI can report any of them uniformly. The core never
retries and never swallows these; they propagate to the immediate caller.
"""

from __future__ import annotations


class ProbeError(Exception):
    """Base class for all attempt-probe errors."""


class EntropyExhausted(ProbeError):
    """The random source could not produce a value; the generation attempt is aborted."""


class EncodeError(ProbeError):
    """
    A field value could not be rendered to its canonical text form.

    Attributes
    ----------
    field : str
        Name of the offending record field.
    """

    def __init__(self, field: str, reason: str | None = None) -> None:
        self.field = field
        message = f"Failed to encode field '{field}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class SchemaMismatch(ProbeError):
    """The column schema handed to the encoder disagrees with the field table."""


class UnknownFieldError(ProbeError, KeyError):
    """An override referenced a field that the record does not declare."""

    def __str__(self) -> str:
        return Exception.__str__(self)


class RecordNotFound(ProbeError):
    """Reading back a previously written record returned no row."""


__all__ = [
    "ProbeError",
    "EntropyExhausted",
    "EncodeError",
    "SchemaMismatch",
    "UnknownFieldError",
    "RecordNotFound",
]
