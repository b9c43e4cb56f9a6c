"""
Encoding package for attempt-probe.

Exposes the positional encoder and the canonical text rendering it applies to
enum, nested and payload values.
"""

from attempt_probe.encoding.canonical import canonical_text
from attempt_probe.encoding.encoder import PositionalEncoder, encode

__all__ = [
    "PositionalEncoder",
    "canonical_text",
    "encode",
]
