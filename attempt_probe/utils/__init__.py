"""
Utilities package for attempt-probe.

Exports shared helpers for logging and other cross-cutting concerns.
Keep this package lightweight and free of domain-specific logic.
"""

from attempt_probe.utils.logging import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
]
