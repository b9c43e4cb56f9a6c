"""
Canonical text form for enum, nested and payload values.

The same rendering is used when binding parameters and when comparing values
read back from the store: enums become their wire value (`"USD"`), pydantic
models (nested structs, tagged unions, JSON payloads) become compact JSON via
`model_dump_json`.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel


def canonical_text(value: Any) -> str:
    """
    Render a structured value as canonical text.

    Raises
    ------
    TypeError
        If the value has no canonical form.
    pydantic_core.PydanticSerializationError
        If a model contains content JSON cannot represent.
    """
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, BaseModel):
        return value.model_dump_json()
    raise TypeError(f"No canonical text form for {type(value).__name__}")


__all__ = ["canonical_text"]
