"""
Positional encoder for payment attempt records.

Turns a `PaymentAttempt` into an ordered parameter list for an
`INSERT ... VALUES (%s, %s, ...)` statement. Column N is bound from the N-th
entry of `PAYMENT_ATTEMPT_FIELDS`:

- absent optional values bind `None` (SQL NULL),
- native kinds (text, integers, booleans, timestamps) bind as-is,
- enums, nested models and JSON payloads bind their canonical text.
"""

from __future__ import annotations

from typing import Any, List, MutableSequence, Sequence, Tuple

from pydantic_core import PydanticSerializationError

from attempt_probe.domain.fields import PAYMENT_ATTEMPT_FIELDS, PAYMENT_ATTEMPT_SCHEMA, Column
from attempt_probe.domain.models import PaymentAttempt
from attempt_probe.encoding.canonical import canonical_text
from attempt_probe.errors import EncodeError, SchemaMismatch
from attempt_probe.randr.kinds import CANONICAL
from attempt_probe.utils.logging import get_logger

log = get_logger(__name__)


def _check_schema(schema: Sequence[Column]) -> None:
    expected = PAYMENT_ATTEMPT_SCHEMA
    if tuple(schema) == expected:
        return
    if len(schema) != len(expected):
        raise SchemaMismatch(f"Schema has {len(schema)} columns, record declares {len(expected)}")
    for index, (given, declared) in enumerate(zip(schema, expected)):
        if tuple(given) != tuple(declared):
            raise SchemaMismatch(f"Column {index} is {given!r}, record declares {declared!r}")


class PositionalEncoder:
    """
    Encode records against the fixed payment attempt column schema.

    Stateless; one instance can be shared.
    """

    def encode(
        self,
        record: PaymentAttempt,
        schema: Sequence[Column] = PAYMENT_ATTEMPT_SCHEMA,
    ) -> List[Any]:
        """
        Return one parameter per column, in column order.

        Raises
        ------
        SchemaMismatch
            If `schema` is not the schema derived from the field table.
        EncodeError
            If a structured value cannot be rendered; no partial list is returned.
        """
        _check_schema(schema)
        params: List[Any] = []
        for spec in PAYMENT_ATTEMPT_FIELDS:
            value = getattr(record, spec.name)
            if value is None:
                params.append(None)
            elif spec.kind.binding == CANONICAL:
                try:
                    params.append(canonical_text(value))
                except (TypeError, ValueError, PydanticSerializationError) as exc:
                    log.error(
                        "Canonical serialization failed",
                        extra={"field": spec.name, "error": str(exc)},
                    )
                    raise EncodeError(spec.name, str(exc)) from exc
            else:
                params.append(value)
        return params

    def bind(
        self,
        record: PaymentAttempt,
        params: MutableSequence[Any],
        schema: Sequence[Column] = PAYMENT_ATTEMPT_SCHEMA,
    ) -> MutableSequence[Any]:
        """
        Populate a caller-owned parameter sequence in place.

        `params` is only replaced once the whole record encoded successfully.
        """
        encoded = self.encode(record, schema)
        params[:] = encoded
        return params

    def named(self, record: PaymentAttempt) -> List[Tuple[str, Any]]:
        """Encoded parameters paired with their column names."""
        return list(zip((column.name for column in PAYMENT_ATTEMPT_SCHEMA), self.encode(record)))


def encode(record: PaymentAttempt, schema: Sequence[Column] = PAYMENT_ATTEMPT_SCHEMA) -> List[Any]:
    """Module-level shortcut for `PositionalEncoder().encode`."""
    return PositionalEncoder().encode(record, schema)


__all__ = ["PositionalEncoder", "encode"]
