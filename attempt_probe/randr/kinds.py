"""
Type descriptors ("kinds") driving record generation and column binding.

Each kind knows three things about the values it describes:

- how to produce a structurally valid default (`default`),
- which SQL column type stores it (`sql_type`),
- whether the encoder binds it natively or as canonical text (`binding`).

Composite kinds (`Maybe`, `Struct`, `TaggedUnion`) recurse through the
generator so that presence, enum and entropy policies apply uniformly at every
depth.
"""

from __future__ import annotations

import abc
from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING, Any, Generic, Mapping, Optional, Type, TypeVar

from pydantic import BaseModel

from attempt_probe.domain.models import JsonPayload

if TYPE_CHECKING:  # pragma: no cover - import cycle guard
    from attempt_probe.randr.generator import ValueGenerator

T = TypeVar("T")
E = TypeVar("E", bound=Enum)
M = TypeVar("M", bound=BaseModel)

NATIVE = "native"
CANONICAL = "canonical"

INT64_MIN, INT64_MAX = -(2**63), 2**63 - 1
INT16_MIN, INT16_MAX = -(2**15), 2**15 - 1


class Kind(abc.ABC, Generic[T]):
    """
    Builder interface for one declared type.

    Subclasses set `sql_type` and `binding` and implement `default`.
    """

    sql_type: str = "TEXT"
    binding: str = NATIVE
    nullable: bool = False

    @abc.abstractmethod
    def default(self, gen: "ValueGenerator") -> T:  # pragma: no cover - interface only
        """Produce a structurally valid value using the generator's policies."""
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class Text(Kind[str]):
    """Random alphanumeric string; length falls back to the generator's setting."""

    sql_type = "TEXT"

    def __init__(self, length: Optional[int] = None) -> None:
        if length is not None and length < 1:
            raise ValueError("length must be positive")
        self.length = length

    def default(self, gen: "ValueGenerator") -> str:
        length = self.length if self.length is not None else gen.string_length
        return gen.entropy.alphanumeric(length)


class Int64(Kind[int]):
    sql_type = "BIGINT"

    def default(self, gen: "ValueGenerator") -> int:
        return gen.entropy.integer(INT64_MIN, INT64_MAX)


class Int16(Kind[int]):
    sql_type = "SMALLINT"

    def default(self, gen: "ValueGenerator") -> int:
        return gen.entropy.integer(INT16_MIN, INT16_MAX)


class Boolean(Kind[bool]):
    sql_type = "BOOLEAN"

    def default(self, gen: "ValueGenerator") -> bool:
        return gen.entropy.coin()


class Timestamp(Kind[datetime]):
    """Current civil (timezone-naive) UTC date and time, read from the generator clock."""

    sql_type = "TIMESTAMP"

    def default(self, gen: "ValueGenerator") -> datetime:
        return gen.clock()


class Payload(Kind[JsonPayload]):
    """
    Free-form JSON value.

    The default is a `null` placeholder, not representative content.
    """

    sql_type = "JSONB"
    binding = CANONICAL

    def default(self, gen: "ValueGenerator") -> JsonPayload:
        return JsonPayload(None)


class EnumKind(Kind[E]):
    """Enum value chosen by the generator's enum policy."""

    sql_type = "TEXT"
    binding = CANONICAL

    def __init__(self, enum_type: Type[E]) -> None:
        self.enum_type = enum_type

    def default(self, gen: "ValueGenerator") -> E:
        return gen.enum_policy.choose(self.enum_type, gen.entropy)

    def __repr__(self) -> str:
        return f"EnumKind({self.enum_type.__name__})"


class Maybe(Kind[Optional[T]]):
    """
    Optional wrapper: the presence policy decides once per evaluation whether
    the inner kind is generated or the value is absent (`None`).
    """

    nullable = True

    def __init__(self, inner: Kind[T]) -> None:
        self.inner = inner
        self.sql_type = inner.sql_type
        self.binding = inner.binding

    def default(self, gen: "ValueGenerator") -> Optional[T]:
        if gen.presence.is_present(gen.entropy):
            return gen.generate(self.inner)
        return None

    def __repr__(self) -> str:
        return f"Maybe({self.inner!r})"


class Struct(Kind[M]):
    """Nested model built field by field from its own kind table."""

    sql_type = "JSONB"
    binding = CANONICAL

    def __init__(self, model: Type[M], fields: Mapping[str, Kind[Any]]) -> None:
        self.model = model
        self.fields = fields

    def default(self, gen: "ValueGenerator") -> M:
        return self.model(**{name: gen.generate(kind) for name, kind in self.fields.items()})

    def __repr__(self) -> str:
        return f"Struct({self.model.__name__})"


class TaggedUnion(Kind[Any]):
    """
    Two-armed union: a fair coin picks `when_true` or `when_false`, then that
    arm is generated with the same rules.
    """

    sql_type = "JSONB"
    binding = CANONICAL

    def __init__(self, when_true: Kind[Any], when_false: Kind[Any]) -> None:
        self.when_true = when_true
        self.when_false = when_false

    def default(self, gen: "ValueGenerator") -> Any:
        arm = self.when_true if gen.entropy.coin() else self.when_false
        return gen.generate(arm)

    def __repr__(self) -> str:
        return f"TaggedUnion({self.when_true!r}, {self.when_false!r})"


__all__ = [
    "NATIVE",
    "CANONICAL",
    "INT64_MIN",
    "INT64_MAX",
    "INT16_MIN",
    "INT16_MAX",
    "Kind",
    "Text",
    "Int64",
    "Int16",
    "Boolean",
    "Timestamp",
    "Payload",
    "EnumKind",
    "Maybe",
    "Struct",
    "TaggedUnion",
]
