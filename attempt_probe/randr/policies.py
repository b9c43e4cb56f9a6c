"""
Swappable generation policies.

Presence policies decide whether an optional value is generated; enum policies
decide which variant an enum-typed value takes. The reference behaviour is a
fair presence coin and the canonical default variant per enum.
"""

from __future__ import annotations

from enum import Enum
from typing import Mapping, Optional, Protocol, Type, TypeVar, runtime_checkable

from attempt_probe.domain.enums import CANONICAL_DEFAULTS
from attempt_probe.randr.entropy import EntropySource

E = TypeVar("E", bound=Enum)


@runtime_checkable
class PresencePolicy(Protocol):
    def is_present(self, entropy: EntropySource) -> bool:
        """Return True when an optional value should be generated."""
        ...


@runtime_checkable
class EnumPolicy(Protocol):
    def choose(self, enum_type: Type[E], entropy: EntropySource) -> E:
        """Return the variant to use for `enum_type`."""
        ...


class FairCoin:
    """One fair coin flip per optional value."""

    def is_present(self, entropy: EntropySource) -> bool:
        return entropy.coin()

    def __repr__(self) -> str:
        return "FairCoin()"


class FixedPresence:
    """Every optional value is present (or absent) without consuming entropy."""

    def __init__(self, present: bool) -> None:
        self.present = present

    def is_present(self, entropy: EntropySource) -> bool:
        return self.present

    def __repr__(self) -> str:
        return f"FixedPresence(present={self.present})"


class CanonicalDefault:
    """
    Always return the declared canonical variant.

    Enums without a declared default fall back to their first member.
    """

    def __init__(self, defaults: Optional[Mapping[Type[Enum], Enum]] = None) -> None:
        self.defaults = dict(CANONICAL_DEFAULTS if defaults is None else defaults)

    def choose(self, enum_type: Type[E], entropy: EntropySource) -> E:
        variant = self.defaults.get(enum_type)
        if variant is None:
            return next(iter(enum_type))
        return variant  # type: ignore[return-value]

    def __repr__(self) -> str:
        return "CanonicalDefault()"


class UniformVariant:
    """Uniform sample over all variants of the enum."""

    def choose(self, enum_type: Type[E], entropy: EntropySource) -> E:
        return entropy.choice(list(enum_type))

    def __repr__(self) -> str:
        return "UniformVariant()"


__all__ = [
    "PresencePolicy",
    "EnumPolicy",
    "FairCoin",
    "FixedPresence",
    "CanonicalDefault",
    "UniformVariant",
]
