"""
Value generator: one default rule per kind, composable with a constructor
override and a post-construction transform.

Usage:
    from attempt_probe.randr import EntropySource, ValueGenerator
    from attempt_probe.randr.kinds import Int64, Maybe, Text

    gen = ValueGenerator(entropy=EntropySource(seed=7))
    gen.generate(Text())                              # 30 random alphanumerics
    gen.generate(Int64(), constructor=lambda: 500)    # 500, no entropy drawn
    gen.generate(Maybe(Text()), transform=str.upper)  # transform sees None too
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable, Optional, TypeVar

from attempt_probe.randr.entropy import EntropySource
from attempt_probe.randr.kinds import Kind
from attempt_probe.randr.policies import CanonicalDefault, EnumPolicy, FairCoin, PresencePolicy

T = TypeVar("T")

DEFAULT_STRING_LENGTH = 30

Clock = Callable[[], datetime]


def utc_now_naive() -> datetime:
    """Current UTC date and time with the timezone stripped."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class ValueGenerator:
    """
    Produce structurally valid values for kinds.

    Parameters
    ----------
    entropy : EntropySource | None
        Random source for every draw. Defaults to an unseeded (OS entropy) source.
    presence : PresencePolicy | None
        Decides optional presence. Defaults to `FairCoin`.
    enum_policy : EnumPolicy | None
        Decides enum variants. Defaults to `CanonicalDefault`.
    clock : Callable[[], datetime] | None
        Source of "now" for timestamps. Defaults to naive UTC now.
    string_length : int
        Length of generated strings.
    """

    def __init__(
        self,
        entropy: Optional[EntropySource] = None,
        presence: Optional[PresencePolicy] = None,
        enum_policy: Optional[EnumPolicy] = None,
        clock: Optional[Clock] = None,
        string_length: int = DEFAULT_STRING_LENGTH,
    ) -> None:
        if string_length < 1:
            raise ValueError("string_length must be positive")
        self.entropy = entropy or EntropySource()
        self.presence = presence or FairCoin()
        self.enum_policy = enum_policy or CanonicalDefault()
        self.clock = clock or utc_now_naive
        self.string_length = string_length

    def generate(
        self,
        kind: Kind[T],
        constructor: Optional[Callable[[], T]] = None,
        transform: Optional[Callable[[T], T]] = None,
    ) -> T:
        """
        Generate one value of `kind`.

        If `constructor` is given its result is the base value and the kind's
        default rule is skipped. If `transform` is given it is applied to the
        base value before returning.
        """
        value = constructor() if constructor is not None else kind.default(self)
        if transform is not None:
            value = transform(value)
        return value

    def __repr__(self) -> str:
        return (
            f"ValueGenerator(entropy={self.entropy!r}, presence={self.presence!r}, "
            f"enum_policy={self.enum_policy!r})"
        )


__all__ = ["DEFAULT_STRING_LENGTH", "Clock", "ValueGenerator", "utc_now_naive"]
