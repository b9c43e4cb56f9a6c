"""
Random value generation package.

Re-exports the entropy source, the kind descriptors, the generation policies
and the value generator so callers can import from `attempt_probe.randr`.
"""

from attempt_probe.randr.entropy import EntropySource
from attempt_probe.randr.generator import ValueGenerator, utc_now_naive
from attempt_probe.randr.kinds import (
    Boolean,
    EnumKind,
    Int16,
    Int64,
    Kind,
    Maybe,
    Payload,
    Struct,
    TaggedUnion,
    Text,
    Timestamp,
)
from attempt_probe.randr.policies import (
    CanonicalDefault,
    EnumPolicy,
    FairCoin,
    FixedPresence,
    PresencePolicy,
    UniformVariant,
)

__all__ = [
    "EntropySource",
    "ValueGenerator",
    "utc_now_naive",
    # Kinds
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
    # Policies
    "PresencePolicy",
    "EnumPolicy",
    "FairCoin",
    "FixedPresence",
    "CanonicalDefault",
    "UniformVariant",
]
