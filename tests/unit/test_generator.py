from __future__ import annotations

import random
import threading
from datetime import datetime
from enum import Enum

import pytest

from attempt_probe.domain.enums import (
    CANONICAL_DEFAULTS,
    AttemptStatus,
    CaptureMethod,
    Currency,
)
from attempt_probe.domain.fields import MANDATE_DATA_TYPE, MANDATE_DETAILS
from attempt_probe.domain.models import JsonPayload, MandateDetails, MultiUse, SingleUse
from attempt_probe.errors import EntropyExhausted
from attempt_probe.randr import (
    Boolean,
    CanonicalDefault,
    EntropySource,
    EnumKind,
    FixedPresence,
    Int16,
    Int64,
    Maybe,
    Payload,
    Text,
    Timestamp,
    UniformVariant,
    ValueGenerator,
    utc_now_naive,
)
from attempt_probe.randr.kinds import INT16_MAX, INT16_MIN, INT64_MAX, INT64_MIN

DRAWS = 400
DEFAULT_STRING_LENGTH = 30


class _RangeRecorder(random.Random):
    """Random that records the bounds handed to randint."""

    def __init__(self) -> None:
        super().__init__(0)
        self.bounds: list[tuple[int, int]] = []

    def randint(self, a: int, b: int) -> int:
        self.bounds.append((a, b))
        return a


class _ExhaustedRandom(random.Random):
    """Random whose every draw fails like an unavailable OS entropy pool."""

    def random(self) -> float:
        raise OSError("entropy source unavailable")

    def randint(self, a: int, b: int) -> int:
        raise OSError("entropy source unavailable")

    def choices(self, population, weights=None, *, cum_weights=None, k=1):
        raise OSError("entropy source unavailable")

    def choice(self, seq):
        raise OSError("entropy source unavailable")


class _Shade(Enum):
    LIGHT = "light"
    DARK = "dark"


def test_text_default_is_fixed_length_alphanumeric(seeded_generator: ValueGenerator) -> None:
    value = seeded_generator.generate(Text())
    assert len(value) == DEFAULT_STRING_LENGTH
    assert value.isascii() and value.isalnum()


def test_text_length_overrides() -> None:
    gen = ValueGenerator(entropy=EntropySource(seed=3), string_length=12)
    assert len(gen.generate(Text())) == 12
    assert len(gen.generate(Text(length=5))) == 5


def test_string_length_must_be_positive() -> None:
    with pytest.raises(ValueError):
        ValueGenerator(string_length=0)


@pytest.mark.parametrize("length", [0, -3])
def test_text_length_must_be_positive(length: int) -> None:
    with pytest.raises(ValueError):
        Text(length=length)


def test_text_explicit_length_wins_over_setting() -> None:
    gen = ValueGenerator(entropy=EntropySource(seed=3), string_length=30)
    assert len(gen.generate(Text(length=1))) == 1


def test_integers_sample_full_width_range() -> None:
    recorder = _RangeRecorder()
    gen = ValueGenerator(entropy=EntropySource(rng=recorder))

    assert gen.generate(Int64()) == INT64_MIN
    assert gen.generate(Int16()) == INT16_MIN
    assert recorder.bounds == [(INT64_MIN, INT64_MAX), (INT16_MIN, INT16_MAX)]


def test_integers_stay_in_range(seeded_generator: ValueGenerator) -> None:
    for _ in range(DRAWS):
        assert INT64_MIN <= seeded_generator.generate(Int64()) <= INT64_MAX
        assert INT16_MIN <= seeded_generator.generate(Int16()) <= INT16_MAX


def test_boolean_yields_both_values(seeded_generator: ValueGenerator) -> None:
    values = {seeded_generator.generate(Boolean()) for _ in range(DRAWS)}
    assert values == {True, False}


def test_timestamp_reads_injected_clock(seeded_generator: ValueGenerator, fixed_clock) -> None:
    assert seeded_generator.generate(Timestamp()) == fixed_clock()


def test_default_clock_is_timezone_naive() -> None:
    before = utc_now_naive()
    value = ValueGenerator().generate(Timestamp())
    assert value.tzinfo is None
    assert isinstance(value, datetime)
    assert value >= before


def test_constructor_bypasses_default_rule() -> None:
    gen = ValueGenerator(entropy=EntropySource(rng=_ExhaustedRandom()))
    # No entropy is drawn, so the failing source is never touched.
    assert gen.generate(Int64(), constructor=lambda: 500) == 500
    assert gen.generate(Text(), constructor=lambda: "fixed") == "fixed"


def test_transform_applies_to_constructed_value(seeded_generator: ValueGenerator) -> None:
    value = seeded_generator.generate(Int64(), constructor=lambda: 2, transform=lambda v: v * 10)
    assert value == 20


def test_transform_applies_to_default_value(seeded_generator: ValueGenerator) -> None:
    assert seeded_generator.generate(Text(), transform=len) == DEFAULT_STRING_LENGTH


def test_maybe_respects_fixed_presence() -> None:
    present = ValueGenerator(entropy=EntropySource(seed=5), presence=FixedPresence(True))
    absent = ValueGenerator(entropy=EntropySource(seed=5), presence=FixedPresence(False))

    assert isinstance(present.generate(Maybe(Int64())), int)
    assert absent.generate(Maybe(Int64())) is None


def test_maybe_fair_coin_yields_both_outcomes(seeded_generator: ValueGenerator) -> None:
    outcomes = {seeded_generator.generate(Maybe(Boolean())) is None for _ in range(DRAWS)}
    assert outcomes == {True, False}


@pytest.mark.parametrize("enum_type", list(CANONICAL_DEFAULTS))
def test_enum_default_is_canonical_variant(seeded_generator: ValueGenerator, enum_type) -> None:
    values = {seeded_generator.generate(EnumKind(enum_type)) for _ in range(50)}
    assert values == {CANONICAL_DEFAULTS[enum_type]}


def test_canonical_policy_falls_back_to_first_member() -> None:
    gen = ValueGenerator(entropy=EntropySource(seed=1), enum_policy=CanonicalDefault())
    assert gen.generate(EnumKind(_Shade)) is _Shade.LIGHT


def test_canonical_policy_accepts_custom_defaults() -> None:
    policy = CanonicalDefault({Currency: Currency.EUR})
    gen = ValueGenerator(entropy=EntropySource(seed=1), enum_policy=policy)
    assert gen.generate(EnumKind(Currency)) is Currency.EUR
    assert gen.generate(EnumKind(AttemptStatus)) is AttemptStatus.STARTED


def test_uniform_policy_covers_variants() -> None:
    gen = ValueGenerator(entropy=EntropySource(seed=11), enum_policy=UniformVariant())
    values = {gen.generate(EnumKind(CaptureMethod)) for _ in range(DRAWS)}
    assert values == set(CaptureMethod)


def test_payload_default_is_null_placeholder(seeded_generator: ValueGenerator) -> None:
    payload = seeded_generator.generate(Payload())
    assert isinstance(payload, JsonPayload)
    assert payload.root is None


def test_struct_generates_each_field() -> None:
    gen = ValueGenerator(entropy=EntropySource(seed=2), presence=FixedPresence(True))
    details = gen.generate(MANDATE_DETAILS)
    assert isinstance(details, MandateDetails)
    assert len(details.update_mandate_id) == DEFAULT_STRING_LENGTH


def test_tagged_union_picks_both_arms() -> None:
    gen = ValueGenerator(entropy=EntropySource(seed=8), presence=FixedPresence(True))
    arms = {type(gen.generate(MANDATE_DATA_TYPE)) for _ in range(DRAWS)}
    assert arms == {SingleUse, MultiUse}


def test_tagged_union_arms_apply_presence_recursively() -> None:
    gen = ValueGenerator(entropy=EntropySource(seed=8), presence=FixedPresence(False))
    for _ in range(50):
        mandate = gen.generate(MANDATE_DATA_TYPE)
        if isinstance(mandate, MultiUse):
            assert mandate.amount_data is None
        else:
            data = mandate.amount_data
            assert data.currency is Currency.USD
            assert (data.start_date, data.end_date, data.metadata) == (None, None, None)


def test_exhausted_source_raises() -> None:
    gen = ValueGenerator(entropy=EntropySource(rng=_ExhaustedRandom()))
    with pytest.raises(EntropyExhausted):
        gen.generate(Text())
    with pytest.raises(EntropyExhausted):
        gen.generate(Maybe(Text()))
    with pytest.raises(EntropyExhausted):
        gen.generate(Int64())


def test_unseeded_source_uses_system_random() -> None:
    source = EntropySource()
    assert isinstance(source._rng, random.SystemRandom)


def test_seeded_sources_replay_identically() -> None:
    first, second = EntropySource(seed=21), EntropySource(seed=21)
    assert [first.alphanumeric(10) for _ in range(5)] == [second.alphanumeric(10) for _ in range(5)]
    assert [first.integer(0, 10**9) for _ in range(5)] == [second.integer(0, 10**9) for _ in range(5)]


def test_shared_source_is_safe_across_threads() -> None:
    source = EntropySource()
    results: list[str] = []
    lock = threading.Lock()

    def worker() -> None:
        values = [source.alphanumeric(DEFAULT_STRING_LENGTH) for _ in range(200)]
        with lock:
            results.extend(values)

    threads = [threading.Thread(target=worker) for _ in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(results) == 800
    assert all(len(value) == DEFAULT_STRING_LENGTH for value in results)
    assert len(set(results)) == len(results)
