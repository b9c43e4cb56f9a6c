"""
Record factory: assemble one immutable `PaymentAttempt` per call.

Each field is generated independently through the value generator according
to `PAYMENT_ATTEMPT_FIELDS`. Per-field constructors and transforms let callers
pin values without touching the table:

    factory = RecordFactory(ValueGenerator(entropy=EntropySource(seed=1)))
    attempt = factory.build(constructors={"amount": lambda: 500})
"""

from __future__ import annotations

from typing import Any, Callable, Iterator, Mapping, Optional

from attempt_probe.domain.fields import FIELDS_BY_NAME, PAYMENT_ATTEMPT_FIELDS
from attempt_probe.domain.models import PaymentAttempt
from attempt_probe.errors import UnknownFieldError
from attempt_probe.randr.generator import ValueGenerator
from attempt_probe.utils.logging import get_logger

log = get_logger(__name__)

Constructors = Mapping[str, Callable[[], Any]]
Transforms = Mapping[str, Callable[[Any], Any]]


def _check_names(overrides: Optional[Mapping[str, Any]], label: str) -> None:
    if not overrides:
        return
    unknown = sorted(set(overrides) - set(FIELDS_BY_NAME))
    if unknown:
        raise UnknownFieldError(f"Unknown {label} field(s): {', '.join(unknown)}")


class RecordFactory:
    """
    Build payment attempts from an injected generator.

    Parameters
    ----------
    generator : ValueGenerator | None
        Generator carrying the entropy source, policies and clock. Defaults to
        an unseeded generator with the reference policies.
    """

    def __init__(self, generator: Optional[ValueGenerator] = None) -> None:
        self.generator = generator or ValueGenerator()

    def build(
        self,
        constructors: Optional[Constructors] = None,
        transforms: Optional[Transforms] = None,
    ) -> PaymentAttempt:
        """
        Generate one complete record.

        Parameters
        ----------
        constructors : Mapping[str, Callable[[], Any]] | None
            Per-field constructors replacing the default rule for that field.
        transforms : Mapping[str, Callable[[Any], Any]] | None
            Per-field transforms applied after construction.

        Raises
        ------
        UnknownFieldError
            If an override names a field that is not declared.
        """
        _check_names(constructors, "constructor")
        _check_names(transforms, "transform")
        constructors = constructors or {}
        transforms = transforms or {}

        values = {
            spec.name: self.generator.generate(
                spec.kind,
                constructor=constructors.get(spec.name),
                transform=transforms.get(spec.name),
            )
            for spec in PAYMENT_ATTEMPT_FIELDS
        }
        attempt = PaymentAttempt(**values)
        log.debug(
            "Generated payment attempt",
            extra={"payment_id": attempt.payment_id, "attempt_id": attempt.attempt_id},
        )
        return attempt

    def build_many(
        self,
        count: int,
        constructors: Optional[Constructors] = None,
        transforms: Optional[Transforms] = None,
    ) -> Iterator[PaymentAttempt]:
        """Return an iterator over `count` independently generated records."""
        if count < 0:
            raise ValueError("count must be non-negative")
        return self._iter_records(count, constructors, transforms)

    def _iter_records(
        self,
        count: int,
        constructors: Optional[Constructors],
        transforms: Optional[Transforms],
    ) -> Iterator[PaymentAttempt]:
        for _ in range(count):
            yield self.build(constructors=constructors, transforms=transforms)


__all__ = ["RecordFactory"]
