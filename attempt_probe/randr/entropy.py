"""
Injectable random source for record generation.

Every draw made by the value generator goes through an `EntropySource`, so a
caller can pass a seeded source for deterministic replay or share one unseeded
source across threads. Unseeded sources are backed by `random.SystemRandom`
(OS entropy), seeded ones by `random.Random`.
"""

from __future__ import annotations

import random
import string
import threading
from typing import Optional, Sequence, TypeVar

from attempt_probe.errors import EntropyExhausted

T = TypeVar("T")

ALPHANUMERIC = string.ascii_letters + string.digits


class EntropySource:
    """
    Thread-safe wrapper around a `random.Random` instance.

    Parameters
    ----------
    seed : int | None
        Seed for reproducible sequences. When omitted, OS entropy is used.
    rng : random.Random | None
        Explicit generator to wrap; takes precedence over `seed`.
    """

    def __init__(self, seed: Optional[int] = None, rng: Optional[random.Random] = None) -> None:
        if rng is None:
            rng = random.Random(seed) if seed is not None else random.SystemRandom()
        self._rng = rng
        self._lock = threading.Lock()
        self.seed = seed

    def coin(self) -> bool:
        """Fair boolean sample."""
        with self._lock:
            try:
                return self._rng.random() < 0.5
            except (OSError, NotImplementedError) as exc:
                raise EntropyExhausted(str(exc)) from exc

    def integer(self, low: int, high: int) -> int:
        """Uniform integer in the closed interval [low, high]."""
        with self._lock:
            try:
                return self._rng.randint(low, high)
            except (OSError, NotImplementedError) as exc:
                raise EntropyExhausted(str(exc)) from exc

    def alphanumeric(self, length: int) -> str:
        """Random string of ASCII letters and digits."""
        with self._lock:
            try:
                return "".join(self._rng.choices(ALPHANUMERIC, k=length))
            except (OSError, NotImplementedError) as exc:
                raise EntropyExhausted(str(exc)) from exc

    def choice(self, options: Sequence[T]) -> T:
        """Uniform pick from a non-empty sequence."""
        with self._lock:
            try:
                return self._rng.choice(options)
            except (OSError, NotImplementedError) as exc:
                raise EntropyExhausted(str(exc)) from exc

    def __repr__(self) -> str:
        source = "seeded" if self.seed is not None else type(self._rng).__name__
        return f"EntropySource({source})"


__all__ = ["ALPHANUMERIC", "EntropySource"]
