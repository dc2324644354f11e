from __future__ import annotations

import random
from typing import Protocol, runtime_checkable


@runtime_checkable
class RandomSource(Protocol):
    """Uniform sampler handed to wanderers instead of a global generator."""

    def uniform(self, lo: float, hi: float) -> float:
        """Return a float in ``[lo, hi)``; ``lo`` itself when the range is empty."""
        ...


class RandomRangeSource:
    """Adapts a ``random.Random`` to the half-open ``RandomSource`` contract.

    ``random.Random.uniform`` may return ``hi`` through rounding, so the range
    is computed from ``random()`` which never reaches 1.0.
    """

    __slots__ = ("_rng",)

    def __init__(self, rng: random.Random | None = None, *, seed: int | None = None) -> None:
        if rng is not None and seed is not None:
            raise ValueError("Pass either rng or seed, not both")
        self._rng = rng if rng is not None else random.Random(seed)

    @property
    def rng(self) -> random.Random:
        return self._rng

    def uniform(self, lo: float, hi: float) -> float:
        if hi <= lo:
            return lo
        value = lo + (hi - lo) * self._rng.random()
        # Guard the float rounding case where lo + span lands on hi.
        return value if value < hi else lo


def as_random_source(source: RandomSource | random.Random | None) -> RandomSource:
    """Normalise the random inputs accepted across the package."""
    if source is None:
        return RandomRangeSource()
    if isinstance(source, random.Random):
        return RandomRangeSource(source)
    return source
