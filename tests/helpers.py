from __future__ import annotations

from collections import deque
from typing import Iterable


class FractionRandom:
    """Scripted ``RandomSource``: each draw maps the next fraction onto ``[lo, hi)``.

    With ``default`` set, draws past the end of the script keep returning that
    fraction; otherwise running out fails the test.
    """

    def __init__(self, fractions: Iterable[float] = (), *, default: float | None = None) -> None:
        self._fractions = deque(fractions)
        self._default = default
        self.calls: list[tuple[float, float]] = []

    def uniform(self, lo: float, hi: float) -> float:
        self.calls.append((lo, hi))
        if self._fractions:
            fraction = self._fractions.popleft()
        elif self._default is not None:
            fraction = self._default
        else:
            raise AssertionError(f"Unexpected random draw for range [{lo}, {hi})")
        return lo + (hi - lo) * fraction
