from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

from wander.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class Bounds:
    """Axis-aligned rectangle a wanderer is clamped into."""

    min_x: float
    max_x: float
    min_y: float
    max_y: float

    def __post_init__(self) -> None:
        for name in ("min_x", "max_x", "min_y", "max_y"):
            value = getattr(self, name)
            if not isinstance(value, (int, float)) or isinstance(value, bool) or not math.isfinite(value):
                raise ConfigurationError(f"Bounds.{name} must be a finite number, got {value!r}")
        if self.min_x > self.max_x:
            raise ConfigurationError(f"Bounds min_x {self.min_x} exceeds max_x {self.max_x}")
        if self.min_y > self.max_y:
            raise ConfigurationError(f"Bounds min_y {self.min_y} exceeds max_y {self.max_y}")

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @property
    def center(self) -> Tuple[float, float]:
        return (self.min_x + self.max_x) * 0.5, (self.min_y + self.max_y) * 0.5

    def contains(self, x: float, y: float) -> bool:
        return self.min_x <= x <= self.max_x and self.min_y <= y <= self.max_y

    def clamp(self, x: float, y: float) -> Tuple[float, float]:
        return (
            min(max(x, self.min_x), self.max_x),
            min(max(y, self.min_y), self.max_y),
        )
