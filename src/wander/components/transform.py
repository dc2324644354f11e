from dataclasses import dataclass
from typing import Tuple


@dataclass(slots=True)
class Transform:
    """World-space position of an entity. Wandering only ever touches x and y."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def as_tuple(self) -> Tuple[float, float, float]:
        return self.x, self.y, self.z
