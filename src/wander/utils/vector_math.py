import math
from typing import Tuple

Vec2 = Tuple[float, float]

ZERO2: Vec2 = (0.0, 0.0)


def length(vec: Vec2) -> float:
    return math.hypot(vec[0], vec[1])


def normalize(vec: Vec2) -> Vec2:
    """Unit vector along ``vec``; the zero vector maps to itself."""
    magnitude = length(vec)
    if magnitude == 0.0:
        return ZERO2
    return vec[0] / magnitude, vec[1] / magnitude
