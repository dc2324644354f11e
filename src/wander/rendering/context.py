from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(slots=True)
class RenderContext:
    """Frame-scoped mapping from world units to window pixels.

    The world origin sits at the window centre; ``scale`` is pixels per unit.
    """

    window_width: int
    window_height: int
    scale: float

    @property
    def origin(self) -> Tuple[float, float]:
        return self.window_width / 2, self.window_height / 2

    def to_screen(self, x: float, y: float) -> Tuple[float, float]:
        ox, oy = self.origin
        return ox + x * self.scale, oy + y * self.scale


def build_render_context(window_width: int, window_height: int, scale: float) -> RenderContext:
    if scale <= 0:
        raise ValueError(f"scale must be positive, got {scale}")
    return RenderContext(window_width=int(window_width), window_height=int(window_height), scale=float(scale))
