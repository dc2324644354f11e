from __future__ import annotations

from typing import Tuple

from esper import World

from wander.components.bounds import Bounds
from wander.components.wander_config import WanderConfig
from wander.constants import OVERLAY_BORDER_WIDTH
from wander.rendering.context import RenderContext

Vec3 = Tuple[float, float, float]
OVERLAY_COLOR = (0, 0, 255)


def bounds_wireframe(bounds: Bounds, z: float = 0.0) -> Tuple[Vec3, Vec3]:
    """Centre and size of the flat debug box outlining ``bounds`` at depth ``z``."""
    cx, cy = bounds.center
    return (cx, cy, z), (bounds.width, bounds.height, 0.0)


class BoundsOverlayRenderer:
    """Debug outline of every distinct wander area in the world."""

    def __init__(self, world: World):
        self.world = world
        self.layout_cache: list[Tuple[float, float, float, float]] = []

    def render(self, arcade, ctx: RenderContext, *, headless: bool = False) -> None:
        seen: set[Bounds] = set()
        self.layout_cache = []
        for _, config in self.world.get_component(WanderConfig):
            if config.bounds in seen:
                continue
            seen.add(config.bounds)
            rect = _screen_rect(ctx, config.bounds)
            self.layout_cache.append(rect)
            if headless:
                continue
            left, bottom, width, height = rect
            arcade.draw_lbwh_rectangle_outline(
                left, bottom, width, height, OVERLAY_COLOR, border_width=OVERLAY_BORDER_WIDTH
            )


def _screen_rect(ctx: RenderContext, bounds: Bounds) -> Tuple[float, float, float, float]:
    """(left, bottom, width, height) in pixels for the wireframe of ``bounds``."""
    (cx, cy, _), (width, height, _) = bounds_wireframe(bounds)
    sx, sy = ctx.to_screen(cx, cy)
    pixel_w = width * ctx.scale
    pixel_h = height * ctx.scale
    return sx - pixel_w / 2, sy - pixel_h / 2, pixel_w, pixel_h
