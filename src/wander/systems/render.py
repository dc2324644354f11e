from esper import World

from wander.constants import PIXELS_PER_UNIT
from wander.rendering.bounds_overlay import BoundsOverlayRenderer
from wander.rendering.context import RenderContext, build_render_context
from wander.rendering.wanderer_renderer import WandererRenderer


class RenderSystem:
    def __init__(self, world: World, window, *, scale: float = PIXELS_PER_UNIT, show_bounds: bool = True):
        self.world = world
        self.window = window
        self.scale = scale
        self.show_bounds = show_bounds
        self._render_ctx: RenderContext | None = None
        self._bounds_renderer = BoundsOverlayRenderer(self.world)
        self._wanderer_renderer = WandererRenderer(self.world)

    def process(self):
        # Local import keeps tests headless without creating a window.
        import arcade
        headless = False
        try:
            arcade.get_window()
        except Exception:
            headless = True
        ctx = build_render_context(self.window.width, self.window.height, self.scale)
        self._render_ctx = ctx
        if self.show_bounds:
            self._bounds_renderer.render(arcade, ctx, headless=headless)
        self._wanderer_renderer.render(arcade, ctx, headless=headless)

    @property
    def last_draw_coords(self):
        return dict(self._wanderer_renderer.draw_coords)

    @property
    def last_bounds_rects(self):
        return list(self._bounds_renderer.layout_cache)
