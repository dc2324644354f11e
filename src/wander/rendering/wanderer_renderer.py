from typing import Dict, Tuple

from esper import World

from wander.components.agent_state import AgentState
from wander.components.transform import Transform
from wander.components.wanderer_runtime import WandererRuntime
from wander.constants import WANDERER_RADIUS
from wander.rendering.context import RenderContext

STATE_COLORS = {
    AgentState.IDLE: (200, 200, 200),
    AgentState.MOVING: (63, 127, 59),
}


class WandererRenderer:
    """Draw each wanderer as a dot tinted by its current state."""

    def __init__(self, world: World, radius: float = WANDERER_RADIUS):
        self.world = world
        self.radius = radius
        self.draw_coords: Dict[int, Tuple[float, float]] = {}

    def render(self, arcade, ctx: RenderContext, *, headless: bool = False) -> None:
        self.draw_coords = {}
        for ent, (transform, runtime) in self.world.get_components(Transform, WandererRuntime):
            sx, sy = ctx.to_screen(transform.x, transform.y)
            self.draw_coords[ent] = (sx, sy)
            if headless:
                continue
            color = STATE_COLORS[runtime.state]
            arcade.draw_circle_filled(sx, sy, self.radius, color)
            arcade.draw_circle_outline(sx, sy, self.radius, (255, 255, 255), 1)
