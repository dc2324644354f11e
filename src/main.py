"""Entry point for the Wanderlines demo.

Sets up ECS world, event bus, systems, and Arcade window.
"""
import logging
from pathlib import Path

from arcade import Window, run, set_background_color, color
from wander.world import create_world
from wander.constants import WINDOW_WIDTH, WINDOW_HEIGHT, UPDATE_RATE
from wander.events.bus import EVENT_TICK, EventBus
from wander.components.wander_config import WanderConfig
from wander.systems.wander_system import WanderSystem
from wander.systems.render import RenderSystem
from wander.utils.config_loader import load_wander_config

DEFAULT_WANDERER_COUNT = 6
SCENE_CONFIG_PATH = Path(__file__).resolve().parents[1] / "data" / "wander.json"


class WanderlinesWindow(Window):
    def __init__(self, config: WanderConfig, wanderer_count: int = DEFAULT_WANDERER_COUNT):
        super().__init__(WINDOW_WIDTH, WINDOW_HEIGHT, "Wanderlines")
        self.set_update_rate(UPDATE_RATE)
        self.event_bus = EventBus()
        self.world = create_world(self.event_bus, config=config, wanderer_count=wanderer_count)
        self.wander_system = WanderSystem(self.world, self.event_bus)
        self.render_system = RenderSystem(self.world, self)
        set_background_color(color.BLACK)

    def on_draw(self):
        self.clear()
        self.render_system.process()

    def on_update(self, delta_time: float):
        self.event_bus.emit(EVENT_TICK, dt=delta_time)


def main():
    logging.basicConfig(level=logging.INFO)
    config = load_wander_config(SCENE_CONFIG_PATH) if SCENE_CONFIG_PATH.exists() else WanderConfig()
    window = WanderlinesWindow(config)
    run()

if __name__ == "__main__":
    main()
