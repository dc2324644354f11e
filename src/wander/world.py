import logging
import random

from esper import World

from wander.components.transform import Transform
from wander.components.wander_config import WanderConfig
from wander.events.bus import EVENT_WANDERER_SPAWNED, EventBus
from wander.factories.wanderers import spawn_wanderers

logger = logging.getLogger(__name__)


def create_world(
    event_bus: EventBus,
    *,
    config: WanderConfig | None = None,
    wanderer_count: int = 0,
    rng: random.Random | None = None,
) -> World:
    world = World()
    setattr(world, "random", rng or random.Random())

    if wanderer_count:
        entities = spawn_wanderers(world, wanderer_count, config, rng=world.random)
        for entity in entities:
            transform = world.component_for_entity(entity, Transform)
            event_bus.emit(EVENT_WANDERER_SPAWNED, entity=entity, position=transform.as_tuple())
        logger.info("Spawned %d wanderers", len(entities))
    return world
