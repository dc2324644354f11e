from __future__ import annotations

import logging
import random
from typing import Sequence

from esper import World

from wander.components.transform import Transform
from wander.components.wander_config import WanderConfig
from wander.components.wanderer_runtime import WandererRuntime
from wander.events.bus import (
    EVENT_TICK,
    EVENT_WANDER_STATE_CHANGED,
    EVENT_WANDERER_DESPAWN_REQUEST,
    EVENT_WANDERER_DESPAWNED,
    EVENT_WANDERER_SPAWNED,
    EventBus,
)
from wander.factories.wanderers import create_wanderer
from wander.systems.wander_ops import step_wanderer, validate_delta_time
from wander.utils.random_source import RandomSource, as_random_source

logger = logging.getLogger(__name__)


class WanderSystem:
    """Advances every wanderer entity once per tick."""

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        rng: RandomSource | random.Random | None = None,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        self.random = as_random_source(rng if rng is not None else getattr(world, "random", None))
        event_bus.subscribe(EVENT_TICK, self.on_tick)
        event_bus.subscribe(EVENT_WANDERER_DESPAWN_REQUEST, self.on_despawn_request)

    def spawn(self, config: WanderConfig | None = None, position: Sequence[float] = (0.0, 0.0, 0.0)) -> int:
        entity = create_wanderer(self.world, config, position, rng=self.random)
        transform = self.world.component_for_entity(entity, Transform)
        logger.debug("Spawned wanderer %d at %s", entity, transform.as_tuple())
        self.event_bus.emit(EVENT_WANDERER_SPAWNED, entity=entity, position=transform.as_tuple())
        return entity

    def on_tick(self, sender, **payload) -> None:
        try:
            dt = validate_delta_time(payload.get("dt", 0.0))
        except ValueError as exc:
            logger.warning("Dropping tick: %s", exc)
            return
        # Snapshot first so despawns triggered by listeners do not disturb iteration.
        entries = list(self.world.get_components(Transform, WanderConfig, WandererRuntime))
        for entity, (transform, config, runtime) in entries:
            transition = step_wanderer(runtime, config, transform, self.random, dt)
            if transition is None:
                continue
            previous_state, new_state = transition
            logger.debug(
                "Wanderer %d %s -> %s for %.3fs",
                entity,
                previous_state.name,
                new_state.name,
                runtime.remaining_time,
            )
            self.event_bus.emit(
                EVENT_WANDER_STATE_CHANGED,
                entity=entity,
                previous_state=previous_state,
                new_state=new_state,
                duration=runtime.remaining_time,
                direction=runtime.direction,
            )

    def on_despawn_request(self, sender, **payload) -> None:
        entity = payload.get("entity")
        if entity is None or not self.world.entity_exists(entity):
            return
        if not self.world.has_component(entity, WandererRuntime):
            return
        self.world.delete_entity(entity, immediate=True)
        logger.debug("Despawned wanderer %d", entity)
        self.event_bus.emit(EVENT_WANDERER_DESPAWNED, entity=entity)
