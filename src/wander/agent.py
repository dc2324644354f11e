from __future__ import annotations

import logging
import random
from typing import Tuple

from wander.components.agent_state import AgentState
from wander.components.bounds import Bounds
from wander.components.transform import Transform
from wander.components.wander_config import WanderConfig
from wander.components.wanderer_runtime import WandererRuntime
from wander.systems.wander_ops import (
    advance_idle,
    advance_moving,
    initial_runtime,
    step_wanderer,
    validate_delta_time,
)
from wander.utils.random_source import RandomSource, as_random_source

logger = logging.getLogger(__name__)


class AgentWanderer:
    """Idle/move controller for a single agent outside of any ECS world.

    The host owns the ``Transform`` and calls ``update`` once per frame with
    the elapsed time; the controller writes the clamped position back into
    that transform while moving and leaves it alone while idle.
    """

    def __init__(
        self,
        config: WanderConfig | None = None,
        transform: Transform | None = None,
        rng: RandomSource | random.Random | None = None,
    ) -> None:
        self.config = config if config is not None else WanderConfig()
        if not isinstance(self.config, WanderConfig):
            raise TypeError(f"config must be a WanderConfig, got {type(self.config).__name__}")
        self.transform = transform if transform is not None else Transform()
        self.random = as_random_source(rng)
        self._runtime: WandererRuntime = initial_runtime(self.config, self.random)
        logger.debug("Wanderer spawned idle for %.3fs", self._runtime.remaining_time)

    @property
    def state(self) -> AgentState:
        return self._runtime.state

    @property
    def remaining_time(self) -> float:
        return self._runtime.remaining_time

    @property
    def direction(self) -> Tuple[float, float]:
        return self._runtime.direction

    @property
    def position(self) -> Tuple[float, float, float]:
        return self.transform.as_tuple()

    def update(self, dt: float) -> Transform:
        dt = validate_delta_time(dt)
        transition = step_wanderer(self._runtime, self.config, self.transform, self.random, dt)
        if transition is not None:
            self._log_transition(transition)
        return self.transform

    def advance_moving(self, dt: float) -> None:
        """Moving step on its own; raises ``RuntimeError`` unless currently moving."""
        dt = validate_delta_time(dt)
        transition = advance_moving(self._runtime, self.config, self.transform, self.random, dt)
        if transition is not None:
            self._log_transition(transition)

    def advance_idle(self, dt: float) -> None:
        """Idle step on its own; raises ``RuntimeError`` unless currently idle."""
        dt = validate_delta_time(dt)
        transition = advance_idle(self._runtime, self.config, self.random, dt)
        if transition is not None:
            self._log_transition(transition)

    def debug_bounds(self) -> Bounds:
        """Configured wander area, for debug overlays only."""
        return self.config.bounds

    def _log_transition(self, transition: Tuple[AgentState, AgentState]) -> None:
        previous, new = transition
        logger.debug(
            "Wanderer %s -> %s for %.3fs direction=(%.3f, %.3f)",
            previous.name,
            new.name,
            self._runtime.remaining_time,
            self._runtime.direction[0],
            self._runtime.direction[1],
        )
