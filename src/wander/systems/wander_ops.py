"""Idle/move state machine shared by the standalone controller and the ECS system.

Every function here works on plain components so the same rules drive a
single ``AgentWanderer`` and a world full of wanderer entities.
"""
from __future__ import annotations

import logging
import math
from typing import Tuple

from wander.components.agent_state import AgentState
from wander.components.transform import Transform
from wander.components.wander_config import WanderConfig
from wander.components.wanderer_runtime import WandererRuntime
from wander.constants import (
    DIRECTION_COMPONENT_RANGE,
    DURATION_SCALE_HIGH,
    DURATION_SCALE_LOW,
    MAX_DIRECTION_SAMPLES,
)
from wander.utils.random_source import RandomSource
from wander.utils.vector_math import ZERO2, Vec2, normalize

logger = logging.getLogger(__name__)

# (previous_state, new_state) when a step crossed an expiry, else None.
Transition = Tuple[AgentState, AgentState] | None


def validate_delta_time(dt: float) -> float:
    try:
        value = float(dt)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Delta time must be a number, got {dt!r}") from exc
    if not math.isfinite(value) or value < 0.0:
        raise ValueError(f"Delta time must be finite and non-negative, got {dt!r}")
    return value


def sample_idle_duration(config: WanderConfig, rng: RandomSource) -> float:
    return rng.uniform(config.min_idle_time * DURATION_SCALE_LOW, config.min_idle_time * DURATION_SCALE_HIGH)


def sample_move_duration(config: WanderConfig, rng: RandomSource) -> float:
    return rng.uniform(config.min_move_time * DURATION_SCALE_LOW, config.min_move_time * DURATION_SCALE_HIGH)


def sample_direction(rng: RandomSource, *, max_samples: int = MAX_DIRECTION_SAMPLES) -> Vec2:
    """Random unit direction in the XY plane.

    A draw of exactly (0, 0) has no direction, so it is redrawn. When every
    attempt is degenerate the zero vector comes back and the wanderer holds
    still for that move interval.
    """
    lo, hi = DIRECTION_COMPONENT_RANGE
    for _ in range(max(1, max_samples)):
        candidate = (rng.uniform(lo, hi), rng.uniform(lo, hi))
        if candidate != ZERO2:
            return normalize(candidate)
    logger.warning("Direction sampling produced (0, 0) %d times; wanderer will hold still", max_samples)
    return ZERO2


def initial_runtime(config: WanderConfig, rng: RandomSource) -> WandererRuntime:
    return WandererRuntime(
        state=AgentState.IDLE,
        remaining_time=sample_idle_duration(config, rng),
        direction=ZERO2,
    )


def _require_state(runtime: WandererRuntime, expected: AgentState) -> None:
    if runtime.state is not expected:
        raise RuntimeError(f"Cannot advance a {runtime.state.name} wanderer as {expected.name}")


def move_within_bounds(transform: Transform, config: WanderConfig, direction: Vec2, dt: float) -> None:
    step = config.move_speed * dt
    candidate_x = transform.x + direction[0] * step
    candidate_y = transform.y + direction[1] * step
    # z is never touched
    transform.x, transform.y = config.bounds.clamp(candidate_x, candidate_y)


def advance_moving(
    runtime: WandererRuntime,
    config: WanderConfig,
    transform: Transform,
    rng: RandomSource,
    dt: float,
) -> Transition:
    _require_state(runtime, AgentState.MOVING)
    move_within_bounds(transform, config, runtime.direction, dt)
    runtime.remaining_time -= dt
    if runtime.remaining_time < 0.0:
        runtime.state = AgentState.IDLE
        runtime.remaining_time = sample_idle_duration(config, rng)
        runtime.direction = ZERO2
        return AgentState.MOVING, AgentState.IDLE
    return None


def advance_idle(
    runtime: WandererRuntime,
    config: WanderConfig,
    rng: RandomSource,
    dt: float,
) -> Transition:
    _require_state(runtime, AgentState.IDLE)
    runtime.remaining_time -= dt
    if runtime.remaining_time < 0.0:
        runtime.state = AgentState.MOVING
        runtime.remaining_time = sample_move_duration(config, rng)
        runtime.direction = sample_direction(rng)
        return AgentState.IDLE, AgentState.MOVING
    return None


def step_wanderer(
    runtime: WandererRuntime,
    config: WanderConfig,
    transform: Transform,
    rng: RandomSource,
    dt: float,
) -> Transition:
    if runtime.state is AgentState.MOVING:
        return advance_moving(runtime, config, transform, rng, dt)
    return advance_idle(runtime, config, rng, dt)
