from __future__ import annotations

import random
from typing import Sequence

from esper import World

from wander.components.bounds import Bounds
from wander.components.transform import Transform
from wander.components.wander_config import WanderConfig
from wander.components.wanderer_runtime import WandererRuntime
from wander.systems.wander_ops import initial_runtime
from wander.utils.random_source import RandomSource, as_random_source


def create_wanderer(
    world: World,
    config: WanderConfig | None = None,
    position: Sequence[float] = (0.0, 0.0, 0.0),
    *,
    rng: RandomSource | random.Random | None = None,
) -> int:
    """Spawn a wanderer entity that starts idle with a freshly sampled timer."""
    config = config if config is not None else WanderConfig()
    source = as_random_source(rng if rng is not None else getattr(world, "random", None))
    coords = tuple(float(v) for v in position)
    if len(coords) == 2:
        coords = (coords[0], coords[1], 0.0)
    if len(coords) != 3:
        raise ValueError(f"position must have 2 or 3 components, got {len(coords)}")
    return world.create_entity(
        Transform(*coords),
        config,
        initial_runtime(config, source),
    )


def random_point_in(bounds: Bounds, rng: RandomSource | random.Random | None = None) -> tuple[float, float, float]:
    source = as_random_source(rng)
    return (
        source.uniform(bounds.min_x, bounds.max_x),
        source.uniform(bounds.min_y, bounds.max_y),
        0.0,
    )


def spawn_wanderers(
    world: World,
    count: int,
    config: WanderConfig | None = None,
    *,
    rng: RandomSource | random.Random | None = None,
) -> list[int]:
    """Spawn ``count`` wanderers scattered across the config bounds."""
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    config = config if config is not None else WanderConfig()
    source = as_random_source(rng if rng is not None else getattr(world, "random", None))
    return [
        create_wanderer(world, config, random_point_in(config.bounds, source), rng=source)
        for _ in range(count)
    ]
