import math
import random

import pytest

from wander.agent import AgentWanderer
from wander.components.agent_state import AgentState
from wander.components.bounds import Bounds
from wander.components.transform import Transform
from wander.components.wander_config import WanderConfig
from wander.errors import ConfigurationError
from wander.utils.random_source import RandomRangeSource
from tests.helpers import FractionRandom


def _config(**overrides) -> WanderConfig:
    base = dict(
        move_speed=5.0,
        min_idle_time=1.0,
        max_idle_time=4.0,
        min_move_time=1.0,
        max_move_time=3.0,
        bounds=Bounds(-3.0, 3.0, -3.0, 3.0),
    )
    base.update(overrides)
    return WanderConfig(**base)


def test_spawns_idle_with_timer_sampled_from_min_idle_time():
    rng = FractionRandom([0.0])
    agent = AgentWanderer(_config(min_idle_time=2.0), Transform(0, 0, 0), rng)

    assert agent.state is AgentState.IDLE
    assert agent.remaining_time == pytest.approx(1.0)
    assert rng.calls == [(1.0, 4.0)]


def test_moving_step_is_clamped_to_bounds():
    # idle 0.5s; then move 1.25s heading straight along +x
    rng = FractionRandom([0.0, 0.5, 0.75, 0.5])
    transform = Transform(0.0, 0.0, 7.0)
    agent = AgentWanderer(_config(), transform, rng)

    agent.update(0.6)
    assert agent.state is AgentState.MOVING
    assert agent.direction == (1.0, 0.0)
    assert transform.as_tuple() == (0.0, 0.0, 7.0)

    transform.x = 2.9
    result = agent.update(1.0)

    assert result is transform
    assert agent.position == (3.0, 0.0, 7.0)
    assert agent.state is AgentState.MOVING
    assert agent.remaining_time == pytest.approx(0.25)


def test_idle_expiry_enters_moving_with_unit_direction():
    agent = AgentWanderer(_config(min_idle_time=0.1, min_move_time=2.0), Transform(), random.Random(11))
    agent.update(agent.remaining_time + 0.05)

    assert agent.state is AgentState.MOVING
    assert 1.0 <= agent.remaining_time < 4.0
    assert math.hypot(*agent.direction) == pytest.approx(1.0, abs=1e-6)


def test_moving_expiry_returns_to_idle():
    rng = FractionRandom([0.0, 0.0, 0.75, 0.5, 0.25])
    agent = AgentWanderer(_config(), Transform(), rng)
    agent.update(0.6)
    assert agent.state is AgentState.MOVING
    remaining = agent.remaining_time

    agent.update(remaining + 0.01)

    assert agent.state is AgentState.IDLE
    # 0.5 + (2.0 - 0.5) * 0.25
    assert agent.remaining_time == pytest.approx(0.875)
    assert agent.direction == (0.0, 0.0)


def test_zero_direction_sample_holds_position():
    rng = FractionRandom([0.0], default=0.5)
    transform = Transform(1.0, -1.0, 0.0)
    agent = AgentWanderer(_config(), transform, rng)

    agent.update(0.6)
    assert agent.state is AgentState.MOVING
    assert agent.direction == (0.0, 0.0)

    agent.update(0.5)
    assert transform.as_tuple() == (1.0, -1.0, 0.0)


@pytest.mark.parametrize("dt", [-0.01, math.nan, math.inf, "soon"])
def test_update_rejects_invalid_delta_time(dt):
    agent = AgentWanderer(_config(), Transform(), random.Random(0))
    with pytest.raises(ValueError):
        agent.update(dt)


def test_inverted_config_fails_before_controller_exists():
    with pytest.raises(ConfigurationError):
        AgentWanderer(_config(min_idle_time=5, max_idle_time=1))


def test_config_type_is_checked():
    with pytest.raises(TypeError):
        AgentWanderer({"move_speed": 1.0})  # type: ignore[arg-type]


def test_debug_bounds_is_read_only_view_of_config():
    config = _config(bounds=Bounds(-1, 2, -3, 4))
    agent = AgentWanderer(config, Transform(), random.Random(0))
    before = (agent.state, agent.remaining_time, agent.position)

    assert agent.debug_bounds() == Bounds(-1, 2, -3, 4)
    assert (agent.state, agent.remaining_time, agent.position) == before


@pytest.mark.parametrize("seed", [0, 1, 2, 42, 1234])
def test_long_run_properties(seed):
    rng = random.Random(seed)
    config = _config(move_speed=7.0, min_idle_time=0.3, min_move_time=0.6, bounds=Bounds(-2.0, 1.0, -0.5, 3.0))
    transform = Transform(0.0, 1.0, -2.0)
    agent = AgentWanderer(config, transform, RandomRangeSource(seed=seed))
    states = [agent.state]

    for _ in range(2000):
        dt = rng.choice([0.0, 0.001, 0.016, 0.1, 0.5, 3.0])
        state_before = agent.state
        position_before = agent.position
        agent.update(dt)

        assert config.bounds.contains(transform.x, transform.y)
        assert transform.z == -2.0
        if state_before is AgentState.IDLE and agent.state is AgentState.IDLE:
            assert agent.position == position_before
        if agent.state is not state_before:
            states.append(agent.state)
            if agent.state is AgentState.IDLE:
                assert 0.15 <= agent.remaining_time < 0.6
            else:
                assert 0.3 <= agent.remaining_time < 1.2
                assert math.hypot(*agent.direction) == pytest.approx(1.0, abs=1e-6)

    assert len(states) > 10
    for previous, current in zip(states, states[1:]):
        assert previous is not current


def test_advance_moving_refuses_idle_agent():
    rng = FractionRandom([0.0, 0.5, 0.75, 0.5, 0.0])
    transform = Transform()
    agent = AgentWanderer(_config(), transform, rng)
    agent.update(0.6)
    agent.update(2.0)
    assert agent.state is AgentState.IDLE
    assert agent.direction == (0.0, 0.0)
    transform.x = 0.0
    before = (agent.remaining_time, transform.as_tuple())

    with pytest.raises(RuntimeError):
        agent.advance_moving(0.1)

    assert agent.state is AgentState.IDLE
    assert (agent.remaining_time, transform.as_tuple()) == before


def test_advance_idle_refuses_moving_agent():
    rng = FractionRandom([0.0, 0.5, 0.75, 0.5])
    agent = AgentWanderer(_config(), Transform(), rng)
    agent.update(0.6)
    assert agent.state is AgentState.MOVING
    before = (agent.remaining_time, agent.direction)

    with pytest.raises(RuntimeError):
        agent.advance_idle(5.0)

    assert agent.state is AgentState.MOVING
    assert (agent.remaining_time, agent.direction) == before
    assert rng.calls == [(0.5, 2.0), (0.5, 2.0), (-1.0, 1.0), (-1.0, 1.0)]


def test_matching_step_methods_advance_like_update():
    rng = FractionRandom([0.0, 0.5, 0.75, 0.5])
    transform = Transform()
    agent = AgentWanderer(_config(), transform, rng)

    agent.advance_idle(0.6)
    assert agent.state is AgentState.MOVING
    agent.advance_moving(0.2)
    assert transform.as_tuple() == (1.0, 0.0, 0.0)
