from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Mapping

from wander.components.bounds import Bounds
from wander.constants import (
    DEFAULT_MAX_IDLE_TIME,
    DEFAULT_MAX_MOVE_TIME,
    DEFAULT_MAX_X,
    DEFAULT_MAX_Y,
    DEFAULT_MIN_IDLE_TIME,
    DEFAULT_MIN_MOVE_TIME,
    DEFAULT_MIN_X,
    DEFAULT_MIN_Y,
    DEFAULT_MOVE_SPEED,
)
from wander.errors import ConfigurationError

_BOUNDS_KEYS = ("min_x", "max_x", "min_y", "max_y")


def _default_bounds() -> Bounds:
    return Bounds(DEFAULT_MIN_X, DEFAULT_MAX_X, DEFAULT_MIN_Y, DEFAULT_MAX_Y)


@dataclass(frozen=True, slots=True)
class WanderConfig:
    """Tuning for an idle/move wanderer.

    Only the ``min_*`` times feed duration sampling; the ``max_*`` times are
    still validated so a config asset cannot carry an inverted range.
    """

    move_speed: float = DEFAULT_MOVE_SPEED
    min_idle_time: float = DEFAULT_MIN_IDLE_TIME
    max_idle_time: float = DEFAULT_MAX_IDLE_TIME
    min_move_time: float = DEFAULT_MIN_MOVE_TIME
    max_move_time: float = DEFAULT_MAX_MOVE_TIME
    bounds: Bounds = field(default_factory=_default_bounds)

    def __post_init__(self) -> None:
        for name in ("move_speed", "min_idle_time", "max_idle_time", "min_move_time", "max_move_time"):
            value = getattr(self, name)
            if not isinstance(value, (int, float)) or isinstance(value, bool) or not math.isfinite(value):
                raise ConfigurationError(f"{name} must be a finite number, got {value!r}")
            if value < 0:
                raise ConfigurationError(f"{name} must be non-negative, got {value}")
        if self.min_idle_time > self.max_idle_time:
            raise ConfigurationError(
                f"min_idle_time {self.min_idle_time} exceeds max_idle_time {self.max_idle_time}"
            )
        if self.min_move_time > self.max_move_time:
            raise ConfigurationError(
                f"min_move_time {self.min_move_time} exceeds max_move_time {self.max_move_time}"
            )
        if not isinstance(self.bounds, Bounds):
            raise ConfigurationError(f"bounds must be a Bounds instance, got {type(self.bounds).__name__}")

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "WanderConfig":
        """Build a config from a plain mapping such as a decoded scene asset."""
        if not isinstance(data, Mapping):
            raise ConfigurationError(f"Wander config must be a mapping, got {type(data).__name__}")
        allowed = {"move_speed", "min_idle_time", "max_idle_time", "min_move_time", "max_move_time", "bounds"}
        unknown = sorted(set(data) - allowed)
        if unknown:
            raise ConfigurationError(f"Unknown wander config keys: {', '.join(unknown)}")

        kwargs: dict[str, Any] = {}
        for key in allowed - {"bounds"}:
            if key in data:
                kwargs[key] = _as_float(key, data[key])

        raw_bounds = data.get("bounds")
        if raw_bounds is not None:
            kwargs["bounds"] = _bounds_from_mapping(raw_bounds)
        return cls(**kwargs)

    def to_mapping(self) -> dict[str, Any]:
        return {
            "move_speed": self.move_speed,
            "min_idle_time": self.min_idle_time,
            "max_idle_time": self.max_idle_time,
            "min_move_time": self.min_move_time,
            "max_move_time": self.max_move_time,
            "bounds": {key: getattr(self.bounds, key) for key in _BOUNDS_KEYS},
        }


def _as_float(key: str, value: Any) -> float:
    if isinstance(value, bool):
        raise ConfigurationError(f"{key} must be a number, got {value!r}")
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"{key} must be a number, got {value!r}") from exc


def _bounds_from_mapping(raw: Any) -> Bounds:
    if not isinstance(raw, Mapping):
        raise ConfigurationError(f"bounds must be a mapping, got {type(raw).__name__}")
    unknown = sorted(set(raw) - set(_BOUNDS_KEYS))
    if unknown:
        raise ConfigurationError(f"Unknown bounds keys: {', '.join(unknown)}")
    defaults = _default_bounds()
    values = {
        key: _as_float(f"bounds.{key}", raw[key]) if key in raw else getattr(defaults, key)
        for key in _BOUNDS_KEYS
    }
    return Bounds(**values)
