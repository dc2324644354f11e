from __future__ import annotations

import json
import logging
from pathlib import Path

from wander.components.wander_config import WanderConfig
from wander.errors import ConfigurationError

logger = logging.getLogger(__name__)


def load_wander_config(path: Path | str) -> WanderConfig:
    """Read a wander config from a JSON scene asset."""
    config_path = Path(path)
    try:
        with config_path.open("r", encoding="utf-8") as handle:
            payload = json.load(handle)
    except FileNotFoundError as exc:
        raise ConfigurationError(f"Wander config not found: {config_path}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"Wander config {config_path} is not valid JSON: {exc}") from exc
    config = WanderConfig.from_mapping(payload)
    logger.info("Loaded wander config from %s", config_path)
    return config


def save_wander_config(config: WanderConfig, path: Path | str) -> None:
    config_path = Path(path)
    config_path.parent.mkdir(parents=True, exist_ok=True)
    with config_path.open("w", encoding="utf-8") as handle:
        json.dump(config.to_mapping(), handle, indent=2)
