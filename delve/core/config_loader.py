"""Runtime configuration loader (seed, window scale, log level)."""

import json
import logging
import os
import random
from typing import NamedTuple

from config import SCALE, RUNTIME_CONFIG_PATH

logger = logging.getLogger(__name__)

SEED_MODES = ("fixed", "random")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class RuntimeConfig(NamedTuple):
    seed_mode: str = "random"
    seed: int = 12345
    scale: int = SCALE
    log_level: str = "INFO"


def load_runtime_config(config_path: str = RUNTIME_CONFIG_PATH) -> RuntimeConfig:
    """
    Load runtime toggles from JSON with safe defaults.

    A missing or unreadable file gives the defaults; each invalid field falls
    back to its own default independently.

    Args:
        config_path: Path to the configuration file

    Returns:
        RuntimeConfig: Loaded configuration
    """
    defaults = RuntimeConfig()
    if not os.path.exists(config_path):
        logger.warning("Config file not found: %s, using defaults", config_path)
        return defaults

    try:
        with open(config_path, 'r') as f:
            data = json.load(f) or {}
    except (OSError, json.JSONDecodeError) as e:
        logger.warning("Error loading config: %s, using defaults", e)
        return defaults

    cfg = data.get('game_config', {}) if isinstance(data, dict) else {}
    if not isinstance(cfg, dict):
        cfg = {}

    seed_mode = str(cfg.get('seed_mode', defaults.seed_mode))
    if seed_mode not in SEED_MODES:
        logger.warning("Unknown seed_mode %r, using %r", seed_mode, defaults.seed_mode)
        seed_mode = defaults.seed_mode

    try:
        seed = int(cfg.get('seed', defaults.seed))
    except (TypeError, ValueError):
        seed = defaults.seed

    try:
        scale = int(cfg.get('scale', defaults.scale))
    except (TypeError, ValueError):
        scale = defaults.scale
    if scale < 1:
        scale = defaults.scale

    log_level = str(cfg.get('log_level', defaults.log_level)).upper()
    if log_level not in LOG_LEVELS:
        log_level = defaults.log_level

    return RuntimeConfig(seed_mode=seed_mode, seed=seed, scale=scale, log_level=log_level)


def resolve_seed(runtime: RuntimeConfig) -> int:
    if runtime.seed_mode == "random":
        return random.randrange(0, 2**31 - 1)
    return runtime.seed


def save_runtime_config(runtime: RuntimeConfig, config_path: str = RUNTIME_CONFIG_PATH) -> None:
    """Persist runtime toggles back into the JSON file, keeping unknown keys."""
    directory = os.path.dirname(config_path)
    if directory:
        os.makedirs(directory, exist_ok=True)

    existing = {}
    if os.path.exists(config_path):
        try:
            with open(config_path, 'r') as f:
                existing = json.load(f) or {}
        except (OSError, json.JSONDecodeError):
            existing = {}

    if not isinstance(existing, dict):
        existing = {}
    cfg = existing.get("game_config")
    if not isinstance(cfg, dict):
        cfg = {}
    cfg["seed_mode"] = str(runtime.seed_mode)
    cfg["seed"] = int(runtime.seed)
    cfg["scale"] = int(runtime.scale)
    cfg["log_level"] = str(runtime.log_level)
    existing["game_config"] = cfg

    with open(config_path, 'w') as f:
        json.dump(existing, f, indent=2)
