# Area: Shared
"""
match_core._config — Configuration
==================================

Constants used by match creation, plus loading of the optional settings
the command-line tool reads (log level, log file).

Settings come from, in increasing priority:
    1. Built-in defaults
    2. A JSON config file
    3. Environment variables (a ``.env`` file is loaded first)
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv

from .errors import ConfigError

logger = logging.getLogger("match_core")

# Seat count used when create_match() receives a missing or malformed one
DEFAULT_NUM_PLAYERS = 2

# Player that moves first in a new match
FIRST_PLAYER_ID = "0"

DEFAULT_CONFIG: Dict[str, Any] = {
    "log_level": "INFO",
    "log_file": "match_core.log",
}

ENV_MAPPINGS = {
    "MATCH_CORE_LOG_LEVEL": "log_level",
    "MATCH_CORE_LOG_FILE": "log_file",
}

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def load_config(config_path: Optional[str] = None, env_file: Optional[str] = None) -> Dict[str, Any]:
    """
    Load settings from defaults, an optional JSON file and the environment.

    Args:
        config_path: Path to a JSON config file. A missing file is ignored.
        env_file: Path to a .env file. Defaults to searching from the
            current directory.

    Returns:
        Validated config dict

    Raises:
        ConfigError: If the file is not valid JSON or a value is invalid
    """
    config: Dict[str, Any] = dict(DEFAULT_CONFIG)

    if config_path:
        path = Path(config_path)
        if path.exists():
            try:
                with open(path, encoding="utf-8") as f:
                    loaded = json.load(f)
            except json.JSONDecodeError as e:
                raise ConfigError(str(path), [f"Invalid JSON: {e}"]) from e
            if not isinstance(loaded, dict):
                raise ConfigError(str(path), ["Top-level value must be an object"])
            config.update(loaded)
        else:
            logger.debug(f"Config file not found, using defaults: {path}")

    load_dotenv(dotenv_path=env_file)
    for env_key, config_key in ENV_MAPPINGS.items():
        if env_key in os.environ:
            config[config_key] = os.environ[env_key]

    validate_config(config, source=config_path or "environment")
    return config


def validate_config(config: Dict[str, Any], source: str = "config") -> None:
    """
    Validate config values.

    Raises:
        ConfigError: If any value has the wrong type or is out of range
    """
    errors = []
    level = config.get("log_level")
    if not isinstance(level, str) or level.upper() not in _LOG_LEVELS:
        errors.append(f"log_level must be one of {sorted(_LOG_LEVELS)}, got {level!r}")
    log_file = config.get("log_file")
    if log_file is not None and not isinstance(log_file, str):
        errors.append(f"log_file must be a string or null, got {type(log_file).__name__}")
    if errors:
        raise ConfigError(source, errors)


def log_level(config: Dict[str, Any]) -> int:
    """Translate the configured level name to a logging constant."""
    return getattr(logging, config["log_level"].upper())
