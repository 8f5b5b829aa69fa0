"""
Settings Module for Block Blast Solver

Provides persistent storage for user preferences using JSON.
Settings are stored in config.json in the working directory.
"""

import json
import logging
from pathlib import Path
from typing import Dict, Any, Optional

logger = logging.getLogger(__name__)

# Settings file location (working directory)
SETTINGS_FILE = Path("config.json")

# Default settings
DEFAULT_SETTINGS: Dict[str, Any] = {
    "debug_enabled": False,
    "strategy_name": "exhaustive",
    "timeout_sec": None,
    "render_cell_size": 32,
}


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


# Accepted values per key; anything else falls back to the default
_VALIDATORS = {
    "debug_enabled": lambda v: isinstance(v, bool),
    "strategy_name": lambda v: isinstance(v, str) and bool(v),
    "timeout_sec": lambda v: v is None or _is_number(v),
    "render_cell_size": lambda v: isinstance(v, int) and not isinstance(v, bool) and v > 0,
}


def validate_settings(settings: Dict[str, Any]) -> Dict[str, Any]:
    """
    Merge settings over the defaults, dropping values of the wrong type.

    Unknown keys are kept as they are. Each rejected value is logged and
    replaced by its default.

    Args:
        settings: Raw settings, typically decoded from config.json

    Returns:
        New settings dictionary
    """
    result = DEFAULT_SETTINGS.copy()
    for key, value in settings.items():
        check = _VALIDATORS.get(key)
        if check is not None and not check(value):
            logger.warning(
                f"Ignoring invalid setting {key}={value!r}, "
                f"using default {DEFAULT_SETTINGS[key]!r}"
            )
            continue
        result[key] = value
    return result


def load_settings(path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load settings from config.json.

    Args:
        path: Settings file (defaults to SETTINGS_FILE)

    Returns:
        Settings dictionary. Returns defaults if file missing or invalid,
        and per-key defaults for values of the wrong type.
    """
    path = path or SETTINGS_FILE
    if not path.exists():
        logger.debug("Settings file not found, using defaults")
        return DEFAULT_SETTINGS.copy()

    try:
        with open(path, 'r', encoding='utf-8') as f:
            settings = json.load(f)
    except (json.JSONDecodeError, IOError) as e:
        logger.warning(f"Failed to load settings: {e}, using defaults")
        return DEFAULT_SETTINGS.copy()

    if not isinstance(settings, dict):
        logger.warning("Settings root must be an object, using defaults")
        return DEFAULT_SETTINGS.copy()

    result = validate_settings(settings)
    logger.debug(f"Settings loaded: {result}")
    return result


def save_settings(settings: Dict[str, Any], path: Optional[Path] = None) -> None:
    """
    Save settings to config.json.

    Args:
        settings: Settings dictionary to save
        path: Settings file (defaults to SETTINGS_FILE)
    """
    path = path or SETTINGS_FILE
    try:
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(settings, f, indent=2)
        logger.debug(f"Settings saved: {settings}")
    except IOError as e:
        logger.error(f"Failed to save settings: {e}")
