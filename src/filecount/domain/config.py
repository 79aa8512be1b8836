from __future__ import annotations

"""
Configuration Domain Management.

Handles persistent storage of the default traversal flags using JSON in the
user data directory. Missing or corrupted files fall back to defaults.
"""

import json
import logging
import os
from typing import Any, Dict

from filecount.infra.fs import get_user_data_dir

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
CONFIG_FILE_NAME = "config.json"
CURRENT_CONFIG_VERSION = "1.0.0"

CONFIG_KEYS = (
    "recursive",
    "include_hidden",
    "quiet",
    "skip_long_paths",
    "max_path_length",
)


def get_config_file() -> str:
    """Absolute path of the persisted configuration file."""
    return os.path.join(get_user_data_dir(), CONFIG_FILE_NAME)


def get_default_config() -> Dict[str, Any]:
    """
    Generate the default traversal configuration.

    A max_path_length of None defers to the platform limit.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        "recursive": True,
        "include_hidden": False,
        "quiet": False,
        "skip_long_paths": False,
        "max_path_length": None,
    }


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config() -> Dict[str, Any]:
    """
    Load the persisted configuration merged over the defaults.

    Unknown keys in the file are ignored.

    Returns:
        Dict[str, Any]: The loaded configuration or defaults on failure.
    """
    config = get_default_config()
    config_file = get_config_file()

    if not os.path.exists(config_file):
        logger.debug("Config file not found. Returning defaults.")
        return config

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load config: {e}. Using defaults.")
        return config

    if not isinstance(data, dict):
        logger.warning("Corrupted config file. Resetting to defaults.")
        return config

    for key in CONFIG_KEYS:
        if key in data:
            config[key] = data[key]
    return config


def save_config(config: Dict[str, Any]) -> bool:
    """
    Persist the known configuration keys to disk.

    Args:
        config: The configuration dictionary to save.

    Returns:
        bool: True when the file was written.
    """
    config_file = get_config_file()
    payload: Dict[str, Any] = {"version": CURRENT_CONFIG_VERSION}
    payload.update({k: config[k] for k in CONFIG_KEYS if k in config})

    try:
        os.makedirs(os.path.dirname(config_file), exist_ok=True)
        with open(config_file, "w", encoding="utf-8") as f:
            json.dump(payload, f, ensure_ascii=False, indent=4)
    except OSError as e:
        logger.error(f"Failed to save configuration: {e}")
        return False

    logger.debug(f"Configuration saved to {config_file}")
    return True
