from __future__ import annotations

"""
Configuration Domain Management.

User preferences stored as JSON (locale, directory label, extra icon
definitions, log level and log file) and loading of user-supplied icon
tables that overlay the built-in ones.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

from filetree_markup.domain.icon_definitions import DEFAULT_DEFINITIONS
from filetree_markup.domain.tree_models import Definitions
from filetree_markup.infra.fs import get_user_data_dir

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "config.json"
DEFINITION_SECTIONS = ("files", "extensions", "partials")


class ConfigError(ValueError):
    """Raised when a user supplied configuration or definitions file is unusable."""


# -----------------------------------------------------------------------------
# Session configuration
# -----------------------------------------------------------------------------

def get_default_config() -> Dict[str, Any]:
    """
    Return the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        "locale": "en",
        "directory_label": "",
        "definitions_path": "",
        "log_level": "INFO",
        "log_file": "",
    }


def get_config_path() -> str:
    return os.path.join(get_user_data_dir(), CONFIG_FILE_NAME)


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load the configuration file merged over the defaults.

    A missing or corrupt file is not fatal: the defaults are returned and a
    warning is logged.

    Args:
        path: Config file location. Defaults to the user data directory.

    Returns:
        Dict[str, Any]: The effective configuration.
    """
    config = get_default_config()
    config_path = path or get_config_path()

    if not os.path.exists(config_path):
        logger.debug(f"No config file at '{config_path}', using defaults.")
        return config

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.warning(f"Ignoring unreadable config file '{config_path}': {e}")
        return config

    if not isinstance(data, dict):
        logger.warning(f"Ignoring config file '{config_path}': expected a JSON object.")
        return config

    for key in config:
        value = data.get(key)
        if isinstance(value, str):
            config[key] = value.strip()

    return config


# -----------------------------------------------------------------------------
# Icon definitions
# -----------------------------------------------------------------------------

def load_definitions(path: Optional[str] = None) -> Definitions:
    """
    Return the built-in icon tables overlaid with the tables in a JSON file.

    The file holds up to three objects, 'files', 'extensions' and 'partials',
    each mapping a string to an icon identifier. Missing sections are empty.

    Args:
        path: JSON definitions file. None or empty returns the built-in tables.

    Raises:
        ConfigError: If the file cannot be read or has the wrong shape.
    """
    if not path:
        return DEFAULT_DEFINITIONS

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise ConfigError(f"Cannot read icon definitions '{path}': {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigError(f"Icon definitions '{path}' are not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Icon definitions '{path}' must be a JSON object.")

    for section in DEFINITION_SECTIONS:
        table = data.get(section, {})
        if not isinstance(table, dict) or not all(
                isinstance(k, str) and isinstance(v, str) for k, v in table.items()
        ):
            raise ConfigError(
                f"Icon definitions '{path}': section '{section}' must map strings to strings."
            )

    user_definitions = Definitions.from_dict(data)
    logger.info(
        f"Loaded icon definitions from '{path}': "
        + ", ".join(f"{len(data.get(s, {}))} {s}" for s in DEFINITION_SECTIONS)
    )
    return DEFAULT_DEFINITIONS.merged(user_definitions)
