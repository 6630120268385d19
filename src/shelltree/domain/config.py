from __future__ import annotations

"""
Configuration Domain Management.

Defines the default runtime configuration that drives an analysis run and
loads optional JSON overrides from disk. Missing or unreadable files fall
back to the defaults.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

from shelltree.domain.constants import (
    DEFAULT_DEVICE_CAPACITY,
    DEFAULT_REQUIRED_FREE_SPACE,
    DEFAULT_SIZE_THRESHOLD,
    DEFAULT_TRANSCRIPT_PATH,
)

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------

def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Input
        "transcript_path": DEFAULT_TRANSCRIPT_PATH,

        # Query parameters
        "size_threshold": DEFAULT_SIZE_THRESHOLD,
        "device_capacity": DEFAULT_DEVICE_CAPACITY,
        "required_free_space": DEFAULT_REQUIRED_FREE_SPACE,

        # Output
        "render_tree": False,
    }


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------

def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load the runtime configuration, layering a JSON file over the defaults.

    Unknown keys in the file are ignored. Any I/O or decoding failure is
    logged and the defaults are returned untouched.

    Args:
        path: Optional path to a JSON object with configuration overrides.

    Returns:
        Dict[str, Any]: The merged configuration.
    """
    config = get_default_config()
    if not path:
        return config

    if not os.path.exists(path):
        logger.warning(f"Config file not found: {path}. Using defaults.")
        return config

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Failed to load config from '{path}': {e}. Using defaults.")
        return config

    if not isinstance(data, dict):
        logger.warning(f"Config file '{path}' does not contain a JSON object. Using defaults.")
        return config

    for key in config:
        if key in data:
            config[key] = data[key]

    logger.debug(f"Configuration loaded from {path}")
    return config
