from __future__ import annotations

"""
Configuration Domain Management.

Holds the default finder options and loads option overrides stored as a
JSON object on disk. Missing or corrupted files fall back to no overrides.
"""

import json
import logging
import os
from typing import Any, Dict

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
DEFAULT_CEILING = 10000


def get_default_config() -> Dict[str, Any]:
    """
    Generate the default finder configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Tree sources
        "directories": [],
        "full_file_names": [],

        # Scan limits and filtering
        "ceiling": DEFAULT_CEILING,
        "ignores": [],

        # Path syntax
        "separator": os.sep,
    }

# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config_file(path: str) -> Dict[str, Any]:
    """
    Load configuration overrides from a JSON file.

    Args:
        path: Location of the JSON document.

    Returns:
        Dict[str, Any]: The stored overrides, or an empty dict on failure.
    """
    if not os.path.exists(path):
        logger.warning(f"Config file not found: {path}. Using defaults.")
        return {}

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load config '{path}': {e}. Using defaults.")
        return {}

    if not isinstance(data, dict):
        logger.warning(f"Corrupted config file '{path}'. Using defaults.")
        return {}

    logger.debug(f"Loaded {len(data)} option(s) from {path}")
    return data
