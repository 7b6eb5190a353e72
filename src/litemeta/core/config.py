#!/usr/bin/env python3
"""
litemeta configuration loader.
"""

import copy
import os
from pathlib import Path
from typing import Any, Dict, Final, List

from litemeta.core.constants import SUPPORTED_SCHEMATIC_EXT
from litemeta.core.utils import merge_dicts, load_json_file, normalize_extensions

# --- Defaults & locations --- #

DEFAULT_CONFIG: Final[Dict[str, Any]] = {
    "extensions": sorted(SUPPORTED_SCHEMATIC_EXT),
    "output_format": "text",
    "logging": {"level": "WARNING"},
}

GLOBAL_CONFIG_PATH: Final[Path] = Path.home() / ".config" / "litemeta" / "config.json"

PROJECT_CONFIG_NAME: Final[str] = "litemeta.json"


# --- Public API --- #

def load_config() -> Dict[str, Any]:
    """
    Load litemeta configuration with layered precedence.

    Order:
        1. Built-in defaults
        2. Global config (~/.config/litemeta/config.json)
        3. Project config (./litemeta.json)
        4. Environment overrides:
           - LITEMETA_EXTENSIONS (pathsep-separated list)
           - LITEMETA_OUTPUT_FORMAT
           - LITEMETA_LOG_LEVEL

    Returns:
        A merged configuration dictionary.
    """
    config = copy.deepcopy(DEFAULT_CONFIG)

    config = merge_dicts(config, load_json_file(GLOBAL_CONFIG_PATH))

    project_path = Path.cwd() / PROJECT_CONFIG_NAME
    config = merge_dicts(config, load_json_file(project_path))

    extensions_env = os.getenv("LITEMETA_EXTENSIONS")
    if extensions_env:
        config["extensions"] = _split_extensions_env(extensions_env)

    output_format_env = os.getenv("LITEMETA_OUTPUT_FORMAT")
    if output_format_env:
        config["output_format"] = output_format_env.strip().lower()

    log_level_env = os.getenv("LITEMETA_LOG_LEVEL")
    if log_level_env:
        config.setdefault("logging", {})["level"] = log_level_env

    return config


# --- Internals --- #

def _split_extensions_env(value: str) -> List[str]:
    """
    Split an extension-list env var on os.pathsep, dropping empties.

    Example:
        "litematic:.NBT:" on Unix -> [".litematic", ".nbt"]
    """
    return sorted(normalize_extensions(value.split(os.pathsep)))
