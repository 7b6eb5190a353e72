#!/usr/bin/env python3
"""
Purpose:
    Wires together the litemeta application context: merges configuration
    and applies the configured logging level.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from litemeta.core.config import load_config
from litemeta.core.utils import normalize_extensions


# --- Data model --- #

@dataclass(frozen=True)
class AppContext:
    """Immutable container for configuration and the values derived from it."""
    config: Dict[str, Any]
    extensions: frozenset[str]
    output_format: str


# --- Factory --- #

def build_context(
    *,
    config: Optional[Dict[str, Any]] = None,
    configure_logging: bool = True,
) -> AppContext:
    """
    Build an `AppContext`.

    Args:
        config:
            Pre-merged configuration. If omitted, `load_config()` is used.
        configure_logging:
            If True, applies `config['logging']['level']` to the root logger.

    Returns:
        AppContext: immutable bundle of config, scan extensions, and output format.

    Raises:
        ValueError: if the configured logging level is not a known level name.
    """
    cfg = config or load_config()

    if configure_logging:
        level = str(cfg.get("logging", {}).get("level", "WARNING")).upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Invalid logging level: {level!r}")
        logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    return AppContext(
        config=cfg,
        extensions=normalize_extensions(cfg.get("extensions", [])),
        output_format=str(cfg.get("output_format", "text")).strip().lower(),
    )
