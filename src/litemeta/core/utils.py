#!/usr/bin/env python3
"""
Purpose:
    Provides common utility functions: epoch-millisecond conversion,
    extension normalization, dictionary merge, and file I/O helpers.
"""

import json
from datetime import datetime, timedelta
from pathlib import Path
from typing import Any, Dict, Iterable, Optional

from litemeta.core.constants import DEFAULT_TEXT_ENCODING, UNIX_EPOCH


# --- Time Helpers --- #

def datetime_from_epoch_millis(millis: int) -> Optional[datetime]:
    """
    Convert milliseconds since the Unix epoch to an aware UTC datetime.

    Returns None when the value falls outside the range `datetime` can hold
    (years 1..9999); a 64-bit millisecond count reaches far beyond it.
    """
    try:
        return UNIX_EPOCH + timedelta(milliseconds=int(millis))
    except OverflowError:
        return None


# --- Path Helpers --- #

def normalize_extensions(extensions: Iterable[str]) -> frozenset[str]:
    """
    Lowercase extensions and make sure each has a leading dot; blanks are dropped.

    Example:
        ["litematic", " .NBT "] -> {".litematic", ".nbt"}
    """
    result = set()
    for ext in extensions:
        e = str(ext).strip().lower()
        if not e:
            continue
        result.add(e if e.startswith(".") else f".{e}")
    return frozenset(result)


# --- Generic Utilities --- #

def merge_dicts(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """
    Recursively merge two dictionaries (values from 'override' take precedence).
    Non-dict values are overwritten; dict values are merged depth-first.
    """
    result = dict(base)
    for k, v in override.items():
        if isinstance(v, dict) and isinstance(result.get(k), dict):
            result[k] = merge_dicts(result[k], v)
        else:
            result[k] = v
    return result


# --- File I/O Helpers --- #

def load_json_file(path: Path) -> Dict[str, Any]:
    """
    Load a JSON file from 'path'. Returns an empty dict if the file is missing.

    Raises:
        ValueError: if the file exists but contains invalid JSON.
    """
    if not path.exists():
        return {}
    try:
        with path.open("r", encoding=DEFAULT_TEXT_ENCODING) as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(
            f"Invalid JSON in {str(path)!r}: {e.msg} (line {e.lineno}, col {e.colno})"
        ) from e
