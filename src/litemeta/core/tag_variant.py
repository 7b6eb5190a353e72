#!/usr/bin/env python3
"""
Purpose:
    Defines the TagVariant enumeration: the closed set of NBT node kinds a
    decoded tag tree can contain, with helpers to classify `nbtlib` nodes
    and to map between variants and their wire tag ids.
"""

from __future__ import annotations

from enum import Enum
from functools import lru_cache
from typing import Any, Optional

from nbtlib import tag as nbt_tag


class TagVariant(str, Enum):
    """
    NBT node variants, named after their `nbtlib` classes.

    - End       : terminator (id 0)
    - Byte      : 8-bit signed integer
    - Short     : 16-bit signed integer
    - Int       : 32-bit signed integer
    - Long      : 64-bit signed integer
    - Float     : 32-bit float
    - Double    : 64-bit float
    - ByteArray : array of bytes
    - String    : modified UTF-8 text
    - List      : homogeneous list of unnamed nodes
    - Compound  : mapping from name to node
    - IntArray  : array of 32-bit integers
    - LongArray : array of 64-bit integers
    """

    END = "End"
    BYTE = "Byte"
    SHORT = "Short"
    INT = "Int"
    LONG = "Long"
    FLOAT = "Float"
    DOUBLE = "Double"
    BYTE_ARRAY = "ByteArray"
    STRING = "String"
    LIST = "List"
    COMPOUND = "Compound"
    INT_ARRAY = "IntArray"
    LONG_ARRAY = "LongArray"

    def __str__(self) -> str:
        return self.value

    # --- Introspection --- #

    @property
    def tag_class(self) -> type:
        """The `nbtlib` class implementing this variant."""
        return getattr(nbt_tag, self.value)

    @property
    def tag_id(self) -> int:
        """The numeric tag id written on the wire."""
        return self.tag_class.tag_id

    def matches(self, tag: Any) -> bool:
        """Return True if `tag` is a node of exactly this variant."""
        return TagVariant.of(tag) is self

    # --- Parsing helpers --- #

    @classmethod
    def of(cls, tag: Any) -> Optional[TagVariant]:
        """
        Classify a decoded node.

        Subclasses (e.g. `nbtlib.File`, or a parametrized `List[Int]`) are
        reported as their NBT base variant. Values that are not NBT nodes at
        all (plain `int`, `dict`, None) return None.
        """
        by_class = _variants_by_class()
        # Most specific NBT class first, so the answer never depends on nbtlib's hierarchy
        for klass in type(tag).__mro__:
            if klass in by_class:
                return by_class[klass]
        return None

    @classmethod
    def from_id(cls, tag_id: int) -> TagVariant:
        """
        Look up a variant by wire tag id.

        Raises:
            ValueError: if `tag_id` is not a known NBT tag id.
        """
        for variant in cls:
            if variant.tag_id == tag_id:
                return variant
        raise ValueError(f"Unknown NBT tag id: {tag_id!r}")


def describe(tag: Any) -> str:
    """Human-readable variant name for error messages, falling back to the Python type."""
    variant = TagVariant.of(tag)
    return variant.value if variant else type(tag).__name__


@lru_cache(maxsize=None)
def _variants_by_class() -> dict[type, TagVariant]:
    return {variant.tag_class: variant for variant in TagVariant}
