#!/usr/bin/env python3
"""
Decode errors raised while loading schematic metadata.

Every error carries the `source` it was raised for, so a message is enough to
diagnose the problem without re-reading the file.
"""
from __future__ import annotations

from typing import Any, Optional

from litemeta.core.tag_variant import TagVariant


class DecodeError(ValueError):
    """Base class for all schematic decode failures."""

    def __init__(self, message: str, source: Any = None):
        self.source = None if source is None else str(source)
        self.detail = message
        super().__init__(f"{message} in file: {self.source}" if self.source else message)


class IoFailure(DecodeError):
    """The byte source could not be opened, read, or decompressed."""


class MalformedTree(DecodeError):
    """The decompressed stream is not a tag tree, or its root is not a Compound."""


class MissingField(DecodeError):
    """A required tag is absent."""

    def __init__(self, field: str, source: Any = None):
        self.field = field
        super().__init__(f"Missing required tag {field!r}", source)


class TypeMismatch(DecodeError):
    """A required tag is present but of the wrong variant."""

    def __init__(self, field: str, expected: TagVariant, actual: Optional[TagVariant], source: Any = None, actual_name: Optional[str] = None):
        self.field = field
        self.expected = expected
        self.actual = actual
        observed = actual_name or (actual.value if actual else "unknown")
        super().__init__(f"Expected {expected.value} for {field!r} but got {observed}", source)
