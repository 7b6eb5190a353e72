#!/usr/bin/env python3
"""
Purpose:
    Defines the immutable metadata record produced for a Litematica schematic.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, Optional, Tuple

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt, field_validator


class EnclosingSize(BaseModel):
    """
    Dimensions of the box enclosing every region, in blocks.

    Example
    -------
    >>> size = EnclosingSize(x=5, y=4, z=3)
    >>> size.as_tuple()
    (5, 4, 3)
    >>> size.volume
    60
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    x: NonNegativeInt
    y: NonNegativeInt
    z: NonNegativeInt

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.x, self.y, self.z)

    @property
    def volume(self) -> int:
        return self.x * self.y * self.z


class SchematicMetadata(BaseModel):
    """
    Metadata read from a `.litematic` file, without its block payload.

    Fields
    ------
    source:
        Where the data came from (usually the file path). Opaque; only
        carried through for diagnostics and caller convenience.
    version:
        Litematica format version. Always present.
    sub_version, data_version:
        Format sub-version and Minecraft data version; 0 when not recorded.
    region_count:
        Number of named regions in the schematic.
    preview_image:
        Packed ARGB pixels of the embedded preview, copied into a tuple.
    name, author, description:
        Descriptive text, None when not recorded.
    time_created, time_modified:
        Aware UTC datetimes, None when not recorded.
    total_blocks, total_volume:
        Size statistics; 0 when not recorded.
    enclosing_size:
        Enclosing box dimensions, None unless all three axes are valid.

    Instances are frozen: assigning to a field raises `ValidationError`.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    source: str = Field(..., description="Origin of the data, e.g. the file path.")
    version: int = Field(..., description="Litematica format version.")
    sub_version: int = Field(default=0, description="Litematica format sub-version.")
    data_version: int = Field(default=0, description="Minecraft data version the schematic targets.")
    region_count: NonNegativeInt = Field(default=0, description="Number of named regions.")
    preview_image: Optional[Tuple[int, ...]] = Field(default=None, description="Packed ARGB preview pixels.")
    name: Optional[str] = None
    author: Optional[str] = None
    description: Optional[str] = None
    time_created: Optional[datetime] = None
    time_modified: Optional[datetime] = None
    total_blocks: int = 0
    total_volume: int = 0
    enclosing_size: Optional[EnclosingSize] = None

    # --- Validators --- #

    @field_validator("preview_image", mode="before")
    @classmethod
    def _copy_preview_image(cls, v: Any) -> Optional[Tuple[int, ...]]:
        """Copy any integer sequence (list, numpy array, nbtlib IntArray) into a tuple of ints."""
        if v is None:
            return None
        return tuple(int(p) for p in v)

    @field_validator("time_created", "time_modified")
    @classmethod
    def _ensure_utc(cls, v: Optional[datetime]) -> Optional[datetime]:
        """Naive datetimes are taken to be UTC."""
        if v is not None and v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v

    # --- Accessors --- #

    @property
    def has_preview(self) -> bool:
        return self.preview_image is not None

    def preview_pixels(self) -> Optional[np.ndarray]:
        """Return the preview pixels as a new int32 array, or None. Each call returns a fresh copy."""
        if self.preview_image is None:
            return None
        return np.array(self.preview_image, dtype=np.int32)

    def to_dict(self) -> Dict[str, Any]:
        """JSON-safe mapping: datetimes as ISO-8601 strings, enclosing size as a nested dict."""
        return self.model_dump(mode="json")
