#!/usr/bin/env python3
"""
Purpose:
    Extracts a `SchematicMetadata` record from a decoded Litematica tag tree.

Structural tags (`Version`, `Metadata`) are required: a missing tag or a
tag of the wrong variant fails the decode. Every other tag is descriptive
and resolves to a default (counts and versions) or to None (text, times,
preview, enclosing size) when it is absent or of the wrong variant.

No I/O happens here; see `litemeta.core.loader` for reading files.
"""
from __future__ import annotations

import logging
from typing import Any, Optional

from nbtlib import Compound

from litemeta.core.constants import (
    TAG_VERSION, TAG_SUB_VERSION, TAG_MINECRAFT_DATA_VERSION, TAG_METADATA, TAG_REGIONS,
    TAG_NAME, TAG_AUTHOR, TAG_DESCRIPTION, TAG_TIME_CREATED, TAG_TIME_MODIFIED,
    TAG_TOTAL_BLOCKS, TAG_TOTAL_VOLUME, TAG_PREVIEW_IMAGE, TAG_ENCLOSING_SIZE, TAG_SIZE_AXES,
)
from litemeta.core.errors import MalformedTree, MissingField, TypeMismatch
from litemeta.core.metadata import EnclosingSize, SchematicMetadata
from litemeta.core.tag_variant import TagVariant, describe
from litemeta.core.utils import datetime_from_epoch_millis

logger = logging.getLogger(__name__)


# --- Public API --- #

def extract(root: Any, source: Any) -> SchematicMetadata:
    """
    Build a `SchematicMetadata` from the root compound of a schematic.

    Args:
        root: Decoded root node; must be an `nbtlib.Compound`.
        source: Origin label (path or handle), used for diagnostics only.

    Returns:
        SchematicMetadata: immutable, validated metadata.

    Raises:
        MalformedTree: if `root` is not a Compound.
        MissingField: if `Version` or `Metadata` is absent.
        TypeMismatch: if `Version` is not an Int or `Metadata` is not a Compound.
    """
    if not TagVariant.COMPOUND.matches(root):
        raise MalformedTree(f"Root tag must be a Compound, got {describe(root)}", source)

    version = require(root, TAG_VERSION, TagVariant.INT, source)
    metadata = require(root, TAG_METADATA, TagVariant.COMPOUND, source)

    # Regions of the wrong variant count as none, unlike Version/Metadata.
    regions = typed_or_absent(root, TAG_REGIONS, TagVariant.COMPOUND)

    return SchematicMetadata(
        source=str(source),
        version=int(version),
        sub_version=typed_or_default(root, TAG_SUB_VERSION, TagVariant.INT, 0),
        data_version=typed_or_default(root, TAG_MINECRAFT_DATA_VERSION, TagVariant.INT, 0),
        region_count=len(regions) if regions is not None else 0,
        preview_image=typed_or_absent(metadata, TAG_PREVIEW_IMAGE, TagVariant.INT_ARRAY),
        name=_string(metadata, TAG_NAME),
        author=_string(metadata, TAG_AUTHOR),
        description=_string(metadata, TAG_DESCRIPTION),
        time_created=_instant(metadata, TAG_TIME_CREATED),
        time_modified=_instant(metadata, TAG_TIME_MODIFIED),
        total_blocks=typed_or_default(metadata, TAG_TOTAL_BLOCKS, TagVariant.INT, 0),
        total_volume=typed_or_default(metadata, TAG_TOTAL_VOLUME, TagVariant.INT, 0),
        enclosing_size=_enclosing_size(metadata),
    )


# --- Resolution helpers --- #

def require(compound: Compound, name: str, variant: TagVariant, source: Any = None) -> Any:
    """
    Return the child `name` of `compound`, which must exist and be of `variant`.

    Raises:
        MissingField: if the tag is absent.
        TypeMismatch: if the tag is present with another variant.
    """
    tag = compound.get(name)
    if tag is None:
        raise MissingField(name, source)
    if not variant.matches(tag):
        raise TypeMismatch(name, variant, TagVariant.of(tag), source, actual_name=describe(tag))
    return tag


def typed_or_absent(compound: Compound, name: str, variant: TagVariant) -> Optional[Any]:
    """Return the child `name` if it is of `variant`, else None. Never raises."""
    tag = compound.get(name)
    if tag is None:
        return None
    if not variant.matches(tag):
        logger.debug("Ignoring tag %r: expected %s, got %s", name, variant.value, describe(tag))
        return None
    return tag


def typed_or_default(compound: Compound, name: str, variant: TagVariant, default: int) -> int:
    """Return the integer value of child `name` if it is of `variant`, else `default`."""
    tag = typed_or_absent(compound, name, variant)
    return int(tag) if tag is not None else default


# --- Field resolvers --- #

def _string(metadata: Compound, name: str) -> Optional[str]:
    tag = typed_or_absent(metadata, name, TagVariant.STRING)
    return str(tag) if tag is not None else None


def _instant(metadata: Compound, name: str):
    tag = typed_or_absent(metadata, name, TagVariant.LONG)
    if tag is None:
        return None
    moment = datetime_from_epoch_millis(int(tag))
    if moment is None:
        logger.debug("Ignoring tag %r: %d ms is outside the representable date range", name, int(tag))
    return moment


def _enclosing_size(metadata: Compound) -> Optional[EnclosingSize]:
    """All three axes must be non-negative Ints; anything else yields None."""
    size = typed_or_absent(metadata, TAG_ENCLOSING_SIZE, TagVariant.COMPOUND)
    if size is None:
        return None
    axes = [typed_or_default(size, axis, TagVariant.INT, -1) for axis in TAG_SIZE_AXES]
    if any(value < 0 for value in axes):
        logger.debug("Ignoring tag %r: incomplete or negative axes %s", TAG_ENCLOSING_SIZE, axes)
        return None
    x, y, z = axes
    return EnclosingSize(x=x, y=y, z=z)
