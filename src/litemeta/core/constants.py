#!/usr/bin/env python3
"""
Core constants used across litemeta.

- Wire contract: NBT tag names of the Litematica schematic layout.
- File handling: supported extensions and default text encoding.
- Time: the epoch that `TimeCreated` / `TimeModified` milliseconds count from.
"""

from datetime import datetime, timezone
from typing import Final

# --- Root compound tags --- #

TAG_VERSION: Final[str] = "Version"
TAG_SUB_VERSION: Final[str] = "SubVersion"
TAG_MINECRAFT_DATA_VERSION: Final[str] = "MinecraftDataVersion"
TAG_METADATA: Final[str] = "Metadata"
TAG_REGIONS: Final[str] = "Regions"


# --- Metadata compound tags --- #

TAG_NAME: Final[str] = "Name"
TAG_AUTHOR: Final[str] = "Author"
TAG_DESCRIPTION: Final[str] = "Description"
TAG_TIME_CREATED: Final[str] = "TimeCreated"
TAG_TIME_MODIFIED: Final[str] = "TimeModified"
TAG_TOTAL_BLOCKS: Final[str] = "TotalBlocks"
TAG_TOTAL_VOLUME: Final[str] = "TotalVolume"
TAG_PREVIEW_IMAGE: Final[str] = "PreviewImageData"
TAG_ENCLOSING_SIZE: Final[str] = "EnclosingSize"

# Components of the EnclosingSize compound, in (x, y, z) order
TAG_SIZE_AXES: Final[tuple[str, str, str]] = ("x", "y", "z")


# --- File handling --- #

# Extensions picked up when a directory is scanned
SUPPORTED_SCHEMATIC_EXT: Final[frozenset[str]] = frozenset({".litematic"})

# Default text encoding
DEFAULT_TEXT_ENCODING: Final[str] = "utf-8"


# --- Time --- #

UNIX_EPOCH: Final[datetime] = datetime(1970, 1, 1, tzinfo=timezone.utc)
