#!/usr/bin/env python3
"""Read metadata from Litematica `.litematic` schematics without decoding their block data."""

from litemeta.core.errors import DecodeError, IoFailure, MalformedTree, MissingField, TypeMismatch
from litemeta.core.extractor import extract
from litemeta.core.loader import load
from litemeta.core.metadata import EnclosingSize, SchematicMetadata

__all__ = [
    "load",
    "extract",
    "SchematicMetadata",
    "EnclosingSize",
    "DecodeError",
    "IoFailure",
    "MalformedTree",
    "MissingField",
    "TypeMismatch",
]
