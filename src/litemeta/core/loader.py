#!/usr/bin/env python3
"""
Purpose:
    Reads `.litematic` files: opens the byte source, gunzips it, decodes the
    NBT tag tree with `nbtlib`, and hands the root compound to the extractor.
    Also provides batch helpers used by the CLI.

    Strings are decoded by nbtlib with replacement of invalid UTF-8, so bad
    text bytes come back as U+FFFD rather than failing the decode.
"""
from __future__ import annotations

import gzip
import logging
import zlib
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Union

import nbtlib

from litemeta.core.constants import SUPPORTED_SCHEMATIC_EXT
from litemeta.core.errors import DecodeError, IoFailure, MalformedTree
from litemeta.core.extractor import extract
from litemeta.core.metadata import SchematicMetadata
from litemeta.core.tag_variant import TagVariant
from litemeta.core.utils import normalize_extensions

logger = logging.getLogger(__name__)

# Raised by gzip/zlib or the filesystem: the bytes could not be obtained
_IO_ERRORS = (OSError, EOFError, zlib.error)
# Raised by nbtlib while walking a corrupt stream. Unknown tag ids (KeyError) and
# runaway nesting (RecursionError) are reported separately.
_TREE_ERRORS = (ValueError, TypeError)


@dataclass(frozen=True)
class LoadResult:
    """
    Outcome of loading one file in a batch.
    - source: the path that was loaded
    - metadata: decoded metadata, or None on failure
    - error: the decode error, or None on success
    """
    source: Path
    metadata: Optional[SchematicMetadata] = None
    error: Optional[DecodeError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


# --- Public API --- #

def load(source: Union[str, Path]) -> SchematicMetadata:
    """
    Load the metadata of a gzip-compressed `.litematic` file.

    Args:
        source (str or Path): Path to the schematic file.

    Returns:
        SchematicMetadata: the decoded metadata.

    Raises:
        TypeError: If `source` is not a str or Path.
        IoFailure: If the file cannot be read or decompressed.
        MalformedTree: If the stream is not an NBT tree with a Compound root.
        MissingField, TypeMismatch: If a required tag is missing or mistyped.
    """
    if not isinstance(source, (str, Path)):
        raise TypeError(f"The source argument must be of type Path or str, not '{type(source)}'")
    path = Path(source)

    logger.debug("Opening schematic %s", path)
    try:
        with gzip.open(path, "rb") as stream:
            root = _read_root(stream, path)
    except DecodeError:
        raise
    except _IO_ERRORS as e:
        raise IoFailure(f"Unable to read schematic ({e})", path) from e
    except KeyError as e:
        raise MalformedTree(f"Invalid NBT data (unknown tag id {e.args[0]})", path) from e
    except RecursionError as e:
        raise MalformedTree("Invalid NBT data (tags nested too deeply)", path) from e
    except _TREE_ERRORS as e:
        raise MalformedTree(f"Invalid NBT data ({e})", path) from e

    metadata = extract(root, path)
    logger.info("Loaded %s: version %d, %d region(s)", path, metadata.version, metadata.region_count)
    return metadata


def load_many(paths: Iterable[Union[str, Path]]) -> List[LoadResult]:
    """Load each path independently; decode failures are captured in the result, not raised."""
    results: List[LoadResult] = []
    for raw in paths:
        p = Path(raw)
        try:
            results.append(LoadResult(source=p, metadata=load(p)))
        except DecodeError as e:
            logger.warning("%s", e)
            results.append(LoadResult(source=p, error=e))
    return results


def find_schematics(
    paths: Iterable[Union[str, Path]],
    recursive: bool = False,
    extensions: Optional[Iterable[str]] = None,
) -> List[Path]:
    """
    Expand files and directories into schematic file paths.

    Files are kept as given regardless of extension; directories contribute
    files with a supported extension. Result is sorted and de-duplicated.
    """
    exts = normalize_extensions(extensions) if extensions is not None else SUPPORTED_SCHEMATIC_EXT
    files: list[Path] = []
    for raw in paths:
        p = Path(raw)
        if p.is_file():
            files.append(p)
        elif p.is_dir():
            candidates = p.rglob("*") if recursive else p.glob("*")
            files.extend(c for c in candidates if c.is_file() and c.suffix.lower() in exts)
    return sorted(set(files))


# --- Internals --- #

def _read_root(stream: gzip.GzipFile, path: Path) -> nbtlib.File:
    head = stream.peek(1)[:1]
    if not head:
        raise MalformedTree("Empty NBT stream", path)
    root_variant = TagVariant.from_id(head[0])
    if root_variant is not TagVariant.COMPOUND:
        raise MalformedTree(f"Root tag must be a Compound, got {root_variant.value}", path)
    return nbtlib.File.parse(_StrictReader(stream, path))


class _StrictReader:
    """
    Read-only view of a decompressed stream that refuses short reads.

    nbtlib reads every value through `read(n)` and turns a short read into
    a zero, so a truncated tree would otherwise decode with made-up values.
    """

    def __init__(self, stream: gzip.GzipFile, path: Path):
        self._stream = stream
        self._path = path

    def read(self, size: int) -> bytes:
        if size < 0:
            raise MalformedTree(f"Invalid NBT data (negative length {size})", self._path)
        data = self._stream.read(size)
        if len(data) < size:
            raise MalformedTree(
                f"Unexpected end of NBT data (wanted {size} bytes, got {len(data)})", self._path
            )
        return data
