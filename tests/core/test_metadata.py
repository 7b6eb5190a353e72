#!/usr/bin/env python3
from datetime import datetime, timezone

import numpy as np
import pytest
from pydantic import ValidationError

from litemeta.core.metadata import EnclosingSize, SchematicMetadata


# --- Construction --- #

def test_defaults():
    md = SchematicMetadata(source="a.litematic", version=6)
    assert md.sub_version == 0
    assert md.data_version == 0
    assert md.region_count == 0
    assert md.total_blocks == 0
    assert md.total_volume == 0
    assert md.preview_image is None
    assert md.enclosing_size is None
    assert md.has_preview is False
    assert md.preview_pixels() is None


def test_version_is_required():
    with pytest.raises(ValidationError, match="version"):
        SchematicMetadata(source="a.litematic")


def test_extra_fields_forbidden():
    with pytest.raises(ValidationError, match=r"extra_forbidden"):
        SchematicMetadata(source="a.litematic", version=6, colour="red")


def test_negative_region_count_rejected():
    with pytest.raises(ValidationError):
        SchematicMetadata(source="a.litematic", version=6, region_count=-1)


# --- Immutability --- #

def test_assignment_rejected():
    md = SchematicMetadata(source="a.litematic", version=6, name="Hall")
    with pytest.raises(ValidationError, match="frozen"):
        md.name = "Other"
    assert md.name == "Hall"


def test_preview_is_copied_on_ingestion():
    pixels = [1, 2, 3]
    md = SchematicMetadata(source="a.litematic", version=6, preview_image=pixels)
    pixels[0] = 99
    assert md.preview_image == (1, 2, 3)


def test_preview_accepts_numpy_arrays():
    md = SchematicMetadata(source="a.litematic", version=6, preview_image=np.array([-1, 0, 7], dtype=np.int32))
    assert md.preview_image == (-1, 0, 7)
    assert all(type(p) is int for p in md.preview_image)


def test_preview_pixels_returns_fresh_arrays():
    md = SchematicMetadata(source="a.litematic", version=6, preview_image=(1, 2, 3))
    a = md.preview_pixels()
    b = md.preview_pixels()
    assert a is not b
    assert a.dtype == np.int32
    a[:] = 0
    assert b.tolist() == [1, 2, 3]
    assert md.preview_image == (1, 2, 3)
    assert md.has_preview is True


# --- Times --- #

def test_naive_datetime_is_taken_as_utc():
    md = SchematicMetadata(source="a.litematic", version=6, time_created=datetime(2024, 1, 2, 3, 4, 5))
    assert md.time_created.tzinfo == timezone.utc


# --- EnclosingSize --- #

def test_enclosing_size_helpers():
    size = EnclosingSize(x=5, y=4, z=3)
    assert size.as_tuple() == (5, 4, 3)
    assert size.volume == 60


@pytest.mark.parametrize("axes", [(-1, 0, 0), (0, -1, 0), (0, 0, -1)])
def test_enclosing_size_rejects_negative(axes):
    x, y, z = axes
    with pytest.raises(ValidationError):
        EnclosingSize(x=x, y=y, z=z)


def test_enclosing_size_is_frozen():
    size = EnclosingSize(x=1, y=2, z=3)
    with pytest.raises(ValidationError):
        size.x = 4


# --- Serialization --- #

def test_to_dict_is_json_safe():
    md = SchematicMetadata(
        source="a.litematic",
        version=6,
        time_created=datetime(2023, 11, 14, 22, 13, 20, tzinfo=timezone.utc),
        enclosing_size=EnclosingSize(x=5, y=4, z=3),
        preview_image=(1, 2),
    )
    data = md.to_dict()
    assert data["version"] == 6
    assert data["time_created"].startswith("2023-11-14T22:13:20")
    assert data["enclosing_size"] == {"x": 5, "y": 4, "z": 3}
    assert data["preview_image"] == [1, 2]
    assert data["name"] is None
