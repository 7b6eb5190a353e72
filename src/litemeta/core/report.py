#!/usr/bin/env python3
"""
Purpose:
    Renders a `SchematicMetadata` record as text (Jinja2), JSON, or YAML.
"""

from __future__ import annotations

import json
from datetime import datetime
from typing import Final, Optional

import yaml
from jinja2 import Environment, StrictUndefined

from litemeta.core.errors import DecodeError
from litemeta.core.metadata import SchematicMetadata

OUTPUT_FORMATS: Final[tuple[str, ...]] = ("text", "json", "yaml")

TEXT_TEMPLATE: Final[str] = """\
{{ md.source }}
  Version:         {{ md.version }}.{{ md.sub_version }} (data version {{ md.data_version }})
  Name:            {{ md.name | or_dash }}
  Author:          {{ md.author | or_dash }}
{% if md.description %}
  Description:     {{ md.description }}
{% endif %}
  Created:         {{ md.time_created | timestamp }}
  Modified:        {{ md.time_modified | timestamp }}
  Regions:         {{ md.region_count }}
  Total blocks:    {{ md.total_blocks }}
  Total volume:    {{ md.total_volume }}
{% if md.enclosing_size %}
  Enclosing size:  {{ md.enclosing_size.x }} x {{ md.enclosing_size.y }} x {{ md.enclosing_size.z }}
{% else %}
  Enclosing size:  -
{% endif %}
  Preview image:   {{ "%d pixels" % (md.preview_image | length) if md.has_preview else "-" }}
"""


def _or_dash(value: Optional[str]) -> str:
    return "-" if value is None else value


def _timestamp(value: Optional[datetime]) -> str:
    return "-" if value is None else value.isoformat(timespec="milliseconds")


def _build_env() -> Environment:
    env = Environment(
        autoescape=False,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
        undefined=StrictUndefined,
    )
    env.filters.update({"or_dash": _or_dash, "timestamp": _timestamp})
    return env


_TEXT = _build_env().from_string(TEXT_TEMPLATE)


# --- Public API --- #

def render(metadata: SchematicMetadata, fmt: str = "text") -> str:
    """
    Render metadata in one of `OUTPUT_FORMATS`.

    Raises:
        ValueError: if `fmt` is not a supported format.
    """
    fmt = fmt.strip().lower()
    if fmt == "text":
        return _TEXT.render(md=metadata)
    if fmt == "json":
        return json.dumps(metadata.to_dict(), indent=2) + "\n"
    if fmt == "yaml":
        return yaml.safe_dump(metadata.to_dict(), sort_keys=False)
    raise ValueError(f"Unsupported output format {fmt!r}; expected one of {', '.join(OUTPUT_FORMATS)}")


def render_error(error: DecodeError) -> str:
    """One-line message for a decode error."""
    return f"{type(error).__name__}: {error}"
