#!/usr/bin/env python3
from __future__ import annotations

from litemeta.core.app_context import AppContext
from litemeta.core.loader import find_schematics, load_many
from litemeta.core.report import OUTPUT_FORMATS, render, render_error


def show(args, ctx: AppContext) -> int:
    files = find_schematics(args.files, recursive=args.recursive, extensions=ctx.extensions)
    if not files:
        print("No schematic files found.")
        return 1

    fmt = args.format or ctx.output_format
    if fmt not in OUTPUT_FORMATS:
        print(f"Unsupported output format {fmt!r}; expected one of {', '.join(OUTPUT_FORMATS)}")
        return 1

    success = 0
    for result in load_many(files):
        if result.ok:
            print(render(result.metadata, fmt), end="")
            success += 1
        else:
            print(f"{result.source}: Failed to read metadata")
            print(f"  - {render_error(result.error)}")

    if len(files) > 1:
        print(f"\nRead {success}/{len(files)} schematic(s).")
    return 0 if success == len(files) else 1


def register(subparser):
    parser = subparser.add_parser("show", help="Show metadata of .litematic files.")
    parser.add_argument("files", nargs="+", help="Files or directories to read.")
    parser.add_argument("--recursive", "-r", action="store_true", help="Recursively scan directories.")
    parser.add_argument(
        "--format",
        "-f",
        choices=OUTPUT_FORMATS,
        default=None,
        help="Output format (defaults to the configured output_format).",
    )
    parser.set_defaults(func=show)
