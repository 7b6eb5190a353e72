#!/usr/bin/env python3

import argparse
import sys

from litemeta.core.app_context import build_context
from litemeta.cli import config, show


def main(argv=None):
    parser = argparse.ArgumentParser(prog="litemeta", description="Litematica schematic metadata reader")
    subparsers = parser.add_subparsers(dest="command")

    # Register subcommands (they should accept ctx)
    show.register(subparsers)
    config.register(subparsers)

    args = parser.parse_args(argv)
    if hasattr(args, "func"):
        ctx = build_context()
        sys.exit(args.func(args, ctx))
    parser.print_help()
    sys.exit(1)


if __name__ == "__main__":
    main()
