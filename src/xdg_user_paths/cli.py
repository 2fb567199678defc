"""CLI entry point for xdg-user-paths.

Prints the resolved base directory for one kind, or all four at once.
"""

from __future__ import annotations

import argparse
import json
import sys

from .errors import XdgPathError
from .paths import xdg_cache_home, xdg_config_home, xdg_data_home, xdg_runtime_dir
from .report import format_text, report_to_json, resolve_all

RESOLVERS = {
    "config": ("config_home", xdg_config_home),
    "cache": ("cache_home", xdg_cache_home),
    "data": ("data_home", xdg_data_home),
    "runtime": ("runtime_dir", xdg_runtime_dir),
}


def parse_args(argv=None) -> argparse.Namespace:
    """Build the argument parser and return parsed arguments."""
    parser = argparse.ArgumentParser(
        prog="xdg-user-paths",
        description="Print XDG base directories for the current user.",
    )
    parser.add_argument(
        "kind",
        nargs="?",
        choices=["all", *RESOLVERS],
        default="all",
        help="Which base directory to print (default: all)",
    )
    parser.add_argument("segments", nargs="*", help="Path components appended to the base directory")
    parser.add_argument("--json", action="store_true", help="Output as JSON")
    return parser.parse_args(argv)


def main(argv=None) -> None:
    """Entry point: resolve the requested directories and print them."""
    args = parse_args(argv)

    try:
        if args.kind == "all":
            dirs = resolve_all(*args.segments)
            print(report_to_json(dirs) if args.json else format_text(dirs))
            return
        key, resolve = RESOLVERS[args.kind]
        path = resolve(*args.segments)
    except XdgPathError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)

    if args.json:
        print(json.dumps({key: str(path)}, indent=2))
    else:
        print(path)


if __name__ == "__main__":
    main()
