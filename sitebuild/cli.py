"""Command line entry point: ``sitebuild [clean|build|dev]``."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from sitebuild.build import build_all, clean
from sitebuild.config import BuildMode, Layout

COMMANDS = ("clean", "build", "dev")


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="sitebuild",
        description="Build the PHP site's assets into ./dist.",
    )
    parser.add_argument(
        "command",
        nargs="?",
        default="build",
        help=f"one of {', '.join(COMMANDS)} (default: build)",
    )
    parser.add_argument(
        "--root",
        default=None,
        help="project directory holding src/ (default: current directory)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    layout = Layout.from_root(args.root)

    if args.command == "clean":
        clean(layout)
        print("Cleaned ./dist and ./tmp!", flush=True)
    elif args.command == "build":
        build_all(layout, BuildMode.for_build())
    elif args.command == "dev":
        build_all(layout, BuildMode.for_dev())
    else:
        print(f"Unknown Command: {args.command}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
