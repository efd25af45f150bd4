"""
Command-line entry point.

Usage:
    imgfilter                              # run the demo
    imgfilter --image cat.png --filters blur sepia
    imgfilter --list-filters
"""
import argparse
from typing import List, Optional

from .constants import DEFAULT_IMAGE_NAME
from .demo import run_demo
from .filters import FilterRegistry, compose
from .image import BaseImage


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Decorator pattern demo for image filters")
    parser.add_argument("--image", default=DEFAULT_IMAGE_NAME, help="Name of the base image")
    parser.add_argument(
        "--filters",
        nargs="+",
        metavar="NAME",
        help="Filters to apply, innermost first (see --list-filters)",
    )
    parser.add_argument("--list-filters", action="store_true", help="List filter names and exit")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the imgfilter demo.

    Runs the full demo unless --filters is given, in which case a single
    chain is built and rendered.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.list_filters:
        for name in FilterRegistry.list_filters():
            print(f"{name}: {FilterRegistry.get_filter(name).label}")
        return 0

    if not args.filters:
        run_demo(args.image)
        return 0

    unknown = [name for name in args.filters if not FilterRegistry.has_filter(name)]
    if unknown:
        # exits with status 2
        parser.error(f"unknown filter(s): {', '.join(unknown)}")

    chain = compose(BaseImage(args.image), args.filters)
    chain.render()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
