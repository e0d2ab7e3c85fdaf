"""Command-line interface for order_check.

- reads one JSON order file, or every *.json file in a directory
- normalizes and validates each order
- prints a report per file to stdout, errors to stderr
- exits 1 if any file failed to load or has an error-severity issue
"""

from __future__ import annotations
import argparse
import logging
import sys
from pathlib import Path

from . import __version__
from .errors import OrderCheckError
from .pipeline import Config, run


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="order-check", description="Normalize and validate JSON order records.")
    p.add_argument("path", nargs="?", help="Input JSON file or directory of *.json files")
    p.add_argument("-i", "--input", metavar="FILE", help="Input path (alternative to the positional argument)")
    p.add_argument("-f", "--format", default="json", metavar="FORMAT", help="Input format (default: json); input is always read as JSON")
    p.add_argument("--show-normalized", action="store_true", help="Print each normalized order as JSON before its report")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging on stderr")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return p


def main(argv: list[str] | None = None) -> int:
    p = build_parser()
    args = p.parse_args(argv)

    if args.path and args.input:
        p.error("give the input path either positionally or with --input, not both")
    target = args.path or args.input
    if not target:
        p.error("an input path is required")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    config = Config(input=Path(target), format=args.format, show_normalized=args.show_normalized)
    try:
        return run(config, sys.stdout, sys.stderr)
    except OrderCheckError as ex:
        sys.stderr.write(f"error: {ex}\n")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
