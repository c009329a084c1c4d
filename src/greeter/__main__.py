"""Entry point for running the greeter package as a module."""
from __future__ import annotations

import argparse
import logging
from typing import Optional

from greeter.core import greet

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="greeter", description="Print a greeting for a name")
    parser.add_argument("name", nargs="?", default="World", help="Name to greet (default: World)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Run the main application."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logger.debug("Greeting name=%r", args.name)
    print(greet(args.name))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
