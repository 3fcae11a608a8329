"""
Command-line entry point.

Usage:
    termip 8.8.8.8
    termip example.com
    termip --version
"""

import argparse
import logging
import sys
from typing import List, Optional

from textual.logging import TextualHandler

from termip import __version__
from termip.app import run


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="termip",
        description="Get details of an ip address",
    )
    parser.add_argument(
        "target",
        help="ipv4 or ipv6 address or url of target",
    )
    parser.add_argument(
        "-V", "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def configure_logging() -> None:
    """Send log records to the textual devtools console, never the screen."""
    logging.basicConfig(level=logging.INFO, handlers=[TextualHandler(stderr=False)])


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging()
    return run(args.target)


if __name__ == "__main__":
    sys.exit(main())
