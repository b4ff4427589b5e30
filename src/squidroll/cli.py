"""squidroll CLI entry point.

Usage: squidroll -f blocklist.txt [-o squid-domains.txt] [-w]
                 [--format {domain-list,adblock-plus}] [-v]
"""
from __future__ import annotations

import argparse
import logging
import sys
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

from squidroll.convert import SquidrollError, convert
from squidroll.parser import Format

log = logging.getLogger(__name__)

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def _package_version() -> str:
    try:
        return version("squidroll")
    except PackageNotFoundError:
        # Running from a source checkout without installed metadata.
        return "unknown"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="squidroll",
        description="Parse blocklists into a Squid compatible domain list.",
    )
    parser.add_argument(
        "-f", "--filepath", type=Path, required=True,
        help="Blocklist file to parse.",
    )
    parser.add_argument(
        "-o", "--output-filepath", type=Path, default=None,
        help="Output file (default: standard output).",
    )
    parser.add_argument(
        "-w", "--wildcard-mark", action="store_true",
        help="Mark every entry as a wildcard covering all its subdomains.",
    )
    parser.add_argument(
        "--format", type=Format, choices=list(Format),
        default=Format.DOMAIN_LIST,
        help="Input format (default: domain-list).",
    )
    parser.add_argument(
        "-v", "--verbose", action="count", default=0,
        help="Log progress to stderr; repeat for debug output.",
    )
    parser.add_argument(
        "--version", action="version",
        version=f"%(prog)s {_package_version()}",
    )
    return parser


def _configure_logging(verbosity: int) -> None:
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(
        level=level, format=LOG_FORMAT, stream=sys.stderr, force=True,
    )


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    try:
        convert(
            args.filepath,
            output_path=args.output_filepath,
            fmt=args.format,
            wildcard_mark=args.wildcard_mark,
        )
    except SquidrollError as exc:
        log.error("%s", exc)
        sys.exit(1)
