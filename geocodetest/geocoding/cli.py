#!/usr/bin/env python3
"""
Command-line interface for the geocoder comparison harness.

Measures the quality of address to coordinate results across multiple services.

Usage:
    python -m geocodetest.geocoding.cli --input addresses.txt
    python -m geocodetest.geocoding.cli --input addresses.txt --distance 250
    python -m geocodetest.geocoding.cli --input addresses.txt --showdistances
    python -m geocodetest.geocoding.cli --input addresses.txt --showlocations --verbose
"""

import argparse
import logging
import sys
from typing import List, Optional

from geocodetest import __version__
from geocodetest.core import settings
from geocodetest.geocoding.facade import build_geocoders
from geocodetest.geocoding.fetcher import JsonFetcher
from geocodetest.geocoding.report import OutputMode, run

logger = logging.getLogger(__name__)


def configure_logging(verbose: bool = False) -> None:
    """Send diagnostics to stderr; stdout is reserved for the CSV report."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )
    # Keep urllib3's connection chatter out of verbose output
    logging.getLogger("urllib3").setLevel(logging.WARNING)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="geocodetest",
        description="Measures the quality of address to coordinate results across multiple services"
    )

    parser.add_argument(
        "--input", "-i",
        type=str,
        required=True,
        help="Input file (one address per line)"
    )
    parser.add_argument(
        "--distance", "-d",
        type=int,
        default=settings.DEFAULT_DISTANCE,
        help=f"Test distance in meters (default is {settings.DEFAULT_DISTANCE})"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Output debugging information to stderr"
    )
    parser.add_argument(
        "--showdistances", "-s",
        action="store_true",
        help="Output distances rather than pass/fail information"
    )
    parser.add_argument(
        "--showlocations", "-l",
        action="store_true",
        help="Output locations rather than pass/fail information"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.verbose)

    if not settings.validate_urls():
        logger.warning("A geocoding endpoint is not an absolute http(s) URL; check your .env")

    try:
        input_file = open(args.input, encoding="utf-8", errors="replace")
    except OSError as e:
        print(f"Error: cannot read input file '{args.input}': {e}", file=sys.stderr)
        return 1

    mode = OutputMode.from_flags(args.showdistances, args.showlocations)
    fetcher = JsonFetcher(
        user_agent=settings.USER_AGENT,
        verbose=args.verbose,
        timeout=settings.HTTP_TIMEOUT,
    )
    geocoders = build_geocoders(fetcher, settings=settings, verbose=args.verbose)

    try:
        with input_file:
            count = run(input_file, args.distance, geocoders, sys.stdout, mode=mode, verbose=args.verbose)
    finally:
        fetcher.close()

    logger.info(f"Compared {count} addresses")
    return 0


if __name__ == "__main__":
    sys.exit(main())
