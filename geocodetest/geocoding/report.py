"""
CSV report assembly for geocoder comparisons.

One header line (sorted provider names plus `address`), then one row per
address. The address cell is written raw, unquoted, even if it contains
commas, to stay compatible with reports from earlier runs.
"""

import logging
from enum import Enum
from typing import Dict, Iterable, List, TextIO

from geocodetest.geocoding.base import BaseGeocoder
from geocodetest.geocoding.comparison import ComparisonResult, compare_geocoders

logger = logging.getLogger(__name__)

NOT_AVAILABLE = "NA"


class OutputMode(str, Enum):
    """What each provider cell of a report row contains."""

    PASS_FAIL = "pass_fail"
    DISTANCES = "distances"
    LOCATIONS = "locations"

    @classmethod
    def from_flags(cls, show_distances: bool = False, show_locations: bool = False) -> "OutputMode":
        # Distances are checked first, so they win when both flags are set
        if show_distances:
            return cls.DISTANCES
        if show_locations:
            return cls.LOCATIONS
        return cls.PASS_FAIL


def format_header(names: Iterable[str]) -> str:
    return ",".join(sorted(names) + ["address"])


def format_cell(result: ComparisonResult, mode: OutputMode) -> str:
    """Render one provider's result for the given output mode."""
    if mode is OutputMode.DISTANCES:
        if result.distance is None:
            return NOT_AVAILABLE
        return str(result.distance)

    if mode is OutputMode.LOCATIONS:
        if result.location is None:
            return NOT_AVAILABLE
        return f'"{result.location.lat},{result.location.lng}"'

    return "Y" if result.passed else "N"


def format_row(
    names: List[str],
    results: Dict[str, ComparisonResult],
    mode: OutputMode,
    address: str,
) -> str:
    cells = [format_cell(results[name], mode) for name in names]
    cells.append(address)
    return ",".join(cells)


def run(
    lines: Iterable[str],
    threshold: float,
    geocoders: Dict[str, BaseGeocoder],
    out: TextIO,
    mode: OutputMode = OutputMode.PASS_FAIL,
    verbose: bool = False,
) -> int:
    """
    Compare geocoders for every address and write the CSV report.

    The header is written just before the first row, so empty input writes
    nothing at all.

    Args:
        lines: Addresses, one per item (line terminators are stripped)
        threshold: Maximum distance in meters for a provider to pass
        geocoders: Geocoders keyed by provider name
        out: Stream to write CSV lines to
        mode: What to put in each provider cell
        verbose: Log per-address diagnostics

    Returns:
        Number of addresses processed
    """
    names = None
    count = 0

    for line in lines:
        address = line.rstrip("\r\n")
        results = compare_geocoders(address, threshold, geocoders, verbose=verbose)

        if names is None:
            names = sorted(results.keys())
            out.write(format_header(names) + "\n")

        out.write(format_row(names, results, mode, address) + "\n")
        out.flush()
        count += 1

    logger.debug(f"Processed {count} addresses")
    return count
