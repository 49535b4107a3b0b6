"""
Compare every provider's result against the reference provider.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

from geocodetest.core.utils.geo import distance_from_lat_lon
from geocodetest.geocoding.base import BaseGeocoder, Coordinate
from geocodetest.geocoding.facade import REFERENCE_PROVIDER, multi_geocode_address

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ComparisonResult:
    """How one provider's location compares to the reference location."""

    passed: bool
    distance: Optional[float] = None  # meters
    location: Optional[Coordinate] = None


def compare_location(
    location: Optional[Coordinate],
    reference: Optional[Coordinate],
    threshold: float,
) -> ComparisonResult:
    """
    Score a single location against the reference.

    A provider passes only when both locations exist and the distance between
    them is strictly below the threshold.
    """
    if reference is None or location is None:
        return ComparisonResult(passed=False, distance=None, location=location)

    distance = distance_from_lat_lon(location, reference)
    return ComparisonResult(passed=distance < threshold, distance=distance, location=location)


def compare_geocoders(
    address: str,
    threshold: float,
    geocoders: Dict[str, BaseGeocoder],
    verbose: bool = False,
) -> Dict[str, ComparisonResult]:
    """
    Run every geocoder on an address and check whether they agree closely enough.

    The reference provider's own entry is scored too (distance 0 when it
    succeeds).

    Args:
        address: Address to geocode
        threshold: Maximum distance in meters for a provider to pass
        geocoders: Geocoders keyed by provider name
        verbose: Log when the reference provider has no location

    Returns:
        Dict mapping provider name to ComparisonResult
    """
    locations = multi_geocode_address(address, geocoders)

    # Assume that the reference provider gets it right
    reference = locations.get(REFERENCE_PROVIDER.value)
    if reference is None and verbose:
        logger.warning(f"Google couldn't geocode '{address}'")

    return {
        name: compare_location(location, reference, threshold)
        for name, location in locations.items()
    }

