"""
Geographic utility functions for coordinate calculations.

Usage:
    from geocodetest.core.utils.geo import distance_from_lat_lon

    # Calculate distance in meters
    distance_m = distance_from_lat_lon(a, b)
"""

import math
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from geocodetest.geocoding.base import Coordinate

# minutes-in-a-degree * statute-miles-in-a-nautical-mile * kilometers-in-a-mile * meters-in-a-kilometer
METERS_PER_DEGREE = 60 * 1.1515 * 1.609344 * 1000


def distance_from_lat_lon(a: "Coordinate", b: "Coordinate") -> float:
    """
    Calculate the approximate great-circle distance between two coordinates.

    Uses the spherical law of cosines with a nautical-mile based conversion
    to meters. Results from earlier runs were produced with this exact
    constant chain, so keep it rather than switching to haversine.

    Args:
        a: First coordinate
        b: Second coordinate

    Returns:
        Distance between the two points in meters (finite, never negative)

    Example:
        >>> distance_from_lat_lon(Coordinate(0.0, 0.0), Coordinate(0.0, 0.0005))
        55.59...
    """
    radlat1 = math.radians(a.lat)
    radlat2 = math.radians(b.lat)
    radtheta = math.radians(a.lng - b.lng)

    dist = (
        math.sin(radlat1) * math.sin(radlat2) +
        math.cos(radlat1) * math.cos(radlat2) * math.cos(radtheta)
    )
    # Rounding can push the cosine just outside acos's domain
    dist = min(max(dist, -1.0), 1.0)
    dist = math.degrees(math.acos(dist))

    return dist * METERS_PER_DEGREE
