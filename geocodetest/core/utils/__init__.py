"""
Shared utility functions for the geocodetest harness.

Modules:
- geo: Geographic calculations (great-circle distance)

Usage:
    from geocodetest.core.utils import distance_from_lat_lon

    # Calculate distance
    distance = distance_from_lat_lon(Coordinate(42.26, -71.80), Coordinate(42.27, -71.81))
"""

from geocodetest.core.utils.geo import (
    distance_from_lat_lon,
    METERS_PER_DEGREE,
)

__all__ = [
    # Geo utilities
    "distance_from_lat_lon",
    "METERS_PER_DEGREE",
]
