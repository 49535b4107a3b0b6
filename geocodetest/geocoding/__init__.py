"""
Geocoding comparison module.

Sends the same address to several geocoding providers and measures how far
each one lands from the reference provider (Google):
- Google: Google Geocoding API (reference)
- DSTK: Data Science Toolkit, a Google-compatible geocoding host
- Nominatim: OpenStreetMap search

Usage:
    from geocodetest.geocoding import JsonFetcher, build_geocoders, compare_geocoders

    fetcher = JsonFetcher(user_agent="geocodetest")
    geocoders = build_geocoders(fetcher)
    results = compare_geocoders("360 Plantation St, Worcester, MA", 100, geocoders)
"""

from geocodetest.geocoding.base import (
    Coordinate,
    FailureReason,
    GeocodingError,
    BaseGeocoder,
)
from geocodetest.geocoding.fetcher import JsonFetcher
from geocodetest.geocoding.providers.google import GoogleLikeGeocoder
from geocodetest.geocoding.providers.nominatim import NominatimGeocoder
from geocodetest.geocoding.facade import (
    Provider,
    REFERENCE_PROVIDER,
    get_geocoder,
    build_geocoders,
    multi_geocode_address,
)
from geocodetest.geocoding.comparison import ComparisonResult, compare_geocoders
from geocodetest.geocoding.report import OutputMode, format_header, format_row, run

__all__ = [
    # Base classes
    "Coordinate",
    "FailureReason",
    "GeocodingError",
    "BaseGeocoder",
    "JsonFetcher",
    # Providers
    "GoogleLikeGeocoder",
    "NominatimGeocoder",
    # Dispatch and comparison
    "Provider",
    "REFERENCE_PROVIDER",
    "get_geocoder",
    "build_geocoders",
    "multi_geocode_address",
    "ComparisonResult",
    "compare_geocoders",
    # Reporting
    "OutputMode",
    "format_header",
    "format_row",
    "run",
]
