"""
Geocoding provider implementations.
"""

from geocodetest.geocoding.providers.google import GoogleLikeGeocoder
from geocodetest.geocoding.providers.nominatim import NominatimGeocoder

__all__ = ["GoogleLikeGeocoder", "NominatimGeocoder"]
