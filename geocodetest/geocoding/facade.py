"""
Geocoding facade providing a simple interface to all providers.
"""

import logging
from enum import Enum
from typing import Dict, Optional

from geocodetest.core.config import Settings, settings as default_settings
from geocodetest.geocoding.base import BaseGeocoder, Coordinate
from geocodetest.geocoding.fetcher import JsonFetcher
from geocodetest.geocoding.providers.google import GoogleLikeGeocoder
from geocodetest.geocoding.providers.nominatim import NominatimGeocoder

logger = logging.getLogger(__name__)


class Provider(str, Enum):
    """The fixed set of geocoding services under test."""

    GOOGLE = "google"
    DSTK = "dstk"
    NOMINATIM = "nominatim"


# Every other provider is measured against this one
REFERENCE_PROVIDER = Provider.GOOGLE


def get_geocoder(
    provider: "Provider | str",
    fetcher: JsonFetcher,
    settings: Optional[Settings] = None,
    verbose: bool = False,
) -> BaseGeocoder:
    """
    Get a geocoder instance for one provider.

    Args:
        provider: Provider (or its name: "google", "dstk", "nominatim")
        fetcher: Shared HTTP/JSON fetcher
        settings: Endpoint configuration (uses the settings singleton if not provided)
        verbose: Log the reason for every failed lookup

    Returns:
        Geocoder instance
    """
    settings = settings or default_settings

    try:
        provider = Provider(provider)
    except ValueError:
        raise ValueError(
            f"Unknown provider: {provider}. Choose from: {[p.value for p in Provider]}"
        )

    if provider is Provider.GOOGLE:
        return GoogleLikeGeocoder(provider.value, settings.GOOGLE_BASE_URL, fetcher, verbose=verbose)
    if provider is Provider.DSTK:
        return GoogleLikeGeocoder(provider.value, settings.DSTK_BASE_URL, fetcher, verbose=verbose)
    return NominatimGeocoder(settings.NOMINATIM_SEARCH_URL, fetcher, verbose=verbose)


def build_geocoders(
    fetcher: JsonFetcher,
    settings: Optional[Settings] = None,
    verbose: bool = False,
) -> Dict[str, BaseGeocoder]:
    """Build one geocoder per provider, keyed by provider name."""
    return {
        provider.value: get_geocoder(provider, fetcher, settings=settings, verbose=verbose)
        for provider in Provider
    }


def multi_geocode_address(
    address: str,
    geocoders: Dict[str, BaseGeocoder],
) -> Dict[str, Optional[Coordinate]]:
    """
    Geocode the same address with every provider, one after another.

    A failing provider yields None and never stops the others.

    Args:
        address: Address to geocode
        geocoders: Geocoders keyed by provider name (see build_geocoders)

    Returns:
        Dict mapping provider name to coordinate (None where geocoding failed)
    """
    results = {}
    for name, geocoder in geocoders.items():
        results[name] = geocoder.geocode(address)
        logger.debug(f"{name}: {results[name]}")
    return results

