"""
Nominatim (OpenStreetMap) Geocoder provider.

Free geocoding using OpenStreetMap data.
https://nominatim.org/
"""

import json
import logging
from urllib.parse import urlencode

from geocodetest.geocoding.base import BaseGeocoder, Coordinate, FailureReason
from geocodetest.geocoding.fetcher import JsonFetcher

logger = logging.getLogger(__name__)


class NominatimGeocoder(BaseGeocoder):
    """
    Nominatim (OpenStreetMap) Geocoder.

    Pros:
    - Free
    - Good global coverage
    - Open data

    Cons:
    - Variable accuracy
    - Requires user agent
    - Returns coordinates as strings

    Usage:
        geocoder = NominatimGeocoder("http://nominatim.openstreetmap.org/search/", fetcher)
        location = geocoder.geocode("10 Downing Street, London")
    """

    def __init__(self, search_url: str, fetcher: JsonFetcher, verbose: bool = False):
        super().__init__(verbose=verbose)
        self.search_url = search_url
        self.fetcher = fetcher

    @property
    def provider_name(self) -> str:
        return "nominatim"

    def build_url(self, address: str) -> str:
        params = {"format": "json", "q": address}
        return f"{self.search_url}?{urlencode(params)}"

    def lookup(self, address: str) -> Coordinate:
        url = self.build_url(address)
        data = self.fetcher.get_json(url)

        if data is None:
            raise self._fail("Geocoding returned a bad response", FailureReason.BAD_RESPONSE, address, url)
        if not isinstance(data, list):
            raise self._fail(
                f"Geocoding returned an unexpected {type(data).__name__}",
                FailureReason.UNEXPECTED_SHAPE, address, url
            )
        if not data:
            raise self._fail("Geocoding returned no results", FailureReason.NO_RESULTS, address, url)

        info = data[0]
        if not isinstance(info, dict) or info.get("lat") is None or info.get("lon") is None:
            raise self._fail(
                f"Geocoding returned no coordinates in {json.dumps(info)}",
                FailureReason.NO_COORDINATES, address, url
            )

        try:
            lat, lng = float(info["lat"]), float(info["lon"])
        except (TypeError, ValueError):
            raise self._fail(
                f"Geocoding returned unreadable coordinates in {json.dumps(info)}",
                FailureReason.NO_COORDINATES, address, url
            )

        # float() accepts "nan" and "inf"
        return self._make_coordinate(lat, lng, address, url, json.dumps(info))
