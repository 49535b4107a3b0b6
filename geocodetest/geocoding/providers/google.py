"""
Google Geocoding API provider.

Also serves any host exposing a Google-compatible geocoding endpoint, such as
the Data Science Toolkit.
https://developers.google.com/maps/documentation/geocoding
"""

import logging
from urllib.parse import urlencode

from geocodetest.geocoding.base import BaseGeocoder, Coordinate, FailureReason
from geocodetest.geocoding.fetcher import JsonFetcher

logger = logging.getLogger(__name__)

GOOGLE_GEOCODING_PATH = "/maps/api/geocode/json"


class GoogleLikeGeocoder(BaseGeocoder):
    """
    Geocoder for Google-style `/maps/api/geocode/json` endpoints.

    Pros:
    - Very accurate (Google itself is the reference provider)
    - Same response shape works for compatible self-hosted services

    Cons:
    - No confidence value, so the first result is taken as the best one

    Usage:
        geocoder = GoogleLikeGeocoder("google", "http://maps.googleapis.com", fetcher)
        location = geocoder.geocode("1600 Amphitheatre Parkway, Mountain View, CA")
    """

    def __init__(self, name: str, base_url: str, fetcher: JsonFetcher, verbose: bool = False):
        """
        Initialize a Google-style geocoder.

        Args:
            name: Provider name used in reports (e.g. "google", "dstk")
            base_url: Scheme and host of the service, without a trailing path
            fetcher: Shared HTTP/JSON fetcher
            verbose: Log the reason for every failed lookup
        """
        super().__init__(verbose=verbose)
        self.name = name
        self.base_url = base_url.rstrip("/")
        self.fetcher = fetcher

    @property
    def provider_name(self) -> str:
        return self.name

    def build_url(self, address: str) -> str:
        params = {"sensor": "false", "address": address}
        return f"{self.base_url}{GOOGLE_GEOCODING_PATH}?{urlencode(params)}"

    def lookup(self, address: str) -> Coordinate:
        url = self.build_url(address)
        data = self.fetcher.get_json(url)

        if data is None:
            raise self._fail("Geocoding returned a bad response", FailureReason.BAD_RESPONSE, address, url)
        if not isinstance(data, dict):
            raise self._fail(
                f"Geocoding returned an unexpected {type(data).__name__}",
                FailureReason.UNEXPECTED_SHAPE, address, url
            )

        status = data.get("status")
        if status != "OK":
            raise self._fail(f"Geocoding returned a bad status '{status}'", FailureReason.BAD_STATUS, address, url)

        results = data.get("results")
        if not results or not isinstance(results, list):
            raise self._fail("Geocoding returned no results", FailureReason.NO_RESULTS, address, url)

        # Assume the first result is the best one, since there's no confidence
        # value to sort them by
        first = results[0]

        try:
            location = first["geometry"]["location"]
            lat, lng = location["lat"], location["lng"]
        except (KeyError, TypeError):
            raise self._fail(
                f"Geocoding returned no coordinates in {first!r}",
                FailureReason.NO_COORDINATES, address, url
            )

        # Google-style services send numbers; strings mean a foreign shape
        if not (_is_number(lat) and _is_number(lng)):
            raise self._fail(
                f"Geocoding returned non-numeric coordinates in {first!r}",
                FailureReason.NO_COORDINATES, address, url
            )

        return self._make_coordinate(float(lat), float(lng), address, url, repr(first))


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)
