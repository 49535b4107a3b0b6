import json
import sys
from pathlib import Path
from typing import Optional
from unittest.mock import MagicMock

import pytest

# Ensure the project root is on sys.path for direct pytest runs
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from geocodetest.geocoding.base import BaseGeocoder, Coordinate, FailureReason, GeocodingError  # noqa: E402
from geocodetest.geocoding.fetcher import JsonFetcher  # noqa: E402


class StubGeocoder(BaseGeocoder):
    """Geocoder returning a canned location (or failing when it is None)."""

    def __init__(self, name: str, location: Optional[Coordinate], verbose: bool = False):
        super().__init__(verbose=verbose)
        self.name = name
        self.location = location
        self.calls = []

    @property
    def provider_name(self) -> str:
        return self.name

    def lookup(self, address: str) -> Coordinate:
        self.calls.append(address)
        if self.location is None:
            raise GeocodingError("stub has no location", FailureReason.NO_RESULTS, self.name, address)
        return self.location


def make_response(payload=None, status_code: int = 200, text: Optional[str] = None) -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    body = text if text is not None else json.dumps(payload)
    response.content = body.encode("utf-8") if isinstance(body, str) else body
    return response


@pytest.fixture
def make_fetcher():
    """Build a JsonFetcher whose session answers every GET with one canned response."""

    def _make(payload=None, status_code: int = 200, text: Optional[str] = None, verbose: bool = False):
        session = MagicMock()
        session.get.return_value = make_response(payload, status_code, text)
        return JsonFetcher(user_agent="geocodetest-tests", verbose=verbose, session=session)

    return _make


@pytest.fixture
def stub_geocoders():
    """Build StubGeocoders for the standard providers from a name -> location mapping."""

    def _make(locations):
        return {name: StubGeocoder(name, location) for name, location in locations.items()}

    return _make
