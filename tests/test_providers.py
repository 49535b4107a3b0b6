import logging
from unittest.mock import MagicMock

import pytest

from geocodetest.geocoding.base import Coordinate, FailureReason, GeocodingError
from geocodetest.geocoding.providers.google import GoogleLikeGeocoder
from geocodetest.geocoding.providers.nominatim import NominatimGeocoder

ADDRESS = "1600 Amphitheatre Parkway, Mountain View, CA"

GOOGLE_OK = {
    "status": "OK",
    "results": [{"geometry": {"location": {"lat": 37.4224, "lng": -122.0842}}}],
}


def google(fetcher, verbose=False):
    return GoogleLikeGeocoder("google", "http://maps.googleapis.com", fetcher, verbose=verbose)


def nominatim(fetcher, verbose=False):
    return NominatimGeocoder("http://nominatim.openstreetmap.org/search/", fetcher, verbose=verbose)


# Google-style

def test_google_round_trip(make_fetcher):
    fetcher = make_fetcher(GOOGLE_OK)
    assert google(fetcher).geocode(ADDRESS) == Coordinate(lat=37.4224, lng=-122.0842)


def test_google_url_escapes_address(make_fetcher):
    fetcher = make_fetcher(GOOGLE_OK)
    google(fetcher).geocode(ADDRESS)

    url = fetcher.session.get.call_args[0][0]
    assert url == (
        "http://maps.googleapis.com/maps/api/geocode/json"
        "?sensor=false&address=1600+Amphitheatre+Parkway%2C+Mountain+View%2C+CA"
    )


def test_google_like_uses_its_own_base_url(make_fetcher):
    fetcher = make_fetcher(GOOGLE_OK)
    dstk = GoogleLikeGeocoder("dstk", "http://www.datasciencetoolkit.org/", fetcher)

    assert dstk.provider_name == "dstk"
    assert dstk.geocode("x") == Coordinate(37.4224, -122.0842)
    assert fetcher.session.get.call_args[0][0].startswith(
        "http://www.datasciencetoolkit.org/maps/api/geocode/json?"
    )


def test_google_first_result_wins(make_fetcher):
    fetcher = make_fetcher({
        "status": "OK",
        "results": [
            {"geometry": {"location": {"lat": 1.0, "lng": 2.0}}},
            {"geometry": {"location": {"lat": 3.0, "lng": 4.0}}},
        ],
    })
    assert google(fetcher).geocode(ADDRESS) == Coordinate(1.0, 2.0)


@pytest.mark.parametrize(
    "payload, reason",
    [
        ({"status": "ZERO_RESULTS", "results": []}, FailureReason.BAD_STATUS),
        ({"results": GOOGLE_OK["results"]}, FailureReason.BAD_STATUS),
        ({"status": "OK", "results": []}, FailureReason.NO_RESULTS),
        ({"status": "OK"}, FailureReason.NO_RESULTS),
        ({"status": "OK", "results": [{"geometry": {}}]}, FailureReason.NO_COORDINATES),
        ({"status": "OK", "results": [{"geometry": {"location": {"lat": 1.0}}}]}, FailureReason.NO_COORDINATES),
        ([1, 2, 3], FailureReason.UNEXPECTED_SHAPE),
    ],
)
def test_google_incomplete_responses(make_fetcher, payload, reason):
    geocoder = google(make_fetcher(payload))

    with pytest.raises(GeocodingError) as exc_info:
        geocoder.lookup(ADDRESS)
    assert exc_info.value.reason is reason
    assert exc_info.value.provider == "google"
    assert exc_info.value.address == ADDRESS

    assert geocoder.geocode(ADDRESS) is None


def test_google_bad_response(make_fetcher):
    geocoder = google(make_fetcher(status_code=500, text=""))

    with pytest.raises(GeocodingError) as exc_info:
        geocoder.lookup(ADDRESS)
    assert exc_info.value.reason is FailureReason.BAD_RESPONSE
    assert geocoder.geocode(ADDRESS) is None


def test_google_verbose_logs_status_and_url(make_fetcher, caplog):
    caplog.set_level(logging.WARNING, logger="geocodetest")
    geocoder = google(make_fetcher({"status": "REQUEST_DENIED"}), verbose=True)

    assert geocoder.geocode(ADDRESS) is None
    assert "Geocoding returned a bad status 'REQUEST_DENIED'" in caplog.text
    assert "http://maps.googleapis.com/maps/api/geocode/json?sensor=false" in caplog.text


# Nominatim-style

def test_nominatim_parses_string_coordinates(make_fetcher):
    fetcher = make_fetcher([{"lat": "51.5033635", "lon": "-0.1276248", "display_name": "10 Downing St"}])
    assert nominatim(fetcher).geocode("10 Downing Street, London") == Coordinate(51.5033635, -0.1276248)

    url = fetcher.session.get.call_args[0][0]
    assert url == "http://nominatim.openstreetmap.org/search/?format=json&q=10+Downing+Street%2C+London"


def test_nominatim_empty_list_is_none(make_fetcher):
    geocoder = nominatim(make_fetcher([]))

    with pytest.raises(GeocodingError) as exc_info:
        geocoder.lookup(ADDRESS)
    assert exc_info.value.reason is FailureReason.NO_RESULTS
    assert geocoder.geocode(ADDRESS) is None


@pytest.mark.parametrize(
    "payload, reason",
    [
        ([{"lat": "51.5"}], FailureReason.NO_COORDINATES),
        ([{"lon": "-0.12"}], FailureReason.NO_COORDINATES),
        ([{"lat": "north", "lon": "-0.12"}], FailureReason.NO_COORDINATES),
        ({"error": "Unable to geocode"}, FailureReason.UNEXPECTED_SHAPE),
    ],
)
def test_nominatim_incomplete_responses(make_fetcher, payload, reason):
    geocoder = nominatim(make_fetcher(payload))

    with pytest.raises(GeocodingError) as exc_info:
        geocoder.lookup(ADDRESS)
    assert exc_info.value.reason is reason
    assert geocoder.geocode(ADDRESS) is None


def test_nominatim_verbose_logs_entry(make_fetcher, caplog):
    caplog.set_level(logging.WARNING, logger="geocodetest")
    geocoder = nominatim(make_fetcher([{"place_id": 7}]), verbose=True)

    assert geocoder.geocode(ADDRESS) is None
    assert 'Geocoding returned no coordinates in {"place_id": 7}' in caplog.text


def test_failures_are_silent_when_not_verbose(make_fetcher, caplog):
    caplog.set_level(logging.DEBUG, logger="geocodetest")

    assert nominatim(make_fetcher([])).geocode(ADDRESS) is None
    assert google(make_fetcher({"status": "OK", "results": []})).geocode(ADDRESS) is None
    assert caplog.text == ""


# Non-finite and non-numeric coordinates

@pytest.mark.parametrize(
    "lat, lon",
    [("nan", "0"), ("inf", "0"), ("51.5", "-inf"), ("NaN", "Infinity")],
)
def test_nominatim_rejects_non_finite_strings(make_fetcher, lat, lon):
    geocoder = nominatim(make_fetcher([{"lat": lat, "lon": lon}]))

    with pytest.raises(GeocodingError) as exc_info:
        geocoder.lookup(ADDRESS)
    assert exc_info.value.reason is FailureReason.NO_COORDINATES
    assert geocoder.geocode(ADDRESS) is None


def test_google_infinity_literal_is_a_bad_response(make_fetcher):
    body = '{"status": "OK", "results": [{"geometry": {"location": {"lat": Infinity, "lng": 0}}}]}'
    geocoder = google(make_fetcher(text=body))

    with pytest.raises(GeocodingError) as exc_info:
        geocoder.lookup(ADDRESS)
    assert exc_info.value.reason is FailureReason.BAD_RESPONSE
    assert geocoder.geocode(ADDRESS) is None


@pytest.mark.parametrize("lat", [float("inf"), float("-inf"), float("nan")])
def test_google_rejects_non_finite_numbers(lat):
    fetcher = MagicMock()
    fetcher.get_json.return_value = {
        "status": "OK",
        "results": [{"geometry": {"location": {"lat": lat, "lng": -122.0842}}}],
    }
    geocoder = google(fetcher)

    with pytest.raises(GeocodingError) as exc_info:
        geocoder.lookup(ADDRESS)
    assert exc_info.value.reason is FailureReason.NO_COORDINATES
    assert geocoder.geocode(ADDRESS) is None


@pytest.mark.parametrize(
    "location",
    [{"lat": "37.4224", "lng": -122.0842}, {"lat": 37.4224, "lng": "-122.0842"}, {"lat": True, "lng": 1}],
)
def test_google_rejects_non_numeric_coordinates(make_fetcher, location):
    geocoder = google(make_fetcher({"status": "OK", "results": [{"geometry": {"location": location}}]}))

    with pytest.raises(GeocodingError) as exc_info:
        geocoder.lookup(ADDRESS)
    assert exc_info.value.reason is FailureReason.NO_COORDINATES


def test_google_accepts_integer_coordinates(make_fetcher):
    payload = {"status": "OK", "results": [{"geometry": {"location": {"lat": 0, "lng": 10}}}]}
    assert google(make_fetcher(payload)).geocode(ADDRESS) == Coordinate(0.0, 10.0)
