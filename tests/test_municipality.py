"""Municipality resolver: address levels, credentials and error paths."""

from unittest.mock import patch

import pytest

from core.config import Settings
from core.errors import (
    ConfigurationError,
    LocationNotFoundError,
    MissingInputError,
    UpstreamHTTPError,
)
from core.models import GeocodeResult
from core.municipality import address_level_from_details, get_municipality


def _item(name="東京都千代田区", details=None):
    item = {"coord": {"lat": 35.694, "lon": 139.7536}, "name": name}
    if details is not None:
        item["details"] = details
    return item


@pytest.mark.parametrize(
    "details, level",
    [
        (None, 1),
        ([], 1),
        ([{"level": 1}], 1),
        ([{"level": 1}, {"level": 2}], 2),
        ([{"level": "1"}, {"level": "4"}], 4),
        ([{"level": 2}, {}], 1),
        ([{"level": "abc"}], 1),
        ([{"level": 0}], 1),
        ([{"level": 9}], 7),
        ([{"level": "Infinity"}], 7),
        ([{"level": float("inf")}], 7),
        ([{"level": "-inf"}], 1),
        ([{"level": "nan"}], 1),
    ],
)
def test_address_level_from_details(details, level):
    assert address_level_from_details(details) == level


def test_resolves_first_item(settings):
    data = {"items": [_item(details=[{"level": 1}, {"level": 2}]), _item(name="other")]}

    with patch("core.municipality.get_json", return_value=data) as get_json:
        result = get_municipality("千代田区", settings)

    assert result == GeocodeResult(
        latitude=35.694, longitude=139.7536, address="東京都千代田区", address_level=2
    )
    kwargs = get_json.call_args.kwargs
    assert kwargs["params"] == {"word": "千代田区"}
    assert kwargs["headers"]["x-rapidapi-key"] == "test-key"
    assert kwargs["headers"]["x-rapidapi-host"] == "navitime-geocoding.p.rapidapi.com"
    assert get_json.call_args.args[0].endswith("/address/autocomplete")


def test_prefecture_level_when_details_missing(settings):
    with patch("core.municipality.get_json", return_value={"items": [_item(name="東京都")]}):
        result = get_municipality("東京", settings)

    assert result.address_level == 1


@pytest.mark.parametrize("key", ["", "   "])
def test_missing_credential_fails_before_any_request(key):
    with patch("core.municipality.get_json") as get_json:
        with pytest.raises(ConfigurationError, match="RAPIDAPI_KEY"):
            get_municipality("東京", Settings(rapidapi_key=key.strip()))

    get_json.assert_not_called()


@pytest.mark.parametrize("location", ["", "  "])
def test_blank_location_is_rejected(settings, location):
    with patch("core.municipality.get_json") as get_json:
        with pytest.raises(MissingInputError):
            get_municipality(location, settings)

    get_json.assert_not_called()


@pytest.mark.parametrize("data", [{"items": []}, {}])
def test_no_results(settings, data):
    with patch("core.municipality.get_json", return_value=data):
        with pytest.raises(LocationNotFoundError, match="どこか"):
            get_municipality("どこか", settings)


def test_http_failure_propagates(settings):
    error = UpstreamHTTPError("Geocoding API", 403, "Forbidden")

    with patch("core.municipality.get_json", side_effect=error):
        with pytest.raises(UpstreamHTTPError, match="Geocoding API error: 403 Forbidden"):
            get_municipality("東京", settings)


def test_geocode_result_rejects_out_of_range_levels():
    with pytest.raises(ValueError):
        GeocodeResult(latitude=0, longitude=0, address="x", address_level=0)
    with pytest.raises(ValueError):
        GeocodeResult(latitude=0, longitude=0, address="x", address_level=8)
