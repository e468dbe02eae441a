"""JSON GET helper: success, HTTP errors and transport errors."""

import io
import urllib.error
from unittest.mock import patch

import pytest

from core.errors import UpstreamHTTPError
from core.http import build_url, get_json


class FakeResponse:
    def __init__(self, body: bytes, status: int = 200, reason: str = "OK"):
        self.status = status
        self.reason = reason
        self._body = body

    def read(self):
        return self._body

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False


def test_build_url_encodes_params():
    url = build_url("https://example.test/search", {"name": "東京 都", "count": 1})
    assert url == "https://example.test/search?name=%E6%9D%B1%E4%BA%AC+%E9%83%BD&count=1"


def test_build_url_without_params():
    assert build_url("https://example.test/x") == "https://example.test/x"


def test_get_json_sends_headers_and_decodes():
    with patch("urllib.request.urlopen", return_value=FakeResponse(b'{"items": [1]}')) as urlopen:
        data = get_json(
            "https://example.test/a", params={"word": "x"}, headers={"x-key": "k"}, timeout=3
        )

    assert data == {"items": [1]}
    request = urlopen.call_args.args[0]
    assert request.full_url == "https://example.test/a?word=x"
    assert request.get_header("X-key") == "k"
    assert urlopen.call_args.kwargs["timeout"] == 3


def test_http_error_status_becomes_upstream_error():
    error = urllib.error.HTTPError(
        "https://example.test/a", 429, "Too Many Requests", {}, io.BytesIO(b"")
    )
    with patch("urllib.request.urlopen", side_effect=error):
        with pytest.raises(UpstreamHTTPError) as excinfo:
            get_json("https://example.test/a", service="Geocoding API")

    assert excinfo.value.status == 429
    assert str(excinfo.value) == "Geocoding API error: 429 Too Many Requests"


def test_non_2xx_response_is_rejected():
    with patch("urllib.request.urlopen", return_value=FakeResponse(b"{}", status=304, reason="Not Modified")):
        with pytest.raises(UpstreamHTTPError, match="304"):
            get_json("https://example.test/a")


def test_network_failure_becomes_upstream_error():
    with patch("urllib.request.urlopen", side_effect=urllib.error.URLError("no route")):
        with pytest.raises(UpstreamHTTPError, match="no route") as excinfo:
            get_json("https://example.test/a", service="Open-Meteo forecast API")

    assert excinfo.value.status is None


def test_invalid_json_body():
    with patch("urllib.request.urlopen", return_value=FakeResponse(b"<html>")):
        with pytest.raises(UpstreamHTTPError, match="invalid JSON"):
            get_json("https://example.test/a")


def test_body_that_is_not_utf8_becomes_upstream_error():
    with patch("urllib.request.urlopen", return_value=FakeResponse(b'{"name": "\xff"}')):
        with pytest.raises(UpstreamHTTPError, match="invalid JSON") as excinfo:
            get_json("https://example.test/a", service="Geocoding API")

    assert excinfo.value.status == 200
    assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)
