# =============================================================================
# core/http.py  —  Minimal JSON-over-HTTP GET
# =============================================================================
#
# All three upstream services (NAVITIME autocomplete, Open-Meteo geocoding,
# Open-Meteo forecast) are plain GET + JSON, so one helper covers them.
# Any transport error or non-2xx status becomes an UpstreamHTTPError.
# There is no retry.
# =============================================================================

import json
import logging
import urllib.error
import urllib.parse
import urllib.request

from core.errors import UpstreamHTTPError

logger = logging.getLogger(__name__)


def build_url(base_url: str, params: dict | None = None) -> str:
    """Append URL-encoded query parameters to base_url."""
    if not params:
        return base_url
    return f"{base_url}?{urllib.parse.urlencode(params)}"


def get_json(
    base_url: str,
    params: dict | None = None,
    headers: dict | None = None,
    timeout: float = 10.0,
    service: str = "HTTP",
):
    """GET a URL and decode the JSON body.

    Args:
        base_url: Endpoint without query string.
        params: Query parameters (encoded with urlencode).
        headers: Extra request headers (e.g. API keys).
        timeout: Socket timeout in seconds.
        service: Name used in error messages ("Geocoding API", ...).

    Raises:
        UpstreamHTTPError: on a non-2xx status, a network failure, or a body
            that is not valid JSON.
    """
    url = build_url(base_url, params)
    logger.debug("GET %s", url)
    req = urllib.request.Request(url, headers=headers or {})

    try:
        with urllib.request.urlopen(req, timeout=timeout) as response:
            status = response.status
            body = response.read()
            if not 200 <= status < 300:
                raise UpstreamHTTPError(service, status, getattr(response, "reason", "") or "")
    except urllib.error.HTTPError as e:
        raise UpstreamHTTPError(service, e.code, str(e.reason or "")) from e
    except urllib.error.URLError as e:
        raise UpstreamHTTPError(service, None, str(e.reason)) from e
    except TimeoutError as e:
        raise UpstreamHTTPError(service, None, "timed out") from e

    try:
        return json.loads(body.decode("utf-8"))
    except UnicodeDecodeError as e:
        raise UpstreamHTTPError(service, status, f"invalid JSON body ({e.reason})") from e
    except json.JSONDecodeError as e:
        raise UpstreamHTTPError(service, status, f"invalid JSON body ({e.msg})") from e
