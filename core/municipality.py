# =============================================================================
# core/municipality.py  —  Municipality Resolver
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Turns a free-text place name ("東京", "東京都", "千代田区", ...) into
#   coordinates, a display address, and an ADDRESS LEVEL that says how
#   specific the match is:
#
#     1 = prefecture   2 = municipality   3 = town   4 = chome
#     5 = block        6 = lot number     7 = sub-lot number
#
#   The agent uses the level to decide whether it may fetch weather yet
#   (see core/policy.py).
#
# DATA SOURCE:
#   NAVITIME Geocoding on RapidAPI, /address/autocomplete endpoint.
#   Requires RAPIDAPI_KEY.  The first item of the response wins.
# =============================================================================

import logging
import math

from core.config import Settings
from core.errors import ConfigurationError, LocationNotFoundError, MissingInputError
from core.http import get_json
from core.models import GeocodeResult, MAX_ADDRESS_LEVEL_VALUE, MIN_ADDRESS_LEVEL_VALUE

logger = logging.getLogger(__name__)

AUTOCOMPLETE_PATH = "/address/autocomplete"


def address_level_from_details(details: list | None) -> int:
    """Derive the address level from a NAVITIME ``details`` list.

    The level of the LAST entry is the most specific one.  Falls back to 1
    when the list is missing or empty, the entry has no level, or the level
    is not a positive number (NaN included).  Levels above 7, infinity
    included, are clamped to 7.
    """
    if not details:
        return MIN_ADDRESS_LEVEL_VALUE

    last = details[-1]
    raw = last.get("level") if isinstance(last, dict) else None
    if raw is None or isinstance(raw, bool):
        return MIN_ADDRESS_LEVEL_VALUE

    try:
        value = float(raw)
    except (TypeError, ValueError):
        return MIN_ADDRESS_LEVEL_VALUE

    if math.isnan(value):
        return MIN_ADDRESS_LEVEL_VALUE
    if math.isinf(value):
        return MAX_ADDRESS_LEVEL_VALUE if value > 0 else MIN_ADDRESS_LEVEL_VALUE

    level = int(value)
    if level < MIN_ADDRESS_LEVEL_VALUE:
        return MIN_ADDRESS_LEVEL_VALUE
    return min(level, MAX_ADDRESS_LEVEL_VALUE)


def get_municipality(location: str, settings: Settings) -> GeocodeResult:
    """Resolve a place name to a GeocodeResult.

    Args:
        location: Free-text address, e.g. "東京都千代田区".
        settings: Process settings carrying the RapidAPI key and host.

    Returns:
        GeocodeResult for the first autocomplete match.

    Raises:
        MissingInputError: location is blank.
        ConfigurationError: no API key configured (raised before any request).
        UpstreamHTTPError: the geocoding API call failed.
        LocationNotFoundError: the API returned no items.
    """
    if not location or not location.strip():
        raise MissingInputError("A location is required")

    if not settings.rapidapi_key:
        raise ConfigurationError("RAPIDAPI_KEY environment variable is not set")

    data = get_json(
        f"https://{settings.rapidapi_host}{AUTOCOMPLETE_PATH}",
        params={"word": location},
        headers={
            "x-rapidapi-host": settings.rapidapi_host,
            "x-rapidapi-key": settings.rapidapi_key,
        },
        timeout=settings.http_timeout,
        service="Geocoding API",
    )

    items = (data or {}).get("items") or []
    if not items:
        raise LocationNotFoundError(location)

    first = items[0]
    coord = first.get("coord") or {}
    result = GeocodeResult(
        latitude=float(coord["lat"]),
        longitude=float(coord["lon"]),
        address=first.get("name", location),
        address_level=address_level_from_details(first.get("details")),
    )
    logger.info("Resolved %r to %s (level %d)", location, result.address, result.address_level)
    return result
