# =============================================================================
# core/weather.py  —  Forecast Fetcher
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Turns a city name into a one-line Forecast summary using the Open-Meteo
#   APIs (free, no API key):
#
#     1. geocode_city()          name → latitude/longitude   (geocoding API)
#     2. fetch_hourly_weather()  lat/lon → current + hourly  (forecast API)
#     3. summarize_forecast()    hourly series → Forecast
#
# THE REDUCTION:
#   - max_temp / min_temp      = max / min over the whole hourly series
#   - precipitation_chance     = MAX over the hourly probability series,
#                                starting from 0 (the worst hour, not an
#                                average)
#   - condition                = label for the CURRENT weather code
#
#   Missing (null) hourly samples are skipped.
#
# THE SEPARATION OF "FETCH" AND "SUMMARIZE":
#   summarize_forecast() is a pure function over the JSON payload, so it can
#   be exercised with a hand-written payload and no network.
# =============================================================================

from datetime import datetime, timezone
import logging

from core.errors import ForecastDataError, LocationNotFoundError
from core.http import get_json
from core.models import Forecast

logger = logging.getLogger(__name__)

GEOCODING_URL = "https://geocoding-api.open-meteo.com/v1/search"
FORECAST_URL = "https://api.open-meteo.com/v1/forecast"

UNKNOWN_CONDITION = "Unknown"

# WMO weather interpretation codes reported by Open-Meteo.  Labels are English
# to match the English prompts; the model answers in the user's language, so
# a Japanese conversation still gets a Japanese reply.
_WMO_CODE_TO_CONDITION: dict[int, str] = {
    0: "Clear Sky",
    1: "Mainly Clear",
    2: "Partly Cloudy",
    3: "Overcast",
    45: "Fog",
    48: "Depositing Rime Fog",
    51: "Light Drizzle",
    53: "Moderate Drizzle",
    55: "Dense Drizzle",
    61: "Slight Rain",
    63: "Moderate Rain",
    65: "Heavy Rain",
    71: "Slight Snow",
    73: "Moderate Snow",
    75: "Heavy Snow",
    95: "Thunderstorm",
}


def weather_condition(code) -> str:
    """Map a WMO weather code to a label; anything unrecognised is "Unknown"."""
    try:
        return _WMO_CODE_TO_CONDITION.get(int(code), UNKNOWN_CONDITION)
    except (TypeError, ValueError):
        return UNKNOWN_CONDITION


def geocode_city(name: str, timeout: float = 10.0) -> tuple[float, float, str]:
    """Look up a city with the Open-Meteo geocoding API.

    Returns:
        (latitude, longitude, resolved_name)

    Raises:
        LocationNotFoundError: no match for ``name``.
        UpstreamHTTPError: the request failed.
    """
    data = get_json(
        GEOCODING_URL,
        params={"name": name, "count": 1},
        timeout=timeout,
        service="Open-Meteo geocoding API",
    )
    results = (data or {}).get("results") or []
    if not results:
        raise LocationNotFoundError(name)

    top = results[0]
    return float(top["latitude"]), float(top["longitude"]), top.get("name", name)


def fetch_hourly_weather(latitude: float, longitude: float, timeout: float = 10.0) -> dict:
    """Fetch current weather code/precipitation and the hourly series."""
    return get_json(
        FORECAST_URL,
        params={
            "latitude": latitude,
            "longitude": longitude,
            "current": "precipitation,weathercode",
            "hourly": "precipitation_probability,temperature_2m",
            "timezone": "auto",
        },
        timeout=timeout,
        service="Open-Meteo forecast API",
    )


def _numbers(series) -> list[float]:
    return [float(v) for v in (series or []) if v is not None]


def summarize_forecast(payload: dict, location: str, now: datetime | None = None) -> Forecast:
    """Reduce an Open-Meteo forecast payload to a Forecast.

    Args:
        payload: JSON from fetch_hourly_weather().
        location: Display name to put in the Forecast.
        now: Timestamp to stamp the forecast with (defaults to UTC now).

    Raises:
        ForecastDataError: the hourly temperature series is empty.
    """
    hourly = payload.get("hourly") or {}
    current = payload.get("current") or {}

    temperatures = _numbers(hourly.get("temperature_2m"))
    if not temperatures:
        raise ForecastDataError(f"No hourly temperature data for '{location}'")

    precipitation_chance = 0.0
    for probability in _numbers(hourly.get("precipitation_probability")):
        precipitation_chance = max(precipitation_chance, probability)

    stamp = now or datetime.now(timezone.utc)
    return Forecast(
        date=stamp.isoformat(),
        max_temp=max(temperatures),
        min_temp=min(temperatures),
        precipitation_chance=min(precipitation_chance, 100.0),
        condition=weather_condition(current.get("weathercode")),
        location=location,
    )


def get_forecast(city: str, timeout: float = 10.0) -> Forecast:
    """Geocode ``city``, fetch its forecast, and summarize it."""
    latitude, longitude, name = geocode_city(city, timeout=timeout)
    logger.info("Geocoded %r to %s (%.4f, %.4f)", city, name, latitude, longitude)

    payload = fetch_hourly_weather(latitude, longitude, timeout=timeout)
    forecast = summarize_forecast(payload, name)
    logger.info(
        "Forecast for %s: %s, %.1f–%.1f°C, %.0f%% precipitation",
        name, forecast.condition, forecast.min_temp, forecast.max_temp,
        forecast.precipitation_chance,
    )
    return forecast
