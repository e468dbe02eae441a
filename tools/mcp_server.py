# =============================================================================
# tools/mcp_server.py  —  FastMCP Tool Server
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Exposes the two data-fetching capabilities to the agent as MCP tools:
#
#     get_municipality(location) → GeocodeResult + requiresClarification
#     get_weather(city)          → Forecast
#
# HOW IT WORKS:
#   1. The agent decides it needs data and calls a tool by name over MCP
#   2. FastMCP routes the call to the function below
#   3. The function calls core/, logs the exchange, and returns a dict
#
#   If core/ raises (missing key, HTTP failure, no match), the exception
#   propagates and FastMCP reports the tool call as failed.  The model sees
#   the error message; nothing is retried.
#
# RUNNING THIS SERVER:
#   a) Standalone:  uv run python tools/mcp_server.py
#   b) Spawned by the agent over stdio (agent/weather_agent.py)
#
#   Both rely on the project being installed in the environment (uv run
#   does this), which is what makes the core/ imports resolve.
#
#   Settings are loaded once when the server starts; a missing RAPIDAPI_KEY
#   stops the server before it accepts any call.
# =============================================================================

import json
import logging
import sys

from fastmcp import FastMCP

from core.config import Settings
from core.municipality import get_municipality as resolve_municipality
from core.policy import evaluate
from core.weather import get_forecast

# =============================================================================
# Logging Setup
# =============================================================================
# Logs go to STDERR: STDOUT carries the MCP JSON protocol, and anything else
# written there would corrupt it.
#
#   CYAN   → incoming tool calls
#   YELLOW → intermediate status
#   GREEN  → response JSON
#   RED    → failures
# =============================================================================

_CYAN = "\033[36m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_RED = "\033[31m"
_RESET = "\033[0m"

logger = logging.getLogger("mcp")


def _log_request(tool_name: str, **params) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logger.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    """Log an intermediate status message in YELLOW."""
    logger.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_failure(tool_name: str, error: Exception) -> None:
    logger.error(f"{_RED}  ✗ {tool_name} failed: {error}{_RESET}")


def _log_response(tool_name: str, result: dict) -> dict:
    """Log the tool response as compact JSON in GREEN, then return it."""
    logger.info(
        f"{_GREEN}  ← {tool_name} response: "
        f"{json.dumps(result, separators=(',', ':'), ensure_ascii=False)}{_RESET}"
    )
    return result


# =============================================================================
# Settings
# =============================================================================
_settings: Settings | None = None


def configure(settings: Settings) -> None:
    """Install the settings the tools use."""
    global _settings
    _settings = settings


def get_settings() -> Settings:
    if _settings is None:
        configure(Settings.from_env())
    return _settings


mcp = FastMCP("municipality-weather")


# =============================================================================
# TOOL 1: get_municipality
# =============================================================================
def get_municipality(location: str) -> dict:
    """Resolve an ambiguous place name to coordinates and an address level.

    WHEN TO CALL THIS: First, with whatever place name the user gave
    (e.g. "東京", "東京都", "東京都千代田区", "Hachioji").

    Args:
        location: Free-text address or place name.

    Returns:
        A dict with:
          - latitude, longitude: Coordinates of the best match
          - address: Display address of the match
          - addressLevel: 1 prefecture, 2 municipality, 3 town, 4 chome,
            5 block, 6 lot number, 7 sub-lot number
          - requiresClarification: true when addressLevel < 2; ask the user
            for a municipality instead of fetching weather
          - clarificationQuestion: present only when requiresClarification
    """
    _log_request("get_municipality", location=location)
    try:
        result = resolve_municipality(location, get_settings())
    except Exception as e:
        _log_failure("get_municipality", e)
        raise

    payload = evaluate(result)
    if payload["requiresClarification"]:
        _log_status(f"'{result.address}' is prefecture-level; clarification needed")
    return _log_response("get_municipality", payload)


# =============================================================================
# TOOL 2: get_weather
# =============================================================================
def get_weather(city: str) -> dict:
    """Get a forecast summary for a municipality.

    WHEN TO CALL THIS: Only after get_municipality returned an addressLevel
    of 2 or higher.

    Args:
        city: Municipality or city name (e.g. "Chiyoda", "Tokyo").

    Returns:
        A dict with:
          - date: ISO-8601 timestamp of the forecast
          - maxTemp, minTemp: Highest / lowest hourly temperature (°C)
          - precipitationChance: Highest hourly precipitation probability (%)
          - condition: Current conditions, e.g. "Partly Cloudy"
          - location: Name of the matched place
    """
    _log_request("get_weather", city=city)
    try:
        forecast = get_forecast(city, timeout=get_settings().http_timeout)
    except Exception as e:
        _log_failure("get_weather", e)
        raise
    return _log_response("get_weather", forecast.to_dict())


mcp.tool()(get_municipality)
mcp.tool()(get_weather)


# =============================================================================
# Server entry point
# =============================================================================
if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [MCP] %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )
    configure(Settings.from_env())
    mcp.run()
