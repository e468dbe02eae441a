# =============================================================================
# core/config.py  —  Runtime Settings
# =============================================================================
#
# All environment configuration is read ONCE, at startup, into a frozen
# Settings object that is then passed explicitly to whoever needs it
# (the municipality resolver, the agent factory, the workflow).
#
# ENVIRONMENT VARIABLES (a .env file in the project root also works):
#   RAPIDAPI_KEY          (required)  key for the NAVITIME geocoding API
#   WEATHER_AGENT_MODEL   (optional)  LiteLlm model string,
#                                     default "openai/gpt-4o-mini"
#   RAPIDAPI_HOST         (optional)  default "navitime-geocoding.p.rapidapi.com"
#   HTTP_TIMEOUT          (optional)  seconds per HTTP call, default 10
#   LOG_LEVEL             (optional)  default "WARNING"
#
# The model provider's own key (OPENAI_API_KEY, OPENROUTER_API_KEY, ...) is
# read by LiteLlm directly from the environment.
# =============================================================================

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from core.errors import ConfigurationError


DEFAULT_MODEL = "openai/gpt-4o-mini"
DEFAULT_RAPIDAPI_HOST = "navitime-geocoding.p.rapidapi.com"
DEFAULT_HTTP_TIMEOUT = 10.0


@dataclass(frozen=True)
class Settings:
    """Configuration for one process."""

    rapidapi_key: str
    model: str = DEFAULT_MODEL
    rapidapi_host: str = DEFAULT_RAPIDAPI_HOST
    http_timeout: float = DEFAULT_HTTP_TIMEOUT
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, require_geocoding_key: bool = True) -> "Settings":
        """Load settings from the environment (and .env).

        Raises ConfigurationError immediately when RAPIDAPI_KEY is missing
        or blank, unless require_geocoding_key is False (the workflow path
        only talks to the key-less Open-Meteo APIs).
        """
        load_dotenv()

        rapidapi_key = os.environ.get("RAPIDAPI_KEY", "").strip()
        if require_geocoding_key and not rapidapi_key:
            raise ConfigurationError("RAPIDAPI_KEY environment variable is not set")

        raw_timeout = os.environ.get("HTTP_TIMEOUT", "").strip()
        try:
            http_timeout = float(raw_timeout) if raw_timeout else DEFAULT_HTTP_TIMEOUT
        except ValueError:
            raise ConfigurationError(
                f"HTTP_TIMEOUT must be a number of seconds, got {raw_timeout!r}"
            ) from None

        return cls(
            rapidapi_key=rapidapi_key,
            model=os.environ.get("WEATHER_AGENT_MODEL", "").strip() or DEFAULT_MODEL,
            rapidapi_host=os.environ.get("RAPIDAPI_HOST", "").strip() or DEFAULT_RAPIDAPI_HOST,
            http_timeout=http_timeout,
            log_level=os.environ.get("LOG_LEVEL", "").strip().upper() or "WARNING",
        )
