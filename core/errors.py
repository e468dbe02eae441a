# =============================================================================
# core/errors.py  —  Error Taxonomy
# =============================================================================
#
# Every failure in the pipeline is one of these.  They are raised at the
# point of failure and never caught-and-retried inside core/: a failure at
# any stage aborts the rest of the request and reaches the caller as-is.
#
#   ConfigurationError   → a required setting (the geocoding key) is missing
#   UpstreamHTTPError    → an HTTP call failed or returned a non-2xx status
#   LocationNotFoundError→ a geocoder returned no match for the query
#   MissingInputError    → a pipeline stage got no input / no agent
#   ForecastDataError    → the forecast payload lacks a series we reduce
# =============================================================================


class WeatherAgentError(Exception):
    """Base class for every error raised by this project."""


class ConfigurationError(WeatherAgentError):
    """A required configuration value is absent."""


class UpstreamHTTPError(WeatherAgentError):
    """An external HTTP service failed."""

    def __init__(self, service: str, status: int | None, reason: str):
        self.service = service
        self.status = status
        self.reason = reason
        if status is None:
            message = f"{service} request failed: {reason}"
        else:
            message = f"{service} error: {status} {reason}".rstrip()
        super().__init__(message)


class LocationNotFoundError(WeatherAgentError):
    """A geocoding lookup returned no results."""

    def __init__(self, query: str):
        self.query = query
        super().__init__(f"Location '{query}' not found")


class MissingInputError(WeatherAgentError):
    """A pipeline stage was invoked without its required input."""


class ForecastDataError(WeatherAgentError):
    """The forecast response is missing data needed for the summary."""
