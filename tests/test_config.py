"""Settings are read once from the environment and fail fast."""

from unittest.mock import patch

import pytest

from core.config import DEFAULT_MODEL, Settings
from core.errors import ConfigurationError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("RAPIDAPI_KEY", "WEATHER_AGENT_MODEL", "RAPIDAPI_HOST", "HTTP_TIMEOUT", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    # Keep a developer's .env out of the tests.
    with patch("core.config.load_dotenv"):
        yield


def test_missing_key_fails_at_startup():
    with pytest.raises(ConfigurationError, match="RAPIDAPI_KEY environment variable is not set"):
        Settings.from_env()


def test_blank_key_counts_as_missing(monkeypatch):
    monkeypatch.setenv("RAPIDAPI_KEY", "   ")
    with pytest.raises(ConfigurationError):
        Settings.from_env()


def test_key_optional_for_workflow_only_use():
    settings = Settings.from_env(require_geocoding_key=False)
    assert settings.rapidapi_key == ""


def test_defaults(monkeypatch):
    monkeypatch.setenv("RAPIDAPI_KEY", "abc")
    settings = Settings.from_env()

    assert settings.rapidapi_key == "abc"
    assert settings.model == DEFAULT_MODEL
    assert settings.http_timeout == 10.0
    assert settings.log_level == "WARNING"


def test_overrides(monkeypatch):
    monkeypatch.setenv("RAPIDAPI_KEY", "abc")
    monkeypatch.setenv("WEATHER_AGENT_MODEL", "openrouter/openai/gpt-4o")
    monkeypatch.setenv("HTTP_TIMEOUT", "2.5")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    settings = Settings.from_env()

    assert settings.model == "openrouter/openai/gpt-4o"
    assert settings.http_timeout == 2.5
    assert settings.log_level == "DEBUG"


def test_bad_timeout(monkeypatch):
    monkeypatch.setenv("RAPIDAPI_KEY", "abc")
    monkeypatch.setenv("HTTP_TIMEOUT", "soon")
    with pytest.raises(ConfigurationError, match="HTTP_TIMEOUT"):
        Settings.from_env()
