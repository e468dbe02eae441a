"""Activity prompt rendering."""

import json

import pytest

from core.errors import MissingInputError
from core.models import Forecast
from core.planning import build_activity_prompt, prefers_indoor


def _forecast(precipitation_chance):
    return Forecast(
        date="2025-06-01T09:00:00+00:00",
        max_temp=25,
        min_temp=18,
        precipitation_chance=precipitation_chance,
        condition="Partly Cloudy",
        location="Tokyo",
    )


def test_prompt_embeds_forecast_json():
    forecast = _forecast(20)
    prompt = build_activity_prompt(forecast)

    assert "weather forecast for Tokyo" in prompt
    assert json.dumps(forecast.to_dict(), indent=2) in prompt


@pytest.mark.parametrize(
    "header",
    [
        "📅",
        "🌡️ WEATHER SUMMARY",
        "🌅 MORNING ACTIVITIES",
        "🌞 AFTERNOON ACTIVITIES",
        "🏠 INDOOR ALTERNATIVES",
        "⚠️ SPECIAL CONSIDERATIONS",
    ],
)
def test_prompt_has_every_section(header):
    assert header in build_activity_prompt(_forecast(0))


def test_indoor_threshold_is_inclusive():
    assert prefers_indoor(_forecast(50))
    assert not prefers_indoor(_forecast(49.9))


def test_rainy_forecast_leads_with_indoor():
    prompt = build_activity_prompt(_forecast(60))
    assert "The precipitation chance is 60%" in prompt
    assert "indoor alternatives as the primary recommendation" in prompt


def test_dry_forecast_keeps_default_order():
    assert "primary recommendation" not in build_activity_prompt(_forecast(10))


def test_missing_forecast():
    with pytest.raises(MissingInputError, match="Forecast data not found"):
        build_activity_prompt(None)


def test_forecast_invariants():
    with pytest.raises(ValueError):
        Forecast("d", max_temp=1, min_temp=2, precipitation_chance=0, condition="c", location="l")
    with pytest.raises(ValueError):
        Forecast("d", max_temp=2, min_temp=1, precipitation_chance=101, condition="c", location="l")
