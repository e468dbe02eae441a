"""Shared fixtures: settings, Open-Meteo payloads and a scripted ADK runner."""

from types import SimpleNamespace

import pytest
from google.genai import types

from core.config import Settings


@pytest.fixture
def settings():
    return Settings(rapidapi_key="test-key", http_timeout=5.0)


@pytest.fixture
def tokyo_geocoding():
    return {"results": [{"latitude": 35.6895, "longitude": 139.69171, "name": "Tokyo"}]}


@pytest.fixture
def tokyo_forecast_payload():
    return {
        "current": {"time": "2025-06-01T09:00", "precipitation": 0.2, "weathercode": 2},
        "hourly": {
            "temperature_2m": [18, 22, 25, 19],
            "precipitation_probability": [10, 30, 60, 20],
        },
    }


def make_event(text=None, partial=None, final=False, tool_call=None):
    """A stand-in for google.adk.events.Event with just what streaming reads."""
    parts = []
    if text is not None:
        parts.append(types.Part(text=text))
    if tool_call is not None:
        parts.append(types.Part(function_call=types.FunctionCall(name=tool_call, args={})))
    content = types.Content(role="model", parts=parts) if parts else None
    return SimpleNamespace(partial=partial, content=content, is_final_response=lambda: final)


class ScriptedRunner:
    """Replays a fixed list of events and records every run_async call."""

    def __init__(self, events):
        self.events = events
        self.calls = []

    async def run_async(self, **kwargs):
        self.calls.append(kwargs)
        for event in self.events:
            yield event

    @property
    def last_prompt(self) -> str:
        return self.calls[-1]["new_message"].parts[0].text


@pytest.fixture
def streamed_plan_events():
    return [
        make_event("📅 Sunday", partial=True),
        make_event("\n🏠 INDOOR ALTERNATIVES\n", partial=True),
        make_event("• teamLab Planets", partial=True),
        make_event("📅 Sunday\n🏠 INDOOR ALTERNATIVES\n• teamLab Planets", partial=False, final=True),
    ]
