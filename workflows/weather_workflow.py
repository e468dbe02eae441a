# =============================================================================
# workflows/weather_workflow.py  —  fetch-weather → plan-activities
# =============================================================================
#
#   WeatherInput {city}
#        │  fetch-weather     Open-Meteo geocode + forecast, reduced
#        ▼
#   ForecastSchema {date, maxTemp, minTemp, precipitationChance, condition, location}
#        │  plan-activities   prompt from core/planning.py, streamed through
#        ▼                    the weather agent
#   ActivitiesOutput {activities}
#
# The planning step streams the agent's reply: every chunk goes to the
# context sink (stdout by default) as it arrives, and the concatenated text
# becomes the step's output.
# =============================================================================

import asyncio

from pydantic import BaseModel, Field

from agent.streaming import collect_agent_text
from agent.weather_agent import AGENT_NAME
from core.models import ActivityPlan, Forecast
from core.planning import build_activity_prompt
from core.weather import get_forecast
from workflows.base import USER_ID, Step, Workflow, WorkflowContext


class WeatherInput(BaseModel):
    city: str = Field(..., min_length=1, description="The city to get the weather for")


class ForecastSchema(BaseModel):
    date: str
    maxTemp: float
    minTemp: float
    precipitationChance: float = Field(..., ge=0, le=100)
    condition: str
    location: str


class ActivitiesOutput(BaseModel):
    activities: str


async def fetch_weather(input_data: WeatherInput, context: WorkflowContext) -> dict:
    forecast = await asyncio.to_thread(
        get_forecast, input_data.city, context.settings.http_timeout
    )
    return forecast.to_dict()


async def plan_activities(input_data: ForecastSchema, context: WorkflowContext) -> dict:
    forecast = Forecast.from_dict(input_data.model_dump())
    prompt = build_activity_prompt(forecast)

    agent = context.get_agent(AGENT_NAME)
    runner, session_id = await context.session_factory(agent)
    activities = await collect_agent_text(
        runner, USER_ID, session_id, prompt, sink=context.sink
    )
    return ActivityPlan(activities=activities).to_dict()


fetch_weather_step = Step(
    id="fetch-weather",
    description="Fetches the weather forecast for the given city",
    input_schema=WeatherInput,
    output_schema=ForecastSchema,
    execute=fetch_weather,
)

plan_activities_step = Step(
    id="plan-activities",
    description="Suggests activities based on the weather conditions",
    input_schema=ForecastSchema,
    output_schema=ActivitiesOutput,
    execute=plan_activities,
)

weather_workflow = (
    Workflow(
        id="weather-workflow",
        input_schema=WeatherInput,
        output_schema=ActivitiesOutput,
        description="Forecast for a city followed by an activity plan",
    )
    .then(fetch_weather_step)
    .then(plan_activities_step)
    .commit()
)
