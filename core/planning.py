# =============================================================================
# core/planning.py  —  Activity Planning Prompt
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Renders the fixed prompt that asks the agent for a day plan based on a
#   Forecast.  The forecast is embedded verbatim as JSON, followed by the
#   exact output layout (emoji section headers) and the planning rules.
#
#   The model call itself happens in workflows/weather_workflow.py; this
#   module only builds text, so it can be checked without a model.
# =============================================================================

import json

from core.errors import MissingInputError
from core.models import Forecast

# At or above this precipitation chance, indoor alternatives come first.
INDOOR_PRIORITY_THRESHOLD = 50

_OUTPUT_FORMAT = """\
📅 [Day of week, Month Day, Year]
═══════════════════════════

🌡️ WEATHER SUMMARY
• Conditions: [brief description]
• Temperature: [min / max, e.g. X°C to Y°C]
• Precipitation chance: [X%]

🌅 MORNING ACTIVITIES
Outdoor:
• [Activity name] - [short description including a specific place or route]
  Best timing: [specific time window]
  Note: [weather-related caution]

🌞 AFTERNOON ACTIVITIES
Outdoor:
• [Activity name] - [short description including a specific place or route]
  Best timing: [specific time window]
  Note: [weather-related caution]

🏠 INDOOR ALTERNATIVES
• [Activity name] - [short description including a specific venue]
  Ideal for: [the weather that makes this the better choice]

⚠️ SPECIAL CONSIDERATIONS
• [Relevant weather warnings, UV index, wind conditions, etc.]"""

_GUIDELINES = """\
- Suggest 2-3 time-specific outdoor activities per day
- Include 1-2 indoor backup options
- If the precipitation chance is 50% or higher, lead with indoor activities
- All activities must be specific to the location (name real venues, trails, places)
- Match activity intensity to the temperature
- Keep descriptions concise but informative"""


def prefers_indoor(forecast: Forecast) -> bool:
    return forecast.precipitation_chance >= INDOOR_PRIORITY_THRESHOLD


def build_activity_prompt(forecast: Forecast | None) -> str:
    """Build the planning prompt for ``forecast``.

    Raises:
        MissingInputError: forecast is None.
    """
    if forecast is None:
        raise MissingInputError("Forecast data not found")

    forecast_json = json.dumps(forecast.to_dict(), indent=2, ensure_ascii=False)

    parts = [
        f"Based on the following weather forecast for {forecast.location}, "
        f"suggest appropriate activities:",
        forecast_json,
        "",
        "For each day in the forecast, structure your response exactly as follows:",
        "",
        _OUTPUT_FORMAT,
        "",
        "Guidelines:",
        _GUIDELINES,
    ]
    if prefers_indoor(forecast):
        parts += [
            "",
            f"The precipitation chance is {forecast.precipitation_chance:.0f}%: "
            f"list the indoor alternatives as the primary recommendation and "
            f"treat outdoor activities as optional.",
        ]
    parts += [
        "",
        "Maintain this exact formatting for consistency, using the emoji and "
        "section headers as shown.",
    ]
    return "\n".join(parts)
