# =============================================================================
# core/models.py  —  Data Models (the "nouns" of the system)
# =============================================================================
#
# These dataclasses define the shape of every piece of information that
# flows through one request:
#
#   location text ──▶ GeocodeResult ──▶ (policy check) ──▶ Forecast ──▶ ActivityPlan
#
# Python attributes are snake_case.  The dicts handed to the agent (tool
# output, prompt JSON, workflow contracts) use the camelCase keys the tools
# advertise, via to_dict().
#
# Nothing here is persisted.  Every object lives for a single request.
# =============================================================================

from dataclasses import dataclass


# Address levels reported by the geocoder:
#   1 = prefecture, 2 = municipality, 3 = town, 4 = chome,
#   5 = block, 6 = lot number, 7 = sub-lot number
MIN_ADDRESS_LEVEL_VALUE = 1
MAX_ADDRESS_LEVEL_VALUE = 7


# -----------------------------------------------------------------------------
# GeocodeResult — output of the municipality resolver
# -----------------------------------------------------------------------------
@dataclass
class GeocodeResult:
    """A free-text location resolved to coordinates and an address level."""

    latitude: float
    longitude: float
    address: str                       # Display address, e.g. "東京都千代田区"
    address_level: int                 # 1 (prefecture) .. 7 (sub-lot)

    def __post_init__(self) -> None:
        if not MIN_ADDRESS_LEVEL_VALUE <= self.address_level <= MAX_ADDRESS_LEVEL_VALUE:
            raise ValueError(
                f"address_level must be in [{MIN_ADDRESS_LEVEL_VALUE}, "
                f"{MAX_ADDRESS_LEVEL_VALUE}], got {self.address_level}"
            )

    def to_dict(self) -> dict:
        return {
            "latitude": self.latitude,
            "longitude": self.longitude,
            "address": self.address,
            "addressLevel": self.address_level,
        }


# -----------------------------------------------------------------------------
# Forecast — the reduced daily summary
# -----------------------------------------------------------------------------
# Built from an hourly series: the max/min of the temperatures and the peak
# precipitation probability.  The planning step embeds to_dict() as JSON in
# the prompt, so the keys here are what the model sees.
# -----------------------------------------------------------------------------
@dataclass
class Forecast:
    """Weather summary for one location."""

    date: str                          # ISO-8601 timestamp of when it was built
    max_temp: float                    # °C
    min_temp: float                    # °C
    precipitation_chance: float        # 0–100, worst hour in the series
    condition: str                     # e.g. "Partly Cloudy", "Unknown"
    location: str                      # Name returned by the geocoder

    def __post_init__(self) -> None:
        if self.max_temp < self.min_temp:
            raise ValueError(
                f"max_temp ({self.max_temp}) is below min_temp ({self.min_temp})"
            )
        if not 0 <= self.precipitation_chance <= 100:
            raise ValueError(
                f"precipitation_chance must be in [0, 100], got {self.precipitation_chance}"
            )

    def to_dict(self) -> dict:
        return {
            "date": self.date,
            "maxTemp": self.max_temp,
            "minTemp": self.min_temp,
            "precipitationChance": self.precipitation_chance,
            "condition": self.condition,
            "location": self.location,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Forecast":
        return cls(
            date=data["date"],
            max_temp=data["maxTemp"],
            min_temp=data["minTemp"],
            precipitation_chance=data["precipitationChance"],
            condition=data["condition"],
            location=data["location"],
        )


# -----------------------------------------------------------------------------
# ActivityPlan — the terminal output of the planning step
# -----------------------------------------------------------------------------
@dataclass
class ActivityPlan:
    """Free-form, emoji-formatted activity recommendation text."""

    activities: str

    def to_dict(self) -> dict:
        return {"activities": self.activities}
