"""
Response models for the kiosk feed.

Pydantic models for the documents served to the front end. Field names are
Pythonic; the JSON produced by ``model_dump(by_alias=True)`` (and by FastAPI)
uses the names the slideshow bundle reads.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

#: Shown when a temperature could not be obtained.
UNKNOWN_TEMPERATURE = "정보 없음"
#: Shown when a sky condition could not be obtained or is not mapped.
UNKNOWN_EMOJI = "❓"

NO_MEAL_INFO = "급식 정보 없음"
MEAL_REQUEST_FAILED = "급식 API 요청 실패"


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


# =============================================================================
# Weather
# =============================================================================


class CurrentConditions(_Frozen):
    """Conditions for the nearest forecast hour."""

    temperature_text: str = Field(default=UNKNOWN_TEMPERATURE, alias="temp")
    condition_emoji: str = Field(default=UNKNOWN_EMOJI, alias="emoji")


class HourlyForecastEntry(_Frozen):
    """Forecast for one ``HH00`` slot."""

    time_slot: str = Field(..., alias="time", pattern=r"^\d{4}$")
    temperature_text: str = Field(default=UNKNOWN_TEMPERATURE, alias="temp")
    condition_emoji: str = Field(default=UNKNOWN_EMOJI, alias="emoji")


# =============================================================================
# Meals
# =============================================================================


class MealMenu(_Frozen):
    """Cleaned menu lines for one meal."""

    meal_type: str
    lines: tuple[str, ...] = Field(default=(), alias="menu")


# =============================================================================
# Aggregate
# =============================================================================


class AggregatedResponse(_Frozen):
    """The document served at ``/weather_data`` and stored in the cache."""

    current_conditions: CurrentConditions = Field(alias="current_weather")
    hourly_forecast: tuple[HourlyForecastEntry, ...] = Field(min_length=5, max_length=5)
    meal_menu: MealMenu = Field(alias="lunch_menu")


# =============================================================================
# Photos
# =============================================================================


class ImageEntry(BaseModel):
    """One slideshow photo, ordered by ``order`` and shown for ``duration`` ms."""

    order: int
    duration: int
    url: str
