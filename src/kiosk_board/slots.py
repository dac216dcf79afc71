"""Time-slot resolution for the two upstream feeds.

Pure functions of the current local time:

  - which ``base_date``/``base_time`` to request from the KMA forecast API
  - which ``HH00`` hours make up the five-hour outlook
  - which meal (code, label, date) to request from NEIS

Times are compared as fixed-width zero-padded ``HHMM`` strings (or as
minute-of-day integers), never via locale formatting.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from enum import StrEnum
from zoneinfo import ZoneInfo

#: Last half-hour mark of the day.
LAST_MARK = "2330"

#: Number of hourly forecast entries served.
FORECAST_HOURS = 5

# Meal cutovers as minute-of-day (lower bound inclusive).
LUNCH_FROM = 7 * 60 + 40
DINNER_FROM = 13 * 60 + 50
NEXT_DAY_FROM = 18 * 60 + 50


class MealCode(StrEnum):
    """NEIS ``MMEAL_SC_CODE`` values."""

    BREAKFAST = "1"
    LUNCH = "2"
    DINNER = "3"


class MealLabel(StrEnum):
    """Display names for each meal slot."""

    BREAKFAST = "조식"
    LUNCH = "중식"
    DINNER = "석식"
    NEXT_DAY_BREAKFAST = "다음 날 조식"


@dataclass(frozen=True)
class ForecastSlot:
    """Forecast batch to request: ``date`` is YYYYMMDD, ``time`` a half-hour mark."""

    date: str
    time: str


@dataclass(frozen=True)
class MealSlot:
    """Meal batch to request and how to label it."""

    code: MealCode
    label: MealLabel
    date: str


def local_now(timezone: str) -> datetime:
    """Current time in the deployment's timezone."""
    return datetime.now(ZoneInfo(timezone))


def format_date(d: date | datetime) -> str:
    """Format as an 8-digit ``YYYYMMDD`` string."""
    return f"{d.year:04d}{d.month:02d}{d.day:02d}"


def format_hhmm(dt: datetime) -> str:
    return f"{dt.hour:02d}{dt.minute:02d}"


def canonical_marks() -> list[str]:
    """All 48 half-hour marks, ``"0000"`` through ``"2330"``."""
    return sorted(f"{h:02d}{m:02d}" for h in range(24) for m in (0, 30))


def resolve_forecast_slot(now: datetime) -> ForecastSlot:
    """
    Pick the latest half-hour mark at or before ``now``.

    Args:
        now: Local time (usually from ``local_now``).

    Returns:
        ForecastSlot with today's date and the selected mark.
    """
    current = format_hhmm(now)
    marks = canonical_marks()

    base_time = marks[0]
    for mark in marks:
        if mark <= current:
            base_time = mark

    today = format_date(now)
    yesterday = format_date(now - timedelta(days=1))
    base_date = today
    # Never true: no mark sorts after LAST_MARK. Kept as the roll-back guard
    # for requesting the previous day's final batch.
    if base_time > LAST_MARK and int(today) > int(yesterday):
        base_date = yesterday

    return ForecastSlot(date=base_date, time=base_time)


def hourly_slot_times(now: datetime, hours: int = FORECAST_HOURS) -> list[str]:
    """``HH00`` marks for each of the next ``hours`` hours, in order."""
    return [f"{(now + timedelta(hours=i)).hour:02d}00" for i in range(1, hours + 1)]


def resolve_meal_slot(now: datetime) -> MealSlot:
    """
    Map the clock time to the meal the kiosk should show.

    Before 07:40 breakfast, then lunch until 13:50, dinner until 18:50, and
    after that the next day's breakfast.
    """
    minute_of_day = now.hour * 60 + now.minute
    today = format_date(now)

    if minute_of_day < LUNCH_FROM:
        return MealSlot(MealCode.BREAKFAST, MealLabel.BREAKFAST, today)
    if minute_of_day < DINNER_FROM:
        return MealSlot(MealCode.LUNCH, MealLabel.LUNCH, today)
    if minute_of_day < NEXT_DAY_FROM:
        return MealSlot(MealCode.DINNER, MealLabel.DINNER, today)

    tomorrow = format_date(now + timedelta(days=1))
    return MealSlot(MealCode.BREAKFAST, MealLabel.NEXT_DAY_BREAKFAST, tomorrow)
