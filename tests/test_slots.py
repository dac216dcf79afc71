"""
Tests for forecast and meal time-slot resolution.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from zoneinfo import ZoneInfo

import pytest

from kiosk_board import slots
from kiosk_board.slots import MealCode, MealLabel

SEOUL = ZoneInfo("Asia/Seoul")


def at(hour: int, minute: int, day: int = 15, month: int = 5, year: int = 2026) -> datetime:
    return datetime(year, month, day, hour, minute, tzinfo=SEOUL)


def every_minute() -> list[datetime]:
    start = at(0, 0)
    return [start + timedelta(minutes=m) for m in range(24 * 60)]


class TestCanonicalMarks:
    """Test the 48 half-hour marks."""

    def test_count(self) -> None:
        assert len(slots.canonical_marks()) == 48

    def test_bounds(self) -> None:
        marks = slots.canonical_marks()
        assert marks[0] == "0000"
        assert marks[1] == "0030"
        assert marks[-1] == slots.LAST_MARK == "2330"

    def test_sorted_and_fixed_width(self) -> None:
        marks = slots.canonical_marks()
        assert marks == sorted(marks)
        assert all(len(m) == 4 and m.isdigit() for m in marks)


class TestResolveForecastSlot:
    """Test base date/time selection for the KMA request."""

    def test_exact_mark(self) -> None:
        slot = slots.resolve_forecast_slot(at(8, 30))
        assert slot.time == "0830"
        assert slot.date == "20260515"

    def test_between_marks_rounds_down(self) -> None:
        assert slots.resolve_forecast_slot(at(8, 29)).time == "0800"
        assert slots.resolve_forecast_slot(at(8, 59)).time == "0830"

    def test_midnight(self) -> None:
        slot = slots.resolve_forecast_slot(at(0, 0))
        assert slot.time == "0000"
        assert slot.date == "20260515"

    def test_last_minute_of_day_keeps_today(self) -> None:
        slot = slots.resolve_forecast_slot(at(23, 59))
        assert slot.time == "2330"
        assert slot.date == "20260515"

    def test_greatest_mark_not_after_now_for_every_minute(self) -> None:
        marks = slots.canonical_marks()
        for now in every_minute():
            current = f"{now.hour:02d}{now.minute:02d}"
            slot = slots.resolve_forecast_slot(now)
            assert slot.time in marks
            assert slot.time <= current
            assert not [m for m in marks if slot.time < m <= current]

    def test_date_is_today_for_every_minute(self) -> None:
        for now in every_minute():
            assert slots.resolve_forecast_slot(now).date == "20260515"


class TestHourlySlotTimes:
    """Test the five-hour outlook slots."""

    def test_next_five_hours(self) -> None:
        assert slots.hourly_slot_times(at(8, 0)) == ["0900", "1000", "1100", "1200", "1300"]

    def test_minutes_truncated(self) -> None:
        assert slots.hourly_slot_times(at(8, 45))[0] == "0900"

    def test_wraps_past_midnight(self) -> None:
        assert slots.hourly_slot_times(at(21, 10)) == ["2200", "2300", "0000", "0100", "0200"]

    def test_custom_length(self) -> None:
        assert slots.hourly_slot_times(at(8, 0), hours=2) == ["0900", "1000"]


class TestResolveMealSlot:
    """Test the meal cutover table."""

    @pytest.mark.parametrize(
        ("hour", "minute", "code", "label"),
        [
            (0, 0, MealCode.BREAKFAST, MealLabel.BREAKFAST),
            (7, 39, MealCode.BREAKFAST, MealLabel.BREAKFAST),
            (7, 40, MealCode.LUNCH, MealLabel.LUNCH),
            (13, 49, MealCode.LUNCH, MealLabel.LUNCH),
            (13, 50, MealCode.DINNER, MealLabel.DINNER),
            (18, 49, MealCode.DINNER, MealLabel.DINNER),
        ],
    )
    def test_same_day_slots(self, hour: int, minute: int, code: MealCode, label: MealLabel) -> None:
        slot = slots.resolve_meal_slot(at(hour, minute))
        assert slot.code == code
        assert slot.label == label
        assert slot.date == "20260515"

    def test_lunch_window_for_every_minute(self) -> None:
        for now in every_minute():
            minute_of_day = now.hour * 60 + now.minute
            if 7 * 60 + 40 <= minute_of_day < 13 * 60 + 50:
                slot = slots.resolve_meal_slot(now)
                assert slot.code == MealCode.LUNCH
                assert slot.label == "중식"
                assert slot.date == "20260515"

    def test_after_dinner_cutoff_is_next_day_breakfast(self) -> None:
        for now in every_minute():
            if now.hour * 60 + now.minute >= 18 * 60 + 50:
                slot = slots.resolve_meal_slot(now)
                assert slot.code == MealCode.BREAKFAST
                assert slot.label == "다음 날 조식"
                assert slot.date == "20260516"

    def test_next_day_crosses_month(self) -> None:
        slot = slots.resolve_meal_slot(at(19, 0, day=31, month=12, year=2026))
        assert slot.date == "20270101"

    def test_meal_codes_match_neis(self) -> None:
        assert str(MealCode.BREAKFAST) == "1"
        assert str(MealCode.LUNCH) == "2"
        assert str(MealCode.DINNER) == "3"


class TestFormatting:
    """Test date helpers."""

    def test_format_date(self) -> None:
        assert slots.format_date(at(9, 5, day=3, month=2)) == "20260203"

    def test_local_now_is_aware(self) -> None:
        now = slots.local_now("Asia/Seoul")
        assert now.tzinfo is not None
        assert now.utcoffset() == timedelta(hours=9)
