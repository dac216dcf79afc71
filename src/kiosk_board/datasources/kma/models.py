"""Working models for a forecast being filled in from KMA records."""

from __future__ import annotations

from dataclasses import dataclass, field

from kiosk_board.schemas import (
    UNKNOWN_EMOJI,
    UNKNOWN_TEMPERATURE,
    CurrentConditions,
    HourlyForecastEntry,
)


@dataclass
class SlotConditions:
    """Temperature and sky emoji for one forecast hour."""

    time_slot: str
    temperature_text: str = UNKNOWN_TEMPERATURE
    condition_emoji: str = UNKNOWN_EMOJI

    @property
    def has_temperature(self) -> bool:
        return self.temperature_text != UNKNOWN_TEMPERATURE


@dataclass
class WeatherReport:
    """Current conditions plus the hourly outlook, seeded with sentinels."""

    current: SlotConditions
    hourly: list[SlotConditions] = field(default_factory=list)

    @classmethod
    def seeded(cls, hourly_times: list[str]) -> WeatherReport:
        """Build an all-unknown report for the given ``HH00`` slots."""
        first = hourly_times[0] if hourly_times else ""
        return cls(
            current=SlotConditions(time_slot=first),
            hourly=[SlotConditions(time_slot=t) for t in hourly_times],
        )

    def current_conditions(self) -> CurrentConditions:
        return CurrentConditions(
            temperature_text=self.current.temperature_text,
            condition_emoji=self.current.condition_emoji,
        )

    def hourly_forecast(self) -> tuple[HourlyForecastEntry, ...]:
        return tuple(
            HourlyForecastEntry(
                time_slot=s.time_slot,
                temperature_text=s.temperature_text,
                condition_emoji=s.condition_emoji,
            )
            for s in self.hourly
        )
