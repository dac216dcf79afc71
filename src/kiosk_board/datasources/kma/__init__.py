"""KMA ultra-short-term forecast data source.

Public API:
  - forecast: fetch_ultra_short_forecast (raw), fetch_weather (degrading)
  - models: WeatherReport, SlotConditions
  - client: API URL, category codes, SKY emoji table
"""

from kiosk_board.datasources.kma.client import SKY_EMOJI, ULTRA_SRT_FCST_API
from kiosk_board.datasources.kma.forecast import (
    apply_items,
    extract_items,
    fetch_ultra_short_forecast,
    fetch_weather,
    sky_emoji,
)
from kiosk_board.datasources.kma.models import SlotConditions, WeatherReport

__all__ = [
    "SKY_EMOJI",
    "ULTRA_SRT_FCST_API",
    "SlotConditions",
    "WeatherReport",
    "apply_items",
    "extract_items",
    "fetch_ultra_short_forecast",
    "fetch_weather",
    "sky_emoji",
]
