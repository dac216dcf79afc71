"""NEIS school meal data source.

Public API:
  - meals: fetch_meal_info (raw), parse_meal, clean_menu, fetch_meal (degrading)
  - client: API URL and response field names
"""

from kiosk_board.datasources.neis.client import MEAL_SERVICE_API
from kiosk_board.datasources.neis.meals import (
    clean_menu,
    fetch_meal,
    fetch_meal_info,
    parse_meal,
)

__all__ = [
    "MEAL_SERVICE_API",
    "clean_menu",
    "fetch_meal",
    "fetch_meal_info",
    "parse_meal",
]
