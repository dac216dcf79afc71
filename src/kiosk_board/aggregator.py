"""
Weather + meal aggregation behind the ``/weather_data`` endpoint.

On a cache miss the two providers are called concurrently (they share no
data) under one ``request_timeout`` deadline, each degrading to sentinel
values on its own. The merged document is stored for ``cache_ttl_seconds``.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor, wait
from typing import TYPE_CHECKING

from kiosk_board.datasources import kma, neis
from kiosk_board.datasources.kma import WeatherReport
from kiosk_board.schemas import MEAL_REQUEST_FAILED, AggregatedResponse, MealMenu
from kiosk_board.slots import (
    hourly_slot_times,
    local_now,
    resolve_forecast_slot,
    resolve_meal_slot,
)

if TYPE_CHECKING:
    from collections.abc import Callable
    from datetime import datetime

    from kiosk_board.config import Settings
    from kiosk_board.store import ResultStore

logger = logging.getLogger(__name__)

CACHE_KEY = "weather_data"


def build_response(now: datetime, settings: Settings) -> AggregatedResponse:
    """
    Resolve slots for ``now``, call both providers and merge the results.

    Args:
        now: Local time used for slot resolution.
        settings: Provider keys, grid, school codes and timeout.

    Returns:
        A complete AggregatedResponse; unavailable fields hold sentinels.
    """
    forecast_slot = resolve_forecast_slot(now)
    hourly_times = hourly_slot_times(now)
    meal_slot = resolve_meal_slot(now)

    # Not a ``with`` block: leaving it would join threads still stuck on a
    # slow upstream. Stragglers finish in the background and are discarded.
    executor = ThreadPoolExecutor(max_workers=2, thread_name_prefix="provider")
    weather_future = executor.submit(
        kma.fetch_weather,
        forecast_slot,
        hourly_times,
        service_key=settings.weather_service_key,
        nx=settings.grid_nx,
        ny=settings.grid_ny,
        timeout=settings.request_timeout,
    )
    meal_future = executor.submit(
        neis.fetch_meal,
        meal_slot,
        api_key=settings.neis_api_key,
        office_code=settings.office_code,
        school_code=settings.school_code,
        timeout=settings.request_timeout,
    )
    # requests only bounds each socket read, so the deadline is enforced here.
    wait([weather_future, meal_future], timeout=settings.request_timeout)
    executor.shutdown(wait=False, cancel_futures=True)

    if weather_future.done():
        report = weather_future.result()
    else:
        logger.warning("KMA forecast exceeded %ss deadline", settings.request_timeout)
        report = WeatherReport.seeded(hourly_times)

    if meal_future.done():
        menu = meal_future.result()
    else:
        logger.warning("NEIS meal request exceeded %ss deadline", settings.request_timeout)
        menu = MealMenu(meal_type=str(meal_slot.label), lines=(MEAL_REQUEST_FAILED,))

    return AggregatedResponse(
        current_conditions=report.current_conditions(),
        hourly_forecast=report.hourly_forecast(),
        meal_menu=menu,
    )


class Aggregator:
    """Serves the aggregated document, recomputing it when the cache expires."""

    def __init__(
        self,
        store: ResultStore,
        settings: Settings,
        now: Callable[[], datetime] | None = None,
    ) -> None:
        self.store = store
        self.settings = settings
        self.now = now or (lambda: local_now(settings.timezone))

    def get_aggregated_weather_and_meal(self) -> AggregatedResponse:
        """Return the cached document, or build and cache a fresh one."""
        cached: AggregatedResponse | None = self.store.get(CACHE_KEY)
        if cached is not None:
            return cached

        now = self.now()
        logger.info("Building weather/meal data for %s", now.isoformat(timespec="minutes"))
        response = build_response(now, self.settings)
        self.store.set(CACHE_KEY, response, self.settings.cache_ttl_seconds)
        return response
