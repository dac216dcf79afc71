"""Ultra-short-term (6 hour) forecast from the KMA getUltraSrtFcst API."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import requests

from kiosk_board.datasources import ProviderError
from kiosk_board.datasources.kma.client import (
    CATEGORY_SKY,
    CATEGORY_TEMPERATURE,
    DEFAULT_ROWS,
    SKY_EMOJI,
    SUCCESS_CODE,
    ULTRA_SRT_FCST_API,
)
from kiosk_board.datasources.kma.models import SlotConditions, WeatherReport
from kiosk_board.schemas import UNKNOWN_EMOJI
from kiosk_board.services.http import DEFAULT_TIMEOUT, session

if TYPE_CHECKING:
    from kiosk_board.slots import ForecastSlot

logger = logging.getLogger(__name__)


def fetch_ultra_short_forecast(
    slot: ForecastSlot,
    *,
    service_key: str,
    nx: int,
    ny: int,
    num_of_rows: int = DEFAULT_ROWS,
    timeout: float = DEFAULT_TIMEOUT,
) -> dict[str, Any]:
    """
    Fetch raw forecast records for one base date/time.

    Args:
        slot: Base date and half-hour mark to request.
        service_key: data.go.kr service key.
        nx: Forecast grid X coordinate.
        ny: Forecast grid Y coordinate.
        num_of_rows: Page size.
        timeout: Request timeout in seconds.

    Returns:
        Raw API response dict (``response.header`` / ``response.body``).

    Raises:
        requests.RequestException: On transport errors or a non-2xx status.
    """
    params: dict[str, str | int] = {
        "serviceKey": service_key,
        "numOfRows": num_of_rows,
        "pageNo": 1,
        "dataType": "JSON",
        "base_date": slot.date,
        "base_time": slot.time,
        "nx": nx,
        "ny": ny,
    }
    logger.info(
        "KMA forecast request: base_date=%s base_time=%s nx=%s ny=%s",
        slot.date,
        slot.time,
        nx,
        ny,
    )

    resp = session.get(ULTRA_SRT_FCST_API, params=params, timeout=timeout)
    resp.raise_for_status()
    result: dict[str, Any] = resp.json()
    return result


def extract_items(payload: Any) -> list[Any]:
    """
    Pull the record list out of a KMA response envelope.

    Raises:
        ProviderError: If ``resultCode`` is not the success code or the
            record list is missing.
    """
    response = payload.get("response") if isinstance(payload, dict) else None
    header = response.get("header") if isinstance(response, dict) else None
    if not isinstance(header, dict) or header.get("resultCode") != SUCCESS_CODE:
        msg = f"KMA result not OK: {header!r}"
        raise ProviderError(msg)

    try:
        items = response["body"]["items"]["item"]
    except (KeyError, TypeError):
        msg = "KMA response has no body.items.item"
        raise ProviderError(msg) from None

    if not isinstance(items, list):
        msg = f"KMA items is {type(items).__name__}, expected list"
        raise ProviderError(msg)
    return items


def sky_emoji(value: Any) -> str:
    """Map a SKY code to its emoji, ``❓`` for anything unmapped."""
    return SKY_EMOJI.get(str(value), UNKNOWN_EMOJI)


def _apply(conditions: SlotConditions, category: str, value: Any) -> None:
    if category == CATEGORY_TEMPERATURE:
        conditions.temperature_text = f"{value}℃"
    elif category == CATEGORY_SKY:
        conditions.condition_emoji = sky_emoji(value)


def apply_items(items: list[Any], report: WeatherReport) -> None:
    """
    Fill ``report`` from forecast records, in place.

    Current conditions take records for the first hourly slot only until a
    temperature has been set. Hourly entries take every matching record, so
    the last one per category wins. Entry order never changes.
    """
    first_time = report.hourly[0].time_slot if report.hourly else None

    for item in items:
        if not isinstance(item, dict):
            continue
        fcst_time = item.get("fcstTime")
        category = item.get("category")
        value = item.get("fcstValue")
        if fcst_time is None or category is None or value is None:
            continue

        if fcst_time == first_time and not report.current.has_temperature:
            _apply(report.current, category, value)

        for slot in report.hourly:
            if slot.time_slot == fcst_time:
                _apply(slot, category, value)


def fetch_weather(
    slot: ForecastSlot,
    hourly_times: list[str],
    *,
    service_key: str,
    nx: int,
    ny: int,
    timeout: float = DEFAULT_TIMEOUT,
) -> WeatherReport:
    """
    Fetch and parse the forecast, falling back to sentinels on any failure.

    Never raises for provider problems: transport errors, timeouts, bad JSON
    and failure-coded envelopes are logged and the seeded report is returned.
    """
    report = WeatherReport.seeded(hourly_times)

    try:
        payload = fetch_ultra_short_forecast(
            slot, service_key=service_key, nx=nx, ny=ny, timeout=timeout
        )
        items = extract_items(payload)
    except requests.RequestException as e:
        logger.error("KMA forecast request failed: %s", e)
        return report
    except (ValueError, ProviderError) as e:
        logger.warning("KMA forecast response unusable: %s", e)
        return report

    logger.debug("KMA forecast returned %d records", len(items))
    apply_items(items, report)
    return report
