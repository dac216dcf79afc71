"""Daily school meal menu from the NEIS mealServiceDietInfo API."""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Any

import requests

from kiosk_board.datasources import ProviderError
from kiosk_board.datasources.neis.client import DISH_FIELD, MEAL_SERVICE_API, RESULT_KEY
from kiosk_board.schemas import MEAL_REQUEST_FAILED, NO_MEAL_INFO, MealMenu
from kiosk_board.services.http import DEFAULT_TIMEOUT, session

if TYPE_CHECKING:
    from kiosk_board.slots import MealSlot

logger = logging.getLogger(__name__)

_LINE_BREAK = re.compile(r"<br\s*/?>")
# Trailing allergen codes, e.g. "잡곡밥 (5.6.13)"
_ALLERGEN_CODES = re.compile(r"\s*\(\d+(\.\d+)*\)")


def fetch_meal_info(
    slot: MealSlot,
    *,
    api_key: str,
    office_code: str,
    school_code: str,
    timeout: float = DEFAULT_TIMEOUT,
) -> dict[str, Any]:
    """
    Fetch the raw meal record for one school, meal and date.

    Args:
        slot: Meal code and YYYYMMDD date to request.
        api_key: NEIS open API key.
        office_code: Education office code (``ATPT_OFCDC_SC_CODE``).
        school_code: School code (``SD_SCHUL_CODE``).
        timeout: Request timeout in seconds.

    Returns:
        Raw API response dict.

    Raises:
        requests.RequestException: On transport errors or a non-2xx status.
    """
    params: dict[str, str] = {
        "KEY": api_key,
        "Type": "json",
        "ATPT_OFCDC_SC_CODE": office_code,
        "SD_SCHUL_CODE": school_code,
        "MMEAL_SC_CODE": str(slot.code),
        "MLSV_YMD": slot.date,
    }

    resp = session.get(MEAL_SERVICE_API, params=params, timeout=timeout)
    resp.raise_for_status()
    result: dict[str, Any] = resp.json()
    return result


def clean_menu(raw: str) -> list[str]:
    """
    Split a dish-name field into display lines.

    Splits on ``<br/>``/``<br>``, drops blank lines and strips the allergen
    code annotation from each line.
    """
    lines = _LINE_BREAK.sub("\n", raw).split("\n")
    return [_ALLERGEN_CODES.sub("", line, count=1).strip() for line in lines if line.strip()]


def parse_meal(payload: Any, label: str) -> MealMenu:
    """
    Turn a NEIS response into a menu.

    A response without the two-element result array means nothing is
    published for that meal and yields the "no meal information" line.

    Raises:
        ProviderError: If the result array is present but has no dish field.
    """
    groups = payload.get(RESULT_KEY) if isinstance(payload, dict) else None
    if not isinstance(groups, list) or len(groups) < 2:
        if isinstance(payload, dict) and "RESULT" in payload:
            logger.info("NEIS returned no meal: %s", payload["RESULT"])
        return MealMenu(meal_type=label, lines=(NO_MEAL_INFO,))

    try:
        raw = groups[1]["row"][0][DISH_FIELD]
    except (KeyError, IndexError, TypeError):
        msg = f"NEIS result has no row[0].{DISH_FIELD}"
        raise ProviderError(msg) from None
    if not isinstance(raw, str):
        msg = f"NEIS {DISH_FIELD} is {type(raw).__name__}, expected str"
        raise ProviderError(msg)

    return MealMenu(meal_type=label, lines=tuple(clean_menu(raw)))


def fetch_meal(
    slot: MealSlot,
    *,
    api_key: str,
    office_code: str,
    school_code: str,
    timeout: float = DEFAULT_TIMEOUT,
) -> MealMenu:
    """Fetch and parse the menu, substituting a failure line on any error."""
    try:
        payload = fetch_meal_info(
            slot,
            api_key=api_key,
            office_code=office_code,
            school_code=school_code,
            timeout=timeout,
        )
        return parse_meal(payload, str(slot.label))
    except (requests.RequestException, ValueError, ProviderError) as e:
        logger.error("NEIS meal request failed: %s", e)
        return MealMenu(meal_type=str(slot.label), lines=(MEAL_REQUEST_FAILED,))
