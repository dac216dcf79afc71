"""Kiosk Board - weather forecast and school meal feed for a slideshow kiosk.

Architecture::

    slots.py       Pure time-slot resolution (forecast base time, meal code/date)
    datasources/   External APIs (KMA ultra-short-term forecast, NEIS school meals)
    aggregator.py  Runs both fetchers, merges, owns the failure-default policy
    store.py       In-memory result cache with TTL and an injectable clock
    images.py      Photo listing by ``{order}_{durationMs}.{ext}`` filenames
    app.py         FastAPI app (``/weather_data``, ``/image_list``, static files)
    services/      Shared utilities (HTTP session with timeout)

Data flow: request → store (hit → return) → slots → datasources → aggregator → store
"""

__version__ = "0.1.0"

from kiosk_board.config import Settings, get_settings
from kiosk_board.schemas import AggregatedResponse

__all__ = ["AggregatedResponse", "Settings", "__version__", "get_settings"]
