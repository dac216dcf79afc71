"""
Shared HTTP client for the upstream providers.

Both provider calls sit on the request path of ``/weather_data``. A refused
or reset connection is retried once straight away, since nothing was sent
yet; read failures and HTTP error statuses are not retried. Callers pass
``timeout=`` on every call, and the aggregator bounds the whole exchange.

Usage::

    from kiosk_board.services.http import session

    resp = session.get("https://apis.data.go.kr/...", params=params, timeout=10)
    resp.raise_for_status()
"""

from __future__ import annotations

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from kiosk_board import __version__

#: Default retry strategy: one immediate reconnect, nothing else.
DEFAULT_RETRY = Retry(
    total=1,
    connect=1,
    read=0,
    status=0,
    backoff_factor=0,
    allowed_methods=["GET"],
    raise_on_status=False,  # let resp.raise_for_status() handle it
)

DEFAULT_TIMEOUT = 10  # seconds

USER_AGENT = f"kiosk-board/{__version__}"


def create_session(retry: Retry | None = None) -> requests.Session:
    """
    Build a ``requests.Session`` with the retry adapter mounted.

    Args:
        retry: Custom retry strategy (defaults to ``DEFAULT_RETRY``).
    """
    s = requests.Session()
    adapter = HTTPAdapter(max_retries=retry or DEFAULT_RETRY)
    s.mount("https://", adapter)
    s.mount("http://", adapter)
    s.headers["User-Agent"] = USER_AGENT
    return s


#: Module-level session shared by the datasources.
session: requests.Session = create_session()
