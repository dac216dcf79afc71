"""In-memory result store with freshness-aware caching.

Holds the last aggregated document under a constant key. Every entry is
wrapped in a small envelope with ``valid_until`` so readers can tell whether
it may still be served. Entries are never invalidated explicitly; they expire
by TTL only.

The clock is injectable (seconds, monotonic by default) so tests can advance
time without sleeping. There is no per-key locking: two concurrent misses
may both compute and both ``set``; the last write wins and either result is
equally valid.
"""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

Clock = Callable[[], float]


@dataclass(frozen=True)
class _Entry:
    value: Any
    valid_until: float


class ResultStore:
    """Process-wide key/value cache with per-entry TTL."""

    def __init__(self, clock: Clock = time.monotonic) -> None:
        self.clock = clock
        self._entries: dict[str, _Entry] = {}

    def get(self, key: str) -> Any | None:
        """Return the stored value, or None if missing or expired."""
        entry = self._entries.get(key)
        if entry is None or self.clock() >= entry.valid_until:
            return None
        return entry.value

    def set(self, key: str, value: Any, ttl: float) -> None:
        """Store ``value`` for ``ttl`` seconds, replacing any previous entry.

        Args:
            key: Cache key.
            value: Payload to serve until expiry.
            ttl: Time to live in seconds; must be positive.
        """
        if ttl <= 0:
            msg = f"ttl must be positive, got {ttl}"
            raise ValueError(msg)
        now = self.clock()
        self._entries[key] = _Entry(value=value, valid_until=now + ttl)
