"""Time-based cache for provider lookups."""

from datetime import datetime
from typing import Any, Callable, Hashable, Optional

from ledgerfolio.core.timezone import now_utc


class TtlCache:
    """
    Key/value cache whose entries expire after a per-entry TTL.

    The clock is injected so expiry can be tested without sleeping.
    Built once at process start and handed to the providers that use it.
    """

    def __init__(self, clock: Callable[[], datetime] = now_utc):
        self._clock = clock
        self._entries: dict[Hashable, tuple[Any, datetime, float]] = {}

    def get(self, key: Hashable) -> Optional[Any]:
        """Return a cached value, or None when missing or expired."""
        entry = self._entries.get(key)
        if entry is None:
            return None
        value, stored_at, ttl_seconds = entry
        if (self._clock() - stored_at).total_seconds() >= ttl_seconds:
            del self._entries[key]
            return None
        return value

    def set(self, key: Hashable, value: Any, ttl_seconds: float) -> None:
        self._entries[key] = (value, self._clock(), ttl_seconds)

    def get_or_load(self, key: Hashable, ttl_seconds: float, loader: Callable[[], Any]) -> Any:
        """Return the cached value, calling ``loader`` and caching its result on a miss."""
        value = self.get(key)
        if value is None:
            value = loader()
            self.set(key, value, ttl_seconds)
        return value

    def clear(self) -> None:
        self._entries.clear()
