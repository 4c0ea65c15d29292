"""In-process cache adapter — implements CachePort with per-entry TTL and LRU eviction."""

from __future__ import annotations

import time
from collections import OrderedDict

from app.application.ports.cache_port import CachePort
from app.config import settings


class InMemoryCacheAdapter(CachePort):
    """Bounded LRU cache for single-process deployments and tests.

    Expired entries are dropped when read, and all of them are swept once the
    cache is full. If it is still full after the sweep, the least recently
    used entry is evicted.
    """

    def __init__(self, ttl_seconds: int | None = None, max_entries: int | None = None):
        self._ttl = settings.cache_ttl_seconds if ttl_seconds is None else ttl_seconds
        self._max_entries = settings.cache_max_entries if max_entries is None else max_entries
        self._data: OrderedDict[str, tuple[str, float | None]] = OrderedDict()

    async def get(self, key: str) -> str | None:
        entry = self._data.get(key)
        if entry is None:
            return None
        value, expires_at = entry
        if expires_at is not None and time.monotonic() >= expires_at:
            del self._data[key]
            return None
        self._data.move_to_end(key)
        return value

    async def set(self, key: str, value: str) -> None:
        now = time.monotonic()
        if key in self._data:
            del self._data[key]
        elif len(self._data) >= self._max_entries:
            self._purge_expired(now)
            while self._data and len(self._data) >= self._max_entries:
                self._data.popitem(last=False)
        expires_at = now + self._ttl if self._ttl > 0 else None
        self._data[key] = (value, expires_at)

    def _purge_expired(self, now: float) -> None:
        expired = [
            k for k, (_, expires_at) in self._data.items()
            if expires_at is not None and now >= expires_at
        ]
        for k in expired:
            del self._data[k]

    async def ping(self) -> bool:
        return True

    async def close(self) -> None:
        self._data.clear()

    @property
    def size(self) -> int:
        return len(self._data)
