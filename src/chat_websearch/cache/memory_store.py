from __future__ import annotations

from chat_websearch.cache.record_ops import (
    CachedResult,
    Clock,
    KeyedLocks,
    cache_key,
    is_expired,
    now_ms,
)


class MemorySearchCache:
    """Process-local cache with an injectable clock. Not durable."""

    def __init__(self, ttl_seconds: int, clock: Clock | None = None) -> None:
        self._ttl_seconds = ttl_seconds
        self._clock = clock or now_ms
        self._entries: dict[str, CachedResult] = {}
        self._locks = KeyedLocks()

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, query: str, *, ttl_seconds: int | None = None) -> CachedResult | None:
        key = cache_key(query)
        entry = self._entries.get(key)
        if entry is None:
            return None
        ttl = self._ttl_seconds if ttl_seconds is None else ttl_seconds
        if is_expired(entry, ttl, self._clock()):
            self._entries.pop(key, None)
            return None
        return entry

    def put(self, query: str, text: str) -> None:
        key = cache_key(query)
        with self._locks.hold(key):
            self._entries[key] = CachedResult(text=text, timestamp=self._clock())

    def clear(self) -> None:
        self._entries.clear()
