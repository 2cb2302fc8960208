from __future__ import annotations

from sqlalchemy import delete, select
from sqlalchemy.engine import Engine

from chat_websearch.cache.record_ops import (
    CachedResult,
    Clock,
    KeyedLocks,
    cache_key,
    is_expired,
    now_ms,
)
from chat_websearch.database.init_db import init_database
from chat_websearch.database.session import session_scope
from chat_websearch.models.search_cache_entry import SearchCacheEntry


class DbSearchCache:
    """SQL-backed cache with the same contract as FileSearchCache."""

    def __init__(
        self,
        ttl_seconds: int,
        *,
        engine: Engine | None = None,
        auto_init: bool = True,
        clock: Clock | None = None,
    ) -> None:
        self._engine = engine
        self._ttl_seconds = ttl_seconds
        self._clock = clock or now_ms
        self._locks = KeyedLocks()
        if auto_init:
            init_database(engine)

    def get(self, query: str, *, ttl_seconds: int | None = None) -> CachedResult | None:
        key = cache_key(query)
        ttl = self._ttl_seconds if ttl_seconds is None else ttl_seconds
        with session_scope(self._engine) as db:
            row = db.scalar(
                select(SearchCacheEntry).where(SearchCacheEntry.cache_key == key)
            )
            if row is None:
                return None
            entry = CachedResult(text=row.text, timestamp=row.timestamp)
            if is_expired(entry, ttl, self._clock()):
                db.delete(row)
                return None
            return entry

    def put(self, query: str, text: str) -> None:
        key = cache_key(query)
        timestamp = self._clock()
        with self._locks.hold(key), session_scope(self._engine) as db:
            existing = db.scalar(
                select(SearchCacheEntry).where(SearchCacheEntry.cache_key == key)
            )
            if existing is None:
                db.add(SearchCacheEntry(cache_key=key, text=text, timestamp=timestamp))
            else:
                existing.text = text
                existing.timestamp = timestamp

    def clear(self) -> None:
        with session_scope(self._engine) as db:
            db.execute(delete(SearchCacheEntry))
