from __future__ import annotations

from typing import Protocol

from chat_websearch.cache.record_ops import CachedResult


class SearchCache(Protocol):
    """Shared contract for pluggable result cache backends.

    Expiry is lazy: an entry older than the TTL is deleted by the ``get`` that
    observes it and reported as a miss. Nothing sweeps proactively.
    """

    def get(self, query: str, *, ttl_seconds: int | None = None) -> CachedResult | None:
        ...

    def put(self, query: str, text: str) -> None:
        ...

    def clear(self) -> None:
        ...
