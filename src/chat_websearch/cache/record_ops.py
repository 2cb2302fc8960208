from __future__ import annotations

import threading
import time
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Callable

CACHE_KEY_PREFIX = "query_"

Clock = Callable[[], int]


@dataclass(frozen=True)
class CachedResult:
    text: str
    timestamp: int

    def to_dict(self) -> dict[str, Any]:
        return {"text": self.text, "timestamp": self.timestamp}

    @classmethod
    def from_dict(cls, data: Any) -> CachedResult | None:
        if not isinstance(data, dict):
            return None
        text = data.get("text")
        timestamp = data.get("timestamp")
        if not isinstance(text, str) or not isinstance(timestamp, (int, float)):
            return None
        return cls(text=text, timestamp=int(timestamp))


def now_ms() -> int:
    return int(time.time() * 1000)


def cache_key(query: str) -> str:
    """Namespace the already-truncated query; no further normalization."""
    return f"{CACHE_KEY_PREFIX}{query}"


def is_expired(entry: CachedResult, ttl_seconds: int, now: int) -> bool:
    return now - entry.timestamp > ttl_seconds * 1000


class KeyedLocks:
    """Per-key mutual exclusion for writers racing to fill the same entry."""

    def __init__(self) -> None:
        self._guard = threading.Lock()
        self._locks: dict[str, threading.Lock] = {}
        self._users: dict[str, int] = {}

    @contextmanager
    def hold(self, key: str) -> Iterator[None]:
        with self._guard:
            lock = self._locks.setdefault(key, threading.Lock())
            self._users[key] = self._users.get(key, 0) + 1
        try:
            with lock:
                yield
        finally:
            with self._guard:
                self._users[key] -= 1
                if not self._users[key]:
                    del self._users[key]
                    del self._locks[key]
