from __future__ import annotations

import hashlib
import json
import logging
from pathlib import Path

from chat_websearch.cache.record_ops import (
    CachedResult,
    Clock,
    KeyedLocks,
    cache_key,
    is_expired,
    now_ms,
)

logger = logging.getLogger(__name__)


class FileSearchCache:
    """Durable file-based cache, one JSON document per key, with atomic writes.

    File names are digests of the cache key, so arbitrary query text never
    reaches the filesystem; the key itself is kept inside the document.
    """

    def __init__(self, base_dir: str, ttl_seconds: int, clock: Clock | None = None) -> None:
        self._base = Path(base_dir)
        self._base.mkdir(parents=True, exist_ok=True)
        self._ttl_seconds = ttl_seconds
        self._clock = clock or now_ms
        self._locks = KeyedLocks()

    def _path(self, key: str) -> Path:
        digest = hashlib.sha256(key.encode("utf-8")).hexdigest()
        return self._base / f"{digest}.json"

    def get(self, query: str, *, ttl_seconds: int | None = None) -> CachedResult | None:
        key = cache_key(query)
        path = self._path(key)
        if not path.exists():
            return None
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except Exception:  # noqa: BLE001
            logger.warning("Discarding unreadable cache file %s", path)
            path.unlink(missing_ok=True)
            return None

        entry = CachedResult.from_dict(data)
        if entry is None or data.get("key") != key:
            path.unlink(missing_ok=True)
            return None

        ttl = self._ttl_seconds if ttl_seconds is None else ttl_seconds
        if is_expired(entry, ttl, self._clock()):
            logger.debug("Cached result for %r expired, removing", query)
            path.unlink(missing_ok=True)
            return None
        return entry

    def put(self, query: str, text: str) -> None:
        key = cache_key(query)
        entry = CachedResult(text=text, timestamp=self._clock())
        path = self._path(key)
        with self._locks.hold(key):
            tmp_path = path.with_suffix(".json.tmp")
            tmp_path.write_text(
                json.dumps({"key": key, **entry.to_dict()}, ensure_ascii=True),
                encoding="utf-8",
            )
            tmp_path.replace(path)

    def clear(self) -> None:
        for path in self._base.glob("*.json"):
            path.unlink(missing_ok=True)
