"""Pluggable result cache backends for condensed search results."""

from chat_websearch.cache.db_store import DbSearchCache
from chat_websearch.cache.file_store import FileSearchCache
from chat_websearch.cache.interface import SearchCache
from chat_websearch.cache.memory_store import MemorySearchCache
from chat_websearch.cache.record_ops import CachedResult, cache_key
from chat_websearch.config.settings import get_settings
from chat_websearch.config.websearch import ONE_WEEK_SECONDS


def build_search_cache(ttl_seconds: int = ONE_WEEK_SECONDS) -> SearchCache:
    settings = get_settings()
    backend = settings.cache_backend.strip().lower()
    if backend == "file":
        return FileSearchCache(settings.cache_dir, ttl_seconds)
    if backend == "db":
        return DbSearchCache(ttl_seconds, auto_init=settings.database_auto_migrate)
    if backend == "memory":
        return MemorySearchCache(ttl_seconds)
    raise ValueError(
        f"Unsupported CACHE_BACKEND={settings.cache_backend!r}. "
        "Use 'file', 'db' or 'memory'."
    )


__all__ = [
    "CachedResult",
    "DbSearchCache",
    "FileSearchCache",
    "MemorySearchCache",
    "SearchCache",
    "build_search_cache",
    "cache_key",
]
