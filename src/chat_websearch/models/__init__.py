from chat_websearch.models.search_cache_entry import SearchCacheEntry

__all__ = ["SearchCacheEntry"]
