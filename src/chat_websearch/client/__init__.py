from chat_websearch.client.search_client import SearchClient

__all__ = ["SearchClient"]
