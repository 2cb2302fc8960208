from chat_websearch.database.base import Base
from chat_websearch.database.engine import create_cache_engine, get_engine
from chat_websearch.database.session import SessionLocal, session_scope

__all__ = ["Base", "SessionLocal", "create_cache_engine", "get_engine", "session_scope"]
