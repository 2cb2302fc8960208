from __future__ import annotations

from functools import lru_cache

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine

from chat_websearch.config.settings import get_settings


def create_cache_engine(url: str, *, echo: bool = False) -> Engine:
    kwargs: dict[str, object] = {
        "echo": echo,
        "future": True,
        "pool_pre_ping": True,
    }

    # SQLite needs this for multithreaded app servers.
    if url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}

    return create_engine(url, **kwargs)


@lru_cache
def get_engine() -> Engine:
    """Build and cache a shared SQLAlchemy engine."""
    settings = get_settings()
    return create_cache_engine(settings.database_url, echo=settings.database_echo)
