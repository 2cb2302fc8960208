from __future__ import annotations

from sqlalchemy.engine import Engine

from chat_websearch.database.base import Base
from chat_websearch.database.engine import get_engine
from chat_websearch.models import SearchCacheEntry  # noqa: F401


def init_database(bind: Engine | None = None) -> None:
    """Create tables for local/dev usage. Migrations should be preferred in production."""
    Base.metadata.create_all(bind=bind or get_engine())
