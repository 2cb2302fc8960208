from __future__ import annotations

from sqlalchemy import BigInteger, Text
from sqlalchemy.orm import Mapped, mapped_column

from chat_websearch.database.base import Base


class SearchCacheEntry(Base):
    """One cached extraction, keyed by the namespaced query string."""

    __tablename__ = "search_cache_entries"

    cache_key: Mapped[str] = mapped_column(Text, primary_key=True)
    text: Mapped[str] = mapped_column(Text, nullable=False)
    # Epoch milliseconds, compared directly against the cache clock.
    timestamp: Mapped[int] = mapped_column(BigInteger, nullable=False)
