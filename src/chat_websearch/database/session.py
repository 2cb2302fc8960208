from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from chat_websearch.database.engine import get_engine

SessionLocal = sessionmaker(autoflush=False, autocommit=False, future=True)


@contextmanager
def session_scope(bind: Engine | None = None) -> Iterator[Session]:
    """Provide a transactional scope around DB operations."""
    session = SessionLocal(bind=bind or get_engine())
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
