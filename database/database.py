"""Engines, session factories and schema creation for the report store.

Reads and writes go through separate engines. In production point
WRITE_DATABASE_URL at the primary and READ_DATABASE_URL at a replica; left
unset, both use the local SQLite file ``recomp.db``.
"""

import os
from typing import Iterator

from sqlalchemy import create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from core.exceptions import DatabaseError
from core.logger import get_logger
from .models import Base

logger = get_logger("database")

WRITE_DATABASE_URL = os.getenv("WRITE_DATABASE_URL", "sqlite:///recomp.db")
READ_DATABASE_URL = os.getenv("READ_DATABASE_URL", WRITE_DATABASE_URL)


def _make_engine(url: str):
    # SQLite connections are shared across FastAPI's threadpool workers
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    return create_engine(url, connect_args=connect_args)


write_engine = _make_engine(WRITE_DATABASE_URL)
read_engine = _make_engine(READ_DATABASE_URL)

WriteSessionLocal = sessionmaker(bind=write_engine)
ReadSessionLocal = sessionmaker(bind=read_engine)


def init_db():
    """Create the `reports` table if it does not exist yet.

    Raises:
        DatabaseError: If the schema cannot be created.
    """
    try:
        Base.metadata.create_all(bind=write_engine)
    except SQLAlchemyError as exc:
        logger.exception("Schema creation failed for %s", write_engine.url.render_as_string(hide_password=True))
        raise DatabaseError("Could not initialize the database", operation="init_db") from exc
    logger.info("Database ready (tables: %s)", ", ".join(sorted(Base.metadata.tables)))


def _scoped(factory: sessionmaker) -> Iterator[Session]:
    db = factory()
    try:
        yield db
    finally:
        db.close()


def get_write_session() -> Iterator[Session]:
    """Yield a session on the write engine, closed when the request ends."""
    yield from _scoped(WriteSessionLocal)


def get_read_session() -> Iterator[Session]:
    """Yield a session on the read engine, closed when the request ends."""
    yield from _scoped(ReadSessionLocal)
