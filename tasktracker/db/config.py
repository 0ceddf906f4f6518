"""Database configuration for the Task Tracker API."""
from typing import Generator
from sqlmodel import create_engine, Session
from sqlalchemy import event
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool
import logging

from tasktracker.config import DATABASE_URL

logger = logging.getLogger(__name__)


def is_sqlite(url: str) -> bool:
    return url.startswith("sqlite")


def is_memory_sqlite(url: str) -> bool:
    return url in ("sqlite://", "sqlite:///:memory:")


def build_engine(url: str = DATABASE_URL, echo: bool = False) -> Engine:
    """Create an engine for ``url``.

    SQLite connections are shared across threads (FastAPI runs sync
    dependencies in a threadpool) and in-memory databases are pinned to a
    single connection so every session sees the same tables.
    """
    if not is_sqlite(url):
        logger.info("Using database server at %s", url.split("@")[-1])
        return create_engine(url, echo=echo, pool_pre_ping=True)

    connect_args = {"check_same_thread": False}
    if is_memory_sqlite(url):
        new_engine = create_engine(url, echo=echo, connect_args=connect_args, poolclass=StaticPool)
    else:
        logger.info("Using SQLite database: %s", url)
        new_engine = create_engine(url, echo=echo, connect_args=connect_args)

    if not is_memory_sqlite(url):
        @event.listens_for(new_engine, "connect")
        def set_sqlite_pragma(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA journal_mode=WAL")
            cursor.close()

    return new_engine


engine = build_engine()


def get_session() -> Generator[Session, None, None]:
    """Dependency for getting database sessions."""
    with Session(engine) as session:
        yield session
