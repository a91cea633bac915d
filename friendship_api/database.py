"""Database layer utilities for SQLAlchemy-backed persistence."""
from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Generator, Iterator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from .config import get_settings

logger = logging.getLogger(__name__)

settings = get_settings()

engine: Engine = create_engine(settings.database_url, pool_pre_ping=True, future=True)

# Friend queries may be served from a replica; without one they share the primary engine.
if settings.read_database_url:
    read_engine: Engine = create_engine(settings.read_database_url, pool_pre_ping=True, future=True)
else:
    read_engine = engine

SessionLocal = sessionmaker(
    bind=engine,
    autoflush=False,
    autocommit=False,
    future=True,
    expire_on_commit=False,
)

ReadSessionLocal = sessionmaker(
    bind=read_engine,
    autoflush=False,
    autocommit=False,
    future=True,
    expire_on_commit=False,
)

Base = declarative_base()


def get_engine() -> Engine:
    """Return the configured SQLAlchemy engine."""
    return engine


def get_session() -> Generator[Session, None, None]:
    """FastAPI dependency that yields a SQLAlchemy session per request."""
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


def get_read_session() -> Generator[Session, None, None]:
    """FastAPI dependency yielding a session bound to the read connection."""
    session = ReadSessionLocal()
    try:
        yield session
    finally:
        session.close()


@contextmanager
def transaction(session: Session) -> Iterator[Session]:
    """Commit the work done inside the block, or roll all of it back on any error."""

    try:
        yield session
        session.commit()
    except SQLAlchemyError:
        session.rollback()
        logger.exception("Transaction rolled back after a storage error")
        raise
    except Exception:
        session.rollback()
        raise


def create_session() -> Session:
    """Return a new SQLAlchemy session for scripts and tests."""
    return SessionLocal()


def init_db() -> None:
    """Initialise database schema by creating tables when missing."""
    # Import models to ensure they are registered on the metadata before create_all runs.
    from . import models  # noqa: F401

    Base.metadata.create_all(bind=engine)


__all__ = [
    "Base",
    "SessionLocal",
    "ReadSessionLocal",
    "get_engine",
    "get_session",
    "get_read_session",
    "transaction",
    "create_session",
    "init_db",
]
