"""Engine, session and table management for the lookup store."""

from collections.abc import Generator
from typing import Annotated, Any

import structlog
from fastapi import Depends
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

from lookup_factory.config import Settings, get_settings

logger = structlog.get_logger(__name__)


class Base(DeclarativeBase):
    """Declarative base shared by every lookup table."""


_engine: Engine | None = None
_session_factory: sessionmaker[Session] | None = None


def is_in_memory_sqlite(database_url: str) -> bool:
    """True for SQLite URLs whose database lives only inside one connection."""
    url = make_url(database_url)
    if url.get_backend_name() != "sqlite":
        return False
    database = url.database or ""
    return not database or ":memory:" in database or url.query.get("mode") == "memory"


def engine_options(database_url: str) -> dict[str, Any]:
    """
    Keyword arguments for ``create_engine`` suited to the given URL.

    In-memory SQLite is held on one shared connection. File SQLite uses the
    regular pool, one connection and transaction per session. Server
    databases get a bounded pool with liveness checks.
    """
    url = make_url(database_url)
    if url.get_backend_name() == "sqlite":
        options: dict[str, Any] = {"connect_args": {"check_same_thread": False}}
        if is_in_memory_sqlite(database_url):
            options["poolclass"] = StaticPool
        return options
    return {
        "pool_size": 10,
        "max_overflow": 20,
        "pool_pre_ping": True,
        "pool_recycle": 3600,
    }


def initialize_database(settings: Settings) -> None:
    """Build the engine and session factory for the configured database."""
    global _engine, _session_factory  # noqa: PLW0603

    options = engine_options(settings.DATABASE_URL)
    _engine = create_engine(settings.DATABASE_URL, **options)
    _session_factory = sessionmaker(autocommit=False, autoflush=False, bind=_engine)
    logger.info(
        "database_initialized",
        backend=_engine.url.get_backend_name(),
        pool=type(_engine.pool).__name__,
    )


def get_engine() -> Engine:
    if _engine is None:
        raise RuntimeError("Database not initialized. Call initialize_database() first.")
    return _engine


def create_tables() -> None:
    """Create every lookup table that does not exist yet."""
    # Registers the ORM tables on Base.metadata
    from lookup_factory.infrastructure.lookup import models  # noqa: F401

    Base.metadata.create_all(bind=get_engine())


def get_session_factory(
    settings: Annotated[Settings, Depends(get_settings)],
) -> sessionmaker[Session]:
    """Return the session factory, initializing the database on first use."""
    if _session_factory is None:
        initialize_database(settings)
    if _session_factory is None:
        raise RuntimeError("Database session factory is unavailable.")
    return _session_factory


def dispose_engine() -> None:
    """Close pooled connections and forget the engine."""
    global _engine, _session_factory  # noqa: PLW0603
    if _engine is None:
        return
    _engine.dispose()
    _engine = None
    _session_factory = None


def get_db(
    session_factory: Annotated[sessionmaker[Session], Depends(get_session_factory)],
) -> Generator[Session, None, None]:
    """Yield one session per request and close it afterwards."""
    with session_factory() as db:
        yield db


DatabaseSession = Annotated[Session, Depends(get_db)]
