"""
Database configuration and session management for the Seed Ledger service.

The engine (and its connection pool) is built once by ``create_app`` and kept
on ``app.state``; route handlers receive sessions through the ``get_db``
dependency rather than a module-level global.
"""
import logging

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import declarative_base, sessionmaker

from .config import Settings

logger = logging.getLogger(__name__)

Base = declarative_base()


def create_db_engine(settings: Settings) -> Engine:
    """
    Create the SQLAlchemy engine backing every request.

    The pool is bounded at ``db_pool_size`` connections with no overflow;
    a checkout waits at most ``db_pool_timeout`` seconds before failing.

    Args:
        settings: Service settings

    Returns:
        Engine: configured SQLAlchemy engine (no connection is opened yet)
    """
    url = make_url(settings.sqlalchemy_url)
    connect_args = {}
    if url.get_backend_name() == "sqlite":
        # Pooled SQLite connections are shared across FastAPI's worker threads
        connect_args["check_same_thread"] = False

    return create_engine(
        url,
        pool_size=settings.db_pool_size,
        max_overflow=0,
        pool_timeout=settings.db_pool_timeout,
        pool_pre_ping=True,
        connect_args=connect_args,
    )


def create_session_factory(engine: Engine) -> sessionmaker:
    """Return a session factory bound to ``engine``."""
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_schema(engine: Engine) -> None:
    """
    Create the four ledger tables if they do not exist yet.

    Safe to call repeatedly. Datastore errors propagate to the caller.
    """
    # Registers the ledger tables on Base.metadata
    from . import models  # noqa: F401

    Base.metadata.create_all(bind=engine)
    logger.info("Database tables initialized")


def get_db(request: Request):
    """
    Dependency function that provides a database session.

    Yields:
        Session: SQLAlchemy database session from the application's pool

    Usage:
        Use as a FastAPI dependency to inject database sessions into route handlers.
    """
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
