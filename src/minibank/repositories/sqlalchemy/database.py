"""Database engine, connection pool and schema management."""

import logging
from typing import Optional

from sqlalchemy import create_engine, Engine, StaticPool, make_url
from sqlalchemy.orm import declarative_base

from minibank.config.settings import Settings, get_settings

logger = logging.getLogger(__name__)

Base = declarative_base()


def _is_memory_sqlite(url) -> bool:
    return url.get_backend_name() == "sqlite" and url.database in (None, "", ":memory:")


def create_db_engine(settings: Optional[Settings] = None) -> Engine:
    """
    Create the engine and its connection pool from settings.

    Server databases get a bounded QueuePool: ``pool_size`` connections,
    ``max_overflow`` extra, a ``pool_timeout`` ceiling on the wait for a free
    connection and a pre-ping validation ping on checkout. In-memory SQLite
    shares one connection through StaticPool so every session sees the same
    database.
    """
    settings = settings or get_settings()
    url = make_url(settings.get_database_url())

    kwargs = {"echo": settings.echo_sql}
    if url.get_backend_name() == "sqlite":
        kwargs["connect_args"] = {"check_same_thread": False}  # SQLite-specific

    if _is_memory_sqlite(url):
        kwargs["poolclass"] = StaticPool
    else:
        kwargs.update(
            pool_size=settings.pool_size,
            max_overflow=settings.max_overflow,
            pool_timeout=settings.pool_timeout,
            pool_recycle=settings.pool_recycle,
            pool_pre_ping=settings.pool_pre_ping,
        )

    engine = create_engine(url, **kwargs)
    logger.info("Database engine created for %s", url.render_as_string(hide_password=True))
    return engine


def init_db(engine: Engine) -> None:
    """Create tables that do not exist yet."""
    from minibank.repositories.sqlalchemy import orm_models  # noqa: F401

    Base.metadata.create_all(bind=engine)


def drop_db(engine: Engine) -> None:
    """Drop all tables."""
    from minibank.repositories.sqlalchemy import orm_models  # noqa: F401

    Base.metadata.drop_all(bind=engine)
