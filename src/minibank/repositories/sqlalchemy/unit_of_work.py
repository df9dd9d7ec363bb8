"""Transaction boundary: one session per unit of work."""

import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from minibank.core.exceptions import StorageError

logger = logging.getLogger(__name__)


class TransactionManager:
    """
    Hands out transaction-scoped sessions bound to one engine.

    A session returned by ``begin`` is owned by a single caller until it is
    closed. Prefer ``transaction()``, which commits on normal exit, rolls back
    on any exception and always releases the connection back to the pool.
    """

    def __init__(self, engine: Engine):
        self._engine = engine
        self._session_factory = sessionmaker(
            bind=engine,
            autoflush=False,
            expire_on_commit=False,
        )

    @property
    def engine(self) -> Engine:
        return self._engine

    def begin(self) -> Session:
        """Open a session with a transaction already started."""
        session = self._session_factory()
        session.begin()
        return session

    def commit(self, session: Session) -> None:
        try:
            session.commit()
        except SQLAlchemyError as exc:
            raise StorageError(f"commit failed: {exc}") from exc

    def rollback(self, session: Session) -> None:
        try:
            session.rollback()
        except SQLAlchemyError as exc:
            raise StorageError(f"rollback failed: {exc}") from exc

    def close(self, session: Session) -> None:
        session.close()

    @contextmanager
    def transaction(self) -> Iterator[Session]:
        """Run the enclosed block as one all-or-nothing unit of work."""
        session = self.begin()
        try:
            yield session
            self.commit(session)
        except Exception as exc:
            logger.warning("Rolling back transaction: %s", exc)
            self.rollback(session)
            raise
        finally:
            self.close(session)

    def dispose(self) -> None:
        """Close every pooled connection (shutdown/drain)."""
        self._engine.dispose()
        logger.info("Connection pool disposed")
