"""SQLAlchemy implementation of AccountRepository."""

import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy import delete, func, insert, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from minibank.core.exceptions import StorageError
from minibank.domain.models import Account
from minibank.repositories.sqlalchemy.orm_models import AccountORM

logger = logging.getLogger(__name__)

accounts = AccountORM.__table__


@contextmanager
def _storage_errors(operation: str) -> Iterator[None]:
    """Re-raise driver failures as StorageError."""
    try:
        yield
    except SQLAlchemyError as exc:
        logger.error("Statement failed during %s: %s", operation, exc)
        raise StorageError(f"{operation} failed: {exc}") from exc


class SqlAlchemyAccountRepository:
    """
    SQLAlchemy-backed account repository.

    Statements go through Core against the accounts table so that every call
    hits the database and reports an exact row count; nothing is kept in the
    session's identity map.
    """

    def find_by_account_number(self, session: Session, account_number: int) -> Optional[Account]:
        """Retrieve an account, or None if no row matches."""
        stmt = select(accounts.c.account_number, accounts.c.name, accounts.c.balance).where(
            accounts.c.account_number == account_number
        )
        with _storage_errors("find_by_account_number"):
            row = session.execute(stmt).first()
        return self._to_domain(row) if row else None

    def save(self, session: Session, account: Account) -> int:
        """Insert a new account row."""
        stmt = insert(accounts).values(
            account_number=account.account_number,
            name=account.name,
            balance=account.balance,
        )
        with _storage_errors("save"):
            result = session.execute(stmt)
        logger.debug("save: %s", result.rowcount)
        return result.rowcount

    def count_by_account_number(self, session: Session, account_number: int) -> int:
        """Count rows with the given account number."""
        stmt = (
            select(func.count())
            .select_from(accounts)
            .where(accounts.c.account_number == account_number)
        )
        with _storage_errors("count_by_account_number"):
            return session.execute(stmt).scalar_one()

    def deposit(self, session: Session, account_number: int, amount: int) -> int:
        """Add ``amount`` to the balance server-side."""
        stmt = (
            update(accounts)
            .where(accounts.c.account_number == account_number)
            .values(balance=accounts.c.balance + amount)
        )
        with _storage_errors("deposit"):
            result = session.execute(stmt)
        logger.debug("deposit: %s", result.rowcount)
        return result.rowcount

    def withdraw(self, session: Session, account_number: int, amount: int) -> int:
        """Subtract ``amount`` from the balance server-side."""
        stmt = (
            update(accounts)
            .where(accounts.c.account_number == account_number)
            .values(balance=accounts.c.balance - amount)
        )
        with _storage_errors("withdraw"):
            result = session.execute(stmt)
        logger.debug("withdraw: %s", result.rowcount)
        return result.rowcount

    def delete_by_account_number(self, session: Session, account_number: int) -> int:
        """Delete an account row."""
        stmt = delete(accounts).where(accounts.c.account_number == account_number)
        with _storage_errors("delete_by_account_number"):
            result = session.execute(stmt)
        logger.debug("delete: %s", result.rowcount)
        return result.rowcount

    @staticmethod
    def _to_domain(row) -> Account:
        """Convert a result row to a domain model."""
        return Account(
            account_number=row.account_number,
            name=row.name,
            balance=row.balance,
        )
