"""SQLAlchemy repository implementations."""

from minibank.repositories.sqlalchemy.database import (
    create_db_engine,
    init_db,
    drop_db,
    Base,
)
from minibank.repositories.sqlalchemy.account_repo import SqlAlchemyAccountRepository
from minibank.repositories.sqlalchemy.unit_of_work import TransactionManager

__all__ = [
    "create_db_engine",
    "init_db",
    "drop_db",
    "Base",
    "SqlAlchemyAccountRepository",
    "TransactionManager",
]
