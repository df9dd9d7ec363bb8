"""
Pytest configuration and fixtures for ledger tests.

This module provides:
- In-memory SQLite engine and transaction manager fixtures
- Repository and service fixtures
- Factory helpers for committed accounts
- FastAPI test client wired to the test database
"""

from typing import Callable, Optional
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from minibank.main import app
from minibank.api.deps import get_transaction_manager
from minibank.config.settings import Settings, set_settings, reset_settings
from minibank.domain.models import Account
from minibank.repositories.protocols import AccountRepository
from minibank.repositories.sqlalchemy import (
    SqlAlchemyAccountRepository,
    TransactionManager,
    create_db_engine,
    init_db,
    drop_db,
)
from minibank.services import BankService


# =============================================================================
# DATABASE FIXTURES
# =============================================================================


@pytest.fixture(scope="function")
def test_settings() -> Settings:
    """Settings pointing at a private in-memory database."""
    reset_settings()
    settings = Settings(database_url="sqlite:///:memory:", log_level="DEBUG")
    set_settings(settings)
    yield settings
    reset_settings()


@pytest.fixture(scope="function")
def test_engine(test_settings):
    """Create test database engine with shared in-memory SQLite."""
    engine = create_db_engine(test_settings)
    init_db(engine)
    yield engine
    drop_db(engine)
    engine.dispose()


@pytest.fixture
def transaction_manager(test_engine) -> TransactionManager:
    """Provide TransactionManager bound to the test engine."""
    return TransactionManager(test_engine)


@pytest.fixture
def session(transaction_manager) -> Session:
    """Open session that is rolled back after the test."""
    session = transaction_manager.begin()
    try:
        yield session
    finally:
        transaction_manager.rollback(session)
        transaction_manager.close(session)


# =============================================================================
# REPOSITORY AND SERVICE FIXTURES
# =============================================================================


@pytest.fixture
def account_repo() -> SqlAlchemyAccountRepository:
    """Provide test AccountRepository."""
    return SqlAlchemyAccountRepository()


@pytest.fixture
def bank_service(account_repo) -> BankService:
    """Provide BankService backed by the SQLite repository."""
    return BankService(account_repo=account_repo)


@pytest.fixture
def mock_repo() -> MagicMock:
    """Repository double for checking which statements the service issues."""
    return MagicMock(spec=AccountRepository)


@pytest.fixture
def mock_service(mock_repo) -> BankService:
    """BankService backed by the repository double."""
    return BankService(account_repo=mock_repo)


class DepositFailingRepository(SqlAlchemyAccountRepository):
    """Repository whose deposit statement never matches a row."""

    def deposit(self, session, account_number, amount):
        return 0


class WithdrawFailingRepository(SqlAlchemyAccountRepository):
    """Repository whose withdraw statement never matches a row."""

    def withdraw(self, session, account_number, amount):
        return 0


@pytest.fixture
def deposit_failing_service() -> BankService:
    """BankService whose transfers fail between withdraw and deposit."""
    return BankService(account_repo=DepositFailingRepository())


@pytest.fixture
def withdraw_failing_service() -> BankService:
    """BankService whose transfers fail on the withdraw step."""
    return BankService(account_repo=WithdrawFailingRepository())


# =============================================================================
# FACTORY FIXTURES
# =============================================================================


@pytest.fixture
def account_factory(transaction_manager, bank_service) -> Callable[..., Account]:
    """Factory for creating committed test accounts."""

    def _create_account(
        account_number: int,
        balance: int = 0,
        name: Optional[str] = None,
    ) -> Account:
        account = Account(
            account_number=account_number,
            name=name or f"Holder {account_number}",
            balance=balance,
        )
        with transaction_manager.transaction() as session:
            bank_service.create_account(session, account)
        return account

    return _create_account


@pytest.fixture
def committed_balance(transaction_manager, account_repo) -> Callable[[int], Optional[int]]:
    """Read an account's committed balance in a fresh transaction."""

    def _balance(account_number: int) -> Optional[int]:
        with transaction_manager.transaction() as session:
            account = account_repo.find_by_account_number(session, account_number)
        return account.balance if account else None

    return _balance


@pytest.fixture
def sample_pair(account_factory) -> tuple[Account, Account]:
    """Account 1001 holding 500 and account 2002 holding 100."""
    return account_factory(1001, 500), account_factory(2002, 100)


# =============================================================================
# API TEST CLIENT FIXTURE
# =============================================================================


@pytest.fixture
def client(transaction_manager) -> TestClient:
    """Provide FastAPI test client with test database."""
    app.dependency_overrides[get_transaction_manager] = lambda: transaction_manager
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
