"""Dependency injection for FastAPI."""

from fastapi import Depends, Request

from minibank.repositories.sqlalchemy import SqlAlchemyAccountRepository, TransactionManager
from minibank.services import BankService


def get_transaction_manager(request: Request) -> TransactionManager:
    """Provide the TransactionManager created at startup."""
    return request.app.state.transaction_manager


def get_account_repo() -> SqlAlchemyAccountRepository:
    """Provide AccountRepository instance."""
    return SqlAlchemyAccountRepository()


def get_bank_service(
    account_repo: SqlAlchemyAccountRepository = Depends(get_account_repo),
) -> BankService:
    """Provide BankService instance."""
    return BankService(account_repo=account_repo)
