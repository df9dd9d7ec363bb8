"""Repository protocol definitions (interfaces)."""

from minibank.repositories.protocols.account_repo import AccountRepository

__all__ = [
    "AccountRepository",
]
