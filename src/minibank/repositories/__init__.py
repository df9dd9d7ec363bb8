"""Repository layer - data access abstractions and implementations."""

from minibank.repositories.protocols import AccountRepository

__all__ = [
    "AccountRepository",
]
