"""Domain models package."""

from minibank.domain.models.account import Account

__all__ = [
    "Account",
]
