"""Domain layer - pure business models with no external dependencies."""

from minibank.domain.models import Account

__all__ = [
    "Account",
]
