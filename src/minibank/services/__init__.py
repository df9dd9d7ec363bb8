"""Service layer - business logic orchestration."""

from minibank.services.bank_service import BankService

__all__ = [
    "BankService",
]
