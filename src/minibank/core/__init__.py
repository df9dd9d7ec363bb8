"""Core utilities and shared functionality."""

from minibank.core.exceptions import (
    AppError,
    BusinessError,
    FatalError,
    AccountNotFoundError,
    AccountAlreadyExistsError,
    BalanceNotEnoughError,
    StorageError,
    TransferIntegrityError,
    AccountDeleteError,
)

__all__ = [
    "AppError",
    "BusinessError",
    "FatalError",
    "AccountNotFoundError",
    "AccountAlreadyExistsError",
    "BalanceNotEnoughError",
    "StorageError",
    "TransferIntegrityError",
    "AccountDeleteError",
]
