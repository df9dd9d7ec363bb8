"""Pydantic schemas for API request/response."""

from minibank.api.schemas.account import (
    AccountCreate,
    AccountResponse,
    AmountRequest,
    BalanceChangeResponse,
    TransferRequest,
    TransferResponse,
)

__all__ = [
    "AccountCreate",
    "AccountResponse",
    "AmountRequest",
    "BalanceChangeResponse",
    "TransferRequest",
    "TransferResponse",
]
