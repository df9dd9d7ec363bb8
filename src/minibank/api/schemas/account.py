"""Pydantic schemas for account endpoints."""

from pydantic import BaseModel, Field


class AccountCreate(BaseModel):
    """Request schema for opening an account."""

    account_number: int = Field(..., description="Unique account number")
    name: str = Field(..., min_length=1, max_length=255, description="Display name")
    balance: int = Field(default=0, ge=0, description="Opening balance in the smallest unit")


class AccountResponse(BaseModel):
    """Response schema for a single account."""

    model_config = {"from_attributes": True}

    account_number: int
    name: str
    balance: int


class AmountRequest(BaseModel):
    """Request schema for deposits and withdrawals."""

    amount: int


class BalanceChangeResponse(BaseModel):
    """Outcome of a deposit or withdrawal with the account as committed."""

    success: bool
    account: AccountResponse


class TransferRequest(BaseModel):
    """Request schema for moving funds between two accounts."""

    from_account: int
    to_account: int
    amount: int


class TransferResponse(BaseModel):
    """Both accounts as committed after a transfer."""

    from_account: AccountResponse
    to_account: AccountResponse
