"""Account endpoints. Each request runs as one unit of work."""

from fastapi import APIRouter, Depends, Response

from minibank.api.deps import get_bank_service, get_transaction_manager
from minibank.api.schemas.account import (
    AccountCreate,
    AccountResponse,
    AmountRequest,
    BalanceChangeResponse,
    TransferRequest,
    TransferResponse,
)
from minibank.domain.models import Account
from minibank.repositories.sqlalchemy import TransactionManager
from minibank.services import BankService

router = APIRouter(prefix="/accounts", tags=["accounts"])


@router.post("", response_model=AccountResponse, status_code=201)
def create_account(
    data: AccountCreate,
    tm: TransactionManager = Depends(get_transaction_manager),
    service: BankService = Depends(get_bank_service),
):
    """Open a new account."""
    account = Account(
        account_number=data.account_number,
        name=data.name,
        balance=data.balance,
    )
    with tm.transaction() as session:
        service.create_account(session, account)
        created = service.get_account(session, account.account_number)
    return AccountResponse.model_validate(created)


@router.post("/transfer", response_model=TransferResponse)
def transfer(
    data: TransferRequest,
    tm: TransactionManager = Depends(get_transaction_manager),
    service: BankService = Depends(get_bank_service),
):
    """Move funds between two accounts."""
    with tm.transaction() as session:
        service.transfer_amount(session, data.from_account, data.to_account, data.amount)
        account_from = service.get_account(session, data.from_account)
        account_to = service.get_account(session, data.to_account)
    return TransferResponse(
        from_account=AccountResponse.model_validate(account_from),
        to_account=AccountResponse.model_validate(account_to),
    )


@router.get("/{account_number}", response_model=AccountResponse)
def get_account(
    account_number: int,
    tm: TransactionManager = Depends(get_transaction_manager),
    service: BankService = Depends(get_bank_service),
):
    """Get a single account."""
    with tm.transaction() as session:
        account = service.get_account(session, account_number)
    return AccountResponse.model_validate(account)


@router.post("/{account_number}/deposit", response_model=BalanceChangeResponse)
def deposit(
    account_number: int,
    data: AmountRequest,
    tm: TransactionManager = Depends(get_transaction_manager),
    service: BankService = Depends(get_bank_service),
):
    """Deposit into an account. Non-positive amounts report success=false."""
    with tm.transaction() as session:
        success = service.deposit_account(session, account_number, data.amount)
        account = service.get_account(session, account_number)
    return BalanceChangeResponse(success=success, account=AccountResponse.model_validate(account))


@router.post("/{account_number}/withdraw", response_model=BalanceChangeResponse)
def withdraw(
    account_number: int,
    data: AmountRequest,
    tm: TransactionManager = Depends(get_transaction_manager),
    service: BankService = Depends(get_bank_service),
):
    """Withdraw from an account."""
    with tm.transaction() as session:
        success = service.withdraw_account(session, account_number, data.amount)
        account = service.get_account(session, account_number)
    return BalanceChangeResponse(success=success, account=AccountResponse.model_validate(account))


@router.delete("/{account_number}", status_code=204)
def delete_account(
    account_number: int,
    tm: TransactionManager = Depends(get_transaction_manager),
    service: BankService = Depends(get_bank_service),
):
    """Close an account."""
    with tm.transaction() as session:
        service.drop_account(session, account_number)
    return Response(status_code=204)
