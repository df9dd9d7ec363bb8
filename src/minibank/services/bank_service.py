"""Bank service for account management, deposits, withdrawals and transfers."""

import logging

from sqlalchemy.orm import Session

from minibank.core.exceptions import (
    AccountAlreadyExistsError,
    AccountDeleteError,
    AccountNotFoundError,
    BalanceNotEnoughError,
    TransferIntegrityError,
)
from minibank.domain.models import Account
from minibank.repositories.protocols import AccountRepository

logger = logging.getLogger(__name__)


class BankService:
    """
    Service enforcing the ledger's business rules.

    Holds no state of its own: every call re-reads what it needs through the
    repository, on the session it is given. The service never commits or rolls
    back; callers wrap each call in ``TransactionManager.transaction()`` so a
    raised error undoes any partial writes.

    Check-then-write sequences (exists-then-insert, balance-then-withdraw)
    rely on the database isolation level; no explicit row locks are taken.
    """

    def __init__(self, account_repo: AccountRepository):
        self._account_repo = account_repo

    def get_account(self, session: Session, account_number: int) -> Account:
        """Get account by number."""
        account = self._account_repo.find_by_account_number(session, account_number)
        if account is None:
            raise AccountNotFoundError(account_number)
        return account

    def create_account(self, session: Session, account: Account) -> None:
        """
        Create a new account.

        Raises:
            AccountAlreadyExistsError: the account number is taken.
            BalanceNotEnoughError: the opening balance is negative.
        """
        if self.is_exist_account(session, account.account_number):
            logger.info("Rejected duplicate account %s", account.account_number)
            raise AccountAlreadyExistsError(account.account_number)
        if account.balance < 0:
            logger.info(
                "Rejected account %s with opening balance %s",
                account.account_number,
                account.balance,
            )
            raise BalanceNotEnoughError(account.account_number)
        self._account_repo.save(session, account)
        logger.info("Created account %s", account.account_number)

    def deposit_account(self, session: Session, account_number: int, amount: int) -> bool:
        """
        Deposit into an account.

        Returns False without touching storage when ``amount`` is not positive.
        """
        if not self.is_exist_account(session, account_number):
            raise AccountNotFoundError(account_number)
        if amount <= 0:
            return False
        return self._account_repo.deposit(session, account_number, amount) > 0

    def withdraw_account(self, session: Session, account_number: int, amount: int) -> bool:
        """
        Withdraw from an account.

        A non-positive amount is rejected the same way as an overdraft.

        Raises:
            AccountNotFoundError: the account does not exist.
            BalanceNotEnoughError: amount <= 0 or amount exceeds the balance.
        """
        if not self.is_exist_account(session, account_number):
            raise AccountNotFoundError(account_number)
        if amount <= 0 or self.get_account(session, account_number).balance < amount:
            logger.info("Rejected withdrawal of %s from %s", amount, account_number)
            raise BalanceNotEnoughError(account_number)
        return self._account_repo.withdraw(session, account_number, amount) > 0

    def transfer_amount(
        self,
        session: Session,
        account_number_from: int,
        account_number_to: int,
        amount: int,
    ) -> None:
        """
        Move ``amount`` from one account to another.

        Withdraws first, then deposits. Either step touching no rows raises
        TransferIntegrityError; if the withdrawal already ran, only a rollback
        of the enclosing transaction restores the balances.
        """
        if not self.is_exist_account(session, account_number_from):
            raise AccountNotFoundError(account_number_from)
        if not self.is_exist_account(session, account_number_to):
            raise AccountNotFoundError(account_number_to)

        account_from = self._account_repo.find_by_account_number(session, account_number_from)
        if account_from is None:
            raise AccountNotFoundError(account_number_from)

        account_to = self._account_repo.find_by_account_number(session, account_number_to)
        if account_to is None:
            raise AccountNotFoundError(account_number_to)

        if not account_from.can_withdraw(amount):
            logger.info(
                "Rejected transfer of %s from %s: balance %s",
                amount,
                account_number_from,
                account_from.balance,
            )
            raise BalanceNotEnoughError(account_number_from)

        if self._account_repo.withdraw(session, account_number_from, amount) < 1:
            raise TransferIntegrityError(account_number_from, "withdraw")

        if self._account_repo.deposit(session, account_number_to, amount) < 1:
            raise TransferIntegrityError(account_number_to, "deposit")

        logger.info(
            "Transferred %s from %s to %s",
            amount,
            account_number_from,
            account_number_to,
        )

    def is_exist_account(self, session: Session, account_number: int) -> bool:
        """Check whether an account exists."""
        return self._account_repo.count_by_account_number(session, account_number) > 0

    def drop_account(self, session: Session, account_number: int) -> None:
        """Delete an account."""
        if not self.is_exist_account(session, account_number):
            raise AccountNotFoundError(account_number)
        # A concurrent delete can still win between the existence check and this statement.
        if self._account_repo.delete_by_account_number(session, account_number) == 0:
            raise AccountDeleteError(account_number)
        logger.info("Dropped account %s", account_number)
