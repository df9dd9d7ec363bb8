"""Account repository protocol."""

from typing import Protocol, Optional

from sqlalchemy.orm import Session

from minibank.domain.models import Account


class AccountRepository(Protocol):
    """
    Interface for account data access.

    Every method runs on the session it is handed and never commits; the
    caller's transaction boundary decides the outcome. Mutating methods return
    the number of rows the statement touched.
    """

    def find_by_account_number(self, session: Session, account_number: int) -> Optional[Account]:
        """Retrieve an account, or None if no row matches."""
        ...

    def save(self, session: Session, account: Account) -> int:
        """Insert a new account row."""
        ...

    def count_by_account_number(self, session: Session, account_number: int) -> int:
        """Count rows with the given account number (0 or 1)."""
        ...

    def deposit(self, session: Session, account_number: int, amount: int) -> int:
        """Increase the balance in a single statement."""
        ...

    def withdraw(self, session: Session, account_number: int, amount: int) -> int:
        """Decrease the balance in a single statement."""
        ...

    def delete_by_account_number(self, session: Session, account_number: int) -> int:
        """Delete an account row."""
        ...
