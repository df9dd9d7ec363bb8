"""Account domain model."""

from dataclasses import dataclass


@dataclass
class Account:
    """
    Snapshot of one row of the accounts table.

    Balances are whole numbers in the smallest currency unit. The snapshot is
    never cached; services re-read it whenever they need a current balance.
    """

    account_number: int
    name: str
    balance: int = 0

    def can_withdraw(self, amount: int) -> bool:
        """Return True if ``amount`` is positive and covered by the balance."""
        return 0 < amount <= self.balance
