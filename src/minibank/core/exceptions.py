"""Application-level exceptions.

Two families hang off ``AppError``:

* ``BusinessError`` - expected outcomes a caller branches on (missing account,
  duplicate account, insufficient balance). Nothing has been written when one
  of these is raised, but the caller still owns the transaction.
* ``FatalError`` - storage failures and integrity violations. These are never
  handled inside the service; the transaction boundary rolls back.
"""


class AppError(Exception):
    """Base exception for application errors."""

    def __init__(self, message: str, code: str = "APP_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)


class BusinessError(AppError):
    """Base class for business rule violations."""


class FatalError(AppError):
    """Base class for errors that must abort the current transaction."""


class AccountNotFoundError(BusinessError):
    """Raised when an operation targets an account that does not exist."""

    def __init__(self, account_number: int):
        self.account_number = account_number
        super().__init__(f"Account not found: {account_number}", code="ACCOUNT_NOT_FOUND")


class AccountAlreadyExistsError(BusinessError):
    """Raised when creating an account whose number is already taken."""

    def __init__(self, account_number: int):
        self.account_number = account_number
        super().__init__(
            f"Account already exists: {account_number}",
            code="ACCOUNT_ALREADY_EXISTS",
        )


class BalanceNotEnoughError(BusinessError):
    """Raised for insufficient funds and for non-positive withdrawal amounts."""

    def __init__(self, account_number: int):
        self.account_number = account_number
        super().__init__(
            f"Balance not enough in account: {account_number}",
            code="BALANCE_NOT_ENOUGH",
        )


class StorageError(FatalError):
    """Raised when a statement cannot be prepared or executed."""

    def __init__(self, message: str):
        super().__init__(message, code="STORAGE_ERROR")


class TransferIntegrityError(FatalError):
    """Raised when a transfer step touches no rows after passing its checks."""

    def __init__(self, account_number: int, step: str):
        self.account_number = account_number
        self.step = step
        super().__init__(
            f"Transfer failed - {step}: {account_number}",
            code="TRANSFER_INTEGRITY",
        )


class AccountDeleteError(FatalError):
    """Raised when deleting a confirmed account removes no rows."""

    def __init__(self, account_number: int):
        self.account_number = account_number
        super().__init__(
            f"Failed to delete account: {account_number}",
            code="DELETE_FAILED",
        )
