class NotFoundError(Exception):
    """Raised when a requested ledger row does not exist."""

class AccountNotFoundError(NotFoundError):
    """Raised when an account id is missing from the store."""

class TransferNotFoundError(NotFoundError):
    """Raised when a transfer id is missing from the store."""

class TransferValidationError(ValueError):
    """Raised for transfer input rejected before any transaction is opened."""

class CurrencyMismatchError(TransferValidationError):
    """Raised when the two accounts of a transfer hold different currencies."""

class TransactionRollbackError(Exception):
    """Raised when a failed unit of work could not be rolled back either.

    Both causes are kept: ``tx_error`` is the failure of the unit of work and
    ``rollback_error`` the failure raised by the rollback itself.
    """

    def __init__(self, tx_error: BaseException, rollback_error: BaseException) -> None:
        super().__init__(f"tx err: {tx_error}, rollback err: {rollback_error}")
        self.tx_error = tx_error
        self.rollback_error = rollback_error
