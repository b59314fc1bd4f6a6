class LedgerError(Exception):
    """Base class for business-rule violations raised by the ledger."""

    message = "Ledger error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)


class AccountNotFoundError(LedgerError):
    """Raised when an account id is missing from the store."""

    message = "Account not found"


class AccountAlreadyExistsError(LedgerError):
    """Raised when creating an account whose id is already taken."""

    message = "Account already exists"


class DepositLimitExceededError(LedgerError):
    """Raised when a single deposit is above the per-call cap."""

    message = "Deposit amount exceeds the limit"


class InsufficientFundsError(LedgerError):
    """Raised when a withdrawal breaks the ratio cap or the minimum reserve."""

    message = "Insufficient funds"


class InvalidAmountError(LedgerError):
    """Raised when an amount is not a finite, strictly positive number."""

    message = "Amount must be a positive number"
