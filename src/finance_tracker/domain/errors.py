"""Error taxonomy for the finance tracker core."""


class FinanceTrackerError(Exception):
    """Base class for errors raised by the finance tracker core."""


class ValidationError(FinanceTrackerError):
    """Raised when input is malformed or out of range."""


class NotFoundError(FinanceTrackerError):
    """Raised when a referenced record does not exist."""


class TransactionError(FinanceTrackerError):
    """Raised when an atomic multi-write operation failed and was rolled back."""


__all__ = [
    "FinanceTrackerError",
    "ValidationError",
    "NotFoundError",
    "TransactionError",
]
