"""Domain services for transfer balance arithmetic."""

from decimal import Decimal
from logging import Logger

from finance_tracker.domain.constants import CREDIT_ACCOUNT_TYPES
from finance_tracker.domain.models import Account


def apply_transfer(
    source_balance: Decimal,
    destination_balance: Decimal,
    amount: Decimal,
) -> tuple[Decimal, Decimal]:
    """Return the balances after moving ``amount`` from source to destination."""
    return source_balance - amount, destination_balance + amount


def reverse_transfer(
    source_balance: Decimal,
    destination_balance: Decimal,
    amount: Decimal,
) -> tuple[Decimal, Decimal]:
    """Return the balances after undoing a transfer of ``amount``."""
    return source_balance + amount, destination_balance - amount


def warn_on_overdraft(
    account: Account,
    new_balance: Decimal,
    logger: Logger,
) -> None:
    """Warn when a non-credit account is pushed below zero.

    Overdrafts are accepted; the warning only leaves a trace in the logs.

    Args:
        account: Account whose balance changes.
        new_balance: Balance about to be written.
        logger: Logger used for warnings.
    """
    if account.account_type in CREDIT_ACCOUNT_TYPES:
        return
    if new_balance < 0:
        logger.warning(
            f"Account {account.account_id} ({account.account_type}) "
            f"goes negative: {new_balance}"
        )


__all__ = ["apply_transfer", "reverse_transfer", "warn_on_overdraft"]
