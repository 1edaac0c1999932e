"""Domain models for accounts and transfers between them."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from finance_tracker.domain.constants import DEFAULT_CURRENCY


@dataclass(frozen=True)
class Account:
    """Money-holding account; the balance may be negative or unknown."""

    account_id: str
    user_id: str
    name: str
    account_type: str
    balance: Decimal | None
    currency: str = DEFAULT_CURRENCY
    is_active: bool = True
    institution_name: str | None = None


@dataclass(frozen=True)
class Transfer:
    """Movement of money from one account to another."""

    transfer_id: str
    user_id: str
    from_account_id: str
    to_account_id: str
    amount: Decimal
    transfer_date: date
    transfer_type: str = "INTERNAL"
    description: str | None = None


@dataclass(frozen=True)
class TransferOutcome:
    """Result of a transfer ledger operation.

    Attributes:
        success: True when every write of the operation was committed.
        transfer_id: Transfer the operation targeted.
        source_balance: Source balance after the operation, when committed.
        destination_balance: Destination balance after the operation.
        reason: Failure description when ``success`` is False.
    """

    success: bool
    transfer_id: str
    source_balance: Decimal | None = None
    destination_balance: Decimal | None = None
    reason: str | None = None


__all__ = ["Account", "Transfer", "TransferOutcome"]
