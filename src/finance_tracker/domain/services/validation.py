"""Domain validation helpers.

These checks run before the computation core; the core itself assumes
validated input.
"""

from decimal import Decimal

from finance_tracker.domain.constants import (
    BUDGET_PERIODS,
    INVESTMENT_TYPES,
    MAX_DUE_DAY,
    MIN_DUE_DAY,
    TRANSFER_TYPES,
)
from finance_tracker.domain.errors import ValidationError
from finance_tracker.domain.models import Bill, Budget, Investment, Transfer


def _require_positive(value: Decimal | None, field: str) -> None:
    if value is None or value <= 0:
        raise ValidationError(f"{field} must be greater than zero, got {value}")


def validate_bill(bill: Bill) -> None:
    """Validate a bill before its schedule is computed.

    Raises:
        ValidationError: If amount, due day, dates or reminder days are invalid.
    """
    _require_positive(bill.amount, "amount")
    if not MIN_DUE_DAY <= bill.due_day <= MAX_DUE_DAY:
        raise ValidationError(
            f"due_day must be between {MIN_DUE_DAY} and {MAX_DUE_DAY}, "
            f"got {bill.due_day}"
        )
    if bill.start_date is None:
        raise ValidationError("start_date is required")
    if bill.end_date is not None and bill.end_date < bill.start_date:
        raise ValidationError("end_date must not be before start_date")
    if bill.reminder_days < 0:
        raise ValidationError("reminder_days must not be negative")


def validate_budget(budget: Budget) -> None:
    """Validate a budget definition.

    Raises:
        ValidationError: If limit, period, window or threshold are invalid.
    """
    _require_positive(budget.amount_limit, "amount_limit")
    if budget.period not in BUDGET_PERIODS:
        raise ValidationError(f"Unsupported budget period: {budget.period}")
    if budget.start_date is None or budget.end_date is None:
        raise ValidationError("start_date and end_date are required")
    if budget.end_date < budget.start_date:
        raise ValidationError("end_date must not be before start_date")
    if not 0 <= budget.alert_threshold <= 100:
        raise ValidationError("alert_threshold must be between 0 and 100")


def validate_transfer(transfer: Transfer) -> None:
    """Validate a transfer before it touches account balances.

    Raises:
        ValidationError: If amount, accounts, date or type are invalid.
    """
    _require_positive(transfer.amount, "amount")
    if not transfer.from_account_id or not transfer.to_account_id:
        raise ValidationError("Both source and destination accounts are required")
    if transfer.from_account_id == transfer.to_account_id:
        raise ValidationError("Source and destination accounts must differ")
    if transfer.transfer_date is None:
        raise ValidationError("transfer_date is required")
    if transfer.transfer_type not in TRANSFER_TYPES:
        raise ValidationError(
            f"Unsupported transfer type: {transfer.transfer_type}"
        )


def validate_investment(investment: Investment) -> None:
    """Validate an investment record.

    Raises:
        ValidationError: If the type is unknown or a figure is negative.
    """
    if investment.investment_type not in INVESTMENT_TYPES:
        raise ValidationError(
            f"Unsupported investment type: {investment.investment_type}"
        )
    for field in ("quantity", "purchase_price", "current_price"):
        value = getattr(investment, field)
        if value is not None and value < 0:
            raise ValidationError(f"{field} must not be negative")


__all__ = [
    "validate_bill",
    "validate_budget",
    "validate_transfer",
    "validate_investment",
]
