"""Domain models for bills and subscriptions."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from finance_tracker.domain.constants import DEFAULT_REMINDER_DAYS


@dataclass(frozen=True)
class Bill:
    """Recurring bill or subscription.

    Attributes:
        next_payment_date: Derived from the schedule; None once it lapsed.
    """

    bill_id: str
    user_id: str
    name: str
    amount: Decimal
    billing_cycle: str
    due_day: int
    start_date: date
    end_date: date | None = None
    category_id: str | None = None
    is_active: bool = True
    reminder_days: int = DEFAULT_REMINDER_DAYS
    last_payment_date: date | None = None
    next_payment_date: date | None = None
    description: str | None = None
    vendor: str | None = None


__all__ = ["Bill"]
