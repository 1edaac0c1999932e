"""Domain services for recurring bill schedules."""

from collections.abc import Iterable
from datetime import date, timedelta
from logging import Logger

from finance_tracker.domain.constants import (
    BILLING_CYCLES,
    FALLBACK_BILLING_CYCLE,
    MONTHLY_CYCLE_STEPS,
)
from finance_tracker.domain.models import Bill
from finance_tracker.utils.dates import add_months, clamp_day


def advance_by_cycle(
    current: date,
    billing_cycle: str,
    due_day: int,
    logger: Logger | None = None,
) -> date:
    """Advance a payment date by one billing cycle.

    Monthly-family cycles are anchored to ``due_day`` after the shift, clamped
    to the length of the target month. Unknown cycles shift by one month and
    keep the day produced by the month arithmetic.

    Args:
        current: Payment date to advance.
        billing_cycle: DAILY, WEEKLY, MONTHLY, QUARTERLY or YEARLY.
        due_day: Day of month the monthly-family cycles are anchored to.
        logger: Optional logger used for warnings.

    Returns:
        date: The next payment date, strictly after ``current``.
    """
    if billing_cycle not in BILLING_CYCLES:
        if logger is not None:
            logger.warning(
                f"Unknown billing cycle {billing_cycle!r}; "
                f"treating it as {FALLBACK_BILLING_CYCLE}"
            )
        return add_months(current, MONTHLY_CYCLE_STEPS[FALLBACK_BILLING_CYCLE])

    if billing_cycle == "DAILY":
        return current + timedelta(days=1)
    if billing_cycle == "WEEKLY":
        return current + timedelta(weeks=1)

    advanced = add_months(current, MONTHLY_CYCLE_STEPS[billing_cycle])
    if due_day > 0:
        advanced = clamp_day(advanced, due_day)
    return advanced


def compute_next_payment_date(
    start_date: date,
    billing_cycle: str,
    due_day: int,
    end_date: date | None,
    today: date,
    logger: Logger | None = None,
) -> date | None:
    """Compute the first payment date strictly after ``today``.

    The schedule is always replayed from ``start_date``. As soon as an advance
    passes ``end_date`` the schedule is considered lapsed.

    Args:
        start_date: First payment date of the bill.
        billing_cycle: Recurrence unit of the bill.
        due_day: Day of month for monthly-family cycles.
        end_date: Optional last date a payment may fall on.
        today: Reference date supplied by the caller's clock.
        logger: Optional logger used for warnings.

    Returns:
        date | None: Next payment date, or None once the schedule has ended.
    """
    candidate = start_date
    while candidate <= today:
        candidate = advance_by_cycle(candidate, billing_cycle, due_day, logger)
        if end_date is not None and candidate > end_date:
            return None
    return candidate


def select_upcoming_bills(
    bills: Iterable[Bill],
    today: date,
    days_ahead: int,
) -> list[Bill]:
    """Return active bills due within ``days_ahead`` days, soonest first."""
    horizon = today + timedelta(days=days_ahead)
    upcoming = [
        bill
        for bill in bills
        if bill.is_active
        and bill.next_payment_date is not None
        and today <= bill.next_payment_date <= horizon
    ]
    return sorted(upcoming, key=lambda bill: (bill.next_payment_date, bill.name))


def is_reminder_due(bill: Bill, today: date) -> bool:
    """Return True when the bill's reminder window has opened."""
    if not bill.is_active or bill.next_payment_date is None:
        return False
    reminder_start = bill.next_payment_date - timedelta(days=bill.reminder_days)
    return reminder_start <= today <= bill.next_payment_date


__all__ = [
    "advance_by_cycle",
    "compute_next_payment_date",
    "select_upcoming_bills",
    "is_reminder_due",
]
