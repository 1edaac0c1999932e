"""Domain services package."""

from .budget import (
    build_budget_alerts,
    compute_percentage_used,
    compute_spent,
    evaluate_budget,
    resolve_budget_status,
)
from .investment import investment_metrics, summarize_portfolio
from .schedule import (
    advance_by_cycle,
    compute_next_payment_date,
    is_reminder_due,
    select_upcoming_bills,
)
from .transfer import apply_transfer, reverse_transfer, warn_on_overdraft
from .validation import (
    validate_bill,
    validate_budget,
    validate_investment,
    validate_transfer,
)

__all__ = [
    "build_budget_alerts",
    "compute_percentage_used",
    "compute_spent",
    "evaluate_budget",
    "resolve_budget_status",
    "investment_metrics",
    "summarize_portfolio",
    "advance_by_cycle",
    "compute_next_payment_date",
    "is_reminder_due",
    "select_upcoming_bills",
    "apply_transfer",
    "reverse_transfer",
    "warn_on_overdraft",
    "validate_bill",
    "validate_budget",
    "validate_investment",
    "validate_transfer",
]
