"""Domain models for budgets and the expenses they track."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from finance_tracker.domain.constants import (
    BUDGET_ALERT_STATUSES,
    DEFAULT_ALERT_THRESHOLD,
)


@dataclass(frozen=True)
class Budget:
    """Spending limit for a category over a date window."""

    budget_id: str
    user_id: str
    name: str
    amount_limit: Decimal
    period: str
    start_date: date
    end_date: date
    category_id: str | None = None
    alert_threshold: int = DEFAULT_ALERT_THRESHOLD
    is_active: bool = True


@dataclass(frozen=True)
class Expense:
    """Single recorded expense."""

    expense_id: str
    user_id: str
    category_id: str | None
    amount: Decimal | None
    expense_date: date | None
    vendor: str | None = None
    description: str | None = None


@dataclass(frozen=True)
class BudgetEvaluation:
    """Consumption figures computed for a budget on read.

    Attributes:
        spent: Sum of in-window expenses for the budget's category.
        remaining: Limit minus spent; negative once exceeded.
        percentage_used: Spent as a percentage of the limit (2 digits).
        status: NORMAL, WARNING, DANGER or EXCEEDED.
    """

    budget: Budget
    spent: Decimal
    remaining: Decimal
    percentage_used: Decimal
    status: str

    @property
    def needs_attention(self) -> bool:
        """Return True when the status should be surfaced as an alert."""
        return self.status in BUDGET_ALERT_STATUSES


@dataclass(frozen=True)
class BudgetAlert:
    """User-facing alert derived from a budget evaluation."""

    budget_id: str
    budget_name: str
    status: str
    percentage_used: Decimal
    message: str


__all__ = ["Budget", "Expense", "BudgetEvaluation", "BudgetAlert"]
