"""Domain services for budget consumption."""

from collections.abc import Iterable
from datetime import timedelta
from decimal import Decimal

from finance_tracker.domain.constants import (
    BUDGET_STATUS_DANGER,
    BUDGET_STATUS_EXCEEDED,
    BUDGET_STATUS_NORMAL,
    BUDGET_STATUS_WARNING,
    DANGER_THRESHOLD,
    EXCEEDED_THRESHOLD,
)
from finance_tracker.domain.models import (
    Budget,
    BudgetAlert,
    BudgetEvaluation,
    Expense,
)
from finance_tracker.utils.decimal_utils import round_half_up

HUNDRED = Decimal("100")


def compute_spent(budget: Budget, expenses: Iterable[Expense]) -> Decimal:
    """Sum the budget category's expenses dated inside the budget window.

    Args:
        budget: Budget providing the category and the inclusive window.
        expenses: Candidate expenses; other categories are ignored.

    Returns:
        Decimal: Amount spent, zero when the budget has no category.
    """
    if budget.category_id is None:
        return Decimal("0")
    after = budget.start_date - timedelta(days=1)
    before = budget.end_date + timedelta(days=1)
    spent = Decimal("0")
    for expense in expenses:
        if expense is None or expense.amount is None:
            continue
        if expense.expense_date is None:
            continue
        if expense.category_id != budget.category_id:
            continue
        if after < expense.expense_date < before:
            spent += expense.amount
    return spent


def compute_percentage_used(spent: Decimal, amount_limit: Decimal) -> Decimal:
    """Return ``spent`` as a percentage of ``amount_limit``, two digits."""
    if amount_limit <= 0:
        return Decimal("0.00")
    return round_half_up(spent / amount_limit * HUNDRED)


def resolve_budget_status(
    percentage_used: Decimal,
    alert_threshold: int,
) -> str:
    """Map a consumption percentage to its status tier.

    The 90 and 100 tiers are fixed; ``alert_threshold`` only moves the
    WARNING floor.
    """
    if percentage_used >= EXCEEDED_THRESHOLD:
        return BUDGET_STATUS_EXCEEDED
    if percentage_used >= DANGER_THRESHOLD:
        return BUDGET_STATUS_DANGER
    if percentage_used >= Decimal(alert_threshold):
        return BUDGET_STATUS_WARNING
    return BUDGET_STATUS_NORMAL


def evaluate_budget(
    budget: Budget,
    expenses: Iterable[Expense],
) -> BudgetEvaluation:
    """Compute spent, remaining, percentage used and status for a budget.

    Args:
        budget: Budget to evaluate.
        expenses: Expenses fetched for the budget's category and window.

    Returns:
        BudgetEvaluation: Figures for presentation layers.
    """
    spent = compute_spent(budget, expenses)
    percentage_used = compute_percentage_used(spent, budget.amount_limit)
    return BudgetEvaluation(
        budget=budget,
        spent=spent,
        remaining=budget.amount_limit - spent,
        percentage_used=percentage_used,
        status=resolve_budget_status(percentage_used, budget.alert_threshold),
    )


def build_budget_alerts(
    evaluations: Iterable[BudgetEvaluation],
) -> list[BudgetAlert]:
    """Turn evaluations needing attention into alert messages."""
    alerts = []
    for evaluation in evaluations:
        if not evaluation.needs_attention:
            continue
        name = evaluation.budget.name
        percentage = evaluation.percentage_used
        if evaluation.status == BUDGET_STATUS_EXCEEDED:
            message = f"Budget '{name}' has been exceeded!"
        elif evaluation.status == BUDGET_STATUS_DANGER:
            message = f"Budget '{name}' is at {percentage:.1f}%!"
        else:
            message = f"Budget '{name}' reached {percentage:.1f}% threshold"
        alerts.append(
            BudgetAlert(
                budget_id=evaluation.budget.budget_id,
                budget_name=name,
                status=evaluation.status,
                percentage_used=percentage,
                message=message,
            )
        )
    return alerts


__all__ = [
    "compute_spent",
    "compute_percentage_used",
    "resolve_budget_status",
    "evaluate_budget",
    "build_budget_alerts",
]
