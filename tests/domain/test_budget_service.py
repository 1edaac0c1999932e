"""Tests for budget evaluation services."""

from datetime import date
from decimal import Decimal

import pytest

from finance_tracker.domain.models import Budget, BudgetEvaluation, Expense
from finance_tracker.domain.services.budget import (
    build_budget_alerts,
    compute_percentage_used,
    compute_spent,
    evaluate_budget,
    resolve_budget_status,
)


def _budget(**overrides) -> Budget:
    values = {
        "budget_id": "budget-1",
        "user_id": "user-1",
        "name": "Groceries",
        "amount_limit": Decimal("100"),
        "period": "MONTHLY",
        "start_date": date(2024, 3, 1),
        "end_date": date(2024, 3, 31),
        "category_id": "food",
        "alert_threshold": 80,
    }
    values.update(overrides)
    return Budget(**values)


def _expense(amount, expense_date, category_id="food", expense_id="e") -> Expense:
    return Expense(
        expense_id=expense_id,
        user_id="user-1",
        category_id=category_id,
        amount=Decimal(amount) if amount is not None else None,
        expense_date=expense_date,
    )


@pytest.mark.parametrize(
    ("spent", "expected"),
    [
        ("79.99", "NORMAL"),
        ("80.00", "WARNING"),
        ("89.99", "WARNING"),
        ("90.00", "DANGER"),
        ("99.99", "DANGER"),
        ("100.00", "EXCEEDED"),
        ("150.00", "EXCEEDED"),
    ],
)
def test_status_boundaries(spent: str, expected: str) -> None:
    """Statuses should switch exactly at the threshold, 90 and 100."""
    evaluation = evaluate_budget(
        _budget(),
        [_expense(spent, date(2024, 3, 10))],
    )

    assert evaluation.status == expected


@pytest.mark.parametrize(
    ("spent", "percentage", "expected"),
    [
        ("239.98", "79.99", "NORMAL"),
        ("239.99", "80.00", "WARNING"),
    ],
)
def test_status_follows_rounded_percentage_on_uneven_limit(
    spent: str,
    percentage: str,
    expected: str,
) -> None:
    """79.9967% rounds to 80.00 and is already a warning."""
    evaluation = evaluate_budget(
        _budget(amount_limit=Decimal("300")),
        [_expense(spent, date(2024, 3, 10))],
    )

    assert evaluation.percentage_used == Decimal(percentage)
    assert str(evaluation.percentage_used) == percentage
    assert evaluation.status == expected


def test_custom_threshold_moves_only_warning_floor() -> None:
    """A lower alert threshold should not move the fixed tiers."""
    assert resolve_budget_status(Decimal("50.00"), 50) == "WARNING"
    assert resolve_budget_status(Decimal("49.99"), 50) == "NORMAL"
    assert resolve_budget_status(Decimal("90.00"), 50) == "DANGER"


def test_spent_includes_window_bounds_and_skips_others() -> None:
    """Expenses on either window edge count; other categories never do."""
    expenses = [
        _expense("10", date(2024, 3, 1)),
        _expense("20", date(2024, 3, 31)),
        _expense("40", date(2024, 2, 29)),
        _expense("80", date(2024, 4, 1)),
        _expense("160", date(2024, 3, 15), category_id="travel"),
        _expense(None, date(2024, 3, 15)),
        _expense("5", None),
    ]

    assert compute_spent(_budget(), expenses) == Decimal("30")


def test_category_isolation() -> None:
    """A budget should aggregate only its own category."""
    expenses = [
        _expense("25", date(2024, 3, 5), category_id="food"),
        _expense("500", date(2024, 3, 5), category_id="rent"),
    ]

    evaluation = evaluate_budget(_budget(), expenses)

    assert evaluation.spent == Decimal("25")
    assert evaluation.status == "NORMAL"


def test_budget_without_category_spends_nothing() -> None:
    """A budget without category should report zero spending."""
    evaluation = evaluate_budget(
        _budget(category_id=None),
        [_expense("60", date(2024, 3, 5))],
    )

    assert evaluation.spent == Decimal("0")
    assert evaluation.remaining == Decimal("100")
    assert evaluation.status == "NORMAL"


def test_evaluation_reports_remaining_and_percentage() -> None:
    """Remaining may go negative once the budget is exceeded."""
    evaluation = evaluate_budget(
        _budget(amount_limit=Decimal("300")),
        [_expense("400", date(2024, 3, 5))],
    )

    assert evaluation.remaining == Decimal("-100")
    assert evaluation.percentage_used == Decimal("133.33")
    assert evaluation.needs_attention is True


def test_percentage_handles_non_positive_limit() -> None:
    """A zero limit should not divide by zero."""
    assert compute_percentage_used(Decimal("10"), Decimal("0")) == Decimal("0.00")


def test_alert_messages_per_status() -> None:
    """Alerts should be produced for WARNING, DANGER and EXCEEDED only."""
    evaluations = [
        BudgetEvaluation(
            budget=_budget(budget_id=str(index), name=name),
            spent=Decimal("0"),
            remaining=Decimal("0"),
            percentage_used=Decimal(percentage),
            status=status,
        )
        for index, (name, percentage, status) in enumerate(
            [
                ("Food", "85.00", "WARNING"),
                ("Fuel", "92.50", "DANGER"),
                ("Fun", "120.00", "EXCEEDED"),
                ("Home", "10.00", "NORMAL"),
            ]
        )
    ]

    alerts = build_budget_alerts(evaluations)

    assert [alert.message for alert in alerts] == [
        "Budget 'Food' reached 85.0% threshold",
        "Budget 'Fuel' is at 92.5%!",
        "Budget 'Fun' has been exceeded!",
    ]
    assert [alert.budget_id for alert in alerts] == ["0", "1", "2"]
