"""Tests for the GetBudgetStatusUseCase."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

from finance_tracker.application.context import UserContext
from finance_tracker.application.use_cases.get_budget_status import (
    GetBudgetStatusUseCase,
)
from finance_tracker.domain.models import Budget, Expense

CONTEXT = UserContext(user_id="user-1")


def _budget(budget_id: str, category_id: str | None) -> Budget:
    return Budget(
        budget_id=budget_id,
        user_id="user-1",
        name=budget_id.title(),
        amount_limit=Decimal("200"),
        period="MONTHLY",
        start_date=date(2024, 3, 1),
        end_date=date(2024, 3, 31),
        category_id=category_id,
    )


def _expense(amount: str) -> Expense:
    return Expense(
        expense_id=f"e-{amount}",
        user_id="user-1",
        category_id="food",
        amount=Decimal(amount),
        expense_date=date(2024, 3, 15),
    )


def test_evaluate_fetches_category_expenses() -> None:
    """evaluate should query expenses for the budget window."""
    budgets = MagicMock()
    expenses = MagicMock()
    expenses.fetch_expenses_for_category.return_value = [
        _expense("150"),
        _expense("35"),
    ]
    use_case = GetBudgetStatusUseCase(budgets, expenses, logger=MagicMock())

    evaluation = use_case.evaluate(CONTEXT, _budget("food", "food"))

    expenses.fetch_expenses_for_category.assert_called_once_with(
        "user-1",
        "food",
        date(2024, 3, 1),
        date(2024, 3, 31),
    )
    assert evaluation.spent == Decimal("185")
    assert evaluation.percentage_used == Decimal("92.50")
    assert evaluation.status == "DANGER"


def test_evaluate_skips_query_without_category() -> None:
    """Budgets without category should not hit the expenses port."""
    expenses = MagicMock()
    use_case = GetBudgetStatusUseCase(MagicMock(), expenses, logger=MagicMock())

    evaluation = use_case.evaluate(CONTEXT, _budget("misc", None))

    expenses.fetch_expenses_for_category.assert_not_called()
    assert evaluation.spent == Decimal("0")


def test_execute_and_alerts() -> None:
    """execute evaluates active budgets; alerts keeps the ones at risk."""
    budgets = MagicMock()
    budgets.fetch_budgets.return_value = [
        _budget("food", "food"),
        _budget("misc", None),
    ]
    expenses = MagicMock()
    expenses.fetch_expenses_for_category.return_value = [_expense("210")]
    logger = MagicMock()
    use_case = GetBudgetStatusUseCase(budgets, expenses, logger=logger)

    evaluations = use_case.execute(CONTEXT)
    alerts = use_case.alerts(CONTEXT)

    budgets.fetch_budgets.assert_called_with("user-1", active_only=True)
    assert [evaluation.status for evaluation in evaluations] == [
        "EXCEEDED",
        "NORMAL",
    ]
    assert [alert.message for alert in alerts] == [
        "Budget 'Food' has been exceeded!"
    ]
    logger.info.assert_any_call("Budget 'Food' has been exceeded!")
