"""Use case to evaluate budgets against recorded expenses."""

from finance_tracker.application.context import UserContext
from finance_tracker.application.ports.budgets_repository import (
    BudgetsRepositoryPort,
)
from finance_tracker.application.ports.expenses_repository import (
    ExpensesRepositoryPort,
)
from finance_tracker.domain.models import Budget, BudgetAlert, BudgetEvaluation
from finance_tracker.domain.services.budget import (
    build_budget_alerts,
    evaluate_budget,
)
from finance_tracker.infrastructure.logging.logger import get_app_logger


class GetBudgetStatusUseCase:
    """Compute spent amounts and status tiers on every read."""

    def __init__(
        self,
        budgets_repository: BudgetsRepositoryPort,
        expenses_repository: ExpensesRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            budgets_repository: Port providing budget definitions.
            expenses_repository: Port providing expenses by category.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._budgets_repository = budgets_repository
        self._expenses_repository = expenses_repository
        self._logger = logger or get_app_logger()

    def evaluate(self, context: UserContext, budget: Budget) -> BudgetEvaluation:
        """Evaluate a single budget for the user.

        Budgets without a category never aggregate spending, so no expenses
        are fetched for them.
        """
        expenses = []
        if budget.category_id is not None:
            expenses = self._expenses_repository.fetch_expenses_for_category(
                context.user_id,
                budget.category_id,
                budget.start_date,
                budget.end_date,
            )
        return evaluate_budget(budget, expenses)

    def execute(
        self,
        context: UserContext,
        active_only: bool = True,
    ) -> list[BudgetEvaluation]:
        """Evaluate every budget of the user."""
        budgets = self._budgets_repository.fetch_budgets(
            context.user_id,
            active_only=active_only,
        )
        evaluations = [self.evaluate(context, budget) for budget in budgets]
        self._logger.info(f"Evaluated {len(evaluations)} budgets")
        return evaluations

    def alerts(self, context: UserContext) -> list[BudgetAlert]:
        """Return alerts for active budgets at WARNING or above."""
        alerts = build_budget_alerts(self.execute(context))
        for alert in alerts:
            self._logger.info(alert.message)
        return alerts


__all__ = ["GetBudgetStatusUseCase"]
