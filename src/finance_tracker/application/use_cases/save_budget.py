"""Use case to create, update and delete budgets."""

from dataclasses import dataclass, replace

from finance_tracker.application.context import UserContext
from finance_tracker.application.ports.budgets_repository import (
    BudgetsRepositoryPort,
)
from finance_tracker.domain.models import Budget
from finance_tracker.domain.services.validation import validate_budget
from finance_tracker.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class SaveBudgetResult:
    """Result of a budget write.

    Attributes:
        saved: Whether the repository accepted the write.
        budget: Budget as it was sent to the repository.
    """

    saved: bool
    budget: Budget


class SaveBudgetUseCase:
    """Validate budgets and persist them for the calling user."""

    def __init__(
        self,
        budgets_repository: BudgetsRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            budgets_repository: Port storing budgets.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._budgets_repository = budgets_repository
        self._logger = logger or get_app_logger()

    def create(self, context: UserContext, budget: Budget) -> SaveBudgetResult:
        """Validate and insert a new budget.

        Raises:
            ValidationError: If the budget is malformed.
        """
        owned = self._prepare(context, budget)
        saved = self._budgets_repository.insert_budget(owned)
        self._log_write("created", owned, saved)
        return SaveBudgetResult(saved=saved, budget=owned)

    def update(self, context: UserContext, budget: Budget) -> SaveBudgetResult:
        """Validate and rewrite an existing budget.

        Raises:
            ValidationError: If the budget is malformed.
        """
        owned = self._prepare(context, budget)
        saved = self._budgets_repository.update_budget(owned)
        self._log_write("updated", owned, saved)
        return SaveBudgetResult(saved=saved, budget=owned)

    def delete(self, context: UserContext, budget_id: str) -> bool:
        """Remove a budget owned by the user."""
        budget = self._budgets_repository.fetch_budget(budget_id)
        if budget is None or budget.user_id != context.user_id:
            self._logger.warning(f"Budget not found for deletion: {budget_id}")
            return False
        deleted = self._budgets_repository.delete_budget(budget_id)
        if deleted:
            self._logger.info(f"Budget deleted: {budget_id}")
        else:
            self._logger.error(f"Budget not deleted: {budget_id}")
        return deleted

    def _prepare(self, context: UserContext, budget: Budget) -> Budget:
        validate_budget(budget)
        return replace(budget, user_id=context.user_id)

    def _log_write(self, action: str, budget: Budget, saved: bool) -> None:
        if saved:
            self._logger.info(
                f"Budget {action}: {budget.budget_id} "
                f"({budget.name}, limit {budget.amount_limit})"
            )
        else:
            self._logger.error(f"Budget not {action}: {budget.budget_id}")


__all__ = ["SaveBudgetUseCase", "SaveBudgetResult"]
