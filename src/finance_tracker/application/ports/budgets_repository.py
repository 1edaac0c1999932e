"""Port for budget persistence."""

from typing import Protocol

from finance_tracker.domain.models import Budget


class BudgetsRepositoryPort(Protocol):
    """Port exposing budget reads and writes."""

    def fetch_budget(self, budget_id: str) -> Budget | None:
        """Return the budget or None."""

    def fetch_budgets(
        self,
        user_id: str,
        active_only: bool = False,
    ) -> list[Budget]:
        """Return the user's budgets, most recent window first."""

    def insert_budget(self, budget: Budget) -> bool:
        """Insert a new budget."""

    def update_budget(self, budget: Budget) -> bool:
        """Rewrite an existing budget."""

    def delete_budget(self, budget_id: str) -> bool:
        """Remove a budget."""


__all__ = ["BudgetsRepositoryPort"]
