"""Port for reading expenses."""

from datetime import date
from typing import Protocol

from finance_tracker.domain.models import Expense


class ExpensesRepositoryPort(Protocol):
    """Port exposing expense reads for budget evaluation."""

    def fetch_expenses_for_category(
        self,
        user_id: str,
        category_id: str,
        start_date: date,
        end_date: date,
    ) -> list[Expense]:
        """Return the user's expenses of a category within the dates."""


__all__ = ["ExpensesRepositoryPort"]
