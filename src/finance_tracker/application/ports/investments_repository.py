"""Port for investment persistence."""

from typing import Protocol

from finance_tracker.domain.models import Investment


class InvestmentsRepositoryPort(Protocol):
    """Port exposing a user's holdings."""

    def fetch_investment(self, investment_id: str) -> Investment | None:
        """Return the investment or None."""

    def fetch_investments(self, user_id: str) -> list[Investment]:
        """Return the user's investments ordered by name."""

    def insert_investment(self, investment: Investment) -> bool:
        """Insert a new holding."""

    def update_investment(self, investment: Investment) -> bool:
        """Rewrite an existing holding."""

    def delete_investment(self, investment_id: str) -> bool:
        """Remove a holding."""


__all__ = ["InvestmentsRepositoryPort"]
