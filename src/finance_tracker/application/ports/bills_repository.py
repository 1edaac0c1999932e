"""Port for bill persistence."""

from typing import Protocol

from finance_tracker.domain.models import Bill


class BillsRepositoryPort(Protocol):
    """Port exposing bill reads and writes."""

    def fetch_bill(self, bill_id: str) -> Bill | None:
        """Return the bill or None."""

    def fetch_bills(self, user_id: str, active_only: bool = False) -> list[Bill]:
        """Return the user's bills ordered by next payment date."""

    def insert_bill(self, bill: Bill) -> bool:
        """Insert a new bill."""

    def update_bill(self, bill: Bill) -> bool:
        """Rewrite an existing bill."""

    def deactivate_bill(self, bill_id: str) -> bool:
        """Mark a bill inactive (cancelled subscription)."""

    def delete_bill(self, bill_id: str) -> bool:
        """Remove a bill."""


__all__ = ["BillsRepositoryPort"]
