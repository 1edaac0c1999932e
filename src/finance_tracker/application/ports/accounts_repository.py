"""Port for reading and editing accounts."""

from decimal import Decimal
from typing import Protocol

from finance_tracker.domain.models import Account


class AccountsRepositoryPort(Protocol):
    """Port exposing account reads and direct balance edits."""

    def fetch_account(self, account_id: str) -> Account | None:
        """Return the account or None when it does not exist."""

    def fetch_accounts(
        self,
        user_id: str,
        active_only: bool = False,
    ) -> list[Account]:
        """Return the user's accounts ordered by name."""

    def set_account_balance(self, account_id: str, new_balance: Decimal) -> bool:
        """Overwrite a balance outside of any transfer."""


__all__ = ["AccountsRepositoryPort"]
