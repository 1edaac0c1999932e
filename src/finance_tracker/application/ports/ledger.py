"""Ports for atomic transfer ledger writes."""

from contextlib import AbstractContextManager
from decimal import Decimal
from typing import Protocol

from finance_tracker.domain.models import Account, Transfer


class LedgerSessionPort(Protocol):
    """Reads and writes that share a single transaction."""

    def get_account(self, account_id: str) -> Account | None:
        """Return the account, locked for the transaction where supported."""

    def set_account_balance(self, account_id: str, new_balance: Decimal) -> bool:
        """Write a new balance; return False when no row was updated."""

    def get_transfer(self, transfer_id: str) -> Transfer | None:
        """Return the stored transfer or None."""

    def insert_transfer(self, transfer: Transfer) -> bool:
        """Insert the transfer record."""

    def update_transfer(self, transfer: Transfer) -> bool:
        """Rewrite the stored transfer record."""

    def delete_transfer(self, transfer_id: str) -> bool:
        """Remove the transfer record."""


class LedgerStorePort(Protocol):
    """Port opening all-or-nothing ledger transactions.

    Leaving the context normally commits every write; an exception rolls
    all of them back before propagating.
    """

    def transaction(self) -> AbstractContextManager[LedgerSessionPort]:
        """Open a transaction scope yielding a ledger session."""


__all__ = ["LedgerSessionPort", "LedgerStorePort"]
