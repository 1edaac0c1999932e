"""Use case applying transfers to account balances atomically.

Each operation runs inside one ledger transaction: the transfer record and
both balance writes are committed together or not at all.

* create: insert the record, then move the amount from source to destination.
* update: reverse the stored transfer on its own accounts, rewrite the
  record, then apply the new transfer on its accounts.
* delete: reverse the stored transfer, then remove the record.
"""

from dataclasses import replace
from decimal import Decimal
from typing import Callable

from finance_tracker.application.context import UserContext
from finance_tracker.application.ports.ledger import (
    LedgerSessionPort,
    LedgerStorePort,
)
from finance_tracker.domain.errors import NotFoundError, TransactionError
from finance_tracker.domain.models import Transfer, TransferOutcome
from finance_tracker.domain.services.transfer import (
    apply_transfer,
    reverse_transfer,
    warn_on_overdraft,
)
from finance_tracker.domain.services.validation import validate_transfer
from finance_tracker.infrastructure.logging.logger import get_app_logger

BalanceMovement = Callable[[Decimal, Decimal, Decimal], tuple[Decimal, Decimal]]
LedgerOperation = Callable[[LedgerSessionPort], tuple[Decimal, Decimal]]


class TransferLedgerUseCase:
    """Create, update and delete transfers together with their balance effects."""

    def __init__(self, ledger_store: LedgerStorePort, logger=None) -> None:
        """Initialize the use case.

        Args:
            ledger_store: Port opening all-or-nothing ledger transactions.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._ledger_store = ledger_store
        self._logger = logger or get_app_logger()

    def create(self, context: UserContext, transfer: Transfer) -> TransferOutcome:
        """Record a transfer and move its amount between the two accounts.

        Raises:
            ValidationError: If the transfer is malformed.
        """
        validate_transfer(transfer)
        owned = replace(transfer, user_id=context.user_id)

        def operation(session: LedgerSessionPort) -> tuple[Decimal, Decimal]:
            if not session.insert_transfer(owned):
                raise TransactionError(
                    f"Transfer record not inserted: {owned.transfer_id}"
                )
            return self._move(session, owned, apply_transfer)

        return self._run("created", owned.transfer_id, operation)

    def update(self, context: UserContext, transfer: Transfer) -> TransferOutcome:
        """Replace a stored transfer, reversing its old effect first.

        Raises:
            ValidationError: If the new transfer is malformed.
        """
        validate_transfer(transfer)
        owned = replace(transfer, user_id=context.user_id)

        def operation(session: LedgerSessionPort) -> tuple[Decimal, Decimal]:
            previous = self._load(session, context, owned.transfer_id)
            self._move(session, previous, reverse_transfer)
            if not session.update_transfer(owned):
                raise TransactionError(
                    f"Transfer record not updated: {owned.transfer_id}"
                )
            return self._move(session, owned, apply_transfer)

        return self._run("updated", owned.transfer_id, operation)

    def delete(self, context: UserContext, transfer_id: str) -> TransferOutcome:
        """Reverse a stored transfer and remove its record."""

        def operation(session: LedgerSessionPort) -> tuple[Decimal, Decimal]:
            transfer = self._load(session, context, transfer_id)
            balances = self._move(session, transfer, reverse_transfer)
            if not session.delete_transfer(transfer_id):
                raise TransactionError(
                    f"Transfer record not deleted: {transfer_id}"
                )
            return balances

        return self._run("deleted", transfer_id, operation)

    def _run(
        self,
        action: str,
        transfer_id: str,
        operation: LedgerOperation,
    ) -> TransferOutcome:
        try:
            with self._ledger_store.transaction() as session:
                source_balance, destination_balance = operation(session)
        except (NotFoundError, TransactionError) as exc:
            self._logger.error(f"Transfer not {action}: {transfer_id}: {exc}")
            return TransferOutcome(
                success=False,
                transfer_id=transfer_id,
                reason=str(exc),
            )

        self._logger.info(f"Transfer {action}: {transfer_id}")
        return TransferOutcome(
            success=True,
            transfer_id=transfer_id,
            source_balance=source_balance,
            destination_balance=destination_balance,
        )

    @staticmethod
    def _load(
        session: LedgerSessionPort,
        context: UserContext,
        transfer_id: str,
    ) -> Transfer:
        transfer = session.get_transfer(transfer_id)
        if transfer is None or transfer.user_id != context.user_id:
            raise NotFoundError(f"Transfer not found: {transfer_id}")
        return transfer

    def _move(
        self,
        session: LedgerSessionPort,
        transfer: Transfer,
        movement: BalanceMovement,
    ) -> tuple[Decimal, Decimal]:
        source = session.get_account(transfer.from_account_id)
        destination = session.get_account(transfer.to_account_id)
        if source is None or destination is None:
            raise NotFoundError(
                f"One or both accounts not found for transfer "
                f"{transfer.transfer_id}"
            )
        if (
            transfer.amount is None
            or source.balance is None
            or destination.balance is None
        ):
            raise TransactionError(
                f"Transfer amount or account balance is null for transfer "
                f"{transfer.transfer_id}"
            )

        new_source, new_destination = movement(
            source.balance,
            destination.balance,
            transfer.amount,
        )
        warn_on_overdraft(source, new_source, self._logger)
        warn_on_overdraft(destination, new_destination, self._logger)

        source_updated = session.set_account_balance(source.account_id, new_source)
        destination_updated = session.set_account_balance(
            destination.account_id,
            new_destination,
        )
        if not (source_updated and destination_updated):
            raise TransactionError(
                f"Account balances not updated for transfer "
                f"{transfer.transfer_id}"
            )
        return new_source, new_destination


__all__ = ["TransferLedgerUseCase"]
