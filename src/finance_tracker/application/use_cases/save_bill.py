"""Use case to write, cancel and delete bills with a projected schedule."""

from dataclasses import dataclass, replace

from finance_tracker.application.context import UserContext
from finance_tracker.application.ports.bills_repository import BillsRepositoryPort
from finance_tracker.application.ports.clock import ClockPort
from finance_tracker.domain.models import Bill
from finance_tracker.domain.services.schedule import compute_next_payment_date
from finance_tracker.domain.services.validation import validate_bill
from finance_tracker.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class SaveBillResult:
    """Result of a bill write.

    Attributes:
        saved: Whether the repository accepted the write.
        bill: Bill as it was sent to the repository, schedule included.
    """

    saved: bool
    bill: Bill


class SaveBillUseCase:
    """Persist bills after recomputing their next payment date."""

    def __init__(
        self,
        bills_repository: BillsRepositoryPort,
        clock: ClockPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            bills_repository: Port storing bills.
            clock: Port providing today's date.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._bills_repository = bills_repository
        self._clock = clock
        self._logger = logger or get_app_logger()

    def create(self, context: UserContext, bill: Bill) -> SaveBillResult:
        """Validate, schedule and insert a new bill.

        Raises:
            ValidationError: If the bill is malformed.
        """
        scheduled = self._prepare(context, bill)
        saved = self._bills_repository.insert_bill(scheduled)
        self._log_write("created", scheduled, saved)
        return SaveBillResult(saved=saved, bill=scheduled)

    def update(self, context: UserContext, bill: Bill) -> SaveBillResult:
        """Validate, reschedule from the start date and rewrite a bill.

        Raises:
            ValidationError: If the bill is malformed.
        """
        scheduled = self._prepare(context, bill)
        saved = self._bills_repository.update_bill(scheduled)
        self._log_write("updated", scheduled, saved)
        return SaveBillResult(saved=saved, bill=scheduled)

    def cancel(self, context: UserContext, bill_id: str) -> bool:
        """Deactivate a bill owned by the user."""
        if not self._owns_bill(context, bill_id, "cancellation"):
            return False
        cancelled = self._bills_repository.deactivate_bill(bill_id)
        if cancelled:
            self._logger.info(f"Bill cancelled: {bill_id}")
        return cancelled

    def delete(self, context: UserContext, bill_id: str) -> bool:
        """Remove a bill owned by the user.

        Returns:
            bool: False when the bill is missing, foreign or not removed.
        """
        if not self._owns_bill(context, bill_id, "deletion"):
            return False
        deleted = self._bills_repository.delete_bill(bill_id)
        if deleted:
            self._logger.info(f"Bill deleted: {bill_id}")
        else:
            self._logger.error(f"Bill not deleted: {bill_id}")
        return deleted

    def _owns_bill(self, context: UserContext, bill_id: str, action: str) -> bool:
        bill = self._bills_repository.fetch_bill(bill_id)
        if bill is None or bill.user_id != context.user_id:
            self._logger.warning(f"Bill not found for {action}: {bill_id}")
            return False
        return True

    def _prepare(self, context: UserContext, bill: Bill) -> Bill:
        validate_bill(bill)
        next_payment_date = compute_next_payment_date(
            bill.start_date,
            bill.billing_cycle,
            bill.due_day,
            bill.end_date,
            self._clock.today(),
            logger=self._logger,
        )
        return replace(
            bill,
            user_id=context.user_id,
            next_payment_date=next_payment_date,
        )

    def _log_write(self, action: str, bill: Bill, saved: bool) -> None:
        if saved:
            self._logger.info(
                f"Bill {action}: {bill.bill_id}, "
                f"next payment {bill.next_payment_date}"
            )
        else:
            self._logger.error(f"Bill not {action}: {bill.bill_id}")


__all__ = ["SaveBillUseCase", "SaveBillResult"]
