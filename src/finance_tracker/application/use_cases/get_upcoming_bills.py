"""Use case to list bills coming due soon."""

from finance_tracker.application.context import UserContext
from finance_tracker.application.ports.bills_repository import BillsRepositoryPort
from finance_tracker.application.ports.clock import ClockPort
from finance_tracker.domain.constants import DEFAULT_UPCOMING_DAYS
from finance_tracker.domain.models import Bill
from finance_tracker.domain.services.schedule import (
    is_reminder_due,
    select_upcoming_bills,
)
from finance_tracker.infrastructure.logging.logger import get_app_logger


class GetUpcomingBillsUseCase:
    """Select active bills due within a horizon or inside their reminder window."""

    def __init__(
        self,
        bills_repository: BillsRepositoryPort,
        clock: ClockPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            bills_repository: Port providing stored bills.
            clock: Port providing today's date.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._bills_repository = bills_repository
        self._clock = clock
        self._logger = logger or get_app_logger()

    def execute(
        self,
        context: UserContext,
        days_ahead: int = DEFAULT_UPCOMING_DAYS,
    ) -> list[Bill]:
        """Return active bills due between today and ``days_ahead`` days out."""
        bills = self._bills_repository.fetch_bills(
            context.user_id,
            active_only=True,
        )
        upcoming = select_upcoming_bills(bills, self._clock.today(), days_ahead)
        self._logger.info(
            f"Found {len(upcoming)} bills due within {days_ahead} days"
        )
        return upcoming

    def due_reminders(self, context: UserContext) -> list[Bill]:
        """Return active bills whose reminder window includes today."""
        today = self._clock.today()
        bills = self._bills_repository.fetch_bills(
            context.user_id,
            active_only=True,
        )
        return [bill for bill in bills if is_reminder_due(bill, today)]


__all__ = ["GetUpcomingBillsUseCase"]
