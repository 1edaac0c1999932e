"""Use case to list a user's transfers."""

from datetime import date

from finance_tracker.application.context import UserContext
from finance_tracker.application.ports.transfers_repository import (
    TransfersRepositoryPort,
)
from finance_tracker.domain.errors import ValidationError
from finance_tracker.domain.models import Transfer
from finance_tracker.infrastructure.logging.logger import get_app_logger


class GetTransferHistoryUseCase:
    """Return recorded transfers, optionally limited to a date window."""

    def __init__(
        self,
        transfers_repository: TransfersRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            transfers_repository: Port providing stored transfers.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._transfers_repository = transfers_repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        context: UserContext,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> list[Transfer]:
        """Return the user's transfers, newest first.

        Args:
            context: Caller identity.
            start_date: Inclusive lower bound of the window.
            end_date: Inclusive upper bound of the window.

        Returns:
            list[Transfer]: Transfers ordered by date descending.

        Raises:
            ValidationError: If only one bound is given or the window is
                reversed.
        """
        if (start_date is None) != (end_date is None):
            raise ValidationError("start_date and end_date must be given together")
        if start_date is not None and end_date < start_date:
            raise ValidationError("end_date must not be before start_date")
        transfers = self._transfers_repository.fetch_transfers(
            context.user_id,
            start_date=start_date,
            end_date=end_date,
        )
        if start_date is None:
            self._logger.info(f"Loaded {len(transfers)} transfers")
        else:
            self._logger.info(
                f"Loaded {len(transfers)} transfers "
                f"between {start_date} and {end_date}"
            )
        return transfers


__all__ = ["GetTransferHistoryUseCase"]
