"""Port for reading transfer history."""

from datetime import date
from typing import Protocol

from finance_tracker.domain.models import Transfer


class TransfersRepositoryPort(Protocol):
    """Port exposing a user's recorded transfers."""

    def fetch_transfers(
        self,
        user_id: str,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> list[Transfer]:
        """Return the user's transfers, newest first.

        When both dates are given only transfers dated inside the inclusive
        window are returned.
        """


__all__ = ["TransfersRepositoryPort"]
