"""Tests for the GetTransferHistoryUseCase."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from finance_tracker.application.context import UserContext
from finance_tracker.application.use_cases.get_transfer_history import (
    GetTransferHistoryUseCase,
)
from finance_tracker.domain.errors import ValidationError
from finance_tracker.domain.models import Transfer

CONTEXT = UserContext(user_id="user-1")

TRANSFER = Transfer(
    transfer_id="t-1",
    user_id="user-1",
    from_account_id="a-1",
    to_account_id="a-2",
    amount=Decimal("25.00"),
    transfer_date=date(2024, 3, 5),
)


def test_execute_returns_full_history() -> None:
    """Without dates the repository is queried for the whole history."""
    repository = MagicMock()
    repository.fetch_transfers.return_value = [TRANSFER]
    use_case = GetTransferHistoryUseCase(repository, logger=MagicMock())

    assert use_case.execute(CONTEXT) == [TRANSFER]
    repository.fetch_transfers.assert_called_once_with(
        "user-1",
        start_date=None,
        end_date=None,
    )


def test_execute_passes_date_window() -> None:
    """Both bounds are forwarded to the repository."""
    repository = MagicMock()
    repository.fetch_transfers.return_value = []
    logger = MagicMock()
    use_case = GetTransferHistoryUseCase(repository, logger=logger)

    use_case.execute(CONTEXT, date(2024, 3, 1), date(2024, 3, 31))

    repository.fetch_transfers.assert_called_once_with(
        "user-1",
        start_date=date(2024, 3, 1),
        end_date=date(2024, 3, 31),
    )
    assert "2024-03-01" in logger.info.call_args[0][0]


@pytest.mark.parametrize(
    "start_date, end_date",
    [
        (date(2024, 3, 1), None),
        (None, date(2024, 3, 31)),
        (date(2024, 3, 31), date(2024, 3, 1)),
    ],
)
def test_execute_rejects_incomplete_or_reversed_window(start_date, end_date) -> None:
    """A half-open or reversed window should raise before querying."""
    repository = MagicMock()
    use_case = GetTransferHistoryUseCase(repository, logger=MagicMock())

    with pytest.raises(ValidationError):
        use_case.execute(CONTEXT, start_date, end_date)

    repository.fetch_transfers.assert_not_called()
