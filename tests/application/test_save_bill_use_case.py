"""Tests for the SaveBillUseCase."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from finance_tracker.application.context import UserContext
from finance_tracker.application.use_cases.save_bill import SaveBillUseCase
from finance_tracker.domain.errors import ValidationError
from finance_tracker.domain.models import Bill

CONTEXT = UserContext(user_id="user-1")


def _bill(**overrides) -> Bill:
    values = {
        "bill_id": "bill-1",
        "user_id": "someone-else",
        "name": "Streaming",
        "amount": Decimal("12.99"),
        "billing_cycle": "MONTHLY",
        "due_day": 20,
        "start_date": date(2024, 1, 20),
    }
    values.update(overrides)
    return Bill(**values)


def _use_case(repository: MagicMock, today: date) -> SaveBillUseCase:
    clock = MagicMock()
    clock.today.return_value = today
    return SaveBillUseCase(repository, clock, logger=MagicMock())


def test_create_schedules_and_inserts_bill() -> None:
    """create should compute the next date and force the context user."""
    repository = MagicMock()
    repository.insert_bill.return_value = True
    use_case = _use_case(repository, date(2024, 3, 25))

    result = use_case.create(CONTEXT, _bill())

    assert result.saved is True
    assert result.bill.next_payment_date == date(2024, 4, 20)
    assert result.bill.user_id == "user-1"
    repository.insert_bill.assert_called_once_with(result.bill)


def test_update_recomputes_from_start_date() -> None:
    """update should replay the schedule from the (new) start date."""
    repository = MagicMock()
    repository.update_bill.return_value = True
    use_case = _use_case(repository, date(2024, 3, 25))

    result = use_case.update(
        CONTEXT,
        _bill(
            billing_cycle="QUARTERLY",
            next_payment_date=date(2030, 1, 1),
        ),
    )

    assert result.bill.next_payment_date == date(2024, 4, 20)
    repository.update_bill.assert_called_once_with(result.bill)


def test_lapsed_bill_is_saved_without_next_date() -> None:
    """A bill past its end date should have no next payment date."""
    repository = MagicMock()
    repository.insert_bill.return_value = True
    use_case = _use_case(repository, date(2024, 3, 25))

    result = use_case.create(CONTEXT, _bill(end_date=date(2024, 3, 1)))

    assert result.bill.next_payment_date is None


def test_failed_write_is_reported() -> None:
    """Repository refusals should surface as saved=False."""
    repository = MagicMock()
    repository.insert_bill.return_value = False
    use_case = _use_case(repository, date(2024, 3, 25))

    result = use_case.create(CONTEXT, _bill())

    assert result.saved is False


def test_invalid_bill_raises_before_writing() -> None:
    """Validation errors should propagate and skip the repository."""
    repository = MagicMock()
    use_case = _use_case(repository, date(2024, 3, 25))

    with pytest.raises(ValidationError):
        use_case.create(CONTEXT, _bill(due_day=31))

    repository.insert_bill.assert_not_called()


def test_cancel_deactivates_owned_bill() -> None:
    """cancel should deactivate bills of the context user only."""
    repository = MagicMock()
    repository.fetch_bill.return_value = _bill(user_id="user-1")
    repository.deactivate_bill.return_value = True
    use_case = _use_case(repository, date(2024, 3, 25))

    assert use_case.cancel(CONTEXT, "bill-1") is True
    repository.deactivate_bill.assert_called_once_with("bill-1")


def test_cancel_refuses_foreign_or_missing_bill() -> None:
    """Bills of other users are treated as missing."""
    repository = MagicMock()
    repository.fetch_bill.side_effect = [_bill(user_id="intruder"), None]
    use_case = _use_case(repository, date(2024, 3, 25))

    assert use_case.cancel(CONTEXT, "bill-1") is False
    assert use_case.cancel(CONTEXT, "bill-2") is False
    repository.deactivate_bill.assert_not_called()


def test_delete_removes_owned_bill() -> None:
    """delete should remove bills of the context user."""
    repository = MagicMock()
    repository.fetch_bill.return_value = _bill(user_id="user-1")
    repository.delete_bill.return_value = True
    use_case = _use_case(repository, date(2024, 3, 25))

    assert use_case.delete(CONTEXT, "bill-1") is True
    repository.delete_bill.assert_called_once_with("bill-1")
    repository.deactivate_bill.assert_not_called()


def test_delete_refuses_foreign_or_missing_bill() -> None:
    """Bills of other users cannot be deleted."""
    repository = MagicMock()
    repository.fetch_bill.side_effect = [_bill(user_id="intruder"), None]
    use_case = _use_case(repository, date(2024, 3, 25))

    assert use_case.delete(CONTEXT, "bill-1") is False
    assert use_case.delete(CONTEXT, "bill-2") is False
    repository.delete_bill.assert_not_called()
