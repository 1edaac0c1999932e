"""Tests for the SaveInvestmentUseCase."""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from finance_tracker.application.context import UserContext
from finance_tracker.application.use_cases.save_investment import (
    SaveInvestmentUseCase,
)
from finance_tracker.domain.errors import ValidationError
from finance_tracker.domain.models import Investment

CONTEXT = UserContext(user_id="user-1")


def _investment(**overrides) -> Investment:
    values = {
        "investment_id": "inv-1",
        "user_id": "someone-else",
        "name": "Acme Corp",
        "investment_type": "STOCK",
        "symbol": "ACME",
        "quantity": Decimal("10"),
        "purchase_price": Decimal("100.00"),
        "current_price": Decimal("112.40"),
    }
    values.update(overrides)
    return Investment(**values)


def test_create_inserts_holding_for_context_user() -> None:
    """create should stamp the caller on the holding before inserting it."""
    repository = MagicMock()
    repository.insert_investment.return_value = True
    use_case = SaveInvestmentUseCase(repository, logger=MagicMock())

    result = use_case.create(CONTEXT, _investment())

    assert result.saved is True
    assert result.investment.user_id == "user-1"
    repository.insert_investment.assert_called_once_with(result.investment)


def test_update_accepts_missing_prices() -> None:
    """Holdings without prices are still valid."""
    repository = MagicMock()
    repository.update_investment.return_value = True
    use_case = SaveInvestmentUseCase(repository, logger=MagicMock())

    result = use_case.update(
        CONTEXT,
        _investment(purchase_price=None, current_price=None),
    )

    assert result.saved is True
    repository.update_investment.assert_called_once_with(result.investment)


@pytest.mark.parametrize(
    "overrides",
    [
        {"investment_type": "TULIPS"},
        {"quantity": Decimal("-1")},
        {"current_price": Decimal("-0.01")},
    ],
)
def test_invalid_holding_is_never_written(overrides) -> None:
    """Validation errors should propagate and skip the repository."""
    repository = MagicMock()
    use_case = SaveInvestmentUseCase(repository, logger=MagicMock())

    with pytest.raises(ValidationError):
        use_case.create(CONTEXT, _investment(**overrides))
    with pytest.raises(ValidationError):
        use_case.update(CONTEXT, _investment(**overrides))

    repository.insert_investment.assert_not_called()
    repository.update_investment.assert_not_called()


def test_delete_checks_ownership() -> None:
    """Only holdings of the context user are deleted."""
    repository = MagicMock()
    repository.fetch_investment.side_effect = [
        _investment(user_id="user-1"),
        _investment(user_id="intruder"),
        None,
    ]
    repository.delete_investment.return_value = True
    use_case = SaveInvestmentUseCase(repository, logger=MagicMock())

    assert use_case.delete(CONTEXT, "inv-1") is True
    assert use_case.delete(CONTEXT, "inv-2") is False
    assert use_case.delete(CONTEXT, "inv-3") is False
    repository.delete_investment.assert_called_once_with("inv-1")
