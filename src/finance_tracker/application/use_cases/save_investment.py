"""Use case to create, update and delete investment holdings."""

from dataclasses import dataclass, replace

from finance_tracker.application.context import UserContext
from finance_tracker.application.ports.investments_repository import (
    InvestmentsRepositoryPort,
)
from finance_tracker.domain.models import Investment
from finance_tracker.domain.services.validation import validate_investment
from finance_tracker.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class SaveInvestmentResult:
    """Result of an investment write."""

    saved: bool
    investment: Investment


class SaveInvestmentUseCase:
    """Validate holdings and persist them for the calling user."""

    def __init__(
        self,
        investments_repository: InvestmentsRepositoryPort,
        logger=None,
    ) -> None:
        self._investments_repository = investments_repository
        self._logger = logger or get_app_logger()

    def create(
        self,
        context: UserContext,
        investment: Investment,
    ) -> SaveInvestmentResult:
        """Validate and insert a new holding.

        Raises:
            ValidationError: If the type is unknown or a figure is negative.
        """
        owned = self._prepare(context, investment)
        saved = self._investments_repository.insert_investment(owned)
        self._log_write("created", owned, saved)
        return SaveInvestmentResult(saved=saved, investment=owned)

    def update(
        self,
        context: UserContext,
        investment: Investment,
    ) -> SaveInvestmentResult:
        """Validate and rewrite an existing holding.

        Raises:
            ValidationError: If the type is unknown or a figure is negative.
        """
        owned = self._prepare(context, investment)
        saved = self._investments_repository.update_investment(owned)
        self._log_write("updated", owned, saved)
        return SaveInvestmentResult(saved=saved, investment=owned)

    def delete(self, context: UserContext, investment_id: str) -> bool:
        """Remove a holding owned by the user."""
        investment = self._investments_repository.fetch_investment(investment_id)
        if investment is None or investment.user_id != context.user_id:
            self._logger.warning(
                f"Investment not found for deletion: {investment_id}"
            )
            return False
        deleted = self._investments_repository.delete_investment(investment_id)
        if deleted:
            self._logger.info(f"Investment deleted: {investment_id}")
        else:
            self._logger.error(f"Investment not deleted: {investment_id}")
        return deleted

    def _prepare(self, context: UserContext, investment: Investment) -> Investment:
        validate_investment(investment)
        return replace(investment, user_id=context.user_id)

    def _log_write(self, action: str, investment: Investment, saved: bool) -> None:
        if saved:
            self._logger.info(
                f"Investment {action}: {investment.investment_id} "
                f"({investment.name})"
            )
        else:
            self._logger.error(
                f"Investment not {action}: {investment.investment_id}"
            )


__all__ = ["SaveInvestmentUseCase", "SaveInvestmentResult"]
