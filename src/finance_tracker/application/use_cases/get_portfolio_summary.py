"""Use case to value a user's investment portfolio."""

from finance_tracker.application.context import UserContext
from finance_tracker.application.ports.investments_repository import (
    InvestmentsRepositoryPort,
)
from finance_tracker.domain.models import PortfolioSummary
from finance_tracker.domain.services.investment import summarize_portfolio
from finance_tracker.infrastructure.logging.logger import get_app_logger


class GetPortfolioSummaryUseCase:
    """Compute per-holding metrics and portfolio totals."""

    def __init__(
        self,
        investments_repository: InvestmentsRepositoryPort,
        logger=None,
    ) -> None:
        self._investments_repository = investments_repository
        self._logger = logger or get_app_logger()

    def execute(self, context: UserContext) -> PortfolioSummary:
        """Return the portfolio summary for the user."""
        investments = self._investments_repository.fetch_investments(
            context.user_id
        )
        summary = summarize_portfolio(investments)
        self._logger.info(
            f"Portfolio valued: holdings={len(summary.holdings)}, "
            f"total_value={summary.total_value}, total_roi={summary.total_roi}"
        )
        return summary


__all__ = ["GetPortfolioSummaryUseCase"]
