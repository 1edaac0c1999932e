"""CLI adapter printing a short finance report for one user.

The report lists bills coming due, budgets with their status and the
investment portfolio. The user comes from ``FINANCE_USER_ID``.
"""

from finance_tracker.application.context import UserContext
from finance_tracker.domain.models import (
    Bill,
    BudgetEvaluation,
    PortfolioSummary,
)
from finance_tracker.domain.services.budget import build_budget_alerts
from finance_tracker.infrastructure.container import (
    build_budget_status_use_case,
    build_database_adapter,
    build_portfolio_summary_use_case,
    build_upcoming_bills_use_case,
)
from finance_tracker.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)
from finance_tracker.infrastructure.settings import FinanceSettings


def _format_bills(bills: list[Bill], currency: str, days: int) -> list[str]:
    lines = [f"Upcoming bills (next {days} days):"]
    if not bills:
        lines.append("  none")
    for bill in bills:
        lines.append(
            f"  {bill.next_payment_date} {bill.name}: "
            f"{bill.amount} {currency}"
        )
    return lines


def _format_budgets(
    evaluations: list[BudgetEvaluation],
    currency: str,
) -> list[str]:
    lines = ["Budgets:"]
    if not evaluations:
        lines.append("  none")
    for evaluation in evaluations:
        lines.append(
            f"  {evaluation.budget.name}: {evaluation.spent} / "
            f"{evaluation.budget.amount_limit} {currency} "
            f"({evaluation.percentage_used}%) {evaluation.status}"
        )
    return lines


def _format_portfolio(summary: PortfolioSummary, currency: str) -> list[str]:
    lines = [
        f"Portfolio: {summary.total_value} {currency} "
        f"(ROI {summary.total_roi} {currency})"
    ]
    for holding in summary.holdings:
        metrics = holding.metrics
        lines.append(
            f"  {holding.investment.name}: {metrics.total_value} {currency} "
            f"({metrics.roi_percentage}%)"
        )
    return lines


def main() -> None:
    """Print the finance report for the configured user."""
    logger = get_app_logger()
    settings = FinanceSettings.from_env()
    if settings.user_id is None:
        raise RuntimeError("Missing environment variable: FINANCE_USER_ID")

    context = UserContext(user_id=settings.user_id, currency=settings.currency)
    db_adapter = build_database_adapter()

    bills = build_upcoming_bills_use_case(db_adapter).execute(
        context,
        days_ahead=settings.upcoming_days,
    )
    evaluations = build_budget_status_use_case(db_adapter).execute(context)
    alerts = build_budget_alerts(evaluations)
    portfolio = build_portfolio_summary_use_case(db_adapter).execute(context)

    lines = _format_bills(bills, settings.currency, settings.upcoming_days)
    lines += _format_budgets(evaluations, settings.currency)
    for alert in alerts:
        lines.append(f"  ! {alert.message}")
    lines += _format_portfolio(portfolio, settings.currency)

    logger.info(f"Finance report generated for user {settings.user_id}")
    get_usage_logger().info(f"finance_report user={settings.user_id}")
    print("\n".join(lines))


if __name__ == "__main__":  # pragma: no cover
    main()
