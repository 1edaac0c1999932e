"""Domain services for investment valuation."""

from collections.abc import Iterable
from decimal import Decimal

from finance_tracker.domain.models import (
    HoldingValuation,
    Investment,
    InvestmentMetrics,
    PortfolioSummary,
)
from finance_tracker.utils.decimal_utils import round_half_up

RATIO_EXPONENT = Decimal("0.0001")


def compute_total_value(investment: Investment) -> Decimal:
    """Return current price times quantity, zero when either is unset."""
    if investment.current_price is None or investment.quantity is None:
        return Decimal("0")
    return investment.current_price * investment.quantity


def compute_roi(investment: Investment) -> Decimal:
    """Return the absolute gain or loss on the holding."""
    if (
        investment.current_price is None
        or investment.purchase_price is None
        or investment.quantity is None
    ):
        return Decimal("0")
    price_diff = investment.current_price - investment.purchase_price
    return price_diff * investment.quantity


def compute_roi_percentage(investment: Investment) -> Decimal:
    """Return the price change relative to the purchase price, in percent."""
    purchase_price = investment.purchase_price
    if purchase_price is None or purchase_price <= 0:
        return Decimal("0")
    current_price = investment.current_price
    price_diff = (
        current_price - purchase_price
        if current_price is not None
        else Decimal("0")
    )
    ratio = round_half_up(price_diff / purchase_price, RATIO_EXPONENT)
    return round_half_up(ratio * 100)


def investment_metrics(investment: Investment) -> InvestmentMetrics:
    """Compute total value, ROI and ROI percentage for one holding."""
    return InvestmentMetrics(
        total_value=compute_total_value(investment),
        roi=compute_roi(investment),
        roi_percentage=compute_roi_percentage(investment),
    )


def summarize_portfolio(investments: Iterable[Investment]) -> PortfolioSummary:
    """Sum holding values and ROI without weighting or currency handling."""
    holdings = [
        HoldingValuation(investment=investment, metrics=investment_metrics(investment))
        for investment in investments
    ]
    total_value = sum(
        (holding.metrics.total_value for holding in holdings),
        Decimal("0"),
    )
    total_roi = sum(
        (holding.metrics.roi for holding in holdings),
        Decimal("0"),
    )
    return PortfolioSummary(
        total_value=total_value,
        total_roi=total_roi,
        holdings=holdings,
    )


__all__ = [
    "compute_total_value",
    "compute_roi",
    "compute_roi_percentage",
    "investment_metrics",
    "summarize_portfolio",
]
