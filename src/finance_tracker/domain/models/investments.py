"""Domain models for investments and portfolio aggregates."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class Investment:
    """Holding of a security or asset."""

    investment_id: str
    user_id: str
    name: str
    investment_type: str
    symbol: str | None
    quantity: Decimal | None
    purchase_price: Decimal | None
    current_price: Decimal | None
    purchase_date: date | None = None
    account_id: str | None = None
    description: str | None = None


@dataclass(frozen=True)
class InvestmentMetrics:
    """Valuation figures derived from an investment."""

    total_value: Decimal
    roi: Decimal
    roi_percentage: Decimal


@dataclass(frozen=True)
class HoldingValuation:
    """Investment paired with its computed metrics."""

    investment: Investment
    metrics: InvestmentMetrics


@dataclass(frozen=True)
class PortfolioSummary:
    """Unweighted totals over a user's holdings."""

    total_value: Decimal
    total_roi: Decimal
    holdings: list[HoldingValuation]


__all__ = [
    "Investment",
    "InvestmentMetrics",
    "HoldingValuation",
    "PortfolioSummary",
]
