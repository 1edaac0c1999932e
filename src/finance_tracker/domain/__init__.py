"""Domain package for business rules and core models."""

from .constants import BILLING_CYCLES, BUDGET_PERIODS, TRANSFER_TYPES
from .errors import (
    FinanceTrackerError,
    NotFoundError,
    TransactionError,
    ValidationError,
)
from .models import (
    Account,
    Bill,
    Budget,
    BudgetAlert,
    BudgetEvaluation,
    Expense,
    Investment,
    InvestmentMetrics,
    PortfolioSummary,
    Transfer,
    TransferOutcome,
)
from .services import (
    apply_transfer,
    compute_next_payment_date,
    evaluate_budget,
    investment_metrics,
    reverse_transfer,
    summarize_portfolio,
)

__all__ = [
    "BILLING_CYCLES",
    "BUDGET_PERIODS",
    "TRANSFER_TYPES",
    "FinanceTrackerError",
    "NotFoundError",
    "TransactionError",
    "ValidationError",
    "Account",
    "Bill",
    "Budget",
    "BudgetAlert",
    "BudgetEvaluation",
    "Expense",
    "Investment",
    "InvestmentMetrics",
    "PortfolioSummary",
    "Transfer",
    "TransferOutcome",
    "apply_transfer",
    "compute_next_payment_date",
    "evaluate_budget",
    "investment_metrics",
    "reverse_transfer",
    "summarize_portfolio",
]
