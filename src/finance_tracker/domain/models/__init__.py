"""Domain models package."""

from .accounts import Account, Transfer, TransferOutcome
from .bills import Bill
from .budgets import Budget, BudgetAlert, BudgetEvaluation, Expense
from .investments import (
    HoldingValuation,
    Investment,
    InvestmentMetrics,
    PortfolioSummary,
)

__all__ = [
    "Account",
    "Transfer",
    "TransferOutcome",
    "Bill",
    "Budget",
    "BudgetAlert",
    "BudgetEvaluation",
    "Expense",
    "HoldingValuation",
    "Investment",
    "InvestmentMetrics",
    "PortfolioSummary",
]
