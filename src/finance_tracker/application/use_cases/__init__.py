"""Application use cases package."""

from .get_budget_status import GetBudgetStatusUseCase
from .get_portfolio_summary import GetPortfolioSummaryUseCase
from .get_transfer_history import GetTransferHistoryUseCase
from .get_upcoming_bills import GetUpcomingBillsUseCase
from .save_bill import SaveBillResult, SaveBillUseCase
from .save_budget import SaveBudgetResult, SaveBudgetUseCase
from .save_investment import SaveInvestmentResult, SaveInvestmentUseCase
from .transfer_ledger import TransferLedgerUseCase

__all__ = [
    "GetBudgetStatusUseCase",
    "GetPortfolioSummaryUseCase",
    "GetTransferHistoryUseCase",
    "GetUpcomingBillsUseCase",
    "SaveBillResult",
    "SaveBillUseCase",
    "SaveBudgetResult",
    "SaveBudgetUseCase",
    "SaveInvestmentResult",
    "SaveInvestmentUseCase",
    "TransferLedgerUseCase",
]
