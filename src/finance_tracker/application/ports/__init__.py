"""Application ports package."""

from .accounts_repository import AccountsRepositoryPort
from .bills_repository import BillsRepositoryPort
from .budgets_repository import BudgetsRepositoryPort
from .clock import ClockPort
from .database import DatabaseEnginePort
from .expenses_repository import ExpensesRepositoryPort
from .investments_repository import InvestmentsRepositoryPort
from .ledger import LedgerSessionPort, LedgerStorePort
from .transfers_repository import TransfersRepositoryPort

__all__ = [
    "AccountsRepositoryPort",
    "BillsRepositoryPort",
    "BudgetsRepositoryPort",
    "ClockPort",
    "DatabaseEnginePort",
    "ExpensesRepositoryPort",
    "InvestmentsRepositoryPort",
    "LedgerSessionPort",
    "LedgerStorePort",
    "TransfersRepositoryPort",
]
