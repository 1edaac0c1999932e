"""Composition root for wiring infrastructure adapters."""

from finance_tracker.application.ports.accounts_repository import (
    AccountsRepositoryPort,
)
from finance_tracker.application.ports.bills_repository import BillsRepositoryPort
from finance_tracker.application.ports.budgets_repository import (
    BudgetsRepositoryPort,
)
from finance_tracker.application.ports.database import DatabaseEnginePort
from finance_tracker.application.ports.expenses_repository import (
    ExpensesRepositoryPort,
)
from finance_tracker.application.ports.investments_repository import (
    InvestmentsRepositoryPort,
)
from finance_tracker.application.ports.ledger import LedgerStorePort
from finance_tracker.application.ports.transfers_repository import (
    TransfersRepositoryPort,
)
from finance_tracker.application.use_cases.get_budget_status import (
    GetBudgetStatusUseCase,
)
from finance_tracker.application.use_cases.get_portfolio_summary import (
    GetPortfolioSummaryUseCase,
)
from finance_tracker.application.use_cases.get_transfer_history import (
    GetTransferHistoryUseCase,
)
from finance_tracker.application.use_cases.get_upcoming_bills import (
    GetUpcomingBillsUseCase,
)
from finance_tracker.application.use_cases.save_bill import SaveBillUseCase
from finance_tracker.application.use_cases.save_budget import SaveBudgetUseCase
from finance_tracker.application.use_cases.save_investment import (
    SaveInvestmentUseCase,
)
from finance_tracker.application.use_cases.transfer_ledger import (
    TransferLedgerUseCase,
)
from finance_tracker.infrastructure.accounts_repository import (
    SqlAlchemyAccountsRepository,
)
from finance_tracker.infrastructure.bills_repository import (
    SqlAlchemyBillsRepository,
)
from finance_tracker.infrastructure.budgets_repository import (
    SqlAlchemyBudgetsRepository,
)
from finance_tracker.infrastructure.clock import SystemClock
from finance_tracker.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from finance_tracker.infrastructure.expenses_repository import (
    SqlAlchemyExpensesRepository,
)
from finance_tracker.infrastructure.investments_repository import (
    SqlAlchemyInvestmentsRepository,
)
from finance_tracker.infrastructure.ledger_store import SqlAlchemyLedgerStore
from finance_tracker.infrastructure.logging.logger import get_app_logger
from finance_tracker.infrastructure.transfers_repository import (
    SqlAlchemyTransfersRepository,
)


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_accounts_repository(
    db_port: DatabaseEnginePort | None = None,
) -> AccountsRepositoryPort:
    """Return the accounts repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyAccountsRepository(resolved_db)


def build_bills_repository(
    db_port: DatabaseEnginePort | None = None,
) -> BillsRepositoryPort:
    """Return the bills repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyBillsRepository(resolved_db)


def build_budgets_repository(
    db_port: DatabaseEnginePort | None = None,
) -> BudgetsRepositoryPort:
    """Return the budgets repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyBudgetsRepository(resolved_db)


def build_expenses_repository(
    db_port: DatabaseEnginePort | None = None,
) -> ExpensesRepositoryPort:
    """Return the expenses repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyExpensesRepository(resolved_db)


def build_investments_repository(
    db_port: DatabaseEnginePort | None = None,
) -> InvestmentsRepositoryPort:
    """Return the investments repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyInvestmentsRepository(resolved_db)


def build_transfers_repository(
    db_port: DatabaseEnginePort | None = None,
) -> TransfersRepositoryPort:
    """Return the transfer history repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyTransfersRepository(resolved_db)


def build_ledger_store(
    db_port: DatabaseEnginePort | None = None,
) -> LedgerStorePort:
    """Return the transactional ledger store."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyLedgerStore(resolved_db, logger=get_app_logger())


def build_save_bill_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> SaveBillUseCase:
    """Return the bill writing use case wired to SQL storage."""
    return SaveBillUseCase(
        build_bills_repository(db_port),
        SystemClock(),
        logger=get_app_logger(),
    )


def build_save_budget_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> SaveBudgetUseCase:
    """Return the budget writing use case wired to SQL storage."""
    return SaveBudgetUseCase(
        build_budgets_repository(db_port),
        logger=get_app_logger(),
    )


def build_save_investment_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> SaveInvestmentUseCase:
    """Return the investment writing use case wired to SQL storage."""
    return SaveInvestmentUseCase(
        build_investments_repository(db_port),
        logger=get_app_logger(),
    )


def build_upcoming_bills_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> GetUpcomingBillsUseCase:
    """Return the upcoming bills use case wired to SQL storage."""
    return GetUpcomingBillsUseCase(
        build_bills_repository(db_port),
        SystemClock(),
        logger=get_app_logger(),
    )


def build_budget_status_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> GetBudgetStatusUseCase:
    """Return the budget status use case wired to SQL storage."""
    resolved_db = db_port or build_database_adapter()
    return GetBudgetStatusUseCase(
        build_budgets_repository(resolved_db),
        build_expenses_repository(resolved_db),
        logger=get_app_logger(),
    )


def build_transfer_ledger_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> TransferLedgerUseCase:
    """Return the transfer ledger use case wired to SQL storage."""
    return TransferLedgerUseCase(
        build_ledger_store(db_port),
        logger=get_app_logger(),
    )


def build_transfer_history_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> GetTransferHistoryUseCase:
    """Return the transfer history use case wired to SQL storage."""
    return GetTransferHistoryUseCase(
        build_transfers_repository(db_port),
        logger=get_app_logger(),
    )


def build_portfolio_summary_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> GetPortfolioSummaryUseCase:
    """Return the portfolio summary use case wired to SQL storage."""
    return GetPortfolioSummaryUseCase(
        build_investments_repository(db_port),
        logger=get_app_logger(),
    )


__all__ = [
    "build_database_adapter",
    "build_accounts_repository",
    "build_bills_repository",
    "build_budgets_repository",
    "build_expenses_repository",
    "build_investments_repository",
    "build_transfers_repository",
    "build_ledger_store",
    "build_save_bill_use_case",
    "build_save_budget_use_case",
    "build_save_investment_use_case",
    "build_upcoming_bills_use_case",
    "build_budget_status_use_case",
    "build_transfer_ledger_use_case",
    "build_transfer_history_use_case",
    "build_portfolio_summary_use_case",
]
