"""Storage schema for the finance tracker tables."""

from finance_tracker.application.ports.database import DatabaseEnginePort
from finance_tracker.infrastructure.logging.logger import get_app_logger

CREATE_ACCOUNTS_SQL = """
CREATE TABLE IF NOT EXISTS accounts (
    account_id TEXT PRIMARY KEY,
    user_id TEXT NOT NULL,
    account_name TEXT NOT NULL,
    account_type TEXT NOT NULL,
    balance NUMERIC(15, 2) DEFAULT 0,
    currency VARCHAR(3) DEFAULT 'USD',
    institution_name TEXT,
    is_active BOOLEAN DEFAULT TRUE
)
"""

CREATE_TRANSFERS_SQL = """
CREATE TABLE IF NOT EXISTS transfers (
    transfer_id TEXT PRIMARY KEY,
    user_id TEXT NOT NULL,
    from_account_id TEXT REFERENCES accounts(account_id) ON DELETE SET NULL,
    to_account_id TEXT REFERENCES accounts(account_id) ON DELETE SET NULL,
    amount NUMERIC(15, 2) NOT NULL CHECK (amount > 0),
    transfer_date DATE NOT NULL,
    description TEXT,
    transfer_type VARCHAR(20) CHECK (transfer_type IN ('INTERNAL', 'EXTERNAL'))
)
"""

CREATE_EXPENSES_SQL = """
CREATE TABLE IF NOT EXISTS expenses (
    expense_id TEXT PRIMARY KEY,
    user_id TEXT NOT NULL,
    category_id TEXT,
    amount NUMERIC(15, 2) NOT NULL CHECK (amount > 0),
    expense_date DATE NOT NULL,
    vendor TEXT,
    description TEXT
)
"""

CREATE_BILLS_SQL = """
CREATE TABLE IF NOT EXISTS bills_subscriptions (
    bill_id TEXT PRIMARY KEY,
    user_id TEXT NOT NULL,
    category_id TEXT,
    name TEXT NOT NULL,
    amount NUMERIC(15, 2) NOT NULL CHECK (amount > 0),
    billing_cycle VARCHAR(20),
    due_day INTEGER NOT NULL,
    start_date DATE NOT NULL,
    end_date DATE,
    is_active BOOLEAN DEFAULT TRUE,
    reminder_days INTEGER DEFAULT 3,
    last_payment_date DATE,
    next_payment_date DATE,
    description TEXT,
    vendor TEXT
)
"""

CREATE_BUDGETS_SQL = """
CREATE TABLE IF NOT EXISTS budgets (
    budget_id TEXT PRIMARY KEY,
    user_id TEXT NOT NULL,
    category_id TEXT,
    budget_name TEXT NOT NULL,
    amount_limit NUMERIC(15, 2) NOT NULL CHECK (amount_limit > 0),
    period VARCHAR(20) CHECK (period IN ('WEEKLY', 'MONTHLY', 'QUARTERLY', 'YEARLY')),
    start_date DATE NOT NULL,
    end_date DATE NOT NULL,
    alert_threshold INTEGER DEFAULT 80 CHECK (alert_threshold BETWEEN 0 AND 100),
    is_active BOOLEAN DEFAULT TRUE
)
"""

CREATE_INVESTMENTS_SQL = """
CREATE TABLE IF NOT EXISTS investments (
    investment_id TEXT PRIMARY KEY,
    user_id TEXT NOT NULL,
    account_id TEXT REFERENCES accounts(account_id) ON DELETE SET NULL,
    investment_name TEXT NOT NULL,
    investment_type VARCHAR(50),
    symbol VARCHAR(20),
    quantity NUMERIC(15, 6),
    purchase_price NUMERIC(15, 2),
    current_price NUMERIC(15, 2),
    purchase_date DATE,
    description TEXT
)
"""

SCHEMA_STATEMENTS = (
    CREATE_ACCOUNTS_SQL,
    CREATE_TRANSFERS_SQL,
    CREATE_EXPENSES_SQL,
    CREATE_BILLS_SQL,
    CREATE_BUDGETS_SQL,
    CREATE_INVESTMENTS_SQL,
)


def ensure_schema(db_port: DatabaseEnginePort, logger=None) -> int:
    """Create the finance tables when they do not exist yet.

    Args:
        db_port: Port providing access to the finance engine.
        logger: Optional logger compatible with logging.Logger-like API.

    Returns:
        int: Number of table statements applied.
    """
    resolved_logger = logger or get_app_logger()
    engine = db_port.get_engine()
    with engine.begin() as conn:
        for statement in SCHEMA_STATEMENTS:
            conn.exec_driver_sql(statement)
    resolved_logger.info(f"Ensured {len(SCHEMA_STATEMENTS)} finance tables")
    return len(SCHEMA_STATEMENTS)


__all__ = ["SCHEMA_STATEMENTS", "ensure_schema"]
