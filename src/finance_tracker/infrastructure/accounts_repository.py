"""SQLAlchemy-backed repository for accounts."""

from decimal import Decimal

from sqlalchemy import text

from finance_tracker.application.ports.accounts_repository import (
    AccountsRepositoryPort,
)
from finance_tracker.application.ports.database import DatabaseEnginePort
from finance_tracker.domain.models import Account
from finance_tracker.infrastructure.sql import typed_text
from finance_tracker.utils.decimal_utils import coerce_optional_decimal

ACCOUNT_COLUMNS = """
    account_id, user_id, account_name, account_type, balance,
    currency, institution_name, is_active
"""

SELECT_ACCOUNT_SQL = text(
    f"""
    SELECT {ACCOUNT_COLUMNS}
    FROM accounts
    WHERE account_id = :account_id
    """
)

UPDATE_BALANCE_SQL = typed_text(
    """
    UPDATE accounts
    SET balance = :balance
    WHERE account_id = :account_id
    """,
    money=("balance",),
)


def row_to_account(row) -> Account:
    """Map an ``accounts`` row to the domain model."""
    return Account(
        account_id=row.account_id,
        user_id=row.user_id,
        name=row.account_name,
        account_type=row.account_type,
        balance=coerce_optional_decimal(row.balance),
        currency=row.currency,
        is_active=bool(row.is_active),
        institution_name=row.institution_name,
    )


class SqlAlchemyAccountsRepository(AccountsRepositoryPort):
    """Repository backed by SQLAlchemy for user accounts."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the finance engine.
        """
        self._db_port = db_port

    def fetch_account(self, account_id: str) -> Account | None:
        """Return the account or None when it does not exist."""
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            row = conn.execute(
                SELECT_ACCOUNT_SQL,
                {"account_id": account_id},
            ).first()
        return row_to_account(row) if row is not None else None

    def fetch_accounts(
        self,
        user_id: str,
        active_only: bool = False,
    ) -> list[Account]:
        """Return the user's accounts ordered by name."""
        statement = (
            f"SELECT {ACCOUNT_COLUMNS} FROM accounts WHERE user_id = :user_id"
        )
        params: dict[str, object] = {"user_id": user_id}
        if active_only:
            statement += " AND is_active = :is_active"
            params["is_active"] = True
        statement += " ORDER BY account_name"
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            rows = conn.execute(text(statement), params).all()
        return [row_to_account(row) for row in rows]

    def set_account_balance(self, account_id: str, new_balance: Decimal) -> bool:
        """Overwrite a balance outside of any transfer.

        Returns:
            bool: True when a row was updated.
        """
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            result = conn.execute(
                UPDATE_BALANCE_SQL,
                {"account_id": account_id, "balance": new_balance},
            )
        return result.rowcount > 0


__all__ = [
    "ACCOUNT_COLUMNS",
    "SqlAlchemyAccountsRepository",
    "UPDATE_BALANCE_SQL",
    "row_to_account",
]
