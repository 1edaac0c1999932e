"""Transactional ledger store backed by SQLAlchemy.

Every ``transaction()`` scope maps to one database transaction opened with
``Engine.begin()``: it commits when the block exits normally and rolls back
every write when an exception escapes. Account rows are locked with
``SELECT ... FOR UPDATE`` on PostgreSQL; SQLite serializes writers on its
own.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from decimal import Decimal

from sqlalchemy import text
from sqlalchemy.engine import Connection
from sqlalchemy.exc import SQLAlchemyError

from finance_tracker.application.ports.database import DatabaseEnginePort
from finance_tracker.application.ports.ledger import (
    LedgerSessionPort,
    LedgerStorePort,
)
from finance_tracker.domain.errors import TransactionError
from finance_tracker.domain.models import Account, Transfer
from finance_tracker.infrastructure.accounts_repository import (
    ACCOUNT_COLUMNS,
    UPDATE_BALANCE_SQL,
    row_to_account,
)
from finance_tracker.infrastructure.logging.logger import get_app_logger
from finance_tracker.infrastructure.sql import typed_text
from finance_tracker.utils.dates import coerce_date
from finance_tracker.utils.decimal_utils import coerce_decimal

LEDGER_ISOLATION_LEVEL = "SERIALIZABLE"

TRANSFER_COLUMNS = """
    transfer_id, user_id, from_account_id, to_account_id, amount,
    transfer_date, description, transfer_type
"""

SELECT_TRANSFER_SQL = text(
    f"""
    SELECT {TRANSFER_COLUMNS}
    FROM transfers
    WHERE transfer_id = :transfer_id
    """
)

INSERT_TRANSFER_SQL = typed_text(
    """
    INSERT INTO transfers (
        transfer_id,
        user_id,
        from_account_id,
        to_account_id,
        amount,
        transfer_date,
        description,
        transfer_type
    )
    VALUES (
        :transfer_id,
        :user_id,
        :from_account_id,
        :to_account_id,
        :amount,
        :transfer_date,
        :description,
        :transfer_type
    )
    """,
    money=("amount",),
    dates=("transfer_date",),
)

UPDATE_TRANSFER_SQL = typed_text(
    """
    UPDATE transfers
    SET from_account_id = :from_account_id,
        to_account_id = :to_account_id,
        amount = :amount,
        transfer_date = :transfer_date,
        description = :description,
        transfer_type = :transfer_type
    WHERE transfer_id = :transfer_id
    """,
    money=("amount",),
    dates=("transfer_date",),
)

DELETE_TRANSFER_SQL = text(
    "DELETE FROM transfers WHERE transfer_id = :transfer_id"
)


def row_to_transfer(row) -> Transfer:
    """Map a ``transfers`` row to the domain model."""
    return Transfer(
        transfer_id=row.transfer_id,
        user_id=row.user_id,
        from_account_id=row.from_account_id,
        to_account_id=row.to_account_id,
        amount=coerce_decimal(row.amount),
        transfer_date=coerce_date(row.transfer_date),
        transfer_type=row.transfer_type,
        description=row.description,
    )


def _transfer_params(transfer: Transfer) -> dict[str, object]:
    return {
        "transfer_id": transfer.transfer_id,
        "user_id": transfer.user_id,
        "from_account_id": transfer.from_account_id,
        "to_account_id": transfer.to_account_id,
        "amount": transfer.amount,
        "transfer_date": transfer.transfer_date,
        "description": transfer.description,
        "transfer_type": transfer.transfer_type,
    }


class SqlAlchemyLedgerSession(LedgerSessionPort):
    """Ledger reads and writes bound to one open connection."""

    def __init__(self, conn: Connection) -> None:
        self._conn = conn

    def get_account(self, account_id: str) -> Account | None:
        statement = (
            f"SELECT {ACCOUNT_COLUMNS} FROM accounts "
            "WHERE account_id = :account_id"
        )
        if self._conn.dialect.name == "postgresql":
            statement += " FOR UPDATE"
        row = self._conn.execute(
            text(statement),
            {"account_id": account_id},
        ).first()
        return row_to_account(row) if row is not None else None

    def set_account_balance(self, account_id: str, new_balance: Decimal) -> bool:
        result = self._conn.execute(
            UPDATE_BALANCE_SQL,
            {"account_id": account_id, "balance": new_balance},
        )
        return result.rowcount > 0

    def get_transfer(self, transfer_id: str) -> Transfer | None:
        row = self._conn.execute(
            SELECT_TRANSFER_SQL,
            {"transfer_id": transfer_id},
        ).first()
        return row_to_transfer(row) if row is not None else None

    def insert_transfer(self, transfer: Transfer) -> bool:
        result = self._conn.execute(
            INSERT_TRANSFER_SQL,
            _transfer_params(transfer),
        )
        return result.rowcount > 0

    def update_transfer(self, transfer: Transfer) -> bool:
        result = self._conn.execute(
            UPDATE_TRANSFER_SQL,
            _transfer_params(transfer),
        )
        return result.rowcount > 0

    def delete_transfer(self, transfer_id: str) -> bool:
        result = self._conn.execute(
            DELETE_TRANSFER_SQL,
            {"transfer_id": transfer_id},
        )
        return result.rowcount > 0


class SqlAlchemyLedgerStore(LedgerStorePort):
    """LedgerStorePort implementation opening serializable transactions."""

    def __init__(self, db_port: DatabaseEnginePort, logger=None) -> None:
        """Initialize the store.

        Args:
            db_port: Port providing access to the finance engine.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._db_port = db_port
        self._logger = logger or get_app_logger()

    @contextmanager
    def transaction(self) -> Iterator[LedgerSessionPort]:
        """Open a transaction scope yielding a ledger session.

        Raises:
            TransactionError: If the database rejects a statement or the
                commit; the transaction is rolled back first.
        """
        engine = self._db_port.get_engine().execution_options(
            isolation_level=LEDGER_ISOLATION_LEVEL
        )
        try:
            with engine.begin() as conn:
                yield SqlAlchemyLedgerSession(conn)
        except SQLAlchemyError as exc:
            self._logger.error(f"Ledger transaction rolled back: {exc}")
            raise TransactionError(f"Ledger transaction failed: {exc}") from exc


__all__ = [
    "LEDGER_ISOLATION_LEVEL",
    "SqlAlchemyLedgerSession",
    "SqlAlchemyLedgerStore",
    "row_to_transfer",
]
