"""SQLAlchemy-backed repository for transfer history."""

from datetime import date

from finance_tracker.application.ports.database import DatabaseEnginePort
from finance_tracker.application.ports.transfers_repository import (
    TransfersRepositoryPort,
)
from finance_tracker.domain.models import Transfer
from finance_tracker.infrastructure.ledger_store import (
    TRANSFER_COLUMNS,
    row_to_transfer,
)
from finance_tracker.infrastructure.sql import typed_text

SELECT_TRANSFERS_SQL = typed_text(
    f"""
    SELECT {TRANSFER_COLUMNS}
    FROM transfers
    WHERE user_id = :user_id
    ORDER BY transfer_date DESC, transfer_id
    """
)

SELECT_TRANSFERS_IN_RANGE_SQL = typed_text(
    f"""
    SELECT {TRANSFER_COLUMNS}
    FROM transfers
    WHERE user_id = :user_id
      AND transfer_date BETWEEN :start_date AND :end_date
    ORDER BY transfer_date DESC, transfer_id
    """,
    dates=("start_date", "end_date"),
)


class SqlAlchemyTransfersRepository(TransfersRepositoryPort):
    """Read-only view over the ``transfers`` table."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the finance engine.
        """
        self._db_port = db_port

    def fetch_transfers(
        self,
        user_id: str,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> list[Transfer]:
        """Return the user's transfers, newest first.

        Args:
            user_id: Owner of the transfers.
            start_date: Inclusive lower bound; requires ``end_date``.
            end_date: Inclusive upper bound; requires ``start_date``.

        Returns:
            list[Transfer]: Transfers ordered by date descending.
        """
        params: dict[str, object] = {"user_id": user_id}
        statement = SELECT_TRANSFERS_SQL
        if start_date is not None and end_date is not None:
            statement = SELECT_TRANSFERS_IN_RANGE_SQL
            params["start_date"] = start_date
            params["end_date"] = end_date
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            rows = conn.execute(statement, params).all()
        return [row_to_transfer(row) for row in rows]


__all__ = ["SqlAlchemyTransfersRepository"]
