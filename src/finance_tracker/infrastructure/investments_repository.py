"""SQLAlchemy-backed repository for investments."""

from sqlalchemy import text

from finance_tracker.application.ports.database import DatabaseEnginePort
from finance_tracker.application.ports.investments_repository import (
    InvestmentsRepositoryPort,
)
from finance_tracker.domain.models import Investment
from finance_tracker.infrastructure.sql import typed_text
from finance_tracker.utils.dates import coerce_date
from finance_tracker.utils.decimal_utils import coerce_optional_decimal

INVESTMENT_COLUMNS = """
    investment_id, user_id, account_id, investment_name, investment_type,
    symbol, quantity, purchase_price, current_price, purchase_date,
    description
"""

INVESTMENT_PRICE_PARAMS = ("purchase_price", "current_price")

SELECT_INVESTMENT_SQL = text(
    f"""
    SELECT {INVESTMENT_COLUMNS}
    FROM investments
    WHERE investment_id = :investment_id
    """
)

SELECT_INVESTMENTS_SQL = text(
    f"""
    SELECT {INVESTMENT_COLUMNS}
    FROM investments
    WHERE user_id = :user_id
    ORDER BY investment_name
    """
)

INSERT_INVESTMENT_SQL = typed_text(
    """
    INSERT INTO investments (
        investment_id,
        user_id,
        account_id,
        investment_name,
        investment_type,
        symbol,
        quantity,
        purchase_price,
        current_price,
        purchase_date,
        description
    )
    VALUES (
        :investment_id,
        :user_id,
        :account_id,
        :investment_name,
        :investment_type,
        :symbol,
        :quantity,
        :purchase_price,
        :current_price,
        :purchase_date,
        :description
    )
    """,
    money=INVESTMENT_PRICE_PARAMS,
    dates=("purchase_date",),
    quantities=("quantity",),
)

UPDATE_INVESTMENT_SQL = typed_text(
    """
    UPDATE investments
    SET account_id = :account_id,
        investment_name = :investment_name,
        investment_type = :investment_type,
        symbol = :symbol,
        quantity = :quantity,
        purchase_price = :purchase_price,
        current_price = :current_price,
        purchase_date = :purchase_date,
        description = :description
    WHERE investment_id = :investment_id AND user_id = :user_id
    """,
    money=INVESTMENT_PRICE_PARAMS,
    dates=("purchase_date",),
    quantities=("quantity",),
)

DELETE_INVESTMENT_SQL = text(
    """
    DELETE FROM investments
    WHERE investment_id = :investment_id
    """
)


def _row_to_investment(row) -> Investment:
    return Investment(
        investment_id=row.investment_id,
        user_id=row.user_id,
        name=row.investment_name,
        investment_type=row.investment_type,
        symbol=row.symbol,
        quantity=coerce_optional_decimal(row.quantity),
        purchase_price=coerce_optional_decimal(row.purchase_price),
        current_price=coerce_optional_decimal(row.current_price),
        purchase_date=coerce_date(row.purchase_date),
        account_id=row.account_id,
        description=row.description,
    )


def _investment_params(investment: Investment) -> dict[str, object]:
    return {
        "investment_id": investment.investment_id,
        "user_id": investment.user_id,
        "account_id": investment.account_id,
        "investment_name": investment.name,
        "investment_type": investment.investment_type,
        "symbol": investment.symbol,
        "quantity": investment.quantity,
        "purchase_price": investment.purchase_price,
        "current_price": investment.current_price,
        "purchase_date": investment.purchase_date,
        "description": investment.description,
    }


class SqlAlchemyInvestmentsRepository(InvestmentsRepositoryPort):
    """Repository backed by SQLAlchemy for investments."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the finance engine.
        """
        self._db_port = db_port

    def fetch_investment(self, investment_id: str) -> Investment | None:
        """Return the investment or None."""
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            row = conn.execute(
                SELECT_INVESTMENT_SQL,
                {"investment_id": investment_id},
            ).first()
        return _row_to_investment(row) if row is not None else None

    def fetch_investments(self, user_id: str) -> list[Investment]:
        """Return the user's investments ordered by name."""
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            rows = conn.execute(SELECT_INVESTMENTS_SQL, {"user_id": user_id}).all()
        return [_row_to_investment(row) for row in rows]

    def insert_investment(self, investment: Investment) -> bool:
        """Insert a new holding."""
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            result = conn.execute(
                INSERT_INVESTMENT_SQL,
                _investment_params(investment),
            )
        return result.rowcount > 0

    def update_investment(self, investment: Investment) -> bool:
        """Rewrite an existing holding owned by the same user."""
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            result = conn.execute(
                UPDATE_INVESTMENT_SQL,
                _investment_params(investment),
            )
        return result.rowcount > 0

    def delete_investment(self, investment_id: str) -> bool:
        """Remove a holding."""
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            result = conn.execute(
                DELETE_INVESTMENT_SQL,
                {"investment_id": investment_id},
            )
        return result.rowcount > 0


__all__ = ["SqlAlchemyInvestmentsRepository"]
