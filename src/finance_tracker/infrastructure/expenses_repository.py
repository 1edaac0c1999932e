"""SQLAlchemy-backed repository for expenses."""

from datetime import date

from finance_tracker.application.ports.database import DatabaseEnginePort
from finance_tracker.application.ports.expenses_repository import (
    ExpensesRepositoryPort,
)
from finance_tracker.domain.models import Expense
from finance_tracker.infrastructure.sql import typed_text
from finance_tracker.utils.dates import coerce_date
from finance_tracker.utils.decimal_utils import coerce_optional_decimal

SELECT_CATEGORY_EXPENSES_SQL = typed_text(
    """
    SELECT expense_id, user_id, category_id, amount, expense_date,
           vendor, description
    FROM expenses
    WHERE user_id = :user_id
      AND category_id = :category_id
      AND expense_date BETWEEN :start_date AND :end_date
    ORDER BY expense_date, expense_id
    """,
    dates=("start_date", "end_date"),
)


class SqlAlchemyExpensesRepository(ExpensesRepositoryPort):
    """Repository backed by SQLAlchemy for expenses."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the finance engine.
        """
        self._db_port = db_port

    def fetch_expenses_for_category(
        self,
        user_id: str,
        category_id: str,
        start_date: date,
        end_date: date,
    ) -> list[Expense]:
        """Return the user's expenses of a category within the dates.

        Both bounds are inclusive.
        """
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            rows = conn.execute(
                SELECT_CATEGORY_EXPENSES_SQL,
                {
                    "user_id": user_id,
                    "category_id": category_id,
                    "start_date": start_date,
                    "end_date": end_date,
                },
            ).all()
        return [
            Expense(
                expense_id=row.expense_id,
                user_id=row.user_id,
                category_id=row.category_id,
                amount=coerce_optional_decimal(row.amount),
                expense_date=coerce_date(row.expense_date),
                vendor=row.vendor,
                description=row.description,
            )
            for row in rows
        ]


__all__ = ["SqlAlchemyExpensesRepository"]
