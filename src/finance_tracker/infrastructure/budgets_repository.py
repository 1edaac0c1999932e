"""SQLAlchemy-backed repository for budgets."""

from sqlalchemy import text

from finance_tracker.application.ports.budgets_repository import (
    BudgetsRepositoryPort,
)
from finance_tracker.application.ports.database import DatabaseEnginePort
from finance_tracker.domain.constants import DEFAULT_ALERT_THRESHOLD
from finance_tracker.domain.models import Budget
from finance_tracker.infrastructure.sql import typed_text
from finance_tracker.utils.dates import coerce_date
from finance_tracker.utils.decimal_utils import coerce_decimal

BUDGET_COLUMNS = """
    budget_id, user_id, category_id, budget_name, amount_limit, period,
    start_date, end_date, alert_threshold, is_active
"""

SELECT_BUDGET_SQL = text(
    f"""
    SELECT {BUDGET_COLUMNS}
    FROM budgets
    WHERE budget_id = :budget_id
    """
)

BUDGET_DATE_PARAMS = ("start_date", "end_date")

INSERT_BUDGET_SQL = typed_text(
    """
    INSERT INTO budgets (
        budget_id,
        user_id,
        category_id,
        budget_name,
        amount_limit,
        period,
        start_date,
        end_date,
        alert_threshold,
        is_active
    )
    VALUES (
        :budget_id,
        :user_id,
        :category_id,
        :budget_name,
        :amount_limit,
        :period,
        :start_date,
        :end_date,
        :alert_threshold,
        :is_active
    )
    """,
    money=("amount_limit",),
    dates=BUDGET_DATE_PARAMS,
)

UPDATE_BUDGET_SQL = typed_text(
    """
    UPDATE budgets
    SET category_id = :category_id,
        budget_name = :budget_name,
        amount_limit = :amount_limit,
        period = :period,
        start_date = :start_date,
        end_date = :end_date,
        alert_threshold = :alert_threshold,
        is_active = :is_active
    WHERE budget_id = :budget_id AND user_id = :user_id
    """,
    money=("amount_limit",),
    dates=BUDGET_DATE_PARAMS,
)

DELETE_BUDGET_SQL = text(
    """
    DELETE FROM budgets
    WHERE budget_id = :budget_id
    """
)


def _row_to_budget(row) -> Budget:
    threshold = row.alert_threshold
    return Budget(
        budget_id=row.budget_id,
        user_id=row.user_id,
        name=row.budget_name,
        amount_limit=coerce_decimal(row.amount_limit),
        period=row.period,
        start_date=coerce_date(row.start_date),
        end_date=coerce_date(row.end_date),
        category_id=row.category_id,
        alert_threshold=(
            int(threshold) if threshold is not None else DEFAULT_ALERT_THRESHOLD
        ),
        is_active=bool(row.is_active),
    )


def _budget_params(budget: Budget) -> dict[str, object]:
    return {
        "budget_id": budget.budget_id,
        "user_id": budget.user_id,
        "category_id": budget.category_id,
        "budget_name": budget.name,
        "amount_limit": budget.amount_limit,
        "period": budget.period,
        "start_date": budget.start_date,
        "end_date": budget.end_date,
        "alert_threshold": budget.alert_threshold,
        "is_active": budget.is_active,
    }


class SqlAlchemyBudgetsRepository(BudgetsRepositoryPort):
    """Repository backed by SQLAlchemy for budgets."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the finance engine.
        """
        self._db_port = db_port

    def fetch_budget(self, budget_id: str) -> Budget | None:
        """Return the budget or None."""
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            row = conn.execute(
                SELECT_BUDGET_SQL,
                {"budget_id": budget_id},
            ).first()
        return _row_to_budget(row) if row is not None else None

    def fetch_budgets(
        self,
        user_id: str,
        active_only: bool = False,
    ) -> list[Budget]:
        """Return the user's budgets, most recent window first."""
        statement = f"SELECT {BUDGET_COLUMNS} FROM budgets WHERE user_id = :user_id"
        params: dict[str, object] = {"user_id": user_id}
        if active_only:
            statement += " AND is_active = :is_active"
            params["is_active"] = True
        statement += " ORDER BY start_date DESC, budget_name"
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            rows = conn.execute(text(statement), params).all()
        return [_row_to_budget(row) for row in rows]

    def insert_budget(self, budget: Budget) -> bool:
        """Insert a new budget."""
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            result = conn.execute(INSERT_BUDGET_SQL, _budget_params(budget))
        return result.rowcount > 0

    def update_budget(self, budget: Budget) -> bool:
        """Rewrite an existing budget owned by the same user."""
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            result = conn.execute(UPDATE_BUDGET_SQL, _budget_params(budget))
        return result.rowcount > 0

    def delete_budget(self, budget_id: str) -> bool:
        """Remove a budget."""
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            result = conn.execute(DELETE_BUDGET_SQL, {"budget_id": budget_id})
        return result.rowcount > 0


__all__ = ["SqlAlchemyBudgetsRepository"]
