"""SQLAlchemy-backed repository for bills and subscriptions."""

from sqlalchemy import text

from finance_tracker.application.ports.bills_repository import BillsRepositoryPort
from finance_tracker.application.ports.database import DatabaseEnginePort
from finance_tracker.domain.models import Bill
from finance_tracker.infrastructure.sql import typed_text
from finance_tracker.utils.dates import coerce_date
from finance_tracker.utils.decimal_utils import coerce_decimal

BILL_COLUMNS = """
    bill_id, user_id, category_id, name, amount, billing_cycle, due_day,
    start_date, end_date, is_active, reminder_days, last_payment_date,
    next_payment_date, description, vendor
"""

BILL_DATE_PARAMS = (
    "start_date",
    "end_date",
    "last_payment_date",
    "next_payment_date",
)

SELECT_BILL_SQL = text(
    f"""
    SELECT {BILL_COLUMNS}
    FROM bills_subscriptions
    WHERE bill_id = :bill_id
    """
)

INSERT_BILL_SQL = typed_text(
    """
    INSERT INTO bills_subscriptions (
        bill_id,
        user_id,
        category_id,
        name,
        amount,
        billing_cycle,
        due_day,
        start_date,
        end_date,
        is_active,
        reminder_days,
        last_payment_date,
        next_payment_date,
        description,
        vendor
    )
    VALUES (
        :bill_id,
        :user_id,
        :category_id,
        :name,
        :amount,
        :billing_cycle,
        :due_day,
        :start_date,
        :end_date,
        :is_active,
        :reminder_days,
        :last_payment_date,
        :next_payment_date,
        :description,
        :vendor
    )
    """,
    money=("amount",),
    dates=BILL_DATE_PARAMS,
)

UPDATE_BILL_SQL = typed_text(
    """
    UPDATE bills_subscriptions
    SET category_id = :category_id,
        name = :name,
        amount = :amount,
        billing_cycle = :billing_cycle,
        due_day = :due_day,
        start_date = :start_date,
        end_date = :end_date,
        is_active = :is_active,
        reminder_days = :reminder_days,
        last_payment_date = :last_payment_date,
        next_payment_date = :next_payment_date,
        description = :description,
        vendor = :vendor
    WHERE bill_id = :bill_id AND user_id = :user_id
    """,
    money=("amount",),
    dates=BILL_DATE_PARAMS,
)

DEACTIVATE_BILL_SQL = text(
    """
    UPDATE bills_subscriptions
    SET is_active = :is_active
    WHERE bill_id = :bill_id
    """
)

DELETE_BILL_SQL = text(
    """
    DELETE FROM bills_subscriptions
    WHERE bill_id = :bill_id
    """
)


def _row_to_bill(row) -> Bill:
    return Bill(
        bill_id=row.bill_id,
        user_id=row.user_id,
        name=row.name,
        amount=coerce_decimal(row.amount),
        billing_cycle=row.billing_cycle,
        due_day=int(row.due_day),
        start_date=coerce_date(row.start_date),
        end_date=coerce_date(row.end_date),
        category_id=row.category_id,
        is_active=bool(row.is_active),
        reminder_days=int(row.reminder_days or 0),
        last_payment_date=coerce_date(row.last_payment_date),
        next_payment_date=coerce_date(row.next_payment_date),
        description=row.description,
        vendor=row.vendor,
    )


def _bill_params(bill: Bill) -> dict[str, object]:
    return {
        "bill_id": bill.bill_id,
        "user_id": bill.user_id,
        "category_id": bill.category_id,
        "name": bill.name,
        "amount": bill.amount,
        "billing_cycle": bill.billing_cycle,
        "due_day": bill.due_day,
        "start_date": bill.start_date,
        "end_date": bill.end_date,
        "is_active": bill.is_active,
        "reminder_days": bill.reminder_days,
        "last_payment_date": bill.last_payment_date,
        "next_payment_date": bill.next_payment_date,
        "description": bill.description,
        "vendor": bill.vendor,
    }


class SqlAlchemyBillsRepository(BillsRepositoryPort):
    """Repository backed by SQLAlchemy for bills and subscriptions."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the finance engine.
        """
        self._db_port = db_port

    def fetch_bill(self, bill_id: str) -> Bill | None:
        """Return the bill or None."""
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            row = conn.execute(SELECT_BILL_SQL, {"bill_id": bill_id}).first()
        return _row_to_bill(row) if row is not None else None

    def fetch_bills(self, user_id: str, active_only: bool = False) -> list[Bill]:
        """Return the user's bills ordered by next payment date."""
        statement = (
            f"SELECT {BILL_COLUMNS} FROM bills_subscriptions "
            "WHERE user_id = :user_id"
        )
        params: dict[str, object] = {"user_id": user_id}
        if active_only:
            statement += " AND is_active = :is_active"
            params["is_active"] = True
        statement += " ORDER BY next_payment_date, name"
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            rows = conn.execute(text(statement), params).all()
        return [_row_to_bill(row) for row in rows]

    def insert_bill(self, bill: Bill) -> bool:
        """Insert a new bill."""
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            result = conn.execute(INSERT_BILL_SQL, _bill_params(bill))
        return result.rowcount > 0

    def update_bill(self, bill: Bill) -> bool:
        """Rewrite an existing bill owned by the same user."""
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            result = conn.execute(UPDATE_BILL_SQL, _bill_params(bill))
        return result.rowcount > 0

    def deactivate_bill(self, bill_id: str) -> bool:
        """Mark a bill inactive (cancelled subscription)."""
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            result = conn.execute(
                DEACTIVATE_BILL_SQL,
                {"bill_id": bill_id, "is_active": False},
            )
        return result.rowcount > 0

    def delete_bill(self, bill_id: str) -> bool:
        """Remove a bill."""
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            result = conn.execute(DELETE_BILL_SQL, {"bill_id": bill_id})
        return result.rowcount > 0


__all__ = ["SqlAlchemyBillsRepository"]
