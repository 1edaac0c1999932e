"""Domain constants for the finance tracker core."""

from decimal import Decimal

BILLING_CYCLES = (
    "DAILY",
    "WEEKLY",
    "MONTHLY",
    "QUARTERLY",
    "YEARLY",
)

# Months added per step for the monthly family of billing cycles.
MONTHLY_CYCLE_STEPS = {
    "MONTHLY": 1,
    "QUARTERLY": 3,
    "YEARLY": 12,
}

FALLBACK_BILLING_CYCLE = "MONTHLY"

MIN_DUE_DAY = 1
MAX_DUE_DAY = 28
DEFAULT_REMINDER_DAYS = 3
DEFAULT_UPCOMING_DAYS = 7

BUDGET_PERIODS = (
    "WEEKLY",
    "MONTHLY",
    "QUARTERLY",
    "YEARLY",
)

DEFAULT_ALERT_THRESHOLD = 80
DANGER_THRESHOLD = Decimal("90")
EXCEEDED_THRESHOLD = Decimal("100")

BUDGET_STATUS_NORMAL = "NORMAL"
BUDGET_STATUS_WARNING = "WARNING"
BUDGET_STATUS_DANGER = "DANGER"
BUDGET_STATUS_EXCEEDED = "EXCEEDED"

BUDGET_ALERT_STATUSES = (
    BUDGET_STATUS_WARNING,
    BUDGET_STATUS_DANGER,
    BUDGET_STATUS_EXCEEDED,
)

# Account types whose balance is expected to go negative.
CREDIT_ACCOUNT_TYPES = ("CREDIT_CARD",)

TRANSFER_TYPES = ("INTERNAL", "EXTERNAL")

INVESTMENT_TYPES = (
    "STOCK",
    "BOND",
    "MUTUAL_FUND",
    "ETF",
    "CRYPTO",
    "REAL_ESTATE",
    "RETIREMENT",
    "OTHER",
)

DEFAULT_CURRENCY = "USD"


__all__ = [
    "BILLING_CYCLES",
    "MONTHLY_CYCLE_STEPS",
    "FALLBACK_BILLING_CYCLE",
    "MIN_DUE_DAY",
    "MAX_DUE_DAY",
    "DEFAULT_REMINDER_DAYS",
    "DEFAULT_UPCOMING_DAYS",
    "BUDGET_PERIODS",
    "DEFAULT_ALERT_THRESHOLD",
    "DANGER_THRESHOLD",
    "EXCEEDED_THRESHOLD",
    "BUDGET_STATUS_NORMAL",
    "BUDGET_STATUS_WARNING",
    "BUDGET_STATUS_DANGER",
    "BUDGET_STATUS_EXCEEDED",
    "BUDGET_ALERT_STATUSES",
    "CREDIT_ACCOUNT_TYPES",
    "TRANSFER_TYPES",
    "INVESTMENT_TYPES",
    "DEFAULT_CURRENCY",
]
