"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os
from typing import Optional

from finance_tracker.domain.constants import (
    DEFAULT_CURRENCY,
    DEFAULT_UPCOMING_DAYS,
)
from finance_tracker.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class FinanceSettings:
    """Runtime settings for the finance tracker adapters.

    Attributes:
        currency: Display currency code used for reports.
        upcoming_days: Horizon in days for the upcoming bills listing.
        user_id: Optional user the command-line reports run for.
    """

    currency: str = DEFAULT_CURRENCY
    upcoming_days: int = DEFAULT_UPCOMING_DAYS
    user_id: Optional[str] = None

    @classmethod
    def from_env(cls) -> "FinanceSettings":
        """Build settings from environment variables.

        Returns:
            FinanceSettings: Settings sourced from environment variables.
        """
        logger = get_app_logger()
        currency = (
            os.getenv("FINANCE_CURRENCY", DEFAULT_CURRENCY).strip().upper()
            or DEFAULT_CURRENCY
        )
        upcoming_days = cls._parse_days(
            os.getenv("FINANCE_UPCOMING_DAYS"),
            logger=logger,
        )
        user_id = (os.getenv("FINANCE_USER_ID") or "").strip() or None
        return cls(
            currency=currency,
            upcoming_days=upcoming_days,
            user_id=user_id,
        )

    @staticmethod
    def _parse_days(raw_value: str | None, logger) -> int:
        """Parse the upcoming bills horizon.

        Args:
            raw_value: Raw environment value.
            logger: Logger used for warnings.

        Returns:
            int: Parsed horizon, or the default when missing or invalid.
        """
        if not raw_value:
            return DEFAULT_UPCOMING_DAYS
        try:
            days = int(raw_value)
        except ValueError:
            logger.warning(
                f"Invalid FINANCE_UPCOMING_DAYS '{raw_value}'. "
                f"Using {DEFAULT_UPCOMING_DAYS}."
            )
            return DEFAULT_UPCOMING_DAYS
        if days < 0:
            logger.warning(
                f"FINANCE_UPCOMING_DAYS must not be negative. "
                f"Using {DEFAULT_UPCOMING_DAYS}."
            )
            return DEFAULT_UPCOMING_DAYS
        return days


__all__ = ["FinanceSettings"]
