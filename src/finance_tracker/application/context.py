"""Explicit per-call user context."""

from dataclasses import dataclass

from finance_tracker.domain.constants import DEFAULT_CURRENCY


@dataclass(frozen=True)
class UserContext:
    """Identity of the user a use case acts for.

    Attributes:
        user_id: Identifier of the signed-in user.
        currency: Display currency code of the user.
    """

    user_id: str
    currency: str = DEFAULT_CURRENCY


__all__ = ["UserContext"]
