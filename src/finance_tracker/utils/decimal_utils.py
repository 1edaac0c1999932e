"""Helpers for Decimal normalization."""

from decimal import ROUND_HALF_UP, Decimal

CENT = Decimal("0.01")


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from SQL or adapters.

    Returns:
        Decimal: Normalized numeric value, zero when the value is missing.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def coerce_optional_decimal(value) -> Decimal | None:
    """Normalize numeric values to Decimal while keeping missing values.

    Args:
        value: Raw numeric value from SQL or adapters.

    Returns:
        Decimal | None: Normalized value, or None when the value is missing.
    """
    if value is None:
        return None
    return coerce_decimal(value)


def round_half_up(value: Decimal, exponent: Decimal = CENT) -> Decimal:
    """Round a Decimal half-up to the given exponent (cents by default)."""
    return value.quantize(exponent, rounding=ROUND_HALF_UP)


__all__ = [
    "CENT",
    "coerce_decimal",
    "coerce_optional_decimal",
    "round_half_up",
]
