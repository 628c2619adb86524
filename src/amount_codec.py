from decimal import Decimal, DecimalException
from typing import Union

FIXED_POINT_SHIFT = 10000
DECIMAL_PLACES = 4
# amounts are unsigned 64-bit counts of fixed-point units
MAX_UNITS = 2 ** 64 - 1


def to_fixed_point(value: Union[Decimal, str, int]) -> int:
    """
    Convert a decimal amount into integer units of 1/10000.

    Digits beyond the fourth fractional place are truncated toward zero.
    Raises ValueError for unparseable, non-finite, negative or oversized amounts.
    """
    if isinstance(value, str) and "_" in value:
        raise ValueError(f"invalid amount: {value!r}")

    try:
        amount = Decimal(value)
        if not amount.is_finite():
            raise ValueError(f"amount must be finite: {value!r}")
        if amount < 0:
            raise ValueError(f"amount must not be negative: {value!r}")

        units = int(amount * FIXED_POINT_SHIFT)
    except DecimalException as e:
        raise ValueError(f"invalid amount: {value!r}") from e

    if units > MAX_UNITS:
        raise ValueError(f"amount too large: {value!r}")
    return units


def from_fixed_point(units: int) -> Decimal:
    return Decimal(units).scaleb(-DECIMAL_PLACES)


def format_amount(units: int) -> str:
    """Format fixed-point units with exactly four decimal places."""
    return f"{from_fixed_point(units):.{DECIMAL_PLACES}f}"
