"""
Monetary helpers.

Every amount in the system is a ``Decimal`` with two decimal places, matching
the ``DecimalField(max_digits=10, decimal_places=2)`` columns. Floats are
never accepted: converting through ``str`` would hide rounding that already
happened.
"""

from decimal import Decimal, ROUND_HALF_EVEN
from typing import Union

CENT = Decimal("0.01")
ZERO = Decimal("0")
# Largest amount a DecimalField(max_digits=10, decimal_places=2) column holds
MAX_AMOUNT = Decimal("99999999.99")


def to_decimal(amount: Union[Decimal, str, int]) -> Decimal:
    """
    Coerce ``amount`` to Decimal.

    Raises:
        TypeError: for floats and other non-exact numeric types
    """
    if isinstance(amount, Decimal):
        return amount
    if isinstance(amount, bool) or not isinstance(amount, (str, int)):
        raise TypeError(f"Money amounts must be Decimal, str or int, got {type(amount).__name__}")
    return Decimal(amount)


def quantize(amount: Union[Decimal, str, int]) -> Decimal:
    """
    Round to cents using banker's rounding (ROUND_HALF_EVEN).

    Examples:
        >>> quantize("10.125")
        Decimal('10.12')
        >>> quantize(7)
        Decimal('7.00')
    """
    return to_decimal(amount).quantize(CENT, rounding=ROUND_HALF_EVEN)


def line_total(unit_price: Union[Decimal, str, int], quantity: int) -> Decimal:
    """Exact ``unit_price * quantity``, rounded to cents."""
    return quantize(to_decimal(unit_price) * quantity)
