"""
Currency helpers.

Money is handled internally as integer cents, the smallest unit the ledger
can settle. Conversion to and from Decimal happens only at the boundary.
"""

from decimal import Decimal, ROUND_HALF_UP

CENTS_PER_UNIT = 100

# Smallest settleable amount. Anything below it counts as settled.
EPSILON = Decimal('0.01')
EPSILON_CENTS = 1

# Tolerance for the zero-sum check on unrounded balances.
ZERO_SUM_TOLERANCE = Decimal('0.000001')

TWO_PLACES = Decimal('0.01')


def to_decimal(value) -> Decimal:
    """Convert a boundary value (int, str, float, Decimal) to Decimal."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        # str() keeps the shortest repr, so 0.1 becomes Decimal('0.1')
        return Decimal(str(value))
    return Decimal(value)


def to_cents(amount) -> int:
    """Round a Decimal amount to whole cents (half up)."""
    quantized = to_decimal(amount).quantize(TWO_PLACES, rounding=ROUND_HALF_UP)
    return int(quantized * CENTS_PER_UNIT)


def from_cents(cents: int) -> Decimal:
    """Convert cents back to a two-place Decimal."""
    return (Decimal(cents) / CENTS_PER_UNIT).quantize(TWO_PLACES)


def quantize(amount) -> Decimal:
    """Round to two decimal places for display."""
    return to_decimal(amount).quantize(TWO_PLACES, rounding=ROUND_HALF_UP)
