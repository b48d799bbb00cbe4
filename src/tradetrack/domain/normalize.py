"""
Canonicalization rules applied at the boundary of the accounting core.

Callers supply symbols and types with inconsistent casing and whitespace,
and numbers as floats, strings or Decimals. Everything is normalized here
once so the rest of the code can rely on canonical values.
"""

import sys
from decimal import Decimal, InvalidOperation
from typing import Optional

from tradetrack.core.exceptions import ValidationError
from tradetrack.domain.models.enums import TransactionType

# Holdings below this are treated as fully liquidated
SHARE_EPSILON = Decimal("0.000001")

# Magnitudes beyond the float range count as infinite
MAX_FINITE = Decimal(sys.float_info.max)


def canonical_symbol(symbol: Optional[str]) -> str:
    """Return the grouping key for a ticker: trimmed and uppercased."""
    return (symbol or "").strip().upper()


def canonical_type(value) -> TransactionType:
    """Normalize a transaction type, matching BUY/SELL case-insensitively."""
    if isinstance(value, TransactionType):
        return value
    text = str(value or "").strip().upper()
    try:
        return TransactionType(text)
    except ValueError:
        raise ValidationError(f"Invalid transaction type: {value!r}")


def to_finite_decimal(value) -> Optional[Decimal]:
    """
    Interpret a value as a finite Decimal.

    Returns None for None, booleans, unparseable text, NaN, infinities and
    magnitudes too large for a float.
    Floats go through str() so 0.1 becomes Decimal("0.1").
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        number = value
    else:
        try:
            number = Decimal(str(value).strip())
        except (InvalidOperation, ValueError, TypeError):
            return None
    if not number.is_finite() or abs(number) > MAX_FINITE:
        return None
    return number
