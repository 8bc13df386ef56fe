#!/usr/bin/env python3
"""
Currency Parsing and Formatting Utilities

All amounts in the expense tracker are held as Decimal values so that totals
and budget comparisons are exact.

Representations:
- Command-line input: strings like "20", "12.50", "$1,234.56"
- Persisted JSON: plain numbers (20, 12.5)
- Display: "$" followed by the plain amount ("$20", "$12.5")
- CSV export: the plain decimal string ("20", "12.5")

Key Principles:
- Never use float arithmetic for sums or comparisons
- Floats only appear at the JSON boundary, converted through str()
"""

import math
import re
from decimal import Decimal, InvalidOperation, localcontext
from typing import Union

# Commas are only accepted as thousands separators: 1,234 or 12,345,678.90
THOUSANDS_PATTERN = re.compile(r"^[+-]?\d{1,3}(,\d{3})+(\.\d*)?$")


def parse_decimal(amount_str: str) -> Decimal:
    """
    Parse a user-supplied amount string into a Decimal.

    Accepts an optional leading "$" and thousands separators.

    Args:
        amount_str: String representation of the amount

    Returns:
        Parsed Decimal value

    Raises:
        ValueError: If the string is empty, not a number, not finite, or uses
            commas other than as thousands separators

    Examples:
        parse_decimal("12.34") -> Decimal("12.34")
        parse_decimal("$1,234.56") -> Decimal("1234.56")
        parse_decimal("1,5") -> ValueError
    """
    clean = str(amount_str).replace("$", "").strip()

    if "," in clean:
        if not THOUSANDS_PATTERN.match(clean):
            raise ValueError(f"misplaced thousands separator: {amount_str!r}")
        clean = clean.replace(",", "")

    if not clean:
        raise ValueError("empty amount")

    try:
        value = Decimal(clean)
    except InvalidOperation as e:
        raise ValueError(f"not a number: {amount_str!r}") from e

    if not value.is_finite():
        raise ValueError(f"not a finite number: {amount_str!r}")

    return value


def decimal_from_json(value: Union[int, float, str]) -> Decimal:
    """
    Convert a JSON number into a Decimal.

    Floats go through str() so that 12.5 becomes Decimal("12.5") rather than
    its binary expansion.
    """
    if isinstance(value, bool):
        raise TypeError(f"expected a number, got {value!r}")
    if isinstance(value, (int, float, str)):
        return Decimal(str(value))
    raise TypeError(f"expected a number, got {value!r}")


def decimal_to_json(value: Decimal) -> Union[int, float]:
    """
    Convert a Decimal to the plain JSON number used in the data files.

    Raises:
        ValueError: If the value overflows a JSON number or a non-zero value
            would be stored as zero
    """
    as_float = float(value)
    if not math.isfinite(as_float) or (as_float == 0 and value != 0):
        raise ValueError(f"{value} cannot be stored as a JSON number")

    if value == value.to_integral_value():
        return int(value)
    return as_float


def plain_decimal_str(value: Decimal) -> str:
    """
    Format a Decimal without exponent or trailing zeros.

    Examples:
        plain_decimal_str(Decimal("20")) -> "20"
        plain_decimal_str(Decimal("12.50")) -> "12.5"
        plain_decimal_str(Decimal("1E+2")) -> "100"
    """
    with localcontext() as ctx:
        # normalize() rounds to the context precision
        ctx.prec = max(ctx.prec, len(value.as_tuple().digits))
        return format(value.normalize(), "f")


def format_dollars(value: Decimal) -> str:
    """
    Format a Decimal as a dollar string.

    The amount is shown exactly as stored, without padding to cents.

    Examples:
        format_dollars(Decimal("20")) -> "$20"
        format_dollars(Decimal("12.50")) -> "$12.5"
        format_dollars(Decimal("-3.456")) -> "$-3.456"
    """
    return f"${plain_decimal_str(value)}"
