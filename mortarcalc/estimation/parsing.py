"""Decimal parsing of raw form values and two-place presentation rounding."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Any

from mortarcalc.config import DISPLAY_DECIMALS

# Enough significant digits to quantize the largest finite float to 0.01
_FORMAT_PRECISION = 400


def parse_decimal(value: Any) -> float | None:
    """Parse a raw form value as a finite number.

    Accepts ints, floats and numeric strings (surrounding whitespace is
    ignored).  Returns *None* for empty or non-numeric input, booleans,
    NaN, infinities and ints too large for a float.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return None
    else:
        text = str(value).strip()
        if not text:
            return None
        try:
            number = float(text)
        except (TypeError, ValueError):
            return None
    if not math.isfinite(number):
        return None
    return number


def format_quantity(value: float, decimals: int = DISPLAY_DECIMALS) -> str:
    """Render *value* with a fixed number of decimals.

    Rounds the exact binary value half away from zero, so ``0.125`` shows as
    ``"0.13"`` and ``-0.001`` as ``"-0.00"``.  Non-finite values render as
    ``"Infinity"``, ``"-Infinity"`` or ``"NaN"``.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    with localcontext() as ctx:
        ctx.prec = _FORMAT_PRECISION
        quantum = Decimal(1).scaleb(-decimals)
        rounded = Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP)
        return f"{rounded:.{decimals}f}"


def quantity_value(text: str) -> float:
    """Numeric value of a quantity string produced by :func:`format_quantity`."""
    number = parse_decimal(text)
    return 0.0 if number is None else number
