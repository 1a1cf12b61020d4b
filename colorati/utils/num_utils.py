"""Rounding and fixed-decimal formatting shared by every color space."""

import math
import numpy as np

from ..types.format_type import UNBOUNDED_PRECISION


def is_unbounded(digits: int) -> bool:
    """Check if a precision asks for the raw, unrounded value."""
    return digits > UNBOUNDED_PRECISION


def round_half_away(value: float) -> int:
    """Round to the nearest integer, ties away from zero (not banker's rounding)."""
    if value < 0:
        return -math.floor(-value + 0.5)
    return math.floor(value + 0.5)


def round_to(value: float, digits: int = 2) -> float:
    """
    Round a value to a number of decimal places.

    Ties are rounded away from zero on ``value * 10**digits``. Exact 0 and 1 are
    returned untouched and a zero result is never negative.

    Args:
        value: Number to round
        digits: Decimal places; above UNBOUNDED_PRECISION the value is not rounded

    Returns:
        Rounded float
    """
    if is_unbounded(digits):
        return float(value) + 0.0
    if value == 0:
        return 0.0
    if value == 1:
        return 1.0
    if digits == 0:
        return float(round_half_away(value)) + 0.0

    base = 10 ** digits
    rounded = round_half_away(value * base) / base
    return rounded if rounded != 0 else 0.0


def _positional(value: float) -> str:
    return np.format_float_positional(float(value), trim='-')


def format_fixed(value: float, digits: int = 2) -> str:
    """Format as a fixed-decimal string with exactly ``digits`` decimals, e.g. ``"12.30"``."""
    if is_unbounded(digits):
        return _positional(value)
    text = f"{round_to(value, digits):.{digits}f}"
    if text.startswith('-') and float(text) == 0:
        return text[1:]
    return text


def format_number(value: float, digits: int = 2) -> str:
    """Format the rounded value in its shortest plain form (``1``, ``0.25``), never exponential."""
    if is_unbounded(digits):
        return _positional(value)
    text = format_fixed(value, digits)
    if '.' in text:
        text = text.rstrip('0').rstrip('.')
    return text


def format_integer(value: float) -> str:
    return str(round_half_away(value))
