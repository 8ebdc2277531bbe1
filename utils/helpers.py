"""
Helper functions for the Duct Sizer server.

This module provides shared numeric and formatting utilities used by multiple
calculation modules.
"""

import math
import logging
from typing import Any, Optional

logger = logging.getLogger("duct-sizer.helpers")


def round_half_up(value: float, places: int = 0) -> float:
    """Round a value half away from zero for positive inputs.

    Python's round() uses banker's rounding, which makes 0.125 -> 0.12. The
    duct results are displayed with the usual half-up convention, so
    0.125 -> 0.13 and 1499.5 -> 1500.

    Args:
        value: Number to round
        places: Decimal places to keep

    Returns:
        Rounded value as float
    """
    factor = 10 ** places
    return math.floor(value * factor + 0.5) / factor


def format_number(value: Any) -> str:
    """Format a number the way a UI prints it: 1000.0 -> '1000', 0.34 -> '0.34'.

    Non-numeric values are returned with str().
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, float):
        if not math.isfinite(value):
            return str(value)
        if value.is_integer():
            return str(int(value))
        return repr(value)
    return str(value)


def to_float(value: Any) -> Optional[float]:
    """Convert numeric or textual input to a finite float.

    Returns None for None, booleans, empty strings, non-numeric text and
    non-finite numbers. Callers decide whether None is an error.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            number = float(text)
        except ValueError:
            return None
    else:
        try:
            number = float(value)
        except (TypeError, ValueError):
            return None
    if not math.isfinite(number):
        return None
    return number


def parse_gauge(gauge: Any) -> Optional[int]:
    """Read a gauge label ('24', 24, '24 ga') as an integer gauge number."""
    if isinstance(gauge, bool):
        return None
    if isinstance(gauge, int):
        return gauge
    if isinstance(gauge, float):
        return int(gauge) if math.isfinite(gauge) else None
    if isinstance(gauge, str):
        digits = ""
        for char in gauge.strip():
            if char.isdigit():
                digits += char
            else:
                break
        return int(digits) if digits else None
    return None
