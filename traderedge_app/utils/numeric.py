"""
Numeric helpers for price and money arithmetic.

Python's built-in ``round`` uses banker's rounding, which disagrees with the
figures traders see on the dashboard. These helpers pin the rounding rules
used throughout the sizing package.
"""

import math
from typing import Any


def round_half_up(value: float, places: int = 2) -> float:
    """
    Round a value to a fixed number of decimal places, halves rounding up.

    Args:
        value: Number to round
        places: Decimal places to keep

    Returns:
        Rounded value, e.g. ``round_half_up(0.125, 2) == 0.13``
    """
    factor = 10 ** places
    return math.floor(value * factor + 0.5) / factor


def floor_to(value: float, places: int = 2) -> float:
    """Truncate a value down to a fixed number of decimal places."""
    factor = 10 ** places
    return math.floor(value * factor) / factor


def to_float(value: Any) -> float:
    """
    Parse a price-like value into a float.

    Accepts numbers and numeric strings. Anything missing or unparseable
    (None, empty string, "abc", NaN) becomes 0.0 so callers can treat it
    as an absent price.

    Stricter than the web client's ``parseFloat``: a string with trailing
    garbage such as "1.0845abc" is rejected (0.0) rather than read as its
    numeric prefix.

    Args:
        value: Raw value from a signal payload

    Returns:
        Parsed float, or 0.0 when the value is not a usable number
    """
    if value is None or isinstance(value, bool):
        return 0.0

    try:
        parsed = float(str(value).strip()) if isinstance(value, str) else float(value)
    except (ValueError, TypeError):
        return 0.0

    if math.isnan(parsed) or math.isinf(parsed):
        return 0.0

    return parsed
