"""
Boundary coercion for raw form values.

Callers convert user input with these helpers before handing it to the
domain engines, which assume clean non-negative numbers.
"""

import math
from typing import Any


def to_amount(value: Any) -> float:
    """Coerce a raw value to a non-negative float, 0.0 when empty or invalid"""
    if value is None or value == "":
        return 0.0
    try:
        amount = float(value)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(amount) or amount < 0:
        return 0.0
    return amount


def to_int(value: Any) -> int:
    """Coerce a raw value to a non-negative int, 0 when empty or invalid"""
    return int(to_amount(value))
