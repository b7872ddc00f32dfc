"""
Core math modules для slider-core

Точная Decimal-арифметика для конверсии value ↔ step.
"""

from slider_core.core.math.safe_decimal import (
    Number,
    # Checks
    is_integral,
    is_numeric,
    # Conversion
    to_decimal,
    to_number,
    # Arithmetic
    safe_add,
    safe_divide,
    safe_multiply,
    safe_subtract,
)

__all__ = [
    "Number",
    # Checks
    "is_integral",
    "is_numeric",
    # Conversion
    "to_decimal",
    "to_number",
    # Arithmetic
    "safe_add",
    "safe_divide",
    "safe_multiply",
    "safe_subtract",
]
