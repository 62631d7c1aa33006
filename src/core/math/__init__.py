"""
Core math modules

Арифметический контракт числовых типов и примитивы точной арифметики.
"""

# Arithmetic capability
from src.core.math.arithmetic import ArithmeticNumber

# Exact Safeguards
from src.core.math.exact_safeguards import (
    # Epsilon constants
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    # Exceptions
    DivisionByZero,
    # Integer primitives
    ensure_nonzero_divisor,
    exact_gcd,
    reduce_ratio,
    sign,
    # Float primitives
    format_double,
    is_close,
    is_valid_float,
)

__all__ = [
    # Arithmetic capability
    "ArithmeticNumber",
    # Exact Safeguards — Epsilon constants
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    # Exact Safeguards — Exceptions
    "DivisionByZero",
    # Exact Safeguards — Integer primitives
    "ensure_nonzero_divisor",
    "exact_gcd",
    "reduce_ratio",
    "sign",
    # Exact Safeguards — Float primitives
    "format_double",
    "is_close",
    "is_valid_float",
]
