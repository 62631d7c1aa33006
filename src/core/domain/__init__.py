"""
Domain models and value objects.

Contains the numeric value types: Fraction (exact rational) and Complex.
"""

from src.core.domain.complex_number import Complex
from src.core.domain.fraction import Fraction
from src.core.math.exact_safeguards import DivisionByZero

__all__ = [
    # Value types
    "Fraction",
    "Complex",
    # Errors
    "DivisionByZero",
]
