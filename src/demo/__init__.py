"""Demo — демонстрация арифметики Fraction и Complex.

- Сортировка дробей по рациональному значению
- Тождества (a+b)^2 и (a-b)^2 для любого ArithmeticNumber
"""

from .driver import DemoConfig, main, run_demo
from .identities import (
    IdentityCheckResult,
    IdentityKind,
    check_a_plus_b_square,
    check_squares_difference,
    format_identity_report,
)

__all__ = [
    "DemoConfig",
    "main",
    "run_demo",
    "IdentityCheckResult",
    "IdentityKind",
    "check_a_plus_b_square",
    "check_squares_difference",
    "format_identity_report",
]
