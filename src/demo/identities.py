"""Алгебраические тождества над любым ArithmeticNumber.

Проверки вычисляют обе стороны тождеств:
- (a+b)^2 = a^2 + 2ab + b^2
- (a-b)^2 = a^2 - 2ab + b^2

Только наблюдение: результат содержит все промежуточные значения,
равенство сторон НЕ проверяется (для Complex оно выполняется лишь приближённо).
2ab вычисляется как ab + ab: контракт не содержит умножения на целое.
"""

from dataclasses import dataclass
from enum import Enum

from src.core.math.arithmetic import ArithmeticNumber, N


class IdentityKind(str, Enum):
    """Проверяемое тождество (значение: заголовок отчёта)"""

    A_PLUS_B_SQUARE = "TestAPlusBSquare"
    SQUARES_DIFFERENCE = "TestSquaresDifference"


# Формула и знак операции для каждого тождества
_FORMULAS = {
    IdentityKind.A_PLUS_B_SQUARE: ("(a+b)^2 = a^2 + 2ab + b^2", "+"),
    IdentityKind.SQUARES_DIFFERENCE: ("(a-b)^2 = a^2 - 2ab + b^2", "-"),
}


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class IdentityCheckResult:
    """Результат вычисления тождества."""

    kind: IdentityKind

    # Входы
    a: ArithmeticNumber
    b: ArithmeticNumber

    # Промежуточные значения
    a_op_b: ArithmeticNumber  # a+b или a-b
    a_squared: ArithmeticNumber
    b_squared: ArithmeticNumber
    two_ab: ArithmeticNumber

    # Стороны тождества
    lhs: ArithmeticNumber
    rhs: ArithmeticNumber


# =============================================================================
# CHECKS
# =============================================================================


def _common_terms(a: N, b: N) -> tuple[N, N, N]:
    """a^2, b^2, 2ab"""
    ab = a.multiply(b)
    return a.multiply(a), b.multiply(b), ab.add(ab)


def check_a_plus_b_square(a: N, b: N) -> IdentityCheckResult:
    """Вычисление (a+b)^2 и a^2 + 2ab + b^2.

    Args:
        a: первый операнд
        b: второй операнд того же типа

    Returns:
        IdentityCheckResult со всеми промежуточными значениями
    """
    a_plus_b = a.add(b)
    a_squared, b_squared, two_ab = _common_terms(a, b)

    return IdentityCheckResult(
        kind=IdentityKind.A_PLUS_B_SQUARE,
        a=a,
        b=b,
        a_op_b=a_plus_b,
        a_squared=a_squared,
        b_squared=b_squared,
        two_ab=two_ab,
        lhs=a_plus_b.multiply(a_plus_b),
        rhs=a_squared.add(two_ab).add(b_squared),
    )


def check_squares_difference(a: N, b: N) -> IdentityCheckResult:
    """Вычисление (a-b)^2 и a^2 - 2ab + b^2.

    Args:
        a: первый операнд
        b: второй операнд того же типа

    Returns:
        IdentityCheckResult со всеми промежуточными значениями
    """
    a_minus_b = a.subtract(b)
    a_squared, b_squared, two_ab = _common_terms(a, b)

    return IdentityCheckResult(
        kind=IdentityKind.SQUARES_DIFFERENCE,
        a=a,
        b=b,
        a_op_b=a_minus_b,
        a_squared=a_squared,
        b_squared=b_squared,
        two_ab=two_ab,
        lhs=a_minus_b.multiply(a_minus_b),
        rhs=a_squared.subtract(two_ab).add(b_squared),
    )


# =============================================================================
# REPORT
# =============================================================================


def format_identity_report(result: IdentityCheckResult) -> list[str]:
    """Строки отчёта по результату тождества.

    Для разности квадратов дополнительно выводится (a-b).
    """
    formula, op = _FORMULAS[result.kind]

    lines = [
        f"{result.kind.value}:",
        f"=== Testing {formula} with a = {result.a}, b = {result.b} ===",
    ]
    if result.kind is IdentityKind.SQUARES_DIFFERENCE:
        lines.append(f"(a-b) = {result.a_op_b}")
    lines.append(f"(a{op}b)^2 = {result.lhs}")
    lines.append(f"a^2 {op} 2ab + b^2 = {result.rhs}")
    return lines
