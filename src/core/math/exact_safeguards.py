"""
Exact Safeguards — Примитивы точной арифметики

Модуль обеспечивает корректность всех числовых операций проекта:
- Исключение DivisionByZero для всех случаев деления на ноль
- GCD с явной политикой для (0, 0)
- Приведение пары целых к несократимому виду с положительным знаменателем
- Проверки делителей (целых и float)
- Сравнения и форматирование float (для Complex)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Деление на ноль никогда не происходит молча (всегда DivisionByZero)
2. reduce_ratio всегда возвращает (n, d) с d > 0 и gcd(|n|, d) == 1
3. Целочисленные операции выполняются без float (произвольная точность int)
4. Все операции детерминированы и воспроизводимы
"""

import math
from decimal import Decimal
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Epsilon для сравнения float (относительная толерантность)
# Используется в is_close для относительных сравнений
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Epsilon для сравнения float (абсолютная толерантность)
# Используется в is_close для абсолютных сравнений
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# EXCEPTIONS
# =============================================================================


class DivisionByZero(ZeroDivisionError):
    """
    Деление на ноль в арифметике Fraction/Complex.

    Поднимается, если:
    1. Fraction создаётся с нулевым знаменателем
    2. Fraction делится на Fraction с нулевым числителем
    3. Complex делится на Complex с нулевым квадратом модуля

    Наследует ZeroDivisionError, поэтому pydantic не оборачивает его
    в ValidationError при создании моделей.
    """

    pass


# =============================================================================
# ЦЕЛОЧИСЛЕННЫЕ ПРИМИТИВЫ
# =============================================================================


def exact_gcd(a: int, b: int) -> int:
    """
    НОД двух целых произвольной точности.

    Политика: gcd(0, 0) := 1, чтобы нормализация пары (0, 0) не делила на ноль.
    Для всех остальных пар совпадает с math.gcd (всегда неотрицательный).

    Args:
        a: Первое целое (любого знака)
        b: Второе целое (любого знака)

    Returns:
        Наибольший общий делитель >= 1

    Examples:
        >>> exact_gcd(2, 4)
        2
        >>> exact_gcd(-6, 9)
        3
        >>> exact_gcd(0, 7)
        7
        >>> exact_gcd(0, 0)
        1
    """
    common = math.gcd(a, b)
    if common == 0:
        return 1
    return common


def sign(value: int) -> int:
    """
    Знак целого: -1, 0 или +1.

    Examples:
        >>> sign(-42)
        -1
        >>> sign(0)
        0
        >>> sign(10**30)
        1
    """
    return (value > 0) - (value < 0)


def ensure_nonzero_divisor(value: int | float, what: str) -> None:
    """
    Проверка делителя на точный ноль.

    Args:
        value: Делитель (int или float)
        what: Описание делителя для сообщения об ошибке

    Raises:
        DivisionByZero: Если value == 0
    """
    if value == 0:
        raise DivisionByZero(f"{what} cannot be zero")


def reduce_ratio(numerator: int, denominator: int) -> tuple[int, int]:
    """
    Приведение отношения двух целых к каноническому виду.

    Алгоритм:
        1. denominator == 0 → DivisionByZero
        2. g = gcd(|numerator|, |denominator|), деление обоих на g
        3. Если знаменатель отрицательный → смена знака обоих

    Args:
        numerator: Числитель (любого знака, произвольной точности)
        denominator: Знаменатель (ненулевой)

    Returns:
        (numerator, denominator) с denominator > 0 и gcd(|numerator|, denominator) == 1

    Raises:
        DivisionByZero: Если denominator == 0

    Examples:
        >>> reduce_ratio(2, 4)
        (1, 2)
        >>> reduce_ratio(-1, -3)
        (1, 3)
        >>> reduce_ratio(1, -3)
        (-1, 3)
        >>> reduce_ratio(0, -5)
        (0, 1)
    """
    ensure_nonzero_divisor(denominator, "Denominator")

    common = exact_gcd(numerator, denominator)
    numerator //= common
    denominator //= common

    # Знак хранится только в числителе
    if denominator < 0:
        numerator = -numerator
        denominator = -denominator

    return numerator, denominator


# =============================================================================
# FLOAT ПРИМИТИВЫ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


def format_double(value: float) -> str:
    """
    Кратчайшее round-trip представление float без хвоста ".0".

    Правила:
        1. Целые значения печатаются без дробной части: 1.0 → "1"
        2. Отрицательный ноль сохраняет знак: -0.0 → "-0"
        3. Экспоненциальная форма для порядка >= 15 или < -4: 1e15 → "1E+15", 1e-05 → "1E-05"
        4. Не-finite значения: "NaN", "Infinity", "-Infinity"

    Args:
        value: Форматируемое значение

    Returns:
        Строковое представление

    Examples:
        >>> format_double(3.0)
        '3'
        >>> format_double(-0.5)
        '-0.5'
        >>> format_double(1e20)
        '1E+20'
    """
    if not is_valid_float(value):
        if math.isnan(value):
            return "NaN"
        return "Infinity" if value > 0 else "-Infinity"

    if value == 0:
        return "-0" if math.copysign(1.0, value) < 0 else "0"

    # repr даёт кратчайшие цифры, normalize убирает хвостовые нули
    digits = Decimal(repr(value)).normalize()
    exponent = digits.adjusted()
    if -5 < exponent < 15:
        return format(digits, "f")

    sign_part = "-" if digits.is_signed() else ""
    coefficient = "".join(str(d) for d in digits.as_tuple().digits)
    mantissa = coefficient[0] + ("." + coefficient[1:] if len(coefficient) > 1 else "")
    return f"{sign_part}{mantissa}E{exponent:+03d}"


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Args:
        a: Первое значение
        b: Второе значение
        rel_tol: Относительная толерантность (default: 1e-9)
        abs_tol: Абсолютная толерантность (default: 1e-12)

    Returns:
        True если значения близки с учётом толерантности

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(1.0, 1.1)
        False
        >>> is_close(0.0, 1e-13)
        True
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)
