"""
Fraction — Точная рациональная дробь

Immutable Pydantic модель: числитель и знаменатель являются целыми произвольной точности.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ (после любого создания):
1. denominator > 0 (знак хранится в числителе)
2. gcd(|numerator|, denominator) == 1 (дробь несократима)
3. Ноль представлен единственным образом: 0/1

Нормализация выполняется для ВСЕХ путей создания:
Fraction(n, d), Fraction(numerator=n, denominator=d), model_validate,
model_validate_json, Fraction.parse. Поэтому структурное равенство моделей
совпадает с равенством рациональных значений, а hash согласован с ==.

Сравнение выполняется только перекрёстным умножением целых, без float.
"""

import re
from typing import Any, Final

from pydantic import BaseModel, Field, model_validator

from src.core.math.arithmetic import ArithmeticNumber
from src.core.math.exact_safeguards import ensure_nonzero_divisor, reduce_ratio, sign

# Литерал дроби в форме str(): "-3/4", "5", допускается знак у знаменателя
_FRACTION_PATTERN: Final = re.compile(r"(?P<numerator>[+-]?\d+)(?:/(?P<denominator>[+-]?\d+))?")


def _is_integer(value: Any) -> bool:
    """int, но не bool"""
    return isinstance(value, int) and not isinstance(value, bool)


# =============================================================================
# FRACTION MODEL
# =============================================================================


class Fraction(BaseModel, ArithmeticNumber):
    """
    Рациональная дробь в несократимом виде.

    Immutable модель (frozen=True): каждая арифметическая операция
    создаёт новый экземпляр и заново проходит нормализацию.

    Examples:
        >>> str(Fraction(2, 4))
        '1/2'
        >>> str(Fraction(1, -3))
        '-1/3'
        >>> sorted([Fraction(1, 3), Fraction(2, 3), Fraction(1, 6)])[0] == Fraction(1, 6)
        True
    """

    numerator: int = Field(..., description="Числитель (несёт знак дроби)")
    denominator: int = Field(1, gt=0, description="Знаменатель (всегда положительный)")

    model_config = {"frozen": True, "strict": True, "extra": "forbid"}  # Immutable

    def __init__(self, numerator: int | None = None, denominator: int = 1, **data: Any) -> None:
        values = {"denominator": denominator, **data}
        if numerator is not None:
            values["numerator"] = numerator
        super().__init__(**values)

    @model_validator(mode="before")
    @classmethod
    def reduce_to_lowest_terms(cls, data: Any) -> Any:
        """
        Приведение к каноническому виду до валидации полей.

        Нецелые значения пропускаются без изменений: их отклонит
        строгая валидация полей (ValidationError).

        Raises:
            DivisionByZero: Если denominator == 0
        """
        if not isinstance(data, dict):
            return data

        numerator = data.get("numerator")
        denominator = data.get("denominator", 1)
        if not (_is_integer(numerator) and _is_integer(denominator)):
            return data

        numerator, denominator = reduce_ratio(numerator, denominator)
        return {**data, "numerator": numerator, "denominator": denominator}

    @classmethod
    def parse(cls, text: str) -> "Fraction":
        """
        Разбор строкового представления дроби.

        Принимает форму str(): "n/d" или целое "n" (пробелы по краям игнорируются).

        Args:
            text: Строка вида "-3/4" или "5"

        Returns:
            Нормализованная дробь

        Raises:
            ValueError: Если строка не является литералом дроби
            DivisionByZero: Если знаменатель равен нулю
        """
        match = _FRACTION_PATTERN.fullmatch(text.strip())
        if match is None:
            raise ValueError(f"Invalid fraction literal: {text!r}")

        denominator = match.group("denominator")
        return cls(int(match.group("numerator")), int(denominator) if denominator else 1)

    # =========================================================================
    # АРИФМЕТИКА
    # =========================================================================

    def add(self, other: "Fraction") -> "Fraction":
        """a/b + c/d = (a*d + c*b) / (b*d)"""
        return Fraction(
            self.numerator * other.denominator + other.numerator * self.denominator,
            self.denominator * other.denominator,
        )

    def subtract(self, other: "Fraction") -> "Fraction":
        """a/b - c/d = (a*d - c*b) / (b*d)"""
        return Fraction(
            self.numerator * other.denominator - other.numerator * self.denominator,
            self.denominator * other.denominator,
        )

    def multiply(self, other: "Fraction") -> "Fraction":
        """a/b * c/d = (a*c) / (b*d)"""
        return Fraction(
            self.numerator * other.numerator,
            self.denominator * other.denominator,
        )

    def divide(self, other: "Fraction") -> "Fraction":
        """
        a/b / c/d = (a*d) / (b*c)

        Raises:
            DivisionByZero: Если делитель равен нулю (c == 0)
        """
        ensure_nonzero_divisor(other.numerator, "Fraction divisor")
        return Fraction(
            self.numerator * other.denominator,
            self.denominator * other.numerator,
        )

    # =========================================================================
    # ПОРЯДОК
    # =========================================================================

    def compare(self, other: "Fraction") -> int:
        """
        Сравнение по рациональному значению.

        Знак разности a*d - c*b; знаменатели положительны, поэтому
        знак разности совпадает со знаком a/b - c/d.

        Returns:
            -1 если self < other, 0 если равны, +1 если self > other
        """
        return sign(self.numerator * other.denominator - other.numerator * self.denominator)

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Fraction):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, Fraction):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, Fraction):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, Fraction):
            return NotImplemented
        return self.compare(other) >= 0

    # =========================================================================
    # ПРЕДСТАВЛЕНИЕ
    # =========================================================================

    def to_float(self) -> float:
        """Ближайший float (только для отображения, не для сравнений)"""
        return self.numerator / self.denominator

    def __str__(self) -> str:
        return f"{self.numerator}/{self.denominator}"
