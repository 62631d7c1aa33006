"""
Complex — Комплексное число с float-компонентами

Immutable Pydantic модель пары (real, imaginary) двойной точности.
Никакой нормализации: семантика IEEE-754 как есть.

Деление проверяет ТОЧНЫЙ ноль квадрата модуля делителя;
для приближённых сравнений результатов используется is_close.
"""

from typing import Any

from pydantic import BaseModel, Field, field_validator

from src.core.math.arithmetic import ArithmeticNumber
from src.core.math.exact_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    ensure_nonzero_divisor,
    format_double,
    is_close,
)


class Complex(BaseModel, ArithmeticNumber):
    """
    Комплексное число real + imaginary*i.

    Immutable модель (frozen=True), все операции создают новый экземпляр.
    """

    real: float = Field(0.0, description="Действительная часть")
    imaginary: float = Field(0.0, description="Мнимая часть")

    model_config = {"frozen": True, "strict": True, "extra": "forbid"}  # Immutable

    def __init__(self, real: float = 0.0, imaginary: float = 0.0, **data: Any) -> None:
        super().__init__(real=real, imaginary=imaginary, **data)

    @field_validator("real", "imaginary")
    @classmethod
    def store_as_float(cls, v: float) -> float:
        """Целые входы хранятся как float"""
        return float(v)

    # =========================================================================
    # АРИФМЕТИКА
    # =========================================================================

    def add(self, other: "Complex") -> "Complex":
        return Complex(self.real + other.real, self.imaginary + other.imaginary)

    def subtract(self, other: "Complex") -> "Complex":
        return Complex(self.real - other.real, self.imaginary - other.imaginary)

    def multiply(self, other: "Complex") -> "Complex":
        """(a + bi)(c + di) = (ac - bd) + (ad + bc)i"""
        return Complex(
            self.real * other.real - self.imaginary * other.imaginary,
            self.real * other.imaginary + self.imaginary * other.real,
        )

    def divide(self, other: "Complex") -> "Complex":
        """
        (a + bi) / (c + di) = ((ac + bd) + (bc - ad)i) / (c² + d²)

        Raises:
            DivisionByZero: Если c² + d² == 0
        """
        divisor = other.modulus_squared()
        ensure_nonzero_divisor(divisor, "Complex divisor modulus")
        return Complex(
            (self.real * other.real + self.imaginary * other.imaginary) / divisor,
            (self.imaginary * other.real - self.real * other.imaginary) / divisor,
        )

    def modulus_squared(self) -> float:
        """|z|² = real² + imaginary²"""
        return self.real * self.real + self.imaginary * self.imaginary

    def is_close(
        self,
        other: "Complex",
        rel_tol: float = EPS_FLOAT_COMPARE_REL,
        abs_tol: float = EPS_FLOAT_COMPARE_ABS,
    ) -> bool:
        """Покомпонентное сравнение с толерантностью"""
        return is_close(self.real, other.real, rel_tol, abs_tol) and is_close(
            self.imaginary, other.imaginary, rel_tol, abs_tol
        )

    def __str__(self) -> str:
        # Отрицательная мнимая часть не обрабатывается отдельно: "1+-3i"
        return f"{format_double(self.real)}+{format_double(self.imaginary)}i"
