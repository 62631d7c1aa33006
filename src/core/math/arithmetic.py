"""
ArithmeticNumber — общий арифметический контракт числовых типов

Каждый числовой тип проекта (Fraction, Complex) реализует четыре операции
над значениями СВОЕГО ЖЕ типа:
- add(other) -> Self
- subtract(other) -> Self
- multiply(other) -> Self
- divide(other) -> Self

Реализации по умолчанию нет: каждый тип задаёт свою алгебру.
Операции чистые: не мутируют операнды и всегда возвращают новый экземпляр.

Операторы + - * / определены здесь один раз и делегируют в именованные методы.
Смешивание разных типов (Fraction + Complex, Fraction + int) не поддерживается:
оператор возвращает NotImplemented, Python поднимает TypeError.
"""

from abc import ABC, abstractmethod
from typing import Any, TypeVar

# Self-тип: операнды и результат всегда одного конкретного типа
N = TypeVar("N", bound="ArithmeticNumber")


class ArithmeticNumber(ABC):
    """Абстрактный числовой тип с четырьмя арифметическими операциями."""

    __slots__ = ()

    @abstractmethod
    def add(self: N, other: N) -> N:
        """Сумма self + other"""

    @abstractmethod
    def subtract(self: N, other: N) -> N:
        """Разность self - other"""

    @abstractmethod
    def multiply(self: N, other: N) -> N:
        """Произведение self * other"""

    @abstractmethod
    def divide(self: N, other: N) -> N:
        """
        Частное self / other.

        Raises:
            DivisionByZero: Если other является нулём своего типа
        """

    # =========================================================================
    # ОПЕРАТОРЫ
    # =========================================================================

    def _same_type(self, other: Any) -> bool:
        return type(other) is type(self)

    def __add__(self: N, other: Any) -> N:
        if not self._same_type(other):
            return NotImplemented
        return self.add(other)

    def __sub__(self: N, other: Any) -> N:
        if not self._same_type(other):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self: N, other: Any) -> N:
        if not self._same_type(other):
            return NotImplemented
        return self.multiply(other)

    def __truediv__(self: N, other: Any) -> N:
        if not self._same_type(other):
            return NotImplemented
        return self.divide(other)
