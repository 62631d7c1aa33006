"""
Тесты для модели Complex

Проверяет:
1. Алгебру комплексных чисел (+ - * /)
2. DivisionByZero при нулевом квадрате модуля делителя
3. Приближённые инварианты (обратимость деления)
4. Immutability и строгую валидацию
5. Строковое представление без special-case для отрицательной мнимой части
"""

import json

import pytest
from pydantic import ValidationError

from src.core.domain import Complex, DivisionByZero


@pytest.fixture
def samples() -> list[Complex]:
    """Значения, точно представимые в двоичном float"""
    return [
        Complex(1.0, 3.0),
        Complex(1.0, 6.0),
        Complex(-2.5, 0.5),
        Complex(0.0, -4.0),
        Complex(0.25, 0.0),
    ]


class TestComplexConstruction:
    """Тесты создания"""

    def test_positional(self) -> None:
        """Complex(re, im)"""
        z = Complex(1.5, -2.0)
        assert z.real == 1.5
        assert z.imaginary == -2.0

    def test_defaults(self) -> None:
        """Complex() = 0 + 0i"""
        z = Complex()
        assert (z.real, z.imaginary) == (0.0, 0.0)

    def test_int_stored_as_float(self) -> None:
        """Целые сохраняются как float"""
        z = Complex(1, 3)
        assert isinstance(z.real, float)
        assert isinstance(z.imaginary, float)
        assert z == Complex(1.0, 3.0)

    def test_bool_rejected(self) -> None:
        """bool не принимается"""
        with pytest.raises(ValidationError):
            Complex(True, 0.0)  # type: ignore

    def test_string_rejected(self) -> None:
        """Строки не приводятся к float"""
        with pytest.raises(ValidationError):
            Complex("1.0", 0.0)  # type: ignore

    def test_immutable(self) -> None:
        """Complex должна быть immutable (frozen=True)"""
        z = Complex(1.0, 2.0)
        with pytest.raises(ValidationError):
            z.real = 3.0  # type: ignore


class TestComplexArithmetic:
    """Тесты арифметики"""

    def test_add(self) -> None:
        """Покомпонентная сумма"""
        assert Complex(1.0, 3.0).add(Complex(1.0, 6.0)) == Complex(2.0, 9.0)

    def test_subtract(self) -> None:
        """Покомпонентная разность"""
        assert Complex(1.0, 3.0).subtract(Complex(1.0, 6.0)) == Complex(0.0, -3.0)

    def test_multiply(self) -> None:
        """(1+3i)(1+6i) = -17 + 9i"""
        assert Complex(1.0, 3.0).multiply(Complex(1.0, 6.0)) == Complex(-17.0, 9.0)

    def test_multiply_by_i(self) -> None:
        """i * i = -1"""
        i = Complex(0.0, 1.0)
        assert i.multiply(i) == Complex(-1.0, 0.0)

    def test_divide(self) -> None:
        """(1+3i)/(1+6i) = (19 - 3i)/37"""
        q = Complex(1.0, 3.0).divide(Complex(1.0, 6.0))
        assert q.real == pytest.approx(19 / 37)
        assert q.imaginary == pytest.approx(-3 / 37)

    def test_divide_by_zero(self) -> None:
        """Деление на 0+0i → DivisionByZero"""
        with pytest.raises(DivisionByZero, match="Complex divisor modulus cannot be zero"):
            Complex(1.0, 1.0).divide(Complex(0.0, 0.0))

        with pytest.raises(DivisionByZero):
            Complex(1.0, 1.0) / Complex(-0.0, 0.0)

    def test_modulus_squared(self) -> None:
        """|3+4i|² = 25"""
        assert Complex(3.0, 4.0).modulus_squared() == 25.0

    def test_add_subtract_roundtrip(self, samples: list[Complex]) -> None:
        """Инвариант: (a + b) - b == a (точно для двоичных значений)"""
        for a in samples:
            for b in samples:
                assert a.add(b).subtract(b) == a

    def test_divide_multiply_roundtrip(self, samples: list[Complex]) -> None:
        """Инвариант: (a / b) * b ≈ a"""
        for a in samples:
            for b in samples:
                assert a.divide(b).multiply(b).is_close(a)

    def test_operators_match_methods(self) -> None:
        """Операторы делегируют в именованные методы"""
        a = Complex(1.0, 3.0)
        b = Complex(1.0, 6.0)
        assert a + b == a.add(b)
        assert a - b == a.subtract(b)
        assert a * b == a.multiply(b)
        assert a / b == a.divide(b)

    def test_mixed_with_builtin_complex_rejected(self) -> None:
        """Смешивание со встроенным complex не поддерживается"""
        with pytest.raises(TypeError):
            Complex(1.0, 0.0) + 1j  # type: ignore


class TestComplexComparison:
    """Тесты is_close"""

    def test_is_close(self) -> None:
        """Покомпонентное сравнение с толерантностью"""
        assert Complex(1.0, 2.0).is_close(Complex(1.0 + 1e-12, 2.0 - 1e-12))
        assert not Complex(1.0, 2.0).is_close(Complex(1.0, 2.1))

    def test_is_close_custom_tolerance(self) -> None:
        """Пользовательская абсолютная толерантность"""
        assert Complex(1.0, 2.0).is_close(Complex(1.05, 2.0), rel_tol=0.0, abs_tol=0.1)


class TestComplexFormatting:
    """Тесты str и JSON"""

    def test_str(self) -> None:
        """Форма re+imi, целые части без '.0'"""
        assert str(Complex(1, 3)) == "1+3i"
        assert str(Complex(-17.0, 9.0)) == "-17+9i"
        assert str(Complex(0.5, -2.25)) == "0.5+-2.25i"

    def test_str_negative_imaginary(self) -> None:
        """Отрицательная мнимая часть выводится как есть"""
        assert str(Complex(1.0, -3.0)) == "1+-3i"
        assert str(Complex(0.0, -3.0)) == "0+-3i"

    def test_str_signed_zero_and_non_finite(self) -> None:
        """-0.0, NaN и бесконечности"""
        assert str(Complex(-9.0, -0.0)) == "-9+-0i"
        assert str(Complex(float("nan"), float("inf"))) == "NaN+Infinityi"

    def test_json_serialization(self) -> None:
        """Сериализация Complex в JSON и обратно"""
        json_str = Complex(1.5, -2.0).model_dump_json()
        data = json.loads(json_str)

        assert data == {"real": 1.5, "imaginary": -2.0}

        restored = Complex.model_validate_json(json_str)
        assert restored == Complex(1.5, -2.0)
