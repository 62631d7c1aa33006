"""Демонстрация: сортировка дробей и тождества для Fraction и Complex.

Вывод (stdout):
1. Дроби до и после сортировки по возрастанию
2. (a+b)^2 и (a-b)^2 для пары дробей
3. (a+b)^2 и (a-b)^2 для пары комплексных чисел

DivisionByZero не перехватывается: ошибка завершает запуск.
"""

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional

from src.core.domain import Complex, Fraction
from src.core.math.arithmetic import ArithmeticNumber
from src.demo.identities import (
    IdentityCheckResult,
    check_a_plus_b_square,
    check_squares_difference,
    format_identity_report,
)

logger = logging.getLogger(__name__)

IntPair = tuple[int, int]
FloatPair = tuple[float, float]

# Порядок проверок для каждой пары значений
IDENTITY_CHECKS: tuple[Callable[..., IdentityCheckResult], ...] = (
    check_a_plus_b_square,
    check_squares_difference,
)


@dataclass(frozen=True)
class DemoConfig:
    """Конфигурация демонстрации.

    - fractions: дроби (числитель, знаменатель) для сортировки
    - fraction_pair / complex_pair: операнды a, b тождеств
    - pause_on_exit: ждать ввода строки перед выходом
    - log_level: уровень logging (сообщения идут в stderr)
    """
    fractions: tuple[IntPair, ...] = ((1, 3), (2, 3), (1, 6))
    fraction_pair: tuple[IntPair, IntPair] = ((1, 3), (1, 6))
    complex_pair: tuple[FloatPair, FloatPair] = ((1.0, 3.0), (1.0, 6.0))
    pause_on_exit: bool = False
    log_level: str = "WARNING"


def _identity_lines(a: ArithmeticNumber, b: ArithmeticNumber) -> List[str]:
    lines: List[str] = []
    for check in IDENTITY_CHECKS:
        result = check(a, b)
        logger.debug("%s: lhs=%s rhs=%s", result.kind.value, result.lhs, result.rhs)
        lines.append("")
        lines.extend(format_identity_report(result))
    return lines


def run_demo(config: Optional[DemoConfig] = None) -> List[str]:
    """Построение всех строк вывода демонстрации.

    Args:
        config: конфигурация (default: DemoConfig())

    Returns:
        Строки вывода без завершающих переводов строк
    """
    config = config or DemoConfig()

    fractions = [Fraction(n, d) for n, d in config.fractions]
    logger.debug("Sorting %d fractions", len(fractions))

    lines = ["Before sorting:"]
    lines.extend(str(fraction) for fraction in fractions)
    lines.append("")
    lines.append("After sorting:")
    lines.extend(str(fraction) for fraction in sorted(fractions))

    fraction_a, fraction_b = (Fraction(n, d) for n, d in config.fraction_pair)
    lines.extend(_identity_lines(fraction_a, fraction_b))

    complex_a, complex_b = (Complex(re, im) for re, im in config.complex_pair)
    lines.extend(_identity_lines(complex_a, complex_b))

    return lines


def main(config: Optional[DemoConfig] = None) -> int:
    """Точка входа: печать демонстрации в stdout.

    Returns:
        Код возврата процесса (0)
    """
    config = config or DemoConfig()
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    for line in run_demo(config):
        print(line)

    if config.pause_on_exit:
        input()
    return 0
