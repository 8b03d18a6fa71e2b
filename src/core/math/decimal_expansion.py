"""
Decimal Expansion: точная десятичная запись приближённых значений

Приближённое значение (float, numpy floating, Decimal) конвертируется в
несократимую дробь без округления и раскладывается делением в столбик:
- Целая часть: десятичные цифры произвольной длины
- Дробная часть: ".0" для нуля, иначе цифры до точного исчерпания остатка

Разложение конечно: знаменатель точной дроби двоичного формата является
степенью 2, десятичного формата делит степень 10. Обнаружение циклов и
ограничение количества цифр не применяются.

ВНИМАНИЕ: длина результата растёт с величиной и точностью значения
(например, Decimal("1e100000") даёт 100001 цифру). Ограничения латентности
и памяти должен накладывать вызывающий код.

Examples:
    >>> expand_decimal(0.1)
    '0.1000000000000000055511151231257827021181583404541015625'
    >>> expand_decimal(numpy.float32(0.1))
    '0.100000001490116119384765625'
"""

import logging
from fractions import Fraction

from src.core.math.number_text import integer_to_decimal_string
from src.core.math.numeric_facts import (
    NonFiniteValueError,
    is_exact,
    is_finite,
    is_real_number,
    sign,
    to_exact_rational,
)

logger = logging.getLogger(__name__)


# =============================================================================
# ДРОБНАЯ ЧАСТЬ
# =============================================================================


def _strip_factor(n: int, factor: int) -> int:
    """Деление n на factor, пока делится без остатка"""
    while n % factor == 0:
        n //= factor
    return n


def has_terminating_expansion(value: Fraction) -> bool:
    """
    Проверка конечности десятичного разложения дроби.

    Разложение конечно тогда и только тогда, когда знаменатель несократимой
    дроби не имеет простых делителей кроме 2 и 5.

    Examples:
        >>> has_terminating_expansion(Fraction(3, 40))
        True
        >>> has_terminating_expansion(Fraction(1, 3))
        False
    """
    return _strip_factor(_strip_factor(value.denominator, 2), 5) == 1


def fraction_digits(numerator: int, denominator: int) -> str:
    """
    Цифры дробной части numerator/denominator делением в столбик.

    Args:
        numerator: Числитель остатка, 0 <= numerator < denominator
        denominator: Знаменатель с простыми делителями только 2 и 5

    Returns:
        Строка цифр после десятичной точки ("0" для нулевого остатка)
    """
    if numerator == 0:
        return "0"

    digits: list[str] = []
    remainder = numerator
    while remainder:
        digit, remainder = divmod(remainder * 10, denominator)
        digits.append(str(digit))
    return "".join(digits)


# =============================================================================
# РАЗЛОЖЕНИЕ
# =============================================================================


def expand_decimal(value: object) -> str:
    """
    Точная десятичная запись конечного действительного значения.

    Алгоритм:
        1. sign = sign(value), приближённый ноль (включая -0.0) даёт sign 0
        2. exact = |to_exact_rational(value)| (без округления)
        3. int_part, remainder = divmod(exact.numerator, exact.denominator)
        4. Цифры целой части + "." + цифры деления в столбик остатка

    Args:
        value: Конечное приближённое значение (float, numpy floating,
            Decimal) либо точное рациональное с конечным разложением

    Returns:
        "-" (для отрицательных) + целая часть + "." + дробная часть

    Raises:
        NonFiniteValueError: Если значение NaN или Inf
        TypeError: Если значение не действительное число
        ValueError: Если точная дробь не имеет конечного разложения (1/3)

    Examples:
        >>> expand_decimal(0.0)
        '0.0'
        >>> expand_decimal(-2.5)
        '-2.5'
        >>> expand_decimal(Decimal("1E+3"))
        '1000.0'
    """
    if not is_real_number(value):
        raise TypeError(f"expand_decimal requires a real number, got {type(value).__name__}")

    if not is_finite(value):
        raise NonFiniteValueError(f"expand_decimal requires a finite value, got {value}")

    exact = abs(to_exact_rational(value))

    if is_exact(value) and not has_terminating_expansion(exact):
        raise ValueError(
            f"{value} has no terminating decimal expansion "
            f"(denominator {exact.denominator} has prime factors other than 2 and 5)"
        )

    int_part, remainder = divmod(exact.numerator, exact.denominator)
    int_text = integer_to_decimal_string(int_part)
    frac_text = fraction_digits(remainder, exact.denominator)

    logger.debug(
        f"Expanded {type(value).__name__}: {len(int_text)} integer digits, "
        f"{len(frac_text)} fraction digits"
    )

    prefix = "-" if sign(value) < 0 else ""
    return f"{prefix}{int_text}.{frac_text}"
