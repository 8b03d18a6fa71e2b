"""Классификатор чисел: каскад проверок NumberCategory

Порядок проверок (первое совпадение побеждает):
1. +inf → POSITIVE_INFINITY
2. -inf → NEGATIVE_INFINITY
3. NaN → NOT_A_NUMBER
4. Точные значения:
   - целое → EXACT_INTEGER
   - рациональное → EXACT_RATIONAL
   - точный ноль в действительной части → EXACT_IMAGINARY
   - иначе → EXACT_COMPLEX
5. Приближённые конечные значения:
   - целочисленное действительное → APPROXIMATE_INTEGER
   - действительное → APPROXIMATE_REAL
   - точный ноль в действительной части → APPROXIMATE_IMAGINARY
   - иначе → APPROXIMATE_COMPLEX
6. Иначе → OTHER

Точно нулевая действительная часть даёт мнимую категорию даже при нулевой
мнимой части: ComplexValue(real=0, imag=0) классифицируется как EXACT_IMAGINARY.
"""

import numbers

from src.core.domain.number_category import NumberCategory
from src.core.math.numeric_facts import (
    is_approximate,
    is_complex,
    is_exact,
    is_exact_zero,
    is_finite,
    is_integer_valued,
    is_nan,
    is_negative_infinity,
    is_positive_infinity,
    real_part,
)


def _classify_exact(value: object) -> NumberCategory:
    """Категория точного значения."""
    if not is_complex(value):
        if isinstance(value, numbers.Integral) or value.denominator == 1:
            return NumberCategory.EXACT_INTEGER
        return NumberCategory.EXACT_RATIONAL

    if is_exact_zero(real_part(value)):
        return NumberCategory.EXACT_IMAGINARY
    return NumberCategory.EXACT_COMPLEX


def _classify_approximate(value: object) -> NumberCategory:
    """Категория приближённого значения (специальные значения уже исключены)."""
    if not is_complex(value):
        if not is_finite(value):
            return NumberCategory.OTHER
        if is_integer_valued(value):
            return NumberCategory.APPROXIMATE_INTEGER
        return NumberCategory.APPROXIMATE_REAL

    # Действительная часть встроенного complex всегда float, точным нулём не бывает
    if is_exact_zero(real_part(value)):
        return NumberCategory.APPROXIMATE_IMAGINARY
    return NumberCategory.APPROXIMATE_COMPLEX


def classify_number(value: object) -> NumberCategory:
    """Категория числа по каскаду проверок.

    Тотальная функция: любое значение (в том числе не число) получает категорию.

    Args:
        value: Любое значение

    Returns:
        NumberCategory

    Examples:
        >>> classify_number(float("inf"))
        <NumberCategory.POSITIVE_INFINITY: 'POSITIVE_INFINITY'>
        >>> classify_number(Fraction(1, 2))
        <NumberCategory.EXACT_RATIONAL: 'EXACT_RATIONAL'>
        >>> classify_number(ComplexValue(real=0, imag=2.5))
        <NumberCategory.APPROXIMATE_IMAGINARY: 'APPROXIMATE_IMAGINARY'>
    """
    # 1-3. Специальные значения
    if is_positive_infinity(value):
        return NumberCategory.POSITIVE_INFINITY
    if is_negative_infinity(value):
        return NumberCategory.NEGATIVE_INFINITY
    if is_nan(value):
        return NumberCategory.NOT_A_NUMBER

    # 4. Точные значения
    if is_exact(value):
        return _classify_exact(value)

    # 5. Приближённые значения
    if is_approximate(value):
        return _classify_approximate(value)

    # 6. Fallback
    return NumberCategory.OTHER
