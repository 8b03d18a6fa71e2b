"""
Numeric Facts: первичные факты о числовом значении

Модуль отвечает на вопросы, из которых складывается классификация числа:
- Точность: точное (int, Fraction) или приближённое (float, numpy, Decimal)
- Вид: действительное или комплексное
- Специальные значения: +inf, -inf, NaN
- Знак, целочисленность, точный ноль
- Действительная и мнимая части
- Точное рациональное представление приближённого значения (без округления)

Поддерживаемые типы:
- Точные: int, fractions.Fraction, numpy integer (numbers.Integral / Rational)
- Приближённые действительные: float, numpy floating (float16/32/64, longdouble),
  decimal.Decimal
- Комплексные: complex, numpy complexfloating, ComplexValue

bool числом не считается.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. to_exact_rational никогда не округляет (as_integer_ratio точен)
2. NaN/Inf не конвертируются в рациональные (NonFiniteValueError)
3. Сравнения с Decimal NaN не выполняются (InvalidOperation)
"""

import numbers
import operator
from decimal import Decimal
from fractions import Fraction

import numpy as np

from src.core.math.complex_value import ComplexValue

# Типы приближённых действительных значений с плавающей точкой
_FLOATING_TYPES = (float, np.floating)

# Типы комплексных значений с двумя приближёнными частями
_APPROXIMATE_COMPLEX_TYPES = (complex, np.complexfloating)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class NonFiniteValueError(ValueError):
    """
    Нарушение контракта: бесконечность или NaN там, где требуется конечное значение.

    Бесконечности и NaN не имеют точного рационального представления.
    Описатель чисел перехватывает их до вызова разложения.
    """

    pass


# =============================================================================
# ВИД И ТОЧНОСТЬ
# =============================================================================


def is_real_number(value: object) -> bool:
    """
    Проверка, является ли значение действительным числом.

    Args:
        value: Проверяемое значение

    Returns:
        True для numbers.Real и Decimal (bool исключён)
    """
    if isinstance(value, bool):
        return False
    return isinstance(value, (numbers.Real, Decimal))


def is_complex(value: object) -> bool:
    """
    Проверка, является ли значение комплексным (complex, numpy, ComplexValue).
    """
    if isinstance(value, ComplexValue):
        return True
    return isinstance(value, numbers.Complex) and not isinstance(value, numbers.Real)


def is_number(value: object) -> bool:
    """Проверка, является ли значение числом (действительным или комплексным)"""
    return is_real_number(value) or is_complex(value)


def is_exact(value: object) -> bool:
    """
    Проверка точности значения.

    Точные значения: numbers.Rational (int, Fraction, numpy integer)
    и ComplexValue с обеими точными частями.

    Args:
        value: Проверяемое значение

    Returns:
        True если значение представлено без округления
    """
    if isinstance(value, ComplexValue):
        return is_exact(value.real) and is_exact(value.imag)
    if isinstance(value, bool):
        return False
    return isinstance(value, numbers.Rational)


def is_approximate(value: object) -> bool:
    """
    Проверка, является ли значение приближённым.

    Приближённое действительное значение обязано поддерживать
    as_integer_ratio() (точная конверсия в дробь).

    Returns:
        True для float, numpy floating, Decimal, complex, numpy complexfloating
        и ComplexValue хотя бы с одной приближённой частью
    """
    if isinstance(value, ComplexValue):
        return not is_exact(value)
    if isinstance(value, _APPROXIMATE_COMPLEX_TYPES):
        return True
    if not is_real_number(value) or is_exact(value):
        return False
    return hasattr(value, "as_integer_ratio")


# =============================================================================
# СПЕЦИАЛЬНЫЕ ЗНАЧЕНИЯ
# =============================================================================


def is_nan(value: object) -> bool:
    """
    Проверка на NaN (только действительные значения).

    Decimal: quiet и signaling NaN. Комплексные значения NaN не являются,
    даже если одна из частей NaN.
    """
    if isinstance(value, Decimal):
        return value.is_nan()
    if isinstance(value, _FLOATING_TYPES):
        return bool(np.isnan(value))
    return False


def is_positive_infinity(value: object) -> bool:
    """Проверка на +inf (только действительные значения)"""
    if isinstance(value, Decimal):
        return value.is_infinite() and not value.is_signed()
    if isinstance(value, _FLOATING_TYPES):
        return bool(np.isposinf(value))
    return False


def is_negative_infinity(value: object) -> bool:
    """Проверка на -inf (только действительные значения)"""
    if isinstance(value, Decimal):
        return value.is_infinite() and value.is_signed()
    if isinstance(value, _FLOATING_TYPES):
        return bool(np.isneginf(value))
    return False


def is_finite(value: object) -> bool:
    """
    Проверка конечности значения.

    Args:
        value: Числовое значение

    Returns:
        True для точных значений и приближённых без NaN/Inf;
        для комплексных значений обе части должны быть конечны
    """
    if isinstance(value, ComplexValue) or isinstance(value, _APPROXIMATE_COMPLEX_TYPES):
        return is_finite(value.real) and is_finite(value.imag)
    if is_exact(value):
        return True
    if isinstance(value, Decimal):
        return value.is_finite()
    if isinstance(value, _FLOATING_TYPES):
        return bool(np.isfinite(value))
    return False


# =============================================================================
# ЗНАК И ЗНАЧЕНИЕ
# =============================================================================


def sign(value: object) -> int:
    """
    Знак действительного значения.

    Приближённый ноль (включая -0.0) имеет знак 0.

    Args:
        value: Действительное значение (может быть бесконечностью)

    Returns:
        -1, 0 или +1

    Raises:
        TypeError: Если значение не действительное число
        ValueError: Если значение NaN

    Examples:
        >>> sign(-2.5)
        -1
        >>> sign(-0.0)
        0
        >>> sign(Fraction(1, 3))
        1
    """
    if not is_real_number(value):
        raise TypeError(f"sign requires a real number, got {type(value).__name__}")

    if is_nan(value):
        raise ValueError(f"sign is undefined for NaN, got {value}")

    if value > 0:
        return 1
    if value < 0:
        return -1
    return 0


def is_exact_zero(value: object) -> bool:
    """
    Проверка на точный ноль.

    Приближённый 0.0 точным нулём не является.
    """
    return is_real_number(value) and is_exact(value) and value == 0


def real_part(value: object) -> object:
    """
    Действительная часть числа.

    Для действительных значений возвращает само значение.
    """
    if is_complex(value):
        return value.real
    return value


def imag_part(value: object) -> object:
    """
    Мнимая часть числа.

    Для действительных значений возвращает точный ноль (int 0).
    """
    if is_complex(value):
        return value.imag
    return 0


# =============================================================================
# ТОЧНАЯ КОНВЕРСИЯ
# =============================================================================


def to_exact_rational(value: object) -> Fraction:
    """
    Точное рациональное представление действительного значения.

    Конверсия без потерь: для приближённых значений используется
    as_integer_ratio(), знаменатель которого для двоичных форматов является
    степенью 2, для Decimal делит степень 10.

    Args:
        value: Конечное действительное значение

    Returns:
        Несократимая дробь, равная значению в точности

    Raises:
        TypeError: Если значение не действительное число или комплексное
        NonFiniteValueError: Если значение NaN или Inf

    Examples:
        >>> to_exact_rational(0.5)
        Fraction(1, 2)
        >>> to_exact_rational(Decimal("1.25"))
        Fraction(5, 4)
        >>> to_exact_rational(7)
        Fraction(7, 1)
    """
    if is_complex(value):
        raise TypeError(
            f"to_exact_rational requires a real number, got complex value {value}; "
            f"convert real and imaginary parts separately"
        )

    if not is_real_number(value):
        raise TypeError(
            f"to_exact_rational requires a real number, got {type(value).__name__}"
        )

    if isinstance(value, numbers.Integral):
        return Fraction(operator.index(value))

    if isinstance(value, numbers.Rational):
        return Fraction(value.numerator, value.denominator)

    if not is_finite(value):
        raise NonFiniteValueError(
            f"{value} has no exact rational representation (NaN/Inf)"
        )

    if not hasattr(value, "as_integer_ratio"):
        raise TypeError(
            f"{type(value).__name__} does not support lossless conversion "
            f"(as_integer_ratio is missing)"
        )

    numerator, denominator = value.as_integer_ratio()
    return Fraction(numerator, denominator)


def is_integer_valued(value: object) -> bool:
    """
    Проверка, равно ли конечное действительное значение целому числу.

    Args:
        value: Действительное значение

    Returns:
        True если точное рациональное представление имеет знаменатель 1;
        False для NaN/Inf и комплексных значений
    """
    if not is_real_number(value) or not is_finite(value):
        return False
    return to_exact_rational(value).denominator == 1
