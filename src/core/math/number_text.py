"""
Number Text: текстовое представление числовых значений

Модуль формирует текст значения, который подставляется в начало описания
("<значение> is ..."):
- Целые числа: десятичные цифры без ограничения длины
- Рациональные числа: "numerator/denominator"
- Остальные значения: str(value)

Извлечение цифр целого выполняется делением по блокам из DIGITS_PER_CHUNK
цифр, поэтому не зависит от лимита int -> str интерпретатора
(sys.get_int_max_str_digits).
"""

import numbers
import operator
from typing import Final

# =============================================================================
# ПАРАМЕТРЫ ИЗВЛЕЧЕНИЯ ЦИФР
# =============================================================================

# Количество десятичных цифр, извлекаемых одним делением
DIGITS_PER_CHUNK: Final[int] = 18

# Делитель для одного блока цифр
CHUNK_BASE: Final[int] = 10**DIGITS_PER_CHUNK


# =============================================================================
# ЦЕЛЫЕ ЧИСЛА
# =============================================================================


def integer_to_decimal_string(n: int) -> str:
    """
    Десятичная запись целого числа произвольной длины.

    Алгоритм: повторное деление на CHUNK_BASE, остатки собираются от младших
    блоков к старшим; все блоки кроме старшего дополняются нулями слева.

    Args:
        n: Целое число (любой знак, любая величина)

    Returns:
        Десятичная запись, "-" для отрицательных

    Examples:
        >>> integer_to_decimal_string(0)
        '0'
        >>> integer_to_decimal_string(-1234)
        '-1234'
        >>> integer_to_decimal_string(10**20)
        '100000000000000000000'
    """
    n = operator.index(n)
    if n == 0:
        return "0"

    magnitude = abs(n)
    chunks: list[int] = []
    while magnitude:
        magnitude, chunk = divmod(magnitude, CHUNK_BASE)
        chunks.append(chunk)

    # Старший блок без ведущих нулей, остальные фиксированной ширины
    head = str(chunks[-1])
    tail = "".join(f"{chunk:0{DIGITS_PER_CHUNK}d}" for chunk in reversed(chunks[:-1]))
    prefix = "-" if n < 0 else ""
    return prefix + head + tail


# =============================================================================
# ПРОИЗВОЛЬНЫЕ ЗНАЧЕНИЯ
# =============================================================================


def number_text(value: object) -> str:
    """
    Текст числового значения для подстановки в описание.

    Args:
        value: Любое значение

    Returns:
        - numbers.Integral (кроме bool): десятичные цифры
        - numbers.Rational: "numerator/denominator", со знаменателем 1
          как целое
        - иначе: str(value)

    Examples:
        >>> number_text(Fraction(-3, 4))
        '-3/4'
        >>> number_text(Fraction(4, 2))
        '2'
        >>> number_text(0.1)
        '0.1'
    """
    if isinstance(value, bool):
        return str(value)

    if isinstance(value, numbers.Integral):
        return integer_to_decimal_string(value)

    if isinstance(value, numbers.Rational):
        if value.denominator == 1:
            return integer_to_decimal_string(value.numerator)
        numerator = integer_to_decimal_string(value.numerator)
        denominator = integer_to_decimal_string(value.denominator)
        return f"{numerator}/{denominator}"

    return str(value)
