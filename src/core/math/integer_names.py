"""
Integer Names: английские названия целых чисел

Преобразование точного целого в английскую запись:
- 0 → "zero", отрицательные → "minus " + название модуля
- 1..999: единицы 1-19, десятки через дефис, сотни с британским " and "
- 1000..10^102: группы по три цифры (основание 1000) со словами масштаба
  thousand .. duotrigillion
- ≥ 10^102: литерал "at least 10^102"

Группы обрабатываются итеративно (без рекурсии по количеству цифр).

Examples:
    >>> name_integer(65536)
    'sixty-five thousand five hundred and thirty-six'
    >>> name_integer(10**100)
    'ten duotrigillion'
"""

import numbers
import operator
from typing import Final

# =============================================================================
# ТАБЛИЦЫ НАЗВАНИЙ
# =============================================================================

# Единицы 0-19 (индекс = значение)
UNIT_NAMES: Final[tuple[str, ...]] = (
    "zero",
    "one",
    "two",
    "three",
    "four",
    "five",
    "six",
    "seven",
    "eight",
    "nine",
    "ten",
    "eleven",
    "twelve",
    "thirteen",
    "fourteen",
    "fifteen",
    "sixteen",
    "seventeen",
    "eighteen",
    "nineteen",
)

# Десятки 20-90 (индекс = значение // 10, индексы 0 и 1 не используются)
TENS_NAMES: Final[tuple[str, ...]] = (
    "",
    "",
    "twenty",
    "thirty",
    "forty",
    "fifty",
    "sixty",
    "seventy",
    "eighty",
    "ninety",
)

# Слова масштаба: индекс k называет 1000^(k+1)
SCALE_NAMES: Final[tuple[str, ...]] = (
    "thousand",
    "million",
    "billion",
    "trillion",
    "quadrillion",
    "quintillion",
    "sextillion",
    "septillion",
    "octillion",
    "nonillion",
    "decillion",
    "undecillion",
    "duodecillion",
    "tredecillion",
    "quattuordecillion",
    "quindecillion",
    "sexdecillion",
    "septendecillion",
    "octodecillion",
    "novemdecillion",
    "vigintillion",
    "unvigintillion",
    "duovigintillion",
    "trevigintillion",
    "quattuorvigintillion",
    "quinvigintillion",
    "sexvigintillion",
    "septenvigintillion",
    "octovigintillion",
    "novemvigintillion",
    "trigintillion",
    "untrigintillion",
    "duotrigillion",
)

# Основание группировки
GROUP_BASE: Final[int] = 1000

# Показатель степени 10, начиная с которого название не строится
NAME_LIMIT_EXPONENT: Final[int] = 3 * (len(SCALE_NAMES) + 1)

# Наименьшее целое без названия (10^102)
NAME_LIMIT: Final[int] = 10**NAME_LIMIT_EXPONENT

# Текст для значений за пределами таблицы масштабов
BEYOND_LIMIT_TEXT: Final[str] = f"at least 10^{NAME_LIMIT_EXPONENT}"


# =============================================================================
# ТРЁХЗНАЧНЫЕ ГРУППЫ
# =============================================================================


def _name_below_hundred(n: int) -> str:
    """Название для 1..99"""
    if n < 20:
        return UNIT_NAMES[n]

    tens, units = divmod(n, 10)
    if units == 0:
        return TENS_NAMES[tens]
    return f"{TENS_NAMES[tens]}-{UNIT_NAMES[units]}"


def name_three_digits(n: int) -> str:
    """
    Название для 1..999.

    Сотни всегда соединяются с остатком через " and ".

    Args:
        n: Значение в диапазоне [1, 999]

    Returns:
        Английское название

    Raises:
        ValueError: Если n вне диапазона [1, 999]

    Examples:
        >>> name_three_digits(101)
        'one hundred and one'
        >>> name_three_digits(999)
        'nine hundred and ninety-nine'
    """
    if not 0 < n < GROUP_BASE:
        raise ValueError(f"n must be in [1, 999], got {n}")

    if n < 100:
        return _name_below_hundred(n)

    hundreds, rest = divmod(n, 100)
    if rest == 0:
        return f"{UNIT_NAMES[hundreds]} hundred"
    return f"{UNIT_NAMES[hundreds]} hundred and {_name_below_hundred(rest)}"


# =============================================================================
# ПРОИЗВОЛЬНЫЕ ЦЕЛЫЕ
# =============================================================================


def _name_grouped(n: int) -> str:
    """
    Название для 1000 <= n < NAME_LIMIT через группы по три цифры.

    Младшая группа < 20 получает префикс "and ", нулевые группы пропускаются.
    """
    parts: list[str] = []
    group_index = 0
    while n:
        n, group = divmod(n, GROUP_BASE)
        if group:
            if group_index == 0:
                words = name_three_digits(group)
                parts.append(f"and {words}" if group < 20 else words)
            else:
                parts.append(f"{name_three_digits(group)} {SCALE_NAMES[group_index - 1]}")
        group_index += 1

    # Группы собраны от младших к старшим
    return " ".join(reversed(parts))


def name_integer(n: numbers.Integral) -> str:
    """
    Английское название точного целого числа.

    Args:
        n: Точное целое (int, numpy integer, любой numbers.Integral)

    Returns:
        Название числа:
        - 0 → "zero"
        - n < 0 → "minus " + name_integer(-n)
        - |n| >= 10^102 → "at least 10^102"

    Raises:
        TypeError: Если n не целое (например, float или Fraction)

    Examples:
        >>> name_integer(0)
        'zero'
        >>> name_integer(-21)
        'minus twenty-one'
        >>> name_integer(1005)
        'one thousand and five'
        >>> name_integer(10**150)
        'at least 10^102'
    """
    if isinstance(n, bool) or not isinstance(n, numbers.Integral):
        raise TypeError(f"name_integer requires an exact integer, got {type(n).__name__}")

    n = operator.index(n)

    if n == 0:
        return UNIT_NAMES[0]

    if n < 0:
        return f"minus {name_integer(-n)}"

    if n < GROUP_BASE:
        return name_three_digits(n)

    if n < NAME_LIMIT:
        return _name_grouped(n)

    return BEYOND_LIMIT_TEXT
