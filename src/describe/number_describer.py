"""Number Describer: английское предложение-описание числа

Композиция описания по категории из classify_number():
- Специальные значения: "<v> is positive infinity" / "negative infinity" / "not-a-number"
- Точные целые: byte (0..255), название числа словами, либо порог 10^102
- Точные рациональные: числитель и знаменатель
- Точные мнимые и комплексные: части числа
- Приближённые: точная десятичная запись (decimal_expansion)
- Приближённые комплексные: рекурсивное описание частей

Каждая категория описывается отдельным методом, выбор метода идёт через
таблицу категория → метод. Композиция тотальна: для любого значения
возвращается строка, исключения не выбрасываются.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Final, Optional

from src.core.contracts import DescriptionContract
from src.core.domain.number_category import NumberCategory
from src.core.domain.number_description import NumberDescription
from src.core.math.complex_value import ComplexValue
from src.core.math.decimal_expansion import expand_decimal
from src.core.math.integer_names import NAME_LIMIT_EXPONENT, name_integer
from src.core.math.number_text import number_text
from src.core.math.numeric_facts import (
    imag_part,
    is_exact,
    is_finite,
    is_number,
    real_part,
    sign,
    to_exact_rational,
)
from src.describe.classifier import classify_number

logger = logging.getLogger(__name__)

# Наибольшее значение, описываемое как byte
BYTE_MAX: Final[int] = 255

# Слова знака: sign() → слово
SIGN_WORDS: Final[Dict[int, str]] = {
    1: "positive",
    -1: "negative",
    0: "zero",
}

# Названия специальных значений
SPECIAL_VALUE_NAMES: Final[Dict[NumberCategory, str]] = {
    NumberCategory.POSITIVE_INFINITY: "positive infinity",
    NumberCategory.NEGATIVE_INFINITY: "negative infinity",
    NumberCategory.NOT_A_NUMBER: "not-a-number",
}


@dataclass(frozen=True)
class DescriberConfig:
    """Конфигурация описателя чисел.

    - byte_max: верхняя граница диапазона byte [0, byte_max]
    - integer_name_limit_exponent: точные целые с |n| >= 10^exponent
      описываются порогом вместо названия (не больше 102, предела таблицы
      масштабов)
    - check_contract: проверять каждое описание контрактом
      number_description (ContractViolation при несоответствии)
    """
    byte_max: int = BYTE_MAX
    integer_name_limit_exponent: int = NAME_LIMIT_EXPONENT
    check_contract: bool = False

    def __post_init__(self) -> None:
        if not 3 <= self.integer_name_limit_exponent <= NAME_LIMIT_EXPONENT:
            raise ValueError(
                f"integer_name_limit_exponent must be in [3, {NAME_LIMIT_EXPONENT}], "
                f"got {self.integer_name_limit_exponent}"
            )
        if not 0 <= self.byte_max < 10**self.integer_name_limit_exponent:
            raise ValueError(
                f"byte_max must be in [0, 10^{self.integer_name_limit_exponent}), "
                f"got {self.byte_max}"
            )


def _sign_word(value: object) -> str:
    return SIGN_WORDS[sign(value)]


def _value_text(value: object, numeric: bool) -> str:
    """Текст значения; пустой repr заменяется именем типа"""
    text = number_text(value) if numeric else repr(value)
    return text or type(value).__name__


class NumberDescriber:
    """Описатель чисел: классификация + композиция предложения.

    Stateless после инициализации: конфигурация неизменяема, вызовы из
    нескольких потоков не требуют синхронизации.
    """

    def __init__(self, config: Optional[DescriberConfig] = None):
        """
        Args:
            config: конфигурация описателя (default: DescriberConfig())
        """
        self.config = config or DescriberConfig()
        self._integer_name_limit = 10**self.config.integer_name_limit_exponent
        self._contract = DescriptionContract() if self.config.check_contract else None

        self._composers: Dict[NumberCategory, Callable[[object, str], str]] = {
            NumberCategory.POSITIVE_INFINITY: self._describe_special,
            NumberCategory.NEGATIVE_INFINITY: self._describe_special,
            NumberCategory.NOT_A_NUMBER: self._describe_special,
            NumberCategory.EXACT_INTEGER: self._describe_exact_integer,
            NumberCategory.EXACT_RATIONAL: self._describe_exact_rational,
            NumberCategory.EXACT_IMAGINARY: self._describe_exact_imaginary,
            NumberCategory.EXACT_COMPLEX: self._describe_exact_complex,
            NumberCategory.APPROXIMATE_INTEGER: self._describe_approximate_integer,
            NumberCategory.APPROXIMATE_REAL: self._describe_approximate_real,
            NumberCategory.APPROXIMATE_IMAGINARY: self._describe_approximate_imaginary,
            NumberCategory.APPROXIMATE_COMPLEX: self._describe_approximate_complex,
            NumberCategory.OTHER: self._describe_other,
        }

    def evaluate(self, value: object) -> NumberDescription:
        """Классификация и описание значения.

        Args:
            value: любое значение

        Returns:
            NumberDescription с категорией и предложением

        Raises:
            ContractViolation: Если включён check_contract и описание не
                соответствует контракту number_description
        """
        category = classify_number(value)
        logger.debug(f"Classified {type(value).__name__} as {category.value}")

        numeric = is_number(value)
        value_text = _value_text(value, numeric)
        text = self._composers[category](value, value_text)

        description = NumberDescription(
            value_text=value_text,
            category=category,
            exact=is_exact(value) if numeric else None,
            text=text,
        )

        if self._contract is not None:
            self._contract.validate(description.model_dump(mode="json"))

        return description

    def describe(self, value: object) -> str:
        """Предложение-описание значения."""
        return self.evaluate(value).text

    # -------------------------------------------------------------------------
    # Специальные значения
    # -------------------------------------------------------------------------

    def _describe_special(self, value: object, value_text: str) -> str:
        return f"{value_text} is {SPECIAL_VALUE_NAMES[classify_number(value)]}"

    # -------------------------------------------------------------------------
    # Точные значения
    # -------------------------------------------------------------------------

    def _describe_exact_integer(self, value: object, value_text: str) -> str:
        """Byte, название словами или порог 10^exponent."""
        n = to_exact_rational(value).numerator

        if 0 <= n <= self.config.byte_max:
            return (
                f"{value_text} is a byte (i.e., an exact non-negative integer "
                f"between 0 and {self.config.byte_max}) {name_integer(n)}"
            )

        magnitude = abs(n)
        if magnitude < self._integer_name_limit:
            return f"{value_text} is an exact {_sign_word(n)} integer {name_integer(magnitude)}"

        return (
            f"{value_text} is an exact {_sign_word(n)} integer value whose absolute value "
            f"is >= 10^{self.config.integer_name_limit_exponent}"
        )

    def _describe_exact_rational(self, value: object, value_text: str) -> str:
        exact = to_exact_rational(value)
        return (
            f"{value_text} is an exact {_sign_word(exact)} rational number "
            f"with a numerator of {number_text(exact.numerator)} "
            f"and a denominator of {number_text(exact.denominator)}"
        )

    def _describe_exact_imaginary(self, value: object, value_text: str) -> str:
        return f"{value_text} is an exact {_sign_word(imag_part(value))} imaginary number"

    def _describe_exact_complex(self, value: object, value_text: str) -> str:
        return (
            f"{value_text} is an exact complex number "
            f"whose real part is {number_text(real_part(value))} "
            f"and whose imaginary part is 0+{number_text(imag_part(value))}i"
        )

    # -------------------------------------------------------------------------
    # Приближённые значения
    # -------------------------------------------------------------------------

    def _describe_approximate_integer(self, value: object, value_text: str) -> str:
        if sign(value) == 0:
            return f"{value_text} is an inexact integer zero"
        return (
            f"{value_text} is an inexact {_sign_word(value)} integer "
            f"whose exact decimal value is {expand_decimal(value)}"
        )

    def _describe_approximate_real(self, value: object, value_text: str) -> str:
        return (
            f"{value_text} is an inexact {_sign_word(value)} real number "
            f"whose exact decimal value is {expand_decimal(value)}"
        )

    def _describe_approximate_imaginary(self, value: object, value_text: str) -> str:
        """Чисто мнимое; неконечная мнимая часть описывается словами, без разложения."""
        imag = imag_part(value)
        if not is_finite(imag):
            return (
                f"{value_text} is an inexact imaginary number "
                f"whose imaginary part is {SPECIAL_VALUE_NAMES[classify_number(imag)]}"
            )
        return (
            f"{value_text} is an inexact {_sign_word(imag)} imaginary number "
            f"whose exact decimal value is 0+{expand_decimal(imag)}i"
        )

    def _describe_approximate_complex(self, value: object, value_text: str) -> str:
        real_description = self.describe(real_part(value))
        imag_description = self.describe(ComplexValue(real=0, imag=imag_part(value)))
        return (
            f"{value_text} is an inexact complex number "
            f"whose real part {real_description} "
            f"and whose imaginary part {imag_description}"
        )

    # -------------------------------------------------------------------------
    # Fallback
    # -------------------------------------------------------------------------

    def _describe_other(self, value: object, value_text: str) -> str:
        return f"{value_text} is a number"


# Описатель с конфигурацией по умолчанию
_DEFAULT_DESCRIBER = NumberDescriber()


def describe_number(value: object) -> str:
    """Английское предложение-описание числа.

    Тотальная функция над числовой моделью: специальные значения
    перехватываются до разложения, исключения не выбрасываются.

    Args:
        value: число (int, Fraction, float, numpy, Decimal, complex, ComplexValue)

    Returns:
        Предложение вида "<значение> is ..."

    Examples:
        >>> describe_number(0)
        '0 is a byte (i.e., an exact non-negative integer between 0 and 255) zero'
        >>> describe_number(Fraction(-3, 4))
        '-3/4 is an exact negative rational number with a numerator of -3 and a denominator of 4'
        >>> describe_number(float("-inf"))
        '-inf is negative infinity'
    """
    return _DEFAULT_DESCRIBER.describe(value)
