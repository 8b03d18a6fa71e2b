"""
Core math modules для описания чисел

Числовые примитивы: факты о значении, точная конверсия, названия целых,
точное десятичное разложение.
"""

# Number Text
from src.core.math.number_text import (
    CHUNK_BASE,
    DIGITS_PER_CHUNK,
    integer_to_decimal_string,
    number_text,
)

# Complex Value
from src.core.math.complex_value import ComplexValue

# Numeric Facts
from src.core.math.numeric_facts import (
    NonFiniteValueError,
    imag_part,
    is_approximate,
    is_complex,
    is_exact,
    is_exact_zero,
    is_finite,
    is_integer_valued,
    is_nan,
    is_negative_infinity,
    is_number,
    is_positive_infinity,
    is_real_number,
    real_part,
    sign,
    to_exact_rational,
)

# Integer Names
from src.core.math.integer_names import (
    BEYOND_LIMIT_TEXT,
    GROUP_BASE,
    NAME_LIMIT,
    NAME_LIMIT_EXPONENT,
    SCALE_NAMES,
    TENS_NAMES,
    UNIT_NAMES,
    name_integer,
    name_three_digits,
)

# Decimal Expansion
from src.core.math.decimal_expansion import (
    expand_decimal,
    fraction_digits,
    has_terminating_expansion,
)

__all__ = [
    # Number Text
    "CHUNK_BASE",
    "DIGITS_PER_CHUNK",
    "integer_to_decimal_string",
    "number_text",
    # Complex Value
    "ComplexValue",
    # Numeric Facts: Exceptions
    "NonFiniteValueError",
    # Numeric Facts: Functions
    "imag_part",
    "is_approximate",
    "is_complex",
    "is_exact",
    "is_exact_zero",
    "is_finite",
    "is_integer_valued",
    "is_nan",
    "is_negative_infinity",
    "is_number",
    "is_positive_infinity",
    "is_real_number",
    "real_part",
    "sign",
    "to_exact_rational",
    # Integer Names: Constants
    "BEYOND_LIMIT_TEXT",
    "GROUP_BASE",
    "NAME_LIMIT",
    "NAME_LIMIT_EXPONENT",
    "SCALE_NAMES",
    "TENS_NAMES",
    "UNIT_NAMES",
    # Integer Names: Functions
    "name_integer",
    "name_three_digits",
    # Decimal Expansion
    "expand_decimal",
    "fraction_digits",
    "has_terminating_expansion",
]
