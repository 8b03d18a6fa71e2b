"""Describe: описание чисел английскими предложениями.

- classify_number: категория числа (NumberCategory)
- NumberDescriber / describe_number: предложение-описание
"""

from .classifier import classify_number
from .number_describer import (
    BYTE_MAX,
    DescriberConfig,
    NumberDescriber,
    describe_number,
)

__all__ = [
    "classify_number",
    "BYTE_MAX",
    "DescriberConfig",
    "NumberDescriber",
    "describe_number",
]
