"""
ComplexValue: комплексное число со смешанной точностью частей

Встроенный complex хранит обе части как float (обе приближённые).
ComplexValue допускает любую комбинацию:
- точная действительная часть + точная мнимая (точное комплексное число)
- точный ноль + приближённая мнимая часть (чисто мнимое приближённое)
- приближённые части (эквивалент complex)

Immutable Pydantic модель. Части: int / Fraction / numbers.Integral
(точные) или float / numpy floating / Decimal (приближённые).
"""

import numbers
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, Field, field_validator

from src.core.math.number_text import number_text


class ComplexValue(BaseModel):
    """
    Комплексное значение (real, imag).

    Число точное тогда и только тогда, когда точны обе части.
    Значение с точно нулевой действительной частью описывается как
    чисто мнимое, даже если мнимая часть тоже равна нулю.

    Examples:
        >>> str(ComplexValue(real=0, imag=1.5))
        '0+1.5i'
        >>> str(ComplexValue(real=Fraction(1, 2), imag=-3))
        '1/2-3i'
    """

    real: Any = Field(..., description="Действительная часть (точная или приближённая)")
    imag: Any = Field(..., description="Мнимая часть (точная или приближённая)")

    model_config = {"frozen": True}

    @field_validator("real", "imag")
    @classmethod
    def validate_real_part(cls, v: Any) -> Any:
        """Каждая часть должна быть действительным числом"""
        if isinstance(v, bool) or not isinstance(v, (numbers.Real, Decimal)):
            raise ValueError(
                f"ComplexValue parts must be real numbers, got {type(v).__name__}"
            )
        return v

    def __str__(self) -> str:
        imag_text = number_text(self.imag)
        if imag_text.startswith("-"):
            return f"{number_text(self.real)}{imag_text}i"
        return f"{number_text(self.real)}+{imag_text}i"
