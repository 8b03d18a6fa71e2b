"""
Тесты для модуля Numeric Facts

Проверяет:
1. Вид и точность значений (exact / approximate / complex)
2. Детекцию специальных значений (NaN, +inf, -inf)
3. Знак, точный ноль, целочисленность
4. Точную конверсию в Fraction (без округления)
"""

from decimal import Decimal
from fractions import Fraction

import numpy as np
import pytest

from src.core.math.complex_value import ComplexValue
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

# =============================================================================
# ТЕСТЫ ВИДА И ТОЧНОСТИ
# =============================================================================


class TestExactness:
    """Тесты для is_exact / is_approximate"""

    @pytest.mark.parametrize(
        "value",
        [0, -7, 10**200, Fraction(1, 3), np.int32(5), np.uint64(9)],
    )
    def test_exact_values(self, value) -> None:
        """int, Fraction и numpy integer точны"""
        assert is_exact(value)
        assert not is_approximate(value)

    @pytest.mark.parametrize(
        "value",
        [
            0.0,
            1.5,
            float("nan"),
            np.float16(0.1),
            np.float32(0.1),
            np.float64(0.1),
            np.longdouble(0.1),
            Decimal("0.1"),
            complex(1, 2),
            np.complex64(1 + 2j),
        ],
    )
    def test_approximate_values(self, value) -> None:
        """float, numpy floating, Decimal и complex приближённые"""
        assert is_approximate(value)
        assert not is_exact(value)

    def test_complex_value_exact_iff_both_parts_exact(self) -> None:
        """ComplexValue точен только при обеих точных частях"""
        assert is_exact(ComplexValue(real=0, imag=Fraction(1, 2)))
        assert not is_exact(ComplexValue(real=0, imag=0.5))
        assert is_approximate(ComplexValue(real=0, imag=0.5))
        assert is_approximate(ComplexValue(real=0.5, imag=1))

    def test_bool_is_not_a_number(self) -> None:
        """bool не считается числом"""
        assert not is_number(True)
        assert not is_exact(False)
        assert not is_approximate(True)

    def test_non_numbers(self) -> None:
        for value in ("1", None, [1]):
            assert not is_number(value)
            assert not is_exact(value)
            assert not is_approximate(value)


class TestKind:
    """Тесты для is_real_number / is_complex"""

    def test_real_numbers(self) -> None:
        for value in (1, Fraction(1, 2), 1.0, np.float32(1), Decimal("1")):
            assert is_real_number(value)
            assert not is_complex(value)

    def test_complex_numbers(self) -> None:
        for value in (complex(1, 2), np.complex128(1j), ComplexValue(real=0, imag=1)):
            assert is_complex(value)
            assert not is_real_number(value)
            assert is_number(value)


# =============================================================================
# ТЕСТЫ СПЕЦИАЛЬНЫХ ЗНАЧЕНИЙ
# =============================================================================


class TestSpecialValues:
    """Тесты для is_nan / is_positive_infinity / is_negative_infinity / is_finite"""

    @pytest.mark.parametrize(
        "value",
        [float("nan"), np.float32("nan"), np.longdouble("nan"), Decimal("NaN"), Decimal("sNaN")],
    )
    def test_nan(self, value) -> None:
        assert is_nan(value)
        assert not is_finite(value)
        assert not is_positive_infinity(value)
        assert not is_negative_infinity(value)

    @pytest.mark.parametrize(
        "value",
        [float("inf"), np.float16("inf"), Decimal("Infinity")],
    )
    def test_positive_infinity(self, value) -> None:
        assert is_positive_infinity(value)
        assert not is_negative_infinity(value)
        assert not is_nan(value)
        assert not is_finite(value)

    @pytest.mark.parametrize(
        "value",
        [float("-inf"), np.float64("-inf"), Decimal("-Infinity")],
    )
    def test_negative_infinity(self, value) -> None:
        assert is_negative_infinity(value)
        assert not is_positive_infinity(value)
        assert not is_finite(value)

    def test_complex_values_are_never_sentinels(self) -> None:
        """Комплексное значение с NaN/Inf частью не является специальным значением"""
        value = complex(float("inf"), float("nan"))
        assert not is_positive_infinity(value)
        assert not is_nan(value)
        assert not is_finite(value)

    def test_exact_values_are_finite(self) -> None:
        assert is_finite(10**500)
        assert is_finite(Fraction(-1, 3))
        assert is_finite(ComplexValue(real=1, imag=2))

    def test_finite_approximate_values(self) -> None:
        assert is_finite(1e308)
        assert is_finite(Decimal("1e100000"))
        assert is_finite(complex(1, 2))


# =============================================================================
# ТЕСТЫ ЗНАКА И ЗНАЧЕНИЯ
# =============================================================================


class TestSign:
    """Тесты для sign"""

    def test_positive_and_negative(self) -> None:
        assert sign(5) == 1
        assert sign(-5) == -1
        assert sign(Fraction(-1, 3)) == -1
        assert sign(np.float32(0.25)) == 1
        assert sign(Decimal("-0.001")) == -1

    def test_zeros_have_sign_zero(self) -> None:
        """Приближённый ноль, включая -0.0, имеет знак 0"""
        assert sign(0) == 0
        assert sign(0.0) == 0
        assert sign(-0.0) == 0
        assert sign(Decimal("-0")) == 0
        assert sign(np.float32(-0.0)) == 0

    def test_infinities(self) -> None:
        assert sign(float("inf")) == 1
        assert sign(Decimal("-Infinity")) == -1

    def test_nan_raises(self) -> None:
        with pytest.raises(ValueError, match="undefined for NaN"):
            sign(float("nan"))
        with pytest.raises(ValueError, match="undefined for NaN"):
            sign(Decimal("NaN"))

    def test_complex_raises(self) -> None:
        with pytest.raises(TypeError, match="requires a real number"):
            sign(complex(1, 1))


class TestExactZeroAndParts:
    """Тесты для is_exact_zero / real_part / imag_part"""

    def test_exact_zero(self) -> None:
        """Только точный ноль является точным нулём"""
        assert is_exact_zero(0)
        assert is_exact_zero(Fraction(0))
        assert is_exact_zero(np.int8(0))
        assert not is_exact_zero(0.0)
        assert not is_exact_zero(Decimal("0"))
        assert not is_exact_zero(1)

    def test_parts_of_real_value(self) -> None:
        """Мнимая часть действительного значения: точный ноль"""
        assert real_part(2.5) == 2.5
        assert imag_part(2.5) == 0
        assert is_exact_zero(imag_part(2.5))

    def test_parts_of_builtin_complex(self) -> None:
        """Части встроенного complex: float"""
        value = complex(0, 3)
        assert real_part(value) == 0.0
        assert isinstance(real_part(value), float)
        assert not is_exact_zero(real_part(value))
        assert imag_part(value) == 3.0

    def test_parts_of_complex_value(self) -> None:
        value = ComplexValue(real=0, imag=Decimal("1.5"))
        assert is_exact_zero(real_part(value))
        assert imag_part(value) == Decimal("1.5")


class TestIntegerValued:
    """Тесты для is_integer_valued"""

    def test_integer_valued(self) -> None:
        for value in (2, 2.0, -0.0, np.float32(4.0), Decimal("3.000"), Fraction(6, 3), 1e300):
            assert is_integer_valued(value)

    def test_not_integer_valued(self) -> None:
        for value in (2.5, Fraction(1, 2), Decimal("0.1"), float("inf"), float("nan"), complex(1, 0)):
            assert not is_integer_valued(value)


# =============================================================================
# ТЕСТЫ ТОЧНОЙ КОНВЕРСИИ
# =============================================================================


class TestToExactRational:
    """Тесты для to_exact_rational"""

    def test_exact_values_unchanged(self) -> None:
        assert to_exact_rational(7) == Fraction(7)
        assert to_exact_rational(Fraction(-2, 6)) == Fraction(-1, 3)
        assert to_exact_rational(np.int16(-3)) == Fraction(-3)

    def test_binary_floats_are_dyadic(self) -> None:
        """Двоичные форматы дают знаменатель-степень 2 без округления"""
        assert to_exact_rational(0.5) == Fraction(1, 2)
        assert to_exact_rational(0.1) == Fraction(3602879701896397, 36028797018963968)
        assert to_exact_rational(np.float32(0.1)) == Fraction(13421773, 134217728)
        assert to_exact_rational(np.float16(0.1)) == Fraction(819, 8192)

    def test_decimal_values(self) -> None:
        assert to_exact_rational(Decimal("1.25")) == Fraction(5, 4)
        assert to_exact_rational(Decimal("-0.001")) == Fraction(-1, 1000)
        assert to_exact_rational(Decimal("1E+3")) == Fraction(1000)

    def test_result_is_reduced(self) -> None:
        exact = to_exact_rational(Decimal("12.500"))
        assert exact.numerator == 25
        assert exact.denominator == 2

    @pytest.mark.parametrize(
        "value",
        [float("inf"), float("-inf"), float("nan"), Decimal("NaN"), np.float32("inf")],
    )
    def test_non_finite_raises(self, value) -> None:
        with pytest.raises(NonFiniteValueError, match="no exact rational representation"):
            to_exact_rational(value)

    def test_non_finite_error_is_value_error(self) -> None:
        assert issubclass(NonFiniteValueError, ValueError)

    def test_complex_raises(self) -> None:
        with pytest.raises(TypeError, match="complex"):
            to_exact_rational(complex(1, 2))
        with pytest.raises(TypeError, match="complex"):
            to_exact_rational(ComplexValue(real=0, imag=1))

    def test_non_number_raises(self) -> None:
        with pytest.raises(TypeError, match="requires a real number"):
            to_exact_rational("0.1")
        with pytest.raises(TypeError, match="requires a real number"):
            to_exact_rational(True)
