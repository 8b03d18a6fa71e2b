"""NumberCategory: закрытое перечисление категорий числа

Каждое числовое значение попадает ровно в одну категорию. Порядок проверок
задаёт классификатор (src.describe.classifier):
1. Специальные значения: +inf, -inf, NaN
2. Точные: целое, рациональное, мнимое, комплексное
3. Приближённые: целое, действительное, мнимое, комплексное
4. OTHER: всё остальное
"""

from enum import Enum


class NumberCategory(str, Enum):
    """Категория числа для выбора формы описания."""

    POSITIVE_INFINITY = "POSITIVE_INFINITY"
    NEGATIVE_INFINITY = "NEGATIVE_INFINITY"
    NOT_A_NUMBER = "NOT_A_NUMBER"

    EXACT_INTEGER = "EXACT_INTEGER"
    EXACT_RATIONAL = "EXACT_RATIONAL"
    EXACT_IMAGINARY = "EXACT_IMAGINARY"
    EXACT_COMPLEX = "EXACT_COMPLEX"

    APPROXIMATE_INTEGER = "APPROXIMATE_INTEGER"
    APPROXIMATE_REAL = "APPROXIMATE_REAL"
    APPROXIMATE_IMAGINARY = "APPROXIMATE_IMAGINARY"
    APPROXIMATE_COMPLEX = "APPROXIMATE_COMPLEX"

    OTHER = "OTHER"
