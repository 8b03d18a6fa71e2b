"""
NumberDescription: результат описания числа

Immutable Pydantic модель, возвращаемая NumberDescriber.evaluate().
Полная совместимость с JSON Schema
(src/core/contracts/schema/number_description.json).
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from src.core.domain.number_category import NumberCategory


class NumberDescription(BaseModel):
    """
    Описание числа.

    Immutable модель (frozen=True). Содержит:
    - value_text: текст значения (начало предложения)
    - category: категория из классификатора
    - exact: точность значения (None для значений вне числовой модели)
    - text: итоговое предложение
    """

    value_text: str = Field(..., min_length=1, description="Текст описываемого значения")
    category: NumberCategory = Field(..., description="Категория числа")
    exact: Optional[bool] = Field(None, description="Точное ли значение (nullable)")
    text: str = Field(..., min_length=1, description="Предложение-описание")

    model_config = {"frozen": True}

    @field_validator("text")
    @classmethod
    def validate_text_starts_with_value(cls, v: str, info) -> str:
        """Предложение начинается с текста значения"""
        if "value_text" in info.data:
            value_text = info.data["value_text"]
            if not v.startswith(f"{value_text} is "):
                raise ValueError(f"text must start with '{value_text} is ', got '{v[:40]}'")
        return v
