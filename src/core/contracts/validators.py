"""
Description Contract: проверка записей NumberDescription

Запись (NumberDescription.model_dump(mode="json")) проверяется в два этапа:
1. JSON Schema number_description.json: форма записи, а для каждой
   категории (allOf / if-then по полю category) флаг exact и шаблон
   предложения после "<value_text> is "
2. Связь полей, которую JSON Schema не выражает: предложение начинается
   ровно с value_text

Все найденные нарушения собираются в один ContractViolation, каждое с
JSON-путём поля ("$.text: ...").

Examples:
    >>> DescriptionContract().problems({"value_text": "7", "category": "OTHER",
    ...                                  "exact": None, "text": "7 is a number"})
    []
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Final, List

from jsonschema import Draft202012Validator

# Каталог JSON Schema файлов (поставляется вместе с пакетом)
SCHEMA_DIR: Final[Path] = Path(__file__).parent / "schema"

# Схема записи описания
DESCRIPTION_SCHEMA: Final[str] = "number_description"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ContractViolation(ValueError):
    """
    Запись описания не соответствует контракту.

    Attributes:
        problems: Список нарушений в порядке JSON-путей полей
    """

    def __init__(self, problems: List[str]):
        self.problems = problems
        super().__init__("; ".join(problems))


# =============================================================================
# SCHEMA LOADING
# =============================================================================


@lru_cache(maxsize=None)
def load_schema(schema_name: str) -> Dict[str, Any]:
    """
    Загрузка и meta-валидация JSON Schema (результат кэшируется).

    Args:
        schema_name: Имя схемы без расширения

    Returns:
        Схема как dict

    Raises:
        FileNotFoundError: Если файл схемы не найден
        jsonschema.SchemaError: Если файл не является валидной схемой draft 2020-12
    """
    schema_path = SCHEMA_DIR / f"{schema_name}.json"
    if not schema_path.exists():
        raise FileNotFoundError(f"Schema not found: {schema_path}")

    with open(schema_path, "r", encoding="utf-8") as f:
        schema = json.load(f)

    Draft202012Validator.check_schema(schema)
    return schema


# =============================================================================
# CONTRACT
# =============================================================================


class DescriptionContract:
    """Контракт записи описания: JSON Schema + проверка префикса предложения."""

    def __init__(self, schema_name: str = DESCRIPTION_SCHEMA):
        self.schema = load_schema(schema_name)
        self._validator = Draft202012Validator(self.schema)

    def problems(self, record: Any) -> List[str]:
        """
        Все нарушения контракта.

        Args:
            record: Запись описания (dict)

        Returns:
            Список строк "<json-путь>: <сообщение>", пустой для валидной записи
        """
        found = [
            f"{error.json_path}: {error.message}"
            for error in sorted(self._validator.iter_errors(record), key=lambda e: e.json_path)
        ]

        if isinstance(record, dict):
            value_text = record.get("value_text")
            text = record.get("text")
            if isinstance(value_text, str) and isinstance(text, str):
                if not text.startswith(f"{value_text} is "):
                    found.append(f"$.text: sentence must start with {value_text + ' is '!r}")

        return found

    def conforms(self, record: Any) -> bool:
        """Проверка соответствия без exception."""
        return not self.problems(record)

    def validate(self, record: Any) -> None:
        """
        Проверка записи.

        Raises:
            ContractViolation: Со всеми найденными нарушениями
        """
        found = self.problems(record)
        if found:
            raise ContractViolation(found)


def validate_number_description(data: Dict[str, Any]) -> None:
    """
    Проверка записи number_description.

    Args:
        data: NumberDescription.model_dump(mode="json")

    Raises:
        ContractViolation: Если запись не соответствует контракту
    """
    DescriptionContract().validate(data)
