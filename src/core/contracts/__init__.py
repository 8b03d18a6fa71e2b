"""
Contract Validation Module

Контракт записей описаний чисел (JSON Schema + связь полей).
"""

from .validators import (
    DESCRIPTION_SCHEMA,
    ContractViolation,
    DescriptionContract,
    load_schema,
    validate_number_description,
)

__all__ = [
    "DESCRIPTION_SCHEMA",
    "ContractViolation",
    "DescriptionContract",
    "load_schema",
    "validate_number_description",
]
