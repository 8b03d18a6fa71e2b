"""
Domain models and value objects.

Contains the number category enumeration and the description result model.
"""

from src.core.domain.number_category import NumberCategory
from src.core.domain.number_description import NumberDescription

__all__ = [
    # Number category
    "NumberCategory",
    # Description model
    "NumberDescription",
]
