"""
Contract Validation Module

Модуль для валидации JSON контрактов custom base codec.
"""

from .validators import (
    AlphabetValidator,
    ContractValidator,
    EncodedValueValidator,
    SchemaLoader,
    validate_alphabet,
    validate_encoded_value,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "AlphabetValidator",
    "EncodedValueValidator",
    # Functions
    "validate_alphabet",
    "validate_encoded_value",
]
