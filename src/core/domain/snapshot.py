"""
EncodedValueSnapshot: сериализуемый снимок значения custom base

Immutable Pydantic модель: алфавит + encoded строка.
Соответствует JSON Schema контракту encoded_value.
"""

from typing import Final

from pydantic import BaseModel, Field, field_validator

from src.core.alphabet.symbol_table import SymbolTable
from src.core.domain.numeric_value import NumericValue
from src.core.errors import CustomBaseError

SNAPSHOT_SCHEMA_VERSION: Final[str] = "1"


class EncodedValueSnapshot(BaseModel):
    """
    Снимок значения custom base.

    Доменные ошибки (ConfigurationError, InvalidSymbolError) внутри
    валидаторов превращаются в ValueError, поэтому наружу выходит
    pydantic ValidationError.
    """

    schema_version: str = Field(
        SNAPSHOT_SCHEMA_VERSION, pattern=r"^1$", description="Версия контракта"
    )
    alphabet: tuple[str, ...] = Field(..., min_length=2, description="Упорядоченный алфавит")
    encoded: str = Field(..., min_length=1, description="Encoded значение")

    model_config = {"frozen": True}

    @field_validator("alphabet")
    @classmethod
    def validate_alphabet(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """Алфавит должен строиться как SymbolTable."""
        try:
            SymbolTable(v)
        except CustomBaseError as e:
            raise ValueError(str(e)) from e
        return v

    @field_validator("encoded")
    @classmethod
    def validate_encoded_symbols(cls, v: str, info) -> str:
        """Каждый символ encoded должен быть в алфавите."""
        if "alphabet" not in info.data:
            return v

        allowed = set(info.data["alphabet"])
        for position, symbol in enumerate(v):
            if symbol not in allowed:
                raise ValueError(f'Invalid symbol "{symbol}" at position {position}')
        return v

    def symbol_table(self) -> SymbolTable:
        """SymbolTable, построенный по алфавиту снимка."""
        return SymbolTable(self.alphabet)

    def to_numeric_value(self) -> NumericValue:
        """Восстановление NumericValue из снимка."""
        return NumericValue.from_encoded(self.encoded, self.symbol_table())

    @classmethod
    def from_numeric_value(cls, value: NumericValue) -> "EncodedValueSnapshot":
        """Снимок NumericValue (encoded форма в его собственном алфавите)."""
        return cls(
            alphabet=value.symbol_table.symbols,
            encoded=value.to_string(),
        )
