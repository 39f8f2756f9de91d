"""
Alphabets: symbol tables для custom base систем счисления
"""

from src.core.alphabet.defaults import (
    BASE58,
    BASE64,
    BINARY,
    DECIMAL,
    HEXADECIMAL,
    OCTAL,
)
from src.core.alphabet.symbol_table import MIN_SYMBOLS, SymbolTable

__all__ = [
    # Symbol table
    "MIN_SYMBOLS",
    "SymbolTable",
    # Predefined alphabets
    "BINARY",
    "OCTAL",
    "DECIMAL",
    "HEXADECIMAL",
    "BASE58",
    "BASE64",
]
