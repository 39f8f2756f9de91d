"""
Predefined alphabets

Стандартные алфавиты, создаваемые один раз при импорте и разделяемые
только для чтения.
"""

from typing import Final

from src.core.alphabet.symbol_table import SymbolTable

BINARY: Final[SymbolTable] = SymbolTable("01")

OCTAL: Final[SymbolTable] = SymbolTable("01234567")

DECIMAL: Final[SymbolTable] = SymbolTable("0123456789")

HEXADECIMAL: Final[SymbolTable] = SymbolTable("0123456789ABCDEF")

# Bitcoin-style: без 0, O, I, l
BASE58: Final[SymbolTable] = SymbolTable(
    "123456789"
    "ABCDEFGHJKLMNPQRSTUVWXYZ"
    "abcdefghijkmnopqrstuvwxyz"
)

BASE64: Final[SymbolTable] = SymbolTable(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    "abcdefghijklmnopqrstuvwxyz"
    "0123456789"
    "+/"
)
