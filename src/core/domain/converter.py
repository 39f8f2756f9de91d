"""
Converter: stateless encode/decode/convert

Функции для вызывающего кода, которому не нужен промежуточный NumericValue.
"""

from src.core.alphabet.symbol_table import SymbolTable
from src.core.domain.numeric_value import NumericValue, convert_string


def decode(encoded: str, table: SymbolTable) -> int:
    """
    Декодирование encoded строки в магнитуду (arbitrary precision).

    Raises:
        InvalidSymbolError: Если строка пуста или содержит символ вне алфавита

    Examples:
        >>> from src.core.alphabet import HEXADECIMAL
        >>> decode("FF", HEXADECIMAL)
        255
    """
    return NumericValue.from_encoded(encoded, table).to_big_value()


def encode(value: int, table: SymbolTable) -> str:
    """
    Кодирование неотрицательной магнитуды в алфавит.

    Raises:
        NotIntegerError: Если value не int
        NegativeValueError: Если value < 0

    Examples:
        >>> from src.core.alphabet import BINARY
        >>> encode(11, BINARY)
        '1011'
    """
    return NumericValue.from_big(value, table).to_string()


def convert(*, encoded_value: str, original_base: SymbolTable, target_base: SymbolTable) -> str:
    """
    Перекодирование строки из original_base в target_base.

    Examples:
        >>> from src.core.alphabet import DECIMAL, HEXADECIMAL
        >>> convert(encoded_value="FF", original_base=HEXADECIMAL, target_base=DECIMAL)
        '255'
    """
    return convert_string(encoded_value, original_base, target_base)
