"""
Positional: алгоритмы позиционного кодирования

Чистые функции decode/encode над SymbolTable:
- decode: value = value * base + digit_value (слева направо)
- encode: повторное деление на base, символ остатка добавляется в начало

Два варианта арифметики:
- wide: arbitrary precision, без ограничений на промежуточные значения
- native: каждый промежуточный результат проверяется против native_ceiling

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ноль кодируется одним zero-символом, никогда пустой строкой
2. Encode не порождает незначащих ведущих zero-символов
3. Native decode никогда не выходит за native_ceiling молча
"""

from src.core.alphabet.symbol_table import SymbolTable
from src.core.errors import InvalidSymbolError, MagnitudeOverflowError
from src.core.math.native_range import DEFAULT_RANGE, NativeRangeConfig, is_native_safe


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def _invalid_symbol(symbol: str, position: int) -> InvalidSymbolError:
    return InvalidSymbolError(
        f'Invalid symbol "{symbol}" at position {position} for the given custom base.',
        symbol=symbol,
        position=position,
    )


def validate_encoded(encoded: str, table: SymbolTable) -> None:
    """
    Проверка, что каждый символ encoded строки есть в алфавите.

    Args:
        encoded: Строка символов custom base
        table: Алфавит

    Raises:
        InvalidSymbolError: На первом символе вне алфавита, если строка пуста
            или не является str
    """
    if not isinstance(encoded, str):
        raise InvalidSymbolError(
            f"Encoded value must be a str, got {type(encoded).__name__}"
        )

    if not encoded:
        raise InvalidSymbolError("Encoded value must contain at least one symbol.")

    for position, symbol in enumerate(encoded):
        if not table.has_symbol(symbol):
            raise _invalid_symbol(symbol, position)


# =============================================================================
# DECODE
# =============================================================================


def decode_wide(encoded: str, table: SymbolTable) -> int:
    """
    Декодирование с arbitrary-precision накоплением.

    Returns:
        Магнитуда (int любой величины)

    Raises:
        InvalidSymbolError: Если встречен символ вне алфавита

    Examples:
        >>> from src.core.alphabet import BINARY
        >>> decode_wide("1011", BINARY)
        11
    """
    base = table.base
    value = 0
    for position, symbol in enumerate(encoded):
        digit = table.value_of_symbol(symbol)
        if digit is None:
            raise _invalid_symbol(symbol, position)
        value = value * base + digit
    return value


def decode_native(
    encoded: str,
    table: SymbolTable,
    config: NativeRangeConfig = DEFAULT_RANGE,
) -> int:
    """
    Декодирование с native-width накоплением.

    Каждый промежуточный результат обязан оставаться в [0, native_ceiling].

    Raises:
        InvalidSymbolError: Если встречен символ вне алфавита
        MagnitudeOverflowError: Если магнитуда выходит за native_ceiling
    """
    base = table.base
    ceiling = config.native_ceiling
    value = 0
    for position, symbol in enumerate(encoded):
        digit = table.value_of_symbol(symbol)
        if digit is None:
            raise _invalid_symbol(symbol, position)
        value = value * base + digit
        if value > ceiling:
            raise MagnitudeOverflowError(
                f"Encoded value {encoded!r} exceeds the maximum safe integer ({ceiling})"
            )
    return value


# =============================================================================
# ENCODE
# =============================================================================


def _encode_positional(value: int, table: SymbolTable) -> str:
    if value == 0:
        # Явный случай: цикл ниже вернул бы пустую строку
        return table.zero_symbol

    base = table.base
    digits: list[str] = []
    while value > 0:
        value, remainder = divmod(value, base)
        digits.append(table.symbol_of_value(remainder))
    return "".join(reversed(digits))


def encode_wide(value: int, table: SymbolTable) -> str:
    """
    Кодирование arbitrary-precision магнитуды.

    Args:
        value: Неотрицательная магнитуда
        table: Целевой алфавит

    Returns:
        Encoded строка без ведущих zero-символов

    Examples:
        >>> from src.core.alphabet import HEXADECIMAL
        >>> encode_wide(255, HEXADECIMAL)
        'FF'
        >>> encode_wide(0, HEXADECIMAL)
        '0'
    """
    return _encode_positional(value, table)


def encode_native(
    value: int,
    table: SymbolTable,
    config: NativeRangeConfig = DEFAULT_RANGE,
) -> str:
    """
    Кодирование native магнитуды.

    Raises:
        MagnitudeOverflowError: Если value вне native диапазона
    """
    if not is_native_safe(value, config):
        raise MagnitudeOverflowError(
            f"Native encode requires 0 <= value <= {config.native_ceiling}, got {value}"
        )
    return _encode_positional(value, table)
