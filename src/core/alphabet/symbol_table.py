"""
SymbolTable: неизменяемый упорядоченный алфавит custom base

Алфавит задаёт систему счисления:
- Порядок символов определяет значения цифр 0..base-1
- base = количество символов
- Двусторонний lookup symbol ↔ digit value за O(1)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Минимум 2 символа, каждый ровно один character, все уникальны
2. value_of_symbol(symbol_of_value(v)) == v для всех v в [0, base)
3. После конструирования таблица не изменяется
"""

from collections.abc import Iterator, Sequence
from typing import Final

from src.core.errors import ConfigurationError

# Минимальный размер алфавита (base 2)
MIN_SYMBOLS: Final[int] = 2


class SymbolTable:
    """
    Алфавит custom base.

    Принимает строку ('0123456789ABCDEF') или последовательность
    односимвольных строк (['0', '1']). Разделяется между любым количеством
    NumericValue только для чтения.

    Examples:
        >>> table = SymbolTable("ABCD")
        >>> table.base
        4
        >>> table.value_of_symbol("C")
        2
        >>> table.symbol_of_value(1)
        'B'
    """

    def __init__(self, symbols: str | Sequence[str]):
        """
        Инициализация алфавита.

        Args:
            symbols: Строка или последовательность уникальных односимвольных строк

        Raises:
            ConfigurationError: Если символов меньше двух, элемент не является
                одним символом или символы повторяются
        """
        if len(symbols) < MIN_SYMBOLS:
            raise ConfigurationError("At least two symbols are required for a base.")

        if isinstance(symbols, str):
            ordered = tuple(symbols)
        else:
            if any(not isinstance(symbol, str) or len(symbol) != 1 for symbol in symbols):
                raise ConfigurationError("Each symbol must be a single character.")
            ordered = tuple(symbols)

        if len(set(ordered)) != len(ordered):
            raise ConfigurationError("Symbols must be unique.")

        # digit value -> symbol
        self._symbols: tuple[str, ...] = ordered
        # symbol -> digit value
        self._values: dict[str, int] = {symbol: value for value, symbol in enumerate(ordered)}

    @property
    def base(self) -> int:
        """Основание системы счисления (размер алфавита)."""
        return len(self._symbols)

    @property
    def symbols(self) -> list[str]:
        """Копия упорядоченного алфавита. Изменение копии не затрагивает таблицу."""
        return list(self._symbols)

    @property
    def zero_symbol(self) -> str:
        """Символ цифры 0."""
        return self._symbols[0]

    def has_symbol(self, symbol: str) -> bool:
        """Проверка принадлежности символа алфавиту."""
        return symbol in self._values

    def value_of_symbol(self, symbol: str) -> int | None:
        """
        Значение цифры для символа.

        Returns:
            Значение в [0, base) или None, если символа нет в алфавите
        """
        return self._values.get(symbol)

    def symbol_of_value(self, value: int) -> str | None:
        """
        Символ для значения цифры.

        Отрицательные индексы не оборачиваются с конца.

        Returns:
            Символ или None, если value вне [0, base)
        """
        if 0 <= value < len(self._symbols):
            return self._symbols[value]
        return None

    def __len__(self) -> int:
        return len(self._symbols)

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._symbols)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SymbolTable):
            return NotImplemented
        return self._symbols == other._symbols

    def __hash__(self) -> int:
        return hash(self._symbols)

    def __repr__(self) -> str:
        return f"SymbolTable({''.join(self._symbols)!r})"
