"""
NumericValue: лениво материализуемое число в custom base

Одна неотрицательная магнитуда + ровно один SymbolTable.

Внутренние представления (каждое опционально, вычисляется по требованию):
- encoded:     строка символов алфавита
- narrow:      native integer (только если магнитуда <= native_ceiling)
- wide:        arbitrary-precision integer (вмещает любую магнитуду)
- fits_narrow: кэшированный флаг "магнитуда помещается в native форму"

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Хотя бы одно из encoded/narrow/wide заполнено при конструировании
2. Все заполненные представления обозначают одну и ту же магнитуду
3. Вычисленное представление кэшируется и никогда не пересчитывается
4. Конверсии создают новые экземпляры, исходный никогда не мутирует
5. to_native() никогда не теряет точность молча

Кэш заполняется простым присваиванием детерминированного значения:
гонка при конкурентном чтении даёт повторную работу, но не порчу данных.
"""

import logging

from src.core.alphabet.defaults import DECIMAL
from src.core.alphabet.symbol_table import SymbolTable
from src.core.errors import (
    ConfigurationError,
    MagnitudeOverflowError,
    UnsafeNativeConversionError,
)
from src.core.math.native_range import (
    DEFAULT_RANGE,
    NativeRangeConfig,
    is_native_safe,
    validate_big_input,
    validate_native_input,
)
from src.core.math.positional import (
    decode_native,
    decode_wide,
    encode_native,
    encode_wide,
    validate_encoded,
)

logger = logging.getLogger(__name__)


def _resolve_table(table: SymbolTable | None, required: bool = False) -> SymbolTable:
    if table is None:
        if required:
            raise ConfigurationError("A SymbolTable instance is required for encoded input.")
        return DECIMAL
    if not isinstance(table, SymbolTable):
        raise ConfigurationError(
            f"Expected a SymbolTable instance, got {type(table).__name__}"
        )
    return table


class NumericValue:
    """
    Число в custom base с ленивой конверсией представлений.

    Создаётся через один из трёх именованных конструкторов:
        NumericValue.from_encoded("FF", HEXADECIMAL)
        NumericValue.from_native(255, HEXADECIMAL)
        NumericValue.from_big(2**80)               # decimal по умолчанию

    Examples:
        >>> from src.core.alphabet import BINARY, HEXADECIMAL
        >>> NumericValue.from_encoded("1011", BINARY).to_native()
        11
        >>> NumericValue.from_native(255).convert_to(HEXADECIMAL).to_string()
        'FF'
    """

    def __init__(
        self,
        table: SymbolTable,
        *,
        encoded: str | None = None,
        narrow: int | None = None,
        wide: int | None = None,
        config: NativeRangeConfig | None = None,
    ):
        """
        Низкоуровневая инициализация из уже валидированных представлений.

        Внешний код должен использовать from_encoded / from_native / from_big:
        __init__ не валидирует значения.

        Args:
            table: Алфавит значения
            encoded: Encoded строка (опционально)
            narrow: Native integer (опционально)
            wide: Arbitrary-precision integer (опционально)
            config: Конфигурация native диапазона (по умолчанию 2^53 - 1)
        """
        if encoded is None and narrow is None and wide is None:
            raise ValueError("NumericValue requires at least one representation")

        self._table = table
        self._config = config or DEFAULT_RANGE

        self._encoded = encoded
        self._narrow = narrow
        self._wide = wide
        self._fits_narrow: bool | None = True if narrow is not None else None

    # =========================================================================
    # КОНСТРУКТОРЫ
    # =========================================================================

    @classmethod
    def from_encoded(
        cls,
        encoded: str,
        table: SymbolTable,
        config: NativeRangeConfig | None = None,
    ) -> "NumericValue":
        """
        Создание из encoded строки.

        Строка только валидируется, декодирование откладывается.

        Raises:
            ConfigurationError: Если table не SymbolTable
            InvalidSymbolError: Если строка пуста или содержит символ вне алфавита
        """
        table = _resolve_table(table, required=True)
        validate_encoded(encoded, table)
        return cls(table, encoded=encoded, config=config)

    @classmethod
    def from_native(
        cls,
        value: int | float,
        table: SymbolTable | None = None,
        config: NativeRangeConfig | None = None,
    ) -> "NumericValue":
        """
        Создание из native integer.

        Raises:
            NotIntegerError: Если value дробное, NaN/Inf или не число
            NegativeValueError: Если value < 0
            MagnitudeOverflowError: Если value > native_ceiling
        """
        table = _resolve_table(table)
        config = config or DEFAULT_RANGE
        narrow = validate_native_input(value, config)
        return cls(table, narrow=narrow, config=config)

    @classmethod
    def from_big(
        cls,
        value: int,
        table: SymbolTable | None = None,
        config: NativeRangeConfig | None = None,
    ) -> "NumericValue":
        """
        Создание из arbitrary-precision integer.

        fits_narrow не предполагается: вычисляется лениво в can_fit_native().

        Raises:
            NotIntegerError: Если value не int
            NegativeValueError: Если value < 0
        """
        table = _resolve_table(table)
        wide = validate_big_input(value)
        return cls(table, wide=wide, config=config)

    # =========================================================================
    # СВОЙСТВА
    # =========================================================================

    @property
    def symbol_table(self) -> SymbolTable:
        """Алфавит значения."""
        return self._table

    @property
    def config(self) -> NativeRangeConfig:
        return self._config

    # =========================================================================
    # КОНВЕРСИИ ПРЕДСТАВЛЕНИЙ
    # =========================================================================

    def can_fit_native(self) -> bool:
        """
        Помещается ли магнитуда в native форму без потери точности.

        Вычисляется не более одного раза на экземпляр. Если narrow ещё нет,
        материализует wide (arbitrary-precision decode) и сравнивает
        с native_ceiling.
        """
        if self._fits_narrow is not None:
            return self._fits_narrow

        if self._narrow is not None:
            self._fits_narrow = True
            return True

        wide = self.to_big_value()
        self._fits_narrow = is_native_safe(wide, self._config)
        if not self._fits_narrow:
            logger.debug(
                "Magnitude exceeds native ceiling %d, arbitrary precision required",
                self._config.native_ceiling,
            )
        return self._fits_narrow

    def to_big_value(self) -> int:
        """
        Arbitrary-precision магнитуда. Никогда не падает.
        """
        if self._wide is None:
            if self._narrow is not None:
                self._wide = self._narrow
            else:
                self._wide = decode_wide(self._encoded, self._table)
        return self._wide

    def to_native(self) -> int:
        """
        Native integer магнитуда.

        Raises:
            UnsafeNativeConversionError: Если магнитуда > native_ceiling.
                Экземпляр остаётся валидным для to_big_value() / to_string().

        Если заполнена только encoded строка и fits_narrow ещё не известен,
        декодирует native арифметикой: переполнение означает fits_narrow = False.
        """
        if self._narrow is None and self._wide is None and self._fits_narrow is None:
            try:
                self._narrow = decode_native(self._encoded, self._table, self._config)
                self._fits_narrow = True
            except MagnitudeOverflowError:
                self._fits_narrow = False

        if not self.can_fit_native():
            raise UnsafeNativeConversionError(
                f"This custom base number cannot be converted to a native integer safely "
                f"(magnitude exceeds {self._config.native_ceiling})."
            )

        if self._narrow is None:
            self._narrow = self._wide
        return self._narrow

    def to_string(self) -> str:
        """
        Encoded представление в алфавите значения.

        Кодирует из того числового представления, которое уже заполнено:
        native арифметика для narrow, arbitrary precision для wide.
        """
        if self._encoded is None:
            if self._narrow is not None:
                self._encoded = encode_native(self._narrow, self._table, self._config)
            else:
                self._encoded = encode_wide(self._wide, self._table)
        return self._encoded

    def convert_to(self, target: SymbolTable) -> "NumericValue":
        """
        Новое значение той же магнитуды в целевом алфавите.

        Native путь, если магнитуда помещается в native форму, иначе
        arbitrary precision. Выбор пути не влияет на магнитуду.
        Результат независим от исходного экземпляра и наследует его config.

        Args:
            target: Целевой алфавит

        Returns:
            Новый NumericValue

        Raises:
            ConfigurationError: Если target не SymbolTable
        """
        if not isinstance(target, SymbolTable):
            raise ConfigurationError(
                f"convert_to requires a SymbolTable instance, got {type(target).__name__}"
            )

        if self.can_fit_native():
            return type(self).from_native(self.to_native(), target, config=self._config)

        logger.debug("Converting to base %d via arbitrary precision", target.base)
        return type(self).from_big(self.to_big_value(), target, config=self._config)

    # =========================================================================
    # PYTHON PROTOCOL
    # =========================================================================

    def __str__(self) -> str:
        return self.to_string()

    def __int__(self) -> int:
        return self.to_big_value()

    def __index__(self) -> int:
        return self.to_big_value()

    def __eq__(self, other: object) -> bool:
        """Равенство: тот же алфавит и та же магнитуда."""
        if not isinstance(other, NumericValue):
            return NotImplemented
        return self._table == other._table and self.to_big_value() == other.to_big_value()

    def __hash__(self) -> int:
        return hash((self._table, self.to_big_value()))

    def __repr__(self) -> str:
        return f"NumericValue({self.to_string()!r}, base={self._table.base})"


# =============================================================================
# STATELESS CONVERSION
# =============================================================================


def convert_string(
    encoded: str,
    original: SymbolTable,
    target: SymbolTable,
    config: NativeRangeConfig | None = None,
) -> str:
    """
    Перекодирование строки из одного алфавита в другой за один вызов.

    Эквивалентно:
        NumericValue.from_encoded(encoded, original).convert_to(target).to_string()

    Examples:
        >>> from src.core.alphabet import DECIMAL, HEXADECIMAL
        >>> convert_string("FF", HEXADECIMAL, DECIMAL)
        '255'
    """
    value = NumericValue.from_encoded(encoded, original, config=config)
    return value.convert_to(target).to_string()
