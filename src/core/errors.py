"""
Errors: категориальные исключения codec

Все ошибки синхронные, детерминированные и не подлежат retry:
входные данные полностью контролируются вызывающим кодом.

Иерархия:
    CustomBaseError
    ├── ConfigurationError         : некорректный алфавит или конфигурация
    ├── InvalidSymbolError         : символ вне алфавита
    ├── NotIntegerError            : дробное / нечисловое значение
    ├── NegativeValueError         : отрицательное значение
    ├── MagnitudeOverflowError     : native вход выше потолка
    └── UnsafeNativeConversionError: native view потеряет точность
"""


class CustomBaseError(Exception):
    """Базовый класс для всех ошибок custom base codec."""

    pass


class ConfigurationError(CustomBaseError):
    """
    Некорректная конфигурация алфавита или native range.

    Примеры: меньше двух символов, повторяющиеся символы,
    многосимвольный элемент, неположительный native_ceiling.
    """

    pass


class InvalidSymbolError(CustomBaseError):
    """
    Encoded строка содержит символ, отсутствующий в алфавите.

    Attributes:
        symbol: Первый невалидный символ (None для пустой строки)
        position: Позиция символа в строке (None для пустой строки)
    """

    def __init__(self, message: str, symbol: str | None = None, position: int | None = None):
        super().__init__(message)
        self.symbol = symbol
        self.position = position


class NotIntegerError(CustomBaseError):
    """Значение имеет дробную часть, не конечно или не является числом."""

    pass


class NegativeValueError(CustomBaseError):
    """Отрицательная магнитуда (поддерживаются только значения >= 0)."""

    pass


class MagnitudeOverflowError(CustomBaseError):
    """Native вход превышает точный целочисленный потолок native типа."""

    pass


class UnsafeNativeConversionError(CustomBaseError):
    """
    Магнитуда требует arbitrary precision.

    Конверсия в native integer молча потеряла бы информацию.
    Исходный экземпляр остаётся валидным: to_big_value() и to_string()
    продолжают работать.
    """

    pass
