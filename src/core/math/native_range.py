"""
Native Range: безопасный диапазон native integer

Модуль определяет, какие магнитуды представимы в native integer форме
без потери точности, и валидирует native/arbitrary-precision входы:
- Потолок NATIVE_SAFE_INTEGER_MAX = 2^53 - 1 (точный целочисленный предел
  IEEE 754 double, поведенческий паритет по умолчанию)
- Альтернативный потолок NATIVE_INT64_MAX = 2^63 - 1 (natural host width)
- Санитарные проверки float входов (NaN/Inf, дробная часть)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Native значение всегда в [0, native_ceiling]
2. Float вход принимается только если он конечный и целый
3. bool не считается числом
"""

import math
from dataclasses import dataclass
from typing import Final

from src.core.errors import (
    ConfigurationError,
    MagnitudeOverflowError,
    NegativeValueError,
    NotIntegerError,
)

# =============================================================================
# ПОТОЛКИ NATIVE ДИАПАЗОНА
# =============================================================================

# Максимальное целое, точно представимое в double precision
NATIVE_SAFE_INTEGER_MAX: Final[int] = 2**53 - 1

# Максимальное знаковое 64-bit целое
NATIVE_INT64_MAX: Final[int] = 2**63 - 1


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class NativeRangeConfig:
    """Конфигурация native диапазона.

    native_ceiling: наибольшая магнитуда, которая ещё хранится в native форме.
    Всё, что выше, живёт только в arbitrary-precision форме.
    """

    native_ceiling: int = NATIVE_SAFE_INTEGER_MAX

    def __post_init__(self) -> None:
        if isinstance(self.native_ceiling, bool) or not isinstance(self.native_ceiling, int):
            raise ConfigurationError(
                f"native_ceiling must be an int, got {type(self.native_ceiling).__name__}"
            )
        if self.native_ceiling < 1:
            raise ConfigurationError(f"native_ceiling must be >= 1, got {self.native_ceiling}")


# Паритет с double-precision хостом
DEFAULT_RANGE: Final[NativeRangeConfig] = NativeRangeConfig()

# Полный диапазон signed 64-bit
INT64_RANGE: Final[NativeRangeConfig] = NativeRangeConfig(native_ceiling=NATIVE_INT64_MAX)


# =============================================================================
# ПРОВЕРКИ
# =============================================================================


def is_native_safe(value: int, config: NativeRangeConfig = DEFAULT_RANGE) -> bool:
    """
    Проверка, что магнитуда помещается в native форму без потери точности.

    Args:
        value: Неотрицательная магнитуда (int любой величины)
        config: Конфигурация native диапазона

    Returns:
        True если 0 <= value <= native_ceiling

    Examples:
        >>> is_native_safe(2**53 - 1)
        True
        >>> is_native_safe(2**53)
        False
        >>> is_native_safe(2**53, INT64_RANGE)
        True
    """
    return 0 <= value <= config.native_ceiling


def validate_native_input(value: int | float, config: NativeRangeConfig = DEFAULT_RANGE) -> int:
    """
    Валидация native входа и приведение к int.

    Порядок проверок: тип и дробная часть → знак → потолок.

    Args:
        value: int или целый float
        config: Конфигурация native диапазона

    Returns:
        Значение как int

    Raises:
        NotIntegerError: Если value не число, bool, NaN/Inf или имеет дробную часть
        NegativeValueError: Если value < 0
        MagnitudeOverflowError: Если value > native_ceiling или float > 2^53 - 1

    Examples:
        >>> validate_native_input(255)
        255
        >>> validate_native_input(16.0)
        16
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise NotIntegerError(
            f"Number input must be an integer value, got {type(value).__name__}"
        )

    if isinstance(value, float):
        if not math.isfinite(value) or not value.is_integer():
            raise NotIntegerError(f"Number input must be an integer value, got {value}")
        if value > NATIVE_SAFE_INTEGER_MAX:
            # double точен только до 2^53 - 1, независимо от config
            raise MagnitudeOverflowError(
                f"Number input exceeds the maximum safe integer "
                f"({NATIVE_SAFE_INTEGER_MAX}) for a float, got {value}"
            )

    if value < 0:
        raise NegativeValueError(f"Number input must be non-negative, got {value}")

    if value > config.native_ceiling:
        raise MagnitudeOverflowError(
            f"Number input exceeds the maximum safe integer "
            f"({config.native_ceiling}), got {value}"
        )

    return int(value)


def validate_big_input(value: int) -> int:
    """
    Валидация arbitrary-precision входа.

    Потолок не проверяется: arbitrary-precision форма вмещает любую магнитуду.

    Raises:
        NotIntegerError: Если value не int (или bool)
        NegativeValueError: Если value < 0
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise NotIntegerError(f"BigInt input must be an int, got {type(value).__name__}")

    if value < 0:
        raise NegativeValueError(f"BigInt input must be non-negative, got {value}")

    return value
