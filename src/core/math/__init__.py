"""
Core math modules

Позиционная арифметика и границы native диапазона.
"""

# Native Range
from src.core.math.native_range import (
    # Constants
    DEFAULT_RANGE,
    INT64_RANGE,
    NATIVE_INT64_MAX,
    NATIVE_SAFE_INTEGER_MAX,
    # Config
    NativeRangeConfig,
    # Validation
    is_native_safe,
    validate_big_input,
    validate_native_input,
)

# Positional codec
from src.core.math.positional import (
    decode_native,
    decode_wide,
    encode_native,
    encode_wide,
    validate_encoded,
)

__all__ = [
    # Native Range: Constants
    "DEFAULT_RANGE",
    "INT64_RANGE",
    "NATIVE_INT64_MAX",
    "NATIVE_SAFE_INTEGER_MAX",
    # Native Range: Config
    "NativeRangeConfig",
    # Native Range: Validation
    "is_native_safe",
    "validate_big_input",
    "validate_native_input",
    # Positional: Functions
    "decode_native",
    "decode_wide",
    "encode_native",
    "encode_wide",
    "validate_encoded",
]
