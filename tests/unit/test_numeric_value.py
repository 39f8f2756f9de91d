"""
Тесты для NumericValue

Проверяет:
1. Три именованных конструктора и их валидацию
2. Ленивую материализацию и кэширование представлений
3. can_fit_native / to_native на границе native диапазона
4. to_string: ноль, канонический вид, выбор арифметики
5. convert_to: независимость экземпляров, сохранение магнитуды
6. Python protocol (str, int, ==, hash)
"""

import pytest

from src.core.alphabet import BASE58, BASE64, BINARY, DECIMAL, HEXADECIMAL, OCTAL, SymbolTable
from src.core.domain.numeric_value import NumericValue, convert_string
from src.core.errors import (
    ConfigurationError,
    InvalidSymbolError,
    MagnitudeOverflowError,
    NegativeValueError,
    NotIntegerError,
    UnsafeNativeConversionError,
)
from src.core.math.native_range import (
    INT64_RANGE,
    NATIVE_SAFE_INTEGER_MAX,
    NativeRangeConfig,
)


# =============================================================================
# ТЕСТЫ: Конструкторы
# =============================================================================


class TestConstruction:
    """Тесты создания NumericValue."""

    def test_from_encoded(self) -> None:
        num = NumericValue.from_encoded("1011", BINARY)

        assert num.to_string() == "1011"
        assert num.to_native() == 11
        assert num.symbol_table is BINARY

    def test_from_native_with_table(self) -> None:
        num = NumericValue.from_native(255, HEXADECIMAL)

        assert num.to_native() == 255
        assert num.to_string() == "FF"

    def test_from_native_defaults_to_decimal(self) -> None:
        num = NumericValue.from_native(32)

        assert num.symbol_table is DECIMAL
        assert num.to_native() == 32
        assert num.to_string() == "32"

    def test_from_big_with_table(self) -> None:
        num = NumericValue.from_big(255, HEXADECIMAL)

        assert num.to_native() == 255
        assert num.to_string() == "FF"

    def test_from_big_defaults_to_decimal(self) -> None:
        num = NumericValue.from_big(32)

        assert num.symbol_table is DECIMAL
        assert num.to_string() == "32"

    def test_from_native_integral_float(self) -> None:
        assert NumericValue.from_native(16.0, HEXADECIMAL).to_string() == "10"

    def test_from_encoded_does_not_decode_eagerly(self) -> None:
        """Конструктор только валидирует строку"""
        num = NumericValue.from_encoded("FF", HEXADECIMAL)

        assert num._wide is None
        assert num._narrow is None
        assert num._fits_narrow is None

    def test_from_big_does_not_assume_fit(self) -> None:
        num = NumericValue.from_big(7)

        assert num._fits_narrow is None
        assert num._narrow is None

    def test_from_native_marks_fit(self) -> None:
        num = NumericValue.from_native(7)

        assert num._fits_narrow is True

    def test_init_requires_a_representation(self) -> None:
        with pytest.raises(ValueError, match="at least one representation"):
            NumericValue(DECIMAL)


class TestConstructionErrors:
    """Тесты ошибок конструкторов."""

    def test_invalid_symbol(self) -> None:
        with pytest.raises(InvalidSymbolError, match='Invalid symbol "2"') as exc_info:
            NumericValue.from_encoded("102", BINARY)

        assert exc_info.value.symbol == "2"

    def test_empty_encoded(self) -> None:
        with pytest.raises(InvalidSymbolError):
            NumericValue.from_encoded("", BINARY)

    def test_encoded_requires_table(self) -> None:
        with pytest.raises(ConfigurationError, match="SymbolTable instance is required"):
            NumericValue.from_encoded("1011", None)  # type: ignore[arg-type]

    def test_table_must_be_symbol_table(self) -> None:
        with pytest.raises(ConfigurationError, match="Expected a SymbolTable"):
            NumericValue.from_native(1, "01")  # type: ignore[arg-type]

    def test_native_negative(self) -> None:
        with pytest.raises(NegativeValueError):
            NumericValue.from_native(-1)

    def test_native_not_integer(self) -> None:
        with pytest.raises(NotIntegerError, match="must be an integer value"):
            NumericValue.from_native(1.1)

    def test_native_above_ceiling(self) -> None:
        with pytest.raises(MagnitudeOverflowError, match="exceeds the maximum safe integer"):
            NumericValue.from_native(NATIVE_SAFE_INTEGER_MAX + 1)

    def test_big_negative(self) -> None:
        with pytest.raises(NegativeValueError, match="BigInt input must be non-negative"):
            NumericValue.from_big(-1)

    def test_big_not_int(self) -> None:
        with pytest.raises(NotIntegerError):
            NumericValue.from_big(1.5)  # type: ignore[arg-type]


# =============================================================================
# ТЕСТЫ: Конверсии представлений
# =============================================================================


class TestRepresentations:
    """Тесты to_big_value / to_native / to_string."""

    def test_encoded_to_native(self) -> None:
        assert NumericValue.from_encoded("111", BINARY).to_native() == 7

    def test_big_to_native(self) -> None:
        assert NumericValue.from_big(16, BINARY).to_native() == 16

    def test_encoded_to_big(self) -> None:
        assert NumericValue.from_encoded("111", BINARY).to_big_value() == 7

    def test_native_to_big(self) -> None:
        assert NumericValue.from_native(7).to_big_value() == 7

    def test_big_to_string(self) -> None:
        assert NumericValue.from_big(255, HEXADECIMAL).to_string() == "FF"

    def test_native_to_string(self) -> None:
        assert NumericValue.from_native(16, HEXADECIMAL).to_string() == "10"

    @pytest.mark.parametrize("table", [BINARY, OCTAL, DECIMAL, HEXADECIMAL, BASE58, BASE64])
    def test_zero_encodes_as_zero_symbol(self, table: SymbolTable) -> None:
        assert NumericValue.from_native(0, table).to_string() == table.zero_symbol
        assert NumericValue.from_big(0, table).to_string() == table.zero_symbol

    def test_zero_hex(self) -> None:
        assert NumericValue.from_native(0, HEXADECIMAL).to_string() == "0"

    def test_no_leading_zero(self) -> None:
        assert NumericValue.from_native(5).to_string() == "5"

    def test_encoded_form_is_kept_as_given(self) -> None:
        """Кэшированная encoded строка возвращается как есть"""
        num = NumericValue.from_encoded("007", DECIMAL)

        assert num.to_string() == "007"
        assert num.to_native() == 7

    def test_caches_are_populated_once(self) -> None:
        num = NumericValue.from_encoded("FF", HEXADECIMAL)

        first = num.to_big_value()
        assert num._wide == 255
        assert num.to_big_value() is first

        assert num.can_fit_native() is True
        assert num._fits_narrow is True

        assert num.to_native() == 255
        assert num._narrow == 255

    def test_native_string_uses_native_encoding(self, monkeypatch) -> None:
        """narrow источник кодируется native путём"""
        import src.core.domain.numeric_value as module

        calls = []
        monkeypatch.setattr(module, "encode_wide", lambda *args: calls.append("wide"))

        assert NumericValue.from_native(255, HEXADECIMAL).to_string() == "FF"
        assert calls == []

    def test_big_string_uses_wide_encoding(self, monkeypatch) -> None:
        """wide источник кодируется arbitrary-precision путём"""
        import src.core.domain.numeric_value as module

        calls = []
        monkeypatch.setattr(module, "encode_native", lambda *args: calls.append("native"))

        assert NumericValue.from_big(255, HEXADECIMAL).to_string() == "FF"
        assert calls == []


# =============================================================================
# ТЕСТЫ: Граница native диапазона
# =============================================================================


class TestNativeBoundary:
    """Тесты can_fit_native и to_native на границе."""

    def test_ceiling_converts_to_native(self) -> None:
        num = NumericValue.from_big(NATIVE_SAFE_INTEGER_MAX)

        assert num.can_fit_native() is True
        assert num.to_native() == NATIVE_SAFE_INTEGER_MAX

    def test_ceiling_plus_one_is_unsafe(self) -> None:
        num = NumericValue.from_big(NATIVE_SAFE_INTEGER_MAX + 1)

        assert num.can_fit_native() is False
        with pytest.raises(UnsafeNativeConversionError, match="cannot be converted"):
            num.to_native()

    def test_unsafe_instance_stays_usable(self) -> None:
        """После UnsafeNativeConversionError экземпляр остаётся валидным"""
        num = NumericValue.from_big(NATIVE_SAFE_INTEGER_MAX + 1)

        with pytest.raises(UnsafeNativeConversionError):
            num.to_native()

        assert num.to_big_value() == 2**53
        assert num.to_string() == "9007199254740992"
        assert num._narrow is None

    def test_two_pow_53_from_hex(self) -> None:
        """2^53 из hex: arbitrary precision decode, lossless convert, to_native падает"""
        num = NumericValue.from_encoded("20000000000000", HEXADECIMAL)

        assert num.to_big_value() == 2**53
        with pytest.raises(UnsafeNativeConversionError):
            num.to_native()

        as_binary = num.convert_to(BINARY)
        assert as_binary.to_string() == "1" + "0" * 53
        assert as_binary.to_big_value() == 2**53

        back = as_binary.convert_to(HEXADECIMAL)
        assert back.to_string() == "20000000000000"

    def test_can_fit_native_is_memoised(self, monkeypatch) -> None:
        import src.core.domain.numeric_value as module

        calls = []
        original = module.is_native_safe

        def counting(value, config):
            calls.append(value)
            return original(value, config)

        monkeypatch.setattr(module, "is_native_safe", counting)

        num = NumericValue.from_encoded("FF", HEXADECIMAL)
        assert num.can_fit_native() is True
        assert num.can_fit_native() is True
        assert len(calls) == 1

    def test_int64_config_widens_native_range(self) -> None:
        num = NumericValue.from_big(2**53, config=INT64_RANGE)

        assert num.can_fit_native() is True
        assert num.to_native() == 2**53
        assert NumericValue.from_native(2**60, config=INT64_RANGE).to_native() == 2**60

    def test_int64_config_rejects_imprecise_float(self) -> None:
        """float(2^53 + 1) уже округлён до 2^53: отклоняется и при int64 потолке"""
        with pytest.raises(MagnitudeOverflowError):
            NumericValue.from_native(float(2**53 + 1), config=INT64_RANGE)

    def test_native_decode_from_encoded(self) -> None:
        """to_native на свежем encoded: native-width decode без wide"""
        num = NumericValue.from_encoded("FF", HEXADECIMAL)

        assert num.to_native() == 255
        assert num._narrow == 255
        assert num._fits_narrow is True
        assert num._wide is None

    def test_native_decode_overflow_marks_unsafe(self, monkeypatch) -> None:
        """Переполнение native decode: UnsafeNativeConversionError, wide не вычисляется"""
        import src.core.domain.numeric_value as module

        calls = []
        monkeypatch.setattr(module, "decode_wide", lambda *args: calls.append("wide"))

        num = NumericValue.from_encoded("20000000000000", HEXADECIMAL)
        with pytest.raises(UnsafeNativeConversionError):
            num.to_native()

        assert num._fits_narrow is False
        assert num._narrow is None
        assert calls == []

    def test_small_ceiling(self) -> None:
        config = NativeRangeConfig(native_ceiling=255)
        num = NumericValue.from_encoded("100", HEXADECIMAL, config=config)

        assert num.can_fit_native() is False
        assert num.to_big_value() == 256


# =============================================================================
# ТЕСТЫ: convert_to
# =============================================================================


class TestConvertTo:
    """Тесты convert_to."""

    def test_decimal_to_hex(self) -> None:
        assert NumericValue.from_native(255).convert_to(HEXADECIMAL).to_string() == "FF"

    def test_native_path_for_safe_magnitude(self) -> None:
        converted = NumericValue.from_encoded("FF", HEXADECIMAL).convert_to(DECIMAL)

        assert converted._narrow == 255
        assert converted._wide is None
        assert converted.to_string() == "255"

    def test_wide_path_for_unsafe_magnitude(self) -> None:
        converted = NumericValue.from_big(10**30).convert_to(BASE58)

        assert converted._narrow is None
        assert converted._wide == 10**30

    def test_result_is_independent(self) -> None:
        source = NumericValue.from_encoded("FF", HEXADECIMAL)
        target = source.convert_to(DECIMAL)

        assert target is not source
        assert source.symbol_table is HEXADECIMAL
        assert target.symbol_table is DECIMAL

        target.to_string()
        assert source.to_string() == "FF"
        assert source._encoded == "FF"

    def test_config_is_inherited(self) -> None:
        source = NumericValue.from_big(2**60, config=INT64_RANGE)
        target = source.convert_to(HEXADECIMAL)

        assert target.config is INT64_RANGE
        assert target.to_native() == 2**60

    def test_target_must_be_symbol_table(self) -> None:
        with pytest.raises(ConfigurationError):
            NumericValue.from_native(1).convert_to("01")  # type: ignore[arg-type]

    @pytest.mark.parametrize("value", [0, 1, 57, 255, NATIVE_SAFE_INTEGER_MAX, 2**53, 2**200 + 3])
    def test_base_invariance(self, value: int) -> None:
        """Магнитуда сохраняется при переходе через любые алфавиты"""
        num = NumericValue.from_big(value, BINARY)
        for table in (OCTAL, HEXADECIMAL, BASE58, BASE64, DECIMAL):
            num = num.convert_to(table)
            assert NumericValue.from_encoded(num.to_string(), table).to_big_value() == value


class TestConvertString:
    """Тесты convert_string."""

    def test_hex_to_decimal(self) -> None:
        assert convert_string("FF", HEXADECIMAL, DECIMAL) == "255"

    def test_decimal_to_binary(self) -> None:
        assert convert_string("11", DECIMAL, BINARY) == "1011"

    def test_drops_leading_zero_symbols(self) -> None:
        assert convert_string("00FF", HEXADECIMAL, DECIMAL) == "255"
        assert convert_string("000", DECIMAL, HEXADECIMAL) == "0"

    def test_large_magnitude(self) -> None:
        assert convert_string("1" + "0" * 40, DECIMAL, DECIMAL) == "1" + "0" * 40

    def test_invalid_symbol(self) -> None:
        with pytest.raises(InvalidSymbolError):
            convert_string("FG", HEXADECIMAL, DECIMAL)


# =============================================================================
# ТЕСТЫ: Python protocol
# =============================================================================


class TestProtocol:
    """Тесты str/int/==/hash/repr."""

    def test_str(self) -> None:
        assert f"{NumericValue.from_native(16, HEXADECIMAL)}" == "10"

    def test_int(self) -> None:
        assert int(NumericValue.from_encoded("FF", HEXADECIMAL)) == 255

    def test_index(self) -> None:
        assert hex(NumericValue.from_encoded("FF", HEXADECIMAL)) == "0xff"

    def test_equality_across_representations(self) -> None:
        from_encoded = NumericValue.from_encoded("FF", HEXADECIMAL)
        from_native = NumericValue.from_native(255, HEXADECIMAL)
        from_big = NumericValue.from_big(255, HEXADECIMAL)

        assert from_encoded == from_native == from_big
        assert hash(from_encoded) == hash(from_native) == hash(from_big)

    def test_different_alphabets_are_not_equal(self) -> None:
        assert NumericValue.from_native(255) != NumericValue.from_native(255, HEXADECIMAL)

    def test_leading_zeros_compare_equal(self) -> None:
        assert NumericValue.from_encoded("007", DECIMAL) == NumericValue.from_native(7)

    def test_repr(self) -> None:
        assert repr(NumericValue.from_native(255, HEXADECIMAL)) == "NumericValue('FF', base=16)"
