"""Test rounding, plain rendering and locale formatting."""

import dataclasses
import math

import pytest

from unitconv import Conversion, convert
from unitconv.config import DEFAULT_CONFIG, ConversionConfig
from unitconv.errors import UnsupportedLocaleError
from unitconv.formatting import apply_precision, format_locale, format_plain


class TestApplyPrecision:
    """Precision policy on raw converted values."""

    def test_rounds_half_up_as_printed(self):
        assert apply_precision(1.005, DEFAULT_CONFIG) == 1.01
        assert apply_precision(2.675, DEFAULT_CONFIG) == 2.68
        assert apply_precision(-1.005, DEFAULT_CONFIG) == -1.01

    def test_integers_and_strings_pass_through(self):
        assert apply_precision(1010, DEFAULT_CONFIG) == 1010
        assert isinstance(apply_precision(1010, DEFAULT_CONFIG), int)
        assert apply_precision("FF", DEFAULT_CONFIG) == "FF"

    def test_integer_mode(self):
        config = ConversionConfig(is_float=False)
        assert apply_precision(285.15, config) == 285
        assert apply_precision(0.5, config) == 1
        assert apply_precision(-0.5, config) == -1

    def test_non_finite_values(self):
        assert math.isnan(apply_precision(float("nan"), DEFAULT_CONFIG))
        assert apply_precision(float("inf"), DEFAULT_CONFIG) == float("inf")

    def test_large_magnitudes(self):
        config = ConversionConfig(decimals=20)
        assert apply_precision(6.241509074460763e18, config) == 6.241509074460763e18


class TestFormatPlain:
    """Plain rendering never uses scientific notation."""

    def test_integral_floats_drop_fraction(self):
        assert format_plain(1000.0) == "1000"
        assert format_plain(0.0) == "0"

    def test_small_and_large_values(self):
        assert format_plain(1e-05) == "0.00001"
        assert format_plain(6.241509074460763e18) == "6241509074460763000"

    def test_passthrough(self):
        assert format_plain(2.5) == "2.5"
        assert format_plain(1010) == "1010"
        assert format_plain("A") == "A"


class TestLocale:
    """Locale-aware number formatting through Babel."""

    @pytest.mark.parametrize(
        "locale, expected",
        [
            ("en-US", "1,234,567.89"),
            ("en-GB", "1,234,567.89"),
            ("de-DE", "1.234.567,89"),
            ("de_DE", "1.234.567,89"),
            ("pt-BR", "1.234.567,89"),
            ("hi-IN", "12,34,567.89"),
            ("ja-JP", "1,234,567.89"),
        ],
    )
    def test_grouping_and_decimal_symbols(self, locale, expected):
        result = convert(1234567.89, "decimal", "decimal", locale=locale)
        assert result.value == expected

    def test_rounding_happens_before_formatting(self):
        result = convert(1, "meter", "foot", decimals=4, locale="de-DE")
        assert result.value == "3,2808"

    def test_integer_mode(self):
        result = convert(1234567.89, "meter", "meter", is_float=False, locale="en-US")
        assert result.value == "1,234,568"

    def test_digit_strings_untouched(self):
        assert convert(255, "decimal", "hexadecimal", locale="de-DE").value == "FF"

    def test_binary_and_octal_digits_are_not_grouped(self):
        binary = convert(1000, "decimal", "binary", locale="en-US").value
        assert binary == 1111101000
        assert isinstance(binary, int)
        assert convert(4096, "decimal", "base8", locale="de-DE").value == 10000

        conversion = Conversion(locale="en-US", include_unit=True)
        assert conversion(1000).from_("decimal").to("binary") == 1111101000

    def test_with_unit_label(self):
        conversion = Conversion(locale="de-DE", include_unit=True)
        assert conversion(1234.5).from_("meter").to("meter") == "1.234,5m"

    def test_unknown_locale(self):
        with pytest.raises(UnsupportedLocaleError, match="xx-YY"):
            convert(1, "meter", "foot", locale="xx-YY")

    def test_format_locale_directly(self):
        assert format_locale(1234.5, "en-US") == "1,234.5"
        assert format_locale(1000, "de-DE") == "1.000"


class TestConfig:
    """Validation and immutability of conversion options."""

    def test_defaults(self):
        assert DEFAULT_CONFIG.is_float is True
        assert DEFAULT_CONFIG.decimals == 2
        assert DEFAULT_CONFIG.locale is None
        assert DEFAULT_CONFIG.include_unit is False

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_CONFIG.decimals = 4

    def test_merged_keeps_original(self):
        merged = DEFAULT_CONFIG.merged(decimals=4)
        assert merged.decimals == 4
        assert DEFAULT_CONFIG.decimals == 2

    @pytest.mark.parametrize("decimals", [-1, 101])
    def test_decimals_out_of_range(self, decimals):
        with pytest.raises(ValueError, match="decimals"):
            ConversionConfig(decimals=decimals)

    @pytest.mark.parametrize("decimals", [1.5, "2", True])
    def test_decimals_wrong_type(self, decimals):
        with pytest.raises(TypeError, match="decimals"):
            ConversionConfig(decimals=decimals)

    def test_blank_locale(self):
        with pytest.raises(ValueError, match="locale"):
            ConversionConfig(locale="  ")

    def test_unknown_option(self):
        with pytest.raises(TypeError):
            convert(1, "meter", "foot", precision=3)
