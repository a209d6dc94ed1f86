import pytest

from seigate.exceptions import ValidationError
from seigate.utils.units import format_ether, format_units, parse_ether, parse_token_id, parse_units


class TestFormatUnits:
    def test_whole_and_fraction(self):
        assert format_units(1_500_000_000_000_000_000, 18) == "1.5"

    def test_zero(self):
        assert format_units(0, 18) == "0"
        assert format_ether(0) == "0"

    def test_small_amount_keeps_leading_zeros(self):
        assert format_units(1, 6) == "0.000001"

    def test_trailing_zeros_trimmed(self):
        assert format_units(10_000_000, 6) == "10"

    def test_zero_decimals(self):
        assert format_units(42, 0) == "42"

    def test_negative(self):
        assert format_units(-15, 1) == "-1.5"

    def test_beyond_float_precision(self):
        raw = 123456789012345678901234567890
        assert format_units(raw, 18) == "123456789012.34567890123456789"


class TestParseUnits:
    def test_whole(self):
        assert parse_units("10", 6) == 10_000_000

    def test_fraction(self):
        assert parse_ether("0.25") == 250_000_000_000_000_000

    def test_too_many_decimals(self):
        with pytest.raises(ValidationError, match="decimal places"):
            parse_units("1.1234567", 6)

    @pytest.mark.parametrize("amount", ["-1", "1e5", "abc", "", "1.", ".5"])
    def test_rejects_malformed(self, amount):
        with pytest.raises(ValidationError):
            parse_units(amount, 18)


class TestUnitsRoundTrip:
    @pytest.mark.parametrize("decimals", [0, 1, 6, 8, 18, 24])
    @pytest.mark.parametrize("raw", [0, 1, 10, 999_999, 10**18, 2**64 + 1, 2**256 - 1])
    def test_format_then_parse_restores_raw(self, raw, decimals):
        assert parse_units(format_units(raw, decimals), decimals) == raw


class TestParseTokenId:
    def test_decimal_string(self):
        assert parse_token_id("42") == 42

    def test_hex_string(self):
        assert parse_token_id("0x10") == 16

    def test_large_id_is_exact(self):
        assert parse_token_id("115792089237316195423570985008687907853269984665640564039457584007913129639935") == 2**256 - 1

    def test_negative_rejected(self):
        with pytest.raises(ValidationError):
            parse_token_id("-1")

    def test_garbage_rejected(self):
        with pytest.raises(ValidationError, match="valid integer"):
            parse_token_id("one")

    def test_bool_rejected(self):
        with pytest.raises(ValidationError):
            parse_token_id(True)
