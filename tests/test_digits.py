"""Tests for polyrecon.digits module."""

from __future__ import annotations

import pytest

from polyrecon.digits import decode, decode_digit, encode
from polyrecon.errors import DigitOutOfRange, InvalidDigit, InvalidInput


class TestDecodeDigit:
    def test_decimal_digits(self):
        assert [decode_digit(c) for c in "0123456789"] == list(range(10))

    def test_letters_case_insensitive(self):
        assert decode_digit("a") == 10
        assert decode_digit("A") == 10
        assert decode_digit("z") == 35
        assert decode_digit("Z") == 35

    @pytest.mark.parametrize("ch", ["-", " ", "_", ".", "é", "\u212a", "\u0661"])
    def test_invalid_characters(self, ch: str):
        with pytest.raises(InvalidDigit, match="Invalid digit"):
            decode_digit(ch)


class TestDecode:
    def test_examples(self):
        assert decode("1c", 16) == 28
        assert decode("111", 2) == 7
        assert decode("12", 10) == 12
        assert decode("213", 4) == 39
        assert decode("zz", 36) == 36 * 36 - 1

    def test_mixed_case(self):
        assert decode("FfAa", 16) == 0xFFAA

    def test_surrounding_whitespace(self):
        assert decode("  101\n", 2) == 5

    def test_empty_is_zero(self):
        assert decode("", 10) == 0
        assert decode("   ", 7) == 0

    def test_leading_zeros(self):
        assert decode("000777", 8) == 0o777

    def test_digit_out_of_range(self):
        with pytest.raises(DigitOutOfRange, match="not valid for base 10"):
            decode("12a", 10)

    def test_digit_equal_to_base(self):
        with pytest.raises(DigitOutOfRange):
            decode("2", 2)

    def test_invalid_character(self):
        with pytest.raises(InvalidDigit):
            decode("12-3", 10)

    def test_inner_whitespace_is_invalid(self):
        with pytest.raises(InvalidDigit):
            decode("1 2", 10)

    def test_large_value_is_exact(self):
        digits = "f" * 200
        assert decode(digits, 16) == 16**200 - 1

    def test_matches_builtin_int(self):
        for base in (2, 3, 8, 10, 16, 20, 36):
            assert decode("10101", base) == int("10101", base)


class TestEncode:
    def test_round_trip_all_bases(self):
        values = [0, 1, 35, 36, 255, 10**30 + 7, 2**200 - 1]
        for base in range(2, 37):
            for v in values:
                assert decode(encode(v, base), base) == v

    def test_canonical_form(self):
        assert encode(0, 2) == "0"
        assert encode(255, 16) == "ff"
        assert encode(35, 36) == "z"

    def test_negative(self):
        with pytest.raises(InvalidInput, match="negative"):
            encode(-1, 10)

    def test_base_out_of_range(self):
        with pytest.raises(InvalidInput, match="Base must be in"):
            encode(5, 37)
