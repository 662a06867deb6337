"""Unit tests for 6-bit ASCII armor decoding."""

from __future__ import annotations

import pytest

from nmeaparse.codec.armor import armor_value, decode_armor
from nmeaparse.exceptions import ArmorError


class TestArmorValue:
    """Test the per-character mapping."""

    @pytest.mark.parametrize(
        ("char", "expected"),
        [
            ("0", 0),
            ("9", 9),
            ("@", 16),
            ("W", 39),
            ("X", 40),
            ("`", 40),
            ("a", 41),
            ("w", 63),
        ],
    )
    def test_mapping(self, char: str, expected: int) -> None:
        """Test characters across the alphabet."""
        assert armor_value(char) == expected

    def test_every_valid_code_fits_in_six_bits(self) -> None:
        """Test codes 48-119 all map into 0-63."""
        for code in range(48, 120):
            assert 0 <= armor_value(chr(code)) <= 63

    @pytest.mark.parametrize("char", ["/", "x", " ", "~", "\x00", "é"])
    def test_outside_alphabet(self, char: str) -> None:
        """Test characters outside codes 48-119."""
        with pytest.raises(ArmorError) as exc_info:
            armor_value(char)
        assert exc_info.value.reason == "data byte"

    @pytest.mark.parametrize("char", ["", "00", "w0"])
    def test_not_a_single_character(self, char: str) -> None:
        """Test anything but one character is an ArmorError."""
        with pytest.raises(ArmorError, match="single character") as exc_info:
            armor_value(char)
        assert exc_info.value.reason == "data byte"


class TestDecodeArmor:
    """Test payload decoding."""

    def test_single_char(self) -> None:
        """Test one character gives six bits, MSB first."""
        assert decode_armor("5", 0) == [0, 0, 0, 1, 0, 1]

    def test_fill_bits_truncate_last_char(self) -> None:
        """Test fill bits drop the low bits of the last character."""
        assert decode_armor("w", 2) == [1, 1, 1, 1]
        assert decode_armor("15", 4) == [0, 0, 0, 0, 0, 1, 0, 0]

    def test_length(self) -> None:
        """Test the decoded length is chars * 6 - fill bits."""
        for fill_bits in range(6):
            assert len(decode_armor("177KQJ5000G", fill_bits)) == 11 * 6 - fill_bits

    def test_empty_payload(self) -> None:
        """Test an empty payload decodes to nothing."""
        assert decode_armor("", 0) == []

    @pytest.mark.parametrize("fill_bits", [-1, 6, 10])
    def test_bad_fill_bits(self, fill_bits: int) -> None:
        """Test fill bits outside 0-5."""
        with pytest.raises(ArmorError) as exc_info:
            decode_armor("0000", fill_bits)
        assert exc_info.value.reason == "fill bits"

    def test_num_bits(self) -> None:
        """Test fill bits on an empty payload."""
        with pytest.raises(ArmorError) as exc_info:
            decode_armor("", 3)
        assert exc_info.value.reason == "num bits"

    @pytest.mark.parametrize("payload", ["1x", "1/", "x1", "000000000000000000000x"])
    def test_bad_character_fails_whole_payload(self, payload: str) -> None:
        """Test a bad character anywhere fails the payload."""
        with pytest.raises(ArmorError, match="data byte"):
            decode_armor(payload, 0)

    def test_armor_error_is_value_error(self) -> None:
        """Test ArmorError can be caught as ValueError."""
        with pytest.raises(ValueError):
            decode_armor("x", 0)
