"""Property-based tests using hypothesis."""

from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from conftest import encode_armor
from nmeaparse import BaseSentence, Parser
from nmeaparse.codec.armor import decode_armor

armor_alphabet = st.sampled_from([chr(code) for code in range(48, 120)])
bit_lists = st.lists(st.integers(min_value=0, max_value=1), max_size=400)


class TestArmorProperties:
    """Property-based tests for armor decoding."""

    @given(bits=bit_lists)
    def test_encode_decode_roundtrip(self, bits: list[int]) -> None:
        """Test decoding recovers any encoded bit sequence."""
        payload, fill_bits = encode_armor(bits)
        assert decode_armor(payload, fill_bits) == bits

    @given(
        payload=st.text(alphabet=armor_alphabet, max_size=80),
        fill_bits=st.integers(min_value=0, max_value=5),
    )
    def test_decoded_length(self, payload: str, fill_bits: int) -> None:
        """Test the decoded length whenever the payload can hold the fill bits."""
        if len(payload) * 6 < fill_bits:
            return
        bits = decode_armor(payload, fill_bits)
        assert len(bits) == len(payload) * 6 - fill_bits
        assert set(bits) <= {0, 1}

    @given(
        prefix=st.text(alphabet=armor_alphabet, max_size=20),
        suffix=st.text(alphabet=armor_alphabet, max_size=20),
        bad=st.characters().filter(lambda c: not 48 <= ord(c) < 120),
    )
    def test_bad_character_anywhere(self, prefix: str, suffix: str, bad: str) -> None:
        """Test one character outside the alphabet always fails the payload."""
        p = Parser(BaseSentence(type="VDM", prefix="AIVDM", fields=[prefix + bad + suffix]))
        assert p.six_bit_ascii_armour(0, 0, "data") == []
        assert p.err() is not None
        assert p.err().value == "data byte"


class TestLatchProperties:
    """Property-based tests for the error latch."""

    @given(
        errors=st.lists(st.tuples(st.text(), st.text()), min_size=1, max_size=10),
        index=st.integers(),
    )
    def test_first_error_wins(self, errors: list[tuple[str, str]], index: int) -> None:
        """Test the first latched error survives every later call."""
        p = Parser(BaseSentence(type="TST", prefix="GPTST", fields=["1", "x"]))
        for context, value in errors:
            p.set_err(context, value)
        p.int64(1, "x")
        p.string(index, "any")

        assert p.err().context == errors[0][0]
        assert p.err().value == errors[0][1]

    @given(fields=st.lists(st.text(), max_size=10), index=st.integers(min_value=-5, max_value=15))
    def test_string_matches_fields(self, fields: list[str], index: int) -> None:
        """Test string returns the stored field or latches an index error."""
        p = Parser(BaseSentence(type="TST", prefix="GPTST", fields=fields))
        value = p.string(index, "field")

        if 0 <= index < len(fields):
            assert value == fields[index]
            assert p.err() is None
        else:
            assert value == ""
            assert p.err() is not None
