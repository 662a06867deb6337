"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from nmeaparse import BaseSentence


def encode_armor(bits: list[int]) -> tuple[str, int]:
    """Pack a bit sequence into 6-bit ASCII armor.

    Returns:
        Tuple of (payload, fill_bits)
    """
    fill_bits = -len(bits) % 6
    padded = list(bits) + [0] * fill_bits

    chars = []
    for i in range(0, len(padded), 6):
        value = 0
        for bit in padded[i : i + 6]:
            value = (value << 1) | bit
        chars.append(chr(value + 48) if value <= 40 else chr(value + 56))
    return "".join(chars), fill_bits


@pytest.fixture
def gll_sentence() -> BaseSentence:
    """Sample GLL sentence: $GPGLL,4916.45,N,12311.12,W,225444,A"""
    return BaseSentence(
        type="GLL",
        prefix="GPGLL",
        fields=["4916.45", "N", "12311.12", "W", "225444", "A"],
    )


@pytest.fixture
def vdm_sentence() -> BaseSentence:
    """Sample VDM sentence: !AIVDM,1,1,,B,177KQJ5000G?tO`K>RA1wUbN0TKH,0"""
    return BaseSentence(
        type="VDM",
        prefix="AIVDM",
        fields=["1", "1", "", "B", "177KQJ5000G?tO`K>RA1wUbN0TKH", "0"],
    )


@pytest.fixture
def make_sentence():
    """Factory for ad-hoc sentences with the given fields."""

    def _make(*fields: str, type: str = "TST", prefix: str = "GPTST") -> BaseSentence:
        return BaseSentence(type=type, prefix=prefix, fields=fields)

    return _make
