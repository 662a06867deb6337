"""Binary payload codec for nmeaparse.

This module provides the 6-bit ASCII armor decoder and a reader for the
resulting bit sequences.
"""

from __future__ import annotations

from .armor import armor_value, decode_armor
from .bits import BitReader

__all__ = [
    "armor_value",
    "decode_armor",
    "BitReader",
]
