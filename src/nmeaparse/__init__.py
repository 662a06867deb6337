"""nmeaparse: NMEA Sentence Field Parser

A Python library for extracting typed values from tokenized NMEA 0183
sentences and decoding the 6-bit ASCII armored payloads carried by AIS
VDM/VDO sentences.

Key Features:
- Index-based typed getters with a sticky first-error latch
- Time, date and coordinate literal parsing
- 6-bit ASCII armor decoding to flat bit sequences
- Pydantic-based immutable value objects

Quick Start:
    >>> from nmeaparse import BaseSentence, Parser
    >>>
    >>> s = BaseSentence(
    ...     type="GLL",
    ...     prefix="GPGLL",
    ...     fields=["4916.45", "N", "12311.12", "W", "225444", "A"],
    ... )
    >>> p = Parser(s)
    >>> p.assert_type("GLL")
    >>> latitude = p.lat_long(0, 1, "latitude")
    >>> longitude = p.lat_long(2, 3, "longitude")
    >>> time = p.time(4, "time")
    >>> status = p.enum_string(5, "status", "A", "V")
    >>> p.err() is None
    True
"""

from __future__ import annotations

__version__ = "0.1.0"

from .codec import BitReader, armor_value, decode_armor
from .exceptions import (
    ArmorError,
    DecodeError,
    EnumError,
    FieldIndexError,
    FormatError,
    LiteralError,
    NmeaError,
    ParseError,
    TypeMismatchError,
)
from .models import BaseSentence, Date, NmeaModel, Sentence, Time
from .parser import Parser
from .utils import (
    parse_date,
    parse_decimal,
    parse_dms,
    parse_float,
    parse_gps,
    parse_int,
    parse_lat_long,
    parse_time,
)

__all__ = [
    # Core API
    "Parser",
    "Sentence",
    "BaseSentence",
    # Values
    "NmeaModel",
    "Time",
    "Date",
    # Armor codec
    "armor_value",
    "decode_armor",
    "BitReader",
    # Exceptions
    "NmeaError",
    "ParseError",
    "FieldIndexError",
    "EnumError",
    "FormatError",
    "TypeMismatchError",
    "DecodeError",
    "ArmorError",
    "LiteralError",
    # Literal parsers
    "parse_int",
    "parse_float",
    "parse_time",
    "parse_date",
    "parse_lat_long",
    "parse_dms",
    "parse_gps",
    "parse_decimal",
    # Version
    "__version__",
]
