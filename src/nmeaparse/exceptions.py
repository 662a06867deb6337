"""Exception hierarchy for nmeaparse.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from NmeaError for easy catching of any nmeaparse-specific error.

Two families live here:

- ParseError and its subclasses describe the single error a Parser latches
  for a sentence. They are created and stored, not raised, while a getter
  chain runs; callers inspect them through ``Parser.err()``.
- ArmorError and LiteralError are raised by the pure decoding functions
  (armor decoder and literal parsers). The Parser catches them and latches
  the matching ParseError.
"""

from __future__ import annotations


class NmeaError(Exception):
    """Base exception for all nmeaparse errors."""

    pass


class ParseError(NmeaError):
    """The first error found while extracting fields from a sentence.

    Attributes:
        prefix: Prefix of the sentence the error belongs to (e.g. "GPRMC")
        context: Label of the value being extracted (e.g. "latitude")
        value: The offending value or a short reason
    """

    def __init__(self, prefix: str, context: str, value: str) -> None:
        self.prefix = prefix
        self.context = context
        self.value = value
        super().__init__(f"nmea: {prefix} invalid {context}: {value}")

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(prefix={self.prefix!r}, "
            f"context={self.context!r}, value={self.value!r})"
        )


class FieldIndexError(ParseError):
    """Field index outside the sentence's field list."""

    pass


class EnumError(ParseError):
    """Field value is not one of the allowed options.

    Examples:
        - Status field "X" where only "A" or "V" are allowed
        - Mode field "ADX" where every character must be a known mode
    """

    pass


class FormatError(ParseError):
    """Field value could not be parsed as the requested type.

    Examples:
        - Integer field "12x"
        - Time field "1235"
        - Coordinate fields "4807.038" / "Q"
    """

    pass


class TypeMismatchError(ParseError):
    """Sentence type differs from the one the decoder expects."""

    pass


class DecodeError(ParseError):
    """6-bit ASCII armored payload could not be decoded.

    Examples:
        - Fill bit count outside 0-5
        - Payload shorter than the fill bit count
        - Character outside the armor alphabet
    """

    pass


class ArmorError(NmeaError, ValueError):
    """Raised by the pure armor decoder.

    Attributes:
        reason: Short reason reported as the latched error value
            ("fill bits", "num bits" or "data byte")
    """

    def __init__(self, reason: str, detail: str = "") -> None:
        self.reason = reason
        super().__init__(f"{reason}: {detail}" if detail else reason)


class LiteralError(NmeaError, ValueError):
    """Raised when a time, date or coordinate literal cannot be parsed."""

    pass
