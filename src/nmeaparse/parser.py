"""Typed, index-based access to the fields of a tokenized sentence.

A Parser wraps one sentence and latches the first error it runs into.
Every getter checks the latch before doing anything, so a decoder can
issue a whole run of getter calls and look at ``err()`` once at the end:

    p = Parser(sentence)
    p.assert_type("RMC")
    time = p.time(0, "time")
    validity = p.enum_string(1, "validity", "A", "V")
    latitude = p.lat_long(2, 3, "latitude")
    if p.err() is not None:
        ...

Once an error is latched, getters return their zero value ("", [], 0,
0.0, Time(), Date()) and the latched error is never replaced.
"""

from __future__ import annotations

import logging

from .codec.armor import BITS_PER_CHAR, decode_armor
from .exceptions import (
    ArmorError,
    DecodeError,
    EnumError,
    FieldIndexError,
    FormatError,
    LiteralError,
    ParseError,
    TypeMismatchError,
)
from .models.sentence import Sentence
from .models.values import Date, Time
from .utils.literals import parse_date, parse_float, parse_int, parse_lat_long, parse_time

logger = logging.getLogger(__name__)

INDEX_OUT_OF_RANGE = "index out of range"


class Parser:
    """Extracts typed values from one sentence with a sticky first error.

    A Parser is created per sentence and discarded after use. It is not
    meant to be shared between threads.

    Args:
        sentence: Any object exposing ``type``, ``prefix`` and ``fields``
    """

    def __init__(self, sentence: Sentence) -> None:
        self.sentence = sentence
        self._err: ParseError | None = None

    def __repr__(self) -> str:
        return f"Parser(prefix={self.sentence.prefix!r}, err={self._err!r})"

    def assert_type(self, typ: str) -> None:
        """Latch an error if the sentence type is not ``typ``."""
        if self.sentence.type != typ:
            self._latch(TypeMismatchError, "type", self.sentence.type)

    def err(self) -> ParseError | None:
        """Return the first error encountered, or None."""
        return self._err

    def set_err(self, context: str, value: str) -> None:
        """Latch a generic error.

        Has no effect if an error is already latched. Message-specific
        decoders use this for checks the getters cannot express.
        """
        self._latch(ParseError, context, value)

    def raise_for_error(self) -> None:
        """Raise the latched error, if any."""
        if self._err is not None:
            raise self._err

    def _latch(self, error_cls: type[ParseError], context: str, value: str) -> None:
        if self._err is not None:
            logger.debug(
                "%s: ignoring %s for %s, error already latched",
                self.sentence.prefix,
                error_cls.__name__,
                context,
            )
            return
        self._err = error_cls(self.sentence.prefix, context, value)
        logger.debug("%s", self._err)

    def string(self, i: int, context: str) -> str:
        """Return the field at index ``i`` verbatim.

        Args:
            i: Field index
            context: Label used in the error message

        Returns:
            Field value ("" on error; an empty field is also "")
        """
        if self._err is not None:
            return ""
        fields = self.sentence.fields
        if i < 0 or i >= len(fields):
            self._latch(FieldIndexError, context, INDEX_OUT_OF_RANGE)
            return ""
        return fields[i]

    def list_string(self, from_: int, context: str) -> list[str]:
        """Return a copy of all fields from index ``from_`` to the end.

        An error is latched if ``from_`` does not point at a field.
        """
        if self._err is not None:
            return []
        fields = self.sentence.fields
        if from_ < 0 or from_ >= len(fields):
            self._latch(FieldIndexError, context, INDEX_OUT_OF_RANGE)
            return []
        return list(fields[from_:])

    def enum_string(self, i: int, context: str, *options: str) -> str:
        """Return the field at index ``i`` if it is one of ``options``.

        An empty field is returned as-is without error.
        """
        s = self.string(i, context)
        if self._err is not None or s == "":
            return ""
        if s in options:
            return s
        self._latch(EnumError, context, s)
        return ""

    def enum_chars(self, i: int, context: str, *options: str) -> list[str]:
        """Match every character of the field against single-character options.

        Characters may repeat; their order is preserved. If any character
        has no matching option the whole field is reported and [] returned.

        Example:
            Field "ADA" with options "A", "D", "N" gives ["A", "D", "A"].
        """
        s = self.string(i, context)
        if self._err is not None or s == "":
            return []

        chars: list[str] = []
        for char in s:
            for option in options:
                if option == char:
                    chars.append(option)
                    break

        if len(chars) != len(s):
            self._latch(EnumError, context, s)
            return []
        return chars

    def int64(self, i: int, context: str) -> int:
        """Return the field as a signed 64-bit integer; empty gives 0."""
        s = self.string(i, context)
        if self._err is not None or s == "":
            return 0
        try:
            return parse_int(s)
        except LiteralError:
            self._latch(FormatError, context, s)
            return 0

    def float64(self, i: int, context: str) -> float:
        """Return the field as a float; empty gives 0.0."""
        s = self.string(i, context)
        if self._err is not None or s == "":
            return 0.0
        try:
            return parse_float(s)
        except LiteralError:
            self._latch(FormatError, context, s)
            return 0.0

    def time(self, i: int, context: str) -> Time:
        """Return the field as a Time.

        An empty field gives a Time with ``valid=False`` and no error.
        """
        s = self.string(i, context)
        if self._err is not None:
            return Time()
        try:
            return parse_time(s)
        except LiteralError:
            self._latch(FormatError, context, s)
            return Time()

    def date(self, i: int, context: str) -> Date:
        """Return the field as a Date.

        An empty field gives a Date with ``valid=False`` and no error.
        """
        s = self.string(i, context)
        if self._err is not None:
            return Date()
        try:
            return parse_date(s)
        except LiteralError:
            self._latch(FormatError, context, s)
            return Date()

    def lat_long(self, i: int, j: int, context: str) -> float:
        """Return the coordinate held by a value field and a hemisphere field.

        Args:
            i: Index of the numeric part, e.g. "4807.038"
            j: Index of the direction, e.g. "N"
            context: Label used in the error message

        Returns:
            Signed decimal degrees (0.0 on error)
        """
        a = self.string(i, context)
        b = self.string(j, context)
        if self._err is not None:
            return 0.0
        try:
            return parse_lat_long(f"{a} {b}")
        except LiteralError as e:
            self._latch(FormatError, context, str(e))
            return 0.0

    def six_bit_ascii_armour(self, i: int, fill_bits: int, context: str) -> list[int]:
        """Decode the 6-bit ASCII armored payload at index ``i``.

        Used for the encapsulated binary payload of VDM and VDO sentences.

        Args:
            i: Index of the payload field
            fill_bits: Number of padding bits at the end of the payload (0-5)
            context: Label used in the error message

        Returns:
            List of 0/1 values, len(payload) * 6 - fill_bits long ([] on error)
        """
        if self._err is not None:
            return []
        if fill_bits < 0 or fill_bits >= BITS_PER_CHAR:
            self._latch(DecodeError, context, "fill bits")
            return []

        payload = self.string(i, "encoded payload")
        if self._err is not None:
            return []

        try:
            return decode_armor(payload, fill_bits)
        except ArmorError as e:
            self._latch(DecodeError, context, e.reason)
            return []
