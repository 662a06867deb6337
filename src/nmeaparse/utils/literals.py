"""Parsers for the literal syntaxes found in sentence fields.

These are plain functions: they take one normalized string and either
return a value or raise LiteralError with a descriptive message. The
Parser forwards their outcome into its error latch.

Supported forms:
    - Integers: base-10, optional sign, signed 64-bit range
    - Floats: decimal or exponent notation
    - Time: hhmmss[.sss]
    - Date: ddmmyy
    - Coordinates: DMS (33° 23' 22" N), GPS (3323.3667 N), decimal (-33.38)
"""

from __future__ import annotations

import math
import re

from pydantic import ValidationError

from ..exceptions import LiteralError
from ..models.values import Date, Time

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1

NORTH = "N"
SOUTH = "S"
EAST = "E"
WEST = "W"

DEGREES = "°"

_INT_RE = re.compile(r"[+-]?\d+", re.ASCII)
_FLOAT_RE = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:e[+-]?\d+)?|inf(?:inity)?|nan)",
    re.ASCII | re.IGNORECASE,
)
_TIME_RE = re.compile(r"(\d{2})(\d{2})(\d{2})(?:\.(\d*))?", re.ASCII)
_DATE_RE = re.compile(r"(\d{2})(\d{2})(\d{2})", re.ASCII)
_DMS_RE = re.compile(
    r"\s*(\d+)" + DEGREES + r"\s*(\d+)'\s*(\d+(?:\.\d+)?)\"\s*([NSEW])?\s*",
    re.ASCII,
)


def parse_int(s: str) -> int:
    """Parse a base-10 signed 64-bit integer.

    Args:
        s: Literal such as "-42"

    Returns:
        Integer value

    Raises:
        LiteralError: If the literal is malformed or out of the int64 range
    """
    if _INT_RE.fullmatch(s) is None:
        raise LiteralError(f"parse int: invalid syntax '{s}'")
    value = int(s)
    if value < INT64_MIN or value > INT64_MAX:
        raise LiteralError(f"parse int: value out of range '{s}'")
    return value


def parse_float(s: str) -> float:
    """Parse a 64-bit floating-point literal.

    Only ASCII decimal or exponent notation and the inf/nan names are
    accepted; whitespace, digit separators and non-ASCII digits are
    rejected even though Python's float() would take them.

    Raises:
        LiteralError: If the literal is malformed or overflows
    """
    if _FLOAT_RE.fullmatch(s) is None:
        raise LiteralError(f"parse float: invalid syntax '{s}'")
    value = float(s)
    if math.isinf(value) and "inf" not in s.lower():
        raise LiteralError(f"parse float: value out of range '{s}'")
    return value


def parse_time(s: str) -> Time:
    """Parse an hhmmss[.sss] time literal.

    An empty literal is not an error: it yields a Time marked invalid.
    Fractional digits beyond milliseconds are truncated.

    Example:
        >>> parse_time("123519.25")
        Time(valid=True, hour=12, minute=35, second=19, millisecond=250)
    """
    if s == "":
        return Time()

    match = _TIME_RE.fullmatch(s)
    if match is None:
        raise LiteralError(f"parse time: expected hhmmss.ss format, got '{s}'")

    hour, minute, second, fraction = match.groups()
    millisecond = int((fraction or "")[:3].ljust(3, "0"))
    try:
        return Time(
            valid=True,
            hour=int(hour),
            minute=int(minute),
            second=int(second),
            millisecond=millisecond,
        )
    except ValidationError as e:
        raise LiteralError(f"parse time: value out of range '{s}'") from e


def parse_date(s: str) -> Date:
    """Parse a ddmmyy date literal.

    An empty literal is not an error: it yields a Date marked invalid.
    """
    if s == "":
        return Date()

    match = _DATE_RE.fullmatch(s)
    if match is None:
        raise LiteralError(f"parse date: expected ddmmyy format, got '{s}'")

    dd, mm, yy = (int(part) for part in match.groups())
    try:
        return Date(valid=True, dd=dd, mm=mm, yy=yy)
    except ValidationError as e:
        raise LiteralError(f"parse date: value out of range '{s}'") from e


def parse_dms(s: str) -> float:
    """Parse a degrees/minutes/seconds coordinate, e.g. 33° 23' 22" S.

    Southern and western hemispheres are negative.
    """
    match = _DMS_RE.fullmatch(s)
    if match is None:
        raise LiteralError(f"parse dms: invalid format '{s}'")

    degrees, minutes, seconds, direction = match.groups()
    value = int(degrees) + int(minutes) / 60 + float(seconds) / 3600
    if direction in (SOUTH, WEST):
        return -value
    return value


def parse_gps(s: str) -> float:
    """Parse a GPS coordinate of the form "DDDMM.mmmm H".

    The numeric part packs whole degrees in front of decimal minutes;
    H is one of N, S, E, W.

    Example:
        >>> round(parse_gps("4807.038 N"), 4)
        48.1173
    """
    parts = s.split(" ")
    if len(parts) != 2:
        raise LiteralError(f"parse gps: invalid format '{s}'")

    number, direction = parts
    try:
        value = parse_float(number)
    except LiteralError as e:
        raise LiteralError(f"parse gps: {e}") from e
    if not math.isfinite(value):
        raise LiteralError(f"parse gps: invalid value '{number}'")

    degrees = math.floor(value / 100)
    minutes = value - degrees * 100
    value = degrees + minutes / 60

    if direction in (NORTH, EAST):
        return value
    if direction in (SOUTH, WEST):
        return -value
    raise LiteralError(f"parse gps: invalid direction [{direction}]")


def parse_decimal(s: str) -> float:
    """Parse a signed decimal-degrees coordinate, e.g. "-151.234"."""
    try:
        value = parse_float(s)
    except LiteralError as e:
        raise LiteralError(f"parse decimal: {e}") from e
    if not math.isfinite(value) or abs(value) > 180:
        raise LiteralError(f"parse decimal: not a decimal coordinate '{s}'")
    return value


def parse_lat_long(s: str) -> float:
    """Parse a coordinate in any supported form.

    DMS is tried first, then GPS, then plain decimal degrees. Whichever
    form matches, the result must lie within -180 to 180 degrees.

    Raises:
        LiteralError: If no form matches or the value is out of range
    """
    for parse in (parse_dms, parse_gps, parse_decimal):
        try:
            value = parse(s)
        except LiteralError:
            continue
        if not -180 <= value <= 180:
            raise LiteralError(f"coordinate out of range [{s}]")
        return value
    raise LiteralError(f"cannot parse [{s}], unknown format")
