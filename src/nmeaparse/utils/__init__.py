"""Utility functions for nmeaparse.

This module provides the literal parsers for numbers, times, dates and
coordinates.
"""

from __future__ import annotations

from .literals import (
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
    # Numbers
    "parse_int",
    "parse_float",
    # Time and date
    "parse_time",
    "parse_date",
    # Coordinates
    "parse_lat_long",
    "parse_dms",
    "parse_gps",
    "parse_decimal",
]
