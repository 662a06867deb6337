"""Pydantic value objects for nmeaparse.

This module provides the sentence protocol and model plus the Time and
Date values produced by the parser.
"""

from __future__ import annotations

from .base import NmeaModel
from .sentence import BaseSentence, Sentence
from .values import Date, Time

__all__ = [
    "NmeaModel",
    "BaseSentence",
    "Sentence",
    "Date",
    "Time",
]
