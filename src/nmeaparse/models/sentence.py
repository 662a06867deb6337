"""Tokenized sentence seen by the parser.

Splitting a raw line, validating its checksum and extracting the talker
are done elsewhere. The parser only needs the three read-only properties
described by the Sentence protocol.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from .base import NmeaModel


@runtime_checkable
class Sentence(Protocol):
    """Read-only view of a tokenized sentence."""

    @property
    def type(self) -> str:
        """Sentence type tag, e.g. "RMC"."""
        ...

    @property
    def prefix(self) -> str:
        """Human-readable source identifier used in error text, e.g. "GPRMC"."""
        ...

    @property
    def fields(self) -> Sequence[str]:
        """Ordered field values, 0-indexed in wire order."""
        ...


class BaseSentence(NmeaModel):
    """Concrete, immutable sentence value.

    Example:
        >>> s = BaseSentence(type="GLL", prefix="GPGLL", fields=["4916.45", "N"])
        >>> s.fields
        ('4916.45', 'N')
    """

    type: str
    prefix: str
    fields: tuple[str, ...] = ()
