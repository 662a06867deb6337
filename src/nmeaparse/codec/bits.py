"""Reading integers out of a decoded bit sequence.

Message-specific decoders slice armored payloads into fixed-width fields.
BitReader does the slicing; what the fields mean is left to the caller.
"""

from __future__ import annotations

from collections.abc import Sequence

MAX_FIELD_BITS = 64


class BitReader:
    """Cursor over a decoded payload, consuming fixed-width fields in order.

    Example:
        >>> reader = BitReader(decode_armor("15M67F", 0))
        >>> msg_type = reader.read_uint(6)
        >>> repeat = reader.read_uint(2)
    """

    def __init__(self, bits: Sequence[int]) -> None:
        """Start at the first bit of ``bits`` (most significant first).

        Raises:
            ValueError: If the sequence holds anything other than 0 and 1
        """
        if any(bit not in (0, 1) for bit in bits):
            raise ValueError("bit sequence may only contain 0 and 1")
        self._bits = list(bits)
        self._position = 0

    def _take(self, width: int) -> list[int]:
        end = self._position + width
        if end > len(self._bits):
            raise IndexError(
                f"field of {width} bits at offset {self._position} runs past "
                f"the {len(self._bits)}-bit payload"
            )
        field = self._bits[self._position : end]
        self._position = end
        return field

    def read_bool(self) -> bool:
        """Consume one bit; 1 is True.

        Raises:
            IndexError: If the payload is exhausted
        """
        return self._take(1)[0] == 1

    def read_uint(self, width: int) -> int:
        """Consume ``width`` bits as an unsigned big-endian integer.

        Raises:
            ValueError: If width is not in 1-64
            IndexError: If fewer than ``width`` bits are left
        """
        if not 1 <= width <= MAX_FIELD_BITS:
            raise ValueError(f"unsigned field width must be in 1-{MAX_FIELD_BITS}, got {width}")

        value = 0
        for bit in self._take(width):
            value = (value << 1) | bit
        return value

    def read_int(self, width: int) -> int:
        """Consume ``width`` bits as a two's complement integer.

        AIS uses this for fields such as rate of turn and coordinates.

        Raises:
            ValueError: If width is not in 2-64
            IndexError: If fewer than ``width`` bits are left
        """
        if not 2 <= width <= MAX_FIELD_BITS:
            raise ValueError(f"signed field width must be in 2-{MAX_FIELD_BITS}, got {width}")

        value = self.read_uint(width)
        if value >= 1 << (width - 1):
            value -= 1 << width
        return value

    def skip(self, width: int) -> None:
        """Consume ``width`` bits without decoding them.

        Raises:
            IndexError: If width is negative or runs past the payload
        """
        if width < 0:
            raise IndexError(f"cannot skip a negative width ({width})")
        self._take(width)

    def bits_remaining(self) -> int:
        """Number of bits not yet consumed."""
        return len(self._bits) - self._position

    def position(self) -> int:
        """Offset of the next bit to be consumed."""
        return self._position
