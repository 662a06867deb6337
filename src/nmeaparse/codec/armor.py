"""6-bit ASCII armor decoding.

AIS-style payloads (VDM/VDO sentences) pack binary data six bits per
character. Encoders emit codes 48-87 ("0".."W") for values 0-39 and codes
96-119 ("`".."w") for values 40-63. The decoder accepts any code in 48-119:
value = code - 48, and values above 40 drop by 8 to close the gap.

All operations are deterministic and emit bits MSB first.
"""

from __future__ import annotations

from ..exceptions import ArmorError

BITS_PER_CHAR = 6

# Valid character codes are ARMOR_MIN <= code < ARMOR_MAX
ARMOR_MIN = 48
ARMOR_MAX = 120

# Values above ARMOR_GAP_START shift down by ARMOR_GAP_SIZE
ARMOR_GAP_START = 40
ARMOR_GAP_SIZE = 8


def armor_value(char: str) -> int:
    """Map one armored character to its 6-bit value.

    Args:
        char: Single payload character

    Returns:
        Value in 0-63

    Raises:
        ArmorError: If char is not exactly one character or its code is
            outside 48-119

    Example:
        >>> armor_value("0"), armor_value("W"), armor_value("`"), armor_value("w")
        (0, 39, 40, 63)
    """
    if len(char) != 1:
        raise ArmorError("data byte", f"expected a single character, got {char!r}")

    code = ord(char)
    if code < ARMOR_MIN or code >= ARMOR_MAX:
        raise ArmorError("data byte", f"character {char!r} outside armor alphabet")

    value = code - ARMOR_MIN
    if value > ARMOR_GAP_START:
        value -= ARMOR_GAP_SIZE
    return value


def decode_armor(payload: str, fill_bits: int = 0) -> list[int]:
    """Decode an armored payload into a flat bit sequence.

    The decoded length is len(payload) * 6 - fill_bits; the trailing fill
    bits of the last character are dropped by stopping at that length.
    Decoding is all-or-nothing: one bad character fails the whole payload.

    Args:
        payload: Armored text
        fill_bits: Number of padding bits at the end (0-5)

    Returns:
        List of 0/1 values

    Raises:
        ArmorError: If fill_bits is out of range, the payload is shorter than
            the fill bits, or a character is outside the alphabet

    Example:
        >>> decode_armor("w", fill_bits=2)
        [1, 1, 1, 1]
    """
    if fill_bits < 0 or fill_bits >= BITS_PER_CHAR:
        raise ArmorError("fill bits", f"expected 0-{BITS_PER_CHAR - 1}, got {fill_bits}")

    num_bits = len(payload) * BITS_PER_CHAR - fill_bits
    if num_bits < 0:
        raise ArmorError("num bits", f"{len(payload)} characters cannot hold {fill_bits} fill bits")

    values = [armor_value(char) for char in payload]

    bits: list[int] = []
    for value in values:
        for i in range(BITS_PER_CHAR - 1, -1, -1):
            if len(bits) == num_bits:
                break
            bits.append((value >> i) & 1)

    return bits
