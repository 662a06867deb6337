"""Payload and field inspection CLI commands."""

from __future__ import annotations

from ..codec.armor import decode_armor
from ..models.sentence import BaseSentence
from ..parser import Parser


def format_bits(bits: list[int], group: int = 6) -> str:
    """Render a bit sequence as space-separated groups.

    Args:
        bits: Sequence of 0/1 values
        group: Bits per group (one armored character by default)

    Returns:
        Text such as "000001 000101 0111"
    """
    text = "".join(str(bit) for bit in bits)
    return " ".join(text[i : i + group] for i in range(0, len(text), group))


def show_armor(payload: str, fill_bits: int) -> None:
    """Decode an armored payload and print its bits.

    Raises:
        ArmorError: If the payload cannot be decoded
    """
    bits = decode_armor(payload, fill_bits)

    print(f"{'=' * 19} {payload} {'=' * 19}")
    print(f"Characters: {len(payload)}")
    print(f"Fill bits: {fill_bits}")
    print(f"Decoded length: {len(bits)} bits")
    print()
    print(format_bits(bits))
    print()


def show_fields(line: str, prefix: str | None = None) -> None:
    """Print the fields of a comma-separated sentence body by index.

    The first element is taken as the sentence type; the prefix defaults to
    the type. No checksum or framing is interpreted.

    Raises:
        ParseError: If the line holds no fields after the type
    """
    typ, *fields = line.split(",")
    sentence = BaseSentence(type=typ, prefix=prefix or typ, fields=fields)

    p = Parser(sentence)
    values = p.list_string(0, "fields")
    p.raise_for_error()

    print(f"{'-' * 24} {sentence.prefix} {'-' * 24}")
    width = len(str(len(values) - 1))
    for i, value in enumerate(values):
        print(f"{i:>{width}}. {value!r}")
    print()
