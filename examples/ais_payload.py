#!/usr/bin/env python3
"""AIS payload example for nmeaparse.

This example demonstrates:
1. Decoding the 6-bit armored payload of a VDM sentence
2. Slicing the bit sequence with BitReader
"""

from __future__ import annotations

from nmeaparse import BaseSentence, BitReader, Parser


def main() -> None:
    """Run the AIS payload example."""
    print("=" * 60)
    print("nmeaparse AIS Payload Example")
    print("=" * 60)
    print()

    # !AIVDM,1,1,,B,177KQJ5000G?tO`K>RA1wUbN0TKH,0*5C
    sentence = BaseSentence(
        type="VDM",
        prefix="AIVDM",
        fields=["1", "1", "", "B", "177KQJ5000G?tO`K>RA1wUbN0TKH", "0"],
    )

    p = Parser(sentence)
    p.assert_type("VDM")
    fragments = p.int64(0, "number of fragments")
    channel = p.string(3, "channel")
    fill_bits = p.int64(5, "number of fill bits")
    bits = p.six_bit_ascii_armour(4, fill_bits, "data")
    p.raise_for_error()

    print(f"Fragments: {fragments}, channel: {channel}")
    print(f"Payload: {len(bits)} bits")

    reader = BitReader(bits)
    print(f"Message type: {reader.read_uint(6)}")
    print(f"Repeat indicator: {reader.read_uint(2)}")
    print(f"MMSI: {reader.read_uint(30)}")
    print()


if __name__ == "__main__":
    main()
