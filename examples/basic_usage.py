#!/usr/bin/env python3
"""Basic usage example for nmeaparse.

This example demonstrates:
1. Wrapping a tokenized sentence in a Parser
2. Extracting typed fields by index
3. Checking the latched error once at the end
"""

from __future__ import annotations

from pydantic import BaseModel

from nmeaparse import BaseSentence, Date, Parser, ParseError, Time


class RMC(BaseModel):
    """Recommended minimum navigation information."""

    time: Time
    validity: str
    latitude: float
    longitude: float
    speed: float
    course: float
    date: Date
    variation: float


def parse_rmc(sentence: BaseSentence) -> RMC:
    """Decode an RMC sentence.

    Raises:
        ParseError: If any field is invalid
    """
    p = Parser(sentence)
    p.assert_type("RMC")
    rmc = RMC(
        time=p.time(0, "time"),
        validity=p.enum_string(1, "validity", "A", "V"),
        latitude=p.lat_long(2, 3, "latitude"),
        longitude=p.lat_long(4, 5, "longitude"),
        speed=p.float64(6, "speed"),
        course=p.float64(7, "course"),
        date=p.date(8, "date"),
        variation=p.float64(9, "variation"),
    )
    if p.string(10, "variation direction") == "W":
        rmc = rmc.model_copy(update={"variation": -rmc.variation})
    p.raise_for_error()
    return rmc


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("nmeaparse Basic Usage Example")
    print("=" * 60)
    print()

    # $GPRMC,220516,A,5133.82,N,00042.24,W,173.8,231.8,130694,004.2,W*70
    print("1. Decoding a valid RMC sentence...")
    sentence = BaseSentence(
        type="RMC",
        prefix="GPRMC",
        fields=["220516", "A", "5133.82", "N", "00042.24", "W", "173.8", "231.8", "130694", "004.2", "W"],
    )
    rmc = parse_rmc(sentence)
    print(f"   Time: {rmc.time}")
    print(f"   Validity: {rmc.validity}")
    print(f"   Position: {rmc.latitude:.5f}, {rmc.longitude:.5f}")
    print(f"   Speed: {rmc.speed} knots, course {rmc.course}")
    print(f"   Date: {rmc.date}")
    print(f"   Variation: {rmc.variation}")
    print()

    print("2. Decoding an RMC sentence with a bad field...")
    broken = sentence.model_copy(update={"fields": ("220516", "X", *sentence.fields[2:])})
    try:
        parse_rmc(broken)
    except ParseError as e:
        print(f"   {type(e).__name__}: {e}")
    print()

    print("3. Collecting the first error without raising...")
    p = Parser(broken)
    p.enum_string(1, "validity", "A", "V")
    p.int64(99, "missing")  # no-op, first error already latched
    print(f"   {p.err()}")
    print()


if __name__ == "__main__":
    main()
