"""Time and date values decoded from sentence fields."""

from __future__ import annotations

from pydantic import Field

from .base import NmeaModel


class Time(NmeaModel):
    """UTC time of day as carried by hhmmss.sss fields.

    Attributes:
        valid: False when the field was empty
        hour: Hour (0-23)
        minute: Minute (0-59)
        second: Second (0-60, leap seconds allowed)
        millisecond: Millisecond (0-999)
    """

    valid: bool = False
    hour: int = Field(default=0, ge=0, le=23)
    minute: int = Field(default=0, ge=0, le=59)
    second: int = Field(default=0, ge=0, le=60)
    millisecond: int = Field(default=0, ge=0, le=999)

    def __str__(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}:{self.second:02d}.{self.millisecond:03d}"


class Date(NmeaModel):
    """Calendar date as carried by ddmmyy fields.

    Attributes:
        valid: False when the field was empty
        dd: Day of month
        mm: Month
        yy: Two-digit year
    """

    valid: bool = False
    dd: int = Field(default=0, ge=0, le=31)
    mm: int = Field(default=0, ge=0, le=12)
    yy: int = Field(default=0, ge=0, le=99)

    def __str__(self) -> str:
        return f"{self.dd:02d}/{self.mm:02d}/{self.yy:02d}"
