"""Base model class and nmeaparse-specific Pydantic configuration.

Every value object the package hands out (sentences, times, dates) derives
from NmeaModel so they share one validation policy.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class NmeaModel(BaseModel):
    """Base class for all nmeaparse value objects.

    Instances are immutable: a sentence's fields never change after it was
    tokenized, and decoded values are handed to callers by value.
    """

    # ConfigDict for Pydantic v2
    model_config = ConfigDict(
        # Coerce compatible inputs (e.g. a list of fields into a tuple)
        strict=False,
        # Values never change after construction
        frozen=True,
        # Forbid extra fields not defined in schema
        extra="forbid",
    )
