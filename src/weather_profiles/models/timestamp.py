"""
Timestamp data models.

Backends deliver record timestamps in several shapes. Each raw value is
classified once into one of the variants below; everything downstream
dispatches on the variant instead of re-inspecting the raw value.
"""

import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Union

from ..core.constants import WRAPPED_DATE_KEY


@dataclass(frozen=True)
class WrappedDate:
    """Extended-JSON wrapper such as ``{"$date": "2024-01-02T00:00:00Z"}``."""

    value: Any  # ISO string, epoch millis, or {"$numberLong": "..."}


@dataclass(frozen=True)
class StringDate:
    """Plain date string."""

    value: str


@dataclass(frozen=True)
class EpochNumber:
    """Milliseconds since the Unix epoch."""

    value: Union[int, float]


@dataclass(frozen=True)
class MissingTimestamp:
    """Absent, null or unrecognised timestamp."""


TimestampVariant = Union[WrappedDate, StringDate, EpochNumber, MissingTimestamp]

MISSING = MissingTimestamp()


def classify_timestamp(raw: Any) -> TimestampVariant:
    """
    Classify a raw ``timestamp`` field.

    Precedence: wrapper mapping, then string, then number. Falsy values
    (None, empty string, 0, empty containers) are missing, as are booleans,
    non-finite numbers and mappings without a truthy ``$date``.

    Args:
        raw: Value of the record's ``timestamp`` field

    Returns:
        Timestamp variant
    """
    if isinstance(raw, (WrappedDate, StringDate, EpochNumber, MissingTimestamp)):
        return raw

    if not raw:
        return MISSING

    if isinstance(raw, Mapping):
        wrapped = raw.get(WRAPPED_DATE_KEY)
        if wrapped:
            return WrappedDate(wrapped)
        return MISSING

    if isinstance(raw, str):
        return StringDate(raw)

    if isinstance(raw, bool):
        return MISSING

    if isinstance(raw, (int, float)) and math.isfinite(raw):
        return EpochNumber(raw)

    return MISSING
