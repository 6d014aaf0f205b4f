"""
Data models for the weather profiles viewer.

Contains DTOs for profiles, telemetry records, timestamps and view models.
"""

from .timestamp import (
    WrappedDate,
    StringDate,
    EpochNumber,
    MissingTimestamp,
    TimestampVariant,
    classify_timestamp,
)
from .telemetry import TelemetryRecord, ResolvedTime, SeriesPoint, TableRow
from .profile import Profile, SelectedLocation
from .view import MetricSpec, SelectionSnapshot, ProfileViewModel

__all__ = [
    "WrappedDate",
    "StringDate",
    "EpochNumber",
    "MissingTimestamp",
    "TimestampVariant",
    "classify_timestamp",
    "TelemetryRecord",
    "ResolvedTime",
    "SeriesPoint",
    "TableRow",
    "Profile",
    "SelectedLocation",
    "MetricSpec",
    "SelectionSnapshot",
    "ProfileViewModel",
]
