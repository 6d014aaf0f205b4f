"""
Telemetry data models.

Contains DTOs for raw telemetry records and the derived chart and table
values built from them.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Optional, Dict, Any, Union

from ..core import constants
from .timestamp import TimestampVariant, MISSING, classify_timestamp


@dataclass(frozen=True)
class TelemetryRecord:
    """One telemetry reading for a location, as delivered by the backend."""

    timestamp: TimestampVariant = MISSING
    temperature: Optional[Any] = None
    humidity: Optional[Any] = None
    pressure: Optional[Any] = None
    percentage_light_intensity: Optional[Any] = None
    extra: Dict[str, Any] = field(default_factory=dict, compare=False)

    @classmethod
    def from_dict(cls, data: Mapping) -> "TelemetryRecord":
        """
        Build a record from a backend payload, classifying its timestamp.

        Unknown keys are kept in ``extra``.
        """
        known = {"timestamp"} | set(constants.ALL_METRICS)
        return cls(
            timestamp=classify_timestamp(data.get("timestamp")),
            temperature=data.get(constants.TEMPERATURE),
            humidity=data.get(constants.HUMIDITY),
            pressure=data.get(constants.PRESSURE),
            percentage_light_intensity=data.get(constants.LIGHT_INTENSITY),
            extra={k: v for k, v in data.items() if k not in known},
        )

    @classmethod
    def coerce(cls, item: Union["TelemetryRecord", Mapping]) -> "TelemetryRecord":
        """Return ``item`` as a record, converting mappings."""
        if isinstance(item, cls):
            return item
        return cls.from_dict(item)

    def value(self, metric: str) -> Optional[Any]:
        """Raw value of a metric key, or None for unknown keys."""
        if metric in constants.ALL_METRICS:
            return getattr(self, metric)
        return self.extra.get(metric)

    @property
    def has_telemetry(self) -> bool:
        """False when every known metric is absent."""
        return any(self.value(metric) is not None for metric in constants.ALL_METRICS)


@dataclass(frozen=True)
class ResolvedTime:
    """Sortable instant and display string for one record."""

    instant: Union[int, float] = 0  # milliseconds since epoch
    display: str = constants.CHART_INVALID_TIME


@dataclass(frozen=True)
class SeriesPoint:
    """One chart point."""

    time: str
    value: Any

    def to_dict(self) -> Dict[str, Any]:
        return {"time": self.time, "value": self.value}


@dataclass(frozen=True)
class TableRow:
    """One formatted table row; ``light_intensity`` is None when the column is inactive."""

    display_time: str
    temperature: str
    humidity: str
    pressure: str
    light_intensity: Optional[str] = None

    def to_dict(self) -> Dict[str, str]:
        row = {
            "displayTime": self.display_time,
            "temperature": self.temperature,
            "humidity": self.humidity,
            "pressure": self.pressure,
        }
        if self.light_intensity is not None:
            row["lightIntensity"] = self.light_intensity
        return row
