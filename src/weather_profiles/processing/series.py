"""
Chart series module.

Builds chronological (time, value) series for one metric at a time.
"""

import logging
from typing import Any, Iterable, List, Optional

from ..models.telemetry import TelemetryRecord, SeriesPoint
from .timestamps import TimestampResolver


class SeriesBuilder:
    """Build per-metric chart series from a telemetry batch."""

    def __init__(
        self,
        resolver: Optional[TimestampResolver] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize series builder.

        Args:
            resolver: Timestamp resolver (chart sentinel is used for display)
            logger: Logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self.resolver = resolver or TimestampResolver(logger=self.logger)

    def build(self, batch: Iterable[Any], metric: str) -> List[SeriesPoint]:
        """
        Build the series for ``metric``, oldest first.

        Records without any telemetry, and records without ``metric``, are
        skipped. Values are passed through unchanged. Records sharing an
        instant keep their batch order.

        Args:
            batch: Telemetry records or raw record mappings
            metric: Metric key (e.g. 'temperature')

        Returns:
            List of SeriesPoint (empty when no record carries the metric)
        """
        records = [TelemetryRecord.coerce(item) for item in batch]
        usable = [
            record for record in records
            if record.has_telemetry and record.value(metric) is not None
        ]

        resolved = [(self.resolver.resolve_for_chart(record), record) for record in usable]
        resolved.sort(key=lambda pair: pair[0].instant)

        points = [
            SeriesPoint(time=when.display, value=record.value(metric))
            for when, record in resolved
        ]

        self.logger.debug(
            f"Series {metric}: {len(points)} points from {len(records)} records"
        )
        return points
