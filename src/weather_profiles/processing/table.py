"""
Table projection module.

Builds newest-first, fully formatted table rows covering every record.
"""

import logging
import math
from typing import Any, Iterable, List, Optional

from ..core import constants
from ..models.telemetry import TelemetryRecord, TableRow
from .availability import MetricAvailabilityDetector
from .timestamps import TimestampResolver


def format_cell(value: Any, hide_falsy: bool = True) -> str:
    """
    Format one table cell.

    With ``hide_falsy`` every falsy value, zero included, becomes the
    missing-value sentinel. Without it only None, NaN and empty strings do.

    Args:
        value: Raw metric value
        hide_falsy: Whether zero readings are shown as missing

    Returns:
        Cell text
    """
    if value is None or value == "":
        return constants.MISSING_VALUE
    if isinstance(value, float) and math.isnan(value):
        return constants.MISSING_VALUE
    if hide_falsy and not value:
        return constants.MISSING_VALUE

    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return str(value)


class TableProjector:
    """Project a telemetry batch into table rows."""

    def __init__(
        self,
        resolver: Optional[TimestampResolver] = None,
        hide_falsy: bool = True,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize table projector.

        Args:
            resolver: Timestamp resolver (table sentinel is used for display)
            hide_falsy: Render zero readings as the missing-value sentinel
            logger: Logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self.resolver = resolver or TimestampResolver(logger=self.logger)
        self.hide_falsy = hide_falsy
        self.detector = MetricAvailabilityDetector(self.logger)

    def build(
        self,
        batch: Iterable[Any],
        include_light: Optional[bool] = None
    ) -> List[TableRow]:
        """
        Build one row per record, most recent first.

        Args:
            batch: Telemetry records or raw record mappings
            include_light: Whether the light-intensity column is active. If None,
                           it is active when any record in the batch carries it.

        Returns:
            List of TableRow, same length as the batch
        """
        records = [TelemetryRecord.coerce(item) for item in batch]
        if include_light is None:
            include_light = self.detector.is_present(records, constants.LIGHT_INTENSITY)

        resolved = [(self.resolver.resolve_for_table(record), record) for record in records]
        resolved.sort(key=lambda pair: pair[0].instant, reverse=True)

        rows = []
        for when, record in resolved:
            rows.append(TableRow(
                display_time=when.display,
                temperature=format_cell(record.temperature, self.hide_falsy),
                humidity=format_cell(record.humidity, self.hide_falsy),
                pressure=format_cell(record.pressure, self.hide_falsy),
                light_intensity=(
                    format_cell(record.percentage_light_intensity, self.hide_falsy)
                    if include_light else None
                ),
            ))

        self.logger.debug(f"Projected {len(rows)} table rows (light column: {include_light})")
        return rows
