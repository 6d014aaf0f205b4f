"""
Timestamp resolution module.

Turns a record's classified timestamp into a sortable instant and a
display string. Never raises on malformed input.
"""

import logging
import math
from collections.abc import Mapping
from datetime import datetime
from typing import Any, Optional, Union

from ..core import constants
from ..core.date_utils import DateUtils
from ..models.telemetry import TelemetryRecord, ResolvedTime
from ..models.timestamp import (
    WrappedDate,
    StringDate,
    EpochNumber,
    TimestampVariant,
    classify_timestamp,
)


class TimestampResolver:
    """Resolve record timestamps for sorting and display."""

    def __init__(
        self,
        date_utils: Optional[DateUtils] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize timestamp resolver.

        Args:
            date_utils: Date utilities carrying the display timezone and format
            logger: Logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self.date_utils = date_utils or DateUtils(logger=self.logger)

    @staticmethod
    def variant_of(item: Any) -> TimestampVariant:
        """Timestamp variant of a record, a raw mapping, or a variant itself."""
        if isinstance(item, TelemetryRecord):
            return item.timestamp
        if isinstance(item, Mapping):
            return classify_timestamp(item.get("timestamp"))
        return classify_timestamp(item)

    def resolve(self, item: Any, sentinel: str = constants.CHART_INVALID_TIME) -> ResolvedTime:
        """
        Resolve a record's timestamp.

        Args:
            item: TelemetryRecord, raw record mapping, or timestamp variant
            sentinel: Display value used when no date can be rendered

        Returns:
            ResolvedTime with ``instant`` in epoch milliseconds (0 if unresolvable)
        """
        variant = self.variant_of(item)

        if isinstance(variant, WrappedDate):
            return self._resolve_wrapped(variant.value, sentinel)
        if isinstance(variant, StringDate):
            return self._resolve_string(variant.value, sentinel)
        if isinstance(variant, EpochNumber):
            return self._resolve_epoch(variant.value, sentinel)

        return ResolvedTime(instant=0, display=sentinel)

    def resolve_for_chart(self, item: Any) -> ResolvedTime:
        return self.resolve(item, constants.CHART_INVALID_TIME)

    def resolve_for_table(self, item: Any) -> ResolvedTime:
        return self.resolve(item, constants.TABLE_INVALID_TIME)

    def sort_key(self, item: Any) -> Union[int, float]:
        """Sortable instant; the sentinel does not affect it."""
        return self.resolve(item).instant

    def _resolve_wrapped(self, value: Any, sentinel: str) -> ResolvedTime:
        # {"$date": {"$numberLong": "1704153600000"}}
        if isinstance(value, Mapping) and constants.WRAPPED_LONG_KEY in value:
            try:
                value = int(value[constants.WRAPPED_LONG_KEY])
            except (TypeError, ValueError):
                self.logger.debug(f"Unparseable wrapped timestamp: {value!r}")
                return ResolvedTime(instant=0, display=sentinel)

        if isinstance(value, str):
            return self._resolve_string(value, sentinel)
        if isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value):
            return self._resolve_epoch(value, sentinel)

        self.logger.debug(f"Unsupported wrapped timestamp: {value!r}")
        return ResolvedTime(instant=0, display=sentinel)

    def _resolve_string(self, value: str, sentinel: str) -> ResolvedTime:
        dt = self.date_utils.parse_datetime(value)
        if dt is None:
            self.logger.debug(f"Unparseable timestamp string: {value!r}")
            return ResolvedTime(instant=0, display=sentinel)

        return ResolvedTime(
            instant=self.date_utils.to_epoch_millis(dt),
            display=self._format(dt, sentinel),
        )

    def _resolve_epoch(self, value: Union[int, float], sentinel: str) -> ResolvedTime:
        # Numeric timestamps sort by their raw value even when they cannot be rendered
        dt = self.date_utils.from_epoch_millis(value)
        if dt is None:
            self.logger.debug(f"Epoch timestamp out of range: {value!r}")
            return ResolvedTime(instant=value, display=sentinel)

        return ResolvedTime(instant=value, display=self._format(dt, sentinel))

    def _format(self, dt: datetime, sentinel: str) -> str:
        try:
            return self.date_utils.format_display(dt)
        except (OverflowError, ValueError):
            return sentinel
