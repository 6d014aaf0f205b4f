"""
Telemetry processing module for the weather profiles viewer.

Provides timestamp resolution, metric availability, chart series and table
projection, plus a view-model builder combining them.
"""

import logging
from typing import Any, Iterable, List, Optional, TYPE_CHECKING

from ..core import constants
from ..core.date_utils import DateUtils
from ..models.telemetry import TelemetryRecord, ResolvedTime, SeriesPoint, TableRow
from ..models.view import MetricSpec, ProfileViewModel, SelectionSnapshot
from .timestamps import TimestampResolver
from .availability import MetricAvailabilityDetector
from .series import SeriesBuilder
from .table import TableProjector, format_cell

if TYPE_CHECKING:
    from ..core.config import Config


class ViewModelBuilder:
    """
    Unified builder combining all derivation components.

    Holds no state between calls; every method is a function of its input batch.
    """

    def __init__(
        self,
        config: Optional["Config"] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize view-model builder.

        Args:
            config: Configuration (display timezone/format, table policy). Defaults apply if None.
            logger: Logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

        if config is not None:
            date_utils = DateUtils(
                config.display_timezone,
                config.display_datetime_format,
                logger=self.logger
            )
            hide_falsy = config.table_hide_falsy
        else:
            date_utils = DateUtils(logger=self.logger)
            hide_falsy = True

        self.resolver = TimestampResolver(date_utils, self.logger)
        self.detector = MetricAvailabilityDetector(self.logger)
        self.series_builder = SeriesBuilder(self.resolver, self.logger)
        self.table_projector = TableProjector(self.resolver, hide_falsy, self.logger)

    def resolve_time(self, record: Any) -> ResolvedTime:
        return self.resolver.resolve_for_chart(record)

    def resolve_table_time(self, record: Any) -> ResolvedTime:
        return self.resolver.resolve_for_table(record)

    def available_metrics(self, batch: Iterable[Any]) -> List[str]:
        return self.detector.available_metrics(batch)

    def build_series(self, batch: Iterable[Any], metric: str) -> List[SeriesPoint]:
        return self.series_builder.build(batch, metric)

    def build_table_rows(self, batch: Iterable[Any]) -> List[TableRow]:
        return self.table_projector.build(batch)

    def build(self, snapshot: Optional[SelectionSnapshot] = None) -> ProfileViewModel:
        """
        Build the complete view model for a selection snapshot.

        Args:
            snapshot: Current selection; None means nothing selected yet

        Returns:
            ProfileViewModel
        """
        snapshot = snapshot or SelectionSnapshot.empty()
        name = snapshot.selected_name
        title = f"{constants.TABLE_TITLE} - {name}" if name else constants.TABLE_TITLE

        if not snapshot.batch:
            message = (
                constants.EMPTY_BATCH_MESSAGE if snapshot.loaded
                else constants.NO_SELECTION_MESSAGE
            )
            return ProfileViewModel(
                selected_name=name,
                title=title,
                has_data=False,
                message=message,
            )

        records = [TelemetryRecord.coerce(item) for item in snapshot.batch]
        metrics = self.detector.available_metrics(records)
        include_light = constants.LIGHT_INTENSITY in metrics

        specs = [
            MetricSpec(
                key=metric,
                label=constants.METRIC_LABELS[metric],
                color=constants.METRIC_COLORS[metric],
                column=constants.METRIC_COLUMNS[metric],
            )
            for metric in metrics
        ]

        return ProfileViewModel(
            selected_name=name,
            title=title,
            has_data=True,
            metrics=specs,
            charts={
                metric: self.series_builder.build(records, metric)
                for metric in metrics
            },
            table_columns=[constants.TIMESTAMP_COLUMN] + [spec.column for spec in specs],
            table_rows=self.table_projector.build(records, include_light=include_light),
        )


_default_builder: Optional[ViewModelBuilder] = None


def _builder() -> ViewModelBuilder:
    global _default_builder
    if _default_builder is None:
        _default_builder = ViewModelBuilder()
    return _default_builder


def resolve_time(record: Any) -> ResolvedTime:
    """Resolve a record's timestamp with the chart sentinel (UTC display)."""
    return _builder().resolve_time(record)


def resolve_table_time(record: Any) -> ResolvedTime:
    """Resolve a record's timestamp with the table sentinel (UTC display)."""
    return _builder().resolve_table_time(record)


def available_metrics(batch: Iterable[Any]) -> List[str]:
    """Chartable metric keys of a batch."""
    return _builder().available_metrics(batch)


def build_series(batch: Iterable[Any], metric: str) -> List[SeriesPoint]:
    """Chronological chart series for one metric."""
    return _builder().build_series(batch, metric)


def build_table_rows(batch: Iterable[Any]) -> List[TableRow]:
    """Newest-first table rows, one per record."""
    return _builder().build_table_rows(batch)


__all__ = [
    "TimestampResolver",
    "MetricAvailabilityDetector",
    "SeriesBuilder",
    "TableProjector",
    "ViewModelBuilder",
    "format_cell",
    "resolve_time",
    "resolve_table_time",
    "available_metrics",
    "build_series",
    "build_table_rows",
]
