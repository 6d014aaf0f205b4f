"""
Metric availability module.

Decides which metrics a batch can chart.
"""

import logging
from typing import Any, Iterable, List, Optional

from ..core import constants
from ..models.telemetry import TelemetryRecord


class MetricAvailabilityDetector:
    """Classify the metrics present in a batch."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize metric availability detector.

        Args:
            logger: Logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    @staticmethod
    def is_present(batch: Iterable[Any], metric: str) -> bool:
        """True if at least one record has a non-null value for ``metric``."""
        return any(
            TelemetryRecord.coerce(record).value(metric) is not None
            for record in batch
        )

    def available_metrics(self, batch: Iterable[Any]) -> List[str]:
        """
        Get the chartable metrics of a batch, in display order.

        Fixed metrics are always included for a non-empty batch; optional
        metrics only when present in at least one record. An empty batch has
        nothing to chart.

        Args:
            batch: Telemetry records or raw record mappings

        Returns:
            List of metric keys
        """
        records = list(batch)
        if not records:
            return []

        metrics = list(constants.FIXED_METRICS)

        for metric in constants.OPTIONAL_METRICS:
            if self.is_present(records, metric):
                metrics.append(metric)
            else:
                self.logger.debug(f"Optional metric {metric} absent from batch")

        return metrics
