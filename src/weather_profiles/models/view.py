"""
View data models.

Contains the immutable selection snapshot and the view model handed to the
presentation layer.
"""

from dataclasses import dataclass, field
from typing import Optional, Dict, Any, List, Tuple

from .profile import SelectedLocation
from .telemetry import TelemetryRecord, SeriesPoint, TableRow


@dataclass(frozen=True)
class MetricSpec:
    """Display metadata for one chartable metric."""

    key: str
    label: str
    color: str
    column: str


@dataclass(frozen=True)
class SelectionSnapshot:
    """The batch for the selected location, replaced wholesale on every selection."""

    location: Optional[SelectedLocation] = None
    batch: Tuple[TelemetryRecord, ...] = ()
    generation: int = 0

    @classmethod
    def empty(cls) -> "SelectionSnapshot":
        return cls()

    @property
    def loaded(self) -> bool:
        """True once a selection has completed."""
        return self.location is not None

    @property
    def selected_name(self) -> Optional[str]:
        return self.location.display_name if self.location else None


@dataclass
class ProfileViewModel:
    """Everything the page needs to draw charts and the table."""

    selected_name: Optional[str]
    title: str
    has_data: bool
    metrics: List[MetricSpec] = field(default_factory=list)
    charts: Dict[str, List[SeriesPoint]] = field(default_factory=dict)
    table_columns: List[str] = field(default_factory=list)
    table_rows: List[TableRow] = field(default_factory=list)
    message: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """JSON-serialisable representation."""
        return {
            "selectedName": self.selected_name,
            "title": self.title,
            "hasData": self.has_data,
            "message": self.message,
            "metrics": [
                {"key": m.key, "label": m.label, "color": m.color, "column": m.column}
                for m in self.metrics
            ],
            "charts": {
                key: [point.to_dict() for point in points]
                for key, points in self.charts.items()
            },
            "tableColumns": list(self.table_columns),
            "tableRows": [row.to_dict() for row in self.table_rows],
        }
