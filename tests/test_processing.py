"""
Tests for the telemetry processing module.

Tests metric availability, chart series, table projection and the
view-model builder.
"""

import pytest

from src.weather_profiles.core import constants
from src.weather_profiles.models import SelectionSnapshot, SelectedLocation, TelemetryRecord
from src.weather_profiles.processing import (
    MetricAvailabilityDetector,
    SeriesBuilder,
    TableProjector,
    TimestampResolver,
    ViewModelBuilder,
    format_cell,
    available_metrics,
    build_series,
    build_table_rows,
)


class TestMetricAvailability:
    """Test cases for MetricAvailabilityDetector."""

    @pytest.fixture
    def detector(self):
        return MetricAvailabilityDetector()

    def test_light_included_when_present(self, detector, telemetry):
        assert detector.available_metrics(telemetry) == [
            "temperature", "humidity", "pressure", "percentage_light_intensity"
        ]

    def test_light_excluded_when_absent(self, detector):
        batch = [{"timestamp": "2024-01-01T00:00:00Z", "temperature": 20}]
        assert set(detector.available_metrics(batch)) == {"temperature", "humidity", "pressure"}

    def test_light_null_everywhere(self, detector):
        batch = [{"temperature": 20, "percentage_light_intensity": None}]
        assert constants.LIGHT_INTENSITY not in detector.available_metrics(batch)

    def test_light_zero_counts_as_present(self, detector):
        batch = [{"temperature": 20}, {"percentage_light_intensity": 0}]
        assert constants.LIGHT_INTENSITY in detector.available_metrics(batch)

    def test_fixed_metrics_always_present(self, detector):
        batch = [{"timestamp": "2024-01-01T00:00:00Z"}]
        assert detector.available_metrics(batch)[:3] == list(constants.FIXED_METRICS)

    def test_empty_batch(self, detector):
        assert detector.available_metrics([]) == []


class TestSeriesBuilder:
    """Test cases for SeriesBuilder."""

    @pytest.fixture
    def builder(self):
        return SeriesBuilder()

    def test_temperature_series(self, builder, telemetry):
        points = builder.build(telemetry, "temperature")

        assert [p.value for p in points] == [22.0, 24.5, 28.0, 30.1]
        assert [p.time for p in points] == [
            "Invalid",
            "2024-03-01 06:00:00",
            "2024-03-01 09:00:00",
            "2024-03-01 12:00:00",
        ]

    def test_zero_values_are_kept(self, builder, telemetry):
        points = builder.build(telemetry, "humidity")
        assert [p.value for p in points] == [65, 81, 70, 0]

    def test_optional_metric_series(self, builder, telemetry):
        points = builder.build(telemetry, "percentage_light_intensity")
        assert [p.value for p in points] == [12, 64.5]

    def test_ascending_order(self, builder, telemetry):
        resolver = TimestampResolver()
        records = sorted(
            (r for r in telemetry if r.get("pressure") is not None),
            key=resolver.sort_key
        )
        points = builder.build(telemetry, "pressure")

        assert [p.value for p in points] == [r["pressure"] for r in records]

    def test_excludes_records_without_telemetry(self, builder):
        batch = [
            {"timestamp": "2024-01-01T00:00:00Z"},
            {"timestamp": "2024-01-02T00:00:00Z", "pressure": 1000},
        ]
        assert builder.build(batch, "pressure") == builder.build(batch[1:], "pressure")
        assert len(builder.build(batch, "pressure")) == 1

    def test_empty_when_metric_missing(self, builder):
        batch = [{"timestamp": "2024-01-01T00:00:00Z", "temperature": 20}]
        assert builder.build(batch, "percentage_light_intensity") == []

    def test_values_pass_through_unchanged(self, builder):
        batch = [{"timestamp": 1, "temperature": 21.123456789}]
        assert builder.build(batch, "temperature")[0].value == 21.123456789

    def test_ties_keep_batch_order(self, builder):
        batch = [
            {"timestamp": None, "temperature": 1},
            {"timestamp": "bad", "temperature": 2},
            {"timestamp": None, "temperature": 3},
        ]
        assert [p.value for p in builder.build(batch, "temperature")] == [1, 2, 3]

    def test_accepts_records(self, builder, telemetry):
        records = [TelemetryRecord.from_dict(r) for r in telemetry]
        assert builder.build(records, "temperature") == builder.build(telemetry, "temperature")


class TestFormatCell:
    """Test cases for format_cell."""

    @pytest.mark.parametrize("value,expected", [
        (None, "N/A"),
        ("", "N/A"),
        (0, "N/A"),
        (0.0, "N/A"),
        (float("nan"), "N/A"),
        (20, "20"),
        (20.0, "20"),
        (20.5, "20.5"),
        (-3.25, "-3.25"),
        ("41.2", "41.2"),
    ])
    def test_hide_falsy(self, value, expected):
        assert format_cell(value) == expected

    @pytest.mark.parametrize("value,expected", [
        (None, "N/A"),
        ("", "N/A"),
        (0, "0"),
        (0.0, "0"),
        (12.5, "12.5"),
    ])
    def test_show_zero(self, value, expected):
        assert format_cell(value, hide_falsy=False) == expected


class TestTableProjector:
    """Test cases for TableProjector."""

    @pytest.fixture
    def projector(self):
        return TableProjector()

    def test_row_per_record(self, projector, telemetry):
        rows = projector.build(telemetry)
        assert len(rows) == len(telemetry)

    @pytest.mark.parametrize("size", [0, 1, 5])
    def test_row_count_matches_batch(self, projector, size):
        batch = [{"timestamp": i * 1000 + 1, "temperature": i} for i in range(size)]
        assert len(projector.build(batch)) == size

    def test_descending_order_and_formatting(self, projector, telemetry):
        rows = [row.to_dict() for row in projector.build(telemetry)]

        assert rows[0] == {
            "displayTime": "2024-03-01 15:00:00",
            "temperature": "N/A",
            "humidity": "N/A",
            "pressure": "N/A",
            "lightIntensity": "N/A",
        }
        assert rows[1] == {
            "displayTime": "2024-03-01 12:00:00",
            "temperature": "30.1",
            "humidity": "N/A",
            "pressure": "1008.7",
            "lightIntensity": "N/A",
        }
        assert rows[2]["temperature"] == "28"
        assert rows[2]["lightIntensity"] == "64.5"
        assert rows[3]["displayTime"] == "2024-03-01 06:00:00"
        # Undated rows keep batch order at the end
        assert [r["displayTime"] for r in rows[4:]] == ["Invalid or Missing Date"] * 2
        assert rows[4]["temperature"] == "22"
        assert rows[5]["humidity"] == "65"

    def test_descending_instants(self, projector, telemetry):
        resolver = TimestampResolver()
        ordered = sorted(telemetry, key=resolver.sort_key, reverse=True)
        rows = projector.build(telemetry)

        expected = [resolver.resolve_for_table(r).display for r in ordered]
        assert [row.display_time for row in rows] == expected

    def test_light_column_is_global(self, projector):
        batch = [
            {"timestamp": "2024-01-01T00:00:00Z", "temperature": 20},
            {"timestamp": "2024-01-02T00:00:00Z", "percentage_light_intensity": 40},
        ]
        rows = projector.build(batch)
        assert all(row.light_intensity is not None for row in rows)
        assert rows[1].light_intensity == "N/A"

    def test_light_column_absent(self, projector):
        rows = projector.build([{"timestamp": 5, "temperature": 20}])
        assert rows[0].light_intensity is None
        assert "lightIntensity" not in rows[0].to_dict()

    def test_zero_reading_renders_sentinel(self, projector):
        rows = projector.build([{"timestamp": "2024-01-01T00:00:00Z", "temperature": 0}])
        assert rows[0].temperature == "N/A"

    def test_zero_reading_shown_when_policy_disabled(self):
        projector = TableProjector(hide_falsy=False)
        rows = projector.build([{"timestamp": "2024-01-01T00:00:00Z", "temperature": 0}])
        assert rows[0].temperature == "0"
        assert rows[0].humidity == "N/A"


class TestScenarios:
    """End-to-end scenarios on the module-level functions."""

    @pytest.fixture
    def batch(self):
        return [
            {"timestamp": "2024-01-01T00:00:00Z", "temperature": 20},
            {"timestamp": {"$date": "2024-01-02T00:00:00Z"}, "humidity": 50},
        ]

    def test_mixed_representations(self, batch):
        assert set(available_metrics(batch)) == {"temperature", "humidity", "pressure"}

        series = build_series(batch, "temperature")
        assert len(series) == 1
        assert series[0].value == 20

        rows = build_table_rows(batch)
        assert len(rows) == 2
        assert rows[0].display_time == "2024-01-02 00:00:00"
        assert (rows[0].temperature, rows[0].humidity, rows[0].pressure) == ("N/A", "50", "N/A")
        assert (rows[1].temperature, rows[1].humidity, rows[1].pressure) == ("20", "N/A", "N/A")

    def test_empty_batch(self):
        assert available_metrics([]) == []
        assert build_series([], "temperature") == []
        assert build_table_rows([]) == []


class TestViewModelBuilder:
    """Test cases for ViewModelBuilder."""

    @pytest.fixture
    def builder(self):
        return ViewModelBuilder()

    def _snapshot(self, batch, name="Kandy"):
        return SelectionSnapshot(
            location=SelectedLocation(id="p1", display_name=name),
            batch=tuple(TelemetryRecord.from_dict(r) for r in batch),
            generation=1,
        )

    def test_nothing_selected(self, builder):
        view = builder.build()

        assert not view.has_data
        assert view.title == "Time-Series Data"
        assert view.message == "Click a marker to load data."
        assert view.charts == {}

    def test_selected_but_empty(self, builder):
        view = builder.build(self._snapshot([]))

        assert not view.has_data
        assert view.title == "Time-Series Data - Kandy"
        assert view.message == "No time-series data available for this profile."

    def test_full_view(self, builder, telemetry):
        view = builder.build(self._snapshot(telemetry))

        assert view.has_data
        assert view.message is None
        assert [m.key for m in view.metrics] == list(constants.ALL_METRICS)
        assert view.metrics[3].label == "Light Intensity"
        assert view.metrics[0].color == "#ef4444"
        assert view.table_columns == [
            "Timestamp", "Temperature", "Humidity", "Pressure", "Light Intensity(%)"
        ]
        assert set(view.charts) == set(constants.ALL_METRICS)
        assert len(view.table_rows) == len(telemetry)

    def test_to_dict(self, builder, telemetry):
        data = builder.build(self._snapshot(telemetry)).to_dict()

        assert data["selectedName"] == "Kandy"
        assert data["charts"]["temperature"][0] == {"time": "Invalid", "value": 22.0}
        assert data["tableRows"][0]["displayTime"] == "2024-03-01 15:00:00"

    def test_respects_config(self, telemetry):
        from unittest.mock import Mock

        config = Mock()
        config.display_timezone = "Asia/Colombo"
        config.display_datetime_format = "%d/%m/%Y %H:%M"
        config.table_hide_falsy = False

        view = ViewModelBuilder(config).build(self._snapshot(telemetry))

        assert view.charts["temperature"][1].time == "01/03/2024 11:30"
        assert view.table_rows[1].humidity == "0"
