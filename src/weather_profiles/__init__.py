"""
Weather Profiles Telemetry Viewer

This package turns heterogeneous per-location telemetry (temperature,
humidity, pressure and optional light intensity) into chart series and
table rows for a map-driven dashboard.
"""

__version__ = "0.1.0"
__description__ = "Telemetry normalization and view-model derivation for weather profiles"


def __getattr__(name):
    """Lazy import to avoid importing dependencies when not needed."""
    if name == "WeatherProfilesApp":
        from .main import WeatherProfilesApp
        return WeatherProfilesApp
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "WeatherProfilesApp",
]
