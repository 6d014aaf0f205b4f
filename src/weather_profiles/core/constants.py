"""
Application-wide constants for the weather profiles viewer.

Metric keys, display labels, chart colours and the sentinel strings
substituted for missing or unparseable data.
"""

# Metric keys as they appear on backend telemetry records
TEMPERATURE = "temperature"
HUMIDITY = "humidity"
PRESSURE = "pressure"
LIGHT_INTENSITY = "percentage_light_intensity"

# Always charted, in display order
FIXED_METRICS = (TEMPERATURE, HUMIDITY, PRESSURE)

# Charted only when present in at least one record of the batch
OPTIONAL_METRICS = (LIGHT_INTENSITY,)

ALL_METRICS = FIXED_METRICS + OPTIONAL_METRICS

METRIC_LABELS = {
    TEMPERATURE: "Temperature",
    HUMIDITY: "Humidity",
    PRESSURE: "Pressure",
    LIGHT_INTENSITY: "Light Intensity",
}

METRIC_COLORS = {
    TEMPERATURE: "#ef4444",
    HUMIDITY: "#3b82f6",
    PRESSURE: "#10b981",
    LIGHT_INTENSITY: "#f59e0b",
}

# Table column headers (differ from chart labels for light intensity)
METRIC_COLUMNS = {
    TEMPERATURE: "Temperature",
    HUMIDITY: "Humidity",
    PRESSURE: "Pressure",
    LIGHT_INTENSITY: "Light Intensity(%)",
}

TIMESTAMP_COLUMN = "Timestamp"

# Sentinels
CHART_INVALID_TIME = "Invalid"
TABLE_INVALID_TIME = "Invalid or Missing Date"
MISSING_VALUE = "N/A"
UNNAMED_PROFILE = "Unnamed profile"

# Key carrying the date inside a wrapped (extended JSON) timestamp
WRAPPED_DATE_KEY = "$date"
WRAPPED_LONG_KEY = "$numberLong"

# Page text
TABLE_TITLE = "Time-Series Data"
NO_SELECTION_MESSAGE = "Click a marker to load data."
EMPTY_BATCH_MESSAGE = "No time-series data available for this profile."

# Defaults
DEFAULT_API_BASE_URL = "http://localhost:5000/api"
DEFAULT_TIMEZONE = "UTC"
DEFAULT_DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"
