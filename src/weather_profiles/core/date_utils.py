"""
Date and timezone utilities.

Centralizes parsing of backend timestamps, conversion to and from epoch
milliseconds, and rendering in the configured display timezone.
"""

import logging
from datetime import datetime, timedelta
from email.utils import parsedate_to_datetime
from typing import Optional, Union
import pytz
from pytz.tzinfo import BaseTzInfo


EPOCH = datetime(1970, 1, 1, tzinfo=pytz.UTC)
ONE_MILLISECOND = timedelta(milliseconds=1)


class DateUtils:
    """Utilities for date and timezone handling."""

    def __init__(
        self,
        timezone_str: str = "UTC",
        datetime_format: str = "%Y-%m-%d %H:%M:%S",
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize date utilities.

        Args:
            timezone_str: Timezone used for display strings
            datetime_format: strftime format used for display strings
            logger: Logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self.timezone = self.parse_timezone(timezone_str)
        self.datetime_format = datetime_format

    @staticmethod
    def parse_timezone(timezone_str: str) -> BaseTzInfo:
        """
        Parse timezone string to pytz timezone object.

        Args:
            timezone_str: Timezone string (e.g., 'Asia/Colombo', 'UTC')

        Returns:
            pytz timezone object

        Raises:
            ValueError: If timezone is invalid
        """
        try:
            return pytz.timezone(timezone_str)
        except pytz.exceptions.UnknownTimeZoneError:
            raise ValueError(f"Invalid timezone: {timezone_str}")

    @staticmethod
    def to_utc(dt: datetime) -> datetime:
        """
        Convert datetime to UTC.

        Args:
            dt: Datetime object (can be naive or aware)

        Returns:
            Datetime in UTC (timezone-aware). Naive input is assumed to be UTC.
        """
        if dt.tzinfo is None:
            return pytz.UTC.localize(dt)
        return dt.astimezone(pytz.UTC)

    @classmethod
    def parse_datetime(cls, value: str) -> Optional[datetime]:
        """
        Parse an ISO-8601 (or RFC 2822) date string.

        Accepts a trailing 'Z' for UTC. Strings without an offset are
        interpreted as UTC.

        Args:
            value: Date string

        Returns:
            Timezone-aware UTC datetime, or None if the string cannot be parsed
        """
        text = value.strip()
        if not text:
            return None

        if text[-1] in ("Z", "z"):
            text = text[:-1] + "+00:00"

        try:
            return cls.to_utc(datetime.fromisoformat(text))
        except (ValueError, OverflowError):
            pass

        try:
            parsed = parsedate_to_datetime(value)
        except (TypeError, ValueError, IndexError):
            return None
        if parsed is None:
            return None

        try:
            return cls.to_utc(parsed)
        except OverflowError:
            return None

    @staticmethod
    def to_epoch_millis(dt: datetime) -> int:
        """
        Convert an aware datetime to whole milliseconds since the Unix epoch.

        Raises:
            ValueError: If datetime is naive
        """
        if dt.tzinfo is None:
            raise ValueError("Datetime must be timezone-aware")
        return (dt - EPOCH) // ONE_MILLISECOND

    @staticmethod
    def from_epoch_millis(millis: Union[int, float]) -> Optional[datetime]:
        """
        Convert milliseconds since the Unix epoch to an aware UTC datetime.

        Returns:
            Datetime, or None when the value is outside the representable range
        """
        try:
            return EPOCH + timedelta(milliseconds=millis)
        except (OverflowError, ValueError):
            return None

    def format_display(self, dt: datetime) -> str:
        """
        Render a datetime in the display timezone.

        Args:
            dt: Timezone-aware datetime

        Returns:
            Formatted string
        """
        return dt.astimezone(self.timezone).strftime(self.datetime_format)
