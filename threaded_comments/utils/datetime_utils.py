# threaded_comments/utils/datetime_utils.py
"""
Centralized date/time helpers for the whole project.

Goals of this module:
1. Every timestamp the server creates is timezone-aware UTC
2. One ISO-8601 format on the wire
3. The relative "time ago" labels the comment client shows
"""

import logging
import math
from datetime import datetime, date, timezone
from typing import Optional, Union
from dateutil import parser as dateutil_parser

logger = logging.getLogger(__name__)


class DateTimeUtils:
    """Centralized date/time utility class."""

    @staticmethod
    def now() -> datetime:
        """Current time as a timezone-aware UTC datetime."""
        return datetime.now(timezone.utc)

    @staticmethod
    def parse_iso_datetime(iso_string: str) -> datetime:
        """
        Parse an ISO-8601 string into a UTC datetime.

        Supported formats:
        - 2024-01-15T10:30:00Z
        - 2024-01-15T10:30:00+09:00
        - 2024-01-15T10:30:00.123456Z
        - 2024-01-15T10:30:00
        """
        try:
            if not iso_string:
                raise ValueError("Cannot parse an empty string")

            if iso_string.endswith('Z'):
                iso_string = iso_string[:-1] + '+00:00'

            dt = dateutil_parser.isoparse(iso_string)

            # Naive values are assumed to be UTC
            if dt.tzinfo is None:
                dt = dt.replace(tzinfo=timezone.utc)

            return dt.astimezone(timezone.utc)

        except Exception as e:
            logger.error(f"Failed to parse ISO datetime: {iso_string} - {e}")
            raise ValueError(f"Invalid ISO datetime: {iso_string}")

    @staticmethod
    def to_iso_string(dt: datetime) -> str:
        """datetime -> ISO string with a 'Z' suffix."""
        try:
            if dt.tzinfo is None:
                dt = dt.replace(tzinfo=timezone.utc)
            else:
                dt = dt.astimezone(timezone.utc)

            return dt.isoformat().replace('+00:00', 'Z')

        except Exception as e:
            logger.error(f"Failed to convert to ISO string: {dt} - {e}")
            raise ValueError(f"Cannot convert datetime to ISO string: {dt}")

    @staticmethod
    def to_date_string(d: date) -> str:
        """date -> 'YYYY-MM-DD'"""
        return d.strftime('%Y-%m-%d')

    @staticmethod
    def format_time_ago(timestamp: Union[datetime, str], now: Optional[datetime] = None) -> str:
        """
        Relative label for a comment timestamp, as shown next to the author.

        Args:
            timestamp: datetime or ISO string
            now: reference time (defaults to the current UTC time)

        Returns:
            'just now', 'N min ago', 'N hr ago', 'N day(s) ago', 'N week(s) ago',
            or the calendar date for anything four weeks or older.
        """
        if isinstance(timestamp, str):
            timestamp = DateTimeUtils.parse_iso_datetime(timestamp)
        elif timestamp.tzinfo is None:
            timestamp = timestamp.replace(tzinfo=timezone.utc)

        now = now or DateTimeUtils.now()
        diff_in_seconds = math.floor((now - timestamp).total_seconds())

        if diff_in_seconds < 60:
            return 'just now'

        diff_in_minutes = diff_in_seconds // 60
        if diff_in_minutes < 60:
            return f"{diff_in_minutes} min ago"

        diff_in_hours = diff_in_minutes // 60
        if diff_in_hours < 24:
            return f"{diff_in_hours} hr ago"

        diff_in_days = diff_in_hours // 24
        if diff_in_days < 7:
            return f"{diff_in_days} day{'s' if diff_in_days > 1 else ''} ago"

        diff_in_weeks = diff_in_days // 7
        if diff_in_weeks < 4:
            return f"{diff_in_weeks} week{'s' if diff_in_weeks > 1 else ''} ago"

        return DateTimeUtils.to_date_string(timestamp.date())
