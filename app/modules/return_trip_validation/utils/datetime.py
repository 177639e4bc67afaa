"""
datetime.py - Date and time operations
-------------------------------------
Single responsibility: Normalize timestamps and measure gaps between them
"""

from datetime import datetime, timezone

import pendulum


class DateTimeService:
    """Handle datetime operations following SRP"""

    @staticmethod
    def to_utc(value: datetime) -> datetime:
        """Return an aware UTC datetime; naive values are assumed to be UTC"""
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)

    @staticmethod
    def hours_between(start: datetime, end: datetime) -> float:
        """Signed number of hours from `start` to `end`"""
        delta = DateTimeService.to_utc(end) - DateTimeService.to_utc(start)
        return delta.total_seconds() / 3600.0

    @staticmethod
    def days_ago(days: int, tz: str = "UTC", now: datetime | None = None) -> datetime:
        """UTC moment `days` calendar days before `now` (defaults to the current time in `tz`)"""
        reference = pendulum.instance(now, tz=tz) if now else pendulum.now(tz=tz)
        shifted = reference.subtract(days=days)
        return datetime.fromtimestamp(shifted.timestamp(), tz=timezone.utc)
