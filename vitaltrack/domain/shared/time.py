"""Datetime helpers and the inclusive DateRange value object.

All timestamps handled by the domain are naive UTC datetimes. Aware
datetimes are converted to UTC and stripped of tzinfo on the way in.
"""

import math
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone
from typing import Optional

from .errors import InvalidPeriodError


def utc_now() -> datetime:
    """Current time as naive UTC."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def age_on(birth_date: date, today: Optional[date] = None) -> int:
    """Whole years from birth_date to today (default: current UTC date)."""
    today = today or utc_now().date()
    years = today.year - birth_date.year
    if (today.month, today.day) < (birth_date.month, birth_date.day):
        years -= 1
    return years


def to_naive_utc(dt: datetime) -> datetime:
    """Normalize a datetime to naive UTC.

    Args:
        dt: Naive (assumed UTC) or aware datetime

    Returns:
        Naive datetime in UTC

    Examples:
        >>> to_naive_utc(datetime(2025, 1, 1, 12, 0, tzinfo=timezone.utc))
        datetime.datetime(2025, 1, 1, 12, 0)
    """
    if dt.tzinfo is None:
        return dt
    return dt.astimezone(timezone.utc).replace(tzinfo=None)


@dataclass(frozen=True)
class DateRange:
    """Inclusive period [start, end].

    Attributes:
        start: First instant included
        end: Last instant included
    """

    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        # frozen dataclass: normalize through object.__setattr__
        object.__setattr__(self, "start", to_naive_utc(self.start))
        object.__setattr__(self, "end", to_naive_utc(self.end))
        if self.start > self.end:
            raise InvalidPeriodError(
                f"Period start {self.start.isoformat()} is after end {self.end.isoformat()}"
            )

    @staticmethod
    def for_day(day: date) -> "DateRange":
        """Build the range covering a whole calendar day (00:00 to 23:59:59.999999)."""
        return DateRange(
            start=datetime.combine(day, time.min),
            end=datetime.combine(day, time.max),
        )

    @staticmethod
    def for_days(first_day: date, last_day: date) -> "DateRange":
        """Build the range covering several whole calendar days."""
        return DateRange(
            start=datetime.combine(first_day, time.min),
            end=datetime.combine(last_day, time.max),
        )

    def contains(self, moment: datetime) -> bool:
        return self.start <= to_naive_utc(moment) <= self.end

    def duration(self) -> timedelta:
        return self.end - self.start

    def days(self) -> int:
        """Length of the period in days, rounded up."""
        return math.ceil(self.duration() / timedelta(days=1))

    def preceding(self) -> "DateRange":
        """Window of equal length ending where this one starts."""
        return DateRange(start=self.start - self.duration(), end=self.start)

    def __str__(self) -> str:
        return f"{self.start.isoformat()} .. {self.end.isoformat()}"
