# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""
Date arithmetic, formatting and calendar boundaries.

Accepted inputs
---------------

Every ``value`` parameter accepts any of:

datetime.datetime
    Used as is. Naive values are local time.

datetime.date
    Promoted to midnight of that day.

str
    ISO-8601 text (``2025-09-16``, ``2025-09-16T14:30:00``, ``...Z``).

int / float
    Seconds since the Unix epoch, converted to local time.

Functions that return a date always return a new ``datetime``; inputs are
never modified. Month and year arithmetic clamps the day to the last day of
the target month (``Jan 31 + 1 month == Feb 28/29``).
"""

from __future__ import annotations

import calendar
import math
from collections.abc import Iterable
from datetime import date, datetime, time, timedelta, timezone
from typing import Union

__all__ = [
    "DateLike",
    "to_datetime",
    "format_date",
    "time_ago",
    "add_days",
    "add_months",
    "add_years",
    "sub_days",
    "sub_months",
    "sub_years",
    "diff_in_days",
    "diff_in_hours",
    "diff_in_minutes",
    "diff_in_months",
    "diff_in_years",
    "is_today",
    "is_yesterday",
    "is_tomorrow",
    "is_leap_year",
    "start_of_day",
    "end_of_day",
    "start_of_week",
    "end_of_week",
    "start_of_month",
    "end_of_month",
    "start_of_year",
    "end_of_year",
    "days_in_month",
    "day_of_year",
    "week_of_year",
    "parse_date",
    "is_between",
    "max_date",
    "min_date",
    "get_timezone_offset",
    "to_iso_string",
    "to_unix_timestamp",
    "from_unix_timestamp",
]

DateLike = Union[datetime, date, str, int, float]

# Interval table for time_ago(), largest first.
_INTERVALS = (
    ("year", 31_536_000),
    ("month", 2_592_000),
    ("week", 604_800),
    ("day", 86_400),
    ("hour", 3_600),
    ("minute", 60),
    ("second", 1),
)

# Format tokens, longest first so "MM" never eats part of "mm".
_FORMAT_TOKENS = (
    ("YYYY", "%Y"),
    ("MM", "%m"),
    ("DD", "%d"),
    ("HH", "%H"),
    ("mm", "%M"),
    ("ss", "%S"),
)

_PARSE_FORMATS = ("%m/%d/%Y", "%m-%d-%Y", "%Y/%m/%d")


# -----------------------------------------------------------------------------
# Conversion
# -----------------------------------------------------------------------------


def to_datetime(value: DateLike) -> datetime:
    """
    Convert any supported date representation to a ``datetime``.

    Raises:
        ValueError: If a string is not valid ISO-8601 or a number is not finite.
        TypeError: If the value has an unsupported type.
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time.min)
    if isinstance(value, bool):
        raise TypeError("bool is not a valid date value")
    if isinstance(value, (int, float)):
        if not math.isfinite(value):
            raise ValueError(f"Timestamp must be finite, got {value}")
        return datetime.fromtimestamp(value)
    if isinstance(value, str):
        text = value.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        return datetime.fromisoformat(text)
    raise TypeError(f"Unsupported date value: {type(value).__name__}")


def _now_like(reference: datetime) -> datetime:
    """Current time, aware when ``reference`` is aware."""
    if reference.tzinfo is not None:
        return datetime.now(reference.tzinfo)
    return datetime.now()


def _local_date(value: DateLike) -> date:
    dt = to_datetime(value)
    if dt.tzinfo is not None:
        dt = dt.astimezone()
    return dt.date()


# -----------------------------------------------------------------------------
# Formatting
# -----------------------------------------------------------------------------


def format_date(value: DateLike, fmt: str = "YYYY-MM-DD") -> str:
    """
    Format a date using ``YYYY MM DD HH mm ss`` tokens.

    Any other character in ``fmt`` is copied literally.

    Examples:
        >>> format_date("2025-09-16T14:30:00", "DD/MM/YYYY HH:mm")
        '16/09/2025 14:30'
    """
    dt = to_datetime(value)
    pattern = fmt.replace("%", "%%")
    for token, directive in _FORMAT_TOKENS:
        pattern = pattern.replace(token, directive)
    return dt.strftime(pattern)


def time_ago(value: DateLike, now: DateLike | None = None) -> str:
    """
    Human readable distance from ``value`` to ``now``.

    Examples:
        >>> time_ago("2025-01-01T10:00:00", now="2025-01-01T12:30:00")
        '2 hours ago'
    """
    past = to_datetime(value)
    current = to_datetime(now) if now is not None else _now_like(past)
    seconds = math.floor((current - past).total_seconds())
    for label, size in _INTERVALS:
        count = seconds // size
        if count >= 1:
            return f"{count} {label}{'s' if count != 1 else ''} ago"
    return "just now"


# -----------------------------------------------------------------------------
# Arithmetic
# -----------------------------------------------------------------------------


def add_days(value: DateLike, days: int) -> datetime:
    return to_datetime(value) + timedelta(days=days)


def add_months(value: DateLike, months: int) -> datetime:
    """Add calendar months, clamping the day to the end of the target month."""
    dt = to_datetime(value)
    index = dt.year * 12 + (dt.month - 1) + months
    year, month = divmod(index, 12)
    month += 1
    day = min(dt.day, calendar.monthrange(year, month)[1])
    return dt.replace(year=year, month=month, day=day)


def add_years(value: DateLike, years: int) -> datetime:
    return add_months(value, years * 12)


def sub_days(value: DateLike, days: int) -> datetime:
    return add_days(value, -days)


def sub_months(value: DateLike, months: int) -> datetime:
    return add_months(value, -months)


def sub_years(value: DateLike, years: int) -> datetime:
    return add_years(value, -years)


def _comparable(*values: DateLike) -> list[datetime]:
    """
    Convert ``values`` so they can be compared with each other.

    When any value is timezone-aware, naive values are taken as local time
    and every value is converted to UTC.
    """
    converted = [to_datetime(v) for v in values]
    if all(dt.tzinfo is None for dt in converted):
        return converted
    return [dt.astimezone(timezone.utc) for dt in converted]


def _abs_delta(first: DateLike, second: DateLike) -> timedelta:
    start, end = _comparable(first, second)
    return abs(end - start)


def diff_in_days(first: DateLike, second: DateLike) -> int:
    """Absolute difference in days, rounded up."""
    return math.ceil(_abs_delta(first, second) / timedelta(days=1))


def diff_in_hours(first: DateLike, second: DateLike) -> int:
    return math.ceil(_abs_delta(first, second) / timedelta(hours=1))


def diff_in_minutes(first: DateLike, second: DateLike) -> int:
    return math.ceil(_abs_delta(first, second) / timedelta(minutes=1))


def diff_in_months(first: DateLike, second: DateLike) -> int:
    """Absolute number of whole calendar months between two dates."""
    start, end = sorted(_comparable(first, second))
    months = (end.year - start.year) * 12 + (end.month - start.month)
    if add_months(start, months) > end:
        months -= 1
    return months


def diff_in_years(first: DateLike, second: DateLike) -> int:
    return diff_in_months(first, second) // 12


# -----------------------------------------------------------------------------
# Relative checks
# -----------------------------------------------------------------------------


def is_today(value: DateLike) -> bool:
    return _local_date(value) == date.today()


def is_yesterday(value: DateLike) -> bool:
    return _local_date(value) == date.today() - timedelta(days=1)


def is_tomorrow(value: DateLike) -> bool:
    return _local_date(value) == date.today() + timedelta(days=1)


def is_leap_year(year: int) -> bool:
    return calendar.isleap(year)


# -----------------------------------------------------------------------------
# Boundaries
# -----------------------------------------------------------------------------


def start_of_day(value: DateLike) -> datetime:
    return to_datetime(value).replace(hour=0, minute=0, second=0, microsecond=0)


def end_of_day(value: DateLike) -> datetime:
    return to_datetime(value).replace(
        hour=23, minute=59, second=59, microsecond=999_999
    )


def _days_since_sunday(dt: datetime) -> int:
    # weekday(): Monday == 0 ... Sunday == 6
    return (dt.weekday() + 1) % 7


def start_of_week(value: DateLike) -> datetime:
    """Midnight of the Sunday starting the week."""
    dt = start_of_day(value)
    return dt - timedelta(days=_days_since_sunday(dt))


def end_of_week(value: DateLike) -> datetime:
    """Last instant of the Saturday ending the week."""
    dt = end_of_day(value)
    return dt + timedelta(days=6 - _days_since_sunday(dt))


def start_of_month(value: DateLike) -> datetime:
    return start_of_day(value).replace(day=1)


def end_of_month(value: DateLike) -> datetime:
    dt = end_of_day(value)
    return dt.replace(day=calendar.monthrange(dt.year, dt.month)[1])


def start_of_year(value: DateLike) -> datetime:
    return start_of_day(value).replace(month=1, day=1)


def end_of_year(value: DateLike) -> datetime:
    return end_of_day(value).replace(month=12, day=31)


def days_in_month(value: DateLike) -> int:
    dt = to_datetime(value)
    return calendar.monthrange(dt.year, dt.month)[1]


def day_of_year(value: DateLike) -> int:
    """1 for January 1st, up to 366."""
    return to_datetime(value).timetuple().tm_yday


def week_of_year(value: DateLike) -> int:
    """Week number counting Sunday-started weeks, January 1st is in week 1."""
    dt = to_datetime(value)
    jan_first = date(dt.year, 1, 1)
    offset = (jan_first.weekday() + 1) % 7
    return math.ceil((day_of_year(dt) + offset) / 7)


# -----------------------------------------------------------------------------
# Parsing and comparison
# -----------------------------------------------------------------------------


def parse_date(text: str) -> datetime | None:
    """
    Parse ISO-8601, ``MM/DD/YYYY``, ``MM-DD-YYYY`` or ``YYYY/MM/DD`` text.

    Returns:
        The parsed ``datetime``, or None when no format matches.
    """
    try:
        return to_datetime(text)
    except (TypeError, ValueError):
        pass
    for fmt in _PARSE_FORMATS:
        try:
            return datetime.strptime(text.strip(), fmt)
        except ValueError:
            continue
    return None


def is_between(value: DateLike, start: DateLike, end: DateLike) -> bool:
    """Inclusive range check."""
    moment, low, high = _comparable(value, start, end)
    return low <= moment <= high


def max_date(values: Iterable[DateLike]) -> datetime:
    converted = [to_datetime(v) for v in values]
    if not converted:
        raise ValueError("max_date() requires at least one date")
    keys = _comparable(*converted)
    return converted[max(range(len(keys)), key=keys.__getitem__)]


def min_date(values: Iterable[DateLike]) -> datetime:
    converted = [to_datetime(v) for v in values]
    if not converted:
        raise ValueError("min_date() requires at least one date")
    keys = _comparable(*converted)
    return converted[min(range(len(keys)), key=keys.__getitem__)]


# -----------------------------------------------------------------------------
# Timezones and timestamps
# -----------------------------------------------------------------------------


def get_timezone_offset(value: DateLike | None = None) -> float:
    """Offset from UTC in hours (positive east of Greenwich)."""
    dt = to_datetime(value) if value is not None else datetime.now()
    offset = dt.astimezone().utcoffset() if dt.tzinfo is None else dt.utcoffset()
    return offset.total_seconds() / 3600 if offset is not None else 0.0


def to_iso_string(value: DateLike) -> str:
    """
    UTC ISO-8601 string with millisecond precision.

    Examples:
        >>> to_iso_string("2025-09-16T14:30:00+02:00")
        '2025-09-16T12:30:00.000Z'
    """
    dt = to_datetime(value).astimezone(timezone.utc)
    return dt.strftime("%Y-%m-%dT%H:%M:%S.") + f"{dt.microsecond // 1000:03d}Z"


def to_unix_timestamp(value: DateLike) -> int:
    return math.floor(to_datetime(value).timestamp())


def from_unix_timestamp(timestamp: float) -> datetime:
    """Local-time ``datetime`` for a Unix timestamp in seconds."""
    return to_datetime(float(timestamp))
