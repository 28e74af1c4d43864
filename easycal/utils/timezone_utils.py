"""
Utilities for working with Israeli local time and calendar navigation
"""

from datetime import datetime, date, timedelta
from typing import Optional, Union

from dateutil import tz
from dateutil.relativedelta import relativedelta

from easycal.constants import DEFAULT_TIMEZONE, VIEW_DAY, VIEW_WEEK

DateLike = Union[date, datetime]

ISRAEL_TZ = tz.gettz(DEFAULT_TIMEZONE)


def israel_now(tz_name: Optional[str] = None) -> datetime:
    """Returns the current time in the shop's time zone (Asia/Jerusalem by default)"""
    zone = tz.gettz(tz_name) if tz_name else ISRAEL_TZ
    if zone is None:
        raise ValueError(f"Unknown time zone: {tz_name}")
    return datetime.now(zone)


def israel_today(tz_name: Optional[str] = None) -> date:
    """Returns today's date in the shop's time zone"""
    return israel_now(tz_name).date()


def to_local_datetime(value: DateLike) -> datetime:
    """
    Converts a date or datetime to a naive wall-clock datetime.

    Aware datetimes keep their local wall-clock reading and lose tzinfo,
    plain dates become midnight of that day.
    """
    if isinstance(value, datetime):
        return value.replace(tzinfo=None)
    return datetime(value.year, value.month, value.day)


def start_of_day(value: DateLike) -> datetime:
    """Returns local midnight of the given day"""
    return to_local_datetime(value).replace(hour=0, minute=0, second=0, microsecond=0)


def parse_iso_date(date_str: str) -> datetime:
    """
    Parses a YYYY-MM-DD string into a naive datetime at midnight.

    Raises:
        ValueError: if the string is not a calendar date
    """
    return datetime.strptime(date_str, "%Y-%m-%d")


def to_iso_date(value: DateLike) -> str:
    """Returns the calendar date part as YYYY-MM-DD, ignoring time of day"""
    return value.strftime("%Y-%m-%d")


def sunday_first_weekday(value: DateLike) -> int:
    """Day of week where Sunday is 0 and Saturday is 6"""
    return (value.weekday() + 1) % 7


def is_past(day: int, current_month: DateLike, today: DateLike) -> bool:
    """
    Checks whether a day of the displayed month is before today.

    Days outside the month roll over into the neighbouring month, so
    day 0 is the last day of the previous month.

    Args:
        day: Day of the month
        current_month: Any date inside the displayed month
        today: Today's date (time of day is ignored)

    Returns:
        bool: True if the day is strictly before today
    """
    first_of_month = datetime(current_month.year, current_month.month, 1)
    candidate = first_of_month + timedelta(days=day - 1)
    return candidate < start_of_day(today)


def navigate_date(current_date: DateLike, view_mode: str, step: int) -> DateLike:
    """
    Moves the calendar by a number of days, weeks or months.

    Args:
        current_date: Currently selected date (left untouched)
        view_mode: "day", "week", anything else moves by months
        step: Signed number of steps, 1 forward, -1 backward

    Returns:
        A new date of the same type as current_date
    """
    if view_mode == VIEW_DAY:
        return current_date + timedelta(days=step)
    if view_mode == VIEW_WEEK:
        return current_date + timedelta(days=step * 7)
    # Month steps clamp to the last day of a shorter month
    return current_date + relativedelta(months=step)
