"""
Working hours and time slot arithmetic
"""
import logging
from datetime import date, datetime
from typing import Any, Dict, List, Sequence, Tuple, Union

from easycal.constants import (
    DEFAULT_SLOT_INTERVAL_MINUTES,
    MINUTES_PER_DAY,
    MINUTES_PER_HOUR,
    STATUS_CANCELLED,
)
from easycal.utils.timezone_utils import sunday_first_weekday

logger = logging.getLogger(__name__)

DateLike = Union[date, datetime]


def time_to_minutes(time_str: str) -> int:
    """
    Converts HH:MM to minutes since midnight.

    Raises:
        ValueError: if the string is not HH:MM
    """
    hours, minutes = (int(part) for part in time_str.split(":"))
    return hours * MINUTES_PER_HOUR + minutes


def minutes_to_time(total_minutes: int) -> str:
    """Converts minutes since midnight to HH:MM, wrapping past midnight"""
    hours = (total_minutes // MINUTES_PER_HOUR) % 24
    minutes = total_minutes % MINUTES_PER_HOUR
    return f"{hours:02d}:{minutes:02d}"


def calculate_end_time(start_time: str, duration: int) -> str:
    """
    Calculates when an appointment ends.

    Args:
        start_time: Start time in HH:MM format
        duration: Duration in minutes

    Returns:
        str: End time in HH:MM format, wrapped to the time of day
    """
    return minutes_to_time(time_to_minutes(start_time) + duration)


def generate_time_slots(open_time: str, close_time: str,
                        interval: int = DEFAULT_SLOT_INTERVAL_MINUTES) -> List[str]:
    """
    Generates the bookable start times of a day.

    Args:
        open_time: Opening time in HH:MM format
        close_time: Closing time in HH:MM format (never included)
        interval: Minutes between slots

    Returns:
        List[str]: Slots like ["09:00", "09:30", ...], empty if close <= open
    """
    if interval <= 0:
        raise ValueError(f"Slot interval must be positive, got {interval}")

    current_minutes = time_to_minutes(open_time)
    close_minutes = time_to_minutes(close_time)

    slots = []
    while current_minutes < close_minutes:
        slots.append(minutes_to_time(current_minutes))
        current_minutes += interval

    return slots


def update_hour(hours: Sequence[Dict[str, Any]], idx: int, field: str, value: Any) -> List[Dict[str, Any]]:
    """
    Returns a copy of the working hours with one field of one day changed.

    Neither the original list nor its entries are modified.

    Args:
        hours: Working hours entries
        idx: Index of the entry to change
        field: Field name (open, close, is_open, ...)
        value: New value for the field

    Returns:
        List[Dict]: Updated working hours
    """
    updated = list(hours)
    updated[idx] = {**updated[idx], field: value}
    return updated


def toggle_day(hours: Sequence[Dict[str, Any]], idx: int) -> List[Dict[str, Any]]:
    """Opens a closed day or closes an open one"""
    return update_hour(hours, idx, "is_open", not hours[idx].get("is_open", False))


def get_working_hours_for_date(hours: Sequence[Dict[str, Any]], day: DateLike) -> Dict[str, Any]:
    """
    Picks the entry for the weekday of the given date.

    Args:
        hours: Seven entries, Sunday first
        day: Date to look up

    Returns:
        Dict: Working hours entry of that weekday
    """
    return hours[sunday_first_weekday(day)]


def get_slots_for_date(hours: Sequence[Dict[str, Any]], day: DateLike,
                       interval: int = DEFAULT_SLOT_INTERVAL_MINUTES) -> List[str]:
    """Generates the slots of the date's weekday, empty when the shop is closed"""
    entry = get_working_hours_for_date(hours, day)
    if not entry.get("is_open") or not entry.get("open") or not entry.get("close"):
        return []
    return generate_time_slots(entry["open"], entry["close"], interval)


def _booked_ranges(appointments: Sequence[Dict[str, Any]], date_str: str) -> List[Tuple[int, int]]:
    ranges = []
    for appointment in appointments:
        if appointment.get("date") != date_str or appointment.get("status") == STATUS_CANCELLED:
            continue
        start = time_to_minutes(appointment["time"])
        ranges.append((start, start + appointment.get("duration", 0)))
    return ranges


def get_available_slots(hours: Sequence[Dict[str, Any]], appointments: Sequence[Dict[str, Any]],
                        day: DateLike, duration: int,
                        interval: int = DEFAULT_SLOT_INTERVAL_MINUTES) -> List[str]:
    """
    Finds slots where a new appointment fits.

    A slot is free when an appointment of the given duration ends before
    closing and does not overlap a booked, non-cancelled appointment of
    the same date.

    Args:
        hours: Seven working hours entries, Sunday first
        appointments: Existing appointments
        day: Date to book
        duration: Duration of the new appointment in minutes
        interval: Minutes between slots

    Returns:
        List[str]: Free slots in HH:MM format
    """
    slots = get_slots_for_date(hours, day, interval)
    if not slots:
        return []

    entry = get_working_hours_for_date(hours, day)
    close_minutes = min(time_to_minutes(entry["close"]), MINUTES_PER_DAY)
    booked = _booked_ranges(appointments, day.strftime("%Y-%m-%d"))

    available = []
    for slot in slots:
        start = time_to_minutes(slot)
        end = start + duration
        if end > close_minutes:
            break
        # Overlap: start < booked_end AND end > booked_start
        if any(start < booked_end and end > booked_start for booked_start, booked_end in booked):
            continue
        available.append(slot)

    logger.debug(f"{len(available)} of {len(slots)} slots free on {day:%Y-%m-%d}")
    return available
