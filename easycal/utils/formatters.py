"""
Formatting utilities for dates, statuses and appointments
"""
from datetime import date, datetime
from typing import Dict, List, Optional, Union

from easycal.constants import (
    CURRENCY_SYMBOL,
    DATE_PLACEHOLDER,
    HEBREW_DAY_NAMES,
    HEBREW_DAY_TAGS,
    HEBREW_MONTHS,
    HEBREW_MONTHS_SHORT,
    NO_APPOINTMENTS_TEXT,
    STATUS_LABELS,
    STATUS_PENDING,
    STATUS_STYLES,
)
from easycal.services.schedule_service import calculate_end_time
from easycal.utils.timezone_utils import sunday_first_weekday

DateLike = Union[date, datetime]


def format_date_hebrew(value: DateLike) -> str:
    """
    Formats a date the way he-IL spells it out.

    Args:
        value: Date to format

    Returns:
        str: Date like "יום רביעי, 15 בינואר"
    """
    weekday = HEBREW_DAY_NAMES[sunday_first_weekday(value)]
    month = HEBREW_MONTHS[value.month - 1]
    return f"יום {weekday}, {value.day} ב{month}"


def format_date(value: DateLike) -> Dict[str, Union[str, int]]:
    """
    Formats a date for the booking wizard's day picker.

    Args:
        value: Date to format

    Returns:
        Dict: day (weekday tag), date (day of month), month (short name)
        and full (numeric he-IL date like "15.1.2025")
    """
    return {
        "day": HEBREW_DAY_TAGS[sunday_first_weekday(value)],
        "date": value.day,
        "month": HEBREW_MONTHS_SHORT[value.month - 1],
        "full": f"{value.day}.{value.month}.{value.year}",
    }


def format_date_display(value: Optional[DateLike]) -> str:
    """
    Formats the date shown in the add-appointment dialog.

    Args:
        value: Selected date or None

    Returns:
        str: "יום ראשון, 12/1" or the placeholder when nothing is selected
    """
    if not value:
        return DATE_PLACEHOLDER
    weekday = HEBREW_DAY_NAMES[sunday_first_weekday(value)]
    return f"יום {weekday}, {value.day}/{value.month}"


def get_status_badge(status: str) -> Dict[str, str]:
    """
    Returns the badge style and label for an appointment status.

    Unknown statuses get the pending style and keep their own text as label.
    """
    return {
        "style": STATUS_STYLES.get(status, STATUS_STYLES[STATUS_PENDING]),
        "label": STATUS_LABELS.get(status, status),
    }


def get_initials(name: Optional[str]) -> str:
    """
    Builds up to two initials for an avatar placeholder.

    Args:
        name: Full name, any script

    Returns:
        str: Initials like "JD" or "יכ", empty for an empty name
    """
    if not name:
        return ""
    return "".join(word[0] for word in name.split())[:2]


def format_price(amount: int) -> str:
    return f"{amount}{CURRENCY_SYMBOL}"


def format_appointment_for_user(appointment: Dict) -> str:
    """
    Formats an appointment as a single line.

    Args:
        appointment: Appointment record

    Returns:
        str: Line like "09:00-09:40 • דוד לוי • תספורת גבר • 100₪ • מאושר"
    """
    start_time = appointment.get("time", "")
    duration = appointment.get("duration", 0)
    end_time = calculate_end_time(start_time, duration) if start_time else ""
    badge = get_status_badge(appointment.get("status", STATUS_PENDING))

    return (
        f"{start_time}-{end_time} • {appointment.get('client_name', '')} • "
        f"{appointment.get('service', '')} • {format_price(appointment.get('price', 0))} • "
        f"{badge['label']}"
    )


def format_appointments_list(appointments: List[Dict]) -> str:
    """
    Formats a list of appointments for display.

    Args:
        appointments: List of appointment records

    Returns:
        str: Numbered lines, one per appointment
    """
    if not appointments:
        return NO_APPOINTMENTS_TEXT

    formatted = []
    for i, appointment in enumerate(appointments, 1):
        formatted.append(f"{i}. {format_appointment_for_user(appointment)}")

    return "\n".join(formatted)
