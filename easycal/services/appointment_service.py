"""
Service for appointment lists: demo data, filtering and period statistics
"""
import logging
import math
from collections import Counter
from datetime import date, datetime, timedelta
from typing import Any, Dict, List, Optional, Sequence, Union

from dateutil.relativedelta import relativedelta

from easycal.constants import (
    MOCK_APPOINTMENTS_COUNT,
    MOCK_APPOINTMENTS_PER_DAY,
    MOCK_CLIENT_NAMES,
    MOCK_DAYS_BEFORE_BASE,
    MOCK_DURATIONS,
    MOCK_PRICES,
    MOCK_SERVICES,
    MOCK_STATUSES,
    MOCK_TIMES,
    NO_POPULAR_SERVICE,
    PERIOD_MONTH,
    PERIOD_TODAY,
    PERIOD_WEEK,
    PERIOD_YEAR,
    PREVIOUS_PERIOD_INCOME_RATIO,
    STATUS_CANCELLED,
    STATUS_COMPLETED,
    STATUS_CONFIRMED,
)
from easycal.exceptions import InvalidPeriodError
from easycal.services.schedule_service import calculate_end_time
from easycal.utils.timezone_utils import (
    parse_iso_date,
    start_of_day,
    to_iso_date,
    to_local_datetime,
)

logger = logging.getLogger(__name__)

DateLike = Union[date, datetime]


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def generate_mock_appointments(base_date: DateLike) -> List[Dict[str, Any]]:
    """
    Generates demo appointments around a base date.

    Fifteen appointments, three per day from two days before the base date
    to two days after it. The output depends only on base_date.

    Args:
        base_date: Date the demo week is centered on

    Returns:
        List[Dict]: Appointment records
    """
    base = to_local_datetime(base_date)
    base_day = start_of_day(base)
    appointments = []

    for i in range(MOCK_APPOINTMENTS_COUNT):
        day = base + timedelta(days=i // MOCK_APPOINTMENTS_PER_DAY - MOCK_DAYS_BEFORE_BASE)

        if i < MOCK_APPOINTMENTS_PER_DAY:
            status = MOCK_STATUSES[i % len(MOCK_STATUSES)]
        elif start_of_day(day) < base_day:
            status = STATUS_COMPLETED
        else:
            status = STATUS_CONFIRMED

        appointments.append({
            "id": i + 1,
            "client_name": MOCK_CLIENT_NAMES[i % len(MOCK_CLIENT_NAMES)],
            "client_phone": f"052-{1000000 + i * 111111}",
            "service": MOCK_SERVICES[i % len(MOCK_SERVICES)],
            "date": to_iso_date(day),
            "time": MOCK_TIMES[i % len(MOCK_TIMES)],
            "duration": MOCK_DURATIONS[i % len(MOCK_DURATIONS)],
            "price": MOCK_PRICES[i % len(MOCK_PRICES)],
            "status": status,
        })

    logger.debug(f"Generated {len(appointments)} mock appointments around {to_iso_date(base)}")
    return appointments


def get_period_start(period: str, reference_date: DateLike) -> datetime:
    """
    Calculates where a statistics window begins.

    Args:
        period: "today", "week", "month" or "year"
        reference_date: End of the window

    Returns:
        datetime: Start of the window

    Raises:
        InvalidPeriodError: if the period tag is unknown
    """
    now = to_local_datetime(reference_date)

    if period == PERIOD_TODAY:
        return start_of_day(now)
    if period == PERIOD_WEEK:
        return now - timedelta(days=7)
    if period == PERIOD_MONTH:
        return now - relativedelta(months=1)
    if period == PERIOD_YEAR:
        return now - relativedelta(years=1)

    logger.warning(f"Unknown statistics period requested: {period!r}")
    raise InvalidPeriodError(period)


def get_stats_for_period(appointments: Sequence[Dict[str, Any]], period: str,
                         reference_date: DateLike) -> Dict[str, Any]:
    """
    Calculates business statistics for a period.

    Cancelled appointments are ignored. income_change compares against a
    previous period assumed to be 85% of the current one, it is not a real
    comparison.

    Args:
        appointments: Appointment records
        period: "today", "week", "month" or "year"
        reference_date: Date the period ends at

    Returns:
        Dict: total_income, total_appointments, completed_appointments,
        avg_income, popular_service and income_change

    Raises:
        InvalidPeriodError: if the period tag is unknown
    """
    start = get_period_start(period, reference_date)

    period_appointments = [
        apt for apt in appointments
        if parse_iso_date(apt["date"]) >= start and apt.get("status") != STATUS_CANCELLED
    ]

    total_income = sum(apt["price"] for apt in period_appointments)
    total_appointments = len(period_appointments)
    completed_appointments = sum(1 for apt in period_appointments if apt.get("status") == STATUS_COMPLETED)
    avg_income = _round_half_up(total_income / total_appointments) if total_appointments else 0

    # Counter keeps first-seen order, max() returns the first of equal counts
    service_count = Counter(apt["service"] for apt in period_appointments)
    popular_service = max(service_count, key=service_count.get) if service_count else NO_POPULAR_SERVICE

    prev_total_income = total_income * PREVIOUS_PERIOD_INCOME_RATIO
    income_change = (
        _round_half_up((total_income - prev_total_income) / prev_total_income * 100)
        if prev_total_income > 0 else 0
    )

    logger.debug(f"Stats for {period} since {start:%Y-%m-%d %H:%M}: {total_appointments} appointments")

    return {
        "total_income": total_income,
        "total_appointments": total_appointments,
        "completed_appointments": completed_appointments,
        "avg_income": avg_income,
        "popular_service": popular_service,
        "income_change": income_change,
    }


def get_appointments_for_date(appointments: Sequence[Dict[str, Any]], target: DateLike) -> List[Dict[str, Any]]:
    """
    Returns the appointments of one calendar day, in their original order.

    Args:
        appointments: Appointment records
        target: Day to look up, time of day is ignored

    Returns:
        List[Dict]: Appointments stored under that date
    """
    date_str = to_iso_date(target)
    return [apt for apt in appointments if apt.get("date") == date_str]


def group_appointments_by_date(appointments: Sequence[Dict[str, Any]]) -> Dict[str, List[Dict[str, Any]]]:
    """Groups appointments by date, dates in first-seen order"""
    grouped: Dict[str, List[Dict[str, Any]]] = {}
    for apt in appointments:
        grouped.setdefault(apt["date"], []).append(apt)
    return grouped


def get_upcoming_appointments(appointments: Sequence[Dict[str, Any]], now: DateLike,
                              limit: Optional[int] = None) -> List[Dict[str, Any]]:
    """
    Returns appointments that have not started yet.

    Args:
        appointments: Appointment records
        now: Current moment
        limit: Maximum number of appointments to return

    Returns:
        List[Dict]: Non-cancelled appointments starting at or after now,
        earliest first
    """
    current = to_local_datetime(now)

    upcoming = [
        apt for apt in appointments
        if apt.get("status") != STATUS_CANCELLED
        and datetime.strptime(f"{apt['date']} {apt['time']}", "%Y-%m-%d %H:%M") >= current
    ]
    upcoming.sort(key=lambda apt: (apt["date"], apt["time"]))

    if limit is not None:
        return upcoming[:limit]
    return upcoming


def get_appointment_end_time(appointment: Dict[str, Any]) -> str:
    """Returns the HH:MM end time of an appointment"""
    return calculate_end_time(appointment["time"], appointment["duration"])
