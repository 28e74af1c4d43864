#!/usr/bin/env python3
"""
Daily report for the EasyCal barber shop over demo appointments
"""
import argparse
import logging
import sys
from datetime import datetime

from easycal.config import load_settings
from easycal.constants import DEFAULT_WORKING_HOURS, PERIODS
from easycal.exceptions import InvalidPeriodError
from easycal.secure_logger import setup_secure_logging
from easycal.services.appointment_service import (
    generate_mock_appointments,
    get_appointments_for_date,
    get_stats_for_period,
)
from easycal.services.schedule_service import get_available_slots
from easycal.utils.formatters import format_appointments_list, format_date_hebrew, format_price
from easycal.utils.timezone_utils import israel_now

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="EasyCal daily report over demo appointments")
    parser.add_argument("--period", default="week", help=f"Statistics period: {', '.join(PERIODS)}")
    parser.add_argument("--date", help="Report date in YYYY-MM-DD format (default: today)")
    parser.add_argument("--duration", type=int, default=40, help="Duration of a new appointment in minutes")
    return parser


def build_report(reference: datetime, period: str, duration: int, interval: int) -> str:
    """Builds the report text for one day"""
    appointments = generate_mock_appointments(reference)
    stats = get_stats_for_period(appointments, period, reference)
    todays = get_appointments_for_date(appointments, reference)
    free_slots = get_available_slots(DEFAULT_WORKING_HOURS, appointments, reference, duration, interval)

    lines = [
        format_date_hebrew(reference),
        "",
        format_appointments_list(todays),
        "",
        f"הכנסות: {format_price(stats['total_income'])} ({stats['income_change']:+d}%)",
        f"תורים: {stats['total_appointments']} (הושלמו {stats['completed_appointments']})",
        f"ממוצע לתור: {format_price(stats['avg_income'])}",
        f"שירות פופולרי: {stats['popular_service']}",
        "",
        f"שעות פנויות: {', '.join(free_slots) if free_slots else '-'}",
    ]
    return "\n".join(lines)


def main(argv=None) -> int:
    settings = load_settings()
    setup_secure_logging(level=settings.log_level, log_file=settings.log_file or None)

    args = build_parser().parse_args(argv)

    if args.date:
        try:
            reference = datetime.strptime(args.date, "%Y-%m-%d")
        except ValueError:
            logger.error(f"Invalid --date value: {args.date!r}, expected YYYY-MM-DD")
            return 2
    else:
        reference = israel_now(settings.timezone).replace(tzinfo=None)

    try:
        report = build_report(reference, args.period, args.duration, settings.slot_interval)
    except InvalidPeriodError as e:
        logger.error(f"{e}. Choose one of: {', '.join(PERIODS)}")
        return 2

    print(report)
    return 0


if __name__ == "__main__":
    sys.exit(main())
