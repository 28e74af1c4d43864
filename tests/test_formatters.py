"""
Tests for formatting utilities
"""
import unittest
from datetime import date, datetime

from easycal.utils.formatters import (
    format_appointment_for_user,
    format_appointments_list,
    format_date,
    format_date_display,
    format_date_hebrew,
    format_price,
    get_initials,
    get_status_badge,
)


class TestDateFormatting(unittest.TestCase):
    """Tests for Hebrew date formatting."""

    def test_format_date_hebrew(self):
        self.assertEqual(format_date_hebrew(date(2025, 1, 15)), "יום רביעי, 15 בינואר")

    def test_format_date_hebrew_contains_hebrew(self):
        self.assertRegex(format_date_hebrew(datetime(2025, 8, 2, 14, 0)), "[\u0590-\u05FF]")

    def test_format_date_day_tags(self):
        """Weekday tags are Sunday-first."""
        self.assertEqual(format_date(date(2025, 1, 12))["day"], "א׳")
        self.assertEqual(format_date(date(2025, 1, 11))["day"], "ש׳")

    def test_format_date_fields(self):
        result = format_date(date(2025, 1, 15))

        self.assertEqual(result["date"], 15)
        self.assertEqual(result["month"], "ינו׳")
        self.assertEqual(result["full"], "15.1.2025")
        self.assertEqual(format_date(date(2025, 1, 5))["date"], 5)

    def test_format_date_display_placeholder(self):
        self.assertEqual(format_date_display(None), "בחר תאריך")

    def test_format_date_display(self):
        result = format_date_display(date(2025, 1, 12))

        self.assertEqual(result, "יום ראשון, 12/1")
        self.assertIn("/3", format_date_display(date(2025, 3, 5)))


class TestStatusBadge(unittest.TestCase):

    def test_known_statuses(self):
        expected = {
            "confirmed": ("green", "מאושר"),
            "pending": ("amber", "ממתין"),
            "completed": ("blue", "הושלם"),
            "cancelled": ("red", "בוטל"),
        }
        for status, (color, label) in expected.items():
            badge = get_status_badge(status)
            self.assertIn(color, badge["style"])
            self.assertEqual(badge["label"], label)

    def test_unknown_status(self):
        """Unknown statuses fall back to the pending style but keep their label."""
        badge = get_status_badge("unknown")

        self.assertEqual(badge["style"], get_status_badge("pending")["style"])
        self.assertEqual(badge["label"], "unknown")


class TestInitials(unittest.TestCase):

    def test_latin_names(self):
        self.assertEqual(get_initials("John Doe"), "JD")
        self.assertEqual(get_initials("John Paul Doe"), "JP")
        self.assertEqual(get_initials("John"), "J")

    def test_empty_names(self):
        self.assertEqual(get_initials(""), "")
        self.assertEqual(get_initials(None), "")

    def test_hebrew_name(self):
        self.assertEqual(get_initials("יעקב כהן"), "יכ")

    def test_repeated_spaces(self):
        self.assertEqual(get_initials("John  Doe"), "JD")
        self.assertEqual(get_initials("  John "), "J")


class TestAppointmentFormatting(unittest.TestCase):

    def setUp(self):
        self.appointment = {
            "id": 1,
            "client_name": "דוד לוי",
            "client_phone": "052-1000000",
            "service": "תספורת גבר",
            "date": "2025-01-15",
            "time": "09:00",
            "duration": 40,
            "price": 100,
            "status": "confirmed",
        }

    def test_format_price(self):
        self.assertEqual(format_price(130), "130₪")

    def test_format_appointment(self):
        self.assertEqual(
            format_appointment_for_user(self.appointment),
            "09:00-09:40 • דוד לוי • תספורת גבר • 100₪ • מאושר",
        )

    def test_format_appointments_list(self):
        result = format_appointments_list([self.appointment, self.appointment])

        self.assertTrue(result.startswith("1. 09:00-09:40"))
        self.assertIn("\n2. ", result)

    def test_format_empty_list(self):
        self.assertEqual(format_appointments_list([]), "אין תורים")


if __name__ == '__main__':
    unittest.main()
