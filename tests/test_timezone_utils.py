"""
Tests for calendar helpers
"""
import unittest
from datetime import date, datetime

from easycal.utils.timezone_utils import (
    israel_now,
    is_past,
    navigate_date,
    start_of_day,
    sunday_first_weekday,
    to_iso_date,
    to_local_datetime,
)


class TestIsPast(unittest.TestCase):
    """Tests for graying out past days in the month view."""

    def setUp(self):
        self.today = datetime(2025, 1, 15, 14, 30)
        self.current_month = date(2025, 1, 1)

    def test_days_before_today(self):
        for day in range(1, 15):
            self.assertTrue(is_past(day, self.current_month, self.today))

    def test_today_is_not_past(self):
        self.assertFalse(is_past(15, self.current_month, self.today))

    def test_days_after_today(self):
        self.assertFalse(is_past(16, self.current_month, self.today))
        self.assertFalse(is_past(31, self.current_month, self.today))

    def test_other_month(self):
        december = date(2024, 12, 1)
        today = date(2024, 12, 15)
        self.assertTrue(is_past(10, december, today))
        self.assertFalse(is_past(20, december, today))

    def test_days_outside_month_roll_over(self):
        self.assertTrue(is_past(0, self.current_month, self.today))
        self.assertFalse(is_past(32, self.current_month, self.today))


class TestNavigateDate(unittest.TestCase):
    """Tests for calendar navigation."""

    def setUp(self):
        self.base_date = date(2025, 1, 15)

    def test_day_mode(self):
        self.assertEqual(navigate_date(self.base_date, "day", 1), date(2025, 1, 16))
        self.assertEqual(navigate_date(self.base_date, "day", -1), date(2025, 1, 14))

    def test_week_mode(self):
        self.assertEqual(navigate_date(self.base_date, "week", 1), date(2025, 1, 22))
        self.assertEqual(navigate_date(self.base_date, "week", -1), date(2025, 1, 8))

    def test_month_mode(self):
        self.assertEqual(navigate_date(self.base_date, "month", 1), date(2025, 2, 15))
        self.assertEqual(navigate_date(self.base_date, "month", -1), date(2024, 12, 15))

    def test_unknown_mode_moves_by_months(self):
        self.assertEqual(navigate_date(self.base_date, "year", 2), date(2025, 3, 15))

    def test_month_boundary(self):
        self.assertEqual(navigate_date(date(2025, 1, 31), "day", 1), date(2025, 2, 1))
        self.assertEqual(navigate_date(date(2025, 1, 31), "month", 1), date(2025, 2, 28))

    def test_original_is_untouched(self):
        original = datetime(2025, 1, 15, 10, 0)
        result = navigate_date(original, "day", 1)

        self.assertEqual(original, datetime(2025, 1, 15, 10, 0))
        self.assertEqual(result, datetime(2025, 1, 16, 10, 0))


class TestDateHelpers(unittest.TestCase):

    def test_sunday_first_weekday(self):
        self.assertEqual(sunday_first_weekday(date(2025, 1, 12)), 0)
        self.assertEqual(sunday_first_weekday(date(2025, 1, 11)), 6)

    def test_start_of_day(self):
        self.assertEqual(start_of_day(datetime(2025, 1, 15, 23, 59)), datetime(2025, 1, 15))
        self.assertEqual(start_of_day(date(2025, 1, 15)), datetime(2025, 1, 15))

    def test_to_iso_date(self):
        self.assertEqual(to_iso_date(datetime(2025, 1, 5, 23, 59)), "2025-01-05")

    def test_israel_now_is_aware(self):
        now = israel_now()
        self.assertIsNotNone(now.tzinfo)
        self.assertIsNone(to_local_datetime(now).tzinfo)


if __name__ == '__main__':
    unittest.main()
