"""Tests for Julian date conversion functions."""

import unittest
from datetime import datetime, timedelta, timezone

from transitloom.space_time.julian import (
    datetime_to_julian,
    ensure_julian,
    gregorian_to_jdn,
    julian_to_datetime,
    julian_year,
)


class TestJulianDateConversion(unittest.TestCase):
    """Test case for Julian date conversion functions."""

    def test_gregorian_to_jdn(self):
        """Test the Julian day number of calendar dates."""
        self.assertEqual(gregorian_to_jdn(2000, 1, 1), 2451545)
        self.assertEqual(gregorian_to_jdn(1582 + 1, 1, 1), 2299239)
        self.assertEqual(gregorian_to_jdn(2024, 2, 29), 2460370)

    def test_gregorian_to_jdn_before_1583(self):
        with self.assertRaises(ValueError):
            gregorian_to_jdn(1582, 10, 15)

    def test_datetime_to_julian(self):
        """Test converting datetime to Julian date."""
        dt = datetime(2025, 3, 19, 17, 0, tzinfo=timezone.utc)
        self.assertAlmostEqual(datetime_to_julian(dt), 2460754.208333333, places=9)

    def test_datetime_to_julian_other_timezone(self):
        tz = timezone(timedelta(hours=2))
        dt = datetime(2025, 3, 19, 19, 0, tzinfo=tz)
        self.assertAlmostEqual(datetime_to_julian(dt), 2460754.208333333, places=9)

    def test_datetime_to_julian_requires_timezone(self):
        with self.assertRaises(ValueError):
            datetime_to_julian(datetime(2025, 3, 19, 17, 0))

    def test_julian_to_datetime(self):
        """Test converting Julian date to datetime."""
        dt = julian_to_datetime(2460754.208333333)
        expected = datetime(2025, 3, 19, 17, 0, tzinfo=timezone.utc)
        self.assertEqual(dt, expected)

    def test_julian_to_datetime_at_noon_epoch(self):
        self.assertEqual(
            julian_to_datetime(2451545.0), datetime(2000, 1, 1, 12, 0, tzinfo=timezone.utc)
        )

    def test_julian_to_datetime_rounds_to_millisecond(self):
        dt = julian_to_datetime(2460754.208333333 + 0.0004 / 86400)
        self.assertEqual(dt, datetime(2025, 3, 19, 17, 0, tzinfo=timezone.utc))
        earlier = julian_to_datetime(2460754.208333333 - 0.0123 / 86400)
        self.assertEqual(earlier, datetime(2025, 3, 19, 16, 59, 59, 988000, tzinfo=timezone.utc))

    def test_round_trip_microseconds(self):
        dt = datetime(2024, 3, 20, 3, 6, 27, 500000, tzinfo=timezone.utc)
        back = julian_to_datetime(datetime_to_julian(dt))
        self.assertLess(abs(back - dt), timedelta(microseconds=100))

    def test_julian_year(self):
        self.assertEqual(julian_year(2451545.0), 2000.0)
        self.assertAlmostEqual(julian_year(2451545.0 + 365.25 * 24), 2024.0)

    def test_ensure_julian(self):
        dt = datetime(2000, 1, 1, 12, 0, tzinfo=timezone.utc)
        self.assertEqual(ensure_julian(dt), 2451545.0)
        self.assertEqual(ensure_julian(2451545), 2451545.0)
        self.assertIsInstance(ensure_julian(2451545), float)


if __name__ == "__main__":
    unittest.main()
