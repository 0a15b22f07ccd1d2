"""Tests for the house object speed lookup."""

import math
import unittest

from transitloom.constants import HouseObject, HouseSystem
from transitloom.errors import UnsupportedHouseSystemError
from transitloom.speeds import get_house_speed, latitude_band, point_index
from transitloom.speeds.house_table import HOUSE_SPEEDS


class TestLatitudeBand(unittest.TestCase):
    def test_low_latitudes(self):
        self.assertEqual(latitude_band(0.0), 10)
        self.assertEqual(latitude_band(5.0), 10)
        self.assertEqual(latitude_band(19.99), 10)

    def test_mid_latitudes_round_down(self):
        self.assertEqual(latitude_band(20.0), 20)
        self.assertEqual(latitude_band(52.5), 50)
        self.assertEqual(latitude_band(-33.9), 30)
        self.assertEqual(latitude_band(60.0), 60)

    def test_high_latitudes_round_up(self):
        self.assertEqual(latitude_band(61.0), 66)
        self.assertEqual(latitude_band(66.0), 66)
        self.assertEqual(latitude_band(66.5), 70)
        self.assertEqual(latitude_band(-78.0), 80)
        self.assertEqual(latitude_band(84.0), 85)
        self.assertEqual(latitude_band(87.5), 88)
        self.assertEqual(latitude_band(89.0), 90)
        self.assertEqual(latitude_band(90.0), 90)

    def test_out_of_range(self):
        with self.assertRaises(ValueError):
            latitude_band(91.0)
        with self.assertRaises(ValueError):
            latitude_band(-90.5)


class TestPointIndex(unittest.TestCase):
    def test_angle_points(self):
        self.assertEqual(point_index(HouseObject.ASC), 0)
        self.assertEqual(point_index(HouseObject.POLASC), 7)

    def test_cusps_follow_angle_points(self):
        self.assertEqual(point_index(HouseObject.HOUSE1), 8)
        self.assertEqual(point_index(-10), 17)
        self.assertEqual(point_index(HouseObject.HOUSE12), 19)

    def test_invalid_points(self):
        for point in (8, -13, 100):
            with self.assertRaises(ValueError):
                point_index(point)


class TestGetHouseSpeed(unittest.TestCase):
    def test_lookup(self):
        row = HOUSE_SPEEDS[("P", 50)]
        self.assertEqual(get_house_speed(True, "P", HouseObject.ASC, 52.5), row[0][0])
        self.assertEqual(get_house_speed(False, "P", HouseObject.ASC, 52.5), row[0][1])
        self.assertEqual(get_house_speed(False, "P", HouseObject.HOUSE10, -52.5), row[17][1])

    def test_system_forms(self):
        expected = get_house_speed(True, "K", HouseObject.MC, 40.0)
        self.assertEqual(get_house_speed(True, HouseSystem.KOCH, HouseObject.MC, 40.0), expected)
        self.assertEqual(get_house_speed(True, b"K", HouseObject.MC, 40.0), expected)
        self.assertEqual(get_house_speed(True, ord("K"), HouseObject.MC, 40.0), expected)

    def test_equal_systems_share_table(self):
        for point in HouseObject:
            self.assertEqual(
                get_house_speed(False, "E", point, 45.0),
                get_house_speed(False, "A", point, 45.0),
            )

    def test_extreme_latitudes_use_their_own_band(self):
        self.assertEqual(
            get_house_speed(True, "P", HouseObject.ASC, 89.5),
            HOUSE_SPEEDS[("P", 90)][0][0],
        )

    def test_untabled_system(self):
        self.assertTrue(math.isinf(get_house_speed(True, "G", HouseObject.ASC, 45.0)))
        self.assertTrue(math.isinf(get_house_speed(False, HouseSystem.SUNSHINE, HouseObject.MC, 0.0)))

    def test_unknown_system(self):
        with self.assertRaises(UnsupportedHouseSystemError):
            get_house_speed(True, "Z", HouseObject.ASC, 45.0)

    def test_table_is_complete(self):
        for row in HOUSE_SPEEDS.values():
            self.assertEqual(len(row), 20)
            for low, high in row:
                self.assertLessEqual(low, high)


if __name__ == "__main__":
    unittest.main()
