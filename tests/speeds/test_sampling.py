"""Tests for the sampling of extreme speeds."""

import math
import random
import unittest

from transitloom.config import SamplingSettings
from transitloom.constants import SEFLG_SPEED
from transitloom.ephemeris.engine import EphemerisEngine
from transitloom.errors import EngineError
from transitloom.speeds import sample_extreme_speeds, widen_extremes


class WaveEngine(EphemerisEngine):
    """Engine whose speeds oscillate between ``low`` and ``high``."""

    def __init__(self, low, high, fail_before=None):
        self.low = low
        self.high = high
        self.fail_before = fail_before
        self.calls = []

    def calc(self, jd_et, body, flags):
        self.calls.append((jd_et, body, flags))
        if self.fail_before is not None and jd_et < self.fail_before:
            raise EngineError(f"jd {jd_et} < Swiss Eph. lower limit {self.fail_before};")
        mid = (self.low + self.high) / 2.0
        amplitude = (self.high - self.low) / 2.0
        speed = mid + amplitude * math.sin(jd_et)
        return (0.0, 0.0, 1.0, speed, -speed, 2 * speed)

    def houses(self, jd_ut, flags, geolat, geolon, hsys):
        raise NotImplementedError

    def delta_t(self, jd):
        return 0.0

    def set_topo(self, geolon, geolat, altitude=0.0):
        pass

    @property
    def geopos_is_set(self):
        return False

    def body_time_range(self, body):
        return 2400000.0, 2500000.0


class TestWidenExtremes(unittest.TestCase):
    def test_mixed_signs(self):
        self.assertEqual(widen_extremes(-1.0, 2.0, 1.5), (-1.5, 3.0))

    def test_positive(self):
        low, high = widen_extremes(0.6, 2.0, 1.5)
        self.assertAlmostEqual(low, 0.4)
        self.assertEqual(high, 3.0)

    def test_negative(self):
        low, high = widen_extremes(-2.0, -0.6, 1.5)
        self.assertEqual(low, -3.0)
        self.assertAlmostEqual(high, -0.4)

    def test_zero(self):
        self.assertEqual(widen_extremes(0.0, 0.0, 1.5), (-0.1, 0.1))


class TestSampleExtremeSpeeds(unittest.TestCase):
    def test_samples_are_widened(self):
        engine = WaveEngine(0.2, 0.4)
        settings = SamplingSettings(count=500, safety_factor=1.5)

        low, high = sample_extreme_speeds(engine, 433, 0, 0, settings, random.Random(7))

        self.assertLess(low, 0.2)
        self.assertGreaterEqual(low, 0.2 / 1.5)
        self.assertGreater(high, 0.4)
        self.assertLessEqual(high, 0.4 * 1.5)
        self.assertEqual(len(engine.calls), 500)

    def test_samples_within_time_range_with_speed(self):
        engine = WaveEngine(0.2, 0.4)
        sample_extreme_speeds(engine, 433, 2, 0, SamplingSettings(), random.Random(8))

        for jd, body, flags in engine.calls:
            self.assertTrue(2400000.0 <= jd <= 2500000.0)
            self.assertEqual(body, 433)
            self.assertEqual(flags, 2 | SEFLG_SPEED)

    def test_component_index(self):
        engine = WaveEngine(0.2, 0.4)
        low, high = sample_extreme_speeds(
            engine, 433, 0, 1, SamplingSettings(count=300), random.Random(9)
        )
        # Latitude speeds are the negated longitude speeds
        self.assertLess(low, -0.4)
        self.assertGreater(high, -0.2)
        self.assertLess(high, 0.0)

    def test_minimum_sample_count(self):
        engine = WaveEngine(0.2, 0.4)
        sample_extreme_speeds(engine, 433, 0, 0, SamplingSettings(count=3), random.Random(10))
        self.assertEqual(len(engine.calls), 100)

    def test_failed_samples_are_skipped(self):
        engine = WaveEngine(0.2, 0.4, fail_before=2450000.0)
        low, high = sample_extreme_speeds(
            engine, 433, 0, 0, SamplingSettings(count=400), random.Random(11)
        )
        self.assertLess(low, 0.2)
        self.assertGreater(high, 0.4)

    def test_all_samples_failing(self):
        engine = WaveEngine(0.2, 0.4, fail_before=math.inf)
        result = sample_extreme_speeds(engine, 433, 0, 0, SamplingSettings(), random.Random(12))
        self.assertTrue(all(math.isinf(speed) for speed in result))

    def test_constant_speed(self):
        engine = WaveEngine(0.3, 0.3)
        result = sample_extreme_speeds(engine, 433, 0, 0, SamplingSettings(), random.Random(13))
        self.assertEqual(result, (math.inf, math.inf))


if __name__ == "__main__":
    unittest.main()
