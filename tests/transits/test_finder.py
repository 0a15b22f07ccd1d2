"""Unit tests for the transit finder."""

from datetime import datetime, timedelta, timezone
import unittest

from transitloom.constants import TRANSIT_LONGITUDE, Planet
from transitloom.ephemeris.engine import EphemerisEngine
from transitloom.space_time.julian import julian_to_datetime
from transitloom.transits.finder import ASPECT_ANGLES, TransitEvent, find_transits
from transitloom.transits.planet import PlanetTransitCalculator
from transitloom.transits.planet_planet import PlanetPlanetTransitCalculator

BASE_DATETIME = datetime(2024, 1, 1, tzinfo=timezone.utc)
BASE_JD = 2460310.5


class LinearEngine(EphemerisEngine):
    """Simple engine with linear longitude progression for testing."""

    def __init__(self, bodies, delta_t=0.0):
        # body -> (longitude at BASE_JD, degrees per day)
        self.bodies = bodies
        self._delta_t = delta_t

    def calc(self, jd_et, body, flags):
        start, rate = self.bodies[body]
        longitude = (start + rate * (jd_et - BASE_JD)) % 360.0
        return (longitude, 0.0, 1.0, rate, 0.0, 0.0)

    def houses(self, jd_ut, flags, geolat, geolon, hsys):
        raise NotImplementedError

    def delta_t(self, jd):
        return self._delta_t

    def set_topo(self, geolon, geolat, altitude=0.0):
        pass

    @property
    def geopos_is_set(self):
        return False


class FindTransitsTest(unittest.TestCase):
    """Tests for :func:`find_transits`."""

    def setUp(self):
        # Sun minus Mars grows from 10 degrees by half a degree per day
        self.engine = LinearEngine({Planet.SUN: (10.0, 1.0), Planet.MARS: (0.0, 0.5)})
        self.calculator = PlanetPlanetTransitCalculator(
            self.engine, Planet.SUN, Planet.MARS, TRANSIT_LONGITUDE
        )

    def test_finder_detects_all_major_aspects(self) -> None:
        start = BASE_DATETIME
        stop = BASE_DATETIME + timedelta(days=800)

        events = find_transits(self.calculator, start, stop, ASPECT_ANGLES)

        aspect_order = [event.aspect for event in events]
        self.assertEqual(
            aspect_order,
            ["SEXTILE", "SQUARE", "TRINE", "OPPOSITION", "CONJUNCTION"],
        )

        for event in events:
            expected_days = ((ASPECT_ANGLES[event.aspect] - 10.0) % 360.0) / 0.5
            expected_dt = BASE_DATETIME + timedelta(days=expected_days)
            self.assertLess(
                abs(event.exact_datetime - expected_dt),
                timedelta(minutes=1),
                msg=f"{event.aspect} timing mismatch",
            )
            self.assertEqual(event.offset, ASPECT_ANGLES[event.aspect])
            self.assertEqual(event.time_scale, "ET")
            self.assertEqual(event.object_identifiers, (Planet.SUN, Planet.MARS))

    def test_finder_restores_offset(self) -> None:
        self.calculator.offset = 45.0
        find_transits(self.calculator, BASE_JD, BASE_JD + 400.0, ASPECT_ANGLES)
        self.assertEqual(self.calculator.offset, 45.0)

    def test_finder_defaults_to_calculator_offset(self) -> None:
        self.calculator.offset = 90.0

        events = find_transits(self.calculator, BASE_JD, BASE_JD + 400.0)

        self.assertEqual(len(events), 1)
        self.assertIsNone(events[0].aspect)
        self.assertAlmostEqual(events[0].julian_date, BASE_JD + 160.0, places=4)

    def test_finder_repeats_transits_in_window(self) -> None:
        engine = LinearEngine({Planet.MOON: (0.0, 13.0)})
        calculator = PlanetTransitCalculator(engine, Planet.MOON, TRANSIT_LONGITUDE)

        events = find_transits(calculator, BASE_JD, BASE_JD + 70.0, [90.0, 270.0])

        period = 360.0 / 13.0
        expected = sorted(
            [90.0 / 13.0 + n * period for n in range(3)]
            + [270.0 / 13.0 + n * period for n in range(2)]
        )
        self.assertEqual(len(events), len(expected))
        for event, days in zip(events, expected):
            self.assertAlmostEqual(event.julian_date, BASE_JD + days, places=4)
        self.assertEqual([event.offset for event in events], [90.0, 270.0, 90.0, 270.0, 90.0])

    def test_finder_in_universal_time(self) -> None:
        engine = LinearEngine({Planet.SUN: (10.0, 1.0), Planet.MARS: (0.0, 0.5)}, delta_t=0.001)
        calculator = PlanetPlanetTransitCalculator(
            engine, Planet.SUN, Planet.MARS, TRANSIT_LONGITUDE, 60.0
        )

        events = find_transits(calculator, BASE_JD, BASE_JD + 150.0, engine=engine)

        self.assertEqual(len(events), 1)
        self.assertEqual(events[0].time_scale, "UT")
        self.assertAlmostEqual(events[0].julian_date, BASE_JD + 100.0 - 0.001, places=4)

    def test_empty_window(self) -> None:
        events = find_transits(self.calculator, BASE_JD, BASE_JD + 10.0, [90.0])
        self.assertEqual(events, [])

    def test_start_after_end(self) -> None:
        with self.assertRaises(ValueError):
            find_transits(self.calculator, BASE_JD + 1.0, BASE_JD)


class TransitEventTest(unittest.TestCase):
    """Tests for :class:`TransitEvent`."""

    def test_to_dict(self) -> None:
        event = TransitEvent(
            target="PlanetPlanetTransitCalculator(0, 4; offset=90.0)",
            offset=90.0,
            julian_date=BASE_JD,
            aspect="SQUARE",
            object_identifiers=(0, 4),
        )

        self.assertEqual(
            event.to_dict(),
            {
                "target": "PlanetPlanetTransitCalculator(0, 4; offset=90.0)",
                "objects": ["0", "4"],
                "aspect": "SQUARE",
                "offset": 90.0,
                "exact_time": "2024-01-01T00:00:00+00:00",
                "julian_date": BASE_JD,
                "time_scale": "ET",
            },
        )

    def test_exact_datetime(self) -> None:
        event = TransitEvent(target="x", offset=0.0, julian_date=BASE_JD + 0.75)
        self.assertEqual(event.exact_datetime, julian_to_datetime(BASE_JD + 0.75))
        self.assertEqual(event.exact_datetime, BASE_DATETIME + timedelta(hours=18))


if __name__ == "__main__":
    unittest.main()
