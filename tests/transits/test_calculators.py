"""Tests for the concrete transit calculators against a fake engine."""

import math
import random
import unittest

from transitloom.constants import (
    AST_OFFSET,
    SEFLG_HELCTR,
    SEFLG_SIDEREAL,
    SEFLG_SWIEPH,
    SEFLG_TOPOCTR,
    SEFLG_XYZ,
    TRANSIT_DISTANCE,
    TRANSIT_LATITUDE,
    TRANSIT_LONGITUDE,
    HouseObject,
    HouseSystem,
    Planet,
)
from transitloom.ephemeris.engine import EphemerisEngine
from transitloom.errors import (
    EngineError,
    EphemerisCalculationError,
    ErrorKind,
    OutOfTimeRangeError,
    TransitConfigurationError,
    UnsupportedHouseSystemError,
)
from transitloom.speeds import get_house_speed, get_planet_speed
from transitloom.transits import (
    HouseTransitCalculator,
    PlanetHouseTransitCalculator,
    PlanetPlanetTransitCalculator,
    PlanetTransitCalculator,
    get_transit,
)

BASE_JD = 2460310.5  # 2024-01-01 00:00 UTC
HOUSE_RATE = 360.98  # degrees per day


class FakeEngine(EphemerisEngine):
    """Engine with bodies moving at constant rates and a rotating house frame."""

    def __init__(self, bodies=None, delta_t=0.0, fail_with=None):
        # body -> (longitude at BASE_JD, degrees per day)
        self.bodies = bodies or {}
        self._delta_t = delta_t
        self.fail_with = fail_with
        self.topo = None
        self.house_calls = []

    def calc(self, jd_et, body, flags):
        if self.fail_with:
            raise EngineError(self.fail_with, -1)
        start, rate = self.bodies[body]
        days = jd_et - BASE_JD
        longitude = (start + rate * days) % 360.0
        # Latitude swings by 5 degrees with a period of 100 days
        w = 2 * math.pi / 100.0
        latitude = 5.0 * math.sin(w * days)
        lat_speed = 5.0 * w * math.cos(w * days)
        return (longitude, latitude, 1.0, rate, lat_speed, 0.0)

    def houses(self, jd_ut, flags, geolat, geolon, hsys):
        self.house_calls.append(jd_ut)
        asc = (HOUSE_RATE * (jd_ut - BASE_JD)) % 360.0
        cusps = tuple((asc + 30.0 * i) % 360.0 for i in range(12))
        ascmc = (asc, (asc + 270.0) % 360.0, asc, 0.0, 0.0, 0.0, 0.0, 0.0)
        return cusps, ascmc

    def delta_t(self, jd):
        return self._delta_t

    def set_topo(self, geolon, geolat, altitude=0.0):
        self.topo = (geolon, geolat, altitude)

    @property
    def geopos_is_set(self):
        return self.topo is not None

    @property
    def topo_altitude(self):
        return self.topo[2] if self.topo else 0.0


def wrapped_difference(angle):
    """Signed angle in [-180, 180)."""
    return (angle + 180.0) % 360.0 - 180.0


class TestPlanetTransitCalculator(unittest.TestCase):
    """Tests for a single body against a fixed offset."""

    def setUp(self):
        self.engine = FakeEngine({Planet.MARS: (90.0, 0.5), Planet.MOON: (0.0, 13.0)})

    def test_longitude_transit(self):
        calc = PlanetTransitCalculator(
            self.engine, Planet.MARS, SEFLG_SWIEPH | TRANSIT_LONGITUDE, 100.0
        )
        self.assertTrue(calc.rollover)
        self.assertEqual(calc.min_speed, get_planet_speed(True, Planet.MARS, 0, TRANSIT_LONGITUDE, self.engine))
        self.assertEqual(calc.max_speed, get_planet_speed(False, Planet.MARS, 0, TRANSIT_LONGITUDE, self.engine))

        result = get_transit(calc, BASE_JD)

        self.assertAlmostEqual(result, BASE_JD + 20.0, places=5)

    def test_longitude_transit_backward(self):
        calc = PlanetTransitCalculator(
            self.engine, Planet.MARS, SEFLG_SWIEPH | TRANSIT_LONGITUDE, 80.0
        )
        result = get_transit(calc, BASE_JD, backward=True)
        self.assertAlmostEqual(result, BASE_JD - 20.0, places=5)

    def test_longitude_offset_is_normalized(self):
        calc = PlanetTransitCalculator(self.engine, Planet.MARS, TRANSIT_LONGITUDE, -10.0)
        self.assertEqual(calc.offset, 350.0)

    def test_latitude_transit_with_sampled_speeds(self):
        calc = PlanetTransitCalculator(
            self.engine,
            Planet.MOON,
            SEFLG_SWIEPH | TRANSIT_LATITUDE,
            2.0,
            rng=random.Random(1),
        )
        self.assertFalse(calc.rollover)
        self.assertEqual((calc.min_offset, calc.max_offset), (-90.0, 90.0))
        # Sampled extremes of +-pi/10, widened by 1.4
        self.assertLess(calc.min_speed, -0.3)
        self.assertGreater(calc.max_speed, 0.3)

        result = get_transit(calc, BASE_JD)

        expected = math.asin(0.4) / (2 * math.pi / 100.0)
        self.assertAlmostEqual(result, BASE_JD + expected, places=4)

    def test_latitude_offset_is_folded(self):
        calc = PlanetTransitCalculator(
            self.engine, Planet.MOON, TRANSIT_LATITUDE, 100.0, rng=random.Random(2)
        )
        self.assertEqual(calc.offset, -80.0)
        calc.offset = -95.0
        self.assertEqual(calc.offset, 85.0)

    def test_constant_distance_has_no_speeds(self):
        # The fake distance never changes, so its speeds are unknowable
        with self.assertRaises(TransitConfigurationError):
            PlanetTransitCalculator(self.engine, Planet.MARS, TRANSIT_DISTANCE, 1.0)

    def test_distance_offset_range(self):
        engine = FakeEngine({Planet.MARS: (90.0, 0.5)})
        engine.calc = lambda jd, body, flags: (0.0, 0.0, 1.5 + 0.5 * math.sin(jd), 0.0, 0.0, 0.5 * math.cos(jd))
        calc = PlanetTransitCalculator(
            engine, Planet.MARS, TRANSIT_DISTANCE, -1.0, rng=random.Random(3)
        )
        self.assertEqual(calc.min_offset, 0.0)
        with self.assertRaises(OutOfTimeRangeError):
            get_transit(calc, BASE_JD)

    def test_precalc_settings_are_clamped(self):
        calc = PlanetTransitCalculator(
            self.engine,
            Planet.MOON,
            TRANSIT_LATITUDE,
            0.0,
            precalc_count=10,
            precalc_safety_factor=1.0,
            rng=random.Random(4),
        )
        self.assertEqual(calc.sampling.count, 100)
        self.assertEqual(calc.sampling.safety_factor, 1.1)

    def test_requires_exactly_one_transit_flag(self):
        for flags in (SEFLG_SWIEPH, TRANSIT_LONGITUDE | TRANSIT_LATITUDE):
            with self.assertRaises(TransitConfigurationError):
                PlanetTransitCalculator(self.engine, Planet.MARS, flags, 0.0)

    def test_invalid_flags(self):
        with self.assertRaises(TransitConfigurationError):
            PlanetTransitCalculator(
                self.engine, Planet.MARS, SEFLG_XYZ | TRANSIT_LONGITUDE, 0.0
            )

    def test_heliocentric_nodes_are_rejected(self):
        for planet in (Planet.MEAN_NODE, Planet.TRUE_NODE, Planet.MEAN_APOG, Planet.OSCU_APOG):
            with self.assertRaises(TransitConfigurationError):
                PlanetTransitCalculator(
                    self.engine, planet, SEFLG_HELCTR | TRANSIT_LONGITUDE, 0.0
                )

    def test_topocentric_needs_geographic_position(self):
        with self.assertRaises(TransitConfigurationError):
            PlanetTransitCalculator(
                self.engine, Planet.MARS, SEFLG_TOPOCTR | TRANSIT_LONGITUDE, 0.0
            )
        self.engine.set_topo(13.4, 52.5, 30.0)
        calc = PlanetTransitCalculator(
            self.engine, Planet.MARS, SEFLG_TOPOCTR | TRANSIT_LONGITUDE, 0.0
        )
        self.assertEqual(calc.flags, SEFLG_TOPOCTR)

    def test_engine_errors_are_wrapped(self):
        engine = FakeEngine(
            {Planet.MARS: (90.0, 0.5)},
            fail_with="jd 2488117.17 > Swiss Eph. upper limit 2487932.5;",
        )
        calc = PlanetTransitCalculator(engine, Planet.MARS, TRANSIT_LONGITUDE, 100.0)

        with self.assertRaises(EphemerisCalculationError) as ctx:
            get_transit(calc, BASE_JD)
        self.assertEqual(ctx.exception.kind, ErrorKind.OUT_OF_TIME_RANGE)
        self.assertEqual(ctx.exception.jd, BASE_JD)

    def test_asteroid_speeds_are_sampled(self):
        body = AST_OFFSET + 433
        engine = FakeEngine({body: (10.0, 0.3)})
        engine.calc = lambda jd, planet, flags: (
            10.0,
            0.0,
            1.0,
            0.3 + 0.1 * math.sin(jd),
            0.0,
            0.0,
        )
        self.assertTrue(math.isinf(get_planet_speed(True, body, 0, TRANSIT_LONGITUDE, engine)))

        calc = PlanetTransitCalculator(
            engine, body, TRANSIT_LONGITUDE, 13.0, rng=random.Random(5)
        )

        # Sampled extremes of 0.2 and 0.4, widened by 1.4
        self.assertGreater(calc.min_speed, 0.0)
        self.assertLess(calc.min_speed, 0.2)
        self.assertGreater(calc.max_speed, 0.4)

    def test_constant_asteroid_speed_cannot_be_sampled(self):
        body = AST_OFFSET + 433
        engine = FakeEngine({body: (10.0, 0.3)})
        with self.assertRaises(TransitConfigurationError):
            PlanetTransitCalculator(engine, body, TRANSIT_LONGITUDE, 13.0, rng=random.Random(5))

    def test_repr_names_the_body(self):
        calc = PlanetTransitCalculator(self.engine, 4, TRANSIT_LONGITUDE, 10.0)
        self.assertEqual(repr(calc), "PlanetTransitCalculator(4; offset=10.0)")
        self.assertEqual(calc.object_identifiers(), (Planet.MARS,))


class TestPlanetHouseTransitCalculator(unittest.TestCase):
    """Tests for a body relative to a house object."""

    def setUp(self):
        self.engine = FakeEngine({Planet.SUN: (10.0, 1.0)})

    def make(self, **kwargs):
        args = dict(
            engine=self.engine,
            planet=Planet.SUN,
            planet_flags=SEFLG_SWIEPH | TRANSIT_LONGITUDE,
            house_object=HouseObject.ASC,
            house_system=HouseSystem.PLACIDUS,
            house_flags=0,
            geolon=13.4,
            geolat=52.5,
            offset=0.0,
        )
        args.update(kwargs)
        return PlanetHouseTransitCalculator(**args)

    def test_speed_combination(self):
        calc = self.make()
        min1, max1 = calc.planet_speeds
        min2 = get_house_speed(True, "P", HouseObject.ASC, 52.5)
        max2 = get_house_speed(False, "P", HouseObject.ASC, 52.5)
        self.assertEqual(calc.house_speeds, (min2, max2))

        if max1 > max2:
            expected = (min1 - max2, max1 - min2)
        else:
            expected = (min2 - max1, max2 - min1)
        self.assertEqual((calc.min_speed, calc.max_speed), expected)
        self.assertTrue(calc.rollover)

    def test_sets_topocentric_position(self):
        self.make(geolon=-70.5, geolat=-33.4)
        self.assertEqual(self.engine.topo, (-70.5, -33.4, 0.0))

    def test_calc_uses_universal_time_for_houses(self):
        self.engine._delta_t = 0.001
        calc = self.make()
        jd = BASE_JD + 1.25

        value = calc.calc(jd)

        self.assertEqual(self.engine.house_calls[-1], jd - 0.001)
        sun = (10.0 + 1.25) % 360.0
        asc = (HOUSE_RATE * (1.25 - 0.001)) % 360.0
        self.assertAlmostEqual(value, sun - asc, places=6)

    def test_house_cusps_are_looked_up(self):
        calc = self.make(house_object=HouseObject.HOUSE4)
        asc = (HOUSE_RATE * 0.5) % 360.0
        expected = (10.5 - (asc + 90.0) % 360.0)
        self.assertAlmostEqual(calc.calc(BASE_JD + 0.5), expected, places=9)

    def test_transit_over_ascendant(self):
        calc = self.make()

        result = get_transit(calc, BASE_JD)

        self.assertAlmostEqual(result, BASE_JD + 10.0 / (HOUSE_RATE - 1.0), places=6)
        self.assertLess(abs(wrapped_difference(calc.calc(result))), 1e-4)

    def test_time_precision_uses_slowest_extremes(self):
        calc = self.make()
        min1, max1 = calc.planet_speeds
        min2, max2 = calc.house_speeds
        fastest = max(min(abs(min1), abs(min2)), min(abs(max1), abs(max2)))
        self.assertAlmostEqual(calc.time_precision(1e-4), 1e-4 / fastest)
        self.assertEqual(calc.time_precision(0.0), 1e-9)

    def test_requires_longitude_transit(self):
        with self.assertRaises(TransitConfigurationError):
            self.make(planet_flags=SEFLG_SWIEPH)
        with self.assertRaises(TransitConfigurationError):
            self.make(planet_flags=SEFLG_SWIEPH | TRANSIT_LATITUDE)
        # The transit flag may be given with the house flags instead
        calc = self.make(planet_flags=SEFLG_SWIEPH, house_flags=TRANSIT_LONGITUDE)
        self.assertEqual(calc.house_flags, 0)

    def test_invalid_house_flags(self):
        with self.assertRaises(TransitConfigurationError):
            self.make(house_flags=SEFLG_HELCTR)
        calc = self.make(house_flags=SEFLG_SIDEREAL)
        self.assertEqual(calc.house_flags, SEFLG_SIDEREAL)

    def test_invalid_house_object(self):
        with self.assertRaises(TransitConfigurationError):
            self.make(house_object=8)
        with self.assertRaises(TransitConfigurationError):
            self.make(house_object=-13)

    def test_house_systems(self):
        with self.assertRaises(UnsupportedHouseSystemError):
            self.make(house_system="Z")
        # Known to Swiss Ephemeris, but without speed tables
        with self.assertRaises(TransitConfigurationError):
            self.make(house_system="G")
        calc = self.make(house_system=b"K")
        self.assertEqual(calc.house_system, HouseSystem.KOCH)
        self.assertEqual(calc.object_identifiers(), (Planet.SUN, 0, "K"))


class TestHouseTransitCalculator(unittest.TestCase):
    """Tests for a house object against a fixed offset."""

    def setUp(self):
        self.engine = FakeEngine()

    def test_ascendant_transit(self):
        calc = HouseTransitCalculator(
            self.engine, HouseObject.ASC, "P", 13.4, 52.5, offset=100.0
        )

        result = get_transit(calc, BASE_JD)

        self.assertAlmostEqual(result, BASE_JD + 100.0 / HOUSE_RATE, places=6)
        self.assertEqual(self.engine.topo, (13.4, 52.5, 0.0))

    def test_speeds_follow_latitude_band(self):
        calc = HouseTransitCalculator(self.engine, HouseObject.ASC, "P", 13.4, 52.5)
        self.assertEqual(calc.max_speed, get_house_speed(False, "P", HouseObject.ASC, 50.0))

        calc.set_geopos(0.0, 89.0)
        self.assertEqual(calc.min_speed, get_house_speed(True, "P", HouseObject.ASC, 90.0))
        self.assertEqual((calc.geolon, calc.geolat), (0.0, 89.0))

    def test_equal_houses_share_table(self):
        a = HouseTransitCalculator(self.engine, HouseObject.HOUSE3, "A", 0.0, 33.0)
        e = HouseTransitCalculator(self.engine, HouseObject.HOUSE3, "E", 0.0, 33.0)
        self.assertEqual((a.min_speed, a.max_speed), (e.min_speed, e.max_speed))

    def test_degree_precision(self):
        calc = HouseTransitCalculator(self.engine, HouseObject.MC, "K", 0.0, 10.0)
        self.assertAlmostEqual(calc.degree_precision(BASE_JD), 0.5 / 3600.0 / 2.0)

    def test_offset_is_normalized(self):
        calc = HouseTransitCalculator(self.engine, HouseObject.MC, "K", 0.0, 10.0, offset=370.0)
        self.assertEqual(calc.offset, 10.0)

    def test_invalid_configuration(self):
        with self.assertRaises(TransitConfigurationError):
            HouseTransitCalculator(self.engine, HouseObject.ASC, "P", 0.0, 10.0, flags=SEFLG_HELCTR)
        with self.assertRaises(TransitConfigurationError):
            HouseTransitCalculator(
                self.engine, HouseObject.ASC, "P", 0.0, 10.0, flags=TRANSIT_LATITUDE
            )
        with self.assertRaises(UnsupportedHouseSystemError):
            HouseTransitCalculator(self.engine, HouseObject.ASC, "?", 0.0, 10.0)
        with self.assertRaises(TransitConfigurationError):
            HouseTransitCalculator(self.engine, 42, "P", 0.0, 10.0)


class TestPlanetPlanetTransitCalculator(unittest.TestCase):
    """Tests for one body relative to another."""

    def setUp(self):
        self.engine = FakeEngine({Planet.SUN: (10.0, 1.0), Planet.MARS: (0.0, 0.5)})

    def test_relative_transit(self):
        calc = PlanetPlanetTransitCalculator(
            self.engine, Planet.SUN, Planet.MARS, SEFLG_SWIEPH | TRANSIT_LONGITUDE, 60.0
        )

        result = get_transit(calc, BASE_JD)

        self.assertAlmostEqual(result, BASE_JD + 100.0, places=5)

    def test_speed_combination(self):
        calc = PlanetPlanetTransitCalculator(
            self.engine, Planet.SUN, Planet.MARS, TRANSIT_LONGITUDE
        )
        min1, max1 = calc.speeds1
        min2, max2 = calc.speeds2
        self.assertGreater(max1, max2)
        self.assertEqual(calc.min_speed, min1 - max2)
        self.assertEqual(calc.max_speed, max1 - min2)

    def test_degree_precision_is_the_coarser(self):
        calc = PlanetPlanetTransitCalculator(
            self.engine, Planet.SUN, Planet.MARS, TRANSIT_LONGITUDE
        )
        # Before 1980 the Sun and Mars are known to 0.08"
        jd_1950 = 2433282.5
        self.assertAlmostEqual(calc.degree_precision(jd_1950), 0.08 / 3600.0 / 2.0)

    def test_invalid_configuration(self):
        with self.assertRaises(TransitConfigurationError):
            PlanetPlanetTransitCalculator(self.engine, Planet.SUN, Planet.MARS, TRANSIT_LATITUDE)
        with self.assertRaises(TransitConfigurationError):
            PlanetPlanetTransitCalculator(self.engine, Planet.SUN, Planet.SUN, TRANSIT_LONGITUDE)
        with self.assertRaises(TransitConfigurationError):
            PlanetPlanetTransitCalculator(
                self.engine, Planet.SUN, Planet.MEAN_NODE, SEFLG_HELCTR | TRANSIT_LONGITUDE
            )


if __name__ == "__main__":
    unittest.main()
