"""Tests for the tabulated planet speeds."""

import math

import pytest

from transitloom.constants import (
    AST_OFFSET,
    SEFLG_EQUATORIAL,
    SEFLG_HELCTR,
    SEFLG_TOPOCTR,
    TRANSIT_DISTANCE,
    TRANSIT_LATITUDE,
    TRANSIT_LONGITUDE,
    Planet,
)
from transitloom.ephemeris.engine import EphemerisEngine
from transitloom.errors import TransitConfigurationError
from transitloom.speeds import get_planet_speed
from transitloom.speeds.planets import (
    GEO_LON_SPEEDS,
    GEO_RECT_SPEEDS,
    HELIO_LON_SPEEDS,
    HELIO_RECT_SPEEDS,
    TOPO_LON_SPEEDS,
    TOPO_RECT_SPEEDS,
)


class ObserverEngine(EphemerisEngine):
    """Engine that only knows about its observer."""

    def __init__(self, altitude=None):
        self.altitude = altitude

    def calc(self, jd_et, body, flags):
        raise NotImplementedError

    def houses(self, jd_ut, flags, geolat, geolon, hsys):
        raise NotImplementedError

    def delta_t(self, jd):
        return 0.0

    def set_topo(self, geolon, geolat, altitude=0.0):
        self.altitude = altitude

    @property
    def geopos_is_set(self):
        return self.altitude is not None

    @property
    def topo_altitude(self):
        return self.altitude or 0.0


@pytest.fixture
def engine():
    return ObserverEngine()


def test_geocentric_longitude(engine):
    assert get_planet_speed(True, Planet.SUN, 0, TRANSIT_LONGITUDE, engine) == 0.8181
    assert get_planet_speed(False, Planet.MOON, 0, TRANSIT_LONGITUDE, engine) == 17.7675


def test_mean_node_only_moves_backward(engine):
    assert get_planet_speed(False, Planet.MEAN_NODE, 0, TRANSIT_LONGITUDE, engine) < 0


@pytest.mark.parametrize(
    "flags, table",
    [
        (0, GEO_LON_SPEEDS),
        (SEFLG_EQUATORIAL, GEO_RECT_SPEEDS),
        (SEFLG_HELCTR, HELIO_LON_SPEEDS),
        (SEFLG_HELCTR | SEFLG_EQUATORIAL, HELIO_RECT_SPEEDS),
    ],
)
def test_table_selection(engine, flags, table):
    assert get_planet_speed(True, Planet.MARS, flags, TRANSIT_LONGITUDE, engine) == table[Planet.MARS][0]
    assert get_planet_speed(False, Planet.MARS, flags, TRANSIT_LONGITUDE, engine) == table[Planet.MARS][1]


def test_topocentric_tables():
    engine = ObserverEngine(altitude=100.0)
    assert get_planet_speed(True, Planet.MOON, SEFLG_TOPOCTR, TRANSIT_LONGITUDE, engine) == TOPO_LON_SPEEDS[1][0]
    assert (
        get_planet_speed(False, Planet.MOON, SEFLG_TOPOCTR | SEFLG_EQUATORIAL, TRANSIT_LONGITUDE, engine)
        == TOPO_RECT_SPEEDS[1][1]
    )


def test_topocentric_observer_out_of_range():
    engine = ObserverEngine(altitude=60000.0)
    assert math.isinf(get_planet_speed(True, Planet.MOON, SEFLG_TOPOCTR, TRANSIT_LONGITUDE, engine))


def test_topocentric_requires_observer(engine):
    with pytest.raises(TransitConfigurationError):
        get_planet_speed(True, Planet.MOON, SEFLG_TOPOCTR, TRANSIT_LONGITUDE, engine)


@pytest.mark.parametrize("transit_flags", [TRANSIT_LATITUDE, TRANSIT_DISTANCE])
def test_only_longitudes_are_tabulated(engine, transit_flags):
    assert math.isinf(get_planet_speed(True, Planet.SUN, 0, transit_flags, engine))


@pytest.mark.parametrize("planet", [Planet.EARTH, AST_OFFSET + 433, 99, -1])
def test_unknown_bodies(engine, planet):
    assert math.isinf(get_planet_speed(False, planet, 0, TRANSIT_LONGITUDE, engine))


def test_heliocentric_sun_is_unknown(engine):
    assert math.isinf(get_planet_speed(True, Planet.SUN, SEFLG_HELCTR, TRANSIT_LONGITUDE, engine))


def test_tables_are_ordered():
    for table in (
        GEO_LON_SPEEDS,
        GEO_RECT_SPEEDS,
        TOPO_LON_SPEEDS,
        TOPO_RECT_SPEEDS,
        HELIO_LON_SPEEDS,
        HELIO_RECT_SPEEDS,
    ):
        assert len(table) == Planet.INTP_PERG + 1
        for low, high in table:
            assert math.isinf(low) or low <= high
