"""Sampled Swiss Ephemeris speeds must lie within the tabulated extremes."""

import math
import random

import pytest

swe = pytest.importorskip("swisseph")

from transitloom.constants import (  # noqa: E402
    MOSHPLEPH_END,
    MOSHPLEPH_START,
    HouseObject,
    Planet,
)
from transitloom.speeds import latitude_band, point_index  # noqa: E402
from transitloom.speeds.house_table import HOUSE_SPEEDS  # noqa: E402
from transitloom.speeds.planets import (  # noqa: E402
    GEO_LON_SPEEDS,
    GEO_RECT_SPEEDS,
    HELIO_LON_SPEEDS,
    HELIO_RECT_SPEEDS,
)

SAMPLES = 400

# Bodies the Moshier ephemeris computes without data files
MOSHIER_BODIES = [
    Planet.SUN,
    Planet.MOON,
    Planet.MERCURY,
    Planet.VENUS,
    Planet.MARS,
    Planet.JUPITER,
    Planet.SATURN,
    Planet.URANUS,
    Planet.NEPTUNE,
    Planet.PLUTO,
    Planet.MEAN_NODE,
    Planet.TRUE_NODE,
    Planet.MEAN_APOG,
    Planet.OSCU_APOG,
]

HOUSE_CODES = ["P", "K", "O", "R", "C", "A", "V", "X", "H", "T", "B", "M", "U", "W"]

POINTS = [p for p in HouseObject if not p.is_cusp] + [p for p in HouseObject if p.is_cusp]


@pytest.mark.parametrize(
    "flags, table",
    [
        (0, GEO_LON_SPEEDS),
        (swe.FLG_EQUATORIAL, GEO_RECT_SPEEDS),
        (swe.FLG_HELCTR, HELIO_LON_SPEEDS),
        (swe.FLG_HELCTR | swe.FLG_EQUATORIAL, HELIO_RECT_SPEEDS),
    ],
)
def test_planet_speeds_within_table(flags, table):
    rng = random.Random(20240320)
    for body in MOSHIER_BODIES:
        low, high = table[body]
        if math.isinf(low):
            continue
        for _ in range(SAMPLES):
            jd = rng.uniform(MOSHPLEPH_START + 1.0, MOSHPLEPH_END - 1.0)
            xx, _ = swe.calc(jd, body, swe.FLG_MOSEPH | swe.FLG_SPEED | flags)
            assert low <= xx[3] <= high, (body.name, flags, jd, xx[3])


def _house_point_speeds(code, latitude, rng):
    jd = rng.uniform(MOSHPLEPH_START + 1.0, MOSHPLEPH_END - 1.0)
    lon = rng.uniform(-180.0, 180.0)
    try:
        _, _, cusp_speeds, ascmc_speeds = swe.houses_ex2(
            jd, latitude, lon, code.encode("ascii"), swe.FLG_MOSEPH
        )
    except swe.Error:
        return []
    speeds = []
    for point in POINTS:
        if point.is_cusp:
            speed = cusp_speeds[abs(point.value) - 1]
        else:
            speed = ascmc_speeds[point.value]
        speeds.append((point, speed))
    return speeds


@pytest.mark.parametrize("code", HOUSE_CODES)
def test_house_speeds_within_table_below_polar_circle(code):
    rng = random.Random(ord(code))
    for _ in range(SAMPLES):
        latitude = rng.uniform(-60.0, 60.0)
        row = HOUSE_SPEEDS[(code, latitude_band(latitude))]
        for point, speed in _house_point_speeds(code, latitude, rng):
            low, high = row[point_index(point)]
            assert low <= speed <= high, (code, latitude, point.name, speed)


def test_whole_sign_cusps_within_table_at_high_latitudes():
    rng = random.Random(66)
    for _ in range(SAMPLES):
        latitude = rng.uniform(60.5, 89.5) * rng.choice((-1, 1))
        row = HOUSE_SPEEDS[("W", latitude_band(latitude))]
        for point, speed in _house_point_speeds("W", latitude, rng):
            if not point.is_cusp:
                continue
            low, high = row[point_index(point)]
            assert low <= speed <= high, (latitude, point.name, speed)
