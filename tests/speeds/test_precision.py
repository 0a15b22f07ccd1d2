"""Tests for position precision estimates."""

import math

import pytest

from transitloom.constants import AST_OFFSET, Planet
from transitloom.speeds import (
    house_degree_precision,
    planet_degree_precision,
    planet_distance_precision,
)
from transitloom.speeds.precision import MAX_BARY_DIST

JD_1850 = 2396758.5
JD_1950 = 2433282.5
JD_2024 = 2460310.5
JD_2150 = 2506633.5


def arcsec(value):
    return value / 3600.0 * 0.5


@pytest.mark.parametrize(
    "planet, jd, expected",
    [
        (Planet.SUN, JD_2024, 0.005),
        (Planet.JUPITER, JD_2024, 0.005),
        (Planet.MOON, JD_1950, 0.08),
        (Planet.MARS, JD_1850, 0.08),
        (Planet.MERCURY, JD_2150, 0.08),
        (Planet.SATURN, JD_2024, 0.005),
        (Planet.SATURN, JD_1950, 0.08),
        (Planet.PLUTO, JD_1850, 1.0),
        (Planet.CHIRON, JD_2150, 1.0),
        (AST_OFFSET + 433, JD_1950, 0.08),
    ],
)
def test_degree_precision(planet, jd, expected):
    assert planet_degree_precision(planet, jd) == pytest.approx(arcsec(expected))


def test_distance_precision_scales_with_distance():
    degrees = planet_degree_precision(Planet.JUPITER, JD_2024)
    assert planet_distance_precision(Planet.JUPITER, JD_2024) == pytest.approx(
        math.radians(degrees) * MAX_BARY_DIST[Planet.JUPITER]
    )


@pytest.mark.parametrize("planet", [Planet.EARTH, AST_OFFSET + 433])
def test_distance_precision_without_distance(planet):
    degrees = planet_degree_precision(planet, JD_2024)
    assert planet_distance_precision(planet, JD_2024) == pytest.approx(math.radians(degrees))


def test_house_precision():
    assert house_degree_precision() == pytest.approx(arcsec(0.5))
