"""Precision of computed planet positions.

The values are the accuracy Swiss Ephemeris quotes for each body and epoch.
A transit search stops refining once its samples are closer than this.
"""

import math

from ..constants import Planet
from ..space_time.julian import julian_year

ARCSEC_PER_DEGREE = 3600.0

# Maximum barycentric distance (AU) of each body; the precision of a distance
# scales with it
MAX_BARY_DIST = (
    0.009570999,  # Sun
    1.028809521,  # Moon
    0.466604085,  # Mercury
    0.728698831,  # Venus
    0.728698831,  # Mars
    4.955912195,  # Jupiter
    8.968685733,  # Saturn
    19.893326756,  # Uranus
    30.326750627,  # Neptune
    41.499626899,  # Pluto
    0.002569555,  # Mean node
    0.002774851,  # True node
    1.0,  # Mean apogee, constant distance
    0.002782378,  # Osculating apogee
    0.0,  # Earth
    0.05,  # Chiron
    31.901319663,  # Pholus
    3.012409508,  # Ceres
    3.721614106,  # Pallas
    3.326307148,  # Juno
    2.570197288,  # Vesta
)

# Precision of a house object position in arc seconds
HOUSE_PRECISION_ARCSEC = 0.5


def planet_degree_precision(planet: int, jd: float) -> float:
    """Return the smallest meaningful longitude difference (degrees) of a body.

    Sun to Jupiter:       0.005" for 1980 to 2099, 0.08" otherwise.
    Saturn and beyond:    0.005" for 1980 to 2099, 0.08" for 1900 to 1980,
                          1" otherwise (nodes and asteroids included).

    The value is halved, as the quoted precisions are "better than".
    """
    year = julian_year(jd)
    arcsec = 0.005
    if Planet.SUN <= planet <= Planet.JUPITER:
        if year < 1980 or year > 2099:
            arcsec = 0.08
    elif 1900 <= year < 1980:
        arcsec = 0.08
    elif year < 1900 or year > 2099:
        arcsec = 1.0
    return arcsec / ARCSEC_PER_DEGREE * 0.5


def planet_distance_precision(planet: int, jd: float) -> float:
    """Return the smallest meaningful distance difference (AU) of a body."""
    if 0 <= planet < len(MAX_BARY_DIST) and MAX_BARY_DIST[planet] > 0:
        distance = MAX_BARY_DIST[planet]
    else:
        distance = 1.0
    return math.radians(planet_degree_precision(planet, jd)) * distance


def house_degree_precision() -> float:
    """Return the smallest meaningful difference (degrees) of a house object."""
    return HOUSE_PRECISION_ARCSEC / ARCSEC_PER_DEGREE * 0.5
