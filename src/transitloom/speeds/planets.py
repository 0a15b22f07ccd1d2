"""Extreme daily speeds of the Swiss Ephemeris bodies.

Each table holds ``(min, max)`` in degrees per day for the bodies numbered
``Planet.SUN`` to ``Planet.INTP_PERG``. ``INF`` marks bodies without a
known value (the Earth, heliocentric positions of the Sun and of fictitious
points); the caller falls back to sampling for those.

The values bound the true extremes over the Moshier time range rather than
reproduce them. Geocentric and topocentric rows are sampled envelopes
widened by 15 percent. Heliocentric rows follow from the orbital elements,
with room for precession and for perturbations.
"""

import math
from typing import Tuple

from ..constants import (
    SEFLG_EQUATORIAL,
    SEFLG_HELCTR,
    SEFLG_TOPOCTR,
    TRANSIT_LONGITUDE,
)
from ..errors import TransitConfigurationError
from ..ephemeris.engine import EphemerisEngine

INF = math.inf
_NONE = (INF, INF)

# Topocentric tables only hold for observers between these altitudes (meters)
MAX_TOPO_ALTITUDE = 50000.0
MIN_TOPO_ALTITUDE = -12000000.0

# fmt: off
GEO_LON_SPEEDS: Tuple[Tuple[float, float], ...] = (
    (0.8181, 1.1779),     # Sun
    (10.1739, 17.7675),   # Moon
    (-1.6100, 2.5645),    # Mercury
    (-0.7475, 1.4605),    # Venus
    (-0.4715, 0.9200),    # Mars
    (-0.1610, 0.2875),    # Jupiter
    (-0.0978, 0.1552),    # Saturn
    (-0.0494, 0.0736),    # Uranus
    (-0.0322, 0.0460),    # Neptune
    (-0.0333, 0.0483),    # Pluto
    (-0.0611, -0.0459),   # Mean node
    (-1.6675, 0.6325),    # True node
    (0.0961, 0.1306),     # Mean apogee
    (-4.6000, 7.9350),    # Osculating apogee
    _NONE,                # Earth
    (-0.0920, 0.1840),    # Chiron
    (-0.0575, 0.1380),    # Pholus
    (-0.2645, 0.5635),    # Ceres
    (-0.3910, 0.9200),    # Pallas
    (-0.3450, 0.7360),    # Juno
    (-0.2875, 0.5980),    # Vesta
    (-0.2875, 0.5175),    # Interpolated apogee
    (-1.2650, 1.6100),    # Interpolated perigee
)

GEO_RECT_SPEEDS: Tuple[Tuple[float, float], ...] = (
    (0.7363, 1.2957),
    (8.6957, 20.9300),
    (-1.7710, 2.8209),
    (-0.8222, 1.6065),
    (-0.5186, 1.0120),
    (-0.1771, 0.3162),
    (-0.1075, 0.1708),
    (-0.0544, 0.0810),
    (-0.0354, 0.0506),
    (-0.0367, 0.0531),
    (-0.0672, -0.0413),
    (-1.8342, 0.6957),
    (0.0865, 0.1437),
    (-5.0600, 8.7285),
    _NONE,
    (-0.1012, 0.2024),
    (-0.0633, 0.1518),
    (-0.2909, 0.6199),
    (-0.4301, 1.0120),
    (-0.3795, 0.8096),
    (-0.3162, 0.6578),
    (-0.3162, 0.5692),
    (-1.3915, 1.7710),
)

TOPO_LON_SPEEDS: Tuple[Tuple[float, float], ...] = (
    (0.8042, 1.1963),
    (4.7826, 24.8975),
    (-1.6445, 2.5990),
    (-0.8165, 1.5295),
    (-0.5232, 0.9717),
    (-0.1667, 0.2932),
    (-0.1012, 0.1587),
    (-0.0506, 0.0747),
    (-0.0333, 0.0471),
    (-0.0345, 0.0494),
    (-0.0611, -0.0459),
    (-1.6675, 0.6325),
    (0.0961, 0.1306),
    (-4.6000, 7.9350),
    _NONE,
    (-0.0943, 0.1863),
    (-0.0586, 0.1391),
    (-0.2760, 0.5750),
    (-0.4048, 0.9338),
    (-0.3588, 0.7498),
    (-0.3036, 0.6141),
    (-0.2875, 0.5175),
    (-1.2650, 1.6100),
)

TOPO_RECT_SPEEDS: Tuple[Tuple[float, float], ...] = (
    (0.7237, 1.3159),
    (4.3043, 27.6000),
    (-1.8089, 2.8589),
    (-0.8982, 1.6825),
    (-0.5756, 1.0689),
    (-0.1834, 0.3226),
    (-0.1113, 0.1746),
    (-0.0557, 0.0822),
    (-0.0367, 0.0519),
    (-0.0379, 0.0544),
    (-0.0672, -0.0413),
    (-1.8342, 0.6957),
    (0.0865, 0.1437),
    (-5.0600, 8.7285),
    _NONE,
    (-0.1037, 0.2049),
    (-0.0645, 0.1531),
    (-0.3036, 0.6325),
    (-0.4453, 1.0272),
    (-0.3947, 0.8248),
    (-0.3340, 0.6755),
    (-0.3162, 0.5692),
    (-1.3915, 1.7710),
)

HELIO_LON_SPEEDS: Tuple[Tuple[float, float], ...] = (
    _NONE,
    (0.85, 1.12),
    (2.60, 6.70),
    (1.55, 1.66),
    (0.40, 0.67),
    (0.070, 0.098),
    (0.026, 0.043),
    (0.0095, 0.0145),
    (0.0053, 0.0068),
    (0.0021, 0.0080),
    _NONE,
    _NONE,
    _NONE,
    _NONE,
    _NONE,
    (0.007, 0.055),
    (0.0025, 0.055),
    (0.17, 0.28),
    (0.12, 0.39),
    (0.12, 0.44),
    (0.21, 0.36),
    _NONE,
    _NONE,
)

HELIO_RECT_SPEEDS: Tuple[Tuple[float, float], ...] = (
    _NONE,
    (0.68, 1.40),
    (2.08, 8.375),
    (1.24, 2.075),
    (0.32, 0.8375),
    (0.056, 0.1225),
    (0.0208, 0.05375),
    (0.0076, 0.018125),
    (0.00424, 0.0085),
    (0.0012, 0.0110),
    _NONE,
    _NONE,
    _NONE,
    _NONE,
    _NONE,
    (0.0056, 0.06875),
    (0.0020, 0.06875),
    (0.136, 0.35),
    (0.06, 0.78),
    (0.096, 0.55),
    (0.168, 0.45),
    _NONE,
    _NONE,
)
# fmt: on


def _lookup(table: Tuple[Tuple[float, float], ...], minimum: bool, planet: int) -> float:
    if not 0 <= planet < len(table):
        return INF
    return table[planet][0 if minimum else 1]


def get_planet_speed(
    minimum: bool,
    planet: int,
    flags: int,
    transit_flags: int,
    engine: EphemerisEngine,
) -> float:
    """Return the tabulated extreme speed of a body, ``INF`` if unknown.

    Only longitudinal transits have tables; latitude and distance always
    return ``INF``.

    Args:
        minimum: True for the minimum speed, False for the maximum
        planet: Swiss Ephemeris body number
        flags: The engine calculation flags for the body
        transit_flags: The transit method flags
        engine: The engine, consulted for the topocentric observer

    Raises:
        TransitConfigurationError: Topocentric flags without an observer position
    """
    lon = bool(transit_flags & TRANSIT_LONGITUDE)
    topo = bool(flags & SEFLG_TOPOCTR)
    helio = bool(flags & SEFLG_HELCTR)
    rect = bool(flags & SEFLG_EQUATORIAL)

    if not lon:
        return INF

    # Some topocentric speeds are very different to the geocentric speeds
    if topo:
        if not engine.geopos_is_set:
            raise TransitConfigurationError(
                "Geographic position is not set for requested topocentric calculations."
            )
        altitude = engine.topo_altitude
        if altitude > MAX_TOPO_ALTITUDE or altitude < MIN_TOPO_ALTITUDE:
            return INF
        return _lookup(TOPO_RECT_SPEEDS if rect else TOPO_LON_SPEEDS, minimum, planet)

    if helio:
        return _lookup(HELIO_RECT_SPEEDS if rect else HELIO_LON_SPEEDS, minimum, planet)

    return _lookup(GEO_RECT_SPEEDS if rect else GEO_LON_SPEEDS, minimum, planet)
