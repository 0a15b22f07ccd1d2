"""Lookup of extreme house object speeds.

House objects move at rates that depend strongly on the geographic
latitude, so the precomputed speeds are kept per latitude band. A band
holds the extremes of every latitude that maps to it.
"""

import math
from typing import Union

from ..constants import HouseObject, HouseSystem, to_house_system
from ..errors import UnsupportedHouseSystemError
from .house_table import HOUSE_SPEEDS

# Latitudes beyond 88 degrees use the "89x" table, stored under this band
EXTREME_LATITUDE_BAND = 90

# Codes sharing a table
_TABLE_ALIASES = {"E": "A"}

# Number of angle points before the house cusps in a table row
_ANGLE_POINTS = 8


def latitude_band(latitude: float) -> int:
    """Map a geographic latitude to the band of its speed table.

    Up to 60 degrees the absolute latitude is rounded down to a multiple of
    10, with 10 as the lowest band. Beyond 60 degrees the latitude is rounded
    up to the next of 66, 70, 80, 85, 88 and 90.

    Raises:
        ValueError: If the latitude is beyond +-90 degrees
    """
    lat = abs(latitude)
    if lat > 90.0:
        raise ValueError(f"Latitude {latitude} is out of range")
    if lat < 20.0:
        return 10
    if lat <= 60.0:
        return int(lat // 10) * 10
    if lat <= 66.0:
        return 66
    if lat <= 70.0:
        return 70
    if lat <= 80.0:
        return 80
    if lat <= 85.0:
        return 85
    if lat <= 88.0:
        return 88
    return EXTREME_LATITUDE_BAND


def point_index(point: int) -> int:
    """Return the table column of a house object.

    Angle points (0..7) keep their number, house cusps ``-1..-12`` map to
    8..19.

    Raises:
        ValueError: If ``point`` is no house object
    """
    point = HouseObject(point)
    if point.is_cusp:
        return abs(point.value) + _ANGLE_POINTS - 1
    return point.value


def get_house_speed(
    minimum: bool,
    system: Union[HouseSystem, str, bytes, int],
    point: int,
    latitude: float,
) -> float:
    """Return the extreme speed of a house object in degrees per day.

    Args:
        minimum: True for the minimum speed, False for the maximum
        system: House system (enum, code letter or its ordinal)
        point: House object number, see :class:`HouseObject`
        latitude: Geographic latitude in degrees

    Returns:
        The speed, or ``math.inf`` if the house system has no table

    Raises:
        UnsupportedHouseSystemError: If ``system`` is no house system code
        ValueError: For an invalid house object or latitude
    """
    try:
        hsys = to_house_system(system)
    except ValueError as exc:
        raise UnsupportedHouseSystemError(f"Unknown house system '{system}'.") from exc

    code = _TABLE_ALIASES.get(hsys.value, hsys.value)
    column = point_index(point)
    row = HOUSE_SPEEDS.get((code, latitude_band(latitude)))
    if row is None:
        return math.inf
    return row[column][0 if minimum else 1]
