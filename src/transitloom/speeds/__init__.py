"""Extreme speeds and position precision of the searchable objects."""

from .houses import get_house_speed, latitude_band, point_index
from .planets import get_planet_speed
from .precision import (
    house_degree_precision,
    planet_degree_precision,
    planet_distance_precision,
)
from .sampling import sample_extreme_speeds, widen_extremes

__all__ = [
    "get_house_speed",
    "latitude_band",
    "point_index",
    "get_planet_speed",
    "house_degree_precision",
    "planet_degree_precision",
    "planet_distance_precision",
    "sample_extreme_speeds",
    "widen_extremes",
]
