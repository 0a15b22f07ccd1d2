"""Transits of one body relative to another."""

import random
from typing import Optional, Tuple

from ..constants import TRANSIT_LONGITUDE, TRANSIT_MASK
from ..ephemeris.engine import EphemerisEngine
from ..errors import TransitConfigurationError
from ..speeds import planet_degree_precision
from .calculator import (
    TransitCalculator,
    combine_speed_bounds,
    combined_time_precision,
    engine_calc,
    planet_speed_bounds,
    sampling_settings,
    transit_flags_of,
    validate_planet_flags,
)


class PlanetPlanetTransitCalculator(TransitCalculator):
    """
    The longitude of one body minus the longitude of another.

    Use an offset of 0 for conjunctions, 180 for oppositions, and so on.
    Both bodies are calculated with the same flags.
    """

    rollover = True

    def __init__(
        self,
        engine: EphemerisEngine,
        planet1: int,
        planet2: int,
        flags: int,
        offset: float = 0.0,
        precalc_count: Optional[int] = None,
        precalc_safety_factor: Optional[float] = None,
        rng: Optional[random.Random] = None,
    ):
        super().__init__(engine)

        if transit_flags_of(flags) != TRANSIT_LONGITUDE:
            raise TransitConfigurationError(
                f"Invalid flag combination '{flags}': only TRANSIT_LONGITUDE "
                f"({TRANSIT_LONGITUDE}) is allowed as transit method."
            )
        if planet1 == planet2:
            raise TransitConfigurationError(
                f"Relative transits need two different bodies, got {planet1} twice."
            )
        validate_planet_flags(engine, planet1, flags, TRANSIT_LONGITUDE)
        validate_planet_flags(engine, planet2, flags, TRANSIT_LONGITUDE)

        self.planet1 = planet1
        self.planet2 = planet2
        self.flags = flags & ~TRANSIT_MASK

        self.sampling = sampling_settings(precalc_count, precalc_safety_factor)
        self.speeds1 = planet_speed_bounds(
            engine, planet1, self.flags, TRANSIT_LONGITUDE, 0, self.sampling, rng
        )
        self.speeds2 = planet_speed_bounds(
            engine, planet2, self.flags, TRANSIT_LONGITUDE, 0, self.sampling, rng
        )
        self._min_speed, self._max_speed = combine_speed_bounds(self.speeds1, self.speeds2)
        self.offset = offset

    @property
    def min_speed(self) -> float:
        return self._min_speed

    @property
    def max_speed(self) -> float:
        return self._max_speed

    def calc(self, jd: float) -> float:
        lon1 = engine_calc(self.engine, jd, self.planet1, self.flags)[0]
        lon2 = engine_calc(self.engine, jd, self.planet2, self.flags)[0]
        return lon1 - lon2

    def degree_precision(self, jd: float) -> float:
        # The coarser of both bodies
        return max(
            planet_degree_precision(self.planet1, jd),
            planet_degree_precision(self.planet2, jd),
        )

    def time_precision(self, deg_prec: float) -> float:
        return combined_time_precision(deg_prec, self.speeds1, self.speeds2)

    def object_identifiers(self) -> Tuple[int, int]:
        return (self.planet1, self.planet2)
