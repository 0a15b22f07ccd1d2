"""Transits of a single body over a fixed longitude, latitude or distance."""

import random
from typing import Optional, Tuple

from ..constants import (
    TRANSIT_DISTANCE,
    TRANSIT_INDEX,
    TRANSIT_LATITUDE,
    TRANSIT_LONGITUDE,
    TRANSIT_MASK,
)
from ..ephemeris.engine import EphemerisEngine
from ..errors import TransitConfigurationError
from ..speeds import planet_degree_precision, planet_distance_precision
from .calculator import (
    TransitCalculator,
    engine_calc,
    planet_speed_bounds,
    sampling_settings,
    transit_flags_of,
    validate_planet_flags,
)


class PlanetTransitCalculator(TransitCalculator):
    """
    A body's longitude, latitude or distance compared to a fixed value.

    Example:
        >>> engine = SwissEphemerisEngine()
        >>> calc = PlanetTransitCalculator(
        ...     engine, Planet.MARS, SEFLG_SWIEPH | TRANSIT_LONGITUDE, 120.0
        ... )
        >>> jd = get_transit(calc, 2460310.5)

    Longitudes wrap at 360 degrees. Latitude offsets are folded into
    -90..+90 degrees, distances must not be negative.
    """

    def __init__(
        self,
        engine: EphemerisEngine,
        planet: int,
        flags: int,
        offset: float = 0.0,
        precalc_count: Optional[int] = None,
        precalc_safety_factor: Optional[float] = None,
        rng: Optional[random.Random] = None,
    ):
        """
        Initialize the calculator.

        Args:
            engine: The ephemeris engine
            planet: Swiss Ephemeris body number (``AST_OFFSET`` + number for
                    asteroids)
            flags: Engine calculation flags plus exactly one of
                   ``TRANSIT_LONGITUDE``, ``TRANSIT_LATITUDE`` or
                   ``TRANSIT_DISTANCE``
            offset: The value to search for (degrees or AU)
            precalc_count: Number of speed samples for bodies without
                           tabulated speeds (at least 100)
            precalc_safety_factor: Widening of sampled speeds (at least 1.1)
            rng: Random generator for the speed sampling

        Raises:
            TransitConfigurationError: For invalid flags or unknowable speeds
        """
        super().__init__(engine)

        transit_flags = transit_flags_of(flags)
        if transit_flags not in TRANSIT_INDEX:
            raise TransitConfigurationError(
                f"Invalid flag combination '{flags}': specify exactly one of "
                f"TRANSIT_LONGITUDE ({TRANSIT_LONGITUDE}), TRANSIT_LATITUDE "
                f"({TRANSIT_LATITUDE}) or TRANSIT_DISTANCE ({TRANSIT_DISTANCE})."
            )
        validate_planet_flags(engine, planet, flags, transit_flags)

        self.planet = planet
        self.transit_flags = transit_flags
        self.flags = flags & ~TRANSIT_MASK
        self.idx = TRANSIT_INDEX[transit_flags]

        self.rollover = transit_flags == TRANSIT_LONGITUDE
        if transit_flags == TRANSIT_LATITUDE:
            self.min_offset, self.max_offset = -90.0, 90.0
        elif transit_flags == TRANSIT_DISTANCE:
            self.min_offset = 0.0

        self.sampling = sampling_settings(precalc_count, precalc_safety_factor)
        self._min_speed, self._max_speed = planet_speed_bounds(
            engine, planet, self.flags, transit_flags, self.idx, self.sampling, rng
        )
        self.offset = offset

    def normalize_offset(self, value: float) -> float:
        if self.transit_flags == TRANSIT_LATITUDE:
            while value < -90.0:
                value += 180.0
            while value > 90.0:
                value -= 180.0
            return value
        return super().normalize_offset(value)

    @property
    def min_speed(self) -> float:
        return self._min_speed

    @property
    def max_speed(self) -> float:
        return self._max_speed

    def calc(self, jd: float) -> float:
        return engine_calc(self.engine, jd, self.planet, self.flags)[self.idx]

    def degree_precision(self, jd: float) -> float:
        if self.transit_flags == TRANSIT_DISTANCE:
            return planet_distance_precision(self.planet, jd)
        return planet_degree_precision(self.planet, jd)

    def object_identifiers(self) -> Tuple[int]:
        return (self.planet,)
