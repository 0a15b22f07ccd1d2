"""Transits of a body over a house cusp or angle point."""

import math
import random
from typing import Optional, Tuple, Union

from ..constants import TRANSIT_LONGITUDE, TRANSIT_MASK, HouseSystem
from ..ephemeris.engine import EphemerisEngine
from ..errors import EngineError, EphemerisCalculationError, TransitConfigurationError
from ..speeds import get_house_speed, planet_degree_precision
from .calculator import (
    HOUSE_FLAGS,
    TransitCalculator,
    combine_speed_bounds,
    combined_time_precision,
    engine_calc,
    planet_speed_bounds,
    sampling_settings,
    transit_flags_of,
    validate_planet_flags,
)
from .houses import house_position, resolve_house_object, resolve_house_system


class PlanetHouseTransitCalculator(TransitCalculator):
    """
    The longitude of a body minus the longitude of a house object.

    An offset of 0 searches for the body passing over the house object, an
    offset of 30 for the body being 30 degrees ahead of it.

    Planet and house calculations use separate flags, except that a
    sidereal mode set on the engine applies to both. The engine's
    topocentric position is set to the house location on construction.
    """

    rollover = True

    def __init__(
        self,
        engine: EphemerisEngine,
        planet: int,
        planet_flags: int,
        house_object: int,
        house_system: Union[HouseSystem, str, bytes, int],
        house_flags: int,
        geolon: float,
        geolat: float,
        offset: float = 0.0,
        precalc_count: Optional[int] = None,
        precalc_safety_factor: Optional[float] = None,
        rng: Optional[random.Random] = None,
    ):
        """
        Initialize the calculator.

        Args:
            engine: The ephemeris and house engine
            planet: Swiss Ephemeris body number of the transiting body
            planet_flags: Engine flags for the body; ``TRANSIT_LONGITUDE`` must
                          be given here or in ``house_flags``
            house_object: The house object, see :class:`HouseObject`
            house_system: The house system
            house_flags: Flags for the house calculation (ephemeris flags,
                         ``SEFLG_SIDEREAL``, ``SEFLG_TOPOCTR``)
            geolon: Geographic longitude of the house location
            geolat: Geographic latitude of the house location
            offset: Body longitude minus house object longitude in degrees
            precalc_count: Number of speed samples for bodies without
                           tabulated speeds (at least 100)
            precalc_safety_factor: Widening of sampled speeds (at least 1.1)
            rng: Random generator for the speed sampling

        Raises:
            TransitConfigurationError: For invalid flags, house objects or
                house systems, or unknowable speeds
        """
        super().__init__(engine)

        transit_flags = transit_flags_of(planet_flags | house_flags)
        validate_planet_flags(engine, planet, planet_flags, TRANSIT_LONGITUDE)
        if transit_flags != TRANSIT_LONGITUDE:
            raise TransitConfigurationError(
                f"Invalid flag combination ({planet_flags} or {house_flags}): only "
                f"TRANSIT_LONGITUDE ({TRANSIT_LONGITUDE}) is allowed as transit method."
            )
        invalid = house_flags & ~(HOUSE_FLAGS | TRANSIT_LONGITUDE)
        if invalid:
            raise TransitConfigurationError(f"Invalid flag(s): {invalid}")

        self.planet = planet
        self.planet_flags = planet_flags & ~TRANSIT_MASK
        self.house_object = resolve_house_object(house_object)
        self.house_system = resolve_house_system(house_system)
        self.house_flags = house_flags & ~TRANSIT_MASK
        self.geolon = geolon
        self.geolat = geolat

        self.sampling = sampling_settings(precalc_count, precalc_safety_factor)
        self.planet_speeds = planet_speed_bounds(
            engine, planet, self.planet_flags, transit_flags, 0, self.sampling, rng
        )
        self.house_speeds = (
            get_house_speed(True, self.house_system, self.house_object, geolat),
            get_house_speed(False, self.house_system, self.house_object, geolat),
        )
        if any(math.isinf(speed) for speed in self.house_speeds):
            raise TransitConfigurationError(
                f"Transit calculations with house object {self.house_object.name} not "
                f"possible: extreme speeds of the house system "
                f"'{self.house_system.value}' not available."
            )
        self._min_speed, self._max_speed = combine_speed_bounds(
            self.planet_speeds, self.house_speeds
        )
        self.offset = offset

        engine.set_topo(geolon, geolat, 0.0)

    @property
    def min_speed(self) -> float:
        return self._min_speed

    @property
    def max_speed(self) -> float:
        return self._max_speed

    def calc(self, jd: float) -> float:
        longitude = engine_calc(self.engine, jd, self.planet, self.planet_flags)[0]
        try:
            jd_ut = jd - self.engine.delta_t(jd)
            house = house_position(
                self.engine,
                jd_ut,
                self.house_flags,
                self.geolat,
                self.geolon,
                self.house_system,
                self.house_object,
            )
        except EngineError as exc:
            raise EphemerisCalculationError.from_engine_error(jd, exc) from exc
        return longitude - house

    def degree_precision(self, jd: float) -> float:
        return planet_degree_precision(self.planet, jd)

    def time_precision(self, deg_prec: float) -> float:
        return combined_time_precision(deg_prec, self.planet_speeds, self.house_speeds)

    def object_identifiers(self) -> Tuple[int, int, str]:
        return (self.planet, int(self.house_object), self.house_system.value)
