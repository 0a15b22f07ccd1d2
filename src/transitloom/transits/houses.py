"""Transits of a house cusp or angle point over a fixed longitude."""

import math
from typing import Tuple, Union

from ..constants import (
    SUPPORTED_HOUSE_SYSTEMS,
    TRANSIT_LONGITUDE,
    TRANSIT_MASK,
    HouseObject,
    HouseSystem,
    to_house_system,
)
from ..ephemeris.engine import EphemerisEngine
from ..errors import (
    EngineError,
    EphemerisCalculationError,
    TransitConfigurationError,
    UnsupportedHouseSystemError,
)
from ..speeds import get_house_speed, house_degree_precision
from .calculator import HOUSE_FLAGS, TransitCalculator


def resolve_house_object(house_object: int) -> HouseObject:
    """Return the house object for a number, rejecting anything else."""
    try:
        return HouseObject(house_object)
    except ValueError as exc:
        raise TransitConfigurationError(
            f"Invalid or multiple house objects given: {house_object}"
        ) from exc


def resolve_house_system(house_system: Union[HouseSystem, str, bytes, int]) -> HouseSystem:
    """Return a house system that transits can be calculated for."""
    try:
        hsys = to_house_system(house_system)
    except ValueError as exc:
        raise UnsupportedHouseSystemError(
            f"Unsupported house system '{house_system}'."
        ) from exc
    if hsys not in SUPPORTED_HOUSE_SYSTEMS:
        raise TransitConfigurationError(f"Unsupported house system '{hsys.value}'.")
    return hsys


def house_position(
    engine: EphemerisEngine,
    jd_ut: float,
    flags: int,
    geolat: float,
    geolon: float,
    hsys: HouseSystem,
    house_object: HouseObject,
) -> float:
    """Compute the longitude of one house object.

    Raises:
        EngineError: If the house calculation fails
    """
    cusps, ascmc = engine.houses(jd_ut, flags, geolat, geolon, hsys)
    if house_object.is_cusp:
        return cusps[abs(house_object.value) - 1]
    return ascmc[house_object.value]


class HouseTransitCalculator(TransitCalculator):
    """
    The longitude of a house object compared to a fixed value.

    The engine's topocentric position is set to the house location before
    every calculation.
    """

    rollover = True

    def __init__(
        self,
        engine: EphemerisEngine,
        house_object: int,
        house_system: Union[HouseSystem, str, bytes, int],
        geolon: float,
        geolat: float,
        flags: int = 0,
        offset: float = 0.0,
    ):
        """
        Initialize the calculator.

        Args:
            engine: The house engine
            house_object: The house object, see :class:`HouseObject`
            house_system: The house system
            geolon: Geographic longitude in degrees
            geolat: Geographic latitude in degrees
            flags: Ephemeris flags, ``SEFLG_SIDEREAL``, ``SEFLG_TOPOCTR`` and
                   optionally ``TRANSIT_LONGITUDE``
            offset: The longitude to search for

        Raises:
            TransitConfigurationError: For invalid flags, house objects or
                house systems, or when the house object cannot move at the
                given latitude
        """
        super().__init__(engine)

        invalid = flags & ~(HOUSE_FLAGS | TRANSIT_LONGITUDE)
        if invalid:
            raise TransitConfigurationError(f"Invalid flag(s): {invalid}")

        self.house_object = resolve_house_object(house_object)
        self.house_system = resolve_house_system(house_system)
        self.flags = flags & ~TRANSIT_MASK
        self.offset = offset
        self.set_geopos(geolon, geolat)

    def set_geopos(self, geolon: float, geolat: float) -> None:
        """
        Move the house location and look up the speeds for its latitude.

        Raises:
            TransitConfigurationError: If the house object cannot move at the
                new latitude
        """
        min_speed = get_house_speed(True, self.house_system, self.house_object, geolat)
        max_speed = get_house_speed(False, self.house_system, self.house_object, geolat)
        if math.isinf(min_speed) or math.isinf(max_speed):
            raise TransitConfigurationError(
                f"Transit calculations of {self.house_object.name} not possible: "
                "extreme speeds of the object not available."
            )
        if min_speed == 0 and max_speed == 0:
            raise TransitConfigurationError(
                f"Transit calculation of {self.house_object.name} on latitude of "
                f"{geolat} with house system '{self.house_system.value}' not possible."
            )
        self.geolon = geolon
        self.geolat = geolat
        self._min_speed = min_speed
        self._max_speed = max_speed

    @property
    def min_speed(self) -> float:
        return self._min_speed

    @property
    def max_speed(self) -> float:
        return self._max_speed

    def calc(self, jd: float) -> float:
        try:
            self.engine.set_topo(self.geolon, self.geolat, 0.0)
            jd_ut = jd - self.engine.delta_t(jd)
            return house_position(
                self.engine,
                jd_ut,
                self.flags,
                self.geolat,
                self.geolon,
                self.house_system,
                self.house_object,
            )
        except EngineError as exc:
            raise EphemerisCalculationError.from_engine_error(jd, exc) from exc

    def degree_precision(self, jd: float) -> float:
        return house_degree_precision()

    def object_identifiers(self) -> Tuple[int]:
        return (int(self.house_object),)
