from abc import ABC, abstractmethod
from typing import Sequence, Tuple

from ..constants import HouseSystem, MOSHPLEPH_END, MOSHPLEPH_START


class EphemerisEngine(ABC):
    """
    Abstract interface for the position and house engines a transit
    calculator evaluates.

    Implementations raise :class:`transitloom.errors.EngineError` when a
    calculation fails. Engines may hold configuration (topocentric position,
    sidereal mode) that influences every result; calculators sharing an
    engine share that configuration.
    """

    @abstractmethod
    def calc(self, jd_et: float, body: int, flags: int) -> Sequence[float]:
        """
        Compute a body's position at a time given in ephemeris time.

        Args:
            jd_et: Julian day (ET/TT).
            body: Swiss Ephemeris body number.
            flags: Swiss Ephemeris calculation flags.

        Returns:
            Six values: longitude, latitude, distance and, when
            ``SEFLG_SPEED`` is set, their daily speeds.
        """
        pass

    @abstractmethod
    def houses(
        self,
        jd_ut: float,
        flags: int,
        geolat: float,
        geolon: float,
        hsys: HouseSystem,
    ) -> Tuple[Sequence[float], Sequence[float]]:
        """
        Compute house cusps and angle points for a place and time.

        Args:
            jd_ut: Julian day (UT).
            flags: 0 or house flags such as ``SEFLG_SIDEREAL``.
            geolat: Geographic latitude in degrees.
            geolon: Geographic longitude in degrees.
            hsys: The house system.

        Returns:
            ``(cusps, ascmc)`` where ``cusps[n - 1]`` is the cusp of house
            ``n`` and ``ascmc[i]`` is the angle point numbered ``i``
            (see :class:`transitloom.constants.HouseObject`).
        """
        pass

    @abstractmethod
    def delta_t(self, jd: float) -> float:
        """Return delta T (ET - UT) in days for the given Julian day."""
        pass

    @abstractmethod
    def set_topo(self, geolon: float, geolat: float, altitude: float = 0.0) -> None:
        """Set the observer position used for topocentric calculations."""
        pass

    @property
    @abstractmethod
    def geopos_is_set(self) -> bool:
        """Whether :meth:`set_topo` has been called."""
        pass

    @property
    def topo_altitude(self) -> float:
        """Observer altitude in meters, 0 unless set."""
        return 0.0

    def body_name(self, body: int) -> str:
        """Return a readable name for a body number."""
        return f"body {body}"

    def body_time_range(self, body: int) -> Tuple[float, float]:
        """Return the (start, end) Julian days a body can be computed for."""
        return MOSHPLEPH_START, MOSHPLEPH_END
