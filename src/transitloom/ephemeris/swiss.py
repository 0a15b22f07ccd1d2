"""Swiss Ephemeris engine backed by pyswisseph."""

from typing import Optional, Sequence, Tuple

import swisseph as swe

from ..config import ephemeris_path
from ..constants import AST_OFFSET, HouseSystem, MOSHPLEPH_END, MOSHPLEPH_START
from ..errors import EngineError
from ..logging import get_logger
from .engine import EphemerisEngine

logger = get_logger(__name__)

# get_current_file_data() slot of the file holding numbered asteroids
_ASTEROID_FILE_SLOT = 3


class SwissEphemerisEngine(EphemerisEngine):
    """
    Ephemeris engine calling the Swiss Ephemeris through pyswisseph.

    pyswisseph keeps its configuration (ephemeris path, topocentric
    position, sidereal mode) in process-wide state, so every instance of this
    class sees the settings made through any other instance.
    """

    def __init__(self, ephe_path: Optional[str] = None):
        """
        Initialize the engine.

        Args:
            ephe_path: Directory with Swiss Ephemeris data files. Defaults to the
                       SE_EPHE_PATH / SWE_EPH_PATH environment variables; without
                       data files pyswisseph falls back to the Moshier ephemeris.
        """
        self.ephe_path = ephe_path or ephemeris_path()
        if self.ephe_path:
            swe.set_ephe_path(self.ephe_path)
            logger.debug(f"Using Swiss Ephemeris data from {self.ephe_path}")
        self._geopos_is_set = False
        self._altitude = 0.0

    def calc(self, jd_et: float, body: int, flags: int) -> Sequence[float]:
        try:
            xx, _ = swe.calc(jd_et, body, flags)
        except swe.Error as exc:
            raise EngineError(str(exc)) from exc
        return xx

    def houses(
        self,
        jd_ut: float,
        flags: int,
        geolat: float,
        geolon: float,
        hsys: HouseSystem,
    ) -> Tuple[Sequence[float], Sequence[float]]:
        try:
            return swe.houses_ex(jd_ut, geolat, geolon, hsys.code, flags)
        except swe.Error as exc:
            raise EngineError(str(exc)) from exc

    def delta_t(self, jd: float) -> float:
        return swe.deltat(jd)

    def set_topo(self, geolon: float, geolat: float, altitude: float = 0.0) -> None:
        swe.set_topo(geolon, geolat, altitude)
        self._geopos_is_set = True
        self._altitude = altitude

    @property
    def geopos_is_set(self) -> bool:
        return self._geopos_is_set

    @property
    def topo_altitude(self) -> float:
        return self._altitude

    def body_name(self, body: int) -> str:
        return swe.get_planet_name(body)

    def body_time_range(self, body: int) -> Tuple[float, float]:
        """Return the time range of the data file for asteroids, else the Moshier range."""
        if body <= AST_OFFSET:
            return MOSHPLEPH_START, MOSHPLEPH_END

        # Computing any position loads the asteroid's file, which is the only
        # way to learn its time range
        try:
            swe.calc(2457264.5, body, swe.FLG_SWIEPH)
            path, start, end, _ = swe.get_current_file_data(_ASTEROID_FILE_SLOT)
        except swe.Error as exc:
            raise EngineError(str(exc)) from exc
        if not path:
            return MOSHPLEPH_START, MOSHPLEPH_END
        return start, end
