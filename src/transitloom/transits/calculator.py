"""Base class for the targets a transit search can be run on."""

import math
from abc import ABC, abstractmethod
from typing import Optional, Tuple

from ..config import DEFAULT_SAMPLING, MIN_TIME_PRECISION, SamplingSettings
from ..constants import (
    HELIOCENTRIC_EXCLUDED,
    SEFLG_EPHMASK,
    SEFLG_EQUATORIAL,
    SEFLG_HELCTR,
    SEFLG_NOABERR,
    SEFLG_NOGDEFL,
    SEFLG_SIDEREAL,
    SEFLG_TOPOCTR,
    SEFLG_TRUEPOS,
    TRANSIT_MASK,
)
from ..ephemeris.engine import EphemerisEngine
from ..errors import (
    EngineError,
    EphemerisCalculationError,
    OutOfTimeRangeError,
    TransitConfigurationError,
)
from ..logging import get_logger
from ..speeds import get_planet_speed, sample_extreme_speeds

logger = get_logger(__name__)

# Engine flags a planet position may be calculated with
PLANET_FLAGS = (
    SEFLG_EPHMASK
    | SEFLG_TOPOCTR
    | SEFLG_EQUATORIAL
    | SEFLG_HELCTR
    | SEFLG_NOABERR
    | SEFLG_NOGDEFL
    | SEFLG_SIDEREAL
    | SEFLG_TRUEPOS
)

# Engine flags a house calculation may be given
HOUSE_FLAGS = SEFLG_EPHMASK | SEFLG_SIDEREAL | SEFLG_TOPOCTR


class TransitCalculator(ABC):
    """
    A quantity that changes over time and the value (offset) to search for.

    Subclasses define how the quantity is computed and how fast it can
    change; the search in :mod:`transitloom.transits.search` only talks to
    this interface. The offset is the only part that may change after
    construction.

    Attributes:
        engine: The engine the quantity is computed with
        rollover: Whether values wrap around at ``rollover_val``
        rollover_val: The period of wrapping values (360 for angles)
        min_offset: Lowest reachable offset, consulted when not rollover
        max_offset: Highest reachable offset, consulted when not rollover
    """

    rollover = False
    rollover_val = 360.0

    def __init__(self, engine: EphemerisEngine):
        self.engine = engine
        self.min_offset = -math.inf
        self.max_offset = math.inf
        self._offset = 0.0

    @property
    def offset(self) -> float:
        """The value to search for."""
        return self._offset

    @offset.setter
    def offset(self, value: float) -> None:
        self._offset = self.normalize_offset(float(value))

    def normalize_offset(self, value: float) -> float:
        """Map an offset into the range of the quantity."""
        if self.rollover:
            return wrap(value, self.rollover_val)
        return value

    @property
    @abstractmethod
    def min_speed(self) -> float:
        """Lowest possible change of the quantity per day."""
        pass

    @property
    @abstractmethod
    def max_speed(self) -> float:
        """Highest possible change of the quantity per day."""
        pass

    @abstractmethod
    def calc(self, jd: float) -> float:
        """
        Compute the quantity at a Julian day (ET).

        Returns ``math.inf`` when the quantity cannot be computed any
        further; the search then ends at ``jd``.

        Raises:
            EphemerisCalculationError: If the engine fails
        """
        pass

    @abstractmethod
    def degree_precision(self, jd: float) -> float:
        """Smallest meaningful difference of the quantity at ``jd``."""
        pass

    def time_precision(self, deg_prec: float) -> float:
        """Shortest time in which the quantity can change by ``deg_prec``."""
        fastest = max(abs(self.min_speed), abs(self.max_speed))
        if fastest == 0 or math.isinf(fastest):
            return MIN_TIME_PRECISION
        return max(deg_prec / fastest, MIN_TIME_PRECISION)

    def preprocess_date(self, jd: float, backward: bool) -> float:
        """Adjust the start time of a search."""
        return jd

    def check_identical_result(self, offset: float, value: float) -> bool:
        return value == offset

    def get_next_jd(
        self,
        jd: float,
        value: float,
        offset: float,
        min_speed: float,
        max_speed: float,
        backward: bool,
    ) -> float:
        """
        Return the next time to evaluate.

        The step is the shortest time in which the quantity could reach the
        offset at its extreme speeds, so it never jumps over a crossing.

        Raises:
            OutOfTimeRangeError: If the offset cannot be reached in the
                search direction
        """
        if self.rollover:
            # value >= offset here, the search lifts lower values by one period
            distance = value - offset
            distance = min(distance, self.rollover_val - distance)
            step = distance / max(abs(min_speed), abs(max_speed))
            return jd - step if backward else jd + step

        diff = offset - value
        if diff == 0:
            return jd

        steps = [
            s
            for s in (_time_to(diff, max_speed), _time_to(diff, min_speed))
            if s is not None
        ]
        if backward:
            candidates = [s for s in steps if s <= 0]
            if candidates:
                return jd + max(candidates)
        else:
            candidates = [s for s in steps if s > 0]
            if candidates:
                return jd + min(candidates)

        raise OutOfTimeRangeError(
            jd, f"No transit possible: {self!r} cannot reach {offset} from {value}."
        )

    def check_result(
        self,
        offset: float,
        last_value: float,
        value: float,
        above: bool,
        forward: bool,
    ) -> bool:
        """
        Whether the offset lies between two consecutive samples.

        Args:
            offset: The value searched for
            last_value: The previous sample
            value: The current sample
            above: Whether the previous sample was at or above the offset
            forward: Whether the quantity increased between the samples
        """
        if above and value <= offset and not forward:
            return True
        if not above and value >= offset and forward:
            return True
        if not self.rollover:
            return False

        # Crossings over the 0 / rollover_val seam
        top = self.rollover_val * 0.9
        bottom = self.rollover_val * 0.1
        near_zero = self.rollover_val / 18.0
        near_end = self.rollover_val - near_zero
        return (
            (offset < last_value and value > top and last_value < near_zero and not forward)
            or (offset > last_value and value < bottom and last_value > near_end and forward)
            or (offset > value and value > top and last_value < near_zero and not forward)
            or (offset < value and value < bottom and last_value > near_end and forward)
        )

    @abstractmethod
    def object_identifiers(self) -> Tuple:
        """Identify the objects the quantity is computed from."""
        pass

    def __repr__(self) -> str:
        identifiers = ", ".join(str(i) for i in self.object_identifiers())
        return f"{type(self).__name__}({identifiers}; offset={self.offset})"


def wrap(value: float, period: float) -> float:
    """Map a value into ``[0, period)``."""
    value %= period
    # -1e-20 % 360 rounds to 360.0
    if value >= period:
        value -= period
    return value


def _time_to(diff: float, speed: float) -> Optional[float]:
    if speed == 0:
        return None
    return diff / speed


def validate_planet_flags(
    engine: EphemerisEngine, planet: int, flags: int, allowed_transit_flags: int
) -> None:
    """
    Check the engine flags of a planet calculation.

    Raises:
        TransitConfigurationError: For flags outside the allowed set, an
            object without heliocentric positions, or topocentric flags
            without an observer position
    """
    invalid = flags & ~(PLANET_FLAGS | allowed_transit_flags)
    if invalid:
        raise TransitConfigurationError(f"Invalid flag(s): {invalid}")

    if flags & SEFLG_HELCTR and planet in HELIOCENTRIC_EXCLUDED:
        raise TransitConfigurationError(
            f"Unsupported planet number {planet} ({engine.body_name(planet)}) "
            "for heliocentric calculations"
        )

    if flags & SEFLG_TOPOCTR and not engine.geopos_is_set:
        raise TransitConfigurationError(
            "Geographic position is not set for requested topocentric calculations."
        )


def planet_speed_bounds(
    engine: EphemerisEngine,
    planet: int,
    flags: int,
    transit_flags: int,
    idx: int,
    sampling: SamplingSettings,
    rng=None,
) -> Tuple[float, float]:
    """
    Return the (min, max) daily speed of one position component of a body.

    Tabulated speeds are used where they exist; other bodies and components
    are sampled.

    Raises:
        TransitConfigurationError: If no speeds can be found
    """
    min_speed = get_planet_speed(True, planet, flags, transit_flags, engine)
    max_speed = get_planet_speed(False, planet, flags, transit_flags, engine)

    if math.isinf(min_speed) or math.isinf(max_speed):
        logger.info(
            f"No tabulated speeds for body {planet}, sampling {sampling.count} positions"
        )
        min_speed, max_speed = sample_extreme_speeds(engine, planet, flags, idx, sampling, rng)

    if math.isinf(min_speed) or math.isinf(max_speed):
        if flags & SEFLG_TOPOCTR:
            centric = "Topo"
        elif flags & SEFLG_HELCTR:
            centric = "Helio"
        else:
            centric = "Geo"
        system = "in equatorial system " if flags & SEFLG_EQUATORIAL else ""
        raise TransitConfigurationError(
            f"{centric}centric transit calculations with planet number {planet} "
            f"({engine.body_name(planet)}) not possible: extreme speeds of the planet "
            f"{system}not available."
        )
    return min_speed, max_speed


def combine_speed_bounds(
    first: Tuple[float, float], second: Tuple[float, float]
) -> Tuple[float, float]:
    """Return the (min, max) speed of the difference ``first - second``."""
    min1, max1 = first
    min2, max2 = second
    if max1 > max2:
        return min1 - max2, max1 - min2
    return min2 - max1, max2 - min1


def combined_time_precision(
    deg_prec: float, first: Tuple[float, float], second: Tuple[float, float]
) -> float:
    """Time precision of a difference of two quantities with the given speeds."""
    slowest_min = min(abs(first[0]), abs(second[0]))
    slowest_max = min(abs(first[1]), abs(second[1]))
    fastest = max(slowest_min, slowest_max)
    if fastest == 0:
        return MIN_TIME_PRECISION
    return max(deg_prec / fastest, MIN_TIME_PRECISION)


def sampling_settings(
    precalc_count: Optional[int], precalc_safety_factor: Optional[float]
) -> SamplingSettings:
    """Build sampling settings from optional overrides of the defaults."""
    return SamplingSettings(
        count=DEFAULT_SAMPLING.count if precalc_count is None else precalc_count,
        safety_factor=(
            DEFAULT_SAMPLING.safety_factor
            if precalc_safety_factor is None
            else precalc_safety_factor
        ),
    ).clamped()


def engine_calc(engine: EphemerisEngine, jd: float, body: int, flags: int):
    """Compute a body position, wrapping engine failures with the time."""
    try:
        return engine.calc(jd, body, flags)
    except EngineError as exc:
        raise EphemerisCalculationError.from_engine_error(jd, exc) from exc


def transit_flags_of(flags: int) -> int:
    return flags & TRANSIT_MASK
