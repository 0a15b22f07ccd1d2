"""Search for the time at which a transit calculator reaches its offset.

The search steps from the start time by the shortest time in which the
calculated quantity could reach the offset at its extreme speeds. Once two
consecutive samples bracket the offset, the crossing time is interpolated
linearly between them.

The result is only as exact as the position precision allows: when a
quantity stays within its precision of the offset for a while, any time in
that stretch may be returned. To find the next transit after a found one,
search again from a time at least the calculator's time precision later.
"""

import math
from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Union

from ..ephemeris.engine import EphemerisEngine
from ..errors import OutOfTimeRangeError, UserTimeLimitError
from ..logging import get_logger
from ..space_time.julian import ensure_julian
from .calculator import TransitCalculator, wrap

logger = get_logger(__name__)

# Sample jumps larger than this share of the period are taken to wrap around
WRAP_JUMP_FRACTION = 300.0 / 360.0


@dataclass
class SearchState:
    """Samples of one search run."""

    jd: float
    value: float
    last_jd: float
    last_value: float
    backward: bool
    jd_limit: float

    def beyond_limit(self) -> bool:
        if self.backward:
            return self.jd < self.jd_limit
        return self.jd > self.jd_limit


def get_transit(
    calculator: TransitCalculator,
    jd_et: Union[float, datetime],
    backward: bool = False,
    jd_limit: Optional[float] = None,
) -> float:
    """
    Find the next time at which ``calculator`` reaches its offset.

    Args:
        calculator: The quantity and offset to search for
        jd_et: Start time as a Julian day (ET) or a timezone-aware datetime
        backward: Search into the past instead of the future
        jd_limit: Julian day (ET) at which to give up, unlimited if None

    Returns:
        The Julian day (ET) of the transit. If the quantity already equals
        the offset at the start time, the start time is returned.

    Raises:
        OutOfTimeRangeError: If the offset cannot be reached
        UserTimeLimitError: If ``jd_limit`` was passed without a transit
        EphemerisCalculationError: If the engine fails
    """
    jd = calculator.preprocess_date(ensure_julian(jd_et), backward)
    offset = calculator.offset
    rollover = calculator.rollover
    rollover_val = calculator.rollover_val

    if not rollover and not calculator.min_offset <= offset <= calculator.max_offset:
        raise OutOfTimeRangeError(jd, "No transit possible due to offset out of range.")

    max_speed = calculator.max_speed
    min_speed = calculator.min_speed
    # Speeds of one sign only matter as a magnitude
    if max_speed >= 0 and min_speed >= 0:
        min_speed = max_speed
    elif max_speed < 0 and min_speed < 0:
        max_speed = min_speed

    # Halved to get a range of +-deg_prec
    deg_prec = calculator.degree_precision(jd) / 2.0
    time_prec = calculator.time_precision(deg_prec)

    value = calculator.calc(jd)
    if rollover and not math.isinf(value):
        value = wrap(value, rollover_val)
    if calculator.check_identical_result(offset, value):
        logger.debug(f"{calculator!r} is at its offset at the start time {jd}")
        return jd

    if max_speed == 0 and min_speed == 0:
        raise OutOfTimeRangeError(
            jd, "No transit possible due to lack of variation of speed or position."
        )

    if jd_limit is None:
        jd_limit = -math.inf if backward else math.inf
    state = SearchState(jd, value, jd, value, backward, jd_limit)

    logger.debug(
        f"Searching {'backward' if backward else 'forward'} for {calculator!r} from "
        f"{jd}, speeds {min_speed} .. {max_speed}, time precision {time_prec}"
    )

    while True:
        if rollover:
            state.value = wrap(state.value, rollover_val)
        above = state.value >= offset

        state.last_jd = state.jd
        state.last_value = state.value

        # Treat the circle as linear across the wrap point
        if rollover and not above:
            state.value += rollover_val

        state.jd = calculator.get_next_jd(
            state.jd, state.value, offset, min_speed, max_speed, backward
        )

        if abs(state.jd - state.last_jd) < time_prec:
            state.jd = state.last_jd + (-time_prec if backward else time_prec)
        if state.jd == state.last_jd:
            logger.debug(f"No further progress possible at {state.jd}")
            return state.jd

        state.value = calculator.calc(state.jd)
        if state.value == math.inf:
            logger.debug(f"{calculator!r} cannot be calculated beyond {state.jd}")
            return state.jd

        if rollover:
            state.value = wrap(state.value, rollover_val)

        logger.debug(f"jd {state.jd}: {state.value}")

        if calculator.check_identical_result(offset, state.value):
            return state.jd

        # Whichever way the quantity could have moved in less time is taken
        # as its direction of movement
        if rollover:
            ahead = wrap(state.value - state.last_value, rollover_val)
            behind = wrap(state.last_value - state.value, rollover_val)
            forward = _travel_time(ahead, max_speed) < _travel_time(behind, min_speed)
        else:
            forward = state.last_value <= state.value

        if calculator.check_result(offset, state.last_value, state.value, above, forward):
            return _interpolate(calculator, state, offset)

        if state.beyond_limit():
            raise UserTimeLimitError(
                state.jd, f"User time limit of {jd_limit} has been reached."
            )


def _travel_time(distance: float, speed: float) -> float:
    if speed == 0:
        return math.inf
    return abs(distance / speed)


def _interpolate(calculator: TransitCalculator, state: SearchState, offset: float) -> float:
    """Interpolate the crossing time between the last two samples."""
    value = state.value
    last_value = state.last_value

    if calculator.rollover:
        period = calculator.rollover_val
        if abs(value - last_value) > period * WRAP_JUMP_FRACTION:
            # One sample is just below the period, the other just above 0
            if value > last_value:
                last_value += period
            else:
                value += period
            if offset < min(value, last_value):
                offset += period
        # offset - last_value and value - last_value need equal signs
        if value - last_value < 0 and offset - last_value > 0:
            value += period
        elif value - last_value > 0 and offset - last_value < 0:
            offset += period

    if value == last_value:
        return state.jd

    crossing = state.last_jd + (state.jd - state.last_jd) * (offset - last_value) / (
        value - last_value
    )
    logger.debug(f"Transit of {calculator!r} bracketed at {state.last_jd} .. {state.jd}")

    # Never beyond the last sample in the search direction
    if state.backward:
        return max(crossing, state.jd)
    return min(crossing, state.jd)


def get_transit_ut(
    calculator: TransitCalculator,
    jd_ut: Union[float, datetime],
    backward: bool = False,
    jd_limit_ut: Optional[float] = None,
    engine: Optional[EphemerisEngine] = None,
) -> float:
    """
    Like :func:`get_transit`, with times in UT instead of ET.

    Args:
        engine: The engine providing delta T, the calculator's engine by default
    """
    if engine is None:
        engine = calculator.engine
    jd_ut = ensure_julian(jd_ut)
    jd_limit = None
    if jd_limit_ut is not None:
        jd_limit = jd_limit_ut + engine.delta_t(jd_limit_ut)

    jd = get_transit(calculator, jd_ut + engine.delta_t(jd_ut), backward, jd_limit)
    return jd - engine.delta_t(jd)


class TransitSearch:
    """
    Transit searches against one engine.

    The engine supplies delta T for the UT variants; calculators bring their
    own engine for positions.
    """

    def __init__(self, engine: EphemerisEngine):
        self.engine = engine

    def get_transit(
        self,
        calculator: TransitCalculator,
        jd_et: Union[float, datetime],
        backward: bool = False,
        jd_limit: Optional[float] = None,
    ) -> float:
        """Search with times in ET, see :func:`get_transit`."""
        return get_transit(calculator, jd_et, backward, jd_limit)

    def get_transit_ut(
        self,
        calculator: TransitCalculator,
        jd_ut: Union[float, datetime],
        backward: bool = False,
        jd_limit_ut: Optional[float] = None,
    ) -> float:
        """Search with times in UT, see :func:`get_transit_ut`."""
        return get_transit_ut(calculator, jd_ut, backward, jd_limit_ut, self.engine)

    def next_transit(
        self,
        calculator: TransitCalculator,
        jd_et: Union[float, datetime],
        backward: bool = False,
        jd_limit: Optional[float] = None,
    ) -> float:
        """
        Find the next transit strictly after (or before) ``jd_et``.

        The start is moved by the calculator's time precision first, so a
        transit found at ``jd_et`` is not returned again.
        """
        jd = ensure_julian(jd_et)
        deg_prec = calculator.degree_precision(jd) / 2.0
        step = calculator.time_precision(deg_prec)
        return get_transit(calculator, jd - step if backward else jd + step, backward, jd_limit)
