"""Collect all transits of a calculator within a time window."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, List, Mapping, Optional, Sequence, Tuple, Union

from ..ephemeris.engine import EphemerisEngine
from ..errors import OutOfTimeRangeError, UserTimeLimitError
from ..logging import get_logger
from ..space_time.julian import ensure_julian, julian_to_datetime
from .calculator import TransitCalculator
from .search import get_transit, get_transit_ut

logger = get_logger(__name__)

# Primary aspects and their angular separations, as offsets for relative
# transit calculators
ASPECT_ANGLES: Dict[str, float] = {
    "CONJUNCTION": 0.0,
    "SEXTILE": 60.0,
    "SQUARE": 90.0,
    "TRINE": 120.0,
    "OPPOSITION": 180.0,
}

# Minimum separation between recorded events in days (to avoid duplicate detections).
MIN_EVENT_SEPARATION_DAYS = 30.0 / (24 * 60 * 60)  # 30 seconds


@dataclass
class TransitEvent:
    """A time at which a calculator reached one of its offsets."""

    target: str
    offset: float
    julian_date: float
    aspect: Optional[str] = None
    time_scale: str = "ET"
    object_identifiers: Tuple = field(default_factory=tuple)

    @property
    def exact_datetime(self) -> datetime:
        """Return the event timestamp as a timezone-aware datetime in UTC.

        For events in ET the datetime is off from civil time by delta T.
        """
        return julian_to_datetime(self.julian_date)

    def to_dict(self) -> Dict[str, Union[str, float, None, List]]:
        """Return a serializable dictionary representation of the event."""
        dt = self.exact_datetime.astimezone(timezone.utc)
        return {
            "target": self.target,
            "objects": [str(i) for i in self.object_identifiers],
            "aspect": self.aspect,
            "offset": self.offset,
            "exact_time": dt.isoformat(),
            "julian_date": self.julian_date,
            "time_scale": self.time_scale,
        }


def find_transits(
    calculator: TransitCalculator,
    start: Union[datetime, float],
    end: Union[datetime, float],
    offsets: Optional[Union[Mapping[str, float], Sequence[float]]] = None,
    engine: Optional[EphemerisEngine] = None,
) -> List[TransitEvent]:
    """Find every transit of ``calculator`` between two times.

    Args:
        calculator: The transit calculator. Its offset is changed during the
                    search and restored afterwards.
        start: Start of the window, a datetime or Julian day
        end: End of the window, a datetime or Julian day
        offsets: Offsets to search for, either a list or a mapping of names
                 to offsets such as :data:`ASPECT_ANGLES`. Defaults to the
                 calculator's own offset.
        engine: If given, times are in UT and this engine converts them;
                otherwise times are in ET.

    Returns:
        List of :class:`TransitEvent` objects ordered by occurrence time.
    """
    start_jd = ensure_julian(start)
    end_jd = ensure_julian(end)
    if start_jd > end_jd:
        raise ValueError("start must be before end")

    if offsets is None:
        named: List[Tuple[Optional[str], float]] = [(None, calculator.offset)]
    elif isinstance(offsets, Mapping):
        named = list(offsets.items())
    else:
        named = [(None, float(offset)) for offset in offsets]

    time_scale = "UT" if engine is not None else "ET"
    saved_offset = calculator.offset
    events: List[TransitEvent] = []
    try:
        for aspect, offset in named:
            calculator.offset = offset
            events.extend(
                _transits_for_offset(calculator, start_jd, end_jd, aspect, engine, time_scale)
            )
    finally:
        calculator.offset = saved_offset

    events.sort(key=lambda ev: ev.julian_date)
    return events


def _transits_for_offset(
    calculator: TransitCalculator,
    start_jd: float,
    end_jd: float,
    aspect: Optional[str],
    engine: Optional[EphemerisEngine],
    time_scale: str,
) -> List[TransitEvent]:
    events: List[TransitEvent] = []
    jd = start_jd
    while jd <= end_jd:
        try:
            if engine is not None:
                hit = get_transit_ut(calculator, jd, jd_limit_ut=end_jd, engine=engine)
            else:
                hit = get_transit(calculator, jd, jd_limit=end_jd)
        except (UserTimeLimitError, OutOfTimeRangeError) as exc:
            logger.debug(f"No more transits of {calculator!r} after {jd}: {exc}")
            break
        if hit > end_jd:
            break

        events.append(
            TransitEvent(
                target=repr(calculator),
                offset=calculator.offset,
                julian_date=hit,
                aspect=aspect,
                time_scale=time_scale,
                object_identifiers=tuple(calculator.object_identifiers()),
            )
        )

        # Step past the hit, a search from the hit itself would return it again
        deg_prec = calculator.degree_precision(hit) / 2.0
        step = max(calculator.time_precision(deg_prec), MIN_EVENT_SEPARATION_DAYS)
        jd = max(hit, jd) + step

    logger.debug(f"Found {len(events)} transits of {calculator!r} at offset {calculator.offset}")
    return events


__all__ = ["find_transits", "TransitEvent", "ASPECT_ANGLES", "MIN_EVENT_SEPARATION_DAYS"]
