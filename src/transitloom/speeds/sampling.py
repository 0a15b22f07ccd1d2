"""Estimate extreme speeds of bodies missing from the speed tables.

Speeds are sampled at random times across the time range the engine can
compute the body for, then widened by a safety factor. There is a small
chance the sampled extremes miss the true ones, so transits found with them
may occasionally be missed or imprecise.
"""

import math
import random
from typing import Optional, Tuple

from ..config import SamplingSettings
from ..constants import SEFLG_SPEED
from ..ephemeris.engine import EphemerisEngine
from ..errors import EngineError
from ..logging import get_logger

logger = get_logger(__name__)

# Replacement extremes when a sampled extreme is exactly zero
ZERO_MIN_SPEED = -0.1
ZERO_MAX_SPEED = 0.1


def widen_extremes(minimum: float, maximum: float, safety_factor: float) -> Tuple[float, float]:
    """Widen a (min, max) speed pair outward from zero by the safety factor."""
    if minimum < 0:
        minimum *= safety_factor
    elif minimum == 0:
        minimum = ZERO_MIN_SPEED
    else:
        minimum /= safety_factor

    if maximum < 0:
        maximum /= safety_factor
    elif maximum == 0:
        maximum = ZERO_MAX_SPEED
    else:
        maximum *= safety_factor
    return minimum, maximum


def sample_extreme_speeds(
    engine: EphemerisEngine,
    planet: int,
    flags: int,
    idx: int,
    settings: SamplingSettings,
    rng: Optional[random.Random] = None,
) -> Tuple[float, float]:
    """Sample the speed of one position component and return widened extremes.

    Args:
        engine: The engine to compute positions with
        planet: Swiss Ephemeris body number
        flags: Engine calculation flags (``SEFLG_SPEED`` is added)
        idx: Position component, 0 longitude, 1 latitude, 2 distance
        settings: Sample count and safety factor (minimums are enforced)
        rng: Random generator, a fresh one if omitted

    Returns:
        ``(min, max)``, both ``math.inf`` if no usable samples were found
    """
    settings = settings.clamped()
    rng = rng or random.Random()
    start, end = engine.body_time_range(planet)

    minimum = math.inf
    maximum = -math.inf
    failures = 0
    for _ in range(settings.count):
        jd = start + rng.random() * (end - start)
        try:
            xx = engine.calc(jd, planet, flags | SEFLG_SPEED)
        except EngineError as exc:
            failures += 1
            logger.debug(f"Skipping speed sample for body {planet} at {jd}: {exc}")
            continue
        speed = xx[idx + 3]
        minimum = min(minimum, speed)
        maximum = max(maximum, speed)

    if failures:
        logger.info(f"{failures} of {settings.count} speed samples failed for body {planet}")

    if minimum == maximum or math.isinf(minimum) or math.isinf(maximum):
        return math.inf, math.inf

    logger.info(
        f"Sampled speeds for body {planet}: {minimum:.6f} .. {maximum:.6f} deg/day"
    )
    return widen_extremes(minimum, maximum, settings.safety_factor)
