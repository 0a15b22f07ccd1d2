"""Package-wide settings and their environment overrides."""

import os
from dataclasses import dataclass
from typing import Optional, Tuple

# Smallest time step (days) the search will ever take
MIN_TIME_PRECISION = 1e-9

# Lower bounds for the random sampling of extreme speeds
MIN_PRECALC_COUNT = 100
MIN_PRECALC_SAFETY_FACTOR = 1.1

EPHEMERIS_PATH_ENV_KEYS: Tuple[str, ...] = ("SE_EPHE_PATH", "SWE_EPH_PATH")


@dataclass(frozen=True)
class SamplingSettings:
    """How to estimate extreme speeds of bodies missing from the speed tables.

    Attributes:
        count: Number of random speed samples across the body's time range
        safety_factor: Factor by which the sampled extremes are widened
    """

    count: int = 200
    safety_factor: float = 1.4

    def clamped(self) -> "SamplingSettings":
        """Return a copy with count and safety factor raised to their minimums."""
        return SamplingSettings(
            count=max(int(self.count), MIN_PRECALC_COUNT),
            safety_factor=max(float(self.safety_factor), MIN_PRECALC_SAFETY_FACTOR),
        )


def _sampling_from_env() -> SamplingSettings:
    defaults = SamplingSettings()
    count = os.environ.get("TRANSITLOOM_PRECALC_COUNT")
    factor = os.environ.get("TRANSITLOOM_PRECALC_SAFETY_FACTOR")
    return SamplingSettings(
        count=int(count) if count else defaults.count,
        safety_factor=float(factor) if factor else defaults.safety_factor,
    ).clamped()


DEFAULT_SAMPLING = _sampling_from_env()


def ephemeris_path() -> Optional[str]:
    """Return the Swiss Ephemeris data directory configured in the environment."""
    for key in EPHEMERIS_PATH_ENV_KEYS:
        value = os.environ.get(key)
        if value:
            return value
    return None
