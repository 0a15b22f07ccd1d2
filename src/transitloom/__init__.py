"""Find the times at which celestial bodies and house objects reach given positions."""

from .constants import HouseObject, HouseSystem, Planet
from .errors import (
    EngineError,
    EphemerisCalculationError,
    ErrorKind,
    OutOfTimeRangeError,
    TransitConfigurationError,
    TransitError,
    UnsupportedHouseSystemError,
    UserTimeLimitError,
)
from .transits import (
    ASPECT_ANGLES,
    HouseTransitCalculator,
    PlanetHouseTransitCalculator,
    PlanetPlanetTransitCalculator,
    PlanetTransitCalculator,
    TransitCalculator,
    TransitEvent,
    TransitSearch,
    find_transits,
    get_transit,
    get_transit_ut,
)

__version__ = "0.1.0"
