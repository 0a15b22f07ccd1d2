"""Transit calculators and the search for their transits."""

from .calculator import TransitCalculator
from .finder import ASPECT_ANGLES, TransitEvent, find_transits
from .houses import HouseTransitCalculator
from .planet import PlanetTransitCalculator
from .planet_house import PlanetHouseTransitCalculator
from .planet_planet import PlanetPlanetTransitCalculator
from .search import SearchState, TransitSearch, get_transit, get_transit_ut

__all__ = [
    "TransitCalculator",
    "PlanetTransitCalculator",
    "PlanetHouseTransitCalculator",
    "HouseTransitCalculator",
    "PlanetPlanetTransitCalculator",
    "SearchState",
    "TransitSearch",
    "get_transit",
    "get_transit_ut",
    "find_transits",
    "TransitEvent",
    "ASPECT_ANGLES",
]
