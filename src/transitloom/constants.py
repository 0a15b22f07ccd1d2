"""Body numbers, house objects, house systems and calculation flags.

Numeric values match the Swiss Ephemeris C library (and therefore
pyswisseph), so they can be handed to the engine unchanged. The
``TRANSIT_*`` flags are specific to this package and live above the range
used by Swiss Ephemeris; they are stripped before any engine call.
"""

from enum import Enum, IntEnum
from typing import Union


class Planet(IntEnum):
    """Swiss Ephemeris body numbers."""

    SUN = 0
    MOON = 1
    MERCURY = 2
    VENUS = 3
    MARS = 4
    JUPITER = 5
    SATURN = 6
    URANUS = 7
    NEPTUNE = 8
    PLUTO = 9
    MEAN_NODE = 10
    TRUE_NODE = 11
    MEAN_APOG = 12
    OSCU_APOG = 13
    EARTH = 14
    CHIRON = 15
    PHOLUS = 16
    CERES = 17
    PALLAS = 18
    JUNO = 19
    VESTA = 20
    INTP_APOG = 21
    INTP_PERG = 22


# Add the asteroid catalogue number to get its body number
AST_OFFSET = 10000

# Bodies that have no heliocentric position
HELIOCENTRIC_EXCLUDED = frozenset(
    {Planet.MEAN_NODE, Planet.TRUE_NODE, Planet.MEAN_APOG, Planet.OSCU_APOG}
)


class HouseObject(IntEnum):
    """Points returned by a house calculation.

    Non-negative values index the ``ascmc`` array, negative values are house
    cusps (``-n`` is the cusp of house ``n``).
    """

    ASC = 0
    MC = 1
    ARMC = 2
    VERTEX = 3
    EQUASC = 4
    COASC1 = 5
    COASC2 = 6
    POLASC = 7
    HOUSE1 = -1
    HOUSE2 = -2
    HOUSE3 = -3
    HOUSE4 = -4
    HOUSE5 = -5
    HOUSE6 = -6
    HOUSE7 = -7
    HOUSE8 = -8
    HOUSE9 = -9
    HOUSE10 = -10
    HOUSE11 = -11
    HOUSE12 = -12

    @property
    def is_cusp(self) -> bool:
        return self.value < 0


class HouseSystem(Enum):
    """House systems by their Swiss Ephemeris code letter."""

    PLACIDUS = "P"
    KOCH = "K"
    PORPHYRIUS = "O"
    REGIOMONTANUS = "R"
    CAMPANUS = "C"
    EQUAL = "A"
    EQUAL_E = "E"
    VEHLOW = "V"
    MERIDIAN = "X"
    HORIZONTAL = "H"
    POLICH_PAGE = "T"
    ALCABITIUS = "B"
    GAUQUELIN_SECTORS = "G"
    MORINUS = "M"
    KRUSINSKI = "U"
    WHOLE_SIGN = "W"
    CARTER = "F"
    SRIPATI = "S"
    APC = "Y"
    SUNSHINE = "I"
    SUNSHINE_ALT = "i"
    EQUAL_MC = "D"
    PULLEN_SD = "L"
    PULLEN_SR = "Q"
    EQUAL_ARIES = "N"

    @property
    def code(self) -> bytes:
        """Return the code letter as pyswisseph expects it."""
        return self.value.encode("ascii")


def to_house_system(value: Union["HouseSystem", str, bytes, int]) -> HouseSystem:
    """Coerce a code letter (str, bytes or character ordinal) to a HouseSystem.

    Raises:
        ValueError: If ``value`` is not a Swiss Ephemeris house system code
    """
    if isinstance(value, HouseSystem):
        return value
    if isinstance(value, int):
        value = chr(value)
    elif isinstance(value, bytes):
        value = value.decode("ascii")
    return HouseSystem(value)


# House systems that transit calculations accept (Gauquelin sectors and the
# newer systems have no speed tables)
SUPPORTED_HOUSE_SYSTEMS = frozenset(
    {
        HouseSystem.PLACIDUS,
        HouseSystem.KOCH,
        HouseSystem.PORPHYRIUS,
        HouseSystem.REGIOMONTANUS,
        HouseSystem.CAMPANUS,
        HouseSystem.EQUAL,
        HouseSystem.EQUAL_E,
        HouseSystem.VEHLOW,
        HouseSystem.MERIDIAN,
        HouseSystem.HORIZONTAL,
        HouseSystem.POLICH_PAGE,
        HouseSystem.ALCABITIUS,
        HouseSystem.MORINUS,
        HouseSystem.KRUSINSKI,
        HouseSystem.WHOLE_SIGN,
    }
)

# Swiss Ephemeris calculation flags
SEFLG_JPLEPH = 1
SEFLG_SWIEPH = 2
SEFLG_MOSEPH = 4
SEFLG_HELCTR = 8
SEFLG_TRUEPOS = 16
SEFLG_J2000 = 32
SEFLG_NONUT = 64
SEFLG_SPEED = 256
SEFLG_NOGDEFL = 512
SEFLG_NOABERR = 1024
SEFLG_EQUATORIAL = 2048
SEFLG_XYZ = 4096
SEFLG_RADIANS = 8192
SEFLG_BARYCTR = 16384
SEFLG_TOPOCTR = 32768
SEFLG_SIDEREAL = 65536

SEFLG_EPHMASK = SEFLG_JPLEPH | SEFLG_SWIEPH | SEFLG_MOSEPH

# Transit methods: which component of the position is searched for
TRANSIT_LONGITUDE = 1 << 24
TRANSIT_LATITUDE = 1 << 25
TRANSIT_DISTANCE = 1 << 26

TRANSIT_MASK = TRANSIT_LONGITUDE | TRANSIT_LATITUDE | TRANSIT_DISTANCE

# Index into the position vector for each transit method
TRANSIT_INDEX = {
    TRANSIT_LONGITUDE: 0,
    TRANSIT_LATITUDE: 1,
    TRANSIT_DISTANCE: 2,
}

# Time range of the Moshier planetary ephemeris, used when nothing better is
# known about a body's valid time range
MOSHPLEPH_START = 625000.5
MOSHPLEPH_END = 2818000.5
