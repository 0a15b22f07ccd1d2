"""Julian day conversions.

Conversions between datetimes and Julian days follow the Meeus algorithm
from "Astronomical Algorithms" (2nd ed.) and only support Gregorian dates
(1583 onwards). Searches themselves run on plain Julian day floats.
"""

from datetime import datetime, timedelta, timezone
from typing import Union

# Julian day of the J2000.0 epoch
J2000 = 2451545.0
DAYS_PER_JULIAN_YEAR = 365.25

# Precision for Julian dates (microsecond precision = 12 decimal places)
JD_PRECISION = 12
MILLISECONDS_PER_DAY = 86400 * 1000


def gregorian_to_jdn(year: int, month: int, day: int) -> int:
    """Convert a Gregorian date to Julian Day Number using Meeus algorithm.

    Raises:
        ValueError: If date is before 1583 (Gregorian calendar adoption)
    """
    if year < 1583:
        raise ValueError("Dates before 1583 are not supported")

    # Jan & Feb are months 13 & 14 of the previous year
    if month <= 2:
        year -= 1
        month += 12

    a = year // 100
    b = 2 - a + (a // 4)

    return int(365.25 * (year + 4716)) + int(30.6001 * (month + 1)) + day + b - 1524


def datetime_to_julian(dt: datetime) -> float:
    """Convert a timezone-aware datetime to a Julian day.

    Raises:
        ValueError: If the datetime is naive
    """
    if dt.tzinfo is None:
        raise ValueError("datetime must be timezone-aware")

    dt = dt.astimezone(timezone.utc)
    jdn = gregorian_to_jdn(dt.year, dt.month, dt.day)
    seconds = dt.hour * 3600 + dt.minute * 60 + dt.second + dt.microsecond / 1_000_000

    # Julian Date = JDN - 0.5 (for noon epoch) + day fraction
    return round(jdn - 0.5 + seconds / 86400, JD_PRECISION)


def julian_to_datetime(jd: float) -> datetime:
    """Convert a Julian day to a UTC datetime rounded to the millisecond (Meeus algorithm)."""
    jd = round(jd, JD_PRECISION)

    jd_plus_half = jd + 0.5
    Z = int(jd_plus_half)
    F = jd_plus_half - Z

    A = Z
    if Z >= 2299161:  # Gregorian calendar cutover point
        alpha = int((Z - 1867216.25) / 36524.25)
        A = Z + 1 + alpha - int(alpha / 4)

    B = A + 1524
    C = int((B - 122.1) / 365.25)
    D = int(365.25 * C)
    E = int((B - D) / 30.6001)

    day = B - D - int(30.6001 * E)
    month = E - 1 if E < 14 else E - 13
    year = C - 4716 if month > 2 else C - 4715

    # Round to the millisecond; adding a timedelta handles all the carries
    milliseconds = round(F * MILLISECONDS_PER_DAY)
    midnight = datetime(year, month, day, tzinfo=timezone.utc)
    return midnight + timedelta(milliseconds=milliseconds)


def julian_year(jd: float) -> float:
    """Return the (fractional) Julian epoch year of a Julian day."""
    return 2000.0 + (jd - J2000) / DAYS_PER_JULIAN_YEAR


def ensure_julian(time: Union[float, datetime]) -> float:
    """Normalize a datetime or Julian day input to a Julian day float."""
    if isinstance(time, datetime):
        return datetime_to_julian(time)
    return float(time)
