from .julian import (
    datetime_to_julian,
    ensure_julian,
    julian_to_datetime,
    julian_year,
)

__all__ = [
    "datetime_to_julian",
    "ensure_julian",
    "julian_to_datetime",
    "julian_year",
]
