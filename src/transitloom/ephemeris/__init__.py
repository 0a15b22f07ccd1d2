from .engine import EphemerisEngine

__all__ = [
    "EphemerisEngine",
    "SwissEphemerisEngine",
]


def __getattr__(name):
    # pyswisseph is only imported when the Swiss engine is actually requested
    if name == "SwissEphemerisEngine":
        from .swiss import SwissEphemerisEngine

        return SwissEphemerisEngine
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
