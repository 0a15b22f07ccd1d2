"""Exceptions raised by transit calculators and the transit search."""

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """Classification of a failed transit search."""

    UNDEFINED_ERROR = "undefined_error"
    OUT_OF_TIME_RANGE = "out_of_time_range"
    BEYOND_USER_TIME_LIMIT = "beyond_user_time_limit"


# Engine messages containing one of these are reported as time range errors
_TIME_RANGE_MARKERS = ("upper limit", "lower limit")


class EngineError(Exception):
    """Raised by an ephemeris engine when a calculation fails."""

    def __init__(self, message: str, code: int = -1):
        super().__init__(message)
        self.message = message
        self.code = code


class TransitError(Exception):
    """Base class for failed transit searches.

    Attributes:
        jd: Julian day (ET) at which the failure was detected
        kind: The failure classification
    """

    kind = ErrorKind.UNDEFINED_ERROR

    def __init__(self, jd: float, message: str, kind: Optional[ErrorKind] = None):
        super().__init__(message)
        self.jd = jd
        if kind is not None:
            self.kind = kind


class OutOfTimeRangeError(TransitError):
    """No transit is possible from the given start, or the engine ran out of range."""

    kind = ErrorKind.OUT_OF_TIME_RANGE


class UserTimeLimitError(TransitError):
    """The search passed the caller's time limit without finding a transit."""

    kind = ErrorKind.BEYOND_USER_TIME_LIMIT


class EphemerisCalculationError(TransitError):
    """The ephemeris or house engine failed while evaluating a target."""

    def __init__(self, jd: float, engine_message: str, code: int = -1):
        super().__init__(
            jd,
            f"Calculation failed with return code {code}: {engine_message}",
            classify_engine_message(engine_message),
        )
        self.engine_message = engine_message
        self.code = code

    @classmethod
    def from_engine_error(cls, jd: float, error: EngineError) -> "EphemerisCalculationError":
        return cls(jd, error.message, error.code)


class TransitConfigurationError(ValueError):
    """A transit calculator was created with an invalid configuration."""

    pass


class UnsupportedHouseSystemError(TransitConfigurationError):
    """The given code does not name a house system."""

    pass


def classify_engine_message(message: str) -> ErrorKind:
    """Classify a raw engine error message.

    Messages about the ephemeris' upper or lower time limit mean the search
    walked out of the computable range; everything else is undefined.
    """
    lowered = message.lower()
    if any(marker in lowered for marker in _TIME_RANGE_MARKERS):
        return ErrorKind.OUT_OF_TIME_RANGE
    return ErrorKind.UNDEFINED_ERROR
