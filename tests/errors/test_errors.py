"""Tests for the exception hierarchy."""

import unittest

from transitloom.errors import (
    EngineError,
    EphemerisCalculationError,
    ErrorKind,
    OutOfTimeRangeError,
    TransitConfigurationError,
    TransitError,
    UnsupportedHouseSystemError,
    UserTimeLimitError,
    classify_engine_message,
)


class TestTransitErrors(unittest.TestCase):
    def test_kinds(self):
        self.assertEqual(TransitError(1.0, "x").kind, ErrorKind.UNDEFINED_ERROR)
        self.assertEqual(OutOfTimeRangeError(1.0, "x").kind, ErrorKind.OUT_OF_TIME_RANGE)
        self.assertEqual(UserTimeLimitError(1.0, "x").kind, ErrorKind.BEYOND_USER_TIME_LIMIT)

    def test_kind_override(self):
        error = TransitError(1.0, "x", ErrorKind.OUT_OF_TIME_RANGE)
        self.assertEqual(error.kind, ErrorKind.OUT_OF_TIME_RANGE)
        # The class default is untouched
        self.assertEqual(TransitError.kind, ErrorKind.UNDEFINED_ERROR)

    def test_time_and_message(self):
        error = UserTimeLimitError(2460000.5, "User time limit of 2460000.0 has been reached.")
        self.assertEqual(error.jd, 2460000.5)
        self.assertEqual(str(error), "User time limit of 2460000.0 has been reached.")
        self.assertIsInstance(error, TransitError)

    def test_configuration_errors_are_value_errors(self):
        self.assertTrue(issubclass(TransitConfigurationError, ValueError))
        self.assertTrue(issubclass(UnsupportedHouseSystemError, TransitConfigurationError))
        self.assertFalse(issubclass(TransitConfigurationError, TransitError))


class TestEphemerisCalculationError(unittest.TestCase):
    def test_upper_limit(self):
        error = EphemerisCalculationError(
            2488117.0, "jd 2488117.000000 > Swiss Eph. upper limit 2487932.500000;", -1
        )
        self.assertEqual(error.kind, ErrorKind.OUT_OF_TIME_RANGE)
        self.assertEqual(error.code, -1)
        self.assertIn("return code -1", str(error))
        self.assertIn("upper limit", str(error))

    def test_other_failures(self):
        error = EphemerisCalculationError(2451545.0, "SwissEph file 'seas_18.se1' not found", -1)
        self.assertEqual(error.kind, ErrorKind.UNDEFINED_ERROR)

    def test_from_engine_error(self):
        engine_error = EngineError("jd 100.0 < Swiss Eph. lower limit 625000.5;", -2)

        error = EphemerisCalculationError.from_engine_error(100.0, engine_error)

        self.assertEqual(error.jd, 100.0)
        self.assertEqual(error.code, -2)
        self.assertEqual(error.engine_message, engine_error.message)
        self.assertEqual(error.kind, ErrorKind.OUT_OF_TIME_RANGE)


class TestClassifyEngineMessage(unittest.TestCase):
    def test_classification(self):
        self.assertEqual(classify_engine_message("beyond UPPER LIMIT"), ErrorKind.OUT_OF_TIME_RANGE)
        self.assertEqual(classify_engine_message("lower limit"), ErrorKind.OUT_OF_TIME_RANGE)
        self.assertEqual(classify_engine_message("illegal planet number"), ErrorKind.UNDEFINED_ERROR)
        self.assertEqual(classify_engine_message(""), ErrorKind.UNDEFINED_ERROR)


if __name__ == "__main__":
    unittest.main()
