"""Tests for the package logging setup."""

import logging
import unittest
from unittest import mock

from transitloom.logging import (
    DEFAULT_LOG_LEVEL,
    ROOT_LOGGER_NAME,
    _get_log_level,
    get_logger,
    set_log_level,
)


class TestLogging(unittest.TestCase):
    def tearDown(self):
        set_log_level(DEFAULT_LOG_LEVEL)
        logging.getLogger(ROOT_LOGGER_NAME).setLevel(logging.NOTSET)

    def test_level_from_environment(self):
        with mock.patch.dict("os.environ", {"TRANSITLOOM_LOG_LEVEL": "debug"}):
            self.assertEqual(_get_log_level(), logging.DEBUG)
        with mock.patch.dict("os.environ", {"TRANSITLOOM_LOG_LEVEL": "loud"}):
            self.assertEqual(_get_log_level(), DEFAULT_LOG_LEVEL)
        with mock.patch.dict("os.environ", {}, clear=True):
            self.assertEqual(_get_log_level(), logging.WARNING)

    def test_logger_is_configured_once(self):
        logger = get_logger("transitloom.tests.configured_once")
        self.assertEqual(len(logger.handlers), 1)
        self.assertFalse(logger.propagate)

        self.assertIs(get_logger("transitloom.tests.configured_once"), logger)
        self.assertEqual(len(logger.handlers), 1)

    def test_set_log_level(self):
        logger = get_logger("transitloom.tests.set_level")

        set_log_level(logging.DEBUG)

        self.assertEqual(logger.level, logging.DEBUG)
        self.assertEqual(logger.handlers[0].level, logging.DEBUG)
        self.assertEqual(logging.getLogger(ROOT_LOGGER_NAME).level, logging.DEBUG)

    def test_new_loggers_follow_set_level(self):
        set_log_level(logging.ERROR)
        logger = get_logger("transitloom.tests.after_set_level")
        self.assertEqual(logger.level, logging.ERROR)


if __name__ == "__main__":
    unittest.main()
