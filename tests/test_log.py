"""Logging setup tests."""

from __future__ import annotations

import io
import logging
import unittest

from gridls.log import LOGGER_NAME, configure_logging


def _clear_handlers() -> None:
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)


class ConfigureLoggingTests(unittest.TestCase):
    def setUp(self) -> None:
        _clear_handlers()
        self.addCleanup(_clear_handlers)

    def test_verbose_enables_debug_without_stacking_handlers(self) -> None:
        stream = io.StringIO()
        logger = configure_logging(verbose=False, stream=stream)
        configure_logging(verbose=True, stream=stream)

        self.assertEqual(len(logger.handlers), 1)
        self.assertEqual(logger.level, logging.DEBUG)

        logging.getLogger("gridls.listing_model.fs").debug("read %d entries", 3)
        self.assertEqual(stream.getvalue(), "DEBUG: gridls.listing_model.fs: read 3 entries\n")

    def test_quiet_mode_drops_debug_records(self) -> None:
        stream = io.StringIO()
        configure_logging(verbose=False, stream=stream)

        logging.getLogger("gridls.walker").debug("hidden")

        self.assertEqual(stream.getvalue(), "")


if __name__ == "__main__":
    unittest.main()
