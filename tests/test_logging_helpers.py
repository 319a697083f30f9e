import logging
import unittest

from bmp_helpers import logging_helpers


class TestLoggingHelpers(unittest.TestCase):

    def tearDown(self):
        logger = logging.getLogger(logging_helpers.LOGGER_NAME)
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)

    def test_initialise_logging(self):
        logger = logging_helpers.initialise_logging(level=logging.DEBUG)
        self.assertEqual(logger.name, "bitmap")
        self.assertTrue(logger.handlers)
        self.assertTrue(logger.isEnabledFor(logging.DEBUG))
