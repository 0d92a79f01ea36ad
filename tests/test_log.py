import logging
import unittest

from core.log import setup_logging


class TestSetupLogging(unittest.TestCase):
    def setUp(self):
        self.root = logging.getLogger()
        self.previous = self.root.level

    def tearDown(self):
        self.root.setLevel(self.previous)

    def test_level_by_name(self):
        setup_logging("debug")
        self.assertEqual(self.root.level, logging.DEBUG)

    def test_unknown_name_falls_back_to_info(self):
        setup_logging("chatty")
        self.assertEqual(self.root.level, logging.INFO)

    def test_numeric_level(self):
        setup_logging(logging.WARNING)
        self.assertEqual(self.root.level, logging.WARNING)


if __name__ == '__main__':
    unittest.main()
