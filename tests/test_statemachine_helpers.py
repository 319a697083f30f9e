import unittest

from bmp_helpers import statemachine_helpers
from bmp_helpers.bmp_codecs import FileIdentifier, InfoHeader


class TestStatemachineHelpers(unittest.TestCase):

    def test_identifier_is_bitmap(self):
        self.assertTrue(statemachine_helpers.identifier_is_bitmap(identifier=FileIdentifier.new()))
        self.assertFalse(statemachine_helpers.identifier_is_bitmap(identifier=FileIdentifier(0x50, 0x4B)))

    def test_data_size_matches(self):
        header = InfoHeader.from_dimensions(3, 3)
        self.assertTrue(statemachine_helpers.data_size_matches(info_header=header))
        self.assertFalse(statemachine_helpers.data_size_matches(info_header=header._replace(data_size=27)))

    def test_negative_dimensions_never_match(self):
        header = InfoHeader.from_dimensions(2, 2)._replace(width=-1, data_size=0)
        self.assertFalse(statemachine_helpers.data_size_matches(info_header=header))

    def test_rows_left_to_read(self):
        self.assertTrue(statemachine_helpers.rows_left_to_read(rows_read=0, height=2))
        self.assertTrue(statemachine_helpers.rows_left_to_read(rows_read=1, height=2))
        self.assertFalse(statemachine_helpers.rows_left_to_read(rows_read=2, height=2))
        self.assertTrue(statemachine_helpers.no_rows_left_to_read(rows_read=2, height=2))
