"""
Unit tests for enums module.

Tests all enumeration classes used throughout the API.
"""

import unittest

from geohash_grid.api.core.enums import Direction, Neighbour


class TestDirection(unittest.TestCase):
    """Test suite for Direction enum"""

    def test_enum_values(self):
        """Test all Direction enum values"""
        self.assertEqual(Direction.NORTH, "n")
        self.assertEqual(Direction.SOUTH, "s")
        self.assertEqual(Direction.EAST, "e")
        self.assertEqual(Direction.WEST, "w")

    def test_enum_membership(self):
        """Test enum membership"""
        values = [member.value for member in Direction]
        self.assertEqual(values, ["n", "s", "e", "w"])
        self.assertNotIn("ne", values)

    def test_enum_string_representation(self):
        """Test string representation of enum values"""
        self.assertEqual(str(Direction.NORTH), "n")
        self.assertEqual(f"{Direction.WEST}", "w")

    def test_enum_from_value(self):
        """Test building members from their values"""
        self.assertIs(Direction("e"), Direction.EAST)
        with self.assertRaises(ValueError):
            Direction("x")


class TestNeighbour(unittest.TestCase):
    """Test suite for Neighbour enum"""

    def test_enum_values(self):
        """Test all eight neighbourhood keys, clockwise from north"""
        self.assertEqual([member.value for member in Neighbour], ["n", "ne", "e", "se", "s", "sw", "w", "nw"])

    def test_cardinals_match_direction(self):
        """Test that cardinal neighbours share values with Direction"""
        for direction in Direction:
            self.assertEqual(Neighbour(direction.value), direction.value)


if __name__ == "__main__":
    unittest.main()
