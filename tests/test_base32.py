"""
Unit tests for base32 module.

Tests packing bit strings into geohash characters and unpacking them.
"""

import unittest

import deal

from geohash_grid.api.base32 import pack, unpack
from geohash_grid.api.core.constants import BASE32_ALPHABET
from geohash_grid.api.core.exceptions import InvalidCharacterError


class TestPack(unittest.TestCase):
    """Test suite for pack function"""

    def test_pack_basic(self):
        """Test packing two characters worth of bits"""
        self.assertEqual(pack("1101000100"), "u4")

    def test_pack_extremes(self):
        """Test packing all zeros and all ones"""
        self.assertEqual(pack("00000"), "0")
        self.assertEqual(pack("11111"), "z")

    def test_pack_empty(self):
        """Test packing an empty bit string"""
        self.assertEqual(pack(""), "")

    def test_pack_requires_whole_characters(self):
        """Test that a partial 5-bit group is rejected, not padded"""
        with self.assertRaises(deal.PreContractError):
            pack("1111")


class TestUnpack(unittest.TestCase):
    """Test suite for unpack function"""

    def test_unpack_basic(self):
        """Test unpacking characters into 5 bits each"""
        self.assertEqual(unpack("u4"), "1101000100")
        self.assertEqual(unpack("0"), "00000")
        self.assertEqual(unpack("z"), "11111")

    def test_unpack_whole_alphabet(self):
        """Test that every alphabet character unpacks to its index"""
        for index, char in enumerate(BASE32_ALPHABET):
            self.assertEqual(int(unpack(char), 2), index)
            self.assertEqual(pack(unpack(char)), char)

    def test_unpack_case_insensitive(self):
        """Test that upper case characters unpack like lower case"""
        self.assertEqual(unpack("U4PRUY"), unpack("u4pruy"))

    def test_unpack_unknown_characters_read_as_zero(self):
        """Test lenient decoding of characters outside the alphabet"""
        self.assertEqual(unpack("!"), "00000")
        self.assertEqual(unpack("a"), "00000")
        self.assertEqual(unpack("u!"), "1101000000")

    def test_unpack_strict_rejects_unknown_characters(self):
        """Test that strict mode raises on characters outside the alphabet"""
        with self.assertRaises(InvalidCharacterError) as context:
            unpack("u4a", strict=True)
        self.assertEqual(context.exception.character, "a")
        self.assertEqual(context.exception.geohash, "u4a")
        self.assertIn("Invalid geohash character", str(context.exception))

    def test_unpack_empty(self):
        """Test unpacking an empty geohash"""
        self.assertEqual(unpack(""), "")
        self.assertEqual(unpack("", strict=True), "")


if __name__ == "__main__":
    unittest.main()
