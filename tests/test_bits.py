"""
Unit tests for bits module.

Tests quantization, reconstruction and bit interleaving.
"""

import unittest

import deal

from geohash_grid.api.bits import (
    deinterleave,
    interleave,
    quantize,
    reconstruct,
    reconstruct_interval,
)
from geohash_grid.api.codec import bit_lengths


class TestQuantize(unittest.TestCase):
    """Test suite for quantize function"""

    def test_quantize_basic(self):
        """Test quantizing a latitude into 5 bits"""
        self.assertEqual(quantize(57.64911, -90, 90, 5), "11010")

    def test_quantize_length(self):
        """Test that output length always equals the bit length"""
        for bit_length in [0, 1, 7, 30]:
            self.assertEqual(len(quantize(12.5, -180, 180, bit_length)), bit_length)

    def test_quantize_zero_bits(self):
        """Test that zero bits yield an empty string"""
        self.assertEqual(quantize(45.0, -90, 90, 0), "")

    def test_quantize_midpoint_goes_low(self):
        """Test that a value exactly on the midpoint takes the lower half"""
        self.assertEqual(quantize(0.0, -90, 90, 1), "0")

    def test_quantize_saturates_out_of_range(self):
        """Test that out-of-range values saturate instead of raising"""
        self.assertEqual(quantize(200.0, -180, 180, 4), "1111")
        self.assertEqual(quantize(-200.0, -180, 180, 4), "0000")

    def test_quantize_negative_length_violates_contract(self):
        """Test that a negative bit length is rejected by the contract"""
        with self.assertRaises(deal.PreContractError):
            quantize(0.0, -90, 90, -1)


class TestReconstruct(unittest.TestCase):
    """Test suite for reconstruct and reconstruct_interval functions"""

    def test_reconstruct_empty_bits(self):
        """Test that empty bits give the midpoint of the full range"""
        self.assertEqual(reconstruct(-90, 90, ""), 0.0)
        self.assertEqual(reconstruct(-180, 180, ""), 0.0)

    def test_reconstruct_basic(self):
        """Test reconstructing short bit strings"""
        self.assertEqual(reconstruct(-90, 90, "1"), 45.0)
        self.assertEqual(reconstruct(-90, 90, "10"), 22.5)
        self.assertEqual(reconstruct(-90, 90, "01"), -22.5)

    def test_reconstruct_ignores_unknown_symbols(self):
        """Test that symbols other than 0 and 1 do not narrow the range"""
        self.assertEqual(reconstruct(-90, 90, "1x0"), reconstruct(-90, 90, "10"))

    def test_reconstruct_interval(self):
        """Test the final interval is returned"""
        self.assertEqual(reconstruct_interval(-90, 90, "11"), (45.0, 90.0))
        self.assertEqual(reconstruct_interval(-180, 180, ""), (-180, 180))

    def test_quantize_reconstruct_bound(self):
        """Test that reconstruction lands within half a cell of the input"""
        for value in [-89.9, -45.123, 0.0001, 33.3, 89.9]:
            for bit_length in [1, 5, 12, 25]:
                bits = quantize(value, -90, 90, bit_length)
                half_cell = 180 / 2**bit_length / 2
                self.assertLessEqual(abs(reconstruct(-90, 90, bits) - value), half_cell)


class TestInterleave(unittest.TestCase):
    """Test suite for interleave and deinterleave functions"""

    def test_interleave_longitude_first(self):
        """Test that longitude bits fill the even positions"""
        self.assertEqual(interleave("11", "000"), "01010")
        self.assertEqual(interleave("01", "011"), "00111")

    def test_interleave_equal_lengths(self):
        """Test interleaving streams of equal length"""
        self.assertEqual(interleave("10", "01"), "0110")

    def test_interleave_empty(self):
        """Test interleaving two empty streams"""
        self.assertEqual(interleave("", ""), "")

    def test_interleave_rejects_longer_latitude(self):
        """Test that latitude may not carry more bits than longitude"""
        with self.assertRaises(deal.PreContractError):
            interleave("000", "0")

    def test_deinterleave_basic(self):
        """Test splitting an interleaved stream"""
        self.assertEqual(deinterleave("00111"), ("01", "011"))
        self.assertEqual(deinterleave("0110"), ("10", "01"))
        self.assertEqual(deinterleave(""), ("", ""))

    def test_roundtrip_all_precisions(self):
        """Test deinterleave(interleave(...)) across precisions 1-12"""
        for precision in range(1, 13):
            lat_length, lon_length = bit_lengths(precision)
            for lat_pattern, lon_pattern in [("10", "110"), ("1", "0"), ("0110", "1001"), ("100", "01")]:
                lat_bits = (lat_pattern * lat_length)[:lat_length]
                lon_bits = (lon_pattern * lon_length)[:lon_length]
                with self.subTest(precision=precision, lat=lat_pattern, lon=lon_pattern):
                    merged = interleave(lat_bits, lon_bits)
                    self.assertEqual(len(merged), precision * 5)
                    self.assertEqual(deinterleave(merged), (lat_bits, lon_bits))


if __name__ == "__main__":
    unittest.main()
