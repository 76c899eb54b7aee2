"""
Geohash encoding and decoding.

Geohash encodes geographic coordinates into short strings that can be used
for hierarchical spatial indexing. Points whose geohashes share a long
prefix are geographically close together.

Encoding quantizes each coordinate, interleaves the two bit streams
(longitude first) and packs the result five bits per character. Decoding
runs the same pipeline backwards.

Reference: https://en.wikipedia.org/wiki/Geohash
"""

from __future__ import annotations

import logging
import math

import deal

from geohash_grid.api.base32 import pack, unpack
from geohash_grid.api.bits import deinterleave, interleave, quantize, reconstruct_interval
from geohash_grid.api.core.constants import (
    BASE32_ALPHABET,
    BITS_PER_CHAR,
    DEFAULT_PRECISION,
    LATITUDE_RANGE,
    LONGITUDE_RANGE,
)
from geohash_grid.api.core.exceptions import (
    InvalidCharacterError,
    InvalidCoordinateError,
    InvalidPrecisionError,
)
from geohash_grid.api.core.types import DecodedPosition


__all__ = [
    "bit_lengths",
    "decode",
    "decode_exactly",
    "encode",
    "resolution",
]


logger = logging.getLogger(__name__)


@deal.raises(InvalidPrecisionError)
@deal.post(lambda result: result[0] + result[1] > 0)
def bit_lengths(precision: int) -> tuple[int, int]:
    """
    Split ``precision * 5`` bits between latitude and longitude.

    Even precisions split evenly. Odd precisions give longitude the extra
    bit, because the interleaved stream starts and ends with a longitude bit.

    Args:
        precision: Geohash length in characters

    Returns:
        Tuple of (lat_bits, lon_bits)

    Raises:
        InvalidPrecisionError: If precision is less than 1

    Example:
        >>> bit_lengths(5)
        (12, 13)
    """
    if precision < 1:
        raise InvalidPrecisionError(f"Precision must be at least 1, got {precision}")

    if precision % 2 == 0:
        lat_bits = lon_bits = (precision // 2) * BITS_PER_CHAR
    else:
        lat_bits = math.ceil(precision / 2) * BITS_PER_CHAR - 3
        lon_bits = lat_bits + 1
    return lat_bits, lon_bits


def resolution(precision: int) -> tuple[float, float]:
    """
    Size of a geohash cell in degrees.

    Args:
        precision: Geohash length in characters

    Returns:
        Tuple of (cell height in degrees latitude, cell width in degrees longitude)
    """
    lat_bits, lon_bits = bit_lengths(precision)
    lat_span = (LATITUDE_RANGE[1] - LATITUDE_RANGE[0]) / 2**lat_bits
    lon_span = (LONGITUDE_RANGE[1] - LONGITUDE_RANGE[0]) / 2**lon_bits
    return lat_span, lon_span


@deal.raises(InvalidPrecisionError, InvalidCoordinateError)
@deal.post(lambda result: all(char in BASE32_ALPHABET for char in result))
@deal.ensure(
    lambda latitude, longitude, precision=DEFAULT_PRECISION, strict=False, result="": len(result) == precision
)
def encode(latitude: float, longitude: float, precision: int = DEFAULT_PRECISION, strict: bool = False) -> str:
    """
    Encode latitude and longitude into a geohash string.

    Args:
        latitude: Latitude in degrees (-90 to 90)
        longitude: Longitude in degrees (-180 to 180)
        precision: Number of characters in geohash (default: 5)
                  Each character adds 5 bits of precision
                  - 1 char: ~5000km
                  - 5 chars: ~5km
                  - 7 chars: ~150m
                  - 9 chars: ~5m
                  - 12 chars: ~4cm
        strict: Reject out-of-range coordinates instead of saturating

    Returns:
        Geohash string of exactly ``precision`` characters

    Raises:
        InvalidPrecisionError: If precision is less than 1
        InvalidCoordinateError: If strict and a coordinate is out of range

    Example:
        >>> encode(57.64911, 10.40744, 6)
        'u4pruy'
    """
    lat_bits, lon_bits = bit_lengths(precision)

    lat_in_range = LATITUDE_RANGE[0] <= latitude <= LATITUDE_RANGE[1]
    lon_in_range = LONGITUDE_RANGE[0] <= longitude <= LONGITUDE_RANGE[1]
    if not (lat_in_range and lon_in_range):
        if strict:
            raise InvalidCoordinateError(
                f"Coordinate ({latitude}, {longitude}) is outside latitude -90..90 / longitude -180..180"
            )
        logger.debug(f"Coordinate ({latitude}, {longitude}) is out of range, quantization will saturate")

    bits = interleave(
        quantize(latitude, *LATITUDE_RANGE, lat_bits),
        quantize(longitude, *LONGITUDE_RANGE, lon_bits),
    )
    return pack(bits)


@deal.raises(InvalidCharacterError)
def decode_exactly(geohash: str, strict: bool = False) -> DecodedPosition:
    """
    Decode a geohash into its unrounded cell centre and error margins.

    The errors are half the height and width of the cell, so the true
    point lies within ``latitude ± latitude_error`` and
    ``longitude ± longitude_error``.

    Args:
        geohash: Geohash string (case-insensitive)
        strict: Raise on characters outside the alphabet

    Returns:
        DecodedPosition for the cell

    Raises:
        InvalidCharacterError: If strict and a character is outside the alphabet
    """
    lat_bits, lon_bits = deinterleave(unpack(geohash, strict=strict))

    lat_lo, lat_hi = reconstruct_interval(*LATITUDE_RANGE, lat_bits)
    lon_lo, lon_hi = reconstruct_interval(*LONGITUDE_RANGE, lon_bits)

    return DecodedPosition(
        latitude=(lat_lo + lat_hi) / 2,
        longitude=(lon_lo + lon_hi) / 2,
        latitude_error=(lat_hi - lat_lo) / 2,
        longitude_error=(lon_hi - lon_lo) / 2,
    )


@deal.raises(InvalidCharacterError)
def decode(
    geohash: str, with_error: bool = False, strict: bool = False
) -> tuple[float, float] | tuple[float, float, float, float]:
    """
    Decode a geohash string into latitude and longitude.

    Both values are rounded to ``len(geohash) - 2`` decimal places. For
    one- and two-character hashes the digit count is zero or negative,
    which rounds to the nearest 1, 10, ... degrees (Python ``round``).
    An empty geohash decodes to the centre of the world, ``(0.0, 0.0)``.

    Args:
        geohash: Geohash string (case-insensitive)
        with_error: Also return the error margins of the cell
        strict: Raise on characters outside the alphabet

    Returns:
        Tuple of (latitude, longitude), or
        (latitude, longitude, lat_error, lon_error) if with_error is set

    Raises:
        InvalidCharacterError: If strict and a character is outside the alphabet

    Example:
        >>> decode("u4pruy")
        (57.648, 10.4095)
    """
    position = decode_exactly(geohash, strict=strict)

    digits = len(geohash) - 2
    latitude = round(position.latitude, digits)
    longitude = round(position.longitude, digits)

    if with_error:
        return latitude, longitude, position.latitude_error, position.longitude_error
    return latitude, longitude
