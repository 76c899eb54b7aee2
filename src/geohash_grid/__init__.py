"""
Geohash Grid

Encode latitude/longitude pairs into geohash strings, decode them back and
navigate between neighbouring cells of the geohash grid.

A geohash is a base32 string whose characters each carry five interleaved
longitude/latitude bits. Hashes sharing a prefix lie close together, and
every extra character makes the cell 32 times smaller.

Example:
    >>> from geohash_grid import adjacent, decode, encode, neighbours
    >>> encode(57.64911, 10.40744, 6)
    'u4pruy'
    >>> decode("u4pruy")
    (57.648, 10.4095)
    >>> adjacent("gcpuyph", "n").unwrap()
    'gcpuypk'
    >>> neighbours("gcpuyph")["ne"]
    'gcpuypm'
"""

# Grid navigation
from geohash_grid.api.adjacency import adjacent, neighbours

# Codec
from geohash_grid.api.codec import bit_lengths, decode, decode_exactly, encode, resolution

# Constants
from geohash_grid.api.core.constants import BASE32_ALPHABET, DEFAULT_PRECISION

# Enums
from geohash_grid.api.core.enums import Direction, Neighbour

# Exceptions
from geohash_grid.api.core.exceptions import (
    ConfigurationError,
    EmptyGeohashError,
    GeohashError,
    GridBoundaryError,
    InvalidCharacterError,
    InvalidCoordinateError,
    InvalidDirectionError,
    InvalidPrecisionError,
)

# Type definitions
from geohash_grid.api.core.types import DecodedPosition, GeohashConfig


__version__ = "0.1.0"

__all__ = [
    "BASE32_ALPHABET",
    "DEFAULT_PRECISION",
    "ConfigurationError",
    "DecodedPosition",
    "Direction",
    "EmptyGeohashError",
    "GeohashConfig",
    "GeohashError",
    "GridBoundaryError",
    "InvalidCharacterError",
    "InvalidCoordinateError",
    "InvalidDirectionError",
    "InvalidPrecisionError",
    "Neighbour",
    "adjacent",
    "bit_lengths",
    "decode",
    "decode_exactly",
    "encode",
    "neighbours",
    "resolution",
]
