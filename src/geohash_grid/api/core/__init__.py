"""Core subpackage for shared constants, enums, types, and exceptions."""

from geohash_grid.api.core.constants import (
    BASE32_ALPHABET,
    BITS_PER_CHAR,
    DEFAULT_PRECISION,
    LATITUDE_RANGE,
    LONGITUDE_RANGE,
)
from geohash_grid.api.core.enums import Direction, Neighbour
from geohash_grid.api.core.types import DecodedPosition, GeohashConfig


__all__ = [
    "BASE32_ALPHABET",
    "BITS_PER_CHAR",
    "DEFAULT_PRECISION",
    "LATITUDE_RANGE",
    "LONGITUDE_RANGE",
    "DecodedPosition",
    "Direction",
    "GeohashConfig",
    "Neighbour",
]
