"""
Geohash Constants

Alphabet, coordinate ranges and the adjacency lookup tables shared by the
codec and the adjacency engine. Every table here is immutable.
"""

from types import MappingProxyType
from typing import Final


__all__ = [
    "BASE32_ALPHABET",
    "BITS_PER_CHAR",
    "BORDERS",
    "DEFAULT_PRECISION",
    "LATITUDE_RANGE",
    "LONGITUDE_RANGE",
    "NEIGHBOURS",
]


BASE32_ALPHABET: Final[str] = "0123456789bcdefghjkmnpqrstuvwxyz"
"""Geohash base32 alphabet (digits and lower-case letters without a, i, l, o)."""

BITS_PER_CHAR: Final[int] = 5
"""Number of interleaved bits carried by one geohash character."""

DEFAULT_PRECISION: Final[int] = 5
"""Default geohash length in characters (roughly a 5km cell)."""

LATITUDE_RANGE: Final[tuple[float, float]] = (-90.0, 90.0)
"""Closed latitude interval in degrees."""

LONGITUDE_RANGE: Final[tuple[float, float]] = (-180.0, 180.0)
"""Closed longitude interval in degrees."""

# Indexed by direction, then by len(geohash) % 2 (0 = even, 1 = odd).
# The position of a character in the permutation is the alphabet index of
# the character one step away in that direction.
NEIGHBOURS: Final = MappingProxyType(
    {
        "n": ("p0r21436x8zb9dcf5h7kjnmqesgutwvy", "bc01fg45238967deuvhjyznpkmstqrwx"),
        "s": ("14365h7k9dcfesgujnmqp0r2twvyx8zb", "238967debc01fg45kmstqrwxuvhjyznp"),
        "e": ("bc01fg45238967deuvhjyznpkmstqrwx", "p0r21436x8zb9dcf5h7kjnmqesgutwvy"),
        "w": ("238967debc01fg45kmstqrwxuvhjyznp", "14365h7k9dcfesgujnmqp0r2twvyx8zb"),
    }
)
"""Neighbour permutations of the alphabet per direction and parity."""

# Characters on the edge of their parent cell: stepping over them carries
# into the parent prefix.
BORDERS: Final = MappingProxyType(
    {
        "n": ("prxz", "bcfguvyz"),
        "s": ("028b", "0145hjnp"),
        "e": ("bcfguvyz", "prxz"),
        "w": ("0145hjnp", "028b"),
    }
)
"""Border characters per direction and parity."""
