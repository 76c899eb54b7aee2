"""
Geohash base32 packing.

Maps groups of five bits to the characters of the geohash alphabet and
back. Unpacking is permissive by default: characters outside the alphabet
read as ``00000`` instead of failing.
"""

from __future__ import annotations

import logging

import deal

from geohash_grid.api.core.constants import BASE32_ALPHABET, BITS_PER_CHAR
from geohash_grid.api.core.exceptions import InvalidCharacterError


__all__ = ["pack", "unpack"]


logger = logging.getLogger(__name__)

_CHAR_INDEX = {char: index for index, char in enumerate(BASE32_ALPHABET)}


@deal.pre(lambda bits: len(bits) % BITS_PER_CHAR == 0, message="Bit string length must be a multiple of 5")
def pack(bits: str) -> str:
    """
    Pack an interleaved bit string into geohash characters.

    Args:
        bits: Bit string whose length is a multiple of 5

    Returns:
        Geohash string with one character per 5 bits
    """
    return "".join(
        BASE32_ALPHABET[int(bits[i : i + BITS_PER_CHAR], 2)] for i in range(0, len(bits), BITS_PER_CHAR)
    )


@deal.raises(InvalidCharacterError)
def unpack(geohash: str, strict: bool = False) -> str:
    """
    Unpack geohash characters into their interleaved bit string.

    Lookup is case-insensitive. Unknown characters contribute ``00000``
    unless ``strict`` is set.

    Args:
        geohash: Geohash string
        strict: Raise instead of falling back to zero bits

    Returns:
        Bit string of ``5 * len(geohash)`` characters

    Raises:
        InvalidCharacterError: If strict and a character is outside the alphabet
    """
    chunks = []
    for char in geohash:
        index = _CHAR_INDEX.get(char.lower())
        if index is None:
            if strict:
                raise InvalidCharacterError(char, geohash)
            logger.debug(f"Unknown geohash character {char!r} in {geohash!r}, reading as zero bits")
            index = 0
        chunks.append(format(index, "05b"))
    return "".join(chunks)
