"""
Geohash grid navigation.

Finds the cell next to a geohash in one of the four cardinal directions by
working on the string alone, without decoding to coordinates. The last
character is swapped through a per-direction permutation of the alphabet;
when it sits on the edge of its parent cell the parent prefix is moved
first.

Steps east or west off the grid wrap around the antimeridian. Steps north
or south past a pole have no cell to land on and fail.
"""

from __future__ import annotations

import logging

from returns.result import Failure, Result, Success

from geohash_grid.api.core.constants import BASE32_ALPHABET, BORDERS, NEIGHBOURS
from geohash_grid.api.core.enums import Direction, Neighbour
from geohash_grid.api.core.exceptions import (
    EmptyGeohashError,
    GeohashError,
    GridBoundaryError,
    InvalidCharacterError,
    InvalidDirectionError,
)


__all__ = ["adjacent", "neighbours"]


logger = logging.getLogger(__name__)


def adjacent(geohash: str, direction: str | Direction) -> Result[str, GeohashError]:
    """
    Get the geohash of the cell next to ``geohash`` in a cardinal direction.

    Both the geohash and the direction are case-insensitive; the result is
    lower case.

    Args:
        geohash: Geohash string of the starting cell
        direction: One of 'n', 's', 'e', 'w'

    Returns:
        Success with the adjacent geohash, or Failure with:
        - EmptyGeohashError if geohash is empty
        - InvalidDirectionError if direction is not n, s, e or w
        - InvalidCharacterError if geohash has characters outside the alphabet
        - GridBoundaryError if the step crosses a pole

    Example:
        >>> adjacent("gcpuyph", "n")
        <Success: gcpuypk>
    """
    if not geohash:
        return Failure(EmptyGeohashError("Cannot step from an empty geohash"))

    try:
        step = Direction(str(direction).lower())
    except ValueError:
        return Failure(InvalidDirectionError(f"Direction must be one of n, s, e, w, got {direction!r}"))

    geohash = geohash.lower()
    for char in geohash:
        if char not in BASE32_ALPHABET:
            return Failure(InvalidCharacterError(char, geohash))

    return _step(geohash, step)


def _step(geohash: str, direction: Direction) -> Result[str, GeohashError]:
    # Walk from the last character towards the first while the carry lasts
    suffix = ""
    for length in range(len(geohash), 0, -1):
        char = geohash[length - 1]
        parity = length % 2
        suffix = BASE32_ALPHABET[NEIGHBOURS[direction][parity].index(char)] + suffix

        if char not in BORDERS[direction][parity]:
            return Success(geohash[: length - 1] + suffix)

    if direction in (Direction.NORTH, Direction.SOUTH):
        logger.debug(f"Step {direction} from top-level cell {geohash[0]!r} crosses a pole")
        return Failure(GridBoundaryError(f"No cell {direction} of {geohash[0]!r}: the grid ends at the pole"))

    # East/west off the top level wraps around the antimeridian
    return Success(suffix)


def neighbours(geohash: str) -> dict[str, str | None]:
    """
    Get the eight cells surrounding a geohash.

    Diagonals are two cardinal steps: north-east is east of north,
    south-west is west of south, and so on. Every key is always present;
    a neighbour that does not exist (past a pole, or for an invalid
    geohash) is ``None``.

    Args:
        geohash: Geohash string

    Returns:
        Dictionary keyed n, ne, e, se, s, sw, w, nw
    """
    north = adjacent(geohash, Direction.NORTH)
    south = adjacent(geohash, Direction.SOUTH)

    cells = {
        Neighbour.NORTH: north,
        Neighbour.NORTH_EAST: north.bind(lambda cell: adjacent(cell, Direction.EAST)),
        Neighbour.EAST: adjacent(geohash, Direction.EAST),
        Neighbour.SOUTH_EAST: south.bind(lambda cell: adjacent(cell, Direction.EAST)),
        Neighbour.SOUTH: south,
        Neighbour.SOUTH_WEST: south.bind(lambda cell: adjacent(cell, Direction.WEST)),
        Neighbour.WEST: adjacent(geohash, Direction.WEST),
        Neighbour.NORTH_WEST: north.bind(lambda cell: adjacent(cell, Direction.WEST)),
    }
    return {str(key): result.value_or(None) for key, result in cells.items()}
