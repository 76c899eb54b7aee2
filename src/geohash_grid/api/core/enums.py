"""
Common Enums

Enumerations used throughout the geohash API.
"""

from enum import StrEnum


__all__ = [
    "Direction",
    "Neighbour",
]


class Direction(StrEnum):
    """Cardinal directions for stepping to an adjacent cell."""

    NORTH = "n"
    SOUTH = "s"
    EAST = "e"
    WEST = "w"


class Neighbour(StrEnum):
    """Keys of the eight-cell neighbourhood, clockwise from north."""

    NORTH = "n"
    NORTH_EAST = "ne"
    EAST = "e"
    SOUTH_EAST = "se"
    SOUTH = "s"
    SOUTH_WEST = "sw"
    WEST = "w"
    NORTH_WEST = "nw"
