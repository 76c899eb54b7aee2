"""
Custom exception classes for geohash encoding and grid navigation.

This module defines specific exceptions for the different ways an input can
be rejected. Several of them are never raised by default: the lenient code
paths hand them back as ``Failure`` values or skip them entirely unless
strict mode is requested.
"""

from __future__ import annotations


__all__ = [
    # Configuration exceptions
    "ConfigurationError",
    "EmptyGeohashError",
    # Base exception
    "GeohashError",
    "GridBoundaryError",
    "InvalidCharacterError",
    "InvalidCoordinateError",
    "InvalidDirectionError",
    "InvalidPrecisionError",
]


class GeohashError(Exception):
    """
    Base exception for all geohash errors.

    All custom exceptions in this library inherit from this base class,
    making it easy to catch every geohash-related error at once.
    """

    pass


# ============================================================================
# Input Exceptions
# ============================================================================


class InvalidDirectionError(GeohashError, ValueError):
    """
    Raised or returned when a direction is not one of n, s, e, w.

    ``adjacent`` reports this as a ``Failure`` value because directions
    usually come straight from user input.
    """

    pass


class EmptyGeohashError(GeohashError, ValueError):
    """Returned when an empty string is given where a geohash cell is required."""

    pass


class InvalidCharacterError(GeohashError, ValueError):
    """
    Raised when a geohash contains a character outside the base32 alphabet.

    Decoding is permissive by default (unknown characters read as zero
    bits); this error only surfaces in strict mode and from ``adjacent``.
    """

    def __init__(self, character: str, geohash: str) -> None:
        self.character = character
        self.geohash = geohash
        super().__init__(f"Invalid geohash character {character!r} in {geohash!r}")


class InvalidCoordinateError(GeohashError, ValueError):
    """
    Raised when a coordinate is out of its valid range in strict mode.

    This occurs when encoding with ``strict=True`` and:
    - Latitude is outside -90 to +90 degrees
    - Longitude is outside -180 to +180 degrees
    """

    pass


class InvalidPrecisionError(GeohashError, ValueError):
    """Raised when a geohash precision is not a positive integer."""

    pass


class GridBoundaryError(GeohashError):
    """
    Returned when a step would leave the grid across a pole.

    Steps east or west wrap around the antimeridian and never fail.
    """

    pass


# ============================================================================
# Configuration Exceptions
# ============================================================================


class ConfigurationError(GeohashError):
    """Raised when configuration read from the environment is malformed."""

    pass
