"""
Type definitions for geohash encoding.

This module contains the dataclasses returned and accepted by the
public API.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from geohash_grid.api.core.constants import DEFAULT_PRECISION
from geohash_grid.api.core.exceptions import ConfigurationError


__all__ = ["DecodedPosition", "GeohashConfig"]


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DecodedPosition:
    """
    Centre of a decoded geohash cell with its error margins.

    Attributes:
        latitude: Latitude of the cell centre in degrees (unrounded)
        longitude: Longitude of the cell centre in degrees (unrounded)
        latitude_error: Half the cell height in degrees
        longitude_error: Half the cell width in degrees
    """

    latitude: float
    longitude: float
    latitude_error: float
    longitude_error: float

    def __str__(self) -> str:
        lat_dir = "N" if self.latitude >= 0 else "S"
        lon_dir = "E" if self.longitude >= 0 else "W"
        return (
            f"{abs(self.latitude):.6f}°{lat_dir} ±{self.latitude_error:.6f}, "
            f"{abs(self.longitude):.6f}°{lon_dir} ±{self.longitude_error:.6f}"
        )


@dataclass
class GeohashConfig:
    """
    Default settings for encoding and decoding.

    Attributes:
        precision: Geohash length used when none is given
        strict: Reject out-of-range coordinates and unknown characters
    """

    precision: int = DEFAULT_PRECISION
    strict: bool = False

    @classmethod
    def from_env(cls) -> GeohashConfig:
        """
        Build a configuration from ``GEOHASH_PRECISION`` and ``GEOHASH_STRICT``.

        Unset variables fall back to the defaults.

        Raises:
            ConfigurationError: If GEOHASH_PRECISION is not a positive integer
        """
        raw_precision = os.getenv("GEOHASH_PRECISION")
        precision = DEFAULT_PRECISION
        if raw_precision is not None and raw_precision.strip():
            try:
                precision = int(raw_precision)
            except ValueError as e:
                raise ConfigurationError(f"GEOHASH_PRECISION must be an integer, got {raw_precision!r}") from e
            if precision < 1:
                raise ConfigurationError(f"GEOHASH_PRECISION must be at least 1, got {precision}")

        strict = os.getenv("GEOHASH_STRICT", "false").lower() in ("true", "1", "yes")

        logger.debug(f"Loaded config from environment: precision={precision}, strict={strict}")
        return cls(precision=precision, strict=strict)
