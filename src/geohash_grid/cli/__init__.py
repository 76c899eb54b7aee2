"""Command-line interface for geohash encoding and grid navigation."""

from geohash_grid import __version__


__all__ = ["__version__"]
