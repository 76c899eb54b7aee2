"""
Geohash API - Encoding and Grid Layer

This package contains the geohash codec and grid navigation, separated
from CLI presentation concerns.

The API is organized into modules, leaf first:
- bits: Quantization, reconstruction and bit interleaving
- base32: Five-bit packing to and from the geohash alphabet
- codec: encode / decode of coordinates
- adjacency: Adjacent cells and eight-cell neighbourhoods
- core: Constants, enums, types and exceptions
"""

# Activate deal contracts for runtime validation
import deal


deal.enable()

__all__ = [
    # Package is organized into modules - import directly from them:
    # from geohash_grid.api.codec import ...
    # from geohash_grid.api.adjacency import ...
    # etc.
]
