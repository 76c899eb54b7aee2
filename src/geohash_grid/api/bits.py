"""
Bit-level geohash primitives.

Quantization turns one coordinate into a string of binary digits by
repeatedly halving its range; reconstruction walks the same halvings
backwards. Interleaving merges the longitude and latitude streams so that
a truncated prefix loses precision on both axes together.

Bit strings are plain ``str`` objects over ``"0"`` and ``"1"``.
"""

from __future__ import annotations

import deal


__all__ = [
    "deinterleave",
    "interleave",
    "quantize",
    "reconstruct",
    "reconstruct_interval",
]


@deal.pre(lambda value, lo, hi, bit_length: bit_length >= 0, message="Bit length must not be negative")
@deal.post(lambda result: set(result) <= {"0", "1"})
def quantize(value: float, lo: float, hi: float, bit_length: int) -> str:
    """
    Quantize a value into ``bit_length`` bits by binary bisection of [lo, hi].

    Each bit halves the interval: ``1`` keeps the upper half, ``0`` the lower.
    Values outside the range do not raise; they saturate to all ones or
    all zeros.

    Args:
        value: Coordinate to quantize
        lo: Lower bound of the range
        hi: Upper bound of the range
        bit_length: Number of bits to produce

    Returns:
        Bit string of exactly ``bit_length`` characters

    Example:
        >>> quantize(57.64911, -90, 90, 5)
        '11010'
    """
    bits = []
    for _ in range(bit_length):
        mid = (lo + hi) / 2
        if value > mid:
            bits.append("1")
            lo = mid
        else:
            bits.append("0")
            hi = mid
    return "".join(bits)


def reconstruct_interval(lo: float, hi: float, bits: str) -> tuple[float, float]:
    """
    Narrow [lo, hi] by replaying a quantized bit string.

    Symbols other than ``0`` and ``1`` leave the interval unchanged.

    Returns:
        Tuple of (lo, hi) after all bits are consumed
    """
    for bit in bits:
        mid = (lo + hi) / 2
        if bit == "1":
            lo = mid
        elif bit == "0":
            hi = mid
    return lo, hi


def reconstruct(lo: float, hi: float, bits: str) -> float:
    """
    Inverse of :func:`quantize`: the midpoint of the interval the bits select.

    An empty bit string selects nothing, so the midpoint of the full
    [lo, hi] range is returned.
    """
    lo, hi = reconstruct_interval(lo, hi, bits)
    return (lo + hi) / 2


@deal.pre(
    lambda lat_bits, lon_bits: 0 <= len(lon_bits) - len(lat_bits) <= 1,
    message="Longitude must carry as many bits as latitude, or one more",
)
@deal.ensure(lambda lat_bits, lon_bits, result: len(result) == len(lat_bits) + len(lon_bits))
def interleave(lat_bits: str, lon_bits: str) -> str:
    """
    Merge latitude and longitude bits, longitude first.

    Counting positions from 1, odd positions take the next longitude bit
    and even positions the next latitude bit.
    """
    merged = []
    for i in range(1, len(lat_bits) + len(lon_bits) + 1):
        if i % 2 == 0:
            merged.append(lat_bits[(i - 2) // 2])
        else:
            merged.append(lon_bits[i // 2])
    return "".join(merged)


def deinterleave(bits: str) -> tuple[str, str]:
    """
    Split an interleaved bit string back into its two streams.

    Counting positions from 0, even positions are longitude and odd
    positions latitude (the same partition :func:`interleave` uses).

    Returns:
        Tuple of (lat_bits, lon_bits)
    """
    return bits[1::2], bits[0::2]
