"""
Geohash indexing primitives.

Encode points to geohashes, decode them to boxes, find neighbors, split
cells into halves and quarters, and grow geohash regions in widening
circles for range-scan proximity searches.
"""
from geohash_index.core import (
    Point,
    Box,
    Direction,
    HashSet,
    HashCircle,
    cover_radius,
    encode,
    decode,
    decode_box,
    neighbor,
)

__version__ = "0.1.0"

__all__ = [
    'Point',
    'Box',
    'Direction',
    'HashSet',
    'HashCircle',
    'cover_radius',
    'encode',
    'decode',
    'decode_box',
    'neighbor',
]
