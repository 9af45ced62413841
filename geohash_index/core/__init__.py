"""
Core geohash modules.

Contains the point/box value types, the geohash codec with its region
arithmetic, geohash sets and the widening circle built from them.
"""
from geohash_index.core.point import Point, EARTH_RADIUS_KM
from geohash_index.core.box import Box
from geohash_index.core.geohash import (
    Direction,
    ENCODING,
    DEFAULT_PRECISION,
    MAX_PRECISION,
    encode_digit,
    decode_digit,
    encode,
    decode_box,
    decode,
    increment,
    neighbor,
    neighbors,
    contains,
    quadrant,
    halve,
    quarter,
    cell_size,
)
from geohash_index.core.hash_set import HashSet
from geohash_index.core.hash_circle import HashCircle, cover_radius

__all__ = [
    'Point',
    'EARTH_RADIUS_KM',
    'Box',
    'Direction',
    'ENCODING',
    'DEFAULT_PRECISION',
    'MAX_PRECISION',
    'encode_digit',
    'decode_digit',
    'encode',
    'decode_box',
    'decode',
    'increment',
    'neighbor',
    'neighbors',
    'contains',
    'quadrant',
    'halve',
    'quarter',
    'cell_size',
    'HashSet',
    'HashCircle',
    'cover_radius',
]
