"""
Geohash encoding, decoding and region arithmetic.

A geohash is a Z-order (Morton) curve over the earth's longitudes and
latitudes, starting at -90/-180 and ending at 90/180. Each base-32
character carries 5 bits, interleaved longitude first, so removing
characters from the end of a hash yields its ancestor region.

Beyond point encoding this module answers the region questions a
proximity search needs: the neighbor of a cell in a cardinal direction,
which quadrant of an ancestor a cell falls in, and which child ranges
make up half or a quarter of a cell.

References:
    https://en.wikipedia.org/wiki/Geohash
    https://en.wikipedia.org/wiki/Z-order_curve
"""
from enum import Enum
from typing import TYPE_CHECKING, Dict, Optional, Tuple, Union

from geohash_index.core.box import Box
from geohash_index.core.point import Point
from geohash_index.utils.exceptions import (
    InvalidCoordinateError,
    InvalidDigitError,
    InvalidDirectionError,
    InvalidGeohashError,
    InvalidPrecisionError,
)

if TYPE_CHECKING:
    from geohash_index.core.hash_set import HashSet


# Base32 encoding for geohash
ENCODING = "0123456789bcdefghjkmnpqrstuvwxyz"

_DIGIT_VALUES = {char: value for value, char in enumerate(ENCODING)}

DEFAULT_PRECISION = 8

# Twelve characters already resolve to a few centimetres
MAX_PRECISION = 12


class Direction(str, Enum):
    """Compass directions for neighbors, halves and quadrants."""
    NORTH = "n"
    SOUTH = "s"
    EAST = "e"
    WEST = "w"
    NORTHEAST = "ne"
    NORTHWEST = "nw"
    SOUTHEAST = "se"
    SOUTHWEST = "sw"


CARDINAL = (Direction.NORTH, Direction.SOUTH, Direction.EAST, Direction.WEST)
DIAGONAL = (Direction.NORTHEAST, Direction.NORTHWEST, Direction.SOUTHEAST, Direction.SOUTHWEST)

DirectionLike = Union[Direction, str]


# Neighbor and border tables, keyed by len(geohash) % 2.
# Each neighbor string maps a digit value to the adjacent digit in that
# direction; border digits wrap and need the parent's neighbor as well.
# Odd and even lengths are the same tables with the axes swapped.
_NEIGHBORS = {
    1: {
        Direction.NORTH: "238967debc01fg45kmstqrwxuvhjyznp",
        Direction.SOUTH: "bc01fg45238967deuvhjyznpkmstqrwx",
        Direction.EAST: "14365h7k9dcfesgujnmqp0r2twvyx8zb",
        Direction.WEST: "p0r21436x8zb9dcf5h7kjnmqesgutwvy",
    },
    0: {
        Direction.NORTH: "14365h7k9dcfesgujnmqp0r2twvyx8zb",
        Direction.SOUTH: "p0r21436x8zb9dcf5h7kjnmqesgutwvy",
        Direction.EAST: "238967debc01fg45kmstqrwxuvhjyznp",
        Direction.WEST: "bc01fg45238967deuvhjyznpkmstqrwx",
    },
}

_BORDERS = {
    1: {
        Direction.NORTH: "bcfguvyz",
        Direction.SOUTH: "0145hjnp",
        Direction.EAST: "prxz",
        Direction.WEST: "028b",
    },
    0: {
        Direction.NORTH: "prxz",
        Direction.SOUTH: "028b",
        Direction.EAST: "bcfguvyz",
        Direction.WEST: "0145hjnp",
    },
}

# Child digit ranges covering half of a cell, keyed by len(geohash) % 2.
# With an odd length the next character starts on a latitude bit.
_HALVES = {
    1: {
        Direction.NORTH: ((16, 31),),
        Direction.SOUTH: ((0, 15),),
        Direction.EAST: ((8, 15), (24, 31)),
        Direction.WEST: ((0, 7), (16, 23)),
    },
    0: {
        Direction.NORTH: ((8, 15), (24, 31)),
        Direction.SOUTH: ((0, 7), (16, 23)),
        Direction.EAST: ((16, 31),),
        Direction.WEST: ((0, 15),),
    },
}

_QUARTERS = {
    1: {
        Direction.NORTHEAST: (24, 31),
        Direction.NORTHWEST: (16, 23),
        Direction.SOUTHEAST: (8, 15),
        Direction.SOUTHWEST: (0, 7),
    },
    0: {
        Direction.NORTHEAST: (24, 31),
        Direction.NORTHWEST: (8, 15),
        Direction.SOUTHEAST: (16, 23),
        Direction.SOUTHWEST: (0, 7),
    },
}

# Quadrant by the top two bits of a digit, keyed by the digit's position % 2
_QUADRANTS = {
    0: (Direction.SOUTHWEST, Direction.NORTHWEST, Direction.SOUTHEAST, Direction.NORTHEAST),
    1: (Direction.SOUTHWEST, Direction.SOUTHEAST, Direction.NORTHWEST, Direction.NORTHEAST),
}


def _coerce_direction(direction: DirectionLike, allowed: Tuple[Direction, ...]) -> Direction:
    """Resolve a Direction or its string value, restricted to `allowed`."""
    allowed_values = [d.value for d in allowed]
    if isinstance(direction, Direction):
        resolved = direction
    elif isinstance(direction, str):
        try:
            resolved = Direction(direction.lower())
        except ValueError:
            raise InvalidDirectionError(direction, allowed_values) from None
    else:
        raise InvalidDirectionError(direction, allowed_values)

    if resolved not in allowed:
        raise InvalidDirectionError(direction, allowed_values)
    return resolved


def _require_geohash(geohash: str) -> None:
    if not geohash:
        raise InvalidGeohashError("Geohash must contain at least one character", geohash)


def encode_digit(number: int) -> str:
    """
    Return the geohash digit for a number between 0 and 31.

    Raises:
        InvalidDigitError: If number is outside 0..31
    """
    if not isinstance(number, int) or not 0 <= number < 32:
        raise InvalidDigitError(number)
    return ENCODING[number]


def decode_digit(digit: str) -> int:
    """
    Return the number between 0 and 31 for a geohash digit.

    Raises:
        InvalidDigitError: If digit is not in the geohash alphabet
    """
    try:
        return _DIGIT_VALUES[digit]
    except (KeyError, TypeError):
        raise InvalidDigitError(digit) from None


def encode(point: Point, precision: int = DEFAULT_PRECISION) -> str:
    """
    Encode a point to a geohash string.

    Args:
        point: Location to encode
        precision: Number of characters in geohash (default 8)

    Returns:
        Geohash string

    Example:
        >>> encode(Point(42.350072, -71.047656), precision=12)
        'drt2zm8ej9eg'

    Raises:
        InvalidCoordinateError: If lat/lon out of valid range
        InvalidPrecisionError: If precision < 1
    """
    if precision < 1:
        raise InvalidPrecisionError(f"Precision must be >= 1, got {precision}")
    latitude, longitude = point.latitude, point.longitude
    if not (-90 <= latitude <= 90) or not (-180 <= longitude <= 180):
        raise InvalidCoordinateError(latitude, longitude)

    lat_range = [-90.0, 90.0]
    lon_range = [-180.0, 180.0]

    geohash = []
    bits = 0
    bit_count = 0
    is_even = True  # Start with longitude

    while len(geohash) < precision:
        if is_even:  # Longitude
            mid = (lon_range[0] + lon_range[1]) / 2
            if longitude >= mid:
                bits |= (1 << (4 - bit_count))
                lon_range[0] = mid
            else:
                lon_range[1] = mid
        else:  # Latitude
            mid = (lat_range[0] + lat_range[1]) / 2
            if latitude >= mid:
                bits |= (1 << (4 - bit_count))
                lat_range[0] = mid
            else:
                lat_range[1] = mid

        is_even = not is_even
        bit_count += 1

        if bit_count == 5:
            geohash.append(ENCODING[bits])
            bits = 0
            bit_count = 0

    return ''.join(geohash)


def decode_box(geohash: str) -> Box:
    """
    Get the bounding box for a geohash.

    The empty string decodes to the whole globe.

    Args:
        geohash: Geohash string

    Returns:
        Box of the region the geohash denotes

    Example:
        >>> box = decode_box("s")
        >>> box.north, box.south, box.east, box.west
        (45.0, 0.0, 45.0, 0.0)
    """
    lat_range = [-90.0, 90.0]
    lon_range = [-180.0, 180.0]

    is_even = True

    for char in geohash:
        idx = decode_digit(char)

        for i in range(4, -1, -1):
            bit = (idx >> i) & 1

            if is_even:  # Longitude
                mid = (lon_range[0] + lon_range[1]) / 2
                if bit == 1:
                    lon_range[0] = mid
                else:
                    lon_range[1] = mid
            else:  # Latitude
                mid = (lat_range[0] + lat_range[1]) / 2
                if bit == 1:
                    lat_range[0] = mid
                else:
                    lat_range[1] = mid

            is_even = not is_even

    return Box(north=lat_range[1], south=lat_range[0], east=lon_range[1], west=lon_range[0])


def decode(geohash: str) -> Point:
    """Return the point at the center of the geohash box."""
    return decode_box(geohash).center()


def increment(geohash: str) -> Optional[str]:
    """
    Return the geohash immediately following this one, or None after the last.

    Example:
        >>> increment("38z")
        '390'
        >>> increment("z") is None
        True
    """
    _require_geohash(geohash)
    code = decode_digit(geohash[-1])
    base = geohash[:-1]

    if code < 31:
        return base + ENCODING[code + 1]
    if base:
        base = increment(base)
        return base + '0' if base else None
    return None


def neighbor(geohash: str, direction: DirectionLike) -> Optional[str]:
    """
    Return the adjacent geohash of the same precision in a cardinal direction.

    East and west wrap around the antimeridian. There is nothing north
    of the north pole or south of the south pole, so those return None.

    Args:
        geohash: Geohash string
        direction: One of Direction.NORTH, SOUTH, EAST or WEST

    Returns:
        Neighboring geohash, or None past a pole

    Raises:
        InvalidDirectionError: If direction is not cardinal
    """
    direction = _coerce_direction(direction, CARDINAL)
    _require_geohash(geohash)

    parity = len(geohash) % 2
    char = geohash[-1]
    code = decode_digit(char)
    base = geohash[:-1]

    if char in _BORDERS[parity][direction]:
        if base:
            base = neighbor(base, direction)
            if base is None:
                return None
        elif direction in (Direction.NORTH, Direction.SOUTH):
            return None

    return base + _NEIGHBORS[parity][direction][code]


def neighbors(geohash: str) -> Dict[Direction, Optional[str]]:
    """
    Return all eight neighbors of a geohash.

    Diagonals step north or south first and then east or west, so they
    are None wherever the north or south neighbor is.

    Example:
        >>> neighbors("drt2zm8")[Direction.NORTH]
        'drt2zmb'
    """
    north = neighbor(geohash, Direction.NORTH)
    south = neighbor(geohash, Direction.SOUTH)
    return {
        Direction.NORTH: north,
        Direction.SOUTH: south,
        Direction.EAST: neighbor(geohash, Direction.EAST),
        Direction.WEST: neighbor(geohash, Direction.WEST),
        Direction.NORTHEAST: neighbor(north, Direction.EAST) if north else None,
        Direction.NORTHWEST: neighbor(north, Direction.WEST) if north else None,
        Direction.SOUTHEAST: neighbor(south, Direction.EAST) if south else None,
        Direction.SOUTHWEST: neighbor(south, Direction.WEST) if south else None,
    }


def contains(geohash: str, point: Point) -> bool:
    """True if the point lies within the geohash box, edges included."""
    return decode_box(geohash).contains(point)


def quadrant(geohash: str, precision: Optional[int] = None) -> Optional[Direction]:
    """
    Return the quadrant of an ancestor that contains this geohash.

    The ancestor is the prefix of length `precision`, the immediate parent
    when omitted. Precision 0 gives the global quadrant.

    Examples:
        '00' is in the southwest quadrant of '0';
        'drt2zm8h1t3v' is in the northeast quadrant of 'drt2zm8h1t3';
        '9345' is northwest on the globe.

    Returns:
        Direction.NORTHEAST, NORTHWEST, SOUTHEAST or SOUTHWEST, or None
        when no ancestor of that precision exists (always for the empty code)

    Raises:
        InvalidPrecisionError: If precision is negative
    """
    if precision is None:
        # The empty code has no parent
        if not geohash:
            return None
        precision = len(geohash) - 1
    if precision < 0:
        raise InvalidPrecisionError(f"Quadrant precision must be >= 0, got {precision}")
    if precision >= len(geohash):
        return None

    index = decode_digit(geohash[precision]) // 8
    return _QUADRANTS[precision % 2][index]


def halve(geohash: str, direction: DirectionLike) -> "HashSet":
    """
    Cut a geohash into the region half its size lying toward `direction`.

    Returns:
        HashSet of one or two child ranges

    Raises:
        InvalidDirectionError: If direction is not cardinal
    """
    from geohash_index.core.hash_set import HashSet

    direction = _coerce_direction(direction, CARDINAL)

    region = HashSet()
    for low, high in _HALVES[len(geohash) % 2][direction]:
        region.add_range(geohash + ENCODING[low], geohash + ENCODING[high])
    return region


def quarter(geohash: str, direction: DirectionLike) -> "HashSet":
    """
    Reduce a geohash to the one quadrant lying toward `direction`.

    Returns:
        HashSet of a single child range

    Raises:
        InvalidDirectionError: If direction is not diagonal
    """
    from geohash_index.core.hash_set import HashSet

    direction = _coerce_direction(direction, DIAGONAL)
    low, high = _QUARTERS[len(geohash) % 2][direction]

    region = HashSet()
    region.add_range(geohash + ENCODING[low], geohash + ENCODING[high])
    return region


def cell_size(precision: int) -> Tuple[float, float]:
    """
    Exact angular size of a geohash cell at a given precision.

    Args:
        precision: Number of geohash characters

    Returns:
        Tuple of (lat_degrees, lon_degrees)

    Example:
        >>> cell_size(1)
        (45.0, 45.0)
    """
    if precision < 0:
        raise InvalidPrecisionError(f"Precision must be >= 0, got {precision}")
    bits = precision * 5
    lat_bits = bits // 2
    lon_bits = bits - lat_bits
    return 180.0 / (1 << lat_bits), 360.0 / (1 << lon_bits)
