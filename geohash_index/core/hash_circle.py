"""
Geohash regions in widening circles around a center geohash.

A HashCircle starts as the single cell of its center geohash. Each
expansion drops characters from the center code and assembles the
shorter cell plus the halves and quarter of its neighbors that square
off a box around the original center. max_radius is the distance within
which every point is guaranteed to be in the region, so a proximity
search can scan the region's codes and filter by exact distance.

NOTE: This does not work well near the poles, where neighbor and
quadrant math degenerates. Do not rely on it for polar searches.
"""
from typing import Optional, Tuple

from geohash_index.core import geohash as gh
from geohash_index.core.box import Box
from geohash_index.core.geohash import Direction
from geohash_index.core.hash_set import HashSet
from geohash_index.core.point import Point
from geohash_index.utils.exceptions import InvalidGeohashError, InvalidPrecisionError
from geohash_index.utils.logging_config import get_logger

logger = get_logger(__name__)


def _square_off(prefix: str, quadrant: Optional[Direction]) -> Tuple[HashSet, Box]:
    """
    Build the region around `prefix` on the side of `quadrant`.

    The region is the prefix cell, half of the neighbor toward the
    quadrant's latitude side, half of the neighbor toward its longitude
    side, and the quarter of the diagonal neighbor that fills the
    corner. Returns the region and the box it covers.
    """
    box = gh.decode_box(prefix)
    dlat = box.north - box.south
    dlon = box.east - box.west
    north, south, east, west = box.north, box.south, box.east, box.west

    region = HashSet()
    region.add(prefix)

    if quadrant in (Direction.NORTHEAST, Direction.NORTHWEST):
        north_hash = gh.neighbor(prefix, Direction.NORTH)
        if north_hash:
            region.add_set(gh.halve(north_hash, Direction.SOUTH))
            if quadrant == Direction.NORTHEAST:
                corner = gh.neighbor(north_hash, Direction.EAST)
                region.add_set(gh.quarter(corner, Direction.SOUTHWEST))
            else:
                corner = gh.neighbor(north_hash, Direction.WEST)
                region.add_set(gh.quarter(corner, Direction.SOUTHEAST))
            north += dlat / 2
    else:
        south_hash = gh.neighbor(prefix, Direction.SOUTH)
        if south_hash:
            region.add_set(gh.halve(south_hash, Direction.NORTH))
            if quadrant == Direction.SOUTHEAST:
                corner = gh.neighbor(south_hash, Direction.EAST)
                region.add_set(gh.quarter(corner, Direction.NORTHWEST))
            else:
                corner = gh.neighbor(south_hash, Direction.WEST)
                region.add_set(gh.quarter(corner, Direction.NORTHEAST))
            south -= dlat / 2

    if quadrant in (Direction.NORTHEAST, Direction.SOUTHEAST):
        region.add_set(gh.halve(gh.neighbor(prefix, Direction.EAST), Direction.WEST))
        east += dlon / 2
    else:
        region.add_set(gh.halve(gh.neighbor(prefix, Direction.WEST), Direction.EAST))
        west -= dlon / 2

    return region, Box(north=north, south=south, east=east, west=west)


def _reliable_radius(center: Point, bounds: Box) -> float:
    """Distance from center to the nearest edge of bounds, ignoring polar edges."""
    radius = min(center.distance_to_longitude(bounds.east),
                 center.distance_to_longitude(bounds.west))
    if bounds.north < 90:
        radius = min(center.distance_to_latitude(bounds.north), radius)
    if bounds.south > -90:
        radius = min(center.distance_to_latitude(bounds.south), radius)
    return radius


class HashCircle:
    """
    Computes geohash sets in widening circles around a center geohash.

    Attributes:
        center_geohash: Full-precision geohash the circle is built around
        precision: Length of the current center prefix; only decreases
        geobox: Box of the current center prefix
        center: Center of the original geohash box
        region: HashSet covering the circle at the current precision
        bounds: Box the region covers
        max_radius: Radius in km within which the region is reliable

    Example:
        >>> circle = HashCircle("drt2zm8ej9eg")
        >>> while circle.max_radius < 5.0 and circle.expand():
        ...     pass
        >>> keys = circle.region.export()
    """

    def __init__(self, center_geohash: str):
        if not center_geohash:
            raise InvalidGeohashError("HashCircle needs a non-empty center geohash", center_geohash)

        self._center_geohash = center_geohash
        self._precision = len(center_geohash)

        self._geobox = gh.decode_box(center_geohash)
        self._center = self._geobox.center()
        self._bounds = self._geobox

        # Begin with a set including only the box itself
        self._region = HashSet()
        self._region.add(center_geohash)

        # The initial bound only looks at the east edge
        self._max_radius = self._center.distance_to_longitude(self._geobox.east)

    @property
    def center_geohash(self) -> str:
        return self._center_geohash

    @property
    def precision(self) -> int:
        return self._precision

    @property
    def geobox(self) -> Box:
        return self._geobox

    @property
    def center(self) -> Point:
        return self._center

    @property
    def region(self) -> HashSet:
        return self._region

    @property
    def bounds(self) -> Box:
        return self._bounds

    @property
    def max_radius(self) -> float:
        """
        Maximum reliable radius in km for a geohash query built from this circle.

        Some points in the region lie outside this radius (the corners).
        """
        return self._max_radius

    def distance_to_point(self, point: Point) -> float:
        """Distance in km from the circle's center to a point."""
        return self._center.distance_to_point(point)

    def contains(self, point: Point) -> bool:
        """True if the point is inside the current geohash region."""
        return self._region.contains(point)

    def expand(self, amount: int = 1) -> bool:
        """
        Grow the circle by dropping `amount` characters from the center prefix.

        The prefix never shrinks below one character; the circle refuses
        to grow to cover the whole globe.

        Args:
            amount: Characters to drop (>= 1)

        Returns:
            True if the circle grew, False if it is already at precision 1
        """
        if amount < 1:
            raise InvalidPrecisionError(f"Expansion amount must be >= 1, got {amount}")
        if self._precision == 1:
            logger.debug("circle_expand_refused", center_geohash=self._center_geohash)
            return False

        precision = max(self._precision - amount, 1)
        prefix = self._center_geohash[:precision]
        quadrant = gh.quadrant(self._center_geohash, precision)

        region, bounds = _square_off(prefix, quadrant)

        self._precision = precision
        self._geobox = gh.decode_box(prefix)
        self._region = region
        self._bounds = bounds
        self._max_radius = _reliable_radius(self._center, bounds)

        logger.debug(
            "circle_expanded",
            center_geohash=self._center_geohash,
            precision=precision,
            quadrant=quadrant.value,
            members=len(region),
            max_radius_km=round(self._max_radius, 6),
        )
        return True


def cover_radius(center_geohash: str, radius_km: float, step: int = 1) -> HashCircle:
    """
    Build a circle around a geohash that reliably covers `radius_km`.

    Expands by `step` characters at a time until max_radius reaches the
    requested radius or the circle refuses to grow.

    Args:
        center_geohash: Geohash at the search center
        radius_km: Search radius in kilometres
        step: Characters dropped per expansion

    Returns:
        The expanded HashCircle; check max_radius when the radius may
        exceed what a one-character prefix can cover
    """
    circle = HashCircle(center_geohash)
    while circle.max_radius < radius_km:
        if not circle.expand(step):
            logger.warning(
                "circle_radius_not_reached",
                center_geohash=center_geohash,
                radius_km=radius_km,
                max_radius_km=circle.max_radius,
            )
            break

    logger.debug(
        "circle_covered",
        center_geohash=center_geohash,
        radius_km=radius_km,
        precision=circle.precision,
        max_radius_km=circle.max_radius,
    )
    return circle
