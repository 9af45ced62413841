"""
Axis-aligned latitude/longitude bounding boxes.
"""
from dataclasses import dataclass

from shapely.geometry import Polygon

from geohash_index.core.point import Point
from geohash_index.utils.exceptions import GeometryError


@dataclass(frozen=True)
class Box:
    """
    Circumscribes an area of the earth by its north, south, east and west edges.

    Boxes are values: widening one means building a new box. East may
    exceed 180 (or west fall below -180) for a box that has been widened
    across the antimeridian.
    """
    north: float
    south: float
    east: float
    west: float

    def __post_init__(self):
        if self.north < self.south:
            raise GeometryError(f"Box north {self.north} is below south {self.south}")
        if self.east < self.west:
            raise GeometryError(f"Box east {self.east} is below west {self.west}")

    @classmethod
    def from_corners(cls, p1: Point, p2: Point) -> "Box":
        """Build the box spanned by two opposite corners, in either order."""
        return cls(
            north=max(p1.latitude, p2.latitude),
            south=min(p1.latitude, p2.latitude),
            east=max(p1.longitude, p2.longitude),
            west=min(p1.longitude, p2.longitude),
        )

    def center(self) -> Point:
        return Point((self.north + self.south) / 2, (self.east + self.west) / 2)

    def northeast(self) -> Point:
        return Point(self.north, self.east)

    def northwest(self) -> Point:
        return Point(self.north, self.west)

    def southeast(self) -> Point:
        return Point(self.south, self.east)

    def southwest(self) -> Point:
        return Point(self.south, self.west)

    def contains(self, point: Point) -> bool:
        """True if the point lies inside the box or on any of its edges."""
        return (self.south <= point.latitude <= self.north and
                self.west <= point.longitude <= self.east)

    def to_polygon(self) -> Polygon:
        """
        Convert the box to a Shapely Polygon in (lon, lat) order.

        Example:
            >>> poly = Box(north=1, south=0, east=1, west=0).to_polygon()
            >>> poly.area
            1.0
        """
        return Polygon([
            (self.west, self.south),
            (self.west, self.north),
            (self.east, self.north),
            (self.east, self.south),
            (self.west, self.south)
        ])
