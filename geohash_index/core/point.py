"""
Geographic points and great-circle distance math.

A point is a latitude/longitude pair in decimal degrees. Latitude runs
from -90 (south pole) through 0 (equator) to 90 (north pole); longitude
runs from -180 at the antimeridian, through 0 at Greenwich, to 180.
Distances are in kilometres on a spherical earth.
"""
import math
from dataclasses import dataclass


# Earth's mean radius in kilometres
EARTH_RADIUS_KM = 6371.0

# Below this the trigonometry of distance_to_longitude degenerates
_DEGENERACY_EPSILON = 1e-12


@dataclass(frozen=True)
class Point:
    """A location on the earth denoted by latitude and longitude."""
    latitude: float
    longitude: float

    def geohash(self, precision: int = 8) -> str:
        """Encode this point as a geohash; see geohash.encode."""
        from geohash_index.core.geohash import encode

        return encode(self, precision)

    def distance_to_point(self, other: "Point") -> float:
        """
        Great-circle distance to another point.

        Uses the spherical law of cosines, accurate to about a metre
        with 64-bit floats.

        Args:
            other: Destination point

        Returns:
            Distance in kilometres

        Example:
            >>> round(Point(0, 0).distance_to_point(Point(0, 1)), 1)
            111.2
        """
        lat1 = math.radians(self.latitude)
        lon1 = math.radians(self.longitude)
        lat2 = math.radians(other.latitude)
        lon2 = math.radians(other.longitude)

        cos_angle = (math.sin(lat1) * math.sin(lat2) +
                     math.cos(lat1) * math.cos(lat2) * math.cos(lon1 - lon2))

        # Rounding can push identical points just past 1.0
        cos_angle = max(-1.0, min(1.0, cos_angle))

        return math.acos(cos_angle) * EARTH_RADIUS_KM

    def distance_to_latitude(self, latitude: float) -> float:
        """Distance in km to the parallel at `latitude`, measured along this meridian."""
        return self.distance_to_point(Point(latitude, self.longitude))

    def distance_to_longitude(self, longitude: float) -> float:
        """
        Shortest distance from this point to the meridian at `longitude`.

        The closest point lies on the meridian's great circle, found via
        the equatorial point perpendicular to it. Two degenerate cases are
        handled explicitly:

        - The point is 90 degrees of longitude from the meridian, on the
          perpendicular great circle. The distance is a quarter
          circumference, signed by hemisphere.
        - The point sits on a pole. Every meridian passes through it, so
          the distance is 0.

        Args:
            longitude: Meridian longitude in degrees (any value, wraps)

        Returns:
            Distance in kilometres

        References:
            http://williams.best.vwh.net/avform.htm#Int
        """
        lon3 = math.radians(longitude)

        lat1 = math.radians(self.latitude)
        lon1 = math.radians(self.longitude)

        # Equatorial point perpendicular to the meridian's great circle
        lat2 = 0.0
        lon2 = lon3 + math.pi / 2

        if abs(math.sin(lon1 - lon2)) < _DEGENERACY_EPSILON:
            return (1 if lat1 >= 0 else -1) * EARTH_RADIUS_KM * math.pi / 2
        if math.pi / 2 - abs(lat1) < _DEGENERACY_EPSILON:
            return 0.0

        lat3 = math.atan(
            (math.sin(lat1) * math.cos(lat2) * math.sin(lon3 - lon2) -
             math.sin(lat2) * math.cos(lat1) * math.sin(lon3 - lon1)) /
            (math.cos(lat1) * math.cos(lat2) * math.sin(lon1 - lon2))
        )

        return self.distance_to_point(Point(math.degrees(lat3), math.degrees(lon3)))
