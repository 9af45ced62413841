"""
Shared fixtures for geohash-index unit tests.
"""
import pytest

from geohash_index.core.point import Point


# Known 12-character encodings: globe extremes, quadrant corners and real places
KNOWN_ENCODINGS = [
    (0.0, 0.0, "s00000000000"),
    (45.0, 90.0, "y00000000000"),
    (45.0, -90.0, "f00000000000"),
    (-45.0, 90.0, "q00000000000"),
    (-45.0, -90.0, "600000000000"),
    (90.0, 180.0, "zzzzzzzzzzzz"),
    (90.0, -180.0, "bpbpbpbpbpbp"),
    (-90.0, 180.0, "pbpbpbpbpbpb"),
    (-90.0, -180.0, "000000000000"),
    (42.350072, -71.047656, "drt2zm8ej9eg"),
    (38.898632, -77.036541, "dqcjqcr8yqxd"),
    (-23.442503, -58.443832, "6ey6wh6t808q"),
    (47.516231, 14.550072, "u26q7454172n"),
    (19.856270, 102.495496, "w78buqdznjj0"),
]

# Mid-latitude centers, away from the poles and the antimeridian
MID_LATITUDE_HASHES = [
    "drt2zm8ej9eg",
    "dqcjqcr8yqxd",
    "6ey6wh6t808q",
    "u26q7454172n",
    "w78buqdznjj0",
]


@pytest.fixture(params=KNOWN_ENCODINGS, ids=[code for _, _, code in KNOWN_ENCODINGS])
def known_encoding(request):
    """(Point, 12-character geohash) pairs."""
    latitude, longitude, code = request.param
    return Point(latitude, longitude), code


@pytest.fixture(params=[code for _, _, code in KNOWN_ENCODINGS])
def sample_hash(request):
    """Full-precision geohashes spread over the globe."""
    return request.param


@pytest.fixture(params=MID_LATITUDE_HASHES)
def mid_latitude_hash(request):
    return request.param
