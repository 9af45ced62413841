"""
Output generators for geohash-index.

This package contains modules for exporting geohash regions as
range-scan key tables and as geometry.
"""

from geohash_index.outputs.regions import (
    region_frame,
    expand_codes,
    region_geodataframe,
    region_outline,
)

__all__ = [
    'region_frame',
    'expand_codes',
    'region_geodataframe',
    'region_outline',
]
