"""
Export geohash regions for downstream consumers.

A region (HashSet) is handed to a sorted key-value index as range-scan
keys, or drawn as geometry. This module turns a region into:

1. A range table (first, last, is_range) in member order
2. The flat list of every covered geohash
3. A GeoDataFrame with one box polygon per covered geohash
4. A single outline geometry of the whole region
"""
from typing import List

import pandas as pd
import geopandas as gpd
from shapely.ops import unary_union

from geohash_index.core.geohash import decode_box
from geohash_index.core.hash_set import HashSet
from geohash_index.utils.logging_config import get_logger

logger = get_logger(__name__)

RANGE_COLUMNS = ['first', 'last', 'is_range']


def region_frame(region: HashSet) -> pd.DataFrame:
    """
    Convert a region to a table of inclusive range-scan keys.

    A plain geohash becomes a row with first == last. A range keeps
    its endpoints. Since a geohash is a prefix of every code inside it,
    a consumer scans keys k with first <= k[:len(first)] <= last.

    Args:
        region: Geohash set to export

    Returns:
        DataFrame with columns first, last, is_range
    """
    rows = []
    for member in region:
        if isinstance(member, tuple):
            first, last = member
            rows.append({'first': first, 'last': last, 'is_range': True})
        else:
            rows.append({'first': member, 'last': member, 'is_range': False})

    return pd.DataFrame(rows, columns=RANGE_COLUMNS)


def expand_codes(region: HashSet) -> List[str]:
    """Return every geohash covered by the region, ranges expanded, in member order."""
    return list(region.codes())


def region_geodataframe(region: HashSet) -> gpd.GeoDataFrame:
    """
    Convert a region to a GeoDataFrame of geohash box polygons.

    Returns:
        GeoDataFrame with columns geohash, geometry in EPSG:4326
    """
    codes = expand_codes(region)
    geometries = [decode_box(code).to_polygon() for code in codes]

    logger.debug("region_geometries_built", members=len(region), geohashes=len(codes))

    return gpd.GeoDataFrame({'geohash': codes}, geometry=geometries, crs='EPSG:4326')


def region_outline(region: HashSet):
    """Return the union of all box polygons in the region as one Shapely geometry."""
    return unary_union([decode_box(code).to_polygon() for code in expand_codes(region)])
