"""
Bulk geohash encoding and decoding for pandas DataFrames.

Used to key tabular point data by geohash before loading it into a
sorted index, and to turn geohash-keyed rows back into coordinates.
"""
import pandas as pd

from geohash_index.core.geohash import DEFAULT_PRECISION, decode, encode
from geohash_index.core.point import Point
from geohash_index.utils.error_handling import handle_empty_dataframe, validate_columns_exist
from geohash_index.utils.exceptions import DataValidationError, GeometryError, InvalidGeohashError
from geohash_index.utils.logging_config import get_logger

logger = get_logger(__name__)


@handle_empty_dataframe()
def encode_dataframe(
    df: pd.DataFrame,
    precision: int = DEFAULT_PRECISION,
    lat_col: str = "latitude",
    lon_col: str = "longitude",
    output_col: str = "geohash",
) -> pd.DataFrame:
    """
    Add a geohash column computed from latitude/longitude columns.

    Args:
        df: DataFrame with coordinate columns
        precision: Geohash length
        lat_col: Latitude column name
        lon_col: Longitude column name
        output_col: Name of the geohash column to write

    Returns:
        Copy of df with the geohash column

    Raises:
        DataValidationError: If columns are missing or coordinates are invalid

    Example:
        >>> df = pd.DataFrame({'latitude': [42.350072], 'longitude': [-71.047656]})
        >>> encode_dataframe(df, precision=12)['geohash'].tolist()
        ['drt2zm8ej9eg']
    """
    validate_columns_exist(df, {lat_col, lon_col}, df_name="Point data")

    invalid = df[lat_col].isna() | df[lon_col].isna()
    if invalid.any():
        raise DataValidationError(
            f"Null coordinates in {lat_col}/{lon_col}",
            invalid_rows=int(invalid.sum()),
        )

    try:
        codes = [
            encode(Point(float(lat), float(lon)), precision)
            for lat, lon in zip(df[lat_col], df[lon_col])
        ]
    except GeometryError as e:
        raise DataValidationError(f"Cannot encode coordinates: {e}") from e

    result = df.copy()
    result[output_col] = codes

    logger.info(
        "dataframe_encoded",
        rows=len(result),
        precision=precision,
        unique_geohashes=result[output_col].nunique(),
    )
    return result


@handle_empty_dataframe()
def decode_dataframe(
    df: pd.DataFrame,
    geohash_col: str = "geohash",
    lat_col: str = "latitude",
    lon_col: str = "longitude",
) -> pd.DataFrame:
    """
    Add box-center latitude/longitude columns from a geohash column.

    Returns:
        Copy of df with the coordinate columns

    Raises:
        DataValidationError: If the geohash column is missing, or a code
            is null, empty or not a valid geohash
    """
    validate_columns_exist(df, {geohash_col}, df_name="Geohash data")

    codes = df[geohash_col]
    invalid = codes.isna() | (codes.astype(str).str.len() == 0)
    if invalid.any():
        raise DataValidationError(
            f"Null or empty geohashes in {geohash_col}",
            invalid_rows=int(invalid.sum()),
        )

    try:
        centers = [decode(str(code)) for code in codes]
    except InvalidGeohashError as e:
        raise DataValidationError(f"Cannot decode geohashes: {e}") from e

    result = df.copy()
    result[lat_col] = [p.latitude for p in centers]
    result[lon_col] = [p.longitude for p in centers]

    logger.info("dataframe_decoded", rows=len(result))
    return result
