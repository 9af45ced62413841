"""
Tabular data helpers.

Provides bulk geohash encoding and decoding of pandas DataFrames.
"""
from geohash_index.data.frames import encode_dataframe, decode_dataframe

__all__ = [
    'encode_dataframe',
    'decode_dataframe',
]
