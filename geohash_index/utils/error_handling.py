"""
DataFrame guards for the bulk geohash helpers.
"""
from functools import wraps
from typing import Any, Callable, Iterable, Optional

import pandas as pd

from geohash_index.utils.exceptions import DataValidationError
from geohash_index.utils.logging_config import get_logger

logger = get_logger(__name__)


def _first_dataframe(args, kwargs) -> Optional[pd.DataFrame]:
    for value in list(args) + list(kwargs.values()):
        if isinstance(value, pd.DataFrame):
            return value
    return None


def handle_empty_dataframe(return_value: Any = None):
    """
    Skip the wrapped function when its DataFrame argument has no rows.

    Parameters
    ----------
    return_value : Any
        Returned instead of calling the function. When None, a copy of
        the empty input is returned so column layout is preserved.

    Returns
    -------
    Callable
        Decorator
    """
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args, **kwargs):
            df = _first_dataframe(args, kwargs)
            if df is None or len(df) > 0:
                return func(*args, **kwargs)

            logger.warning("empty_dataframe_skipped", function=func.__name__, columns=list(df.columns))
            return df.copy() if return_value is None else return_value
        return wrapper
    return decorator


def validate_columns_exist(df: pd.DataFrame, required_columns: Iterable[str], df_name: str = "DataFrame") -> None:
    """
    Raise DataValidationError if any required column is missing.

    The message lists the missing and available columns.
    """
    missing = set(required_columns) - set(df.columns)
    if missing:
        raise DataValidationError(
            f"{df_name} missing required columns: {sorted(missing)}. "
            f"Available columns: {sorted(map(str, df.columns))}",
            details={'missing': sorted(missing)},
        )
