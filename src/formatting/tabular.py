"""
Tabular Formatting Module

This module applies degree/minute formatting to pandas and xarray containers.
"""

import logging

import numpy as np
import pandas as pd
import xarray as xr

from .degree_minute import DegreeMinuteFormatter

# Configure logger
logger = logging.getLogger(__name__)


def _check_numeric(dtype, what: str) -> None:
    if not np.issubdtype(dtype, np.number):
        raise TypeError(f"Cannot format {what} of dtype {dtype}; a numeric dtype is required")


def format_series(series: pd.Series, formatter: DegreeMinuteFormatter = None) -> pd.Series:
    """
    Format a Series of decimal degrees.

    Args:
        series: Numeric Series (NaN allowed)
        formatter: Formatter to use (defaults to `DegreeMinuteFormatter`)

    Returns:
        Series of labels with the same index, named ``<name>_dm``
    """
    _check_numeric(series.dtype, "series")
    formatter = formatter or DegreeMinuteFormatter()

    name = f"{series.name}_dm" if series.name is not None else None
    labels = [formatter.format(v) for v in series.to_numpy()]

    logger.debug(f"Formatted {len(labels)} values from series {series.name!r}")
    return pd.Series(labels, index=series.index, name=name, dtype=object)


def format_dataarray(da: xr.DataArray, formatter: DegreeMinuteFormatter = None) -> xr.DataArray:
    """
    Format a DataArray of decimal degrees.

    Args:
        da: Numeric DataArray (NaN allowed)
        formatter: Formatter to use (defaults to `DegreeMinuteFormatter`)

    Returns:
        DataArray of labels with the same dims and coordinates
    """
    _check_numeric(da.dtype, "DataArray")
    formatter = formatter or DegreeMinuteFormatter()

    labels = xr.apply_ufunc(formatter.format_array, da)
    labels.name = f"{da.name}_dm" if da.name is not None else None
    labels.attrs = {"long_name": "degree/minute label"}
    return labels
