"""Utilities for locating grid points in NetCDF files."""

import logging
from pathlib import Path
from typing import Optional, Tuple, Union

import xarray as xr

logger = logging.getLogger(__name__)

# Coordinate names tried in order when looking up the grid axes
LATITUDE_NAMES = ("lat", "latitude")
LONGITUDE_NAMES = ("lon", "longitude")


def format_coordinate(value: float, prefix: str = "") -> str:
    """
    Format a coordinate value for use in filenames.

    Args:
        value: Coordinate value (latitude or longitude)
        prefix: Optional prefix to add (e.g., 'lat' or 'lon')

    Returns:
        Formatted coordinate string (e.g., 'lat38p25' for 38.25, 'lonn0p50' for -0.5)
    """
    formatted = f"{value:.2f}".replace('.', 'p').replace('-', 'n')
    return f"{prefix}{formatted}"


def find_netcdf_file(
    directory: Path,
    name_pattern: str,
    latitude: Optional[float] = None,
    longitude: Optional[float] = None
) -> Path:
    """
    Find a NetCDF file whose name contains a pattern.

    When both coordinates are given, a file carrying them in its name
    (``..._lat38p50_lon240p75.nc``) wins; otherwise the most recently modified
    match is returned.

    Args:
        directory: Directory to search for ``*.nc`` files
        name_pattern: Substring the filename must contain
        latitude: Optional latitude to match in filenames
        longitude: Optional longitude to match in filenames

    Returns:
        Path to the matched file

    Raises:
        FileNotFoundError: If no file matches the pattern
    """
    directory = Path(directory)
    candidates = [p for p in directory.glob("*.nc") if name_pattern in p.name]

    if not candidates:
        raise FileNotFoundError(f"No file matching '{name_pattern}' found in {directory}")

    if latitude is not None and longitude is not None:
        lat_str = format_coordinate(latitude, "lat")
        lon_str = format_coordinate(longitude, "lon")
        for file_path in candidates:
            if lat_str in file_path.name and lon_str in file_path.name:
                logger.debug(f"Found exact coordinate match: {file_path}")
                return file_path

    newest_file = max(candidates, key=lambda p: p.stat().st_mtime)
    logger.debug(f"Selected newest matching file: {newest_file}")
    return newest_file


def _find_coordinate(ds: Union[xr.Dataset, xr.DataArray], names: Tuple[str, ...]) -> xr.DataArray:
    for name in names:
        if name in ds.coords:
            return ds.coords[name]
    raise KeyError(f"Dataset has none of the coordinates {list(names)}")


def extract_center_point(ds: Union[xr.Dataset, xr.DataArray]) -> Tuple[float, float]:
    """
    Get the coordinates of the grid centre.

    Even-length axes use the index just before the middle.

    Args:
        ds: Dataset or DataArray with lat/lon (or latitude/longitude) coordinates

    Returns:
        Tuple of (latitude, longitude)

    Raises:
        KeyError: If the latitude or longitude coordinate is missing
    """
    lat_coord = _find_coordinate(ds, LATITUDE_NAMES)
    lon_coord = _find_coordinate(ds, LONGITUDE_NAMES)

    lat_values = lat_coord.values.ravel()
    lon_values = lon_coord.values.ravel()

    lat = float(lat_values[(len(lat_values) - 1) // 2])
    lon = float(lon_values[(len(lon_values) - 1) // 2])

    logger.info(f"Center point coordinates: lat={lat}, lon={lon} "
                f"(from {len(lat_values)}×{len(lon_values)} grid)")
    return lat, lon


def load_point_location(file_path: Union[str, Path]) -> Tuple[float, float]:
    """
    Open a NetCDF file and return its grid centre.

    Args:
        file_path: Path to the NetCDF file

    Returns:
        Tuple of (latitude, longitude)

    Raises:
        FileNotFoundError: If the file does not exist
        KeyError: If the file has no latitude/longitude coordinates
    """
    file_path = Path(file_path)
    if not file_path.exists():
        raise FileNotFoundError(f"Data file not found: {file_path}")

    logger.info(f"Loading point location from {file_path}")
    with xr.open_dataset(file_path) as ds:
        return extract_center_point(ds)
