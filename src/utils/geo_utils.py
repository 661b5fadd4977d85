"""Geographic coordinates utility functions."""

import math
from typing import Tuple

from formatting.degree_minute import DegreeMinuteFormatter, round_half_away_from_zero

_formatter = DegreeMinuteFormatter()


def normalize_longitude(longitude: float) -> float:
    """
    Wrap a longitude into the (-180, 180] range.

    Args:
        longitude: Longitude value in decimal degrees (e.g. 0-360 grids)

    Returns:
        Equivalent longitude in (-180, 180]
    """
    if math.isnan(longitude):
        return longitude
    wrapped = ((longitude + 180.0) % 360.0) - 180.0
    return 180.0 if wrapped == -180.0 else wrapped


def _check_latitude(latitude: float) -> None:
    if not math.isnan(latitude) and not -90.0 <= latitude <= 90.0:
        raise ValueError(f"Invalid latitude: {latitude}. Must be within [-90, 90]")


def format_coordinates_cardinal(latitude: float, longitude: float, precision: int = 2) -> Tuple[str, str, str]:
    """
    Format geographic coordinates in cardinal format (N/S, E/W).

    Args:
        latitude: Latitude value in decimal degrees
        longitude: Longitude value in decimal degrees
        precision: Number of decimal places to display

    Returns:
        Tuple containing (latitude string, longitude string, combined location string)
    """
    _check_latitude(latitude)

    lat_dir = "N" if latitude >= 0 else "S"
    lat_str = f"{abs(latitude):.{precision}f}°{lat_dir}"

    # Values >180 are western longitudes on 0-360 grids
    adj_lon = normalize_longitude(longitude)
    lon_dir = "E" if adj_lon >= 0 else "W"
    lon_str = f"{abs(adj_lon):.{precision}f}°{lon_dir}"

    return lat_str, lon_str, f"{lat_str}, {lon_str}"


def _degree_minute_cardinal(value: float, positive: str, negative: str) -> str:
    if math.isnan(value):
        return DegreeMinuteFormatter.NAN_LABEL
    # Hemisphere follows the rounded minute total so "0°" never gets S or W
    direction = negative if round_half_away_from_zero(value * 60) < 0 else positive
    return f"{_formatter.format(abs(value))}{direction}"


def format_coordinates_degree_minute(latitude: float, longitude: float) -> Tuple[str, str, str]:
    """
    Format geographic coordinates as degree/minute labels with a cardinal suffix.

    Args:
        latitude: Latitude value in decimal degrees
        longitude: Longitude value in decimal degrees

    Returns:
        Tuple containing (latitude string, longitude string, combined location string),
        e.g. ("38°15'N", "0°30'W", "38°15'N, 0°30'W")
    """
    _check_latitude(latitude)

    lat_str = _degree_minute_cardinal(latitude, "N", "S")
    lon_str = _degree_minute_cardinal(normalize_longitude(longitude), "E", "W")

    return lat_str, lon_str, f"{lat_str}, {lon_str}"
