"""
Formatting Module

This module provides label formatters for angular values, including the
degree/minute notation used on map axes.

Classes:
    NumberFormatter: Abstract base class for all label formatters
    DegreeMinuteFormatter: Formats decimal degrees as degree/minute labels
    DegreeMinuteTickFormatter: Matplotlib tick formatter wrapping a formatter

Functions:
    format_degree_minute: Format one value with the default formatter
    round_half_away_from_zero: Round to nearest integer, ties away from zero
    apply_degree_minute_axes: Install degree/minute tick labels on an axes
    format_series: Format a pandas Series of decimal degrees
    format_dataarray: Format an xarray DataArray of decimal degrees
"""

from .number_formatter import NumberFormatter
from .degree_minute import DegreeMinuteFormatter, format_degree_minute, round_half_away_from_zero
from .ticker import DegreeMinuteTickFormatter, apply_degree_minute_axes
from .tabular import format_series, format_dataarray

__all__ = [
    'NumberFormatter',
    'DegreeMinuteFormatter',
    'format_degree_minute',
    'round_half_away_from_zero',
    'DegreeMinuteTickFormatter',
    'apply_degree_minute_axes',
    'format_series',
    'format_dataarray'
]
