"""
Visualization Package

This package provides plotting tools that label geographic axes in
degree/minute notation.
"""

from .location_map import LocationMapPlotter
from .export import export_figure

__all__ = [
    'LocationMapPlotter',
    'export_figure'
]
