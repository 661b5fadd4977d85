"""
Tick Formatter Module

This module adapts label formatters to matplotlib so plot axes can be labelled
in degree/minute notation.
"""

import logging
from typing import Optional

import matplotlib.pyplot as plt
from matplotlib.ticker import Formatter

from .degree_minute import DegreeMinuteFormatter
from .number_formatter import NumberFormatter

# Configure logger
logger = logging.getLogger(__name__)


class DegreeMinuteTickFormatter(Formatter):
    """
    Matplotlib tick formatter backed by a `NumberFormatter`.

    Args:
        formatter: Formatter producing the labels (defaults to a
            `DegreeMinuteFormatter`)
    """

    def __init__(self, formatter: Optional[NumberFormatter] = None):
        self.formatter = formatter or DegreeMinuteFormatter()

    def __call__(self, x, pos=None) -> str:
        return self.formatter.format(x)

    def format_data_short(self, value) -> str:
        return self.formatter.format(value)


def apply_degree_minute_axes(ax: plt.Axes,
                             axis: str = "both",
                             formatter: Optional[NumberFormatter] = None) -> plt.Axes:
    """
    Label the ticks of an axes in degree/minute notation.

    Args:
        ax: Matplotlib axes to modify
        axis: Which axis to format ('x', 'y' or 'both')
        formatter: Formatter to use (defaults to `DegreeMinuteFormatter`)

    Returns:
        The same axes, for chaining
    """
    if axis not in ("x", "y", "both"):
        raise ValueError(f"Invalid axis: {axis}. Must be one of ['x', 'y', 'both']")

    if axis in ("x", "both"):
        ax.xaxis.set_major_formatter(DegreeMinuteTickFormatter(formatter))
    if axis in ("y", "both"):
        ax.yaxis.set_major_formatter(DegreeMinuteTickFormatter(formatter))

    logger.debug(f"Applied degree/minute tick labels to axis '{axis}'")
    return ax
