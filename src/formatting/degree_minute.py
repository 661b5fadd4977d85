"""
Degree/Minute Formatter Module

This module formats decimal degree values (latitudes, longitudes, bearings)
as degree/minute labels such as ``4°30'``.
"""

import logging
import math
import numbers

import numpy as np

from .number_formatter import NumberFormatter

# Configure logger
logger = logging.getLogger(__name__)

# Every float at or above this magnitude is a whole number
_WHOLE_FLOAT_LIMIT = 2.0 ** 52


def round_half_away_from_zero(value: float) -> int:
    """
    Round a finite float to the nearest integer, ties going away from zero.

    Python's built-in ``round`` rounds ties to even, so 0.5 -> 0 and
    2.5 -> 2. Here 0.5 -> 1, 2.5 -> 3 and -2.5 -> -3.

    Args:
        value: Finite floating-point value

    Returns:
        The rounded integer
    """
    magnitude = abs(value)
    whole = math.floor(magnitude)
    if magnitude - whole >= 0.5:
        whole += 1
    return -whole if value < 0 else whole


class DegreeMinuteFormatter(NumberFormatter):
    """
    Formats decimal degrees as ``degree°minute'``.

    The value is rounded to the nearest whole minute first; the sign comes
    from that rounded total, so anything that rounds to zero minutes is shown
    as ``0°`` without a sign. The minute part is left out when it is zero.

    Examples:
        >>> fmt = DegreeMinuteFormatter()
        >>> fmt.format(4.501)
        "4°30'"
        >>> fmt.format(-0.251)
        "-0°15'"
        >>> fmt.format(-0.001)
        '0°'
    """

    DEGREE_SYMBOL = "°"
    MINUTE_SYMBOL = "'"
    NAN_LABEL = "NaN"

    def format(self, value) -> str:
        """
        Format a decimal degree value.

        Integral inputs (``int`` and numpy integer scalars) are routed through
        `format_integer`.

        Args:
            value: A decimal degree value

        Returns:
            The formatted value. NaN returns ``"NaN"``; infinities return
            ``"Infinity"`` or ``"-Infinity"``.

        Raises:
            TypeError: If the value is not a real number (e.g. a string)
        """
        if isinstance(value, numbers.Integral):
            return self.format_integer(value)
        if not isinstance(value, numbers.Real):
            raise TypeError(f"Cannot format {type(value).__name__} value {value!r}; a real number is required")

        value = float(value)
        if math.isnan(value):
            return self.NAN_LABEL
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"

        # Round to the nearest minute; floats this large are whole degrees and
        # value * 60 could overflow
        if abs(value) >= _WHOLE_FLOAT_LIMIT:
            total_minutes = int(value) * 60
        else:
            total_minutes = round_half_away_from_zero(value * 60)

        degrees, minutes = divmod(abs(total_minutes), 60)

        sign = "-" if total_minutes < 0 else ""
        minute_part = f"{minutes}{self.MINUTE_SYMBOL}" if minutes > 0 else ""
        return f"{sign}{degrees}{self.DEGREE_SYMBOL}{minute_part}"

    def format_integer(self, value: int) -> str:
        """
        Format a whole number of degrees.

        Args:
            value: Integer degree value

        Returns:
            The formatted value (same as formatting ``float(value)``)
        """
        return self.format(float(value))

    def format_array(self, values) -> np.ndarray:
        """
        Format an array of decimal degrees, keeping its shape.

        Args:
            values: Array-like of decimal degree values

        Returns:
            numpy array of dtype ``object`` holding one label per element
        """
        values = np.asarray(values)
        if not np.issubdtype(values.dtype, np.number):
            raise TypeError(f"Cannot format array of dtype {values.dtype}")

        logger.debug(f"Formatting {values.size} values with shape {values.shape}")

        labels = np.empty(values.shape, dtype=object)
        for index, value in np.ndenumerate(values):
            labels[index] = self.format(value)
        return labels


# Shared instance for the module-level helper
_default_formatter = DegreeMinuteFormatter()


def format_degree_minute(value) -> str:
    """Format a decimal degree value with the default formatter."""
    return _default_formatter.format(value)
