"""
Number Formatter Module

This module defines the abstract base class for all label formatters used to
annotate plot axes and tables.
"""

import logging
from abc import ABC, abstractmethod
from typing import Iterable, List

import numpy as np

# Configure logger
logger = logging.getLogger(__name__)


class NumberFormatter(ABC):
    """
    Abstract base class for objects that turn a number into a display label.

    Subclasses only need to implement `format`. Formatters are callable so they
    can be handed directly to APIs expecting a plain function (for example
    ``pandas.Series.map``).
    """

    @abstractmethod
    def format(self, value) -> str:
        """
        Format a single numeric value.

        Args:
            value: Number to format

        Returns:
            The formatted label
        """

    def format_many(self, values: Iterable) -> List[str]:
        """
        Format every value of an iterable, preserving order.

        Args:
            values: Iterable of numbers (list, tuple, numpy array of any shape)

        Returns:
            List of labels, one per element (arrays are flattened in C order)
        """
        if isinstance(values, np.ndarray):
            values = values.ravel()
        return [self.format(v) for v in values]

    def __call__(self, value) -> str:
        return self.format(value)
