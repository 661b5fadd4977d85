"""
Location Map Module

This module provides functions to visualize the geographical location of study points
on axes labelled in degree/minute notation.
"""

import logging
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple, Union

import matplotlib.pyplot as plt
import numpy as np

from formatting.ticker import apply_degree_minute_axes
from utils.geo_utils import format_coordinates_degree_minute, normalize_longitude

from .export import export_figure

# Configure logger
logger = logging.getLogger(__name__)


class LocationMapPlotter:
    """
    Class for creating location maps of study points.
    """

    def __init__(
            self,
            output_dir: Union[str, Path],
            dpi: int = 300,
            figsize: Tuple[float, float] = (8, 8)
    ):
        """
        Initialize the plotter.

        Args:
            output_dir: Directory to store output figures
            dpi: Resolution for saved figures
            figsize: Figure size (width, height) in inches
        """
        self.output_dir = Path(output_dir)
        self.dpi = dpi
        self.figsize = figsize

        # Degree/minute label of the most recently plotted point
        self.location_str = None

        # Create output directory if it doesn't exist
        self.output_dir.mkdir(parents=True, exist_ok=True)

        logger.info(f"Initialized {self.__class__.__name__} writing to {self.output_dir}")

    def plot_location_map(self,
                          latitude: float,
                          longitude: float,
                          buffer: float = 1.0,
                          track: Optional[Sequence[Tuple[float, float]]] = None) -> plt.Figure:
        """
        Create a map showing the location of the study point.

        Args:
            latitude: Latitude of study point
            longitude: Longitude of study point
            buffer: Buffer around the point in degrees for map extent
            track: Optional sequence of (latitude, longitude) pairs drawn as a line

        Returns:
            Matplotlib figure object
        """
        if buffer <= 0:
            raise ValueError(f"Invalid buffer: {buffer}. Must be positive")

        longitude = normalize_longitude(longitude)
        _, _, location_str = format_coordinates_degree_minute(latitude, longitude)
        self.location_str = location_str

        logger.info(f"Creating location map for coordinates: {location_str}")

        fig, ax = plt.subplots(figsize=self.figsize)

        ax.set_xlim(longitude - buffer, longitude + buffer)
        ax.set_ylim(max(latitude - buffer, -90.0), min(latitude + buffer, 90.0))
        ax.set_aspect('equal', adjustable='box')

        if track:
            track_arr = np.asarray(track, dtype=float)
            ax.plot(track_arr[:, 1], track_arr[:, 0], '-', color='gray', linewidth=1.0, label='Track')

        # Plot the location point with a circle around it
        ax.plot(longitude, latitude, 'o', markersize=10, color='red', label='Study point')
        theta = np.linspace(0, 2 * np.pi, 100)
        circle_radius = buffer / 4
        ax.plot(longitude + circle_radius * np.cos(theta),
                latitude + circle_radius * np.sin(theta), 'r-', linewidth=1.5)

        apply_degree_minute_axes(ax)
        ax.grid(True, linewidth=0.5, color='gray', alpha=0.5, linestyle='--')
        ax.set_xlabel('Longitude')
        ax.set_ylabel('Latitude')
        ax.set_title(f"Study location: {location_str}")

        if track:
            ax.legend(loc='upper right')

        return fig

    def tick_labels(self, fig: plt.Figure) -> Tuple[List[str], List[str]]:
        """
        Return the rendered x and y tick labels of a location map.

        Args:
            fig: Figure produced by `plot_location_map`

        Returns:
            Tuple of (longitude labels, latitude labels)
        """
        ax = fig.axes[0]
        fig.canvas.draw()
        xlabels = [t.get_text() for t in ax.get_xticklabels()]
        ylabels = [t.get_text() for t in ax.get_yticklabels()]
        return xlabels, ylabels

    def save(self,
             fig: plt.Figure,
             filename: str,
             formats: List[str] = None,
             metadata: Optional[Dict[str, str]] = None) -> List[Path]:
        """
        Save a figure to the output directory.

        The degree/minute location of the last plotted point is stamped in the
        figure corner unless `metadata` already has a 'Location' entry.

        Args:
            fig: Figure to save
            filename: Base filename (without extension)
            formats: List of formats to save in
            metadata: Extra key/value pairs to stamp on the figure

        Returns:
            List of saved file paths
        """
        stamp = {}
        if self.location_str is not None:
            stamp['Location'] = self.location_str
        stamp.update(metadata or {})

        return export_figure(fig, self.output_dir, filename, formats=formats,
                             dpi=self.dpi, metadata=stamp, close_after=True)
