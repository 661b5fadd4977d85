"""
Export Module

This module provides functions to export figures to disk.
"""

import logging
from pathlib import Path
from typing import Dict, Optional, Union, List

import matplotlib.pyplot as plt

# Configure logger
logger = logging.getLogger(__name__)

SUPPORTED_FORMATS = ('png', 'pdf', 'svg', 'jpg')


def export_figure(fig: plt.Figure,
                  output_dir: Union[str, Path],
                  filename: str,
                  formats: List[str] = None,
                  dpi: int = 300,
                  metadata: Optional[Dict[str, str]] = None,
                  close_after: bool = False) -> List[Path]:
    """
    Export a figure to disk in multiple formats.

    Args:
        fig: Matplotlib figure to export
        output_dir: Directory to save figure in
        filename: Base filename (without extension)
        formats: List of formats to save in (default: png and pdf)
        dpi: Resolution for raster formats
        metadata: Key/value pairs stamped in the figure corner
        close_after: Whether to close the figure after saving

    Returns:
        List of saved file paths
    """
    formats = formats or ['png', 'pdf']

    unsupported = [fmt for fmt in formats if fmt not in SUPPORTED_FORMATS]
    if unsupported:
        raise ValueError(f"Unsupported formats: {unsupported}. Must be among {list(SUPPORTED_FORMATS)}")

    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    if metadata:
        meta_string = ", ".join([f"{k}: {v}" for k, v in metadata.items()])
        fig.text(0.02, 0.01, meta_string, fontsize=6, alpha=0.7,
                 transform=fig.transFigure)

    saved_files = []
    for fmt in formats:
        output_path = output_dir / f"{filename}.{fmt}"
        logger.info(f"Saving figure to {output_path}")

        try:
            fig.savefig(output_path, dpi=dpi, bbox_inches='tight')
            saved_files.append(output_path)
        except (OSError, ValueError) as e:
            logger.error(f"Error saving figure to {output_path}: {e}")

    if close_after:
        plt.close(fig)

    return saved_files
