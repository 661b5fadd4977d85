#!/usr/bin/env python
"""
Degree/Minute Formatting Script

This script formats decimal degree values in degree/minute notation. Values can
come from the command line, a CSV column or the grid centre of a NetCDF file,
and a location map with degree/minute axes can be written for a point.

Example usage:
    python format_degrees.py 4.501 -0.251 nan
    python format_degrees.py --csv stations.csv --column latitude --output stations_dm.csv
    python format_degrees.py --netcdf data/raw/historical/cmip6_historical_temperature.nc
    python format_degrees.py --plot figures --lat 38.25 --lon -0.5
"""

import sys
import logging
import argparse
from pathlib import Path
from typing import List, Optional

import pandas as pd

# Add the source directory to path for importing project modules
sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))

from formatting.degree_minute import DegreeMinuteFormatter  # noqa: E402
from formatting.tabular import format_series  # noqa: E402
from utils.geo_utils import format_coordinates_degree_minute  # noqa: E402
from utils.netcdf_utils import load_point_location  # noqa: E402
from visualization.location_map import LocationMapPlotter  # noqa: E402

logger = logging.getLogger("format_degrees")


def build_parser() -> argparse.ArgumentParser:
    """Create the command-line parser."""
    parser = argparse.ArgumentParser(description="Format decimal degrees as degree/minute labels")

    parser.add_argument("values", type=float, nargs="*",
                        help="Decimal degree values to format (nan and inf are accepted)")

    parser.add_argument("--csv", type=str,
                        help="CSV file holding a column of decimal degrees")
    parser.add_argument("--column", type=str,
                        help="Name of the CSV column to format")
    parser.add_argument("--output", type=str,
                        help="Where to write the CSV with the added label column "
                             "(default: print to stdout)")

    parser.add_argument("--netcdf", type=str,
                        help="NetCDF file whose grid centre should be printed")

    parser.add_argument("--plot", type=str,
                        help="Directory to write a location map to")
    parser.add_argument("--lat", type=float, help="Latitude of the point to plot")
    parser.add_argument("--lon", type=float, help="Longitude of the point to plot")
    parser.add_argument("--buffer", type=float, default=1.0,
                        help="Map extent around the point in degrees")

    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def format_csv(csv_path: Path, column: str, output: Optional[Path]) -> pd.DataFrame:
    """
    Add a ``<column>_dm`` label column to a CSV file.

    Args:
        csv_path: Input CSV path
        column: Column of decimal degrees to format
        output: Output CSV path (None to skip writing)

    Returns:
        The DataFrame with the added column
    """
    if not csv_path.exists():
        raise FileNotFoundError(f"CSV file not found: {csv_path}")

    df = pd.read_csv(csv_path)
    if column not in df.columns:
        raise KeyError(f"Column '{column}' not found in {csv_path}. Available: {list(df.columns)}")

    labels = format_series(df[column])
    df[labels.name] = labels

    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        df.to_csv(output, index=False)
        logger.info(f"Wrote {len(df)} rows to {output}")

    return df


def main(argv: Optional[List[str]] = None) -> int:
    """Main execution function."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler()]
    )

    if not (args.values or args.csv or args.netcdf or args.plot):
        parser.error("Provide values, --csv, --netcdf or --plot")
    if args.csv and not args.column:
        parser.error("--csv requires --column")
    if args.plot and (args.lat is None or args.lon is None):
        parser.error("--plot requires both --lat and --lon")

    formatter = DegreeMinuteFormatter()

    try:
        for value in args.values:
            print(formatter.format(value))

        if args.csv:
            output = Path(args.output) if args.output else None
            df = format_csv(Path(args.csv), args.column, output)
            if output is None:
                print(df.to_csv(index=False), end="")

        if args.netcdf:
            lat, lon = load_point_location(args.netcdf)
            print(format_coordinates_degree_minute(lat, lon)[2])

        if args.plot:
            plotter = LocationMapPlotter(args.plot)
            fig = plotter.plot_location_map(args.lat, args.lon, buffer=args.buffer)
            saved = plotter.save(fig, "location_map", formats=["png"])
            for path in saved:
                print(path)

    except (FileNotFoundError, KeyError, TypeError, ValueError) as e:
        logger.error(f"{e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
