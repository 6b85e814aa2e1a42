"""
Hexbin Visualizer

Bins two numeric columns of a CSV file into hexagons and writes:
- <stem>_hexbins.json: grid parameters, hexagon path and per-bin counts
- <stem>_hexbins.csv: one row per occupied hexagon
- <stem>_hexbins.png: mesh plus bins shaded by count (skipped with --no-plot)

Rows with a missing value in either column are left out of every bin.
"""
import argparse
import os
import sys
import time

import numpy as np
import pandas as pd

from hexbin_python.accessors import IndexAccessor
from hexbin_python.export_utils import bins_to_dataframe, export_bins_to_json
from hexbin_python.hex_binner import HexBinner
from hexbin_python.memory_utils import report_memory, rss_mb


def build_parser():
    parser = argparse.ArgumentParser(description='Hexagonal binning of two CSV columns')
    parser.add_argument('csv_file', help='Path to the input CSV file')
    parser.add_argument('--x-column', default='x', help='Column holding X coordinates (default: x)')
    parser.add_argument('--y-column', default='y', help='Column holding Y coordinates (default: y)')
    parser.add_argument('--radius', type=float, default=1.0, help='Hexagon radius (default: 1)')
    parser.add_argument('--extent', type=float, nargs=4, metavar=('X0', 'Y0', 'X1', 'Y1'),
                        help='Extent of the drawn mesh (default: data bounds)')
    parser.add_argument('--size', type=float, nargs=2, metavar=('W', 'H'),
                        help='Mesh extent as width and height from the origin')
    parser.add_argument('--output-dir', default='hexbin_output',
                        help='Directory for the exported files (default: hexbin_output)')
    parser.add_argument('--no-plot', action='store_true', help='Do not render the PNG')
    parser.add_argument('--verbose', action='store_true', help='Report skipped rows')
    return parser


def main(argv=None):
    """Main execution function for CSV hexbin export"""
    start_time = time.time()
    start_memory = rss_mb()
    print(f"Starting execution at: {time.strftime('%Y-%m-%d %H:%M:%S')}")

    args = build_parser().parse_args(argv)

    csv_path = args.csv_file
    if not os.path.exists(csv_path):
        print(f"Error: CSV file '{csv_path}' does not exist.")
        return 1
    if args.radius <= 0 or not np.isfinite(args.radius):
        print(f"Error: radius must be a positive number, got {args.radius}.")
        return 1

    df = pd.read_csv(csv_path)
    report_memory("after loading CSV data", start_memory)

    missing = [c for c in (args.x_column, args.y_column) if c not in df.columns]
    if missing:
        print(f"Error: The following columns are missing from the CSV: {', '.join(missing)}")
        return 1

    points = df[[args.x_column, args.y_column]].to_numpy(dtype=np.float64)

    binner = HexBinner().x(IndexAccessor(0)).y(IndexAccessor(1)).radius(args.radius)
    if args.extent is not None:
        binner.extent(tuple(args.extent))
    elif args.size is not None:
        binner.size(tuple(args.size))
    else:
        finite = points[~np.isnan(points).any(axis=1)]
        if len(finite):
            lo = finite.min(axis=0)
            hi = finite.max(axis=0)
            binner.extent(((float(lo[0]), float(lo[1])), (float(hi[0]), float(hi[1]))))

    bins = binner.compute(points, verbose=args.verbose)
    stats = HexBinner.get_hex_stats(bins)
    print(f"Binned {stats['total_points']}/{len(points)} points into "
          f"{stats['occupied_hexagons']} hexagons (max {stats['max_count']} per hexagon)")
    report_memory("after binning", start_memory)

    stem = os.path.splitext(os.path.basename(csv_path))[0]
    os.makedirs(args.output_dir, exist_ok=True)
    export_bins_to_json(bins, binner.config, os.path.join(args.output_dir, f"{stem}_hexbins.json"))
    bins_to_dataframe(bins).to_csv(os.path.join(args.output_dir, f"{stem}_hexbins.csv"), index=False)

    if not args.no_plot:
        from hexbin_python.plotting import plot_hexbin
        png_path = os.path.join(args.output_dir, f"{stem}_hexbins.png")
        plot_hexbin(bins, binner.geometry, save_path=png_path,
                    title=f"{stem}: {args.x_column} vs {args.y_column} (radius {args.radius:g})")
        print(f"Plot saved to: {png_path}")

    elapsed = time.time() - start_time
    print(f"Finished in {elapsed:.2f}s")
    return 0


if __name__ == '__main__':
    sys.exit(main())
