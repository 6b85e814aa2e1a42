"""
Export utilities for hexagonal binning results.

This module provides functions to export bins to:
- a pandas DataFrame (one row per occupied hexagon)
- JSON, together with the grid parameters and hexagon path needed to draw them
"""

import json
import os
import pandas as pd
from typing import List

from hexbin_python.hex_bin import HexBin
from hexbin_python.hex_geometry import HexGeometry
from hexbin_python.hexbin_config import HexbinConfig

BIN_COLUMNS = ['col', 'row', 'x', 'y', 'count']


def _to_json_value(record):
    if hasattr(record, 'tolist'):
        return record.tolist()
    if isinstance(record, tuple):
        return list(record)
    return record


def bins_to_dataframe(bins: List[HexBin]) -> pd.DataFrame:
    """One row per bin, in the order given, with id, center and record count"""
    rows = [(b.col, b.row, float(b.x), float(b.y), len(b)) for b in bins]
    return pd.DataFrame(rows, columns=BIN_COLUMNS)


def export_bins_to_json(bins: List[HexBin], config: HexbinConfig, save_path: str,
                        include_records: bool = False):
    """Export bins to JSON for drawing elsewhere.

    Creates a JSON file containing:
    - radius and extent of the grid
    - hexagon: relative path of one hexagon, to be placed at each center
    - bins: id, center and count per occupied hexagon (records too if asked)

    Args:
        bins: Result of HexBinner.compute
        config: Configuration the bins were computed with
        save_path: Output JSON file path
        include_records: Also write each bin's records (must be JSON serializable)

    Side Effects:
        Creates directories as needed and writes JSON file to save_path
    """
    (x0, y0), (x1, y1) = config.extent()
    bin_entries = []
    for b in bins:
        entry = {
            'col': b.col,
            'row': b.row,
            'x': float(b.x),
            'y': float(b.y),
            'count': len(b),
        }
        if include_records:
            entry['records'] = [_to_json_value(r) for r in b]
        bin_entries.append(entry)

    json_data = {
        'radius': float(config.r),
        'extent': [[float(x0), float(y0)], [float(x1), float(y1)]],
        'hexagon': HexGeometry(config).hexagon(),
        'bins': bin_entries,
    }

    save_dir = os.path.dirname(save_path)
    if save_dir:
        os.makedirs(save_dir, exist_ok=True)
    with open(save_path, 'w') as f:
        json.dump(json_data, f, indent=2)

    print(f"Bin data exported to: {save_path}")
