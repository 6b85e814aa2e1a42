import numpy as np
from typing import Dict, Iterable, List
from hexbin_python.hex_bin import HexBin
from hexbin_python.hex_coordinates import HexCoordinates
from hexbin_python.hex_geometry import HexGeometry
from hexbin_python.hexbin_config import HexbinConfig


class HexBinner:
    """Groups records into the hexagons of a HexbinConfig

    The configuration and geometry methods are exposed on the binner too, so
    ``hexbin().radius(2).extent(...)`` chains like a single object.
    """

    def __init__(self, config: HexbinConfig = None):
        self.config = config if config is not None else HexbinConfig()
        self.geometry = HexGeometry(self.config)

    def __call__(self, records):
        return self.compute(records)

    def compute(self, records: Iterable, verbose=False) -> List[HexBin]:
        """
        Compute hexagonal binning for the given records

        Args:
            records: Finite iterable of records, read through the x/y accessors
            verbose: Print how many records were skipped for NaN coordinates

        Returns:
            Non-empty bins ordered by hexagon id key
        """
        get_x = self.config.x()
        get_y = self.config.y()
        dx = self.config.dx
        dy = self.config.dy

        bins_by_id: Dict[str, HexBin] = {}
        n_pts = 0
        skipped = 0

        for record in records:
            n_pts += 1
            px = get_x(record)
            if np.isnan(px):
                skipped += 1
                continue
            py = get_y(record)
            if np.isnan(py):
                skipped += 1
                continue

            col, row = HexCoordinates.cartesian_to_hex(px, py, dx, dy)
            hex_id = HexCoordinates.hex_id(col, row)

            bin_obj = bins_by_id.get(hex_id)
            if bin_obj is not None:
                bin_obj.append(record)
            else:
                x, y = HexCoordinates.hex_to_cartesian(col, row, dx, dy)
                bins_by_id[hex_id] = HexBin(record, col, row, x, y)

        if verbose and skipped > 0:
            skipped_percentage = (skipped / n_pts) * 100
            print(f"  [HEXBIN] Skipped points: {skipped}/{n_pts} ({skipped_percentage:.1f}%) - NaN coordinates")

        return [bins_by_id[key] for key in sorted(bins_by_id)]

    def compute_ids(self, x, y):
        """
        Hexagon ids for coordinate arrays, without grouping

        Returns:
            cols, rows, valid: see HexCoordinates.cartesian_to_hex_vectorized
        """
        return HexCoordinates.cartesian_to_hex_vectorized(x, y, self.config.dx, self.config.dy)

    @staticmethod
    def get_hex_stats(bins: List[HexBin]):
        """
        Get statistics about a binning result

        Returns:
            dict: occupied hexagons, points, max and mean points per hexagon
        """
        counts = np.array([len(b) for b in bins], dtype=int)
        total_points = int(counts.sum()) if len(counts) else 0
        stats = {
            'occupied_hexagons': len(bins),
            'total_points': total_points,
            'max_count': int(counts.max()) if len(counts) else 0,
            'mean_count': total_points / len(bins) if bins else 0,
        }
        return stats

    # Configuration, returning the binner when setting

    def _chain(self, result):
        return self if result is self.config else result

    def x(self, accessor=None):
        return self._chain(self.config.x(accessor))

    def y(self, accessor=None):
        return self._chain(self.config.y(accessor))

    def radius(self, r=None):
        return self._chain(self.config.radius(r))

    def size(self, size=None):
        return self._chain(self.config.size(size))

    def extent(self, extent=None):
        return self._chain(self.config.extent(extent))

    # Geometry

    def hexagon(self, radius=None):
        return self.geometry.hexagon(radius)

    def centers(self):
        return self.geometry.centers()

    def mesh(self):
        return self.geometry.mesh()

    def draw_hexagon(self, surface, radius=None):
        self.geometry.draw_hexagon(surface, radius)

    def draw_mesh(self, surface):
        self.geometry.draw_mesh(surface)


def hexbin():
    """New binner with the default configuration"""
    return HexBinner()
