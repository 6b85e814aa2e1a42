import os
import matplotlib
import matplotlib.pyplot as plt
from matplotlib.patches import PathPatch
from matplotlib.path import Path
from matplotlib.transforms import Affine2D
from typing import List

from hexbin_python.hex_bin import HexBin
from hexbin_python.hex_geometry import HexGeometry


class MatplotlibPathSurface:
    """Drawing surface that collects move/line/close calls into a matplotlib Path"""

    def __init__(self):
        self.vertices = []
        self.codes = []
        self._start = (0.0, 0.0)

    def move_to(self, x, y):
        self._start = (x, y)
        self.vertices.append((x, y))
        self.codes.append(Path.MOVETO)

    def line_to(self, x, y):
        self.vertices.append((x, y))
        self.codes.append(Path.LINETO)

    def close_path(self):
        # CLOSEPOLY ignores its vertex; repeat the subpath start
        self.vertices.append(self._start)
        self.codes.append(Path.CLOSEPOLY)

    def to_path(self):
        return Path(self.vertices, self.codes)


def plot_hexbin(bins: List[HexBin], geometry: HexGeometry, save_path=None,
                cmap='viridis', title=None):
    """Draw the mesh over the extent and one filled hexagon per bin, shaded by count

    With save_path the figure is written and closed and None is returned;
    otherwise the open figure is returned for further drawing.
    """
    config = geometry.config
    fig, ax = plt.subplots(figsize=(8, 8))

    mesh_surface = MatplotlibPathSurface()
    geometry.draw_mesh(mesh_surface)
    if mesh_surface.codes:
        ax.add_patch(PathPatch(mesh_surface.to_path(), fill=False,
                               edgecolor='lightgray', linewidth=0.5, zorder=1))

    hex_surface = MatplotlibPathSurface()
    geometry.draw_hexagon(hex_surface)
    hex_path = hex_surface.to_path()

    colormap = matplotlib.colormaps[cmap]
    max_count = max((len(b) for b in bins), default=1)
    for b in bins:
        cell = hex_path.transformed(Affine2D().translate(b.x, b.y))
        ax.add_patch(PathPatch(cell, facecolor=colormap(len(b) / max_count),
                               edgecolor='white', linewidth=0.5, zorder=2))

    (x0, y0), (x1, y1) = config.extent()
    r = config.r
    ax.set_xlim(x0 - r, x1 + r)
    # path coordinates grow downwards
    ax.set_ylim(y1 + r, y0 - r)
    ax.set_aspect('equal')
    if title:
        ax.set_title(title)

    if save_path:
        save_dir = os.path.dirname(save_path)
        if save_dir:
            os.makedirs(save_dir, exist_ok=True)
        fig.savefig(save_path, dpi=150, bbox_inches='tight')
        plt.close(fig)
        return None
    return fig
