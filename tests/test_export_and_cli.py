"""
Tests for DataFrame/JSON export, the matplotlib drawing surface and the
command-line visualizer.

Run with: pytest tests/test_export_and_cli.py
"""

import json
import math
import numpy as np
import pandas as pd
import pytest
import sys
from pathlib import Path

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.path import Path as MplPath

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import hexbin_visualizer
from hexbin_python.export_utils import BIN_COLUMNS, bins_to_dataframe, export_bins_to_json
from hexbin_python.hex_binner import hexbin
from hexbin_python.memory_utils import format_mb, report_memory, rss_mb
from hexbin_python.path_utils import normalize_path
from hexbin_python.plotting import MatplotlibPathSurface, plot_hexbin

GRID_POINTS = [
    (0, 0), (0, 1), (0, 2),
    (1, 0), (1, 1), (1, 2),
    (2, 0), (2, 1), (2, 2),
]


@pytest.fixture
def grid_bins():
    b = hexbin()
    return b, b(GRID_POINTS)


@pytest.fixture
def sample_csv(tmp_path):
    rng = np.random.RandomState(42)
    df = pd.DataFrame({
        'x': rng.uniform(0, 10, 200),
        'y': rng.uniform(0, 10, 200),
        'label': rng.randint(0, 3, 200),
    })
    df.loc[5, 'x'] = np.nan
    df.loc[9, 'y'] = np.nan
    path = tmp_path / 'points.csv'
    df.to_csv(path, index=False)
    return path


class TestExport:
    """Test DataFrame and JSON export"""

    def test_bins_to_dataframe(self, grid_bins):
        _, bins = grid_bins
        df = bins_to_dataframe(bins)
        assert list(df.columns) == BIN_COLUMNS
        assert df['count'].tolist() == [1, 4, 2, 2]
        assert df['col'].tolist() == [0, 0, 1, 1]
        assert df['row'].tolist() == [0, 1, 0, 1]
        np.testing.assert_allclose(df['x'], [0, 0.8660254037844386, 1.7320508075688772, 2.598076211353316])

    def test_empty_dataframe(self):
        df = bins_to_dataframe([])
        assert len(df) == 0
        assert list(df.columns) == BIN_COLUMNS

    def test_export_bins_to_json(self, grid_bins, tmp_path):
        b, bins = grid_bins
        save_path = tmp_path / 'out' / 'bins.json'
        export_bins_to_json(bins, b.config, str(save_path))
        data = json.loads(save_path.read_text())
        assert data['radius'] == 1
        assert data['extent'] == [[0, 0], [1, 1]]
        assert normalize_path(data['hexagon']) == \
            "m0,-1l0.866025,0.500000l0,1l-0.866025,0.500000l-0.866025,-0.500000l0,-1z"
        assert [e['count'] for e in data['bins']] == [1, 4, 2, 2]
        assert data['bins'][1] == {'col': 0, 'row': 1, 'x': 0.8660254037844386, 'y': 1.5, 'count': 4}
        assert 'records' not in data['bins'][0]

    def test_export_non_finite_ids(self, tmp_path):
        b = hexbin().radius(math.nan)
        bins = b([(0, 0), (1, 1)])
        save_path = tmp_path / 'nan.json'
        export_bins_to_json(bins, b.config, str(save_path))
        entry = json.loads(save_path.read_text())['bins'][0]
        assert math.isnan(entry['col'])
        assert math.isnan(entry['row'])
        assert entry['count'] == 2

    def test_export_records(self, tmp_path):
        b = hexbin()
        bins = b(np.array(GRID_POINTS, dtype=float))
        save_path = tmp_path / 'bins.json'
        export_bins_to_json(bins, b.config, str(save_path), include_records=True)
        data = json.loads(save_path.read_text())
        assert data['bins'][2]['records'] == [[1.0, 0.0], [2.0, 0.0]]


class TestPlotting:
    """Test the matplotlib drawing surface and plot"""

    def test_surface_builds_closed_hexagon(self):
        surface = MatplotlibPathSurface()
        hexbin().draw_hexagon(surface)
        path = surface.to_path()
        assert len(path.vertices) == 7
        assert list(path.codes) == [MplPath.MOVETO] + [MplPath.LINETO] * 5 + [MplPath.CLOSEPOLY]
        np.testing.assert_allclose(path.vertices[-1], path.vertices[0])

    def test_surface_builds_mesh(self):
        b = hexbin()
        surface = MatplotlibPathSurface()
        b.draw_mesh(surface)
        assert surface.codes.count(MplPath.MOVETO) == len(b.centers())
        assert MplPath.CLOSEPOLY not in surface.codes

    def test_plot_hexbin_saves_png(self, grid_bins, tmp_path):
        b, bins = grid_bins
        save_path = tmp_path / 'plots' / 'grid.png'
        assert plot_hexbin(bins, b.geometry, save_path=str(save_path), title='grid') is None
        assert save_path.exists()
        assert save_path.stat().st_size > 0

    def test_plot_hexbin_without_bins(self):
        fig = plot_hexbin([], hexbin().geometry)
        assert len(fig.axes[0].patches) == 1
        plt.close(fig)


class TestVisualizer:
    """Test the command-line entry point"""

    def test_exports_files(self, sample_csv, tmp_path, capsys):
        out_dir = tmp_path / 'results'
        status = hexbin_visualizer.main([str(sample_csv), '--radius', '1.5',
                                         '--output-dir', str(out_dir), '--verbose'])
        assert status == 0
        assert (out_dir / 'points_hexbins.json').exists()
        assert (out_dir / 'points_hexbins.csv').exists()
        assert (out_dir / 'points_hexbins.png').exists()

        df = pd.read_csv(out_dir / 'points_hexbins.csv')
        assert df['count'].sum() == 198
        data = json.loads((out_dir / 'points_hexbins.json').read_text())
        assert data['radius'] == 1.5

        out = capsys.readouterr().out
        assert "[HEXBIN] Skipped points: 2/200" in out
        assert "Binned 198/200 points" in out

    def test_matches_library(self, sample_csv, tmp_path):
        out_dir = tmp_path / 'results'
        hexbin_visualizer.main([str(sample_csv), '--radius', '0.8', '--size', '10', '10',
                                '--output-dir', str(out_dir), '--no-plot'])
        assert not (out_dir / 'points_hexbins.png').exists()

        df = pd.read_csv(sample_csv)
        points = [(x, y) for x, y in zip(df['x'], df['y'])]
        bins = hexbin().radius(0.8)(points)
        exported = pd.read_csv(out_dir / 'points_hexbins.csv')
        assert exported['count'].tolist() == [len(b) for b in bins]
        assert exported['col'].tolist() == [b.col for b in bins]
        assert exported['row'].tolist() == [b.row for b in bins]
        data = json.loads((out_dir / 'points_hexbins.json').read_text())
        assert data['extent'] == [[0, 0], [10, 10]]

    def test_extent_option(self, sample_csv, tmp_path):
        out_dir = tmp_path / 'results'
        status = hexbin_visualizer.main([str(sample_csv), '--extent', '-1', '-2', '3', '4',
                                         '--output-dir', str(out_dir), '--no-plot'])
        assert status == 0
        data = json.loads((out_dir / 'points_hexbins.json').read_text())
        assert data['extent'] == [[-1, -2], [3, 4]]

    def test_missing_file(self, tmp_path, capsys):
        status = hexbin_visualizer.main([str(tmp_path / 'nope.csv'), '--no-plot'])
        assert status == 1
        assert "does not exist" in capsys.readouterr().out

    def test_missing_column(self, sample_csv, tmp_path, capsys):
        status = hexbin_visualizer.main([str(sample_csv), '--x-column', 'lon',
                                         '--output-dir', str(tmp_path), '--no-plot'])
        assert status == 1
        assert "lon" in capsys.readouterr().out

    def test_rejects_bad_radius(self, sample_csv, tmp_path):
        status = hexbin_visualizer.main([str(sample_csv), '--radius', '0',
                                         '--output-dir', str(tmp_path), '--no-plot'])
        assert status == 1

    def test_memory_format(self):
        assert format_mb(512) == "512.0 MB"
        assert format_mb(2048) == "2.0 GB"
        assert format_mb(-2048) == "-2.0 GB"

    def test_memory_report(self, capsys):
        baseline = rss_mb()
        assert baseline > 0
        current = report_memory("test", baseline)
        assert not math.isnan(current)
        assert capsys.readouterr().out.startswith("Memory at test: ")
