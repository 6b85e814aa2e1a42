"""
Hexagonal binning of 2-D points.

    >>> from hexbin_python import hexbin
    >>> bins = hexbin().radius(2)([(0, 0), (1, 1), (2, 2)])
"""

from hexbin_python.accessors import (
    Accessor,
    IndexAccessor,
    NanAccessor,
    accessor_for,
    point_x,
    point_y,
)
from hexbin_python.hex_bin import HexBin
from hexbin_python.hex_binner import HexBinner, hexbin
from hexbin_python.hex_coordinates import HexCoordinates
from hexbin_python.hex_geometry import HexGeometry
from hexbin_python.hexbin_config import HexbinConfig
from hexbin_python.path_utils import PathRecorder

__all__ = [
    'Accessor',
    'IndexAccessor',
    'NanAccessor',
    'accessor_for',
    'point_x',
    'point_y',
    'HexBin',
    'HexBinner',
    'hexbin',
    'HexCoordinates',
    'HexGeometry',
    'HexbinConfig',
    'PathRecorder',
]
