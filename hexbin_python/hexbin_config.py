import math
from typing import Callable, Optional, Tuple
from hexbin_python.accessors import point_x, point_y
from hexbin_python.hex_coordinates import THIRD_PI

Point = Tuple[float, float]
Extent = Tuple[Point, Point]


class HexbinConfig:
    """
    Extent, radius and coordinate accessors shared by the binner and the geometry

    Every accessor method reads when called without an argument and writes
    (returning the config for chaining) when called with one.
    """

    def __init__(self):
        self.x0 = 0
        self.y0 = 0
        self.x1 = 1
        self.y1 = 1
        self._x = point_x
        self._y = point_y
        self.radius(1)

    @property
    def r(self):
        return self._r

    @property
    def dx(self):
        """Horizontal distance between neighbouring centers in a row"""
        return self._dx

    @property
    def dy(self):
        """Vertical distance between rows"""
        return self._dy

    def x(self, accessor: Optional[Callable] = None):
        if accessor is None:
            return self._x
        self._x = accessor
        return self

    def y(self, accessor: Optional[Callable] = None):
        if accessor is None:
            return self._y
        self._y = accessor
        return self

    def radius(self, r: Optional[float] = None):
        if r is None:
            return self._r
        # no validation: a zero radius fails on the first division by dx or dy
        self._r = r
        self._dx = r * 2 * math.sin(THIRD_PI)
        self._dy = r * 1.5
        return self

    def size(self, size: Optional[Point] = None):
        if size is None:
            return (self.x1 - self.x0, self.y1 - self.y0)
        self.x0 = self.y0 = 0
        self.x1, self.y1 = size[0], size[1]
        return self

    def extent(self, extent: Optional[Extent] = None):
        """Bounding rectangle as ((x0, y0), (x1, y1)); a flat (x0, y0, x1, y1) is accepted too"""
        if extent is None:
            return ((self.x0, self.y0), (self.x1, self.y1))
        if len(extent) == 4:
            self.x0, self.y0, self.x1, self.y1 = extent
        else:
            (self.x0, self.y0), (self.x1, self.y1) = extent
        return self

    # Spelled-out forms of the accessors above

    def get_x(self):
        return self.x()

    def set_x(self, accessor):
        return self.x(accessor)

    def get_y(self):
        return self.y()

    def set_y(self, accessor):
        return self.y(accessor)

    def get_radius(self):
        return self.radius()

    def set_radius(self, r):
        return self.radius(r)

    def get_extent(self):
        return self.extent()

    def set_extent(self, extent):
        return self.extent(extent)

    def get_size(self):
        return self.size()

    def set_size(self, size):
        return self.size(size)

    def __repr__(self):
        return (f"HexbinConfig(extent={self.extent()}, radius={self._r}, "
                f"x={self._x!r}, y={self._y!r})")
