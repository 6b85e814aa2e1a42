from hexbin_python.hex_coordinates import HexCoordinates
from hexbin_python.hexbin_config import HexbinConfig
from hexbin_python.path_utils import format_point, join_points


class HexGeometry:
    """Hexagon outlines, grid centers and mesh for a configuration

    Paths come out as SVG path strings; the draw_* methods issue the same
    geometry as move_to/line_to/close_path calls on a drawing surface.
    """

    def __init__(self, config: HexbinConfig = None):
        self.config = config if config is not None else HexbinConfig()

    def _radius(self, radius):
        return self.config.r if radius is None else radius

    def hexagon(self, radius=None):
        """Relative path of one hexagon around the current point"""
        offsets = HexCoordinates.hexagon_offsets(self._radius(radius))
        return "m" + join_points(offsets, "l") + "z"

    def centers(self):
        c = self.config
        return HexCoordinates.get_centers(c.x0, c.y0, c.x1, c.y1, c.r, c.dx, c.dy)

    def mesh(self):
        """
        Path of the hexagon grid over the extent

        Only the first four edges of each hexagon are drawn; the other two
        belong to the neighbours below.
        """
        fragment = join_points(HexCoordinates.hexagon_offsets(self.config.r)[:4], "l")
        return "".join("M" + format_point(p) + "m" + fragment for p in self.centers())

    def draw_hexagon(self, surface, radius=None):
        offsets = HexCoordinates.hexagon_offsets(self._radius(radius))
        x, y = offsets[0]
        surface.move_to(x, y)
        for ox, oy in offsets[1:]:
            x += ox
            y += oy
            surface.line_to(x, y)
        surface.close_path()

    def draw_mesh(self, surface):
        offsets = HexCoordinates.hexagon_offsets(self.config.r)
        for cx, cy in self.centers():
            x = cx + offsets[0][0]
            y = cy + offsets[0][1]
            surface.move_to(x, y)
            for ox, oy in offsets[1:4]:
                x += ox
                y += oy
                surface.line_to(x, y)
