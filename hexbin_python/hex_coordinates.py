import numpy as np
import math

THIRD_PI = math.pi / 3
ANGLES = [k * THIRD_PI for k in range(6)]

# Bias on the column coordinate before rounding; exact half columns round toward +x.
ROUNDING_BIAS = 0.00001


class HexCoordinates:
    """Utility class for the offset-row hexagonal grid used by the binner

    Rows are ``dy`` apart, centers within a row ``dx`` apart, and odd rows
    are shifted right by half a column (pointy-top hexagons).
    """

    @staticmethod
    def round_half_away(value):
        """
        Round to the nearest integer, halves away from zero

        Unlike round(), 2.5 gives 3 and -0.5 gives -1. NaN and infinities
        come back unchanged.
        """
        if not math.isfinite(value):
            return value
        a = abs(value)
        n = math.floor(a)
        if a - n >= 0.5:
            n += 1
        return -n if value < 0 else n

    @staticmethod
    def cartesian_to_hex(x, y, dx, dy):
        """
        Convert a Cartesian point to the (col, row) of the hexagon containing it

        Args:
            x, y: Point coordinates
            dx, dy: Column and row spacing of the grid

        Returns:
            (col, row): Integer hexagon id, or NaN/inf components when the
            point or the grid spacing is not finite
        """
        py = y / dy
        pj = HexCoordinates.round_half_away(py)
        px = x / dx - (pj % 2) / 2 + ROUNDING_BIAS
        pi = HexCoordinates.round_half_away(px)
        py1 = py - pj

        # Outside the middle third of the row the diagonal neighbour in the
        # adjacent row may be closer; distances are compared in grid units.
        if abs(py1) * 3 > 1:
            px1 = px - pi
            pi2 = pi + (-1 if px < pi else 1) / 2
            pj2 = pj + (-1 if py < pj else 1)
            px2 = px - pi2
            py2 = py - pj2
            if px1 * px1 + py1 * py1 > px2 * px2 + py2 * py2:
                # pi2 is a half column in row pj's frame; shift into row pj2's
                pi = HexCoordinates.round_half_away(pi2 + (1 if pj % 2 else -1) / 2)
                pj = pj2

        return pi, pj

    @staticmethod
    def hex_to_cartesian(col, row, dx, dy):
        """
        Convert a hexagon id to the Cartesian coordinates of its center

        Args:
            col, row: Hexagon id
            dx, dy: Column and row spacing of the grid

        Returns:
            (x, y): Center coordinates
        """
        x = (col + (row % 2) / 2) * dx
        y = row * dy
        return x, y

    @staticmethod
    def hex_id(col, row):
        """String key of a hexagon; bins are ordered by this key

        Non-finite ids keep their float text, e.g. "nan-nan" or "inf-0".
        """
        return f"{col}-{row}"

    @staticmethod
    def hexagon_offsets(radius):
        """
        Get the six hexagon vertices as offsets from the previous vertex

        The first offset is measured from (0, 0), so a path starting at a
        center reaches the top vertex with the first relative move.

        Args:
            radius: Distance from center to vertex

        Returns:
            List of six (dx, dy) tuples
        """
        offsets = []
        x0, y0 = 0, 0
        for angle in ANGLES:
            x1 = math.sin(angle) * radius
            y1 = -math.cos(angle) * radius
            offsets.append((x1 - x0, y1 - y0))
            x0, y0 = x1, y1
        return offsets

    @staticmethod
    def get_centers(x0, y0, x1, y1, radius, dx, dy):
        """
        Get the centers of all hexagons covering an extent, row by row

        Positions accumulate by repeated addition of dx and dy.

        Returns:
            List of (x, y) tuples
        """
        centers = []
        j = HexCoordinates.round_half_away(y0 / dy)
        i = HexCoordinates.round_half_away(x0 / dx)
        y = j * dy
        while y < y1 + radius:
            x = i * dx + (j % 2) * dx / 2
            while x < x1 + dx / 2:
                centers.append((x, y))
                x += dx
            y += dy
            j += 1
        return centers

    @staticmethod
    def round_half_away_vectorized(values):
        a = np.abs(values)
        n = np.floor(a)
        n = n + (a - n >= 0.5)
        return np.copysign(n, values)

    @staticmethod
    def cartesian_to_hex_vectorized(x, y, dx, dy):
        """
        Vectorized cartesian_to_hex over coordinate arrays

        Args:
            x, y: Arrays of point coordinates (NaN and inf allowed)
            dx, dy: Column and row spacing of the grid

        Returns:
            cols, rows, valid: Integer id arrays and the mask of points with a
            finite id; ids of invalid points are 0, so a point the scalar
            transform would place in an inf or NaN hexagon is invalid here
        """
        x = np.asarray(x, dtype=np.float64)
        y = np.asarray(y, dtype=np.float64)
        valid = ~(np.isnan(x) | np.isnan(y))

        with np.errstate(invalid='ignore'):
            py = y / dy
            pj = HexCoordinates.round_half_away_vectorized(py)
            odd = np.mod(pj, 2) == 1
            px = x / dx - odd / 2 + ROUNDING_BIAS
            pi = HexCoordinates.round_half_away_vectorized(px)
            py1 = py - pj

            px1 = px - pi
            pi2 = pi + np.where(px < pi, -1, 1) / 2
            pj2 = pj + np.where(py < pj, -1, 1)
            px2 = px - pi2
            py2 = py - pj2
            swap = (np.abs(py1) * 3 > 1) & (px1 * px1 + py1 * py1 > px2 * px2 + py2 * py2)

            pi = np.where(swap, pi2 + np.where(odd, 1, -1) / 2, pi)
            pj = np.where(swap, pj2, pj)

        valid &= np.isfinite(pi) & np.isfinite(pj)
        cols = np.where(valid, pi, 0).astype(np.int64)
        rows = np.where(valid, pj, 0).astype(np.int64)
        return cols, rows, valid
