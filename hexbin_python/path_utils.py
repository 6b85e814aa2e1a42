"""
Path string helpers.

Numbers are written with the shortest repr that round-trips, without a
trailing ".0" on integral values.
"""

import re

NUMBER_PATTERN = re.compile(r"[-+]?(?:\d+\.\d+|\d+\.|\.\d+|\d+)(?:[eE][-+]?\d+)?")


def format_number(value):
    text = repr(float(value))
    return text[:-2] if text.endswith(".0") else text


def format_point(point):
    return f"{format_number(point[0])},{format_number(point[1])}"


def join_points(points, delimiter):
    return delimiter.join(format_point(p) for p in points)


def normalize_path(path):
    """
    Rewrite every number in a path so paths from different formatters compare equal

    Numbers within 1e-6 of an integer become that integer, anything else is
    fixed to six decimals.
    """
    def _format(match):
        s = float(match.group(0))
        rounded = round(s)
        if abs(s - rounded) < 1e-6:
            return str(int(rounded))
        return f"{s:.6f}"

    return NUMBER_PATTERN.sub(_format, path)


class PathRecorder:
    """Drawing surface that serializes move/line/close calls into an absolute path string"""

    def __init__(self):
        self.commands = []

    def move_to(self, x, y):
        self.commands.append(('M', x, y))

    def line_to(self, x, y):
        self.commands.append(('L', x, y))

    def close_path(self):
        self.commands.append(('Z',))

    def clear(self):
        self.commands = []

    def to_string(self):
        parts = []
        for command in self.commands:
            if command[0] == 'Z':
                parts.append('Z')
            else:
                parts.append(command[0] + format_point(command[1:]))
        return ''.join(parts)

    def __str__(self):
        return self.to_string()
