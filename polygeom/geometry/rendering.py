# polygeom/geometry/rendering.py
from typing import List, Tuple

from polygeom.geometry.numbers import Number
from polygeom.geometry.polygon import Polygon


def line_loop(polygon: Polygon) -> Tuple[List[Number], List[Number]]:
    """
    Convert a polygon into parallel x and y coordinate lists for drawing.

    The first point is repeated at the end so a line plot closes the loop.

    Example:
        >>> line_loop(Polygon.from_string("(0, 0); (1, 0); (0, 1)"))
        ([0, 1, 0, 0], [0, 0, 1, 0])
    """
    xs = [point.x for point in polygon.points]
    ys = [point.y for point in polygon.points]
    xs.append(polygon.points[0].x)
    ys.append(polygon.points[0].y)
    return xs, ys
