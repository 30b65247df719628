# polygeom/geometry/measure.py
"""Geometry functions over points and polygons.

Functional counterparts of the measurement methods on the models.
"""
from typing import Union

from polygeom.geometry.point import Point2D, Point3D
from polygeom.geometry.polygon import Polygon


def distance(a: Union[Point2D, Point3D], b: Union[Point2D, Point3D]) -> float:
    """
    Euclidean distance between two points of the same dimension.

    Raises:
        TypeError: If the points are not both Point2D or both Point3D
    """
    if type(a) is not type(b):
        raise TypeError(
            f"Cannot measure distance between {type(a).__name__} and {type(b).__name__}"
        )
    return a.distance_to(b)


def perimeter(polygon: Polygon) -> float:
    """Sum of the edge lengths, including the edge from the last point back to the first."""
    return polygon.perimeter


def is_rectangular(polygon: Polygon) -> bool:
    """Equal-diagonals check on four-point polygons; see Polygon.is_rectangular."""
    return polygon.is_rectangular()


def area(polygon: Polygon) -> float:
    """Area of a simple polygon via the shoelace formula."""
    return polygon.area
