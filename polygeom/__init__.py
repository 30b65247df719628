"""
polygeom - immutable 2D/3D points, polygons and basic measurements
"""
__version__ = "1.0.0"

from polygeom.errors import ArgumentError, GeometryError, ParseError
from polygeom.geometry import (
    Point2D,
    Point3D,
    Polygon,
    area,
    distance,
    is_rectangular,
    line_loop,
    parse_number,
    perimeter,
)

__all__ = [
    'GeometryError',
    'ArgumentError',
    'ParseError',
    'Point2D',
    'Point3D',
    'Polygon',
    'parse_number',
    'distance',
    'perimeter',
    'is_rectangular',
    'area',
    'line_loop',
]
