from polygeom.geometry.measure import area, distance, is_rectangular, perimeter
from polygeom.geometry.numbers import Number, parse_number
from polygeom.geometry.point import Point2D, Point3D
from polygeom.geometry.polygon import Polygon
from polygeom.geometry.rendering import line_loop

__all__ = [
    'Number',
    'parse_number',
    'Point2D',
    'Point3D',
    'Polygon',
    'distance',
    'perimeter',
    'is_rectangular',
    'area',
    'line_loop',
]
