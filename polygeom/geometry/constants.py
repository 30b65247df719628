# polygeom/geometry/constants.py
"""Constants for geometric calculations and coordinate text parsing."""
import re
import sys

# Relative tolerance when comparing the two diagonals of a quadrilateral
RECTANGULARITY_REL_TOL = sys.float_info.epsilon ** 0.5

# Minimum number of points in a polygon
MIN_POLYGON_POINTS = 3

# Number: optional sign, optional integer digits, optional fractional part
NUMBER_PATTERN = re.compile(r"(?P<integer>[+-]?\d*)(?P<fraction>\.\d+)?", re.ASCII)

# Point: "(x, y)" with whitespace tolerated around the parentheses and the comma
POINT_PATTERN = re.compile(r"\s*\(\s*(?P<x>[^,()]+?)\s*,\s*(?P<y>[^,()]+?)\s*\)\s*", re.ASCII)

# Polygon: point strings separated by semicolons
POLYGON_SEPARATOR = re.compile(r"\s*;\s*")
