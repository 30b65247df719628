# polygeom/geometry/point.py
import logging
import math
from typing import Any, Hashable, Tuple

from pydantic import Field

from polygeom.errors import ArgumentError
from polygeom.geometry.constants import POINT_PATTERN
from polygeom.geometry.numbers import Number, as_float, parse_number
from polygeom.utils.base_model import ImmutableModel

logger = logging.getLogger(__name__)


def _same_value(a: Number, b: Number) -> bool:
    """NaN equals NaN, -0.0 differs from 0.0, and 1 equals 1.0."""
    if isinstance(a, float) and isinstance(b, float) and math.isnan(a) and math.isnan(b):
        return True
    if a != b:
        return False
    if a == 0:
        return math.copysign(1.0, a) == math.copysign(1.0, b)
    return True


def _value_key(value: Number) -> Hashable:
    """Hash key consistent with _same_value."""
    if isinstance(value, float) and math.isnan(value):
        return "nan"
    if value == 0:
        return 0, math.copysign(1.0, value)
    return value


def _euclidean(a: Tuple[Number, ...], b: Tuple[Number, ...]) -> float:
    # Float arithmetic saturates to inf instead of raising on huge ints
    deltas = [as_float(q) - as_float(p) for p, q in zip(a, b)]
    return math.sqrt(sum(d * d for d in deltas))


class Point2D(ImmutableModel):
    """
    Represents a 2D point in Cartesian coordinates.

    Coordinates keep the int/float distinction they were given with, but
    compare by exact value, so Point2D(x=1, y=2) == Point2D(x=1.0, y=2.0).
    Special floats compare as values too: a NaN coordinate equals NaN, and
    -0.0 is not 0.0.
    """
    x: Number = Field(description="X coordinate")
    y: Number = Field(description="Y coordinate")

    @classmethod
    def from_string(cls, text: str) -> "Point2D":
        """
        Create a point from a string of the form "(x, y)".

        Each coordinate may be an integer or a decimal. Whitespace around the
        parentheses and the comma is ignored.

        Raises:
            ArgumentError: If the text is not shaped like "(x, y)"
            ParseError: If a coordinate is not an integer or decimal
        """
        match = POINT_PATTERN.fullmatch(text)
        if match is None:
            raise ArgumentError(f'A string point must be in the form "(x, y)", got {text!r}')
        point = cls(x=parse_number(match.group("x")), y=parse_number(match.group("y")))
        logger.debug(f"Parsed point from {text[:80]!r}")
        return point

    def distance_to(self, other: "Point2D") -> float:
        """Calculate the Euclidean distance to another 2D point."""
        if not isinstance(other, Point2D):
            raise TypeError(f"Expected Point2D, got {type(other).__name__}")
        return _euclidean(self.as_tuple(), other.as_tuple())

    def as_tuple(self) -> Tuple[Number, Number]:
        return self.x, self.y

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Point2D):
            return NotImplemented
        return _same_value(self.x, other.x) and _same_value(self.y, other.y)

    def __hash__(self) -> int:
        return hash((type(self), _value_key(self.x), _value_key(self.y)))

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


class Point3D(ImmutableModel):
    """
    Represents a 3D point in Cartesian coordinates.

    Not related to Point2D: a Point3D never equals a Point2D and is never
    accepted where one is expected. Coordinates compare with plain numeric
    equality.
    """
    x: Number = Field(description="X coordinate")
    y: Number = Field(description="Y coordinate")
    z: Number = Field(description="Z coordinate")

    def distance_to(self, other: "Point3D") -> float:
        """Calculate the Euclidean distance to another 3D point."""
        if not isinstance(other, Point3D):
            raise TypeError(f"Expected Point3D, got {type(other).__name__}")
        return _euclidean(self.as_tuple(), other.as_tuple())

    def as_tuple(self) -> Tuple[Number, Number, Number]:
        return self.x, self.y, self.z

    def __str__(self) -> str:
        return f"({self.x}, {self.y}, {self.z})"
