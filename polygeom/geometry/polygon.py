# polygeom/geometry/polygon.py
import logging
import math
from typing import Iterator, Sequence, Tuple

from pydantic import Field, field_validator

from polygeom.errors import ArgumentError
from polygeom.geometry.constants import (
    MIN_POLYGON_POINTS,
    POLYGON_SEPARATOR,
    RECTANGULARITY_REL_TOL,
)
from polygeom.geometry.numbers import Number, as_float
from polygeom.geometry.point import Point2D
from polygeom.utils.base_model import ImmutableModel

logger = logging.getLogger(__name__)


class Polygon(ImmutableModel):
    """
    Represents a closed polygon defined by an ordered sequence of 2D points.

    Points are stored as given: no reordering, no deduplication and no
    self-intersection check. Two polygons are equal only if they hold the
    same points in the same order, so rotated or reflected point lists are
    different polygons.

    Construct from points directly, or through from_numbers(),
    from_coordinates() or from_string(); every path ends in the same
    point-count validation.
    """
    points: Tuple[Point2D, ...] = Field(description="Points defining the polygon, in order")

    @field_validator("points")
    @classmethod
    def validate_points(cls, points: Tuple[Point2D, ...]) -> Tuple[Point2D, ...]:
        """Validate that we have enough points."""
        if len(points) < MIN_POLYGON_POINTS:
            raise ArgumentError(
                f"A polygon must have at least {MIN_POLYGON_POINTS} points, got {len(points)}"
            )
        return points

    @classmethod
    def from_numbers(cls, numbers: Sequence[Number]) -> "Polygon":
        """
        Create a polygon from a flat sequence of coordinates.

        Numbers are paired in order: (n0, n1), (n2, n3), ...

        Raises:
            ArgumentError: If the count is odd or yields fewer than 3 points
        """
        if len(numbers) % 2 != 0:
            raise ArgumentError(
                f"There must be an even number of coordinates, got {len(numbers)}"
            )
        points = [Point2D(x=numbers[i], y=numbers[i + 1]) for i in range(0, len(numbers), 2)]
        return cls(points=points)

    @classmethod
    def from_coordinates(cls, *numbers: Number) -> "Polygon":
        """Create a polygon from coordinates given as separate arguments."""
        return cls.from_numbers(numbers)

    @classmethod
    def from_string(cls, text: str) -> "Polygon":
        """
        Create a polygon from semicolon-separated points, e.g. "(0, 0); (1, 0); (0, 1)".

        Raises:
            ArgumentError: If a segment is not a valid "(x, y)" point or there
                are fewer than 3 points
        """
        segments = POLYGON_SEPARATOR.split(text.strip())
        polygon = cls(points=[Point2D.from_string(segment) for segment in segments])
        logger.debug(f"Parsed polygon with {len(polygon)} points from {text!r}")
        return polygon

    def _edges(self) -> Iterator[Tuple[Point2D, Point2D]]:
        """Consecutive point pairs, closing the loop from the last point back to the first."""
        return zip(self.points, self.points[1:] + self.points[:1])

    @property
    def perimeter(self) -> float:
        """Calculate the perimeter of the polygon."""
        return sum(start.distance_to(end) for start, end in self._edges())

    @property
    def signed_area(self) -> float:
        """Calculate the signed area of the polygon using the shoelace formula."""
        total = 0.0
        for current, next_point in self._edges():
            x1, y1 = as_float(current.x), as_float(current.y)
            x2, y2 = as_float(next_point.x), as_float(next_point.y)
            total += x1 * y2 - y1 * x2
        return total / 2.0

    @property
    def area(self) -> float:
        """Calculate the (unsigned) area of the polygon."""
        return abs(self.signed_area)

    def is_clockwise(self) -> bool:
        """Determine if the polygon is oriented clockwise."""
        # A positive area indicates counter-clockwise, negative indicates clockwise
        return self.signed_area < 0

    def is_rectangular(self) -> bool:
        """
        Check whether the polygon looks rectangular by comparing its diagonals.

        Returns True when there are exactly four points and the distance from
        point 1 to point 3 approximately equals the distance from point 2 to
        point 4. Equal diagonals do not prove a rectangle: an isosceles
        trapezoid also passes.
        """
        if len(self.points) != 4:
            return False
        first, second, third, fourth = self.points
        return math.isclose(
            first.distance_to(third),
            second.distance_to(fourth),
            rel_tol=RECTANGULARITY_REL_TOL,
        )

    def __len__(self) -> int:
        return len(self.points)

    def __str__(self) -> str:
        """String representation of the polygon."""
        return "[" + ", ".join(str(p) for p in self.points) + "]"
