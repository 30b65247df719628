import pytest
from polygeom.errors import ArgumentError, ParseError
from polygeom.geometry.point import Point2D
from polygeom.geometry.polygon import Polygon


def points(*coords):
    return [Point2D(x=x, y=y) for x, y in coords]


class TestPolygonConstruction:
    def test_create_polygon(self):
        polygon = Polygon(points=points((0, 0), (1, 0), (1, 1), (0, 1)))
        assert len(polygon) == 4
        assert isinstance(polygon, Polygon)

    def test_keeps_order_and_duplicates(self):
        pts = points((0, 0), (1, 0), (1, 0), (0, 1))
        polygon = Polygon(points=pts)
        assert list(polygon.points) == pts

    def test_insufficient_points(self):
        with pytest.raises(ArgumentError) as exc_info:
            Polygon(points=points((0, 0), (1, 0)))
        assert "at least 3 points" in str(exc_info.value)

    def test_from_numbers(self):
        polygon = Polygon.from_numbers([0, 0.0, 1, 0, 1.0, 4, 0, 4])
        assert polygon == Polygon(points=points((0, 0.0), (1, 0), (1.0, 4), (0, 4)))

    def test_from_numbers_too_few_points(self):
        with pytest.raises(ArgumentError) as exc_info:
            Polygon.from_numbers([0, 0, 1, 0])
        assert "at least 3 points" in str(exc_info.value)

    def test_from_numbers_odd_count(self):
        with pytest.raises(ArgumentError) as exc_info:
            Polygon.from_numbers([0, 0, 1, 0, 1])
        assert "even number" in str(exc_info.value)

    def test_from_coordinates(self):
        polygon = Polygon.from_coordinates(0, 0, 1, 0, 2, 1, 1, 1)
        assert polygon == Polygon(points=points((0, 0), (1, 0), (2, 1), (1, 1)))

    def test_from_coordinates_rejections(self):
        with pytest.raises(ArgumentError):
            Polygon.from_coordinates(0, 0, 1, 0)
        with pytest.raises(ArgumentError):
            Polygon.from_coordinates(0, 0, 1, 0, 1)

    def test_from_string(self):
        polygon = Polygon.from_string("(0, 0.0); (19, 21); (-3, -17.3)")
        assert polygon == Polygon(points=points((0, 0.0), (19, 21), (-3, -17.3)))

    def test_from_string_whitespace(self):
        polygon = Polygon.from_string("  (0,0);(1, 0) ;   ( 0 , 1 )  ")
        assert polygon == Polygon(points=points((0, 0), (1, 0), (0, 1)))

    def test_from_string_bad_segment(self):
        with pytest.raises(ArgumentError):
            Polygon.from_string("(0, 0); 1, 0; (0, 1)")
        with pytest.raises(ArgumentError):
            Polygon.from_string("(0, 0); (1, 0); (0, 1);")

    def test_from_string_bad_number(self):
        with pytest.raises(ParseError):
            Polygon.from_string("(0, 0); (x, 0); (0, 1)")

    def test_from_string_too_few_points(self):
        with pytest.raises(ArgumentError):
            Polygon.from_string("(0, 0); (1, 0)")

    def test_immutability(self):
        polygon = Polygon.from_coordinates(0, 0, 1, 0, 0, 1)

        with pytest.raises(Exception):
            polygon.points = tuple(points((0, 0), (2, 0), (0, 2)))

        assert isinstance(polygon.points, tuple)

    def test_huge_coordinates_from_string(self):
        big = "1" * 400
        polygon = Polygon.from_string(f"(0, 0); ({big}, 0); (0, 1)")
        assert polygon.points[1].x == int(big)
        assert polygon.perimeter == float("inf")

    def test_special_floats(self):
        nan = float("nan")
        assert Polygon.from_coordinates(nan, 0, 1, 0, 0, 1) == Polygon.from_coordinates(nan, 0, 1, 0, 0, 1)
        assert Polygon.from_coordinates(-0.0, 0, 1, 0, 0, 1) != Polygon.from_coordinates(0.0, 0, 1, 0, 0, 1)


class TestPolygonEquality:
    def test_equals_itself(self):
        assert Polygon(points=points((0, 0), (1, 0), (0, 1))) == Polygon(points=points((0, 0), (1, 0), (0, 1)))

    def test_different_points(self):
        assert Polygon(points=points((0, 0), (1, 0), (0, 1))) != Polygon(points=points((0, 0), (1, 1), (2, 2)))

    def test_longer_and_shorter(self):
        triangle = Polygon(points=points((0, 0), (1, 0), (0, 1)))
        longer = Polygon(points=points((0, 0), (1, 0), (0, 1), (-1, 1)))
        assert triangle != longer
        assert longer != triangle

    def test_order_matters(self):
        assert Polygon.from_coordinates(0, 0, 1, 0, 0, 1) != Polygon.from_coordinates(1, 0, 0, 1, 0, 0)
        assert Polygon.from_coordinates(0, 0, 1, 0, 0, 1) != Polygon.from_coordinates(0, 0, 0, 1, 1, 0)

    def test_int_equals_float(self):
        assert Polygon.from_coordinates(0, 0, 1, 0, 0, 1) == Polygon.from_coordinates(0.0, 0.0, 1.0, 0.0, 0.0, 1.0)

    def test_hashable(self):
        a = Polygon.from_string("(0, 0); (1, 0); (0, 1)")
        b = Polygon.from_coordinates(0, 0, 1, 0, 0, 1)
        assert len({a, b}) == 1


class TestPolygonMeasures:
    def test_perimeter(self):
        polygon = Polygon.from_coordinates(0, 0, 2, 0, 2, 2, 0, 2)
        assert polygon.perimeter == pytest.approx(8.0)

    def test_area(self):
        polygon = Polygon.from_coordinates(0, 0, 2, 0, 1, 1)
        assert polygon.area == pytest.approx(1.0)

    def test_concave_area(self):
        l_shape = Polygon.from_coordinates(0, 0, 2, 0, 2, 1, 1, 1, 1, 2, 0, 2)
        assert l_shape.area == pytest.approx(3.0)

    def test_orientation(self):
        ccw = Polygon.from_coordinates(0, 0, 1, 0, 1, 1, 0, 1)
        cw = Polygon.from_coordinates(0, 0, 0, 1, 1, 1, 1, 0)
        assert not ccw.is_clockwise()
        assert cw.is_clockwise()
        assert cw.signed_area == pytest.approx(-1.0)
        assert cw.area == pytest.approx(1.0)
        # Orientation is not normalized
        assert cw.points[1] == Point2D(x=0, y=1)

    def test_is_rectangular(self):
        assert Polygon.from_coordinates(0, 0, 1, 0, 1, 2, 0, 2).is_rectangular()
        assert not Polygon.from_coordinates(0, 0, 1, 0, 2, 1, 1, 1).is_rectangular()
        assert not Polygon.from_coordinates(0, 0, 1, 0, 0, 1).is_rectangular()

    def test_string_representation(self):
        assert str(Polygon.from_coordinates(0, 0, 1, 0, 0, 1)) == "[(0, 0), (1, 0), (0, 1)]"
        assert str(Polygon.from_string("(0, 0.0); (19, 21); (-3, -17.3)")) == "[(0, 0.0), (19, 21), (-3, -17.3)]"
