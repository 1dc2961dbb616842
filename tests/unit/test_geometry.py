"""Unit tests for geometry helpers and curve flattening."""

import math

import pytest

from pathbool.config import FillRule
from pathbool.core._bezier import flatten_cubic, is_flat
from pathbool.core.geometry import (
    PathRegion,
    contour_area,
    flatten_contour,
    flatten_curve,
    nearest_point_on_segment,
    path_area,
    point_in_polygon,
    signed_area,
    winding_number,
)
from pathbool.domain import Curve, Path, Point

SQUARE = [Point(0.0, 0.0), Point(2.0, 0.0), Point(2.0, 2.0), Point(0.0, 2.0)]


class TestPolygonPredicates:
    """Tests for area, ray casting and winding number."""

    def test_signed_area_orientation(self):
        assert signed_area(SQUARE) == 4.0
        assert signed_area(list(reversed(SQUARE))) == -4.0

    def test_signed_area_degenerate(self):
        assert signed_area(SQUARE[:2]) == 0.0

    def test_point_in_polygon(self):
        assert point_in_polygon(Point(1.0, 1.0), SQUARE)
        assert not point_in_polygon(Point(3.0, 1.0), SQUARE)

    def test_winding_number_direction(self):
        """CCW polygons wind +1, CW polygons -1."""
        assert winding_number(Point(1.0, 1.0), SQUARE) == 1
        assert winding_number(Point(1.0, 1.0), list(reversed(SQUARE))) == -1
        assert winding_number(Point(5.0, 1.0), SQUARE) == 0

    def test_nearest_point_on_segment_clamps(self):
        nearest, distance = nearest_point_on_segment(Point(-3.0, 4.0), Point(0, 0), Point(10, 0))
        assert nearest == Point(0.0, 0.0)
        assert distance == 5.0

    def test_nearest_point_on_segment_projects(self):
        nearest, distance = nearest_point_on_segment(Point(4.0, 3.0), Point(0, 0), Point(10, 0))
        assert nearest.x == pytest.approx(4.0)
        assert distance == pytest.approx(3.0)


class TestFlattening:
    """Tests for curve and contour flattening."""

    def test_line_flattens_to_endpoints(self):
        line = Curve.from_line(Point(0, 0), Point(10, 10))
        assert flatten_curve(line) == [line.p0, line.p3]

    def test_flat_curve_detection(self):
        line = Curve.from_line(Point(0, 0), Point(10, 0))
        bent = Curve.from_points([(0, 0), (0, 10), (10, 10), (10, 0)])
        assert is_flat(line, 0.01)
        assert not is_flat(bent, 0.01)

    def test_flatten_stays_close_to_curve(self):
        curve = Curve.from_points([(0, 0), (0, 100), (100, 100), (100, 0)])
        points = flatten_cubic(curve, 0.01)

        assert points[0] == curve.p0
        assert points[-1] == curve.p3
        assert len(points) > 10

        # Every vertex lies on the curve
        samples = [curve.evaluate(i / 1000) for i in range(1001)]
        for point in points:
            assert min(point.distance_to(s) for s in samples) < 1.0

    def test_flatten_contour_drops_closing_duplicate(self, unit_square):
        polygon = flatten_contour(unit_square.contours[0])
        assert len(polygon) == 4
        assert polygon[0] == Point(0, 0)

    def test_circle_area(self, circle):
        """Four-arc circles enclose pi r^2 to within the approximation error."""
        area = contour_area(circle(0, 0, 100).contours[0])
        assert area == pytest.approx(math.pi * 100 * 100, rel=1e-3)

    def test_path_area_with_hole(self, rect):
        """A reversed inner contour subtracts from the outer one."""
        outer = rect(0, 0, 100, 100).contours[0]
        hole = rect(25, 25, 75, 75).contours[0].reversed()
        assert path_area(Path((outer, hole))) == pytest.approx(7500.0)


class TestPathRegion:
    """Tests for PathRegion containment and distance queries."""

    @pytest.fixture
    def nested(self, rect) -> Path:
        """Outer square with a same-direction inner square."""
        return Path(rect(0, 0, 100, 100).contours + rect(25, 25, 75, 75).contours)

    def test_empty_region(self):
        region = PathRegion.from_path(Path())
        assert region.bounds is None
        assert not region.contains(Point(0, 0))
        assert region.distance_to_boundary(Point(0, 0)) == math.inf

    def test_contains_simple(self, unit_square):
        region = PathRegion.from_path(unit_square)
        assert region.contains(Point(50, 50))
        assert not region.contains(Point(150, 50))
        assert not region.contains(Point(-1, 50))

    def test_even_odd_makes_hole(self, nested):
        region = PathRegion.from_path(nested)
        assert region.contains(Point(10, 10), FillRule.EVEN_ODD)
        assert not region.contains(Point(50, 50), FillRule.EVEN_ODD)

    def test_nonzero_fills_same_direction_inner(self, nested):
        region = PathRegion.from_path(nested)
        assert region.contains(Point(10, 10), FillRule.NONZERO)
        assert region.contains(Point(50, 50), FillRule.NONZERO)

    def test_distance_to_boundary(self, unit_square):
        region = PathRegion.from_path(unit_square)
        assert region.distance_to_boundary(Point(50, 40)) == pytest.approx(40.0)
        assert region.distance_to_boundary(Point(100, 50)) == pytest.approx(0.0)
