"""Unit tests for the subdivision intersection finder.

Tests cover:
- Line-line and curve-curve crossings
- Hull pruning of disjoint curves
- Coincident and collinear curves
- Depth cap and candidate ceiling
"""

import pytest

from pathbool.config import IntersectionConfig
from pathbool.core.intersection import (
    IntersectionFinder,
    SearchStats,
    collinear_overlap,
    curves_coincide,
)
from pathbool.domain import Curve, Path, Point


@pytest.fixture
def finder() -> IntersectionFinder:
    return IntersectionFinder(IntersectionConfig())


def line(x0: float, y0: float, x1: float, y1: float) -> Curve:
    return Curve.from_line(Point(x0, y0), Point(x1, y1))


class TestCurveIntersections:
    """Tests for IntersectionFinder.find on single curve pairs."""

    def test_crossing_lines(self, finder):
        """Two diagonals cross at their midpoints."""
        results = finder.find(line(0, 0, 10, 10), line(0, 10, 10, 0))

        assert results
        for t_a, t_b in results:
            assert t_a == pytest.approx(0.5, abs=1e-3)
            assert t_b == pytest.approx(0.5, abs=1e-3)

    def test_candidates_are_on_both_curves(self, finder):
        a = Curve.from_points([(0, 0), (30, 100), (70, 100), (100, 0)])
        b = line(0, 50, 100, 50)
        results = finder.find(a, b)

        assert results
        for t_a, t_b in results:
            assert a.evaluate(t_a).distance_to(b.evaluate(t_b)) < 0.1

    def test_arch_crosses_line_twice(self, finder):
        a = Curve.from_points([(0, 0), (30, 100), (70, 100), (100, 0)])
        b = line(0, 50, 100, 50)
        t_values = sorted(t_a for t_a, _ in finder.find(a, b))

        # Two clusters, one on each side of the apex
        assert t_values[0] < 0.5 < t_values[-1]

    def test_disjoint_curves(self, finder):
        stats = SearchStats()
        assert finder.find(line(0, 0, 10, 0), line(0, 5, 10, 5), stats) == []
        assert stats.nodes_visited == 1
        assert stats.candidate_count == 0

    def test_converged_windows_respect_threshold(self):
        finder = IntersectionFinder(IntersectionConfig(convergence_threshold=0.01))
        stats = SearchStats()
        finder.find(line(0, 0, 10, 10), line(0, 10, 10, 0), stats)

        assert stats.candidate_count > 0
        assert not stats.depth_capped

    def test_depth_cap_reports_best_effort(self):
        """Hitting the depth cap still reports candidates and sets the flag."""
        finder = IntersectionFinder(IntersectionConfig(max_depth=3))
        stats = SearchStats()
        results = finder.find(line(0, 0, 10, 10), line(0, 10, 10, 0), stats)

        assert results
        assert stats.depth_capped
        for t_a, _ in results:
            assert 0.25 <= t_a <= 0.75

    def test_candidate_ceiling_truncates(self):
        finder = IntersectionFinder(IntersectionConfig(max_candidates=1))
        stats = SearchStats()
        results = finder.find(line(0, 0, 10, 10), line(0, 10, 10, 0), stats)

        assert len(results) == 1
        assert stats.truncated

    def test_overlapping_stretch_stops_at_pair_cap(self, finder):
        """A curve and a piece of itself converge along the whole shared stretch."""
        arc = Curve.from_points([(0, 0), (30, 100), (70, 100), (100, 0)])
        stats = SearchStats()
        results = finder.find(arc, arc.segment(0.2, 0.9), stats)

        assert len(results) == finder.config.max_pair_candidates
        assert stats.overlap_pairs == 1
        assert not stats.truncated

    def test_crossing_stays_below_pair_cap(self, finder):
        stats = SearchStats()
        finder.find(line(0, 0, 10, 10), line(0, 10, 10, 0), stats)
        assert stats.overlap_pairs == 0


class TestCoincidence:
    """Tests for coincident and collinear detection."""

    def test_curves_coincide_forward_and_reversed(self):
        a = Curve.from_points([(0, 0), (30, 100), (70, 100), (100, 0)])
        assert curves_coincide(a, a, 1e-4)
        assert curves_coincide(a, a.reversed(), 1e-4)
        assert not curves_coincide(a, a.translated(1, 0), 1e-4)

    def test_collinear_overlap(self):
        pairs = collinear_overlap(line(0, 0, 10, 0), line(5, 0, 15, 0), 1e-4)
        assert pairs is not None
        assert [(round(t_a, 6), round(t_b, 6)) for t_a, t_b in pairs] == [(0.5, 0.0), (1.0, 0.5)]

    def test_collinear_disjoint(self):
        assert collinear_overlap(line(0, 0, 10, 0), line(20, 0, 30, 0), 1e-4) == []

    def test_not_collinear(self):
        assert collinear_overlap(line(0, 0, 10, 0), line(0, 1, 10, 1), 1e-4) is None
        assert collinear_overlap(line(0, 0, 10, 10), line(0, 10, 10, 0), 1e-4) is None


class TestPathIntersections:
    """Tests for find_path_intersections."""

    def test_overlapping_squares(self, finder, rect):
        found = finder.find_path_intersections(rect(0, 0, 100, 100), rect(50, 50, 150, 150))

        assert found.has_crossings
        assert {c.index_a for c in found.candidates} == {1, 2}
        assert {c.index_b for c in found.candidates} == {0, 3}

    def test_disjoint_paths(self, finder, circle):
        found = finder.find_path_intersections(circle(0, 0, 100), circle(500, 0, 100))

        assert not found.has_crossings
        assert found.stats.nodes_visited == 0

    def test_identical_paths_are_coincident(self, finder, circle):
        path = circle(0, 0, 100)
        found = finder.find_path_intersections(path, path)

        assert sorted(found.coincident_pairs) == [(0, 0), (1, 1), (2, 2), (3, 3)]
        assert found.has_crossings

    def test_reversed_path_is_coincident(self, finder, unit_square):
        found = finder.find_path_intersections(unit_square, unit_square.reversed())
        assert len(found.coincident_pairs) == 4

    def test_truncation_stops_path_search(self, circle):
        finder = IntersectionFinder(IntersectionConfig(max_candidates=1))
        found = finder.find_path_intersections(circle(0, 0, 100), circle(100, 0, 100))

        assert found.stats.truncated
        assert len(found.candidates) == 1

    def test_single_contour_paths(self, finder):
        a = Path.from_curves([line(0, 0, 10, 10)], closed=False)
        b = Path.from_curves([line(0, 10, 10, 0)], closed=False)
        found = finder.find_path_intersections(a, b)

        assert found.candidates
        assert all(c.index_a == 0 and c.index_b == 0 for c in found.candidates)
