"""Unit tests for curve and path splitting."""

import pytest

from pathbool.core.splitter import split_curve, split_path
from pathbool.domain import Curve, Operand, Path


@pytest.fixture
def arc() -> Curve:
    return Curve.from_points([(0, 0), (20, 80), (90, 120), (150, 40)])


class TestSplitCurve:
    """Tests for split_curve."""

    def test_no_params_returns_whole_curve(self, arc):
        assert split_curve(arc, []) == [arc]

    def test_boundary_points_match_evaluation(self, arc):
        """Cutting at [0.25, 0.75] puts the joints at B(0.25) and B(0.75)."""
        pieces = split_curve(arc, [0.25, 0.75])

        assert len(pieces) == 3
        assert pieces[0].end.distance_to(arc.evaluate(0.25)) < 1e-6
        assert pieces[1].end.distance_to(arc.evaluate(0.75)) < 1e-6

    def test_pieces_partition_curve(self, arc):
        pieces = split_curve(arc, [0.1, 0.4, 0.9])

        assert pieces[0].start == arc.start
        assert pieces[-1].end == arc.end
        for left, right in zip(pieces, pieces[1:]):
            assert left.end == right.start

    def test_pieces_follow_original_geometry(self, arc):
        """The middle piece's midpoint is B(0.5) of the original."""
        pieces = split_curve(arc, [0.25, 0.75])
        assert pieces[1].evaluate(0.5).distance_to(arc.evaluate(0.5)) < 1e-6

    @pytest.mark.parametrize("params", [[0.0], [1.0], [-0.2], [0.5, 1.5]])
    def test_out_of_range_rejected(self, arc, params):
        with pytest.raises(ValueError, match="outside"):
            split_curve(arc, params)

    @pytest.mark.parametrize("params", [[0.6, 0.3], [0.4, 0.4]])
    def test_not_increasing_rejected(self, arc, params):
        with pytest.raises(ValueError, match="strictly increasing"):
            split_curve(arc, params)


class TestSplitPath:
    """Tests for split_path."""

    def test_segments_tagged(self, rect):
        path = rect(0, 0, 100, 100)
        segments = split_path(path, {1: [0.5], 2: [0.25, 0.75]}, Operand.B)

        assert len(segments) == 4 + 1 + 2
        assert all(s.operand == Operand.B for s in segments)
        assert all(s.location is None for s in segments)
        assert [s.curve_index for s in segments] == [0, 1, 1, 2, 2, 2, 3]

    def test_contour_index(self, rect):
        path = Path(rect(0, 0, 1, 1).contours + rect(5, 5, 6, 6).contours)
        segments = split_path(path, {}, Operand.A)

        assert [s.contour_index for s in segments] == [0] * 4 + [1] * 4
        assert [s.curve_index for s in segments] == list(range(8))
