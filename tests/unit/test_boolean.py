"""Unit tests for segment selection."""

import pytest

from pathbool.core.boolean import select_contours, select_segments, selection_rule
from pathbool.domain import (
    BooleanOperation,
    Curve,
    Operand,
    Path,
    Point,
    Segment,
    SegmentLocation,
)

INSIDE = SegmentLocation.INSIDE
OUTSIDE = SegmentLocation.OUTSIDE
SHARED = SegmentLocation.SHARED
SHARED_OPPOSITE = SegmentLocation.SHARED_OPPOSITE


def segment(operand: Operand, location: SegmentLocation | None, index: int = 0) -> Segment:
    curve = Curve.from_line(Point(index, 0), Point(index + 1, 0))
    return Segment(
        curve=curve,
        operand=operand,
        curve_index=index,
        contour_index=0,
        location=location,
    )


class TestSelectionRule:
    """Tests for the selection table."""

    @pytest.mark.parametrize(
        ("operation", "operand", "location", "expected"),
        [
            (BooleanOperation.UNION, Operand.A, OUTSIDE, (True, False)),
            (BooleanOperation.UNION, Operand.A, SHARED, (True, False)),
            (BooleanOperation.UNION, Operand.A, INSIDE, (False, False)),
            (BooleanOperation.UNION, Operand.B, SHARED, (False, False)),
            (BooleanOperation.INTERSECT, Operand.A, INSIDE, (True, False)),
            (BooleanOperation.INTERSECT, Operand.A, SHARED, (True, False)),
            (BooleanOperation.INTERSECT, Operand.B, OUTSIDE, (False, False)),
            (BooleanOperation.DIFFERENCE, Operand.A, SHARED_OPPOSITE, (True, False)),
            (BooleanOperation.DIFFERENCE, Operand.A, SHARED, (False, False)),
            (BooleanOperation.DIFFERENCE, Operand.B, INSIDE, (True, True)),
            (BooleanOperation.DIFFERENCE, Operand.B, OUTSIDE, (False, False)),
            (BooleanOperation.XOR, Operand.A, INSIDE, (True, True)),
            (BooleanOperation.XOR, Operand.B, OUTSIDE, (True, False)),
            (BooleanOperation.XOR, Operand.A, SHARED, (False, False)),
            (BooleanOperation.XOR, Operand.B, SHARED_OPPOSITE, (False, False)),
        ],
    )
    def test_rule(self, operation, operand, location, expected):
        assert selection_rule(operation, operand, location) == expected


class TestSelectSegments:
    """Tests for select_segments."""

    def test_union_keeps_outside(self):
        segments_a = [segment(Operand.A, OUTSIDE, 0), segment(Operand.A, INSIDE, 1)]
        segments_b = [segment(Operand.B, OUTSIDE, 2), segment(Operand.B, INSIDE, 3)]
        kept = select_segments(BooleanOperation.UNION, segments_a, segments_b)

        assert kept == [segments_a[0].curve, segments_b[0].curve]

    def test_difference_reverses_b(self):
        segments_b = [segment(Operand.B, INSIDE, 5)]
        kept = select_segments(BooleanOperation.DIFFERENCE, [], segments_b)

        assert kept == [segments_b[0].curve.reversed()]

    def test_shared_boundary_kept_once(self):
        """Union keeps a shared run from A only."""
        segments_a = [segment(Operand.A, SHARED, 0)]
        segments_b = [segment(Operand.B, SHARED, 0)]
        kept = select_segments(BooleanOperation.UNION, segments_a, segments_b)

        assert kept == [segments_a[0].curve]

    def test_unclassified_rejected(self):
        with pytest.raises(ValueError, match="unclassified"):
            select_segments(BooleanOperation.XOR, [segment(Operand.A, None)], [])


class TestSelectContours:
    """Tests for whole-contour selection when boundaries never cross."""

    @pytest.fixture
    def nested(self, rect) -> tuple[Path, Path]:
        return rect(0, 0, 100, 100), rect(25, 25, 75, 75)

    def test_union_keeps_container(self, nested):
        outer, inner = nested
        result = select_contours(BooleanOperation.UNION, outer, [OUTSIDE], inner, [INSIDE])
        assert result.contours == outer.contours

    def test_intersect_keeps_contained(self, nested):
        outer, inner = nested
        result = select_contours(BooleanOperation.INTERSECT, outer, [OUTSIDE], inner, [INSIDE])
        assert result.contours == inner.contours

    def test_difference_adds_reversed_hole(self, nested):
        outer, inner = nested
        result = select_contours(BooleanOperation.DIFFERENCE, outer, [OUTSIDE], inner, [INSIDE])
        assert result.contours == (outer.contours[0], inner.contours[0].reversed())

    def test_disjoint_union_keeps_both(self, rect):
        a = rect(0, 0, 10, 10)
        b = rect(50, 50, 60, 60)
        result = select_contours(BooleanOperation.UNION, a, [OUTSIDE], b, [OUTSIDE])
        assert len(result.contours) == 2

    def test_disjoint_intersect_empty(self, rect):
        a = rect(0, 0, 10, 10)
        b = rect(50, 50, 60, 60)
        result = select_contours(BooleanOperation.INTERSECT, a, [OUTSIDE], b, [OUTSIDE])
        assert result.is_empty()
