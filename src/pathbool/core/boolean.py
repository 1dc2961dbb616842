"""Segment selection for the four boolean operations.

Each operation keeps the segments whose location matches its table entry.
Entries marked reversed are traversed end to start, which gives the kept
piece the opposite winding of a hole-like boundary.

| Operation  | Path A keeps                    | Path B keeps              |
|------------|---------------------------------|---------------------------|
| union      | outside, shared                 | outside                   |
| intersect  | inside, shared                  | inside                    |
| difference | outside, shared-opposite        | inside (reversed)         |
| xor        | outside, inside (reversed)      | outside, inside (reversed)|

A boundary both paths share is kept once, from A, when it stays a boundary of
the result, and dropped when it becomes interior.
"""

from pathbool.domain import (
    BooleanOperation,
    Contour,
    Curve,
    Operand,
    Path,
    Segment,
    SegmentLocation,
)

# operation -> operand -> location -> reverse
_SELECTION: dict[BooleanOperation, dict[Operand, dict[SegmentLocation, bool]]] = {
    BooleanOperation.UNION: {
        Operand.A: {SegmentLocation.OUTSIDE: False, SegmentLocation.SHARED: False},
        Operand.B: {SegmentLocation.OUTSIDE: False},
    },
    BooleanOperation.INTERSECT: {
        Operand.A: {SegmentLocation.INSIDE: False, SegmentLocation.SHARED: False},
        Operand.B: {SegmentLocation.INSIDE: False},
    },
    BooleanOperation.DIFFERENCE: {
        Operand.A: {SegmentLocation.OUTSIDE: False, SegmentLocation.SHARED_OPPOSITE: False},
        Operand.B: {SegmentLocation.INSIDE: True},
    },
    BooleanOperation.XOR: {
        Operand.A: {SegmentLocation.OUTSIDE: False, SegmentLocation.INSIDE: True},
        Operand.B: {SegmentLocation.OUTSIDE: False, SegmentLocation.INSIDE: True},
    },
}


def selection_rule(
    operation: BooleanOperation,
    operand: Operand,
    location: SegmentLocation,
) -> tuple[bool, bool]:
    """Look up whether a segment is kept and whether it is reversed.

    Args:
        operation: Boolean operation
        operand: Operand the segment came from
        location: Segment location relative to the other operand

    Returns:
        Tuple of (kept, reversed)
    """
    rules = _SELECTION[operation][operand]
    if location not in rules:
        return False, False
    return True, rules[location]


def select_segments(
    operation: BooleanOperation,
    segments_a: list[Segment],
    segments_b: list[Segment],
) -> list[Curve]:
    """Pick the sub-curves that bound the result of an operation.

    Args:
        operation: Boolean operation
        segments_a: Classified segments of path A
        segments_b: Classified segments of path B

    Returns:
        Flat, unordered list of kept curves, reversed where the table says so

    Raises:
        ValueError: If a segment has not been classified
    """
    kept: list[Curve] = []

    for segment in [*segments_a, *segments_b]:
        if segment.location is None:
            raise ValueError(
                f"Segment {segment.curve_index} of operand {segment.operand.name} is unclassified"
            )

        keep, reverse = selection_rule(operation, segment.operand, segment.location)
        if keep:
            kept.append(segment.curve.reversed() if reverse else segment.curve)

    return kept


def select_contours(
    operation: BooleanOperation,
    path_a: Path,
    locations_a: list[SegmentLocation],
    path_b: Path,
    locations_b: list[SegmentLocation],
) -> Path:
    """Apply the selection table to whole contours.

    Used when the boundaries never cross, so each contour is entirely
    inside or outside the other path.

    Args:
        operation: Boolean operation
        path_a: Path A
        locations_a: One location per contour of A
        path_b: Path B
        locations_b: One location per contour of B

    Returns:
        Path made of the kept contours, reversed where the table says so
    """
    contours: list[Contour] = []

    for operand, path, locations in (
        (Operand.A, path_a, locations_a),
        (Operand.B, path_b, locations_b),
    ):
        for contour, location in zip(path.contours, locations, strict=True):
            if not contour.curves:
                continue
            keep, reverse = selection_rule(operation, operand, location)
            if keep:
                contours.append(contour.reversed() if reverse else contour)

    return Path(tuple(contours))
