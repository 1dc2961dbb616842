"""Cutting curves and paths at intersection parameters."""

from collections.abc import Mapping, Sequence

from pathbool.domain import Curve, Operand, Path, Segment


def split_curve(curve: Curve, params: Sequence[float]) -> list[Curve]:
    """Split a curve at an increasing list of parameters.

    After cutting at t0 the remaining parameters are remapped to the local
    range of the remainder with t' = (t - t0) / (1 - t0), then the cut
    repeats. Consecutive pieces share their joint point exactly.

    Args:
        curve: Curve to split
        params: Strictly increasing parameters in (0, 1)

    Returns:
        len(params) + 1 sub-curves partitioning the curve

    Raises:
        ValueError: If a parameter is outside (0, 1) or the list is not
            strictly increasing

    Examples:
        >>> line = Curve.from_points([(0.0, 0.0), (1.0, 0.0), (2.0, 0.0), (3.0, 0.0)])
        >>> [c.end.x for c in split_curve(line, [0.5])]
        [1.5, 3.0]
    """
    previous = 0.0
    for t in params:
        if not 0.0 < t < 1.0:
            raise ValueError(f"Split parameter {t} is outside (0, 1)")
        if t <= previous:
            raise ValueError(f"Split parameters must be strictly increasing, got {list(params)}")
        previous = t

    pieces: list[Curve] = []
    remainder = curve
    consumed = 0.0

    for t in params:
        local = (t - consumed) / (1.0 - consumed)
        head, remainder = remainder.subdivide(local)
        pieces.append(head)
        consumed = t

    pieces.append(remainder)
    return pieces


def split_path(
    path: Path,
    params_by_index: Mapping[int, Sequence[float]],
    operand: Operand,
) -> list[Segment]:
    """Split every curve of a path and wrap the pieces as segments.

    Args:
        path: Path to split
        params_by_index: Split parameters keyed by flat curve index; curves
            without an entry stay whole
        operand: Which operand the path is

    Returns:
        Unclassified segments in path order
    """
    segments: list[Segment] = []
    index = 0

    for contour_index, contour in enumerate(path.contours):
        for curve in contour.curves:
            for piece in split_curve(curve, params_by_index.get(index, ())):
                segments.append(
                    Segment(
                        curve=piece,
                        operand=operand,
                        curve_index=index,
                        contour_index=contour_index,
                    )
                )
            index += 1

    return segments
