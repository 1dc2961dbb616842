"""Internal Bezier curve flattening algorithms.

This is an internal module containing helper functions for flatten_curve.
Not intended for public use.
"""

import math

from pathbool.domain import Curve, Point

# Subdivision stops here even if the tolerance is not yet met
MAX_FLATTEN_DEPTH = 16


def _distance_to_chord(point: Point, start: Point, end: Point) -> float:
    """Distance from a control point to the infinite line through the chord."""
    dx = end.x - start.x
    dy = end.y - start.y
    length = math.hypot(dx, dy)

    # Degenerate chord: fall back to distance from the start point
    if length < 1e-12:
        return point.distance_to(start)

    return abs((point.x - start.x) * dy - (point.y - start.y) * dx) / length


def is_flat(curve: Curve, tolerance: float) -> bool:
    """Check whether both inner control points lie within tolerance of the chord.

    The curve is contained in its control polygon's hull, so this bounds
    the deviation of the curve from the straight chord.
    """
    return (
        _distance_to_chord(curve.p1, curve.p0, curve.p3) <= tolerance
        and _distance_to_chord(curve.p2, curve.p0, curve.p3) <= tolerance
    )


def flatten_cubic(curve: Curve, tolerance: float, depth: int = 0) -> list[Point]:
    """Flatten a cubic Bezier curve using recursive subdivision.

    Uses De Casteljau's algorithm for subdivision.

    Args:
        curve: Curve to flatten
        tolerance: Maximum distance from true curve
        depth: Current recursion depth

    Returns:
        List of points approximating the curve, including both end points
    """
    if depth >= MAX_FLATTEN_DEPTH or is_flat(curve, tolerance):
        # Flat enough, return endpoints
        return [curve.p0, curve.p3]

    left, right = curve.subdivide(0.5)

    # Combine, avoiding duplicate midpoint
    return flatten_cubic(left, tolerance, depth + 1)[:-1] + flatten_cubic(
        right, tolerance, depth + 1
    )
