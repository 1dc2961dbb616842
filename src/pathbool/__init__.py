"""Pathbool - Boolean operations on cubic Bezier paths.

Pathbool computes union, intersection, difference and symmetric difference of
planar paths built from lines and cubic Bezier curves. Intersections between
curves are found by recursive subdivision, the curves are cut at the
intersections, classified against the other path, and the kept fragments are
stitched back into closed contours.

Example:
    >>> from pathbool import union
    >>> from pathbool.io import parse_svg_path
    >>> a = parse_svg_path("M0 0 L100 0 L100 100 L0 100 Z")
    >>> b = parse_svg_path("M50 50 L150 50 L150 150 L50 150 Z")
    >>> merged = union(a, b)
"""

from pathbool.core.decomposer import decompose
from pathbool.core.processor import (
    boolean_operation,
    difference,
    intersect,
    intersection_points,
    union,
    xor,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "boolean_operation",
    "decompose",
    "difference",
    "intersect",
    "intersection_points",
    "union",
    "xor",
]
