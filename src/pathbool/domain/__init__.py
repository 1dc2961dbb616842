"""Domain models for pathbool.

This module contains the core domain models representing points, curves,
contours, paths and the transient segment and result types of a boolean
operation. All geometric models are:

- Immutable (frozen dataclasses)
- Serializable to plain dictionaries
- Independent of fonttools and of any rendering surface

Key classes:
- Point: A 2D coordinate
- BoundingBox: Axis-aligned box used for hull pruning
- Curve: A cubic Bezier segment (lines are degenerate cubics)
- PathElement: A move/line/curve/close draw instruction
- Contour: A continuous run of curves
- Path: A collection of contours
- Segment: A classified piece of an input curve
- BooleanResult / Diagnostics: Output of a boolean operation
"""

from pathbool.domain.curve import BoundingBox, Curve, Point
from pathbool.domain.path import (
    CONTINUITY_TOLERANCE,
    Contour,
    ElementType,
    Path,
    PathElement,
)
from pathbool.domain.result import BooleanOperation, BooleanResult, Diagnostics
from pathbool.domain.segment import Operand, Segment, SegmentLocation

__all__: list[str] = [
    # Constants
    "CONTINUITY_TOLERANCE",
    # Enums
    "BooleanOperation",
    "ElementType",
    "Operand",
    "SegmentLocation",
    # Core types
    "BoundingBox",
    "Contour",
    "Curve",
    "Path",
    "PathElement",
    "Point",
    "Segment",
    # Results
    "BooleanResult",
    "Diagnostics",
]
