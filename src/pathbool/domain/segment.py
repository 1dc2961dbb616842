"""Segment types produced while a boolean operation runs.

A segment is one piece of an input curve after it has been cut at every
intersection with the other path. Segments only live for the duration of a
single operation.
"""

from dataclasses import dataclass, replace
from enum import Enum, auto

from pathbool.domain.curve import Curve


class Operand(Enum):
    """Which input path a segment came from."""

    A = auto()
    B = auto()


class SegmentLocation(Enum):
    """Location of a segment relative to the other path.

    - INSIDE: Midpoint is enclosed by the other path
    - OUTSIDE: Midpoint is not enclosed by the other path
    - SHARED: Segment lies on the other boundary and both regions are on the
      same side of it
    - SHARED_OPPOSITE: Segment lies on the other boundary and the regions are
      on opposite sides of it
    """

    INSIDE = auto()
    OUTSIDE = auto()
    SHARED = auto()
    SHARED_OPPOSITE = auto()


@dataclass(frozen=True, slots=True)
class Segment:
    """A sub-curve of an input path.

    Attributes:
        curve: The sub-curve geometry
        operand: Input path the segment belongs to
        curve_index: Index of the source curve in the flat curve list
        contour_index: Index of the source contour
        location: Classification against the other path (None until classified)
    """

    curve: Curve
    operand: Operand
    curve_index: int
    contour_index: int
    location: SegmentLocation | None = None

    def with_location(self, location: SegmentLocation) -> "Segment":
        """Return a classified copy of this segment."""
        return replace(self, location=location)
