"""Path and contour representation.

This module defines the path-level domain models:
- ElementType / PathElement: Draw instructions (move, line, curve, close)
- Contour: A continuous run of curves, open or closed
- Path: An ordered collection of contours

All models are frozen. Every transform returns a new value.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Any

from pathbool.domain.curve import BoundingBox, Curve, Point
from pathbool.exceptions import InvalidPathError

# Maximum distance between consecutive curve end points within a contour
CONTINUITY_TOLERANCE = 1e-6


class ElementType(Enum):
    """Type of a draw instruction."""

    MOVE_TO = "moveTo"
    LINE_TO = "lineTo"
    CURVE_TO = "curveTo"
    CLOSE = "closePath"


@dataclass(frozen=True, slots=True)
class PathElement:
    """A single draw instruction.

    Attributes:
        kind: Instruction type
        points: Points consumed by the instruction (1 for move/line, 3 for
            curve, none for close)
    """

    kind: ElementType
    points: tuple[Point, ...] = ()

    @classmethod
    def move_to(cls, x: float, y: float) -> "PathElement":
        return cls(ElementType.MOVE_TO, (Point(x, y),))

    @classmethod
    def line_to(cls, x: float, y: float) -> "PathElement":
        return cls(ElementType.LINE_TO, (Point(x, y),))

    @classmethod
    def curve_to(
        cls,
        c1: tuple[float, float],
        c2: tuple[float, float],
        end: tuple[float, float],
    ) -> "PathElement":
        return cls(
            ElementType.CURVE_TO,
            (Point(*c1), Point(*c2), Point(*end)),
        )

    @classmethod
    def close(cls) -> "PathElement":
        return cls(ElementType.CLOSE)


@dataclass(frozen=True)
class Contour:
    """A continuous sequence of curves.

    Curve i+1 starts where curve i ends (within CONTINUITY_TOLERANCE).

    Attributes:
        curves: Curves in traversal order
        closed: Whether the contour was closed; open contours returned from a
            boolean operation signal a degraded result
    """

    curves: tuple[Curve, ...]
    closed: bool = True

    def __post_init__(self) -> None:
        # Accept any iterable of curves but store a tuple
        if not isinstance(self.curves, tuple):
            object.__setattr__(self, "curves", tuple(self.curves))

        for i in range(len(self.curves) - 1):
            gap = self.curves[i].end.distance_to(self.curves[i + 1].start)
            if gap > CONTINUITY_TOLERANCE:
                raise InvalidPathError(
                    f"curve {i + 1} starts {gap:.6g} units away from the end of curve {i}"
                )

    def __len__(self) -> int:
        return len(self.curves)

    def __iter__(self) -> Iterator[Curve]:
        return iter(self.curves)

    @property
    def start(self) -> Point:
        """First point of the contour."""
        if not self.curves:
            raise InvalidPathError("empty contour has no start point")
        return self.curves[0].start

    @property
    def end(self) -> Point:
        """Last point of the contour."""
        if not self.curves:
            raise InvalidPathError("empty contour has no end point")
        return self.curves[-1].end

    def is_empty(self) -> bool:
        return len(self.curves) == 0

    def close(self) -> "Contour":
        """Return a closed copy, synthesizing a closing line if needed.

        Returns:
            Closed contour (self if already closed)
        """
        if self.closed:
            return self

        if not self.curves or self.end.distance_to(self.start) <= CONTINUITY_TOLERANCE:
            return Contour(self.curves, closed=True)

        closing = Curve.from_line(self.end, self.start)
        return Contour(self.curves + (closing,), closed=True)

    def reversed(self) -> "Contour":
        """Same contour traversed in the opposite direction."""
        return Contour(
            tuple(curve.reversed() for curve in reversed(self.curves)),
            closed=self.closed,
        )

    def bounding_box(self) -> BoundingBox:
        """Bounding box of all control points.

        Raises:
            InvalidPathError: If the contour is empty
        """
        if not self.curves:
            raise InvalidPathError("empty contour has no bounding box")
        return BoundingBox.from_points([p for curve in self.curves for p in curve.points])

    def to_elements(self) -> list[PathElement]:
        """Convert back to draw instructions.

        Line curves become line-to instructions. A closed contour whose last
        curve is a line back to the start is emitted as a plain close.

        Returns:
            Draw instructions that decompose back into this contour
        """
        if not self.curves:
            return []

        elements = [PathElement(ElementType.MOVE_TO, (self.start,))]
        curves = list(self.curves)

        # The decomposer synthesizes the closing line from a close instruction
        if self.closed and len(curves) > 1 and curves[-1].is_line() and curves[-1].end == self.start:
            curves.pop()

        for curve in curves:
            if curve.is_line():
                elements.append(PathElement(ElementType.LINE_TO, (curve.end,)))
            else:
                elements.append(PathElement(ElementType.CURVE_TO, (curve.p1, curve.p2, curve.p3)))

        if self.closed:
            elements.append(PathElement(ElementType.CLOSE))

        return elements

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "curves": [c.to_dict() for c in self.curves],
            "closed": self.closed,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Contour":
        """Deserialize from dictionary."""
        return cls(
            curves=tuple(Curve.from_dict(c) for c in data["curves"]),
            closed=data.get("closed", True),
        )


@dataclass(frozen=True)
class Path:
    """An ordered collection of contours.

    Attributes:
        contours: Contours in drawing order
    """

    contours: tuple[Contour, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.contours, tuple):
            object.__setattr__(self, "contours", tuple(self.contours))

    @classmethod
    def from_curves(cls, curves: Iterable[Curve], closed: bool = True) -> "Path":
        """Build a single-contour path from continuous curves."""
        return cls((Contour(tuple(curves), closed=closed),))

    @property
    def curves(self) -> list[Curve]:
        """All curves of all contours, flattened in order."""
        return [curve for contour in self.contours for curve in contour.curves]

    @property
    def is_closed(self) -> bool:
        """True if every contour is closed."""
        return all(contour.closed for contour in self.contours)

    def is_empty(self) -> bool:
        return not any(contour.curves for contour in self.contours)

    def close_contours(self) -> "Path":
        """Copy with every open contour closed by a synthesized line."""
        return Path(tuple(contour.close() for contour in self.contours))

    def reversed(self) -> "Path":
        """Copy with every contour reversed."""
        return Path(tuple(contour.reversed() for contour in self.contours))

    def bounding_box(self) -> BoundingBox | None:
        """Bounding box of all contours, or None for an empty path."""
        boxes = [c.bounding_box() for c in self.contours if c.curves]
        if not boxes:
            return None

        box = boxes[0]
        for other in boxes[1:]:
            box = box.union(other)
        return box

    def to_elements(self) -> list[PathElement]:
        """Convert back to draw instructions."""
        return [element for contour in self.contours for element in contour.to_elements()]

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {"contours": [c.to_dict() for c in self.contours]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Path":
        """Deserialize from dictionary."""
        return cls(tuple(Contour.from_dict(c) for c in data["contours"]))
