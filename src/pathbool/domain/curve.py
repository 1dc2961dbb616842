"""Core geometric types for curve representation.

This module defines the fundamental geometric types used throughout pathbool:
- Point: An immutable 2D coordinate
- BoundingBox: An axis-aligned rectangle
- Curve: A cubic Bezier segment with exactly four control points

Straight lines are represented as degenerate cubics whose inner control points
sit at 1/3 and 2/3 of the chord, so every stage of the pipeline handles a
single segment type.
"""

import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from pathbool.exceptions import InvalidCurveError

# Minimum bounding hull extent used when callers do not supply one
DEFAULT_MIN_EXTENT = 1e-4


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D space.

    Immutable and hashable for use in sets/dicts.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    def distance_to(self, other: "Point") -> float:
        """Euclidean distance to another point."""
        return math.hypot(self.x - other.x, self.y - other.y)

    def lerp(self, other: "Point", t: float) -> "Point":
        """Linearly interpolate towards another point.

        Args:
            other: Target point (reached at t=1)
            t: Interpolation parameter

        Returns:
            Interpolated point
        """
        return Point(self.x + (other.x - self.x) * t, self.y + (other.y - self.y) * t)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with x and y fields
        """
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with x and y fields

        Returns:
            Point instance
        """
        return cls(x=float(data["x"]), y=float(data["y"]))


@dataclass(frozen=True, slots=True)
class BoundingBox:
    """An axis-aligned bounding box.

    Attributes:
        min_x: Left edge
        min_y: Bottom edge
        max_x: Right edge
        max_y: Top edge
    """

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @classmethod
    def from_points(cls, points: Sequence[Point]) -> "BoundingBox":
        """Build the tightest box around a non-empty sequence of points."""
        xs = [p.x for p in points]
        ys = [p.y for p in points]
        return cls(min(xs), min(ys), max(xs), max(ys))

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    def overlaps(self, other: "BoundingBox") -> bool:
        """Check whether two boxes overlap (touching edges count).

        Args:
            other: Box to test against

        Returns:
            True if the closed boxes share at least one point
        """
        return (
            self.min_x <= other.max_x
            and other.min_x <= self.max_x
            and self.min_y <= other.max_y
            and other.min_y <= self.max_y
        )

    def inflated(self, min_extent: float) -> "BoundingBox":
        """Grow each axis symmetrically to at least ``min_extent``.

        Args:
            min_extent: Minimum width and height of the result

        Returns:
            A box whose width and height are both >= min_extent
        """
        min_x, max_x = self.min_x, self.max_x
        min_y, max_y = self.min_y, self.max_y

        if max_x - min_x < min_extent:
            center = (min_x + max_x) / 2.0
            min_x, max_x = center - min_extent / 2.0, center + min_extent / 2.0

        if max_y - min_y < min_extent:
            center = (min_y + max_y) / 2.0
            min_y, max_y = center - min_extent / 2.0, center + min_extent / 2.0

        return BoundingBox(min_x, min_y, max_x, max_y)

    def union(self, other: "BoundingBox") -> "BoundingBox":
        """Smallest box containing both boxes."""
        return BoundingBox(
            min(self.min_x, other.min_x),
            min(self.min_y, other.min_y),
            max(self.max_x, other.max_x),
            max(self.max_y, other.max_y),
        )

    def to_tuple(self) -> tuple[float, float, float, float]:
        """Convert to (min_x, min_y, max_x, max_y)."""
        return (self.min_x, self.min_y, self.max_x, self.max_y)


@dataclass(frozen=True, slots=True)
class Curve:
    """A cubic Bezier segment.

    B(t) = (1-t)^3 P0 + 3(1-t)^2 t P1 + 3(1-t) t^2 P2 + t^3 P3

    Attributes:
        p0: Start point
        p1: First control point
        p2: Second control point
        p3: End point
    """

    p0: Point
    p1: Point
    p2: Point
    p3: Point

    @classmethod
    def from_line(cls, start: Point, end: Point) -> "Curve":
        """Build the degenerate cubic equivalent to a straight line.

        Args:
            start: Line start point
            end: Line end point

        Returns:
            Curve with control points at 1/3 and 2/3 of the chord
        """
        return cls(start, start.lerp(end, 1.0 / 3.0), start.lerp(end, 2.0 / 3.0), end)

    @classmethod
    def from_points(cls, points: Sequence[Point | tuple[float, float]]) -> "Curve":
        """Build a curve from four points or (x, y) pairs.

        Raises:
            InvalidCurveError: If the sequence does not hold exactly 4 points
        """
        if len(points) != 4:
            raise InvalidCurveError(f"expected 4 control points, got {len(points)}")

        converted = [p if isinstance(p, Point) else Point(float(p[0]), float(p[1])) for p in points]
        return cls(converted[0], converted[1], converted[2], converted[3])

    @property
    def points(self) -> tuple[Point, Point, Point, Point]:
        """Control points in order."""
        return (self.p0, self.p1, self.p2, self.p3)

    @property
    def start(self) -> Point:
        return self.p0

    @property
    def end(self) -> Point:
        return self.p3

    def evaluate(self, t: float) -> Point:
        """Evaluate the curve with the cubic Bernstein basis.

        Args:
            t: Curve parameter in [0, 1]

        Returns:
            Point on the curve
        """
        mt = 1.0 - t
        c0 = mt * mt * mt
        c1 = 3.0 * mt * mt * t
        c2 = 3.0 * mt * t * t
        c3 = t * t * t
        return Point(
            c0 * self.p0.x + c1 * self.p1.x + c2 * self.p2.x + c3 * self.p3.x,
            c0 * self.p0.y + c1 * self.p1.y + c2 * self.p2.y + c3 * self.p3.y,
        )

    def derivative(self, t: float) -> tuple[float, float]:
        """First derivative B'(t) as a (dx, dy) vector."""
        mt = 1.0 - t
        a = 3.0 * mt * mt
        b = 6.0 * mt * t
        c = 3.0 * t * t
        dx = (
            a * (self.p1.x - self.p0.x)
            + b * (self.p2.x - self.p1.x)
            + c * (self.p3.x - self.p2.x)
        )
        dy = (
            a * (self.p1.y - self.p0.y)
            + b * (self.p2.y - self.p1.y)
            + c * (self.p3.y - self.p2.y)
        )
        return dx, dy

    def subdivide(self, t: float) -> tuple["Curve", "Curve"]:
        """Split the curve at ``t`` using De Casteljau's algorithm.

        Both halves share the point B(t) exactly.

        Args:
            t: Split parameter in [0, 1]

        Returns:
            Tuple of (left, right) curves
        """
        # First level
        q0 = self.p0.lerp(self.p1, t)
        q1 = self.p1.lerp(self.p2, t)
        q2 = self.p2.lerp(self.p3, t)

        # Second level
        r0 = q0.lerp(q1, t)
        r1 = q1.lerp(q2, t)

        # Third level (point on curve)
        mid = r0.lerp(r1, t)

        return Curve(self.p0, q0, r0, mid), Curve(mid, r1, q2, self.p3)

    def segment(self, t0: float, t1: float) -> "Curve":
        """Extract the sub-curve between two parameters.

        Args:
            t0: Start parameter
            t1: End parameter, t1 > t0

        Returns:
            Curve covering [t0, t1] of this curve
        """
        curve = self
        if t1 < 1.0:
            curve = curve.subdivide(t1)[0]
        if t0 > 0.0:
            curve = curve.subdivide(t0 / t1)[1]
        return curve

    def bounding_hull(self, min_extent: float = DEFAULT_MIN_EXTENT) -> BoundingBox:
        """Axis-aligned box of the four control points.

        The box is inflated to ``min_extent`` in both axes so that straight
        or collinear curves never produce a zero-area box.

        Args:
            min_extent: Minimum width and height of the hull

        Returns:
            Bounding box containing the whole curve
        """
        return BoundingBox.from_points(self.points).inflated(min_extent)

    def reversed(self) -> "Curve":
        """Same geometry traversed from end to start."""
        return Curve(self.p3, self.p2, self.p1, self.p0)

    def is_line(self, tolerance: float = 1e-9) -> bool:
        """Check whether the curve is a degenerate line cubic.

        Args:
            tolerance: Allowed deviation of the inner control points, relative
                to the chord length

        Returns:
            True if p1 and p2 sit at 1/3 and 2/3 of the chord
        """
        scale = max(self.p0.distance_to(self.p3), 1.0)
        third = self.p0.lerp(self.p3, 1.0 / 3.0)
        two_thirds = self.p0.lerp(self.p3, 2.0 / 3.0)
        return (
            self.p1.distance_to(third) <= tolerance * scale
            and self.p2.distance_to(two_thirds) <= tolerance * scale
        )

    def with_endpoints(self, start: Point, end: Point) -> "Curve":
        """Copy of the curve with its end points replaced.

        Used to snap joints when curves are stitched together; the inner
        control points are moved by the same offset as their end point.
        """
        dx0, dy0 = start.x - self.p0.x, start.y - self.p0.y
        dx3, dy3 = end.x - self.p3.x, end.y - self.p3.y
        return Curve(
            start,
            Point(self.p1.x + dx0, self.p1.y + dy0),
            Point(self.p2.x + dx3, self.p2.y + dy3),
            end,
        )

    def translated(self, dx: float, dy: float) -> "Curve":
        """Copy of the curve moved by (dx, dy)."""
        return Curve(*(Point(p.x + dx, p.y + dy) for p in self.points))

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with a "points" list
        """
        return {"points": [p.to_dict() for p in self.points]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Curve":
        """Deserialize from dictionary.

        Raises:
            InvalidCurveError: If the dictionary does not hold 4 points
        """
        return cls.from_points([Point.from_dict(p) for p in data["points"]])
