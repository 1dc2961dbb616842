"""Geometric operations for point-in-path tests and area measurement.

This module provides core mathematical utilities for:
- Signed area calculation (shoelace formula)
- Point-in-polygon testing (even-odd ray casting and winding number)
- Nearest point calculations
- Bezier curve flattening
- PathRegion: a flattened, queryable view of a path's enclosed region

All functions are pure and stateless.
"""

import math
from dataclasses import dataclass

from pathbool.config import FillRule
from pathbool.core._bezier import flatten_cubic as _flatten_cubic
from pathbool.domain import BoundingBox, Contour, Curve, Path, Point


def signed_area(points: list[Point]) -> float:
    """Calculate signed area of a polygon using the shoelace formula.

    The sign of the area indicates winding direction:
    - Positive area: counter-clockwise winding
    - Negative area: clockwise winding

    Args:
        points: List of points forming the polygon boundary

    Returns:
        Signed area in square units. Returns 0.0 for degenerate polygons.

    Examples:
        >>> p1 = Point(0.0, 0.0)
        >>> p2 = Point(1.0, 0.0)
        >>> p3 = Point(1.0, 1.0)
        >>> p4 = Point(0.0, 1.0)
        >>> signed_area([p1, p2, p3, p4])  # CCW square
        1.0
        >>> signed_area([p1, p4, p3, p2])  # CW square
        -1.0
    """
    n = len(points)
    if n < 3:
        return 0.0

    area = 0.0
    for i in range(n):
        j = (i + 1) % n
        area += points[i].x * points[j].y
        area -= points[j].x * points[i].y

    return area / 2.0


def point_in_polygon(point: Point, polygon: list[Point]) -> bool:
    """Determine if a point is inside a polygon using ray casting algorithm.

    Casts a horizontal ray from the point to the right and counts intersections
    with polygon edges. Odd number of intersections = inside, even = outside.

    Args:
        point: The point to test
        polygon: List of points forming the polygon boundary

    Returns:
        True if point is inside polygon, False otherwise

    Examples:
        >>> square = [Point(0.0, 0.0), Point(2.0, 0.0), Point(2.0, 2.0), Point(0.0, 2.0)]
        >>> point_in_polygon(Point(1.0, 1.0), square)  # Center
        True
        >>> point_in_polygon(Point(3.0, 3.0), square)  # Outside
        False
    """
    n = len(polygon)
    if n < 3:
        return False

    inside = False
    x, y = point.x, point.y
    j = n - 1

    for i in range(n):
        xi, yi = polygon[i].x, polygon[i].y
        xj, yj = polygon[j].x, polygon[j].y

        # Check if ray from point intersects edge (j, i)
        if ((yi > y) != (yj > y)) and (x < (xj - xi) * (y - yi) / (yj - yi) + xi):
            inside = not inside

        j = i

    return inside


def winding_number(point: Point, polygon: list[Point]) -> int:
    """Count how many times a polygon winds around a point.

    Counter-clockwise loops count +1, clockwise loops -1.

    Args:
        point: The point to test
        polygon: List of points forming the polygon boundary

    Returns:
        Winding number (0 means outside under the nonzero rule)
    """
    n = len(polygon)
    if n < 3:
        return 0

    winding = 0
    x, y = point.x, point.y

    for i in range(n):
        a = polygon[i]
        b = polygon[(i + 1) % n]
        # > 0 when the point is left of the edge a -> b
        side = (b.x - a.x) * (y - a.y) - (x - a.x) * (b.y - a.y)

        if a.y <= y:
            if b.y > y and side > 0:
                winding += 1
        elif b.y <= y and side < 0:
            winding -= 1

    return winding


def nearest_point_on_segment(point: Point, seg_start: Point, seg_end: Point) -> tuple[Point, float]:
    """Find the closest point on a line segment to a given point.

    Projects the point onto the infinite line, then clamps to the segment endpoints.

    Args:
        point: The point to project
        seg_start: Start point of line segment
        seg_end: End point of line segment

    Returns:
        Tuple of (nearest_point, distance) where nearest_point is the closest
        point on the segment and distance is the Euclidean distance to it
    """
    dx = seg_end.x - seg_start.x
    dy = seg_end.y - seg_start.y

    # Handle zero-length segment
    segment_length_sq = dx * dx + dy * dy
    if segment_length_sq < 1e-20:
        return seg_start, point.distance_to(seg_start)

    # t = dot(point - start, end - start) / ||end - start||^2
    t = ((point.x - seg_start.x) * dx + (point.y - seg_start.y) * dy) / segment_length_sq
    t = max(0.0, min(1.0, t))

    nearest = Point(seg_start.x + t * dx, seg_start.y + t * dy)
    return nearest, point.distance_to(nearest)


def flatten_curve(curve: Curve, tolerance: float = 0.01) -> list[Point]:
    """Convert a cubic curve to line segments using recursive subdivision.

    Args:
        curve: The curve to flatten
        tolerance: Maximum distance from true curve

    Returns:
        List of points forming line segments that approximate the curve
    """
    if curve.is_line():
        return [curve.p0, curve.p3]
    return _flatten_cubic(curve, tolerance)


def flatten_contour(contour: Contour, tolerance: float = 0.01) -> list[Point]:
    """Flatten a contour into a polygon.

    The polygon is implicitly closed: the start point is not repeated at
    the end.

    Args:
        contour: Contour to flatten (open contours are treated as closed)
        tolerance: Maximum distance from true curves

    Returns:
        Polygon vertices
    """
    polygon: list[Point] = []
    for curve in contour.curves:
        points = flatten_curve(curve, tolerance)
        # Skip the first point of every curve after the first (shared joint)
        polygon.extend(points if not polygon else points[1:])

    if len(polygon) > 1 and polygon[-1].distance_to(polygon[0]) < 1e-12:
        polygon.pop()

    return polygon


def contour_area(contour: Contour, tolerance: float = 0.01) -> float:
    """Signed area enclosed by a contour (positive for counter-clockwise)."""
    return signed_area(flatten_contour(contour, tolerance))


def path_area(path: Path, tolerance: float = 0.01) -> float:
    """Area enclosed by a path.

    Sums the signed areas of all contours and returns the magnitude, so
    holes must wind opposite to their outer contour (as produced by
    difference and xor).

    Args:
        path: Path to measure
        tolerance: Flattening tolerance

    Returns:
        Non-negative enclosed area
    """
    return abs(sum(contour_area(contour, tolerance) for contour in path.contours))


@dataclass
class PathRegion:
    """A path flattened into polygons for containment and distance queries.

    Built once per boolean operation for each operand, then queried for
    every segment midpoint.

    Attributes:
        polygons: One polygon per non-empty contour
        bounds: Bounding box of all polygons (None for an empty path)
    """

    polygons: list[list[Point]]
    bounds: BoundingBox | None

    @classmethod
    def from_path(cls, path: Path, tolerance: float = 0.01) -> "PathRegion":
        """Flatten a path into a region.

        Args:
            path: Path whose enclosed region is queried
            tolerance: Flattening tolerance

        Returns:
            PathRegion instance
        """
        polygons = [
            flatten_contour(contour, tolerance)
            for contour in path.contours
            if contour.curves
        ]
        polygons = [polygon for polygon in polygons if len(polygon) >= 2]
        points = [p for polygon in polygons for p in polygon]
        bounds = BoundingBox.from_points(points) if points else None
        return cls(polygons=polygons, bounds=bounds)

    def contains(self, point: Point, fill_rule: FillRule = FillRule.EVEN_ODD) -> bool:
        """Check whether the region encloses a point.

        Args:
            point: Point to test
            fill_rule: Even-odd parity or nonzero winding

        Returns:
            True if the point is inside under the given fill rule
        """
        if self.bounds is None:
            return False

        if (
            point.x < self.bounds.min_x
            or point.x > self.bounds.max_x
            or point.y < self.bounds.min_y
            or point.y > self.bounds.max_y
        ):
            return False

        if fill_rule == FillRule.NONZERO:
            return sum(winding_number(point, polygon) for polygon in self.polygons) != 0

        inside = False
        for polygon in self.polygons:
            if point_in_polygon(point, polygon):
                inside = not inside
        return inside

    def distance_to_boundary(self, point: Point) -> float:
        """Shortest distance from a point to any polygon edge.

        Returns:
            Distance, or infinity for an empty region
        """
        best = math.inf
        for polygon in self.polygons:
            n = len(polygon)
            for i in range(n):
                _, distance = nearest_point_on_segment(point, polygon[i], polygon[(i + 1) % n])
                if distance < best:
                    best = distance
        return best
