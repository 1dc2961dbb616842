"""Inside/outside classification of split segments.

Every segment is represented by its midpoint (t = 0.5). Since segments are
cut at every intersection with the other path, the whole segment lies on the
same side of the other boundary as its midpoint.

Midpoints that land on the other boundary mark shared boundary runs. Those
are probed a small step along the segment normal to find out whether the two
regions sit on the same side of the run or on opposite sides.
"""

import math

from pathbool.config import ClassificationConfig
from pathbool.core.geometry import PathRegion
from pathbool.domain import Curve, Path, Point, Segment, SegmentLocation


class SegmentClassifier:
    """Classifies segments against the other operand's region.

    The fill rule is fixed by configuration for the lifetime of the
    classifier; it is never re-derived per call.

    Example:
        classifier = SegmentClassifier(ClassificationConfig())
        classified = classifier.classify(segments_a, path_a, path_b)
    """

    def __init__(self, config: ClassificationConfig | None = None) -> None:
        """Initialize the classifier.

        Args:
            config: Classification settings (defaults if None)
        """
        self.config = config or ClassificationConfig()

    def region(self, path: Path) -> PathRegion:
        """Flatten a path into a queryable region."""
        return PathRegion.from_path(path, self.config.flatten_tolerance)

    def contains(self, region: PathRegion, point: Point) -> bool:
        """Point-in-path test under the configured fill rule."""
        return region.contains(point, self.config.fill_rule)

    def locate(self, curve: Curve, own: PathRegion, other: PathRegion) -> SegmentLocation:
        """Classify a single curve against the other region.

        Args:
            curve: Segment geometry
            own: Region of the path the segment belongs to
            other: Region of the other path

        Returns:
            SegmentLocation of the curve
        """
        midpoint = curve.evaluate(0.5)

        if self._near_boundary(midpoint, other):
            probe = self._probe_point(curve, midpoint)
            if probe is not None:
                same_side = self.contains(own, probe) == self.contains(other, probe)
                return SegmentLocation.SHARED if same_side else SegmentLocation.SHARED_OPPOSITE

        if self.contains(other, midpoint):
            return SegmentLocation.INSIDE
        return SegmentLocation.OUTSIDE

    def classify(self, segments: list[Segment], own: Path, other: Path) -> list[Segment]:
        """Classify every segment of one operand against the other path.

        Args:
            segments: Unclassified segments of one operand
            own: The path the segments were cut from
            other: The other operand

        Returns:
            Classified copies of the segments, in the same order
        """
        own_region = self.region(own)
        other_region = self.region(other)
        return [
            segment.with_location(self.locate(segment.curve, own_region, other_region))
            for segment in segments
        ]

    def classify_contours(self, path: Path, other: Path) -> list[SegmentLocation]:
        """Classify whole contours with one containment check each.

        Only valid when the two boundaries do not touch: every point of a
        contour then lies on the same side of the other path.

        Args:
            path: Path whose contours are classified
            other: The other operand

        Returns:
            One location per contour of ``path`` (OUTSIDE for empty contours)
        """
        other_region = self.region(other)
        locations = []
        for contour in path.contours:
            if contour.curves and self.contains(other_region, contour.curves[0].evaluate(0.5)):
                locations.append(SegmentLocation.INSIDE)
            else:
                locations.append(SegmentLocation.OUTSIDE)
        return locations

    def _near_boundary(self, point: Point, region: PathRegion) -> bool:
        tolerance = self.config.boundary_tolerance
        bounds = region.bounds
        if bounds is None:
            return False

        if (
            point.x < bounds.min_x - tolerance
            or point.x > bounds.max_x + tolerance
            or point.y < bounds.min_y - tolerance
            or point.y > bounds.max_y + tolerance
        ):
            return False

        return region.distance_to_boundary(point) <= tolerance

    def _probe_point(self, curve: Curve, midpoint: Point) -> Point | None:
        """Point offset from the midpoint along the left-hand normal."""
        dx, dy = curve.derivative(0.5)
        length = math.hypot(dx, dy)

        # Cusp at the midpoint: fall back to the chord direction
        if length < 1e-12:
            dx = curve.end.x - curve.start.x
            dy = curve.end.y - curve.start.y
            length = math.hypot(dx, dy)
            if length < 1e-12:
                return None

        offset = self.config.probe_offset
        return Point(midpoint.x - dy / length * offset, midpoint.y + dx / length * offset)
