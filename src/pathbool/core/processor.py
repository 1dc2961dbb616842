"""Pipeline orchestration for boolean path operations.

This module wires the pipeline stages together and exposes the public
operations:

intersection search -> parameter dedup -> split both paths -> classify ->
select -> reconstruct

Key components:
- BooleanProcessor: Runs one operation and collects its Diagnostics
- union, intersect, difference, xor: Convenience functions returning a Path
- intersection_points: Deduplicated crossing points of two paths
"""

import time
import traceback
from collections import defaultdict

from pathbool.config import PathboolSettings, get_default_settings
from pathbool.core.boolean import select_contours, select_segments
from pathbool.core.classifier import SegmentClassifier
from pathbool.core.dedup import cluster_parameters, deduplicate_parameters, unique_points
from pathbool.core.intersection import IntersectionFinder
from pathbool.core.reconstructor import ContourReconstructor
from pathbool.core.splitter import split_path
from pathbool.domain import (
    BooleanOperation,
    BooleanResult,
    Diagnostics,
    Operand,
    Path,
    Point,
)
from pathbool.utils import OperationLogger


class BooleanProcessor:
    """Runs boolean operations on two paths.

    Open input contours are closed with a straight line before the operation,
    since only closed contours bound a region.

    Example:
        processor = BooleanProcessor(PathboolSettings())
        result = processor.run(BooleanOperation.UNION, path_a, path_b)
        if result.degraded:
            print(result.diagnostics.to_dict())
    """

    def __init__(
        self,
        settings: PathboolSettings | None = None,
        operation_logger: OperationLogger | None = None,
    ) -> None:
        """Initialize the processor.

        Args:
            settings: Pathbool settings (defaults if None)
            operation_logger: Optional logger; the pipeline is silent without one
        """
        self.settings = settings or get_default_settings()
        self.operation_logger = operation_logger
        self.finder = IntersectionFinder(self.settings.intersection)
        self.classifier = SegmentClassifier(self.settings.classification)
        self.reconstructor = ContourReconstructor(self.settings.stitch)

    def run(
        self,
        operation: BooleanOperation | str,
        path_a: Path,
        path_b: Path,
    ) -> BooleanResult:
        """Run one boolean operation.

        Args:
            operation: Operation to apply (enum member or its value)
            path_a: First operand
            path_b: Second operand

        Returns:
            BooleanResult with the output path and diagnostics

        Raises:
            ValueError: If the operation name is unknown
        """
        operation = BooleanOperation(operation)
        started = time.perf_counter()

        try:
            result = self._run(operation, path_a.close_contours(), path_b.close_contours())
        except Exception as e:
            if self.operation_logger is not None:
                self.operation_logger.log_operation_error(
                    operation.value, e, traceback=traceback.format_exc()
                )
            raise

        result.diagnostics.elapsed_ms = (time.perf_counter() - started) * 1000
        if self.operation_logger is not None:
            self.operation_logger.log_operation_complete(result.diagnostics)

        return result

    def _run(self, operation: BooleanOperation, path_a: Path, path_b: Path) -> BooleanResult:
        diagnostics = Diagnostics(operation=operation)

        if self.operation_logger is not None:
            self.operation_logger.log_operation_start(
                operation.value, len(path_a.curves), len(path_b.curves)
            )

        found = self.finder.find_path_intersections(path_a, path_b)
        diagnostics.candidate_count = found.stats.candidate_count
        diagnostics.coincident_pairs = len(found.coincident_pairs)
        diagnostics.nodes_visited = found.stats.nodes_visited
        diagnostics.depth_capped = found.stats.depth_capped
        diagnostics.truncated = found.stats.truncated
        diagnostics.overlap_pairs = found.stats.overlap_pairs

        if self.operation_logger is not None:
            self.operation_logger.log_intersections(
                operation.value,
                candidates=diagnostics.candidate_count,
                coincident_pairs=diagnostics.coincident_pairs,
                nodes_visited=diagnostics.nodes_visited,
            )

        if not found.has_crossings:
            # Boundaries never touch: every contour is wholly inside or outside
            locations_a = self.classifier.classify_contours(path_a, path_b)
            locations_b = self.classifier.classify_contours(path_b, path_a)
            output = select_contours(operation, path_a, locations_a, path_b, locations_b)

            diagnostics.used_containment_shortcut = True
            diagnostics.segment_count_a = len(path_a.curves)
            diagnostics.segment_count_b = len(path_b.curves)
            diagnostics.selected_count = len(output.curves)
            diagnostics.contour_count = len(output.contours)
            return BooleanResult(path=output, diagnostics=diagnostics)

        config = self.settings.intersection
        split = deduplicate_parameters(
            found.candidates,
            config.param_resolution,
            path_a.curves,
            path_b.curves,
            end_window=config.convergence_threshold,
            end_distance=config.min_hull_extent,
        )
        diagnostics.split_count_a = split.count_a
        diagnostics.split_count_b = split.count_b

        segments_a = split_path(path_a, split.a, Operand.A)
        segments_b = split_path(path_b, split.b, Operand.B)
        diagnostics.segment_count_a = len(segments_a)
        diagnostics.segment_count_b = len(segments_b)

        segments_a = self.classifier.classify(segments_a, path_a, path_b)
        segments_b = self.classifier.classify(segments_b, path_b, path_a)

        kept = select_segments(operation, segments_a, segments_b)
        diagnostics.selected_count = len(kept)

        reconstruction = self.reconstructor.reconstruct(kept)
        diagnostics.contour_count = len(reconstruction.path.contours)
        diagnostics.open_contour_count = reconstruction.open_contours
        diagnostics.discarded_fragments = reconstruction.discarded_fragments

        return BooleanResult(path=reconstruction.path, diagnostics=diagnostics)


def boolean_operation(
    operation: BooleanOperation | str,
    path_a: Path,
    path_b: Path,
    settings: PathboolSettings | None = None,
) -> BooleanResult:
    """Run a boolean operation and return the path with its diagnostics.

    Args:
        operation: Operation to apply
        path_a: First operand
        path_b: Second operand
        settings: Pathbool settings (defaults if None)

    Returns:
        BooleanResult with the output path and diagnostics
    """
    return BooleanProcessor(settings).run(operation, path_a, path_b)


def union(path_a: Path, path_b: Path, settings: PathboolSettings | None = None) -> Path:
    """Region covered by either path."""
    return boolean_operation(BooleanOperation.UNION, path_a, path_b, settings).path


def intersect(path_a: Path, path_b: Path, settings: PathboolSettings | None = None) -> Path:
    """Region covered by both paths."""
    return boolean_operation(BooleanOperation.INTERSECT, path_a, path_b, settings).path


def difference(path_a: Path, path_b: Path, settings: PathboolSettings | None = None) -> Path:
    """Region covered by path A but not by path B."""
    return boolean_operation(BooleanOperation.DIFFERENCE, path_a, path_b, settings).path


def xor(path_a: Path, path_b: Path, settings: PathboolSettings | None = None) -> Path:
    """Region covered by exactly one of the paths."""
    return boolean_operation(BooleanOperation.XOR, path_a, path_b, settings).path


def intersection_points(
    path_a: Path,
    path_b: Path,
    settings: PathboolSettings | None = None,
) -> set[Point]:
    """Find the points where the boundaries of two paths cross or touch.

    Raw candidates are clustered per curve pair on path A's parameter, then
    the evaluated points are merged on a quantized grid, so points closer
    than ``point_resolution`` collapse into one. Coinciding curves contribute
    no points; collinear line overlaps contribute their two end points.

    Args:
        path_a: First path
        path_b: Second path
        settings: Pathbool settings (defaults if None)

    Returns:
        Set of intersection points (empty if the boundaries are disjoint)

    Examples:
        >>> from pathbool.domain import Curve, Path
        >>> a = Path.from_curves([Curve.from_line(Point(0, 0), Point(10, 10))])
        >>> b = Path.from_curves([Curve.from_line(Point(0, 10), Point(10, 0))])
        >>> [(round(p.x, 3), round(p.y, 3)) for p in intersection_points(a, b)]
        [(5.0, 5.0)]
    """
    settings = settings or get_default_settings()
    config = settings.intersection
    found = IntersectionFinder(config).find_path_intersections(path_a, path_b)

    by_pair: dict[tuple[int, int], list[float]] = defaultdict(list)
    for candidate in found.candidates:
        by_pair[(candidate.index_a, candidate.index_b)].append(candidate.t_a)

    curves_a = path_a.curves
    points = [
        curves_a[index_a].evaluate(t)
        for (index_a, _), values in sorted(by_pair.items())
        for t in cluster_parameters(values, config.param_resolution, config.convergence_threshold)
    ]

    return set(unique_points(points, config.point_resolution))
