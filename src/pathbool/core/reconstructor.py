"""Stitching unordered sub-curves back into continuous contours.

The boolean operator hands over a flat, unordered set of kept sub-curves. The
stitcher starts from an arbitrary curve and repeatedly appends the remaining
curve that starts nearest to the current traversal end (within tolerance).
Only when no curve starts there is a curve matched at its end point, and
reversed. Joints are snapped so the output satisfies the contour continuity
invariant exactly.

A traversal that finds no match before returning to its start yields an open
contour. That is a degraded result, reported through the contour's ``closed``
flag, never an exception.
"""

import math
from collections.abc import Sequence
from dataclasses import dataclass

from pathbool.config import StitchConfig
from pathbool.domain import BoundingBox, Contour, Curve, Path


@dataclass
class ReconstructionResult:
    """Output of reconstructing a set of curves.

    Attributes:
        path: Stitched contours
        open_contours: Number of contours that could not be closed
        discarded_fragments: Open fragments no larger than the tolerance that were dropped
    """

    path: Path
    open_contours: int = 0
    discarded_fragments: int = 0


def _span(curves: Sequence[Curve]) -> float:
    """Diagonal of the control-point box of a run of curves."""
    box = BoundingBox.from_points([p for curve in curves for p in curve.points])
    return math.hypot(box.width, box.height)


class ContourReconstructor:
    """Reassembles unordered curves into contours by matching end points.

    Example:
        reconstructor = ContourReconstructor(StitchConfig(tolerance=1.0))
        result = reconstructor.reconstruct(kept_curves)
        if result.open_contours:
            print("partial result")
    """

    def __init__(self, config: StitchConfig | None = None) -> None:
        """Initialize the reconstructor.

        Args:
            config: Stitch settings (defaults if None)
        """
        self.config = config or StitchConfig()

    def stitch(self, curves: Sequence[Curve]) -> tuple[Contour, list[Curve]]:
        """Stitch one contour starting from the first curve.

        A curve that starts at the current end point is preferred over one
        that ends there, so sub-curves keep the orientation they were selected
        with; a curve is reversed only when nothing starts within tolerance.
        Traversal stops when the set is exhausted, when no remaining curve
        starts or ends within tolerance of the current end point, or when the
        current end point is back at the contour start and no remaining curve
        joins closer.

        Args:
            curves: Unordered curves; the first one starts the traversal

        Returns:
            Tuple of (contour, curves not consumed by this traversal)
        """
        if not curves:
            return Contour((), closed=False), []

        tolerance = self.config.tolerance
        chain = [curves[0]]
        remaining = list(curves[1:])
        start = chain[0].start
        closed = False

        while True:
            current = chain[-1].end

            forward_index: int | None = None
            forward_distance = math.inf
            backward_index: int | None = None
            backward_distance = math.inf
            for index, candidate in enumerate(remaining):
                distance = candidate.start.distance_to(current)
                if distance < forward_distance:
                    forward_index, forward_distance = index, distance
                distance = candidate.end.distance_to(current)
                if distance < backward_distance:
                    backward_index, backward_distance = index, distance

            if forward_index is not None and forward_distance <= tolerance:
                best_index, best_distance, best_reversed = forward_index, forward_distance, False
            elif backward_index is not None and backward_distance <= tolerance:
                best_index, best_distance, best_reversed = backward_index, backward_distance, True
            else:
                best_index, best_distance, best_reversed = None, math.inf, False

            # A single curve only closes on itself if it is a real loop
            closable = len(chain) > 1 or _span(chain) > tolerance
            closing_distance = current.distance_to(start)
            if closable and closing_distance <= tolerance and closing_distance <= best_distance:
                closed = True
                break

            if best_index is None:
                break

            matched = remaining.pop(best_index)
            if best_reversed:
                matched = matched.reversed()
            chain.append(matched.with_endpoints(current, matched.end))

        if closed:
            last = chain[-1]
            chain[-1] = last.with_endpoints(last.start, start)

        return Contour(tuple(chain), closed=closed), remaining

    def reconstruct(self, curves: Sequence[Curve]) -> ReconstructionResult:
        """Stitch every curve into contours.

        Repeats ``stitch`` until all curves are consumed, so disjoint output
        regions become separate contours of one path. Closed contours are
        always kept, however small; only open fragments no larger than the
        tolerance are dropped (and counted).

        Args:
            curves: Unordered kept curves

        Returns:
            ReconstructionResult with the path and quality counters
        """
        tolerance = self.config.tolerance
        remaining = list(curves)
        contours: list[Contour] = []
        open_contours = 0
        discarded = 0

        while remaining:
            contour, remaining = self.stitch(remaining)

            if not contour.closed and _span(contour.curves) <= tolerance:
                discarded += 1
                continue

            contours.append(contour)
            if not contour.closed:
                open_contours += 1

        return ReconstructionResult(
            path=Path(tuple(contours)),
            open_contours=open_contours,
            discarded_fragments=discarded,
        )
