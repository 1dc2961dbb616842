"""Curve-curve intersection by recursive subdivision (curve clipping).

Cubic-cubic intersection has no closed form, so each curve pair is searched by
repeatedly bisecting both curves and discarding window pairs whose bounding
hulls do not overlap. Window pairs that shrink below the convergence threshold
are reported as intersection candidates.

The search runs on an explicit worklist rather than Python recursion, with a
hard depth cap and a global candidate ceiling so near-tangent or coincident
input cannot run away. A per-pair cap catches curves that share a stretch
without coinciding exactly, where every leaf along the stretch converges.
"""

from dataclasses import dataclass, field

from pathbool.config import IntersectionConfig
from pathbool.domain import Curve, Path


@dataclass(frozen=True, slots=True)
class IntersectionCandidate:
    """A raw intersection between curve ``index_a`` of A and ``index_b`` of B.

    Attributes:
        index_a: Index of the curve in path A's flat curve list
        t_a: Parameter on that curve
        index_b: Index of the curve in path B's flat curve list
        t_b: Parameter on that curve
    """

    index_a: int
    t_a: float
    index_b: int
    t_b: float


@dataclass
class SearchStats:
    """Counters shared by every curve pair searched in one operation."""

    nodes_visited: int = 0
    candidate_count: int = 0
    depth_capped: bool = False
    truncated: bool = False
    overlap_pairs: int = 0


@dataclass
class IntersectionSet:
    """All raw intersection candidates between two paths.

    Attributes:
        candidates: Raw candidates, possibly several per true intersection
        coincident_pairs: (index_a, index_b) pairs of coinciding curves
        stats: Search counters and quality flags
    """

    candidates: list[IntersectionCandidate] = field(default_factory=list)
    coincident_pairs: list[tuple[int, int]] = field(default_factory=list)
    stats: SearchStats = field(default_factory=SearchStats)

    @property
    def has_crossings(self) -> bool:
        """True if the boundaries touch anywhere."""
        return bool(self.candidates or self.coincident_pairs)


def curves_coincide(a: Curve, b: Curve, tolerance: float) -> bool:
    """Check whether two curves have the same control points, in either direction."""
    forward = all(p.distance_to(q) <= tolerance for p, q in zip(a.points, b.points, strict=True))
    if forward:
        return True
    return all(
        p.distance_to(q) <= tolerance for p, q in zip(a.points, b.reversed().points, strict=True)
    )


def collinear_overlap(a: Curve, b: Curve, tolerance: float) -> list[tuple[float, float]] | None:
    """Resolve two line curves lying on the same supporting line.

    Subdivision over a shared run reports a candidate for every leaf along
    the run, so the overlap is computed directly and only its two end points
    are returned.

    Args:
        a: First curve
        b: Second curve
        tolerance: Maximum distance of b's end points from a's line

    Returns:
        None if the curves are not collinear lines (search normally),
        otherwise the (t_a, t_b) pairs at the ends of the overlap, which is
        empty when the lines do not overlap
    """
    if not (a.is_line() and b.is_line()):
        return None

    dx = a.p3.x - a.p0.x
    dy = a.p3.y - a.p0.y
    length_sq = dx * dx + dy * dy
    bx = b.p3.x - b.p0.x
    by = b.p3.y - b.p0.y
    b_length_sq = bx * bx + by * by
    if length_sq < 1e-20 or b_length_sq < 1e-20:
        return None

    length = length_sq**0.5
    for p in (b.p0, b.p3):
        offset = abs((p.x - a.p0.x) * dy - (p.y - a.p0.y) * dx) / length
        if offset > tolerance:
            return None

    # Parameters of b's end points along a
    s0 = ((b.p0.x - a.p0.x) * dx + (b.p0.y - a.p0.y) * dy) / length_sq
    s1 = ((b.p3.x - a.p0.x) * dx + (b.p3.y - a.p0.y) * dy) / length_sq
    lo = max(0.0, min(s0, s1))
    hi = min(1.0, max(s0, s1))

    if lo > hi:
        return []

    pairs = []
    for s in (lo, hi) if hi > lo else (lo,):
        p = a.evaluate(s)
        t_b = ((p.x - b.p0.x) * bx + (p.y - b.p0.y) * by) / b_length_sq
        pairs.append((s, min(1.0, max(0.0, t_b))))
    return pairs


class IntersectionFinder:
    """Finds intersections between curves and between paths.

    Example:
        finder = IntersectionFinder(IntersectionConfig())
        found = finder.find_path_intersections(path_a, path_b)
        for candidate in found.candidates:
            print(candidate.index_a, candidate.t_a)
    """

    def __init__(self, config: IntersectionConfig | None = None) -> None:
        """Initialize the finder.

        Args:
            config: Search settings (defaults if None)
        """
        self.config = config or IntersectionConfig()

    def find(
        self,
        curve_a: Curve,
        curve_b: Curve,
        stats: SearchStats | None = None,
    ) -> list[tuple[float, float]]:
        """Find intersection candidates between two curves.

        Each worklist item is a pair of sub-curves with their parameter
        windows. Pairs with disjoint hulls are pruned; pairs whose windows are
        both narrower than the convergence threshold (or that reach the depth
        cap) are reported; everything else is bisected into four pairs. The pair is
        abandoned once it has reported ``max_pair_candidates`` results, which
        only happens when the curves overlap along a stretch.

        Args:
            curve_a: First curve
            curve_b: Second curve
            stats: Counters to update (a fresh one is used if None)

        Returns:
            List of (t_a, t_b) window midpoints
        """
        if stats is None:
            stats = SearchStats()

        threshold = self.config.convergence_threshold
        max_depth = self.config.max_depth
        extent = self.config.min_hull_extent
        max_candidates = self.config.max_candidates
        max_pair = self.config.max_pair_candidates

        results: list[tuple[float, float]] = []
        stack = [(curve_a, 0.0, 1.0, curve_b, 0.0, 1.0, 0)]

        while stack and not stats.truncated:
            sub_a, a0, a1, sub_b, b0, b1, depth = stack.pop()
            stats.nodes_visited += 1

            if not sub_a.bounding_hull(extent).overlaps(sub_b.bounding_hull(extent)):
                continue

            converged = (a1 - a0) < threshold and (b1 - b0) < threshold
            if converged or depth >= max_depth:
                if not converged:
                    stats.depth_capped = True
                results.append(((a0 + a1) / 2.0, (b0 + b1) / 2.0))
                stats.candidate_count += 1
                if max_candidates is not None and stats.candidate_count >= max_candidates:
                    stats.truncated = True
                if len(results) >= max_pair:
                    stats.overlap_pairs += 1
                    break
                continue

            a_mid = (a0 + a1) / 2.0
            b_mid = (b0 + b1) / 2.0
            a_left, a_right = sub_a.subdivide(0.5)
            b_left, b_right = sub_b.subdivide(0.5)

            stack.append((a_right, a_mid, a1, b_right, b_mid, b1, depth + 1))
            stack.append((a_right, a_mid, a1, b_left, b0, b_mid, depth + 1))
            stack.append((a_left, a0, a_mid, b_right, b_mid, b1, depth + 1))
            stack.append((a_left, a0, a_mid, b_left, b0, b_mid, depth + 1))

        return results

    def find_path_intersections(self, path_a: Path, path_b: Path) -> IntersectionSet:
        """Find intersection candidates between every curve pair of two paths.

        Curve pairs whose whole hulls are disjoint are skipped. Coinciding
        curves are recorded instead of searched.

        Args:
            path_a: First path
            path_b: Second path

        Returns:
            IntersectionSet with raw candidates and search statistics
        """
        extent = self.config.min_hull_extent
        max_candidates = self.config.max_candidates
        result = IntersectionSet()
        stats = result.stats

        curves_a = path_a.curves
        curves_b = path_b.curves
        hulls_b = [curve.bounding_hull(extent) for curve in curves_b]

        for i, curve_a in enumerate(curves_a):
            hull_a = curve_a.bounding_hull(extent)

            for j, curve_b in enumerate(curves_b):
                if stats.truncated:
                    return result

                if not hull_a.overlaps(hulls_b[j]):
                    continue

                if curves_coincide(curve_a, curve_b, extent):
                    result.coincident_pairs.append((i, j))
                    continue

                pairs = collinear_overlap(curve_a, curve_b, extent)
                if pairs is not None:
                    stats.candidate_count += len(pairs)
                    if max_candidates is not None and stats.candidate_count >= max_candidates:
                        stats.truncated = True
                else:
                    pairs = self.find(curve_a, curve_b, stats)

                result.candidates.extend(
                    IntersectionCandidate(i, t_a, j, t_b) for t_a, t_b in pairs
                )

        return result
