"""Deduplication of raw intersection results.

The subdivision search usually reports several adjacent leaves for one true
intersection. This module collapses them:

- Parameters are keyed by (curve index, rounded parameter). Runs of keys that
  are at most one bucket apart form one cluster, represented by the middle of
  its extent, or by the curve end it reaches within the end window. A cluster
  is dropped from the split set only when it lies at a curve end: within the
  end window in parameter space, or within the end distance of the end point.
  The curve already has a boundary there.
- Points are keyed by a quantized grid cell. A point is dropped when a point
  already kept lies within one cell size in a neighbouring cell.

Both keys are intentionally lossy: two genuine intersections closer than the
resolution are merged into one.
"""

from collections import defaultdict
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from pathbool.core.intersection import IntersectionCandidate
from pathbool.domain import Curve, Point

# Default end window, matching the default convergence threshold
DEFAULT_END_WINDOW = 1e-4

# Default end distance, matching the default minimum hull extent
DEFAULT_END_DISTANCE = 1e-4


@dataclass
class SplitParameters:
    """Canonical split parameters per curve for both operands.

    Attributes:
        a: Maps curve index in path A to ascending parameters in (0, 1)
        b: Maps curve index in path B to ascending parameters in (0, 1)
    """

    a: dict[int, list[float]] = field(default_factory=dict)
    b: dict[int, list[float]] = field(default_factory=dict)

    @property
    def count_a(self) -> int:
        return sum(len(params) for params in self.a.values())

    @property
    def count_b(self) -> int:
        return sum(len(params) for params in self.b.values())


def _bucket(value: float, resolution: float) -> int:
    return round(value / resolution)


def _clusters(values: Iterable[float], resolution: float) -> list[list[float]]:
    """Group sorted values whose buckets are at most one apart."""
    groups: list[list[float]] = []
    last_key: int | None = None

    for value in sorted(values):
        key = _bucket(value, resolution)
        if last_key is not None and key - last_key <= 1:
            groups[-1].append(value)
        else:
            groups.append([value])
        last_key = key

    return groups


def _representative(group: list[float], end_window: float) -> float:
    # A run reaching a curve end belongs to that end point
    if group[0] <= end_window:
        return 0.0
    if group[-1] >= 1.0 - end_window:
        return 1.0
    # Middle of the extent, not the mean: leaves crowd one side of a tangency
    return (group[0] + group[-1]) / 2.0


def cluster_parameters(
    values: Iterable[float],
    resolution: float = 0.01,
    end_window: float = DEFAULT_END_WINDOW,
) -> list[float]:
    """Collapse near-duplicate parameters into one representative each.

    Args:
        values: Raw parameter values of one curve
        resolution: Bucket size
        end_window: A cluster reaching this close to 0 or 1 is represented by
            that end

    Returns:
        Ascending cluster representatives (middle of each cluster's extent)

    Examples:
        >>> cluster_parameters([0.5, 0.5, 0.8], 0.01)
        [0.5, 0.8]
    """
    return [_representative(group, end_window) for group in _clusters(values, resolution)]


def _at_curve_end(
    t: float,
    curve: Curve | None,
    end_window: float,
    end_distance: float,
) -> bool:
    if t <= end_window or t >= 1.0 - end_window:
        return True
    if curve is None:
        return False
    point = curve.evaluate(t)
    return (
        point.distance_to(curve.start) <= end_distance
        or point.distance_to(curve.end) <= end_distance
    )


def interior_parameters(
    values: Iterable[float],
    resolution: float = 0.01,
    curve: Curve | None = None,
    end_window: float = DEFAULT_END_WINDOW,
    end_distance: float = DEFAULT_END_DISTANCE,
) -> list[float]:
    """Cluster parameters and drop clusters at the curve end points.

    A crossing close to, but not at, an end point is kept: only clusters
    within ``end_window`` of 0 or 1, or whose point lies within
    ``end_distance`` of an end point of ``curve``, are dropped.

    Args:
        values: Raw parameter values of one curve
        resolution: Bucket size
        curve: The curve the parameters belong to (enables the distance test)
        end_window: Parameter distance from 0 or 1 treated as the end point
        end_distance: Spatial distance from an end point treated as the end point

    Returns:
        Strictly increasing split parameters in (0, 1)
    """
    params: list[float] = []

    for t in cluster_parameters(values, resolution, end_window):
        if _at_curve_end(t, curve, end_window, end_distance):
            continue
        if not params or t > params[-1]:
            params.append(t)

    return params


def deduplicate_parameters(
    candidates: Iterable[IntersectionCandidate],
    resolution: float = 0.01,
    curves_a: Sequence[Curve] | None = None,
    curves_b: Sequence[Curve] | None = None,
    end_window: float = DEFAULT_END_WINDOW,
    end_distance: float = DEFAULT_END_DISTANCE,
) -> SplitParameters:
    """Build the canonical split-set for every curve of both paths.

    Args:
        candidates: Raw candidates from the intersection finder
        resolution: Parameter bucket size
        curves_a: Flat curve list of path A (enables the end distance test)
        curves_b: Flat curve list of path B
        end_window: Parameter distance from 0 or 1 treated as the end point
        end_distance: Spatial distance from an end point treated as the end point

    Returns:
        SplitParameters for paths A and B (curves without splits are absent)
    """
    raw_a: dict[int, list[float]] = defaultdict(list)
    raw_b: dict[int, list[float]] = defaultdict(list)

    for candidate in candidates:
        raw_a[candidate.index_a].append(candidate.t_a)
        raw_b[candidate.index_b].append(candidate.t_b)

    result = SplitParameters()
    for raw, curves, target in ((raw_a, curves_a, result.a), (raw_b, curves_b, result.b)):
        for index, values in raw.items():
            curve = curves[index] if curves is not None else None
            params = interior_parameters(values, resolution, curve, end_window, end_distance)
            if params:
                target[index] = params

    return result


def quantize(point: Point, resolution: float) -> tuple[int, int]:
    """Grid cell key of a point."""
    return (round(point.x / resolution), round(point.y / resolution))


def unique_points(points: Iterable[Point], resolution: float = 0.1) -> list[Point]:
    """Drop points that lie within ``resolution`` of a point already kept.

    Uses a quantized grid so each lookup only inspects the 3x3 block of
    cells around the point.

    Args:
        points: Points in priority order (first occurrence wins)
        resolution: Grid cell size and merge distance

    Returns:
        Kept points in input order
    """
    grid: dict[tuple[int, int], list[Point]] = defaultdict(list)
    kept: list[Point] = []

    for point in points:
        cx, cy = quantize(point, resolution)
        duplicate = any(
            other.distance_to(point) <= resolution
            for dx in (-1, 0, 1)
            for dy in (-1, 0, 1)
            for other in grid.get((cx + dx, cy + dy), ())
        )
        if duplicate:
            continue

        grid[(cx, cy)].append(point)
        kept.append(point)

    return kept
