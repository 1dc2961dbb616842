"""Path decomposition from draw instructions into cubic curves.

Turns a stream of move/line/curve/close instructions into a Path whose
contours hold nothing but cubic curves. Lines and the implicit close-to-start
become degenerate line cubics.
"""

from collections.abc import Iterable

from pathbool.domain import CONTINUITY_TOLERANCE, Contour, Curve, ElementType, Path, PathElement, Point
from pathbool.exceptions import InvalidPathError

# Number of points each instruction consumes
_EXPECTED_POINTS = {
    ElementType.MOVE_TO: 1,
    ElementType.LINE_TO: 1,
    ElementType.CURVE_TO: 3,
    ElementType.CLOSE: 0,
}


def decompose(elements: Iterable[PathElement]) -> Path:
    """Convert draw instructions into a Path of cubic curves.

    Rules:
    - moveTo starts a new contour (the previous one stays open unless closed)
    - lineTo becomes a degenerate line curve; a lineTo to the current point
      is dropped
    - curveTo becomes a cubic from the current point
    - closePath adds a line back to the contour start if the current point is
      elsewhere, marks the contour closed and moves the current point back to
      the start; drawing may continue from there as a new contour

    Args:
        elements: Draw instructions in order

    Returns:
        Path with one contour per subpath

    Raises:
        InvalidPathError: If a drawing instruction comes before any moveTo or
            an instruction has the wrong number of points
    """
    contours: list[Contour] = []
    curves: list[Curve] = []
    start: Point | None = None
    current: Point | None = None

    def finish(closed: bool) -> None:
        if curves:
            contours.append(Contour(tuple(curves), closed=closed))
        curves.clear()

    for index, element in enumerate(elements):
        expected = _EXPECTED_POINTS[element.kind]
        if len(element.points) != expected:
            raise InvalidPathError(
                f"element {index} ({element.kind.value}) needs {expected} points, "
                f"got {len(element.points)}"
            )

        if element.kind == ElementType.MOVE_TO:
            finish(closed=False)
            start = current = element.points[0]
            continue

        if current is None or start is None:
            raise InvalidPathError(f"element {index} ({element.kind.value}) comes before any moveTo")

        if element.kind == ElementType.LINE_TO:
            end = element.points[0]
            if end == current:
                continue
            curves.append(Curve.from_line(current, end))
            current = end

        elif element.kind == ElementType.CURVE_TO:
            c1, c2, end = element.points
            curves.append(Curve(current, c1, c2, end))
            current = end

        elif element.kind == ElementType.CLOSE:
            if curves and current.distance_to(start) > CONTINUITY_TOLERANCE:
                curves.append(Curve.from_line(current, start))
            finish(closed=True)
            current = start

    finish(closed=False)

    return Path(tuple(contours))
