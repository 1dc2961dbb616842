"""Converters between fontTools pens and domain paths.

Anything that can draw into a fontTools pen (glyph outlines, SVG path data)
can be turned into a Path with PathPen, and any Path can be replayed into a
fontTools pen with draw_path.
"""

from typing import Any

from fontTools.pens.basePen import AbstractPen, BasePen

from pathbool.core.decomposer import decompose
from pathbool.domain import ElementType, Path, PathElement, Point


class PathPen(BasePen):
    """A pen that records draw calls as PathElements.

    Quadratic segments are elevated to cubics by BasePen, so the recorded
    elements only contain move, line, curve and close instructions.

    Example:
        pen = PathPen()
        glyph_set["O"].draw(pen)
        path = pen.path
    """

    def __init__(self, glyphSet: Any = None) -> None:
        super().__init__(glyphSet)
        self.elements: list[PathElement] = []

    def _moveTo(self, pt: tuple[float, float]) -> None:
        self.elements.append(PathElement.move_to(*pt))

    def _lineTo(self, pt: tuple[float, float]) -> None:
        self.elements.append(PathElement.line_to(*pt))

    def _curveToOne(
        self,
        pt1: tuple[float, float],
        pt2: tuple[float, float],
        pt3: tuple[float, float],
    ) -> None:
        self.elements.append(PathElement.curve_to(pt1, pt2, pt3))

    def _closePath(self) -> None:
        self.elements.append(PathElement.close())

    def _endPath(self) -> None:
        # An open contour simply ends where the next move-to starts
        pass

    @property
    def path(self) -> Path:
        """Path built from everything drawn so far.

        Raises:
            InvalidPathError: If the recorded instructions are malformed
        """
        return decompose(self.elements)


def _xy(point: Point) -> tuple[float, float]:
    return (point.x, point.y)


def draw_path(path: Path, pen: AbstractPen) -> None:
    """Replay a path into any fontTools pen.

    Closed contours end with closePath, open ones with endPath. A closing
    line back to the contour start is left to the pen's closePath.

    Args:
        path: Path to draw
        pen: Target pen
    """
    for contour in path.contours:
        elements = contour.to_elements()
        if not elements:
            continue

        for element in elements:
            if element.kind is ElementType.MOVE_TO:
                pen.moveTo(_xy(element.points[0]))
            elif element.kind is ElementType.LINE_TO:
                pen.lineTo(_xy(element.points[0]))
            elif element.kind is ElementType.CURVE_TO:
                pen.curveTo(*(_xy(p) for p in element.points))
            elif element.kind is ElementType.CLOSE:
                pen.closePath()

        if not contour.closed:
            pen.endPath()
