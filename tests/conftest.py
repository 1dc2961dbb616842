"""Shared fixtures for pathbool tests."""

from collections.abc import Callable

import pytest
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen

from pathbool.domain import Contour, Curve, Path, Point

# Control point distance for a quarter circle made of one cubic
KAPPA = 0.5522847498


def make_circle(cx: float, cy: float, r: float) -> Path:
    """Counter-clockwise circle of four cubic arcs, starting at (cx + r, cy)."""
    k = KAPPA * r
    arcs = [
        ((cx + r, cy), (cx + r, cy + k), (cx + k, cy + r), (cx, cy + r)),
        ((cx, cy + r), (cx - k, cy + r), (cx - r, cy + k), (cx - r, cy)),
        ((cx - r, cy), (cx - r, cy - k), (cx - k, cy - r), (cx, cy - r)),
        ((cx, cy - r), (cx + k, cy - r), (cx + r, cy - k), (cx + r, cy)),
    ]
    return Path((Contour(tuple(Curve.from_points(arc) for arc in arcs)),))


def make_rect(x0: float, y0: float, x1: float, y1: float) -> Path:
    """Counter-clockwise rectangle of four line curves, starting at (x0, y0)."""
    corners = [Point(x0, y0), Point(x1, y0), Point(x1, y1), Point(x0, y1)]
    curves = tuple(Curve.from_line(corners[i], corners[(i + 1) % 4]) for i in range(4))
    return Path((Contour(curves),))


@pytest.fixture
def circle() -> Callable[[float, float, float], Path]:
    """Factory for circle paths."""
    return make_circle


@pytest.fixture
def rect() -> Callable[[float, float, float, float], Path]:
    """Factory for rectangle paths."""
    return make_rect


@pytest.fixture
def unit_square() -> Path:
    """Counter-clockwise 100x100 square at the origin."""
    return make_rect(0.0, 0.0, 100.0, 100.0)


def build_test_font(font_path) -> None:
    """Write a small TrueType font with a few outline glyphs.

    Glyphs:
        square: clockwise 500x500 square from (100, 100)
        offset: the same square moved by (250, 250)
        bowl: one quadratic arch closed by a straight base
        space: no outline
    """

    def square(x0: int, y0: int, size: int):
        pen = TTGlyphPen(None)
        pen.moveTo((x0, y0))
        pen.lineTo((x0, y0 + size))
        pen.lineTo((x0 + size, y0 + size))
        pen.lineTo((x0 + size, y0))
        pen.closePath()
        return pen.glyph()

    bowl_pen = TTGlyphPen(None)
    bowl_pen.moveTo((0, 0))
    bowl_pen.qCurveTo((50, 100), (100, 0))
    bowl_pen.closePath()

    glyphs = {
        ".notdef": TTGlyphPen(None).glyph(),
        "space": TTGlyphPen(None).glyph(),
        "square": square(100, 100, 500),
        "offset": square(350, 350, 500),
        "bowl": bowl_pen.glyph(),
    }
    # Left side bearings must match each outline's xMin or readers shift the outline
    x_min = {".notdef": 0, "space": 0, "square": 100, "offset": 350, "bowl": 0}
    glyph_order = list(glyphs)

    builder = FontBuilder(1000, isTTF=True)
    builder.setupGlyphOrder(glyph_order)
    builder.setupCharacterMap({ord(" "): "space", ord("A"): "square"})
    builder.setupGlyf(glyphs)
    builder.setupHorizontalMetrics({name: (1000, x_min[name]) for name in glyph_order})
    builder.setupHorizontalHeader(ascent=800, descent=-200)
    builder.setupNameTable({"familyName": "Pathbool Test", "styleName": "Regular"})
    builder.setupOS2()
    builder.setupPost()
    builder.save(str(font_path))


@pytest.fixture
def test_font(tmp_path):
    """Path to a generated TrueType font (see build_test_font)."""
    font_path = tmp_path / "test.ttf"
    build_test_font(font_path)
    return font_path
