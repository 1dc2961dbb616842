"""I/O layer for pathbool.

This module converts between domain Paths and the outside world using
fonttools pens. It keeps fonttools out of the core algorithms.

Key responsibilities:
- Record pen drawing (glyphs, SVG data) as Paths
- Replay Paths into any fonttools pen
- Parse and write SVG path data
- Load glyph outlines from TTF/OTF fonts

Key classes:
- PathPen: Pen that builds a Path
- GlyphReader: Load fonts and extract glyph outlines
"""

from pathbool.io.pen import PathPen, draw_path
from pathbool.io.reader import GlyphReader
from pathbool.io.svg import parse_svg_path, to_svg_path

__all__ = [
    "GlyphReader",
    "PathPen",
    "draw_path",
    "parse_svg_path",
    "to_svg_path",
]
