"""Glyph reader for loading outlines from TTF/OTF fonts.

This module provides the GlyphReader class for loading font files and
converting glyph outlines into Paths that boolean operations accept.
"""

from collections.abc import Iterator
from pathlib import Path as FilePath

from fontTools.ttLib import TTFont, TTLibError

from pathbool.domain import Path
from pathbool.exceptions import FontLoadError, GlyphNotFoundError
from pathbool.io.pen import PathPen


class GlyphReader:
    """Loads TTF/OTF fonts and extracts glyph outlines as Paths.

    TrueType quadratic outlines are elevated to cubics while drawing.

    Example:
        with GlyphReader(FilePath("font.ttf")) as reader:
            outer = reader.get_path("O")
            inner = reader.get_path("period")
    """

    def __init__(self, font_path: FilePath) -> None:
        """Initialize the glyph reader.

        Args:
            font_path: Path to the TTF or OTF font file
        """
        self._font_path = FilePath(font_path)
        self._font: TTFont | None = None

    def load(self) -> None:
        """Load the font file.

        Raises:
            FontLoadError: If the file does not exist or is not a valid font
        """
        if not self._font_path.exists():
            raise FontLoadError(str(self._font_path), "file not found")

        try:
            self._font = TTFont(str(self._font_path))
        except (TTLibError, OSError) as e:
            raise FontLoadError(str(self._font_path), str(e)) from e

    def _require_font(self) -> TTFont:
        if self._font is None:
            raise RuntimeError("Font not loaded. Call load() first.")
        return self._font

    @property
    def units_per_em(self) -> int:
        """Return font's units per em.

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        return self._require_font()["head"].unitsPerEm  # type: ignore[attr-defined]

    @property
    def glyph_count(self) -> int:
        """Return total number of glyphs in the font."""
        return len(self._require_font().getGlyphOrder())

    @property
    def glyph_names(self) -> list[str]:
        """Glyph names in font order."""
        return list(self._require_font().getGlyphOrder())

    def get_path(self, name: str) -> Path:
        """Get the outline of a glyph as a Path.

        Args:
            name: Name of the glyph

        Returns:
            Path of the glyph outline (empty for blank glyphs)

        Raises:
            GlyphNotFoundError: If the font has no glyph with that name
            RuntimeError: If font has not been loaded yet
        """
        glyph_set = self._require_font().getGlyphSet()
        if name not in glyph_set:
            raise GlyphNotFoundError(name)

        pen = PathPen(glyph_set)
        glyph_set[name].draw(pen)
        return pen.path

    def iter_paths(self) -> Iterator[tuple[str, Path]]:
        """Iterate over all glyphs in font order.

        Yields:
            Tuples of (glyph name, outline path)
        """
        for name in self.glyph_names:
            yield name, self.get_path(name)

    def close(self) -> None:
        """Close the font file and free resources."""
        if self._font is not None:
            self._font.close()
            self._font = None

    def __enter__(self) -> "GlyphReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()
