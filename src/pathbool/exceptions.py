"""Exception hierarchy for Pathbool."""


class PathboolError(Exception):
    """Base exception for all Pathbool errors."""

    pass


class PathError(PathboolError):
    """Errors related to curve or path construction."""

    pass


class InvalidCurveError(PathError):
    """A curve could not be built from the given control points."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid curve: {reason}")


class InvalidPathError(PathError):
    """Draw instructions or contours violate path invariants."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid path: {reason}")


class PathParseError(PathError):
    """SVG path data could not be parsed."""

    def __init__(self, data: str, reason: str) -> None:
        self.data = data
        self.reason = reason
        super().__init__(f"Failed to parse path data '{data}': {reason}")


class FontError(PathboolError):
    """Errors related to loading glyph outlines from fonts."""

    pass


class FontLoadError(FontError):
    """Error loading a font file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load font '{path}': {reason}")


class GlyphNotFoundError(FontError):
    """Requested glyph not found in font."""

    def __init__(self, glyph_name: str) -> None:
        self.glyph_name = glyph_name
        super().__init__(f"Glyph '{glyph_name}' not found in font")
