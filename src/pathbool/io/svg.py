"""SVG path data conversion.

Parsing goes through fontTools' SVG path parser, which draws into a PathPen;
arcs and quadratic segments arrive as cubics. Serialization replays a Path
into fontTools' SVGPathPen.
"""

from fontTools.pens.svgPathPen import SVGPathPen
from fontTools.svgLib.path import parse_path

from pathbool.domain import Path
from pathbool.exceptions import InvalidPathError, PathParseError
from pathbool.io.pen import PathPen, draw_path

# Decimal places kept when writing coordinates
SVG_PRECISION = 6


def _format_number(value: float) -> str:
    """Shortest decimal representation with at most SVG_PRECISION places."""
    text = f"{value:.{SVG_PRECISION}f}".rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


def parse_svg_path(data: str) -> Path:
    """Parse SVG path data into a Path.

    Args:
        data: Contents of an SVG ``d`` attribute

    Returns:
        Path with one contour per subpath

    Raises:
        PathParseError: If the data is malformed

    Examples:
        >>> path = parse_svg_path("M0 0 L10 0 L10 10 Z")
        >>> len(path.curves), path.is_closed
        (3, True)
    """
    pen = PathPen()
    try:
        parse_path(data, pen)
        return pen.path
    except InvalidPathError as e:
        raise PathParseError(data, e.reason) from e
    except (ValueError, IndexError, AssertionError) as e:
        raise PathParseError(data, str(e) or type(e).__name__) from e


def to_svg_path(path: Path) -> str:
    """Serialize a Path as SVG path data.

    Args:
        path: Path to serialize

    Returns:
        Absolute-coordinate path data (empty string for an empty path)
    """
    pen = SVGPathPen(None, ntos=_format_number)
    draw_path(path, pen)
    return pen.getCommands()
