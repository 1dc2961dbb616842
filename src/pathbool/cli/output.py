"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with formatted step, result and error messages.
"""

from rich.console import Console
from rich.text import Text

from pathbool.domain import Diagnostics, Point

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_WARN = "!"  # Degraded result
SYM_DOT = "·"  # Separator/secondary info


def format_number(value: float) -> str:
    """Format a coordinate with at most three decimals."""
    text = f"{value:.3f}".rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Pathbool[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_operand_info(label: str, source: str, contours: int, curves: int) -> None:
    """Print a summary of one operand.

    Args:
        label: Operand label ("A" or "B")
        source: Where the operand came from (glyph name or "path data")
        contours: Number of contours
        curves: Number of curves
    """
    line = Text(f"  {label}: ")
    line.append(source)
    line.append(f" {SYM_DOT} {contours} contours {SYM_DOT} {curves} curves")
    console.print(line)


def print_path_data(data: str) -> None:
    """Print SVG path data unwrapped, so it can be piped."""
    console.print(data, soft_wrap=True, markup=False, highlight=False)


def print_result(diagnostics: Diagnostics) -> None:
    """Print the outcome of a boolean operation.

    Args:
        diagnostics: Diagnostics of the finished operation
    """
    time_str = f"{diagnostics.elapsed_ms:.1f}ms"
    name = diagnostics.operation.value.capitalize()

    if diagnostics.degraded:
        console.print(f"\n[bold yellow]{SYM_WARN} {name} partial result[/bold yellow] in {time_str}")
    else:
        console.print(f"\n[bold green]{SYM_OK} {name} complete[/bold green] in {time_str}")

    console.print(
        f"  {diagnostics.contour_count} contours {SYM_DOT} "
        f"{diagnostics.selected_count} curves kept {SYM_DOT} "
        f"{diagnostics.split_count_a + diagnostics.split_count_b} splits"
    )

    if diagnostics.open_contour_count:
        console.print(f"  [yellow]{diagnostics.open_contour_count} open contours[/yellow]")
    if diagnostics.truncated:
        console.print("  [yellow]intersection search stopped at the candidate limit[/yellow]")
    if diagnostics.overlap_pairs:
        console.print(
            f"  [yellow]{diagnostics.overlap_pairs} overlapping curve pairs not resolved[/yellow]"
        )
    if diagnostics.discarded_fragments:
        console.print(f"  [yellow]{diagnostics.discarded_fragments} fragments dropped[/yellow]")


def print_diagnostics(diagnostics: Diagnostics) -> None:
    """Print every diagnostics counter (verbose mode).

    Args:
        diagnostics: Diagnostics of the finished operation
    """
    console.print("\n[bold]Diagnostics[/bold]")
    for key, value in diagnostics.to_dict().items():
        console.print(f"  {key:<28}{value}")


def print_points(points: list[Point]) -> None:
    """Print intersection points, one "x,y" pair per line."""
    for point in points:
        console.print(f"{format_number(point.x)},{format_number(point.y)}", highlight=False)


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
