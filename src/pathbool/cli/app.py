"""CLI application entry point for pathbool.

This module provides the main CLI interface using Typer.
"""

from dataclasses import dataclass
from pathlib import Path as FilePath
from typing import Annotated

import typer

from pathbool import __version__
from pathbool.cli.output import (
    console,
    print_diagnostics,
    print_error,
    print_header,
    print_operand_info,
    print_path_data,
    print_points,
    print_result,
    print_step,
)
from pathbool.config import (
    ClassificationConfig,
    FillRule,
    IntersectionConfig,
    LoggingConfig,
    PathboolSettings,
    StitchConfig,
)
from pathbool.core import BooleanProcessor, intersection_points
from pathbool.domain import BooleanOperation, Path
from pathbool.exceptions import FontLoadError, PathboolError
from pathbool.io import GlyphReader, parse_svg_path, to_svg_path
from pathbool.utils import OperationLogger, configure_logging

# Create the Typer app
app = typer.Typer(
    name="pathbool",
    help="Boolean operations on paths made of lines and cubic Bezier curves.",
    add_completion=False,
    no_args_is_help=True,
)

OperandArgument = Annotated[
    str,
    typer.Argument(
        help="SVG path data, or a glyph name when --font is given",
        show_default=False,
    ),
]


@dataclass
class CliState:
    """Global options shared by every command."""

    settings: PathboolSettings
    font: FilePath | None = None
    verbose: bool = False
    quiet: bool = False


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Pathbool[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_options(
    ctx: typer.Context,
    threshold: Annotated[
        float,
        typer.Option(
            "--threshold",
            "-t",
            help="Convergence threshold of the intersection search (parameter units)",
            min=1e-9,
            max=0.5,
        ),
    ] = 1e-4,
    resolution: Annotated[
        float,
        typer.Option(
            "--resolution",
            "-r",
            help="Bucket size used to merge near-duplicate intersection parameters",
            min=1e-6,
            max=0.25,
        ),
    ] = 0.01,
    tolerance: Annotated[
        float,
        typer.Option(
            "--tolerance",
            help="Maximum end point distance when stitching contours",
            min=1e-6,
            max=100.0,
        ),
    ] = 1.0,
    fill_rule: Annotated[
        str,
        typer.Option(
            "--fill-rule",
            "-f",
            help="Fill rule for inside tests (even_odd|nonzero)",
        ),
    ] = "even_odd",
    font: Annotated[
        FilePath | None,
        typer.Option(
            "--font",
            help="Read operands as glyph names from this TTF/OTF font",
        ),
    ] = None,
    log_file: Annotated[
        FilePath | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbose console output",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Print only the result",
        ),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Combine two paths with union, intersect, difference or xor.

    Operands are SVG path data strings, or glyph names read from --font.

    Example:
        pathbool union "M0 0 H100 V100 H0 Z" "M50 50 H150 V150 H50 Z"
    """
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    try:
        rule = FillRule(fill_rule.lower())
    except ValueError:
        print_error(
            f"Invalid fill rule: {fill_rule}",
            details="Valid values: even_odd, nonzero",
        )
        raise typer.Exit(code=1)

    settings = PathboolSettings(
        intersection=IntersectionConfig(
            convergence_threshold=threshold,
            param_resolution=resolution,
        ),
        classification=ClassificationConfig(fill_rule=rule),
        stitch=StitchConfig(tolerance=tolerance),
        logging=LoggingConfig(
            log_file=log_file,
            log_level=log_level,
        ),
    )

    ctx.obj = CliState(settings=settings, font=font, verbose=verbose, quiet=quiet)


def _load_operands(state: CliState, operand_a: str, operand_b: str) -> tuple[Path, Path]:
    """Turn the two command-line operands into paths.

    Raises:
        PathboolError: If path data is malformed or a glyph cannot be read
    """
    if state.font is None:
        path_a = parse_svg_path(operand_a)
        path_b = parse_svg_path(operand_b)
        sources = ("path data", "path data")
    else:
        if not state.font.is_file():
            raise FontLoadError(str(state.font), "file not found")
        with GlyphReader(state.font) as reader:
            path_a = reader.get_path(operand_a)
            path_b = reader.get_path(operand_b)
        sources = (f"glyph {operand_a}", f"glyph {operand_b}")

    if not state.quiet:
        print_step("Loading operands")
        print_operand_info("A", sources[0], len(path_a.contours), len(path_a.curves))
        print_operand_info("B", sources[1], len(path_b.contours), len(path_b.curves))

    return path_a, path_b


def _run_operation(
    ctx: typer.Context,
    operation: BooleanOperation,
    operand_a: str,
    operand_b: str,
) -> None:
    """Run one boolean operation and print the resulting path data."""
    state: CliState = ctx.obj

    if not state.quiet:
        print_header(__version__)

    logger = configure_logging(
        log_file=state.settings.logging.log_file,
        console_level=state.settings.logging.log_level,
        file_level=state.settings.logging.file_log_level,
        quiet=state.quiet,
    )

    try:
        path_a, path_b = _load_operands(state, operand_a, operand_b)

        if not state.quiet:
            print_step(f"Computing {operation.value}")

        processor = BooleanProcessor(state.settings, operation_logger=OperationLogger(logger))
        result = processor.run(operation, path_a, path_b)

    except FontLoadError as e:
        print_error(f"Could not load font: {e.reason}")
        raise typer.Exit(code=1)
    except PathboolError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    if not state.quiet:
        print_result(result.diagnostics)
        if state.verbose:
            print_diagnostics(result.diagnostics)
        print_step("Result")

    print_path_data(to_svg_path(result.path))


@app.command()
def union(ctx: typer.Context, operand_a: OperandArgument, operand_b: OperandArgument) -> None:
    """Region covered by either operand."""
    _run_operation(ctx, BooleanOperation.UNION, operand_a, operand_b)


@app.command()
def intersect(ctx: typer.Context, operand_a: OperandArgument, operand_b: OperandArgument) -> None:
    """Region covered by both operands."""
    _run_operation(ctx, BooleanOperation.INTERSECT, operand_a, operand_b)


@app.command()
def difference(ctx: typer.Context, operand_a: OperandArgument, operand_b: OperandArgument) -> None:
    """Region covered by A but not by B."""
    _run_operation(ctx, BooleanOperation.DIFFERENCE, operand_a, operand_b)


@app.command()
def xor(ctx: typer.Context, operand_a: OperandArgument, operand_b: OperandArgument) -> None:
    """Region covered by exactly one operand."""
    _run_operation(ctx, BooleanOperation.XOR, operand_a, operand_b)


@app.command()
def intersections(
    ctx: typer.Context,
    operand_a: OperandArgument,
    operand_b: OperandArgument,
) -> None:
    """List the points where the outlines of A and B cross."""
    state: CliState = ctx.obj

    if not state.quiet:
        print_header(__version__)

    try:
        path_a, path_b = _load_operands(state, operand_a, operand_b)
        points = sorted(
            intersection_points(path_a, path_b, state.settings),
            key=lambda p: (p.x, p.y),
        )
    except FontLoadError as e:
        print_error(f"Could not load font: {e.reason}")
        raise typer.Exit(code=1)
    except PathboolError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    if not state.quiet:
        print_step(f"{len(points)} intersection points")

    print_points(points)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
