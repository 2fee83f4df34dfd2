"""CLI application entry point for bezierdist.

This module provides the main CLI interface using Typer.

Points are written as ``x,y``. Coordinates starting with a minus sign must
follow a ``--`` separator so they are not read as options::

    bezierdist distance -- -1,3 0,0 1,2 2,3 4,4
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Annotated

import structlog
import typer

from bezierdist import __version__
from bezierdist.cli.output import (
    console,
    print_curve,
    print_distance,
    print_error,
    print_json,
    print_length,
    print_point,
)
from bezierdist.cli.parsing import parse_curve, parse_point
from bezierdist.config import (
    LENGTH_STEP,
    MAX_RECURSION,
    BezierDistSettings,
    LoggingConfig,
    LogLevel,
    RootFinderConfig,
)
from bezierdist.core import distance_from_curve, get_length, point_on_path
from bezierdist.exceptions import BezierDistError
from bezierdist.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="bezierdist",
    help="Measure distances to and lengths of Bezier curves.",
    add_completion=False,
    no_args_is_help=True,
)


@dataclass
class CliState:
    """Options shared by every command."""

    settings: BezierDistSettings
    logger: structlog.stdlib.BoundLogger
    json_output: bool = False


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]bezierdist[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_options(
    ctx: typer.Context,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        LogLevel,
        typer.Option(
            "--log-level",
            help="Console logging level",
            case_sensitive=False,
        ),
    ] = LogLevel.WARNING,
    json_output: Annotated[
        bool,
        typer.Option(
            "--json",
            help="Print results as JSON",
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
    """Measure distances to and lengths of Bezier curves."""
    settings = BezierDistSettings(
        logging=LoggingConfig(log_file=log_file, log_level=log_level),
    )
    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level.value,
        file_level=settings.logging.file_log_level.value,
    )
    ctx.obj = CliState(settings=settings, logger=logger, json_output=json_output)


@app.command()
def distance(
    ctx: typer.Context,
    point: Annotated[
        str,
        typer.Argument(help="Query point as x,y", show_default=False),
    ],
    curve: Annotated[
        list[str],
        typer.Argument(help="Control points as x,y (4 for a cubic)", show_default=False),
    ],
    max_recursion: Annotated[
        int,
        typer.Option(
            "--max-recursion",
            help="Subdivision depth limit of the root finder",
            min=1,
            max=512,
        ),
    ] = MAX_RECURSION,
) -> None:
    """Find the distance from a point to a curve and the nearest curve point.

    Example:
        bezierdist distance 1,3 0,0 1,2 2,3 4,4
    """
    state: CliState = ctx.obj
    try:
        query = parse_point(point)
        bezier_curve = parse_curve(curve)
        config = RootFinderConfig(max_recursion=max_recursion)

        result = distance_from_curve(query, bezier_curve, config)
        nearest = point_on_path(bezier_curve, result.location)
    except BezierDistError as e:
        state.logger.error("Distance query failed", error=str(e), error_type=type(e).__name__)
        print_error(str(e))
        raise typer.Exit(code=1)

    state.logger.info(
        "Distance computed",
        degree=bezier_curve.degree,
        location=result.location,
        distance=result.distance,
    )

    if state.json_output:
        print_json(
            {
                **result.to_dict(),
                "point": query.to_dict(),
                "nearest": nearest.to_dict(),
            }
        )
        return

    print_curve(bezier_curve)
    print_distance(query, result.location, result.distance, nearest)


@app.command()
def length(
    ctx: typer.Context,
    curve: Annotated[
        list[str],
        typer.Argument(help="Control points as x,y (4 for a cubic)", show_default=False),
    ],
    step: Annotated[
        float,
        typer.Option(
            "--step",
            "-s",
            help="Parameter increment between samples",
            min=0.0,
            max=1.0,
        ),
    ] = LENGTH_STEP,
) -> None:
    """Approximate the arc length of a curve.

    Example:
        bezierdist length 0,0 1,2 2,3 4,4
    """
    state: CliState = ctx.obj
    try:
        bezier_curve = parse_curve(curve)
        arc_length = get_length(bezier_curve, step)
    except BezierDistError as e:
        state.logger.error("Length query failed", error=str(e), error_type=type(e).__name__)
        print_error(str(e))
        raise typer.Exit(code=1)

    state.logger.info("Length computed", degree=bezier_curve.degree, length=arc_length, step=step)

    if state.json_output:
        print_json({"length": arc_length, "step": step})
        return

    print_curve(bezier_curve)
    print_length(arc_length, step)


@app.command()
def point(
    ctx: typer.Context,
    curve: Annotated[
        list[str],
        typer.Argument(help="Control points as x,y (4 for a cubic)", show_default=False),
    ],
    at: Annotated[
        float,
        typer.Option(
            "--at",
            "-t",
            help="Curve parameter, 0 at the first and 1 at the last control point",
        ),
    ] = 0.5,
) -> None:
    """Evaluate a curve at a parameter.

    Example:
        bezierdist point 0,0 1,2 2,3 4,4 --at 0.25
    """
    state: CliState = ctx.obj
    try:
        bezier_curve = parse_curve(curve)
    except BezierDistError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    result = point_on_path(bezier_curve, at)

    if state.json_output:
        print_json({"location": at, "point": result.to_dict()})
        return

    print_curve(bezier_curve)
    print_point(at, result)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
