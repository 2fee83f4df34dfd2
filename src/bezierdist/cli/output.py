"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from typing import Any

from rich.console import Console
from rich.table import Table

from bezierdist.domain import BezierCurve, Point

console = Console()

# Unicode symbols for consistent visual language
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def _format_point(point: Point) -> str:
    return f"({point.x:.6g}, {point.y:.6g})"


def print_curve(curve: BezierCurve) -> None:
    """Print the control points of a curve.

    Args:
        curve: Curve to describe
    """
    points = f" {SYM_DOT} ".join(_format_point(p) for p in curve)
    console.print(f"\n[bold]Curve[/bold] degree {curve.degree}")
    console.print(f"  {points}")


def print_distance(query: Point, location: float, distance: float, nearest: Point) -> None:
    """Print the result of a distance query.

    Args:
        query: Query point
        location: Curve parameter of the nearest point
        distance: Distance from the query point to the curve
        nearest: Nearest point on the curve
    """
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column(style="dim")
    table.add_column()
    table.add_row("Point", _format_point(query))
    table.add_row("Location", f"{location:.10g}")
    table.add_row("Distance", f"{distance:.10g}")
    table.add_row("Nearest", _format_point(nearest))

    console.print(f"\n[bold green]{SYM_OK} Distance[/bold green]")
    console.print(table)


def print_length(length: float, step: float) -> None:
    """Print an arc length.

    Args:
        length: Approximated arc length
        step: Parameter increment used for sampling
    """
    console.print(f"\n[bold green]{SYM_OK} Length[/bold green] {length:.10g}")
    console.print(f"  sampled every {step:g} of the parameter range")


def print_point(location: float, point: Point) -> None:
    """Print a curve point.

    Args:
        location: Curve parameter
        point: Curve point at that parameter
    """
    console.print(f"\n[bold green]{SYM_OK} Point[/bold green] at t={location:g}")
    console.print(f"  {_format_point(point)}")


def print_json(data: dict[str, Any]) -> None:
    """Print machine-readable output.

    Args:
        data: JSON-serialisable result
    """
    console.print_json(data=data)


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
