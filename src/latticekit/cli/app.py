"""CLI application entry point for LatticeKit.

This module provides the command-line interface using Typer.
"""

import math
from pathlib import Path
from typing import Annotated

import typer

from latticekit import __version__
from latticekit.cli.output import (
    console,
    print_board,
    print_error,
    print_header,
    print_selection,
    print_set_summary,
    print_step,
)
from latticekit.config import (
    IterationFrequency,
    LatticeKitSettings,
    LoggingConfig,
    MembershipFrequency,
    SetHints,
    SetSize,
    Variability,
)
from latticekit.display import render_board
from latticekit.domain import HyperRectDomain, Point
from latticekit.exceptions import LatticeKitError
from latticekit.sets import DigitalSetDomain, make_digital_set
from latticekit.shapes import Ball, digitize
from latticekit.utils import TimingStats, configure_logging

# Largest radius rendered by --show
MAX_BOARD_RADIUS = 40

app = typer.Typer(
    name="latticekit",
    help="Digital sets over integer lattices: selection, digitization and inspection.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]LatticeKit[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_options(
    log_file: Annotated[
        Path | None,
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
    """Digital sets over integer lattices."""
    settings = LatticeKitSettings(
        logging=LoggingConfig(log_file=log_file, log_level=log_level),
    )
    configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
    )


def _parse_hints(size: str, variability: str, iteration: str, membership: str) -> SetHints:
    """Build SetHints from CLI strings, exiting with a message on bad values."""
    try:
        return SetHints(
            size=SetSize(size.lower()),
            variability=Variability(variability.lower()),
            iteration=IterationFrequency(iteration.lower()),
            membership=MembershipFrequency(membership.lower()),
        )
    except ValueError:
        print_error(
            "Invalid hint value",
            details="size: small|medium|big; other hints: low|high",
        )
        raise typer.Exit(code=1)


@app.command()
def select(
    dimension: Annotated[
        int,
        typer.Option("--dimension", "-d", help="Domain dimension", min=1),
    ] = 2,
    extent: Annotated[
        int,
        typer.Option("--extent", "-e", help="Points per axis of the domain", min=1),
    ] = 10,
    size: Annotated[
        str,
        typer.Option("--size", help="Expected set size (small|medium|big)"),
    ] = "medium",
    variability: Annotated[
        str,
        typer.Option("--variability", help="Expected insert/erase rate (low|high)"),
    ] = "low",
    iteration: Annotated[
        str,
        typer.Option("--iteration", help="Expected iteration frequency (low|high)"),
    ] = "low",
    membership: Annotated[
        str,
        typer.Option("--membership", help="Expected membership-test frequency (low|high)"),
    ] = "low",
) -> None:
    """Show which digital set variant the selector picks for a workload.

    Example:
        latticekit select --size medium --membership high

    The set is created over a cube of extent points per axis starting at the
    origin, so the report includes the fallback applied to domains too large
    for a bitmap.
    """
    hints = _parse_hints(size, variability, iteration, membership)
    print_header(__version__)

    domain = HyperRectDomain(
        Point.zero(dimension), Point.diagonal(extent - 1, dimension)
    )
    print_step(
        f"Selecting for a {dimension}D domain {domain.lower_bound} .. {domain.upper_bound}"
    )
    digital_set = make_digital_set(domain, hints)
    print_selection(
        variant=type(digital_set).__name__,
        hints={axis: value.value for axis, value in hints},
        domain_type=f"{type(domain).__name__} ({domain.size():,} points)",
    )


@app.command()
def disk(
    radius: Annotated[
        float,
        typer.Option("--radius", "-r", help="Disk radius", min=1.0),
    ] = 10.0,
    size: Annotated[
        str,
        typer.Option("--size", help="Expected set size (small|medium|big)"),
    ] = "big",
    variability: Annotated[
        str,
        typer.Option("--variability", help="Expected insert/erase rate (low|high)"),
    ] = "low",
    iteration: Annotated[
        str,
        typer.Option("--iteration", help="Expected iteration frequency (low|high)"),
    ] = "high",
    membership: Annotated[
        str,
        typer.Option("--membership", help="Expected membership-test frequency (low|high)"),
    ] = "high",
    erase_origin: Annotated[
        bool,
        typer.Option("--erase-origin", help="Remove the origin after digitization"),
    ] = False,
    show: Annotated[
        bool,
        typer.Option("--show", help=f"Render the disk (radius <= {MAX_BOARD_RADIUS})"),
    ] = False,
) -> None:
    """Digitize an open disk centred at the origin and report on the set.

    The domain is the smallest square box around the origin holding every
    lattice point of the disk.

    Example:
        latticekit disk --radius 450 --erase-origin
    """
    hints = _parse_hints(size, variability, iteration, membership)
    print_header(__version__)

    bound = math.ceil(radius) - 1
    domain = HyperRectDomain(Point.of(-bound, -bound), Point.of(bound, bound))
    timings = TimingStats()

    try:
        print_step(f"Digitizing disk of radius {radius:g}")
        timings.start("digitize")
        digital_set = digitize(Ball(center=(0.0, 0.0), radius=radius), domain, hints)
        timings.stop("digitize")

        if erase_origin:
            digital_set.erase(Point.zero(2))

        set_domain = DigitalSetDomain(digital_set)
        timings.start("iterate")
        count = sum(1 for _ in set_domain)
        timings.stop("iterate")

        box = set_domain.bounding_box()
        print_set_summary(
            variant=type(digital_set).__name__,
            size=count,
            lower=str(set_domain.lower_bound),
            upper=str(set_domain.upper_bound),
            bounding_box=f"{box[0]} .. {box[1]}" if box else "empty",
            timings=timings.timings,
        )

        if show:
            if radius > MAX_BOARD_RADIUS:
                console.print(f"\n  Radius above {MAX_BOARD_RADIUS}, board not shown")
            else:
                print_board(render_board(set_domain, domain))
    except LatticeKitError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
