"""Rich console output helpers for the CLI."""

from rich.console import Console
from rich.table import Table
from rich.text import Text

console = Console()

SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]LatticeKit[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_selection(variant: str, hints: dict[str, str], domain_type: str) -> None:
    """Print the digital set variant resolved for a hint bundle.

    Args:
        variant: Name of the selected DigitalSet class
        hints: Hint axis name to value
        domain_type: Description of the domain the set was created over
    """
    table = Table(show_header=False, box=None, padding=(0, 2))
    for axis, value in hints.items():
        table.add_row(axis, value)
    table.add_row("domain", domain_type)
    console.print(table)
    console.print(f"\n[bold green]{SYM_OK}[/bold green] {variant}")


def print_set_summary(
    variant: str,
    size: int,
    lower: str,
    upper: str,
    bounding_box: str,
    timings: dict[str, float],
) -> None:
    """Print the outcome of a digitization run.

    Args:
        variant: Name of the DigitalSet class used
        size: Number of points in the set
        lower: Lower bound of the set domain
        upper: Upper bound of the set domain
        bounding_box: Tight bounding box of the set contents
        timings: Step name to duration in seconds
    """
    line = Text("  ")
    line.append(variant, style="bold")
    line.append(f" {SYM_DOT} {size:,} points")
    console.print(line)
    console.print(f"  bounds {lower} .. {upper}")
    console.print(f"  tight box {bounding_box}")
    for name, seconds in timings.items():
        console.print(f"  {name:<10} {_format_time(seconds)}")
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green]")


def print_board(board: str) -> None:
    """Print a rendered 2D board without markup interpretation."""
    console.print(Text(board))


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        mins = int(seconds // 60)
        secs = seconds % 60
        return f"{mins}m {secs:.1f}s"
