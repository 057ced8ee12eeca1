"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from pathorder.domain import OrderResult

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]pathorder[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_layer_info(layer_path: str, contours: int, lines: int, combing: bool, indexed: bool) -> None:
    """Print a summary of the loaded layer.

    Args:
        layer_path: Path to the layer file
        contours: Number of contours
        lines: Number of lines
        combing: Whether a combing boundary is present
        indexed: Whether lines are indexed in a grid
    """
    line = Text("  ")
    line.append(layer_path)
    console.print(line)
    extras = []
    if combing:
        extras.append("combing boundary")
    if indexed:
        extras.append("grid index")
    suffix = f" {SYM_DOT} " + f" {SYM_DOT} ".join(extras) if extras else ""
    console.print(f"  {contours} contours {SYM_DOT} {lines} lines{suffix}")


def print_order_table(title: str, result: OrderResult, start_label: str) -> None:
    """Print a tour as a table of visiting position, feature and start.

    Args:
        title: Table title
        result: Tour to show
        start_label: Column header for the start choice
    """
    table = Table(title=title, title_justify="left", show_edge=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Feature", justify="right")
    table.add_column(start_label, justify="right")

    for position, step in enumerate(result):
        table.add_row(str(position), str(step.feature_index), str(step.start_index))

    console.print(table)
    console.print(f"  travel {result.travel_distance:,.1f}")


def print_success(contours: int, lines: int, travel: float, output_path: str | None = None) -> None:
    """Print success message with summary.

    Args:
        contours: Number of contours ordered
        lines: Number of lines ordered
        travel: Total estimated travel of both tours
        output_path: Path the result was written to, if any
    """
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green]")
    console.print(f"  {contours} contours {SYM_DOT} {lines} lines {SYM_DOT} travel {travel:,.1f}")
    if output_path:
        line = Text("  ")
        line.append(output_path, style="bold")
        console.print(line)


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
