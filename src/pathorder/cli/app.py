"""CLI application entry point for pathorder.

This module provides the main CLI interface using Typer.
"""

import json
from pathlib import Path
from typing import Annotated

import typer

from pathorder import __version__
from pathorder.cli.output import (
    print_error,
    print_header,
    print_layer_info,
    print_order_table,
    print_step,
    print_success,
)
from pathorder.config import LoggingConfig
from pathorder.exceptions import LayerFileError, PathOrderError
from pathorder.io import optimize_layer, read_layer, result_to_dict, write_result
from pathorder.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="pathorder",
    help="Compute the print order and start points of a layer's contours and lines.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"pathorder v{__version__}")
        raise typer.Exit()


@app.command()
def optimize(
    layer_file: Annotated[
        Path,
        typer.Argument(
            help="Path to a JSON layer file",
            show_default=False,
        ),
    ],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Write the computed order as JSON to this file",
        ),
    ] = None,
    as_json: Annotated[
        bool,
        typer.Option(
            "--json",
            help="Print the result as JSON instead of tables",
        ),
    ] = False,
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
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
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
    """Order the contours and lines of one layer to minimize travel.

    Contours are printed first, each starting at its seam vertex; lines
    follow, starting from the seam of the last contour.

    Example:
        pathorder layer.json --output order.json
    """
    if not layer_file.is_file():
        print_error(
            f"Input file not found: {layer_file}",
            details=f"The file '{layer_file}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)

    logging_config = LoggingConfig(log_file=log_file, log_level=log_level)
    logger = configure_logging(
        log_file=logging_config.log_file,
        console_level=logging_config.log_level,
        file_level=logging_config.file_log_level,
        quiet=quiet or as_json,
    )

    show_progress = not quiet and not as_json

    try:
        if show_progress:
            print_header(__version__)
            print_step("Loading layer")

        spec = read_layer(layer_file)

        if show_progress:
            print_layer_info(
                layer_path=str(layer_file),
                contours=len(spec.contours),
                lines=len(spec.lines),
                combing=bool(spec.combing_boundary),
                indexed=spec.grid_cell_size is not None,
            )
            print_step("Optimizing")

        result = optimize_layer(spec, logger=logger)

        if output is not None:
            write_result(output, result)

        if as_json:
            typer.echo(json.dumps(result_to_dict(result), indent=2))
            return

        if not quiet:
            print_order_table("Contours", result.contours, "Start vertex")
            print_order_table("Lines", result.lines, "Entry end")

        print_success(
            contours=len(result.contours),
            lines=len(result.lines),
            travel=result.contours.travel_distance + result.lines.travel_distance,
            output_path=str(output) if output is not None else None,
        )

    except LayerFileError as e:
        print_error(f"Could not load layer: {e.path}", details=e.reason)
        raise typer.Exit(code=1)
    except PathOrderError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except OSError as e:
        print_error(f"Could not write result: {e}")
        raise typer.Exit(code=1)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
