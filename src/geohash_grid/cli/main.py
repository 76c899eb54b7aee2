"""
Geohash CLI - Main Application

This is the main entry point for the geohash command-line interface.
"""

import logging
from typing import Any

import typer
from click import Context
from dotenv import load_dotenv
from returns.pipeline import is_successful
from rich.console import Console
from typer.core import TyperGroup

from geohash_grid.api.adjacency import adjacent, neighbours
from geohash_grid.api.codec import decode, encode
from geohash_grid.api.core.exceptions import GeohashError
from geohash_grid.api.core.types import GeohashConfig
from geohash_grid.cli.utils.output import (
    print_error,
    print_json,
    print_neighbourhood_grid,
    print_position_table,
    print_success,
)


class SortedCommandsGroup(TyperGroup):
    """Custom Typer group that sorts commands alphabetically within each help panel."""

    def list_commands(self, ctx: Context) -> list[str]:
        """Return commands sorted alphabetically."""
        commands = super().list_commands(ctx)
        return sorted(commands)


# Create main app
app = typer.Typer(
    name="geohash",
    help="Geohash encoding and grid navigation CLI",
    add_completion=True,
    rich_markup_mode="rich",
    cls=SortedCommandsGroup,
)

# Console for rich output
console = Console()

# Global state for CLI
state: dict[str, Any] = {
    "config": GeohashConfig(),
    "verbose": False,
}


@app.callback()
def main(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output",
    ),
) -> None:
    """
    Geohash CLI

    Encode coordinates to geohashes, decode them and walk the grid.

    [bold green]Examples:[/bold green]

        geohash encode 57.64911 10.40744 --precision 6
        geohash decode u4pruy --with-error
        geohash neighbours gcpuyph

    [bold blue]Environment Variables:[/bold blue]

        GEOHASH_PRECISION - Default geohash length (default 5)
        GEOHASH_STRICT    - Reject out-of-range coordinates and unknown characters
    """
    load_dotenv()

    state["verbose"] = verbose
    if verbose:
        logging.basicConfig(level=logging.DEBUG)
        console.print("[dim]Verbose mode enabled[/dim]")

    try:
        state["config"] = GeohashConfig.from_env()
    except GeohashError as e:
        print_error(f"Invalid configuration: {e}")
        raise typer.Exit(code=1) from e


@app.command("encode", rich_help_panel="Codec", context_settings={"ignore_unknown_options": True})
def encode_command(
    latitude: float = typer.Argument(..., help="Latitude in degrees (-90 to 90)"),
    longitude: float = typer.Argument(..., help="Longitude in degrees (-180 to 180)"),
    precision: int | None = typer.Option(
        None,
        "--precision",
        "-p",
        min=1,
        help="Geohash length",
        envvar="GEOHASH_PRECISION",
    ),
    strict: bool = typer.Option(
        False,
        "--strict",
        help="Reject out-of-range coordinates",
        envvar="GEOHASH_STRICT",
    ),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """
    Encode a latitude/longitude pair into a geohash.

    Example:
        geohash encode 57.64911 10.40744
        geohash encode 57.64911 10.40744 --precision 9
        geohash encode -- -33.8688 151.2093
    """
    config: GeohashConfig = state["config"]
    precision = config.precision if precision is None else precision
    strict = strict or config.strict

    try:
        geohash = encode(latitude, longitude, precision, strict=strict)
    except GeohashError as e:
        print_error(f"Encode failed: {e}")
        raise typer.Exit(code=1) from e

    if json_output:
        print_json({"latitude": latitude, "longitude": longitude, "precision": precision, "geohash": geohash})
    else:
        print_success(geohash)


@app.command("decode", rich_help_panel="Codec")
def decode_command(
    geohash: str = typer.Argument(..., help="Geohash to decode"),
    with_error: bool = typer.Option(False, "--with-error", "-e", help="Show the error margins of the cell"),
    strict: bool = typer.Option(
        False,
        "--strict",
        help="Reject unknown characters",
        envvar="GEOHASH_STRICT",
    ),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """
    Decode a geohash into latitude and longitude.

    Coordinates are rounded to (length - 2) decimal places.

    Example:
        geohash decode u4pruy
        geohash decode u4pruy --with-error --json
    """
    strict = strict or state["config"].strict

    try:
        latitude, longitude, lat_error, lon_error = decode(geohash, with_error=True, strict=strict)
    except GeohashError as e:
        print_error(f"Decode failed: {e}")
        raise typer.Exit(code=1) from e

    if json_output:
        data: dict[str, str | float] = {"geohash": geohash, "latitude": latitude, "longitude": longitude}
        if with_error:
            data["latitude_error"] = lat_error
            data["longitude_error"] = lon_error
        print_json(data)
    elif with_error:
        print_position_table(geohash, latitude, longitude, lat_error, lon_error)
    else:
        print_position_table(geohash, latitude, longitude)


@app.command("adjacent", rich_help_panel="Grid")
def adjacent_command(
    geohash: str = typer.Argument(..., help="Starting geohash"),
    direction: str = typer.Argument(..., help="Direction to step: n, s, e or w"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """
    Show the cell next to a geohash in one cardinal direction.

    Example:
        geohash adjacent gcpuyph n
        geohash adjacent gcpuyph W --json
    """
    result = adjacent(geohash, direction)
    if not is_successful(result):
        print_error(f"No adjacent cell: {result.failure()}")
        raise typer.Exit(code=1)

    cell = result.unwrap()
    if json_output:
        print_json({"geohash": geohash, "direction": direction.lower(), "adjacent": cell})
    else:
        print_success(cell)


@app.command("neighbours", rich_help_panel="Grid")
def neighbours_command(
    geohash: str = typer.Argument(..., help="Centre geohash"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """
    Show the eight cells surrounding a geohash.

    Cells past a pole are shown as '-' (null in JSON).

    Example:
        geohash neighbours gcpuyph
        geohash neighbours gcpuyph --json
    """
    # Validate once so an invalid hash is reported instead of eight blanks
    check = adjacent(geohash, "e")
    if not is_successful(check):
        print_error(f"Invalid geohash: {check.failure()}")
        raise typer.Exit(code=1)

    cells = neighbours(geohash)
    if json_output:
        print_json({"geohash": geohash, "neighbours": cells})
    else:
        print_neighbourhood_grid(geohash.lower(), cells)


@app.command(rich_help_panel="Utilities")
def version() -> None:
    """Show the CLI version."""
    from geohash_grid.cli import __version__

    console.print(f"[bold]Geohash CLI[/bold] version [cyan]{__version__}[/cyan]")
