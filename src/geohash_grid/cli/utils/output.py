"""
CLI Output Utilities

Rich console formatting utilities for CLI output.
"""

from typing import Any

from rich.console import Console
from rich.table import Table


# If the terminal does not support unicode, Rich falls back to ASCII alternatives
console = Console()


def print_success(message: str) -> None:
    """Print success message in green."""
    console.print(f"[green]✓[/green] {message}")


def print_error(message: str) -> None:
    """Print error message in red."""
    console.print(f"[red]✗[/red] {message}", style="red")


def print_json(data: dict[str, Any]) -> None:
    """Print data as JSON."""
    import json

    console.print_json(json.dumps(data))


def format_latitude(latitude: float) -> str:
    """
    Format latitude for display.

    Args:
        latitude: Latitude in degrees (-90 to +90)

    Returns:
        Formatted string (e.g., "57.648000°N")
    """
    lat_dir = "N" if latitude >= 0 else "S"
    return f"{abs(latitude):.6f}°{lat_dir}"


def format_longitude(longitude: float) -> str:
    """
    Format longitude for display.

    Args:
        longitude: Longitude in degrees (-180 to +180)

    Returns:
        Formatted string (e.g., "10.409500°E")
    """
    lon_dir = "E" if longitude >= 0 else "W"
    return f"{abs(longitude):.6f}°{lon_dir}"


def print_position_table(
    geohash: str,
    latitude: float,
    longitude: float,
    latitude_error: float | None = None,
    longitude_error: float | None = None,
) -> None:
    """
    Print a decoded position in a formatted table.

    Args:
        geohash: Geohash that was decoded
        latitude: Latitude in degrees
        longitude: Longitude in degrees
        latitude_error: Half the cell height in degrees, if known
        longitude_error: Half the cell width in degrees, if known
    """
    table = Table(title=f"Geohash {geohash}", show_header=True, header_style="bold magenta")
    table.add_column("Coordinate", style="cyan")
    table.add_column("Value", style="green")
    table.add_column("Error", style="yellow")

    table.add_row("Latitude", format_latitude(latitude), "" if latitude_error is None else f"±{latitude_error:.6f}°")
    table.add_row(
        "Longitude", format_longitude(longitude), "" if longitude_error is None else f"±{longitude_error:.6f}°"
    )

    console.print(table)


def print_neighbourhood_grid(geohash: str, cells: dict[str, str | None]) -> None:
    """
    Print a geohash and its eight neighbours as a 3x3 compass grid.

    Args:
        geohash: Centre geohash
        cells: Neighbours keyed n, ne, e, se, s, sw, w, nw (None past a pole)
    """

    def cell(key: str) -> str:
        value = cells.get(key)
        return "[dim]-[/dim]" if value is None else value

    table = Table(title=f"Neighbours of {geohash}", show_header=False, show_lines=True)
    for _ in range(3):
        table.add_column(justify="center", style="green")

    table.add_row(cell("nw"), cell("n"), cell("ne"))
    table.add_row(cell("w"), f"[bold cyan]{geohash}[/bold cyan]", cell("e"))
    table.add_row(cell("sw"), cell("s"), cell("se"))

    console.print(table)
