"""CLI command: selectorkit area -- print the area of a rectangle."""

from __future__ import annotations

import click

from selectorkit.shapes import Rectangle


@click.command()
@click.argument("width", type=float)
@click.argument("height", type=float)
def area(width: float, height: float) -> None:
    """Print the area of a WIDTH x HEIGHT rectangle."""
    result = Rectangle(width, height).get_area()
    if result.is_integer():
        click.echo(int(result))
    else:
        click.echo(result)
