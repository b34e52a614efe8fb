"""CLI command: selectorkit json -- re-serialize JSON in compact form."""

from __future__ import annotations

import sys

import click

from selectorkit.jsonbridge import ParseError, from_json, get_json


@click.command(name="json")
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
def reformat(source) -> None:
    """Read JSON from SOURCE (default: stdin) and print it compactly."""
    try:
        value = from_json(None, source.read())
    except ParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    click.echo(get_json(value))
