"""selectorkit CLI entry point: Click group with subcommands."""

from __future__ import annotations

import click

from selectorkit import __version__
from selectorkit.config import Settings
from selectorkit.log import configure_logging


@click.group()
@click.version_option(version=__version__, prog_name="selectorkit")
@click.option(
    "--log-level",
    default=None,
    help="Logging level (overrides SELECTORKIT_LOG_LEVEL).",
)
def cli(log_level: str | None) -> None:
    """selectorkit - build CSS selectors and round-trip JSON."""
    settings = Settings.from_env()
    if log_level:
        settings = Settings(log_level=log_level.upper(), log_format=settings.log_format)
    try:
        configure_logging(settings)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--log-level") from exc


# Import and register subcommands
from selectorkit.cli.area import area  # noqa: E402
from selectorkit.cli.reformat import reformat  # noqa: E402
from selectorkit.cli.selector import selector  # noqa: E402

cli.add_command(selector)
cli.add_command(area)
cli.add_command(reformat)
