"""Mizan CLI — entry point for calendar and zakat commands."""

import click

from mizan import __version__

from .common import load_settings


@click.group()
@click.version_option(version=__version__, package_name="mizan")
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="YAML or JSON config file.",
)
@click.option("--log-level", default=None, help="Override the configured log level.")
@click.pass_context
def main(ctx: click.Context, config_file: str | None, log_level: str | None) -> None:
    """Mizan — Hijri calendar and zakat eligibility calculator."""
    ctx.obj = load_settings(config_file, log_level)


# Register subcommands
from .calendar_cmd import to_gregorian, to_hijri
from .zakat_cmd import evaluate, nisab, remind

main.add_command(to_hijri)
main.add_command(to_gregorian)
main.add_command(nisab)
main.add_command(evaluate)
main.add_command(remind)
