"""Command line entry point."""

import click

from whoisrunning.interfaces.cli.commands.community import community
from whoisrunning.interfaces.cli.commands.contributions import contributions
from whoisrunning.interfaces.cli.commands.impact import impact
from whoisrunning.interfaces.cli.commands.location import location
from whoisrunning.interfaces.cli.commands.research import research


@click.group()
@click.option("--log-level", default=None, help="Logging level (default: LOG_LEVEL or INFO)")
def cli(log_level: str | None):
    """Who is running: candidate research and civic information."""
    from whoisrunning.infrastructure.config.settings import get_settings
    from whoisrunning.interfaces.cli.base import setup_logging

    setup_logging(log_level or get_settings().log_level)


cli.add_command(research)
cli.add_command(impact)
cli.add_command(location)
cli.add_command(contributions)
cli.add_command(community)


if __name__ == "__main__":
    cli()
