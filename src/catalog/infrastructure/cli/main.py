import click

from catalog.infrastructure.bootstrap import LOG_LEVELS, configure_logging
from catalog.infrastructure.cli.demo_commands import demo


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Logging verbosity.",
)
def cli(log_level: str) -> None:
    """Catalog: product catalog demo"""
    configure_logging(log_level)


# Register subcommands
cli.add_command(demo)
