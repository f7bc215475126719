"""Main CLI entry point for multisig wallet deployment tools."""

import click

from multisig_deploy.cli.wallet import deploy, show, validate
from multisig_deploy.config.utils import setup_logging


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose logging")
def cli(verbose: bool) -> None:
    """Multisig wallet deployment tools."""
    setup_logging(verbose)


# Add commands
cli.add_command(validate)
cli.add_command(show)
cli.add_command(deploy)


if __name__ == "__main__":
    cli()
