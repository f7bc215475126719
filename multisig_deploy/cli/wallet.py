"""Multisig wallet configuration commands."""

import logging
from pathlib import Path

import click
from pycardano import Network

from ..config.address import ADDRESS_FORMATS, DEFAULT_ADDRESS_FORMAT
from ..config.exceptions import WalletConfigError
from ..config.loader import load_wallet_config
from ..config.validator import validate_wallet_config
from ..deployment.cardano import NativeScriptDeployer
from ..deployment.pipeline import WalletDeployment
from .formatting import (
    format_status_update,
    print_candidate,
    print_confirmation_message_prompt,
    print_status,
    print_wallet_config,
    print_wallet_deployment,
)

logger = logging.getLogger(__name__)

config_option = click.option(
    "--config",
    type=click.Path(path_type=Path),
    required=True,
    help="Path to wallet configuration (JSON or YAML)",
)


@click.command()
@config_option
@click.option(
    "--format",
    "address_format",
    type=click.Choice(sorted(ADDRESS_FORMATS)),
    default=DEFAULT_ADDRESS_FORMAT,
    show_default=True,
    help="Address format members must match",
)
def validate(config: Path, address_format: str) -> None:
    """Validate a wallet configuration file."""
    try:
        candidate = load_wallet_config(config)
    except WalletConfigError as e:
        raise click.ClickException(str(e)) from e

    result = validate_wallet_config(candidate, address_format)
    if not result.is_valid:
        print_status("Rejected", str(result.reason), success=False)
        raise click.ClickException(f"Invalid wallet configuration: {result.reason}")

    print_wallet_config(result.config)
    print_status("Valid", f"{config} satisfies all wallet invariants")


@click.command()
@config_option
def show(config: Path) -> None:
    """Show the raw values read from a wallet configuration file."""
    try:
        candidate = load_wallet_config(config)
    except WalletConfigError as e:
        raise click.ClickException(str(e)) from e
    print_candidate(candidate)


@click.command()
@config_option
@click.option(
    "--network",
    type=click.Choice(["testnet", "mainnet"], case_sensitive=False),
    default="testnet",
    show_default=True,
    help="Network the script address is derived for",
)
@click.option("--yes", is_flag=True, help="Skip the confirmation prompt")
def deploy(config: Path, network: str, yes: bool) -> None:
    """Derive the native multisig script wallet for a configuration."""
    orchestrator = WalletDeployment(
        NativeScriptDeployer(Network[network.upper()]),
        address_format="cardano",
        status_callback=format_status_update,
    )
    try:
        candidate = load_wallet_config(config)
        wallet_config = orchestrator.validator.validate(candidate).unwrap()
    except WalletConfigError as e:
        raise click.ClickException(str(e)) from e

    print_wallet_config(wallet_config)
    if not yes and not print_confirmation_message_prompt(
        "Proceed with these wallet parameters?"
    ):
        logger.info("Deployment of %s aborted by the user", config)
        click.echo("Process aborted by the user.")
        return

    result = orchestrator.deploy(wallet_config)
    if result.error is not None:
        raise click.ClickException(str(result.error)) from result.error

    print_wallet_deployment(result.deployment)
