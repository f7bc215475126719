"""CLI output helpers for wallet configuration and deployment."""

from typing import Any

import click

from ..config.wallet import MISSING, WALLET_FIELDS, WalletConfig, WalletConfigCandidate
from ..constants.colors import CliColor
from ..constants.status import ProcessStatus
from ..deployment.cardano import NativeScriptWallet


def print_header(text: str) -> None:
    """Print styled header text."""
    click.echo()
    click.secho(f"=== {text} ===", fg=CliColor.HEADER, bold=True)
    click.echo()


def print_address_info(label: str, address: str) -> None:
    """Print formatted address information."""
    click.echo(
        f"{click.style(label, fg=CliColor.INFO)}: "
        f"{click.style(address, fg=CliColor.ADDRESS)}"
    )


def print_hash_info(label: str, hash_value: str) -> None:
    """Print formatted hash information."""
    click.echo(
        f"{click.style(label, fg=CliColor.INFO)}: "
        f"{click.style(hash_value, fg=CliColor.HASH)}"
    )


def print_value_info(label: str, value: Any) -> None:
    click.echo(
        f"{click.style(label, fg=CliColor.INFO)}: "
        f"{click.style(str(value), fg=CliColor.VALUE)}"
    )


def print_status(status: str, message: str, success: bool = True) -> None:
    """Print status message with appropriate styling."""
    icon = "✓" if success else "✗"
    color = CliColor.SUCCESS if success else CliColor.ERROR
    click.secho(f"{icon} {status}: {message}", fg=color)


def format_status_update(status: ProcessStatus, message: str) -> None:
    """Format and display deployment status updates."""
    colors = {
        ProcessStatus.NOT_STARTED: CliColor.INFO,
        ProcessStatus.LOADING_CONFIG: CliColor.PROGRESS,
        ProcessStatus.VALIDATING_CONFIG: CliColor.PROGRESS,
        ProcessStatus.DEPLOYING: CliColor.WARNING,
        ProcessStatus.COMPLETED: CliColor.SUCCESS,
        ProcessStatus.FAILED: CliColor.ERROR,
    }

    click.secho(f"\n[{status.value}]", fg=colors.get(status, CliColor.INFO), bold=True)
    if message:
        click.secho(message, fg=colors.get(status, CliColor.INFO))


def print_wallet_config(config: WalletConfig) -> None:
    """Display a confirmed wallet configuration."""
    print_header("Wallet Configuration")
    print_value_info("Name", config.name)
    print_value_info("Threshold", f"{config.threshold} of {len(config.members)}")
    for i, member in enumerate(config.members, start=1):
        print_address_info(f"Member {i}", member)
    if config.address is not None:
        print_address_info("Address", config.address)


def print_candidate(candidate: WalletConfigCandidate) -> None:
    """Display raw configuration values, flagging missing fields."""
    print_header(f"Raw Configuration ({candidate.source})")
    for field_name in WALLET_FIELDS:
        value = getattr(candidate, field_name)
        if value is MISSING:
            click.echo(
                f"{click.style(field_name, fg=CliColor.INFO)}: "
                f"{click.style('<missing>', fg=CliColor.WARNING)}"
            )
        else:
            print_value_info(field_name, repr(value))
    for key in candidate.extra_keys:
        click.secho(f"(ignored) {key}", fg=CliColor.HASH)


def print_wallet_deployment(wallet: NativeScriptWallet) -> None:
    """Display the derived native script wallet."""
    print_header("Deployment Summary")
    print_status(
        "Native Script", f"{wallet.threshold} of {len(wallet.signers)} signers"
    )
    print_hash_info("Script Hash", wallet.script_hash.payload.hex())
    print_address_info("Script Address", str(wallet.script_address))
    if wallet.reference_address is not None:
        print_address_info("Reference Address", wallet.reference_address)


def print_confirmation_message_prompt(message: str) -> bool:
    """Print colored confirmation prompt for message."""
    return click.confirm(click.style(message, fg=CliColor.WARNING, bold=True))
