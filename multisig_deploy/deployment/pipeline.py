"""Orchestrates loading, validating and deploying a multisig wallet."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Protocol

from ..config.address import DEFAULT_ADDRESS_FORMAT, AddressFormat
from ..config.exceptions import DeploymentError, WalletConfigError
from ..config.loader import load_wallet_config
from ..config.validator import WalletConfigValidator
from ..config.wallet import WalletConfig
from ..constants.status import ProcessStatus

logger = logging.getLogger(__name__)


class Deployer(Protocol):
    """Contract-instantiation collaborator."""

    def deploy(
        self, name: str, members: list[str], threshold: int, address: str | None
    ) -> Any: ...


@dataclass
class DeploymentResult:
    """Result of a wallet deployment run"""

    status: ProcessStatus
    config: WalletConfig | None = None
    deployment: Any = None
    error: WalletConfigError | None = None


class WalletDeployment:
    """Coordinates the load → validate → deploy sequence for one wallet.

    The deployer is only called once the configuration has been confirmed;
    any loader or validation failure ends the run before that point.
    """

    def __init__(
        self,
        deployer: Deployer,
        address_format: str | AddressFormat = DEFAULT_ADDRESS_FORMAT,
        status_callback: Callable[[ProcessStatus, str], None] | None = None,
    ) -> None:
        self.deployer = deployer
        self.validator = WalletConfigValidator(address_format)
        self.status_callback = status_callback
        self.current_status = ProcessStatus.NOT_STARTED

    def _update_status(self, status: ProcessStatus, message: str = "") -> None:
        """Update process status and notify callback."""
        self.current_status = status
        if self.status_callback:
            self.status_callback(status, message)

    def run(self, path: Path | str) -> DeploymentResult:
        """Deploy the wallet described by the configuration file at ``path``."""
        try:
            self._update_status(ProcessStatus.LOADING_CONFIG, f"Reading {path}")
            candidate = load_wallet_config(path)

            self._update_status(ProcessStatus.VALIDATING_CONFIG)
            config = self.validator.validate(candidate).unwrap()
        except WalletConfigError as e:
            logger.error("Wallet configuration error: %s", e)
            self._update_status(ProcessStatus.FAILED, str(e))
            return DeploymentResult(status=ProcessStatus.FAILED, error=e)

        return self.deploy(config)

    def deploy(self, config: WalletConfig) -> DeploymentResult:
        """Hand a confirmed configuration to the deployer."""
        self._update_status(
            ProcessStatus.DEPLOYING,
            f"Deploying '{config.name}' ({config.threshold} of {len(config.members)})",
        )
        try:
            deployment = self.deployer.deploy(*config.deployment_args())
        except Exception as e:
            logger.error("Deployer failed for '%s'", config.name, exc_info=e)
            error = DeploymentError(f"Failed to deploy wallet '{config.name}': {e}")
            error.__cause__ = e
            self._update_status(ProcessStatus.FAILED, str(error))
            return DeploymentResult(
                status=ProcessStatus.FAILED, config=config, error=error
            )

        self._update_status(ProcessStatus.COMPLETED)
        return DeploymentResult(
            status=ProcessStatus.COMPLETED, config=config, deployment=deployment
        )


def deploy_wallet(
    path: Path | str,
    deployer: Deployer,
    address_format: str | AddressFormat = DEFAULT_ADDRESS_FORMAT,
) -> Any:
    """Load, validate and deploy; raise the first error encountered."""
    result = WalletDeployment(deployer, address_format).run(path)
    if result.error is not None:
        raise result.error
    return result.deployment
