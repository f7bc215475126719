"""Validation boundary between a loaded wallet configuration and deployment."""

import logging
from dataclasses import dataclass
from typing import Any

from ..constants.status import ValidationStatus
from .address import DEFAULT_ADDRESS_FORMAT, AddressFormat, get_address_format
from .exceptions import (
    ConfigValidationError,
    DuplicateMemberError,
    EmptyMemberListError,
    InvalidTypeError,
    MalformedAddressError,
    MissingFieldError,
    ThresholdOutOfRangeError,
)
from .loader import YAML_SUFFIXES
from .wallet import MISSING, REQUIRED_FIELDS, WalletConfig, WalletConfigCandidate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Valid:
    """Confirmed configuration, safe to hand to a deployer."""

    config: WalletConfig

    status = ValidationStatus.VALID
    is_valid = True

    def unwrap(self) -> WalletConfig:
        return self.config


@dataclass(frozen=True)
class Rejected:
    """Configuration rejected with the first violated rule."""

    reason: ConfigValidationError

    status = ValidationStatus.REJECTED
    is_valid = False

    def unwrap(self) -> WalletConfig:
        raise self.reason


ValidationResult = Valid | Rejected


class WalletConfigValidator:
    """Checks a wallet configuration candidate against the multisig invariants."""

    def __init__(
        self, address_format: str | AddressFormat = DEFAULT_ADDRESS_FORMAT
    ) -> None:
        self.address_format = get_address_format(address_format)

    def validate(
        self, candidate: WalletConfigCandidate | WalletConfig | dict[str, Any]
    ) -> ValidationResult:
        """Validate a candidate, returning Valid(config) or Rejected(reason)."""
        candidate = self._as_candidate(candidate)
        try:
            config = self._check(candidate)
        except ConfigValidationError as e:
            logger.warning("Wallet configuration rejected: %s", e)
            return Rejected(e)

        logger.debug(
            "Wallet configuration '%s' valid: %d members, threshold %d",
            config.name,
            len(config.members),
            config.threshold,
        )
        return Valid(config)

    @staticmethod
    def _as_candidate(
        candidate: WalletConfigCandidate | WalletConfig | dict[str, Any],
    ) -> WalletConfigCandidate:
        if isinstance(candidate, WalletConfig):
            return WalletConfigCandidate.from_config(candidate)
        if isinstance(candidate, dict):
            return WalletConfigCandidate.from_dict(candidate)
        return candidate

    def _check(self, candidate: WalletConfigCandidate) -> WalletConfig:
        # presence
        for field_name in REQUIRED_FIELDS:
            if getattr(candidate, field_name) is MISSING:
                raise MissingFieldError(field_name)

        name, members = candidate.name, candidate.members
        threshold = candidate.threshold
        address = None if candidate.address is MISSING else candidate.address

        # shape
        if not isinstance(name, str) or not name:
            raise InvalidTypeError("name", "non-empty string", name)
        if not isinstance(members, (list, tuple)) or not all(
            isinstance(member, str) for member in members
        ):
            raise InvalidTypeError(
                "members", "list of strings", members, self._yaml_hint(candidate)
            )
        # bool is an int subclass but never a meaningful threshold
        if isinstance(threshold, bool) or not isinstance(threshold, int):
            raise InvalidTypeError("threshold", "integer", threshold)
        if address is not None and not isinstance(address, str):
            raise InvalidTypeError(
                "address", "string", address, self._yaml_hint(candidate)
            )

        self._check_members(members)
        if address is not None and not self.address_format.is_valid(address):
            raise MalformedAddressError(address, "address", self.address_format.name)

        if not 1 <= threshold <= len(members):
            raise ThresholdOutOfRangeError(threshold, len(members))

        return WalletConfig(
            name=name, members=tuple(members), threshold=threshold, address=address
        )

    @staticmethod
    def _yaml_hint(candidate: WalletConfigCandidate) -> str:
        source = candidate.source
        if source is None or source.suffix.lower() not in YAML_SUFFIXES:
            return ""
        return "YAML reads unquoted values such as 0xA1 as numbers; quote each address"

    def _check_members(self, members: list[str] | tuple[str, ...]) -> None:
        if not members:
            raise EmptyMemberListError()

        seen = set()
        for member in members:
            key = self.address_format.normalize(member)
            if key in seen:
                raise DuplicateMemberError(member)
            seen.add(key)

        for member in members:
            if not self.address_format.is_valid(member):
                raise MalformedAddressError(member, "members", self.address_format.name)


def validate_wallet_config(
    candidate: WalletConfigCandidate | WalletConfig | dict[str, Any],
    address_format: str | AddressFormat = DEFAULT_ADDRESS_FORMAT,
) -> ValidationResult:
    """Validate a wallet configuration candidate."""
    return WalletConfigValidator(address_format).validate(candidate)


def validate_or_raise(
    candidate: WalletConfigCandidate | WalletConfig | dict[str, Any],
    address_format: str | AddressFormat = DEFAULT_ADDRESS_FORMAT,
) -> WalletConfig:
    """Return the confirmed configuration or raise the rejection reason."""
    return validate_wallet_config(candidate, address_format).unwrap()
