"""Custom exceptions for wallet configuration loading, validation and deployment."""

from pathlib import Path
from typing import Any


class WalletConfigError(Exception):
    """Base exception for all wallet configuration errors."""

    pass


# Loader Errors
class ConfigLoadError(WalletConfigError):
    """Base exception for configuration file loading errors."""

    def __init__(self, path: Path | str, message: str) -> None:
        self.path = Path(path)
        super().__init__(message)


class ConfigNotFoundError(ConfigLoadError):
    """Raised when the configuration file does not exist."""

    def __init__(self, path: Path | str) -> None:
        super().__init__(path, f"Config file not found: {path}")


class ConfigReadError(ConfigLoadError):
    """Raised when the configuration file exists but cannot be read."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.reason = reason
        super().__init__(path, f"Failed to read config file {path}: {reason}")


class ConfigParseError(ConfigLoadError):
    """Raised when the configuration file is not well-formed structured text."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.reason = reason
        super().__init__(path, f"Failed to parse config file {path}: {reason}")


# Validation Errors
class ConfigValidationError(WalletConfigError):
    """Base exception for wallet configuration validation errors."""

    pass


class MissingFieldError(ConfigValidationError):
    """Raised when a required field is absent."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"Missing required field: '{field}'")


class InvalidTypeError(ConfigValidationError):
    """Raised when a field has the wrong shape."""

    def __init__(
        self, field: str, expected: str, value: Any = None, hint: str = ""
    ) -> None:
        self.field = field
        self.expected = expected
        self.value = value
        self.hint = hint
        message = (
            f"Invalid type for field '{field}': expected {expected}, "
            f"got {type(value).__name__} ({value!r})"
        )
        super().__init__(f"{message}. {hint}" if hint else message)


class EmptyMemberListError(ConfigValidationError):
    """Raised when the member list has no entries."""

    def __init__(self) -> None:
        self.field = "members"
        super().__init__("Field 'members' must contain at least one address")


class DuplicateMemberError(ConfigValidationError):
    """Raised when a member address appears more than once."""

    def __init__(self, address: str) -> None:
        self.field = "members"
        self.address = address
        super().__init__(f"Duplicate member address: {address}")


class MalformedAddressError(ConfigValidationError):
    """Raised when an address does not match the chain's address format."""

    def __init__(
        self, value: str, field: str = "members", address_format: str = ""
    ) -> None:
        self.field = field
        self.value = value
        self.address_format = address_format
        suffix = f" ({address_format} format)" if address_format else ""
        super().__init__(f"Malformed address in '{field}': {value!r}{suffix}")


class ThresholdOutOfRangeError(ConfigValidationError):
    """Raised when the threshold is not between 1 and the member count."""

    def __init__(self, threshold: int, member_count: int) -> None:
        self.field = "threshold"
        self.threshold = threshold
        self.member_count = member_count
        super().__init__(
            f"Threshold {threshold} out of range: must be between 1 and "
            f"the number of members ({member_count})"
        )


class UnknownAddressFormatError(WalletConfigError):
    """Raised when an unsupported address format is requested."""

    def __init__(self, name: str, available: list[str]) -> None:
        self.name = name
        super().__init__(
            f"Unknown address format '{name}'. Available: {', '.join(available)}"
        )


# Deployment Errors
class DeploymentError(WalletConfigError):
    """Raised when the deployer fails for a validated configuration."""

    pass
