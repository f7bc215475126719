"""Multi-signature wallet configuration records."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any

WALLET_FIELDS = ("name", "members", "threshold", "address")
REQUIRED_FIELDS = ("name", "members", "threshold")


class _Missing(Enum):
    """Marker for a field absent from the configuration source."""

    MISSING = "missing"

    def __repr__(self) -> str:
        return "MISSING"


MISSING = _Missing.MISSING


@dataclass(frozen=True)
class WalletConfig:
    """Validated multisig wallet configuration.

    Only ever produced by the validator, so every instance satisfies:
    non-empty name, non-empty duplicate-free members in the chosen address
    format, ``1 <= threshold <= len(members)`` and a well-formed address
    when one is given.
    """

    name: str
    members: tuple[str, ...]
    threshold: int
    address: str | None = None

    def deployment_args(self) -> tuple[str, list[str], int, str | None]:
        """Positional arguments for the contract-instantiation call."""
        return self.name, list(self.members), self.threshold, self.address

    def to_dict(self) -> dict[str, Any]:
        data = {
            "name": self.name,
            "members": list(self.members),
            "threshold": self.threshold,
        }
        if self.address is not None:
            data["address"] = self.address
        return data


@dataclass(frozen=True)
class WalletConfigCandidate:
    """Unvalidated wallet configuration as read from its source."""

    name: Any = MISSING
    members: Any = MISSING
    threshold: Any = MISSING
    address: Any = MISSING
    source: Path | None = None
    extra_keys: tuple[str, ...] = field(default=())

    @classmethod
    def from_dict(
        cls, data: dict[str, Any], source: Path | str | None = None
    ) -> "WalletConfigCandidate":
        """Create a candidate from a parsed mapping without substituting defaults."""
        address = data.get("address", MISSING)
        return cls(
            name=data.get("name", MISSING),
            members=data.get("members", MISSING),
            threshold=data.get("threshold", MISSING),
            # null and absent both mean "no address"
            address=MISSING if address is None else address,
            source=Path(source) if source is not None else None,
            extra_keys=tuple(key for key in data if key not in WALLET_FIELDS),
        )

    @classmethod
    def from_config(cls, config: WalletConfig) -> "WalletConfigCandidate":
        return cls(
            name=config.name,
            members=list(config.members),
            threshold=config.threshold,
            address=MISSING if config.address is None else config.address,
        )

    def missing_fields(self) -> list[str]:
        return [name for name in WALLET_FIELDS if getattr(self, name) is MISSING]
