""" Wallet configuration loading and validation. """

from .address import ADDRESS_FORMATS, AddressFormat, get_address_format
from .loader import load_wallet_config
from .validator import (
    Rejected,
    Valid,
    ValidationResult,
    WalletConfigValidator,
    validate_or_raise,
    validate_wallet_config,
)
from .wallet import MISSING, WalletConfig, WalletConfigCandidate
