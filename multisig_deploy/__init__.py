"""Validated deployment of multi-signature wallets from configuration files."""

__version__ = "0.1.0"
