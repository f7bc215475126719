"""Wallet configuration file loader."""

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from .exceptions import ConfigNotFoundError, ConfigParseError, ConfigReadError
from .wallet import WalletConfigCandidate

logger = logging.getLogger(__name__)

YAML_SUFFIXES = {".yml", ".yaml"}


def parse_config_text(text: str, path: Path) -> Any:
    """Parse configuration text as YAML or JSON depending on the file suffix."""
    if path.suffix.lower() in YAML_SUFFIXES:
        try:
            return yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ConfigParseError(path, str(e)) from e

    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigParseError(path, str(e)) from e


def load_config_data(path: Path | str) -> dict[str, Any]:
    """Read and parse a configuration file into a mapping."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise ConfigNotFoundError(path) from e
    except UnicodeDecodeError as e:
        raise ConfigParseError(path, f"not valid UTF-8 text: {e}") from e
    except OSError as e:
        raise ConfigReadError(path, e.strerror or str(e)) from e

    data = parse_config_text(text, path)
    if not isinstance(data, dict):
        raise ConfigParseError(
            path, f"top-level value must be a mapping, got {type(data).__name__}"
        )
    return data


def load_wallet_config(path: Path | str) -> WalletConfigCandidate:
    """Load an unvalidated wallet configuration from a JSON or YAML file.

    Args:
        path: Path to the configuration file

    Returns:
        WalletConfigCandidate with absent fields marked as MISSING

    Raises:
        ConfigNotFoundError: If the file does not exist
        ConfigParseError: If the content is not well-formed JSON/YAML
        ConfigReadError: For any other read failure
    """
    path = Path(path)
    logger.info("Loading wallet configuration from %s", path)
    candidate = WalletConfigCandidate.from_dict(load_config_data(path), source=path)

    if candidate.extra_keys:
        logger.warning(
            "Ignoring unrecognised keys in %s: %s",
            path,
            ", ".join(candidate.extra_keys),
        )
    return candidate
