"""Address format checks for wallet members and references."""

import re
from collections.abc import Callable
from dataclasses import dataclass

from pycardano import Address, VerificationKeyHash
from pycardano.exception import DecodingException, DeserializeException
from pycardano.hash import VERIFICATION_KEY_HASH_SIZE

from .exceptions import UnknownAddressFormatError

HEX_ADDRESS = re.compile(r"0x[0-9a-fA-F]+")
EVM_ADDRESS = re.compile(r"0x[0-9a-fA-F]{40}")
KEY_HASH_HEX = re.compile(rf"[0-9a-fA-F]{{{VERIFICATION_KEY_HASH_SIZE * 2}}}")


@dataclass(frozen=True)
class AddressFormat:
    """A chain address format: validity check plus normalisation for equality."""

    name: str
    check: Callable[[str], bool]
    normalizer: Callable[[str], str] = str

    def is_valid(self, value: object) -> bool:
        return isinstance(value, str) and self.check(value)

    def normalize(self, value: str) -> str:
        return self.normalizer(value)


def cardano_key_hash(value: str) -> str | None:
    """Hex verification key hash a member resolves to, or None.

    Accepts a key hash in hex or a bech32 Shelley address whose payment part
    is a key hash; script, stake and undecodable addresses resolve to None.
    """
    if KEY_HASH_HEX.fullmatch(value):
        return value.lower()
    try:
        payment_part = Address.from_primitive(value).payment_part
    except (DecodingException, DeserializeException, TypeError, ValueError):
        return None
    if not isinstance(payment_part, VerificationKeyHash):
        return None
    return payment_part.payload.hex()


def is_cardano_address(value: str) -> bool:
    return cardano_key_hash(value) is not None


def normalize_cardano_address(value: str) -> str:
    # the same key as hex hash or as bech32 address is one member
    key_hash = cardano_key_hash(value)
    return key_hash if key_hash is not None else value


ADDRESS_FORMATS: dict[str, AddressFormat] = {
    "hex": AddressFormat("hex", lambda v: bool(HEX_ADDRESS.fullmatch(v)), str.lower),
    "evm": AddressFormat("evm", lambda v: bool(EVM_ADDRESS.fullmatch(v)), str.lower),
    "cardano": AddressFormat(
        "cardano", is_cardano_address, normalize_cardano_address
    ),
}

DEFAULT_ADDRESS_FORMAT = "hex"


def get_address_format(name: str | AddressFormat) -> AddressFormat:
    """Look up an address format by name."""
    if isinstance(name, AddressFormat):
        return name
    try:
        return ADDRESS_FORMATS[name.lower()]
    except KeyError as e:
        raise UnknownAddressFormatError(name, sorted(ADDRESS_FORMATS)) from e
