"""Tests for chain address format checks."""

import pytest
from pycardano import Network

from multisig_deploy.config.address import ADDRESS_FORMATS, get_address_format
from multisig_deploy.config.exceptions import UnknownAddressFormatError

from .test_utils import KEY_HASHES, key_hash_address, script_address, stake_address


@pytest.mark.parametrize(
    "format_name, value, expected",
    [
        ("hex", "0xA1", True),
        ("hex", "0xdeadBEEF", True),
        ("hex", "0x", False),
        ("hex", "A1", False),
        ("hex", "0xG1", False),
        ("evm", "0x" + "a" * 40, True),
        ("evm", "0x" + "a" * 39, False),
        ("evm", "0xA1", False),
        ("cardano", KEY_HASHES[0], True),
        ("cardano", KEY_HASHES[0][:-2], False),
        ("cardano", "addr_test1notanaddress", False),
        ("cardano", "0xA1", False),
    ],
)
def test_is_valid(format_name, value, expected) -> None:
    assert ADDRESS_FORMATS[format_name].is_valid(value) is expected


def test_cardano_accepts_bech32() -> None:
    assert ADDRESS_FORMATS["cardano"].is_valid(key_hash_address(KEY_HASHES[2]))


def test_non_text_is_never_valid() -> None:
    assert not ADDRESS_FORMATS["hex"].is_valid(161)


def test_normalize() -> None:
    assert ADDRESS_FORMATS["hex"].normalize("0xAbC") == "0xabc"
    assert ADDRESS_FORMATS["cardano"].normalize("AB" * 28) == "ab" * 28
    assert ADDRESS_FORMATS["cardano"].normalize("addr_test1bogus") == "addr_test1bogus"


def test_cardano_address_normalizes_to_its_key_hash() -> None:
    bech32 = key_hash_address(KEY_HASHES[0])
    assert ADDRESS_FORMATS["cardano"].normalize(bech32) == KEY_HASHES[0]
    assert ADDRESS_FORMATS["cardano"].normalize(
        key_hash_address(KEY_HASHES[0], Network.MAINNET)
    ) == ADDRESS_FORMATS["cardano"].normalize(KEY_HASHES[0].upper())


def test_cardano_rejects_addresses_without_key_payment_part() -> None:
    assert not ADDRESS_FORMATS["cardano"].is_valid(script_address("44" * 28))
    assert not ADDRESS_FORMATS["cardano"].is_valid(stake_address(KEY_HASHES[0]))


def test_get_address_format() -> None:
    assert get_address_format("EVM") is ADDRESS_FORMATS["evm"]
    assert get_address_format(ADDRESS_FORMATS["hex"]) is ADDRESS_FORMATS["hex"]
    with pytest.raises(UnknownAddressFormatError, match="cardano, evm, hex"):
        get_address_format("bitcoin")
