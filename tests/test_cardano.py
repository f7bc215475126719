"""Tests for the Cardano native multisig script deployer."""

import pytest
from pycardano import (
    Address,
    Network,
    ScriptAll,
    ScriptHash,
    ScriptNofK,
    ScriptPubkey,
    VerificationKeyHash,
)

from multisig_deploy.config.validator import validate_or_raise
from multisig_deploy.deployment.cardano import NativeScriptDeployer, member_key_hash

from .test_utils import KEY_HASHES, key_hash_address


class TestNativeScriptDeployer:
    def setup_method(self, method) -> None:
        self.deployer = NativeScriptDeployer(Network.TESTNET)
        self.config = validate_or_raise(
            {"name": "Council", "members": KEY_HASHES, "threshold": 2}, "cardano"
        )

    def test_builds_n_of_k_script(self) -> None:
        wallet = self.deployer.deploy(*self.config.deployment_args())

        assert isinstance(wallet.script, ScriptAll)
        multisig = wallet.script.native_scripts[0]
        assert isinstance(multisig, ScriptNofK)
        assert multisig.n == 2
        assert [s.key_hash for s in multisig.native_scripts] == [
            VerificationKeyHash.from_primitive(pkh) for pkh in KEY_HASHES
        ]

    def test_script_address(self) -> None:
        wallet = self.deployer.deploy(*self.config.deployment_args())

        assert wallet.script_hash == wallet.script.hash()
        assert wallet.script_address.payment_part == wallet.script_hash
        assert wallet.script_address.network == Network.TESTNET
        assert wallet.reference_address is None

    def test_reference_address_is_carried(self) -> None:
        reference = key_hash_address(KEY_HASHES[0])
        wallet = self.deployer.deploy("Council", KEY_HASHES, 1, reference)
        assert wallet.reference_address == reference

    def test_same_members_same_script(self) -> None:
        first = self.deployer.deploy(*self.config.deployment_args())
        second = self.deployer.deploy(*self.config.deployment_args())
        assert first.script_hash == second.script_hash

    def test_threshold_changes_script(self) -> None:
        two = self.deployer.deploy("Council", KEY_HASHES, 2, None)
        three = self.deployer.deploy("Council", KEY_HASHES, 3, None)
        assert two.script_hash != three.script_hash

    def test_from_native_script(self) -> None:
        wallet = self.deployer.deploy(*self.config.deployment_args())

        signers, threshold = NativeScriptDeployer.from_native_script(wallet.script)

        assert signers == wallet.signers
        assert threshold == 2

    def test_from_native_script_rejects_other_shapes(self) -> None:
        script = ScriptPubkey(VerificationKeyHash.from_primitive(KEY_HASHES[0]))
        with pytest.raises(ValueError):
            NativeScriptDeployer.from_native_script(script)


class TestMemberKeyHash:
    def test_hex_key_hash(self) -> None:
        assert member_key_hash(KEY_HASHES[0].upper()) == VerificationKeyHash(
            bytes.fromhex(KEY_HASHES[0])
        )

    def test_bech32_address(self) -> None:
        assert member_key_hash(key_hash_address(KEY_HASHES[1])) == (
            VerificationKeyHash.from_primitive(KEY_HASHES[1])
        )

    def test_script_address_is_not_a_member(self) -> None:
        script_addr = Address(
            ScriptHash(bytes.fromhex("44" * 28)), network=Network.TESTNET
        )
        with pytest.raises(ValueError, match="key-hash payment part"):
            member_key_hash(str(script_addr))
