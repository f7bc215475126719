"""Cardano native multisig script deployer."""

import logging
from dataclasses import dataclass

from pycardano import (
    Address,
    NativeScript,
    Network,
    ScriptAll,
    ScriptHash,
    ScriptNofK,
    ScriptPubkey,
    VerificationKeyHash,
)

from ..config.address import KEY_HASH_HEX

logger = logging.getLogger(__name__)


@dataclass
class NativeScriptWallet:
    """Multisig wallet derived from a validated configuration."""

    name: str
    script: NativeScript
    script_hash: ScriptHash
    script_address: Address
    threshold: int
    signers: list[VerificationKeyHash]
    reference_address: str | None = None


def member_key_hash(member: str) -> VerificationKeyHash:
    """Resolve a member to its verification key hash.

    Members are either key hashes in hex or bech32 addresses whose payment
    part is a key hash.
    """
    if KEY_HASH_HEX.fullmatch(member):
        return VerificationKeyHash.from_primitive(member)

    payment_part = Address.from_primitive(member).payment_part
    if not isinstance(payment_part, VerificationKeyHash):
        raise ValueError(
            f"Member {member} has no key-hash payment part; "
            "multisig members must be key holders"
        )
    return payment_part


class NativeScriptDeployer:
    """Builds the native script for a multisig wallet.

    The script is ``ScriptAll([ScriptNofK(threshold, members)])``; the wallet
    address is the enterprise script address of its hash. Nothing is queried
    or submitted, the result is ready to be funded or referenced.
    """

    def __init__(self, network: Network = Network.TESTNET) -> None:
        self.network = network

    def deploy(
        self,
        name: str,
        members: list[str],
        threshold: int,
        address: str | None = None,
    ) -> NativeScriptWallet:
        signers = [member_key_hash(member) for member in members]
        multisig = ScriptNofK(threshold, [ScriptPubkey(pkh) for pkh in signers])
        script = ScriptAll([multisig])
        script_hash = script.hash()
        script_address = Address(payment_part=script_hash, network=self.network)

        logger.info(
            "Built %d-of-%d native script for '%s' at %s",
            threshold,
            len(signers),
            name,
            script_address,
        )
        return NativeScriptWallet(
            name=name,
            script=script,
            script_hash=script_hash,
            script_address=script_address,
            threshold=threshold,
            signers=signers,
            reference_address=address,
        )

    @staticmethod
    def from_native_script(
        script: NativeScript,
    ) -> tuple[list[VerificationKeyHash], int]:
        """Extract (signers, threshold) from a multisig native script."""
        if isinstance(script, ScriptAll):
            for inner_script in script.native_scripts:
                if isinstance(inner_script, ScriptNofK):
                    script = inner_script
                    break

        if not isinstance(script, ScriptNofK):
            raise ValueError("Unsupported script structure")

        signers = [
            pub_script.key_hash
            for pub_script in script.native_scripts
            if isinstance(pub_script, ScriptPubkey)
        ]
        return signers, script.n
