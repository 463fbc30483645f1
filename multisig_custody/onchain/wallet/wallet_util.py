"""
Utils for the multisig wallet contract. This is not a contract.
"""
from multisig_custody.onchain.util import *

PUB_KEY_LENGTH = 32
SIGNATURE_LENGTH = 64


@dataclass
class WalletState(PlutusData):
    """
    Datum of a multisig custody wallet.

    Owners are ed25519 public keys, of which at least threshold must sign a spend.
    The balance is the lovelace the outputs of a spending transaction must add up to.
    """

    CONSTR_ID = 0
    owners: List[bytes]
    threshold: int
    balance: int


@dataclass
class SpendRequest(PlutusData):
    """
    Redeemer for the wallet contract, carrying the signatures of the owners
    over the spend message of the wallet output.
    """

    CONSTR_ID = 0
    signatures: List[bytes]


def check_balance(outputs: List[TxOut], expected: int) -> bool:
    """
    Returns whether the lovelace of all outputs adds up to exactly the expected amount
    """
    total = 0
    for output in outputs:
        total += lovelace_in_output(output)
    return total == expected


def well_formed_wallet_state(state: WalletState) -> bool:
    return (
        0 < state.threshold
        and state.threshold <= len(state.owners)
        and all_unique(state.owners)
        and all([len(owner) == PUB_KEY_LENGTH for owner in state.owners])
    )


def count_owner_signatures(
    owners: List[bytes], signatures: List[bytes], message: bytes
) -> int:
    """
    Count the signatures over message that are valid for some owner.
    Every owner can be matched by at most one signature.
    """
    consumed: List[int] = []
    count = 0
    for signature in signatures:
        # the builtin fails the script on malformed signatures, these just do not count
        if len(signature) == SIGNATURE_LENGTH:
            matched = False
            index = 0
            for owner in owners:
                if not matched and not index in consumed:
                    if verify_ed25519_signature(owner, message, signature):
                        consumed = consumed + [index]
                        matched = True
                index += 1
            if matched:
                count += 1
    return count
