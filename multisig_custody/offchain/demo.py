"""
Runs the validator on a wallet spend assembled from the command line.

Example: two of three owners sign a spend that pays out one lovelace too little
    python -m multisig_custody.offchain.demo --signers 2 --shortfall 1
"""
import fire

from .. import config
from ..validation import Ed25519Verifier, MeteredVerifier, SystemHost, Validator
from ..onchain.wallet.wallet_util import SpendRequest
from .util import (
    get_signing_key,
    lovelace_output,
    new_wallet_state,
    owner_address,
    owner_public_key,
    sign_spend,
    spending_context,
    wallet_tx_out_ref,
)


def main(
    owners: int = 3,
    threshold: int = 2,
    balance: int = 100_000_000,
    signers: int = 2,
    shortfall: int = 0,
    keys_dir: str = config.KEYS_DIR,
    profile: bool = config.PROFILE,
):
    config.setup_logging()
    owner_skeys = [get_signing_key(f"owner{i}", keys_dir) for i in range(owners)]
    state = new_wallet_state([owner_public_key(s) for s in owner_skeys], threshold)
    # the wallet has received its funds since creation
    state.balance = balance

    tx_out_ref = wallet_tx_out_ref(bytes(range(32)), 0)
    request = SpendRequest(
        signatures=[sign_spend(s, tx_out_ref) for s in owner_skeys[:signers]]
    )
    # pay everything out to the first owner
    outputs = [lovelace_output(owner_address(owner_skeys[0]), balance - shortfall)]
    context = spending_context(tx_out_ref, state, outputs)

    meter = MeteredVerifier(Ed25519Verifier())
    validator = Validator(meter, host=SystemHost(meter) if profile else None)
    result = validator.evaluate(context, state, request)
    print(f"Spend authorized: {result.authorized}")
    if result.reason is not None:
        print(f"Reason: {result.reason.value} ({result.message})")
    return result.authorized


if __name__ == "__main__":
    fire.Fire(main)
