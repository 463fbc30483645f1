"""
The multisig custody wallet contract.

Funds locked at this contract are controlled by a set of owners.
Spending a wallet output requires signatures of at least threshold distinct owners
over the spend message of that output (sha256 of the CBOR of its output reference).

Outputs of this contract may go to:
- any address, as long as the lovelace of all outputs adds up to the balance in the datum

The next state of the wallet (if any) is an ordinary output of the transaction
and is not checked by this contract.
"""

from multisig_custody.onchain.wallet.wallet_util import *


def validator(
    state: WalletState,
    request: SpendRequest,
    context: ScriptContext,
) -> None:
    """
    Multisig wallet validator. Ensures enough owners signed and the outputs account for the balance.
    """
    purpose = get_spending_purpose(context)
    assert well_formed_wallet_state(state), "Malformed wallet state"
    message = spend_message(purpose.tx_out_ref)
    signature_count = count_owner_signatures(
        state.owners, request.signatures, message
    )
    assert signature_count >= state.threshold, "Insufficient signatures"
    assert check_balance(context.tx_info.outputs, state.balance), "Balance mismatch"
