from pathlib import Path
from typing import List

from opshin.ledger.api_v2 import (
    Address,
    LowerBoundPOSIXTime,
    NegInfPOSIXTime,
    NoOutputDatum,
    NoScriptHash,
    NoStakingCredential,
    PosInfPOSIXTime,
    POSIXTimeRange,
    PubKeyCredential,
    ScriptContext,
    ScriptCredential,
    Spending,
    TrueData,
    TxId,
    TxInfo,
    TxInInfo,
    TxOut,
    TxOutRef,
    UpperBoundPOSIXTime,
)
from pycardano import PaymentSigningKey, PaymentVerificationKey

from ..onchain.util import spend_message
from ..onchain.wallet.wallet_util import PUB_KEY_LENGTH, WalletState


# placeholder until the contract is built, the validator does not look at its own address
WALLET_SCRIPT_HASH = bytes(28)


def get_signing_key(name: str, keys_dir: Path) -> PaymentSigningKey:
    """
    Load the signing key of the named owner, creating it on first use
    """
    keys_dir = Path(keys_dir)
    skey_path = keys_dir / f"{name}.skey"
    if skey_path.exists():
        return PaymentSigningKey.load(str(skey_path))
    keys_dir.mkdir(parents=True, exist_ok=True)
    skey = PaymentSigningKey.generate()
    skey.save(str(skey_path))
    PaymentVerificationKey.from_signing_key(skey).save(str(keys_dir / f"{name}.vkey"))
    return skey


def owner_public_key(skey: PaymentSigningKey) -> bytes:
    return PaymentVerificationKey.from_signing_key(skey).payload


def owner_address(skey: PaymentSigningKey) -> Address:
    vkey_hash = PaymentVerificationKey.from_signing_key(skey).hash()
    return Address(PubKeyCredential(vkey_hash.payload), NoStakingCredential())


def sign_spend(skey: PaymentSigningKey, tx_out_ref: TxOutRef) -> bytes:
    return skey.sign(spend_message(tx_out_ref))


def new_wallet_state(owners: List[bytes], threshold: int) -> WalletState:
    """
    State of a freshly created wallet, which holds no funds yet
    """
    if len(set(owners)) != len(owners):
        raise ValueError("Wallet owners must be unique")
    if any(len(owner) != PUB_KEY_LENGTH for owner in owners):
        raise ValueError(f"Wallet owners must be {PUB_KEY_LENGTH} byte public keys")
    if not 0 < threshold <= len(owners):
        raise ValueError(
            f"Threshold must be between 1 and {len(owners)}, got {threshold}"
        )
    return WalletState(owners=list(owners), threshold=threshold, balance=0)


def wallet_address(script_hash: bytes = WALLET_SCRIPT_HASH) -> Address:
    return Address(ScriptCredential(script_hash), NoStakingCredential())


def lovelace_output(address: Address, amount: int) -> TxOut:
    return TxOut(
        address=address,
        value={b"": {b"": amount}},
        datum=NoOutputDatum(),
        reference_script=NoScriptHash(),
    )


def wallet_tx_out_ref(tx_id: bytes, index: int = 0) -> TxOutRef:
    return TxOutRef(TxId(tx_id), index)


def spending_context(
    tx_out_ref: TxOutRef,
    state: WalletState,
    outputs: List[TxOut],
    tx_id: bytes = bytes(32),
) -> ScriptContext:
    """
    Script context of a transaction spending the wallet output at tx_out_ref
    into the given outputs
    """
    wallet_input = TxInInfo(
        out_ref=tx_out_ref,
        resolved=lovelace_output(wallet_address(), state.balance),
    )
    tx_info = TxInfo(
        inputs=[wallet_input],
        reference_inputs=[],
        outputs=outputs,
        fee={b"": {b"": 0}},
        mint={},
        dcert=[],
        wdrl={},
        valid_range=POSIXTimeRange(
            LowerBoundPOSIXTime(NegInfPOSIXTime(), TrueData()),
            UpperBoundPOSIXTime(PosInfPOSIXTime(), TrueData()),
        ),
        signatories=[],
        redeemers={},
        data={},
        id=TxId(tx_id),
    )
    return ScriptContext(tx_info=tx_info, purpose=Spending(tx_out_ref))
