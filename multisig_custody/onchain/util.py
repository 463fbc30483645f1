from hashlib import sha256

from opshin.prelude import *
from opshin.std.builtins import *

EMPTY_LOVELACE_DICT: Dict[bytes, int] = {b"": 0}


def get_spending_purpose(context: ScriptContext) -> Spending:
    purpose = context.purpose
    assert isinstance(purpose, Spending)
    return purpose


def lovelace_in_output(output: TxOut) -> int:
    """
    Returns the amount of lovelace held by the output
    """
    return output.value.get(b"", EMPTY_LOVELACE_DICT).get(b"", 0)


def all_unique(listy: List[bytes]) -> bool:
    """
    Returns whether no element occurs twice in listy
    Note: The cost of this is O(n^2), owner lists are expected to be small
    """
    seen: List[bytes] = []
    unique = True
    for el in listy:
        if el in seen:
            unique = False
        seen = seen + [el]
    return unique


def spend_message(tx_out_ref: TxOutRef) -> bytes:
    """
    The message owners sign to authorize spending the given output
    """
    return sha256(tx_out_ref.to_cbor()).digest()
