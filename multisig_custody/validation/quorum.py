from typing import Callable, Dict, List

SignatureOracle = Callable[[bytes, bytes], bool]


def count_valid_signatures(
    owners: List[bytes],
    signatures: List[bytes],
    verify_signature: SignatureOracle,
) -> int:
    """
    Count the signatures that are valid for some owner.

    Signatures are matched against owners regardless of order, but every owner
    is consumed by its first matching signature and can not fill a second slot.
    Matching is greedy: for an oracle that accepts one signature under several
    owners the result is a lower bound on the best distinct assignment.
    With ed25519 a signature is valid for at most one key, so the count is exact.
    """
    consumed: Dict[int, bool] = {index: False for index in range(len(owners))}
    count = 0
    for signature in signatures:
        for index, owner in enumerate(owners):
            if consumed[index]:
                continue
            if verify_signature(owner, signature):
                consumed[index] = True
                count += 1
                break
    return count


def verify_quorum(
    owners: List[bytes],
    signatures: List[bytes],
    threshold: int,
    verify_signature: SignatureOracle,
) -> bool:
    return count_valid_signatures(owners, signatures, verify_signature) >= threshold
