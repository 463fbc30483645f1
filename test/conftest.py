from hashlib import sha256

import pytest

from multisig_custody.offchain.util import wallet_tx_out_ref

OWNER_A = b"A" * 32
OWNER_B = b"B" * 32
OWNER_C = b"C" * 32


def fake_sign(pub_key: bytes, message: bytes) -> bytes:
    return sha256(pub_key + message).digest()


class FakeVerifier:
    """
    Accepts exactly the signatures produced by fake_sign and counts its calls
    """

    def __init__(self):
        self.calls = 0

    def verify_signature(self, pub_key: bytes, message: bytes, signature: bytes) -> bool:
        self.calls += 1
        return signature == fake_sign(pub_key, message)


@pytest.fixture
def verifier():
    return FakeVerifier()


@pytest.fixture
def sign():
    return fake_sign


@pytest.fixture
def owners():
    return [OWNER_A, OWNER_B, OWNER_C]


@pytest.fixture
def tx_out_ref():
    return wallet_tx_out_ref(bytes.fromhex("ab" * 32), 1)
