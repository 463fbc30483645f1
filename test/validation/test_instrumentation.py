import logging
import threading

import pytest
from pycardano import PaymentSigningKey, PaymentVerificationKey

from multisig_custody.offchain.util import lovelace_output, spending_context, wallet_address
from multisig_custody.onchain.util import spend_message
from multisig_custody.onchain.wallet.wallet_util import SpendRequest, WalletState
from multisig_custody.validation.host import Ed25519Verifier, MeteredVerifier, SystemHost
from multisig_custody.validation.instrumentation import profiled, traced
from multisig_custody.validation.validator import Validator


class TickingHost:
    """Every sample advances the clock by one second and the gas by ten"""

    def __init__(self):
        self.time = 0.0
        self.gas = 0

    def current_time(self) -> float:
        self.time += 1.0
        return self.time

    def gas_used(self) -> int:
        self.gas += 10
        return self.gas


def test_profiled_measures_difference():
    host = TickingHost()
    with profiled(host, "work") as profile:
        assert profile.elapsed is None
    assert profile.label == "work"
    assert profile.elapsed == 1.0
    assert profile.gas == 10


def test_profiled_records_on_error():
    host = TickingHost()
    with pytest.raises(KeyError):
        with profiled(host, "failing") as profile:
            raise KeyError("boom")
    assert profile.gas == 10


def test_traced_logs_around_call(caplog):
    caplog.set_level(
        logging.DEBUG, logger="multisig_custody.validation.instrumentation"
    )
    with traced("validate"):
        logging.getLogger("multisig_custody.validation.instrumentation").debug("inside")
    assert [r.getMessage() for r in caplog.records] == [
        "validate: start",
        "inside",
        "validate: end",
    ]


def test_ed25519_verifier():
    skey = PaymentSigningKey.generate()
    pub_key = PaymentVerificationKey.from_signing_key(skey).payload
    signature = skey.sign(b"message")
    verifier = Ed25519Verifier()
    assert verifier.verify_signature(pub_key, b"message", signature)
    assert not verifier.verify_signature(pub_key, b"other message", signature)
    other_key = PaymentVerificationKey.from_signing_key(
        PaymentSigningKey.generate()
    ).payload
    assert not verifier.verify_signature(other_key, b"message", signature)
    assert not verifier.verify_signature(pub_key, b"message", signature[:10])
    assert not verifier.verify_signature(b"short", b"message", signature)


def test_system_host_counts_signature_checks():
    meter = MeteredVerifier(Ed25519Verifier())
    host = SystemHost(meter)
    with profiled(host, "checks") as profile:
        meter.verify_signature(b"\x00" * 32, b"", b"\x00" * 64)
        meter.verify_signature(b"\x00" * 32, b"", b"\x00" * 64)
    assert profile.gas == 2
    assert profile.elapsed >= 0


def test_validator_is_profiled(owners, tx_out_ref, sign, verifier, caplog):
    caplog.set_level(logging.INFO, logger="multisig_custody.validation.instrumentation")
    state = WalletState(owners, 1, 7)
    context = spending_context(
        tx_out_ref, state, [lovelace_output(wallet_address(), 7)]
    )
    request = SpendRequest([sign(owners[1], spend_message(tx_out_ref))])
    host = TickingHost()
    assert Validator(verifier, host=host).validate(context, state, request)
    assert "validate: took 1.000000s and 10 gas" in [
        r.getMessage() for r in caplog.records
    ]


def test_shared_meter_counts_every_check():
    meter = MeteredVerifier(Ed25519Verifier())

    def check_many():
        for _ in range(200):
            meter.verify_signature(b"\x00" * 32, b"", b"\x00" * 64)

    threads = [threading.Thread(target=check_many) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert meter.calls == 1600
