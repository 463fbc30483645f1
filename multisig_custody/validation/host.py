"""
Collaborators the validator consumes from its host: a signature oracle
and the time and gas counters sampled by the profiler.
"""
import threading
import time
from typing import Protocol

from nacl.exceptions import BadSignatureError
from nacl.signing import VerifyKey


class SignatureVerifier(Protocol):
    def verify_signature(self, pub_key: bytes, message: bytes, signature: bytes) -> bool:
        ...


class HostCounters(Protocol):
    def current_time(self) -> float:
        ...

    def gas_used(self) -> int:
        ...


class Ed25519Verifier:
    """
    Checks ed25519 signatures as produced by pycardano signing keys.
    Keys or signatures of the wrong length are treated as invalid.
    """

    def verify_signature(self, pub_key: bytes, message: bytes, signature: bytes) -> bool:
        try:
            VerifyKey(pub_key).verify(message, signature)
        except (BadSignatureError, ValueError, TypeError):
            return False
        return True


class MeteredVerifier:
    """
    Wraps a verifier and counts how often it is consulted.
    A meter shared between threads counts the checks of all of them.
    """

    def __init__(self, verifier: SignatureVerifier):
        self.verifier = verifier
        self.calls = 0
        self._lock = threading.Lock()

    def verify_signature(self, pub_key: bytes, message: bytes, signature: bytes) -> bool:
        with self._lock:
            self.calls += 1
        return self.verifier.verify_signature(pub_key, message, signature)


class SystemHost:
    """
    Samples a monotonic clock and uses the number of signature checks as gas,
    since these dominate the cost of the contract.
    Give every thread its own meter to keep the gas of concurrent validations apart.
    """

    def __init__(self, meter: MeteredVerifier):
        self.meter = meter

    def current_time(self) -> float:
        return time.monotonic()

    def gas_used(self) -> int:
        return self.meter.calls
