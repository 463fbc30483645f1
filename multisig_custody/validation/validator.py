import logging
from contextlib import ExitStack
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from opshin.prelude import ScriptContext, Spending

from .. import config
from ..onchain.util import spend_message
from ..onchain.wallet.wallet_util import (
    SpendRequest,
    WalletState,
    check_balance,
    well_formed_wallet_state,
)
from .host import HostCounters, SignatureVerifier
from .instrumentation import profiled, traced
from .quorum import count_valid_signatures

_LOGGER = logging.getLogger(__name__)


class RejectionReason(Enum):
    MALFORMED_STATE = "Malformed wallet state"
    NOT_A_SPEND = "Not spending a wallet output"
    INSUFFICIENT_SIGNATURES = "Insufficient signatures"
    BALANCE_MISMATCH = "Balance mismatch"


@dataclass(frozen=True)
class ValidationResult:
    authorized: bool
    reason: Optional[RejectionReason] = None
    message: str = ""


def _reject(reason: RejectionReason, message: str) -> ValidationResult:
    _LOGGER.info(f"Rejected spend: {reason.value} ({message})")
    return ValidationResult(False, reason, message)


class Validator:
    """
    Decides whether a spend from a multisig wallet is authorized.

    The signature oracle and the host counters are handed in on construction,
    so the decision depends on nothing but the arguments of the call.
    A quorum failure rejects the spend without looking at the outputs.
    """

    def __init__(
        self,
        verifier: SignatureVerifier,
        host: Optional[HostCounters] = None,
        trace: bool = config.TRACE,
    ):
        self.verifier = verifier
        self.host = host
        self.trace = trace

    def _check(
        self,
        context: ScriptContext,
        state: WalletState,
        request: SpendRequest,
    ) -> ValidationResult:
        if not well_formed_wallet_state(state):
            return _reject(
                RejectionReason.MALFORMED_STATE,
                f"threshold {state.threshold} with {len(state.owners)} owners",
            )
        purpose = context.purpose
        if not isinstance(purpose, Spending):
            return _reject(
                RejectionReason.NOT_A_SPEND, type(purpose).__name__
            )
        message = spend_message(purpose.tx_out_ref)

        def verify_signature(pub_key: bytes, signature: bytes) -> bool:
            return self.verifier.verify_signature(pub_key, message, signature)

        signature_count = count_valid_signatures(
            state.owners, request.signatures, verify_signature
        )
        if signature_count < state.threshold:
            return _reject(
                RejectionReason.INSUFFICIENT_SIGNATURES,
                f"{signature_count} of {state.threshold} required signatures",
            )
        if not check_balance(context.tx_info.outputs, state.balance):
            return _reject(
                RejectionReason.BALANCE_MISMATCH,
                f"outputs do not add up to {state.balance}",
            )
        _LOGGER.debug(f"Authorized spend with {signature_count} signatures")
        return ValidationResult(True)

    def evaluate(
        self,
        context: ScriptContext,
        state: WalletState,
        request: SpendRequest,
    ) -> ValidationResult:
        """
        Decide on the spend and report why it was rejected, if it was
        """
        with ExitStack() as stack:
            if self.trace:
                stack.enter_context(traced("validate"))
            if self.host is not None:
                stack.enter_context(profiled(self.host, "validate"))
            return self._check(context, state, request)

    def validate(
        self,
        context: ScriptContext,
        state: WalletState,
        request: SpendRequest,
    ) -> bool:
        return self.evaluate(context, state, request).authorized
