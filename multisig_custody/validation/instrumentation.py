"""
Scoped trace and profile wrappers around a single validator call.
Neither of them takes part in the decision.
"""
import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Optional

from .host import HostCounters

_LOGGER = logging.getLogger(__name__)


@dataclass
class Profile:
    label: str
    elapsed: Optional[float] = None
    gas: Optional[int] = None


@contextmanager
def traced(label: str) -> Iterator[None]:
    _LOGGER.debug(f"{label}: start")
    try:
        yield
    finally:
        _LOGGER.debug(f"{label}: end")


@contextmanager
def profiled(host: HostCounters, label: str) -> Iterator[Profile]:
    """
    Samples the host counters before and after the wrapped call.
    The yielded profile is filled in once the block is left.
    """
    profile = Profile(label)
    start_time = host.current_time()
    start_gas = host.gas_used()
    try:
        yield profile
    finally:
        profile.elapsed = host.current_time() - start_time
        profile.gas = host.gas_used() - start_gas
        _LOGGER.info(
            f"{label}: took {profile.elapsed:.6f}s and {profile.gas} gas"
        )
