from .host import Ed25519Verifier, HostCounters, MeteredVerifier, SignatureVerifier, SystemHost
from .instrumentation import Profile, profiled, traced
from .quorum import count_valid_signatures, verify_quorum
from .validator import RejectionReason, ValidationResult, Validator
