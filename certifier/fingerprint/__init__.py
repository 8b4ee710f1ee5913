from certifier.fingerprint.exceptions import HashingError
from certifier.fingerprint.fingerprint import FingerprintEngine, compute_digest

__all__ = ["FingerprintEngine", "HashingError", "compute_digest"]
