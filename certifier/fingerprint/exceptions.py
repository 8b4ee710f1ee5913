from certifier.errors import CertificationError, ErrorKind


class HashingError(CertificationError):
    """Raised when the payload cannot be read for fingerprinting."""

    kind = ErrorKind.HASHING_FAILURE
