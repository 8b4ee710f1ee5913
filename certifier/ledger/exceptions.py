from certifier.errors import CertificationError, ErrorKind


class NotReadyError(CertificationError):
    """Raised when stamping inputs or the signing identity are missing."""

    kind = ErrorKind.NOT_READY


class TransactionFailedError(CertificationError):
    """Raised or reported when the ledger transaction does not reach finality."""

    kind = ErrorKind.TRANSACTION_FAILED

    DEFAULT_MESSAGE = (
        "Transaction failed. Make sure the contract is deployed and the package id is set correctly."
    )


class SignerError(Exception):
    """Raised by wallet signer adapters when a submission cannot be started."""
