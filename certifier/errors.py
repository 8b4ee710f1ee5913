"""Tagged error kinds shared by every stage of the certification workflow."""

from enum import Enum
from typing import ClassVar


class ErrorKind(str, Enum):
    HASHING_FAILURE = "HashingFailure"
    FILE_UNREADABLE = "FileUnreadable"
    PAYLOAD_TOO_LARGE = "PayloadTooLarge"
    UPLOAD_TIMEOUT = "UploadTimeout"
    STORE_REJECTED = "StoreRejected"
    INVALID_STORE_RESPONSE = "InvalidStoreResponse"
    IDENTIFIER_MISSING = "IdentifierMissing"
    NETWORK_UNAVAILABLE = "NetworkUnavailable"
    NOT_READY = "NotReady"
    TRANSACTION_FAILED = "TransactionFailed"
    VALIDATION = "Validation"
    UNEXPECTED = "Unexpected"


class CertificationError(Exception):
    """Base exception for all certification workflow failures.

    Subclasses set ``kind`` so callers branch on the tag instead of
    inspecting messages.
    """

    kind: ClassVar[ErrorKind]
