from typing import Any

from certifier.errors import CertificationError, ErrorKind
from certifier.storage.policy import MIB


class PayloadTooLargeError(CertificationError):
    """Raised before transmission when the payload exceeds the upload ceiling."""

    kind = ErrorKind.PAYLOAD_TOO_LARGE

    def __init__(self, size: int, max_bytes: int) -> None:
        super().__init__(
            f"File size {size / MIB:.2f} MiB ({size} bytes) exceeds maximum "
            f"{max_bytes / MIB:.0f} MiB"
        )
        self.size = size
        self.max_bytes = max_bytes


class UploadTimeoutError(CertificationError):
    """Raised when the upload exceeds its size-scaled time allowance."""

    kind = ErrorKind.UPLOAD_TIMEOUT

    def __init__(self, size: int, timeout_seconds: float, elapsed_seconds: float) -> None:
        super().__init__(
            f"Upload timeout after {elapsed_seconds:.1f}s (limit {timeout_seconds:.1f}s) "
            f"for a {size / MIB:.2f} MiB ({size} bytes) file. "
            "Please try again or check your connection."
        )
        self.size = size
        self.timeout_seconds = timeout_seconds
        self.elapsed_seconds = elapsed_seconds


class StoreRejectedError(CertificationError):
    """Raised when the blob store answers with a non-success status."""

    kind = ErrorKind.STORE_REJECTED

    def __init__(self, status_code: int, body: str = "") -> None:
        message = f"Upload failed: store returned status {status_code}"
        if body:
            message = f"{message}. {body}"
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class InvalidStoreResponseError(CertificationError):
    """Raised when a success response body is not valid JSON."""

    kind = ErrorKind.INVALID_STORE_RESPONSE

    def __init__(self, body: str) -> None:
        super().__init__(f"Invalid JSON response: {body}")
        self.body = body


class IdentifierMissingError(CertificationError):
    """Raised when no known response shape carries a blob identifier."""

    kind = ErrorKind.IDENTIFIER_MISSING

    def __init__(self, response: Any) -> None:
        super().__init__(f"Blob ID not found in response. Response structure: {response!r}")
        self.response = response


class NetworkUnavailableError(CertificationError):
    """Raised on transport failures other than the upload timeout."""

    kind = ErrorKind.NETWORK_UNAVAILABLE
