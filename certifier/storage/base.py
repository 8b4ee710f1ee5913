from abc import ABC, abstractmethod

from certifier.storage.models import StoredBlob


class BaseBlobStore(ABC):
    """Contract for all content-addressable blob store adapters."""

    @abstractmethod
    def store(self, data: bytes, *, size: int, content_type: str) -> StoredBlob:
        """Upload ``data`` in a single bounded-time attempt.

        Args:
            data: Raw file content.
            size: Declared payload size in bytes. The larger of this and
                ``len(data)`` is checked against the ceiling before any
                transmission.
            content_type: MIME type sent with the payload.

        Returns:
            StoredBlob carrying the store-assigned identifier.

        Raises:
            CertificationError: PayloadTooLargeError, UploadTimeoutError,
                StoreRejectedError, InvalidStoreResponseError,
                IdentifierMissingError or NetworkUnavailableError.
        """

    @abstractmethod
    def fetch(self, blob_id: str) -> bytes:
        """Return the raw bytes stored under ``blob_id``."""

    def close(self) -> None:
        """Release network resources held by the adapter."""
