"""In-memory blob store adapter.

No network calls. Content-addressed the way a real blob store is, so the same
bytes always map to the same identifier. Useful for local development and tests.
"""

import base64
import hashlib

from certifier.storage.base import BaseBlobStore
from certifier.storage.exceptions import PayloadTooLargeError, StoreRejectedError
from certifier.storage.models import StoredBlob
from certifier.storage.policy import MAX_UPLOAD_BYTES


class InMemoryBlobStore(BaseBlobStore):
    def __init__(self, max_bytes: int = MAX_UPLOAD_BYTES) -> None:
        self._max_bytes = max_bytes
        self._blobs: dict[str, bytes] = {}

    def store(self, data: bytes, *, size: int, content_type: str) -> StoredBlob:
        _ = content_type
        size = max(size, len(data))
        if size > self._max_bytes:
            raise PayloadTooLargeError(size, self._max_bytes)
        blob_id = base64.urlsafe_b64encode(hashlib.sha256(data).digest()).decode().rstrip("=")
        self._blobs[blob_id] = data
        return StoredBlob(blob_id=blob_id, size_bytes=size)

    def fetch(self, blob_id: str) -> bytes:
        if blob_id not in self._blobs:
            raise StoreRejectedError(404, f"Blob {blob_id} not found")
        return self._blobs[blob_id]
