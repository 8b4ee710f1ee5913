from certifier.storage.base import BaseBlobStore
from certifier.storage.factory import BlobStoreFactory
from certifier.storage.identifier import extract_blob_id
from certifier.storage.models import StoredBlob
from certifier.storage.policy import MAX_UPLOAD_BYTES, upload_timeout_seconds

__all__ = [
    "MAX_UPLOAD_BYTES",
    "BaseBlobStore",
    "BlobStoreFactory",
    "StoredBlob",
    "extract_blob_id",
    "upload_timeout_seconds",
]
