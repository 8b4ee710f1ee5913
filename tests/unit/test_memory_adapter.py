import pytest

from certifier.storage.exceptions import PayloadTooLargeError, StoreRejectedError
from certifier.storage.memory_adapter import InMemoryBlobStore


class TestInMemoryBlobStore:
    def test_round_trips_bytes(self) -> None:
        store = InMemoryBlobStore()

        stored = store.store(b"content", size=7, content_type="text/plain")

        assert store.fetch(stored.blob_id) == b"content"

    def test_same_bytes_map_to_same_identifier(self) -> None:
        store = InMemoryBlobStore()

        first = store.store(b"content", size=7, content_type="text/plain")
        second = store.store(b"content", size=7, content_type="image/png")

        assert first.blob_id == second.blob_id

    def test_identifier_is_url_safe(self) -> None:
        stored = InMemoryBlobStore().store(b"\xff" * 32, size=32, content_type="x/y")
        assert "+" not in stored.blob_id
        assert "/" not in stored.blob_id
        assert "=" not in stored.blob_id

    def test_enforces_ceiling(self) -> None:
        store = InMemoryBlobStore(max_bytes=4)
        with pytest.raises(PayloadTooLargeError):
            store.store(b"12345", size=5, content_type="text/plain")

    def test_ceiling_applies_to_actual_bytes(self) -> None:
        store = InMemoryBlobStore(max_bytes=4)

        with pytest.raises(PayloadTooLargeError) as exc_info:
            store.store(b"12345", size=1, content_type="text/plain")

        assert exc_info.value.size == 5

    def test_fetch_unknown_blob_raises(self) -> None:
        with pytest.raises(StoreRejectedError, match="not found"):
            InMemoryBlobStore().fetch("missing")
