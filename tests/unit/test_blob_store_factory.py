import pytest

from certifier.config.settings import Settings
from certifier.storage.factory import BlobStoreFactory
from certifier.storage.memory_adapter import InMemoryBlobStore
from certifier.storage.walrus_client_adapter import WalrusClientAdapter


class TestBlobStoreFactory:
    def test_creates_walrus_adapter(self) -> None:
        store = BlobStoreFactory.create(Settings(_env_file=None, blob_store="walrus"))
        try:
            assert isinstance(store, WalrusClientAdapter)
        finally:
            store.close()

    def test_creates_memory_adapter(self) -> None:
        store = BlobStoreFactory.create(Settings(_env_file=None, blob_store="memory"))
        assert isinstance(store, InMemoryBlobStore)

    def test_is_case_insensitive(self) -> None:
        store = BlobStoreFactory.create(Settings(_env_file=None, blob_store="Memory"))
        assert isinstance(store, InMemoryBlobStore)

    def test_raises_for_unknown_store(self) -> None:
        with pytest.raises(ValueError, match="Unknown blob store"):
            BlobStoreFactory.create(Settings(_env_file=None, blob_store="s3"))
