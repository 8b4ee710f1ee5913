from certifier.config.settings import Settings
from certifier.storage.base import BaseBlobStore
from certifier.storage.memory_adapter import InMemoryBlobStore
from certifier.storage.walrus_client_adapter import WalrusClientAdapter


class BlobStoreFactory:
    """Creates the configured blob store adapter."""

    SUPPORTED = ("walrus", "memory")

    @classmethod
    def create(cls, settings: Settings) -> BaseBlobStore:
        name = settings.blob_store.lower()
        if name == "memory":
            return InMemoryBlobStore()
        if name == "walrus":
            return WalrusClientAdapter(
                publisher_url=settings.walrus_publisher_url,
                aggregator_url=settings.walrus_aggregator_url,
                base_timeout_seconds=settings.upload_base_timeout_seconds,
                timeout_per_mib_seconds=settings.upload_timeout_per_mib_seconds,
                download_timeout_seconds=settings.download_timeout_seconds,
            )
        raise ValueError(
            f"Unknown blob store '{name}'. Choose from: {list(cls.SUPPORTED)}"
        )
