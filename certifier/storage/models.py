from dataclasses import dataclass


@dataclass(frozen=True)
class StoredBlob:
    """Result of one successful store call."""

    blob_id: str
    size_bytes: int
    elapsed_seconds: float = 0.0
