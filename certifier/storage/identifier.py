"""Tolerant blob identifier extraction from loosely structured store replies."""

from typing import Any

from certifier.storage.exceptions import IdentifierMissingError

# Probed in order; first non-empty match wins.
BLOB_ID_PATHS: tuple[tuple[str, ...], ...] = (
    ("newlyCreated", "blobObject", "blobId"),
    ("blobId",),
    ("id",),
    ("blob", "id"),
    ("alreadyCertified", "blobId"),
)


def probe(payload: Any, path: tuple[str, ...]) -> str | None:
    """Follow ``path`` through nested objects, returning a usable identifier or None."""
    node = payload
    for key in path:
        if not isinstance(node, dict):
            return None
        node = node.get(key)
    if isinstance(node, bool):
        return None
    if isinstance(node, int):
        return str(node)
    if isinstance(node, str) and node:
        return node
    return None


def extract_blob_id(payload: Any) -> str:
    """Return the first identifier found along BLOB_ID_PATHS.

    Raises:
        IdentifierMissingError: carrying the full payload when nothing matches.
    """
    for path in BLOB_ID_PATHS:
        blob_id = probe(payload, path)
        if blob_id is not None:
            return blob_id
    raise IdentifierMissingError(payload)
