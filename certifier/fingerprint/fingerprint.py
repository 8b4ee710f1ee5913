import hashlib

from certifier.files.exceptions import FileReadError
from certifier.files.models import SelectedFile
from certifier.fingerprint.exceptions import HashingError
from certifier.logging.logger import Log


def compute_digest(data: bytes) -> str:
    """Return the lowercase 64-character SHA-256 hex digest of ``data``."""
    return hashlib.sha256(data).hexdigest()


class FingerprintEngine:
    """Computes content fingerprints for selected files. Stateless."""

    def fingerprint(self, file: SelectedFile) -> str:
        """Read the whole payload and return its digest.

        Raises:
            HashingError: if the payload source cannot be read.
        """
        try:
            data = file.read_bytes()
        except (FileReadError, OSError) as exc:
            raise HashingError(f"Failed to calculate file hash for {file.name}: {exc}") from exc
        digest = compute_digest(data)
        Log.info(f"Computed SHA-256 for {file.name} ({len(data)} bytes): {digest}")
        return digest
