import os

import pytest

from certifier.files.file_loader import FileLoader
from certifier.files.models import SelectedFile
from tests.fakes import ManualSigner


@pytest.fixture()
def manual_signer() -> ManualSigner:
    """Signer with an active account that never reports finality on its own."""
    return ManualSigner()


@pytest.fixture()
def sample_bytes() -> bytes:
    """10 KB of random content."""
    return os.urandom(10 * 1024)


@pytest.fixture()
def sample_file(sample_bytes: bytes) -> SelectedFile:
    return FileLoader.from_bytes("report.pdf", sample_bytes, "application/pdf")
